"""Common helper functions, types and constants used throughout imutrack."""
