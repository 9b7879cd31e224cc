"""Methods to calculate the orientation of an IMU from recorded data."""

from imutrack.orientation_methods._gravity_corrected_gyro_integration import GravityCorrectedGyroIntegration

__all__ = ["GravityCorrectedGyroIntegration"]
