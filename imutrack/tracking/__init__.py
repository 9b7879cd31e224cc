"""Stateful estimators that track the orientation of a single IMU sample by sample."""

from imutrack.tracking._orientation_tracker import OrientationTracker

__all__ = ["OrientationTracker"]
