"""Incremental orientation tracking from angular velocity and gravity observations."""
from typing import Optional

import numpy as np
from scipy.spatial.transform import Rotation

from imutrack.utils._types import _Vector
from imutrack.utils.consts import IDENTITY_QUAT, UP_VEC
from imutrack.utils.exceptions import PreconditionError
from imutrack.utils.fast_quaternion_math import (
    conjugate,
    find_shortest_rotation_quat,
    multiply,
    normalize,
    quat_from_rotvec,
    rotate_vector,
)


def _as_time(value: float, name: str) -> float:
    time = float(value)
    if not np.isfinite(time):
        raise ValueError(f"`{name}` must be a finite timestamp, but got {value}.")
    return time


def _as_vector(value: _Vector, name: str) -> np.ndarray:
    vec = np.array(value, dtype=float).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"`{name}` must be a 3D vector, but it has shape {np.shape(value)}.")
    if not np.all(np.isfinite(vec)):
        raise ValueError(f"`{name}` must only contain finite values, but got {vec}.")
    return vec


class OrientationTracker:
    """Keep track of the orientation of an IMU using angular velocity and linear acceleration observations.

    The angular velocity is integrated incrementally (zero-order hold between observations).
    Because the averaged linear acceleration of a slowly moving body is a direct measurement of gravity, the
    acceleration observations are low-pass filtered into a gravity estimate that is used to correct roll and pitch.
    Roll and pitch therefore do not drift, but yaw (the rotation around the gravity axis) does.

    All quantities are expressed relative to the fixed reference frame, which is the body frame at the time the
    tracker is created.
    This means the tracker assumes that the body is upright at this moment.

    Parameters
    ----------
    gravity_time_constant
        Decay time constant of the gravity low-pass filter in seconds.
        Must be larger than 0.
        Larger values make the gravity estimate (and hence the roll/pitch correction) less sensitive to short term
        accelerations, but slower to remove drift.
    time
        The initial timestamp in seconds.

    Examples
    --------
    >>> tracker = OrientationTracker(gravity_time_constant=10.0, time=0.0)
    >>> tracker.add_angular_velocity_observation([0, 0, np.pi / 2])
    >>> tracker.advance(1.0)
    >>> tracker.orientation.as_rotvec().round(3)
    array([0.   , 0.   , 1.571])

    """

    def __init__(self, gravity_time_constant: float, time: float):
        gravity_time_constant = float(gravity_time_constant)
        if not (np.isfinite(gravity_time_constant) and gravity_time_constant > 0):
            raise ValueError(f"`gravity_time_constant` must be a positive number, but got {gravity_time_constant}.")
        self._gravity_time_constant = gravity_time_constant
        self._time = _as_time(time, "time")
        self._last_acceleration_time: Optional[float] = None
        self._orientation = IDENTITY_QUAT.copy()
        self._gravity_vector = UP_VEC.copy()
        self._angular_velocity = np.zeros(3)

    @property
    def gravity_time_constant(self) -> float:
        """Decay time constant of the gravity filter in seconds."""
        return self._gravity_time_constant

    @property
    def time(self) -> float:
        """Timestamp of the last state update."""
        return self._time

    @property
    def last_acceleration_time(self) -> Optional[float]:
        """Timestamp of the last acceleration observation (None before the first one)."""
        return self._last_acceleration_time

    @property
    def orientation(self) -> Rotation:
        """Current rotation from the body frame into the fixed reference frame."""
        return Rotation.from_quat(self._orientation)

    @property
    def orientation_quat(self) -> np.ndarray:
        """Current orientation as (x, y, z, w) quaternion."""
        return self._orientation.copy()

    @property
    def gravity_vector(self) -> np.ndarray:
        """Current gravity estimate in body frame coordinates."""
        return self._gravity_vector.copy()

    @property
    def angular_velocity(self) -> np.ndarray:
        """Angular velocity in rad/s that is used for the next integration step."""
        return self._angular_velocity.copy()

    def advance(self, time: float) -> None:
        """Advance to the given time and integrate the orientation.

        The last observed angular velocity is assumed to be constant over the entire interval.

        Parameters
        ----------
        time
            The new timestamp in seconds.
            It must not be earlier than the current time of the tracker.

        Raises
        ------
        PreconditionError
            If `time` is earlier than the current time.
        ValueError
            If `time` is not finite.

        """
        time = _as_time(time, "time")
        if time < self._time:
            raise PreconditionError(
                f"The tracker can not be advanced backwards in time (current time: {self._time}, new time: {time})."
            )
        if time == self._time:
            return
        delta_t = time - self._time
        rotation = quat_from_rotvec(self._angular_velocity * delta_t)
        self._orientation = normalize(multiply(self._orientation, rotation))
        # Gravity is fixed in the reference frame, so its body frame coordinates rotate inversely
        self._gravity_vector = rotate_vector(conjugate(rotation), self._gravity_vector)
        self._time = time

    def add_angular_velocity_observation(self, angular_velocity: _Vector) -> None:
        """Update the angular velocity (body frame, rad/s) used by the following calls to `advance`."""
        self._angular_velocity = _as_vector(angular_velocity, "angular_velocity")

    def add_linear_acceleration_observation(self, acceleration: _Vector) -> None:
        """Update the gravity estimate with a new acceleration reading and correct roll and pitch.

        The reading is assumed to be taken at the current time of the tracker (i.e. call `advance` first).
        The first reading is directly used as gravity estimate.
        All following readings are blended into the estimate with an exponential weight based on the time since the
        previous reading.

        Parameters
        ----------
        acceleration
            The linear acceleration in the body frame.
            Only its direction is relevant for the orientation correction.

        """
        acceleration = _as_vector(acceleration, "acceleration")
        if self._last_acceleration_time is None:
            alpha = 1.0
        else:
            delta_t = self._time - self._last_acceleration_time
            alpha = 1.0 - np.exp(-delta_t / self._gravity_time_constant)
        self._last_acceleration_time = self._time
        self._gravity_vector = (1.0 - alpha) * self._gravity_vector + alpha * acceleration

        # Shortest rotation from the gravity estimate to the expected up direction (both in body frame).
        # Its axis is orthogonal to gravity, so the heading is not modified.
        expected_up = rotate_vector(conjugate(self._orientation), UP_VEC.copy())
        rotation = find_shortest_rotation_quat(self._gravity_vector, expected_up)
        self._orientation = normalize(multiply(self._orientation, rotation))
