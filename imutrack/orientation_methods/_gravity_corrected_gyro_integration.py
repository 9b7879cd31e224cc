"""Offline replay of recorded IMU data through the orientation tracker."""
import warnings
from typing import Optional

import numpy as np
from joblib import Memory
from scipy.spatial.transform import Rotation
from typing_extensions import Self

from imutrack.base import BaseOrientationMethod
from imutrack.tracking import OrientationTracker
from imutrack.utils.consts import DEFAULT_GRAVITY_TIME_CONSTANT_S, SF_ACC, SF_GYR
from imutrack.utils.datatype_helper import SingleSensorData, is_single_sensor_data


class GravityCorrectedGyroIntegration(BaseOrientationMethod):
    """Integrate the gyroscope and keep roll and pitch aligned with the measured gravity direction.

    Each sample is fed into an :class:`~imutrack.tracking.OrientationTracker`: first the gyroscope reading is
    integrated over one sample period, then the accelerometer reading of the same sample updates the gravity estimate
    and corrects the inclination.
    Heading can not be observed from acceleration, so it drifts like in a plain gyroscope integration.

    The sensor frame of the first sample is used as the fixed frame.
    The sensor is hence expected to be upright (z-axis against gravity) when the recording starts.

    Parameters
    ----------
    gravity_time_constant
        Time constant in seconds of the exponential low-pass filter applied to the acceleration to estimate gravity.
        Small values correct the inclination quickly, large values make the correction robust against accelerations
        caused by movement.
    memory
        Optional `joblib.Memory` instance to cache the replay of the data.

    Attributes
    ----------
    orientation_
        The orientations as *SingleSensorOrientationList*.
        The first entry is the initial (identity) orientation, followed by one orientation per sample.
    orientation_object_
        The same orientations as a scipy Rotation object with `len(data) + 1` rotations

    Other Parameters
    ----------------
    data
        The data passed to the `estimate` method
    sampling_rate_hz
        The sampling rate of the data

    Examples
    --------
    The data must contain the columns listed in :obj:`~imutrack.utils.consts.SF_COLS`.

    >>> import pandas as pd
    >>> from imutrack.utils.consts import SF_COLS
    >>> recording = pd.DataFrame(..., columns=SF_COLS)
    >>> gcgi = GravityCorrectedGyroIntegration(gravity_time_constant=5.0)
    >>> gcgi = gcgi.estimate(recording, sampling_rate_hz=204.8)
    >>> gcgi.orientation_
    <pd.Dataframe with one quaternion per sample plus the initial orientation>
    >>> gcgi.orientation_object_[-1]
    <scipy.Rotation object of the final orientation>

    See Also
    --------
    imutrack.tracking.OrientationTracker: The underlying sample-by-sample estimator

    """

    gravity_time_constant: float
    memory: Optional[Memory]

    orientation_object_: Rotation

    data: SingleSensorData
    sampling_rate_hz: float

    def __init__(
        self, gravity_time_constant: float = DEFAULT_GRAVITY_TIME_CONSTANT_S, memory: Optional[Memory] = None
    ):
        self.gravity_time_constant = gravity_time_constant
        self.memory = memory

    def estimate(self, data: SingleSensorData, sampling_rate_hz: float) -> Self:
        """Replay the data through an orientation tracker.

        Parameters
        ----------
        data
            Sensor data with gyroscope (deg/s) and accelerometer (m/s^2) columns in the sensor frame.
        sampling_rate_hz
            The sampling rate of the data in Hz

        Returns
        -------
        self
            The instance with `orientation_object_` populated

        """
        self.data = data
        self.sampling_rate_hz = sampling_rate_hz

        is_single_sensor_data(data, frame="sensor", raise_exception=True)
        gyr = np.deg2rad(data[SF_GYR].to_numpy())
        acc = data[SF_ACC].to_numpy()
        if len(acc) > 0 and not np.any(acc):
            warnings.warn(
                "The provided acceleration data is all zero. "
                "Without a gravity signal the result is identical to a plain gyroscope integration."
            )

        memory = self.memory if self.memory is not None else Memory(None)
        replay = memory.cache(_replay_through_tracker)
        quats = replay(
            gyr=gyr, acc=acc, gravity_time_constant=self.gravity_time_constant, sampling_rate_hz=sampling_rate_hz
        )
        self.orientation_object_ = Rotation.from_quat(quats)
        return self


def _replay_through_tracker(
    gyr: np.ndarray, acc: np.ndarray, gravity_time_constant: float, sampling_rate_hz: float
) -> np.ndarray:
    tracker = OrientationTracker(gravity_time_constant=gravity_time_constant, time=0.0)
    quats = [tracker.orientation_quat]
    for i, (gyr_sample, acc_sample) in enumerate(zip(gyr, acc), start=1):
        tracker.add_angular_velocity_observation(gyr_sample)
        tracker.advance(i / sampling_rate_hz)
        tracker.add_linear_acceleration_observation(acc_sample)
        quats.append(tracker.orientation_quat)
    return np.vstack(quats)
