"""Type aliases and validation functions for the sensor data and orientation formats used by imutrack."""
from typing import List

import pandas as pd
from typing_extensions import Literal

from imutrack.utils.consts import GF_INDEX, GF_ORI, SF_ACC, SF_GYR
from imutrack.utils.exceptions import ValidationError

SingleSensorData = pd.DataFrame

SingleSensorOrientationList = pd.DataFrame

_ALLOWED_FRAMES = ["sensor"]
_ALLOWED_FRAMES_TYPE = Literal["sensor"]  # pylint: disable=invalid-name


def _expected_sensor_columns(frame: _ALLOWED_FRAMES_TYPE, check_acc: bool, check_gyr: bool) -> List[str]:
    if frame not in _ALLOWED_FRAMES:
        raise ValueError(f"`frame` must be one of {_ALLOWED_FRAMES}")
    return [*(SF_ACC if check_acc else []), *(SF_GYR if check_gyr else [])]


def _validate_sensor_frame(data: SingleSensorData, expected_cols: List[str]) -> None:
    if not isinstance(data, pd.DataFrame):
        raise ValidationError(f"The data is expected to be a pd.DataFrame, but it is a {type(data)}.")
    if isinstance(data.columns, pd.MultiIndex):
        raise ValidationError(
            "The dataframe is expected to have a single level of columns. "
            f"But it has a MultiIndex with {data.columns.nlevels} levels."
        )
    missing = [c for c in expected_cols if c not in data.columns]
    if missing:
        raise ValidationError(
            f"The dataframe is expected to have the columns: {expected_cols}. "
            f"Instead it has the following columns: {list(data.columns)}"
        )


def is_single_sensor_data(
    data: SingleSensorData,
    check_acc: bool = True,
    check_gyr: bool = True,
    frame: _ALLOWED_FRAMES_TYPE = "sensor",
    raise_exception: bool = False,
) -> bool:
    """Check if an object is valid single sensor data.

    Valid single sensor data is a :class:`pandas.DataFrame` with a single level of columns that contains the
    columns listed in :obj:`SF_COLS <imutrack.utils.consts.SF_COLS>` (or the subset selected by `check_acc` and
    `check_gyr`).

    Parameters
    ----------
    data
        Object that should be checked
    check_acc
        If the existence of the acc columns should be checked
    check_gyr
        If the existence of the gyr columns should be checked
    frame
        The frame the data is expected to be in.
        Only data in the sensor frame is supported.
    raise_exception
        If True a :class:`~imutrack.utils.exceptions.ValidationError` is raised if the object does not pass the
        validation.
        If False, the function simply returns True or False.

    """
    expected_cols = _expected_sensor_columns(frame, check_acc=check_acc, check_gyr=check_gyr)
    try:
        _validate_sensor_frame(data, expected_cols)
    except ValidationError as e:
        if raise_exception is True:
            raise ValidationError(
                "The passed object does not seem to be SingleSensorData. "
                f"The validation failed with the following error:\n\n{e}"
            ) from e
        return False
    return True


def is_single_sensor_orientation_list(orientation_list: SingleSensorOrientationList) -> bool:
    """Check if an input is a single-sensor orientation list.

    This requires a pd.DataFrame with the quaternion columns `["q_x", "q_y", "q_z", "q_w"]` and an index (or a
    regular column) named `sample`.
    """
    if not isinstance(orientation_list, pd.DataFrame):
        return False
    if list(orientation_list.index.names) != GF_INDEX and not all(c in orientation_list.columns for c in GF_INDEX):
        return False
    return all(c in orientation_list.columns for c in GF_ORI)
