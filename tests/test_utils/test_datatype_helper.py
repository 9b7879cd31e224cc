import numpy as np
import pandas as pd
import pytest

from imutrack.utils.consts import GF_ORI, SF_ACC, SF_COLS, SF_GYR
from imutrack.utils.datatype_helper import is_single_sensor_data, is_single_sensor_orientation_list
from imutrack.utils.exceptions import ValidationError


class TestIsSingleSensorData:
    @pytest.mark.parametrize("value", ({"acc_x": [1]}, list(range(6)), "acc_x", np.arange(6), pd.DataFrame()))
    def test_not_a_dataframe_with_sensor_columns(self, value):
        assert is_single_sensor_data(value) is False

    @pytest.mark.parametrize(
        "columns, check_acc, check_gyr",
        ((SF_COLS, True, True), (SF_ACC, True, False), (SF_GYR, False, True), ([], False, False)),
    )
    def test_valid_column_subsets(self, columns, check_acc, check_gyr):
        data = pd.DataFrame(columns=columns)
        assert is_single_sensor_data(data, check_acc=check_acc, check_gyr=check_gyr) is True

    def test_additional_columns_are_allowed(self):
        assert is_single_sensor_data(pd.DataFrame(columns=[*SF_COLS, "mag_x"])) is True

    def test_missing_columns_name_expected_and_present_columns(self):
        with pytest.raises(ValidationError) as e:
            is_single_sensor_data(pd.DataFrame(columns=SF_ACC), raise_exception=True)

        message = str(e.value)
        assert "does not seem to be SingleSensorData" in message
        assert f"columns: {SF_COLS}" in message
        assert f"following columns: {SF_ACC}" in message

    def test_multiindex_columns_are_rejected(self):
        data = pd.DataFrame(columns=pd.MultiIndex.from_product([["sensor_1"], SF_COLS]))

        assert is_single_sensor_data(data) is False
        with pytest.raises(ValidationError, match="MultiIndex with 2 levels"):
            is_single_sensor_data(data, raise_exception=True)

    def test_wrong_type_message(self):
        with pytest.raises(ValidationError, match="expected to be a pd.DataFrame"):
            is_single_sensor_data(np.zeros((3, 6)), raise_exception=True)

    def test_invalid_frame(self):
        with pytest.raises(ValueError, match="frame"):
            is_single_sensor_data(pd.DataFrame(columns=SF_COLS), frame="body")


class TestIsSingleSensorOrientationList:
    def test_sample_index(self):
        df = pd.DataFrame(np.zeros((3, 4)), columns=GF_ORI).rename_axis("sample")
        assert is_single_sensor_orientation_list(df)

    def test_sample_column(self):
        df = pd.DataFrame(np.zeros((3, 5)), columns=["sample", *GF_ORI])
        assert is_single_sensor_orientation_list(df)

    @pytest.mark.parametrize(
        "value",
        (
            [0, 0, 0, 1],
            pd.DataFrame(np.zeros((3, 4)), columns=GF_ORI),
            pd.DataFrame(np.zeros((3, 3)), columns=GF_ORI[:3]).rename_axis("sample"),
        ),
    )
    def test_invalid(self, value):
        assert not is_single_sensor_orientation_list(value)
