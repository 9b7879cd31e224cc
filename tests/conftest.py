import random

import numpy as np
import pandas as pd
import pytest
from tpcp import BaseTpcpObject

from imutrack.utils.consts import GRAV_VEC, SF_ACC, SF_COLS, SF_GYR


@pytest.fixture(autouse=True)
def reset_random_seed():
    np.random.seed(10)
    random.seed(10)


@pytest.fixture()
def resting_imu_data() -> pd.DataFrame:
    """One second of a resting, upright sensor with small sensor noise sampled at 100 Hz."""
    n_samples = 100
    data = pd.DataFrame(np.zeros((n_samples, len(SF_COLS))), columns=SF_COLS)
    data[SF_ACC] = GRAV_VEC + np.random.normal(scale=0.05, size=(n_samples, 3))
    data[SF_GYR] = np.random.normal(scale=0.5, size=(n_samples, 3))
    return data


def compare_algo_objects(a: BaseTpcpObject, b: BaseTpcpObject):
    """Assert that two algorithm instances have the same class and equal parameters (nested ones included)."""
    assert type(a).__name__ == type(b).__name__
    a_params = a.get_params(deep=False)
    b_params = b.get_params(deep=False)
    assert a_params.keys() == b_params.keys()
    for name, value in a_params.items():
        if isinstance(value, BaseTpcpObject):
            compare_algo_objects(value, b_params[name])
        else:
            assert value == b_params[name], name
