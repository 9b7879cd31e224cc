"""Base classes for the orientation algorithms and the json export of their parameters."""

import json
import warnings
from typing import Any, Dict, Iterator, Type, TypeVar

import numpy as np
import pandas as pd
import tpcp
from joblib import Memory
from scipy.spatial.transform import Rotation

from imutrack.utils.consts import GF_INDEX, GF_ORI
from imutrack.utils.datatype_helper import SingleSensorData, SingleSensorOrientationList

BaseType = TypeVar("BaseType", bound="_BaseSerializable")  # noqa: invalid-name

_CLASS_KEY = "_imutrack_obj"


def _encode_param(value: Any) -> Any:
    """Convert parameter values json can not handle natively."""
    if isinstance(value, _BaseSerializable):
        return value._to_json_dict()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Memory):
        warnings.warn(
            "Exporting `joblib.Memory` objects to json is not supported. "
            "The value is exported as `None`. "
            "Reactivate caching after loading with `instance.set_params(memory=Memory(...))`."
        )
        return None
    raise TypeError(f"Parameter values of type {type(value).__name__} can not be exported to json.")


def _decode_param(json_obj: Dict[str, Any]) -> Any:
    if _CLASS_KEY not in json_obj:
        return json_obj
    return _BaseSerializable._find_subclass(json_obj[_CLASS_KEY])._from_json_dict(json_obj)


class _BaseSerializable(tpcp.BaseTpcpObject):
    @classmethod
    def _iter_subclasses(cls) -> Iterator[Type["_BaseSerializable"]]:
        for subclass in cls.__subclasses__():
            yield subclass
            yield from subclass._iter_subclasses()

    @classmethod
    def _find_subclass(cls, name: str) -> Type["_BaseSerializable"]:
        for subclass in _BaseSerializable._iter_subclasses():
            if subclass.__name__ == name:
                return subclass
        raise ValueError(f"No algorithm class with name {name} exists")

    @classmethod
    def _from_json_dict(cls: Type[BaseType], json_dict: Dict[str, Any]) -> BaseType:
        valid_names = tpcp.get_param_names(cls)
        return cls(**{k: v for k, v in json_dict["params"].items() if k in valid_names})

    def _to_json_dict(self) -> Dict[str, Any]:
        return {_CLASS_KEY: self.__class__.__name__, "params": self.get_params(deep=False)}

    def to_json(self) -> str:
        """Export the parameters of the instance as json string.

        Results of an action method are not part of the export.
        Use `from_json` to create a new instance from the string.
        """
        return json.dumps(self._to_json_dict(), indent=4, default=_encode_param)

    @classmethod
    def from_json(cls: Type[BaseType], json_str: str) -> BaseType:
        """Create an instance from a string produced by `to_json`.

        The class of the returned instance is the one stored in the json string and not necessarily `cls`.

        Parameters
        ----------
        json_str
            json formatted string

        """
        return json.loads(json_str, object_hook=_decode_param)


class BaseAlgorithm(tpcp.Algorithm, _BaseSerializable):
    """Base class for all algorithms.

    Subclasses set `_action_methods` to the name of their action method and provide a stub of this method.
    """


class BaseOrientationMethod(BaseAlgorithm):
    """Base class for methods that estimate a series of orientations from sensor data."""

    _action_methods = ("estimate",)
    orientation_object_: Rotation

    @property
    def orientation_(self) -> SingleSensorOrientationList:
        """Orientations as pd.DataFrame indexed by sample."""
        quats = self.orientation_object_.as_quat()
        return pd.DataFrame(quats, columns=GF_ORI, index=pd.RangeIndex(len(quats), name=GF_INDEX[0]))

    def estimate(self: BaseType, data: SingleSensorData, sampling_rate_hz: float) -> BaseType:
        """Estimate the orientation of the sensor based on the input data."""
        raise NotImplementedError("Needs to be implemented by child class.")
