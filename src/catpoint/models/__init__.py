"""Data models for catpoint."""

from catpoint.models._base import CatpointBaseModel
from catpoint.models.frame import ImageFrame
from catpoint.models.sensor import Sensor, SensorType
from catpoint.models.status import AlarmStatus, ArmingStatus

__all__ = [
    "AlarmStatus",
    "ArmingStatus",
    "CatpointBaseModel",
    "ImageFrame",
    "Sensor",
    "SensorType",
]
