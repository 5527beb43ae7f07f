"""catpoint - Home security alarm state machine."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("catpoint")
except PackageNotFoundError:
    __version__ = "0+local"
from catpoint.bootstrap import create_engine
from catpoint.config import CatpointConfig
from catpoint.engine import AlarmDecisionEngine, StatusListener
from catpoint.exceptions import (
    CatpointArgumentError,
    CatpointConfigError,
    CatpointError,
    CatpointStorageError,
    InconsistentStateError,
    InvalidFrameError,
    UnknownSensorError,
)
from catpoint.image import DEFAULT_CONFIDENCE_THRESHOLD, FakeImageClassifier, ImageClassifier
from catpoint.models import AlarmStatus, ArmingStatus, ImageFrame, Sensor, SensorType
from catpoint.state import InMemoryStateStore, JsonFileStateStore, SecuritySnapshot, StateStore

__all__ = [
    "__version__",
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "AlarmDecisionEngine",
    "AlarmStatus",
    "ArmingStatus",
    "CatpointArgumentError",
    "CatpointConfig",
    "CatpointConfigError",
    "CatpointError",
    "CatpointStorageError",
    "FakeImageClassifier",
    "ImageClassifier",
    "ImageFrame",
    "InMemoryStateStore",
    "InconsistentStateError",
    "InvalidFrameError",
    "JsonFileStateStore",
    "SecuritySnapshot",
    "Sensor",
    "SensorType",
    "StateStore",
    "StatusListener",
    "UnknownSensorError",
    "create_engine",
]
