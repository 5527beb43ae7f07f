"""Custom exception hierarchy for catpoint."""

from __future__ import annotations


class CatpointError(Exception):
    """Base exception for all catpoint errors."""


class CatpointConfigError(CatpointError):
    """Invalid or missing configuration."""


class CatpointArgumentError(CatpointError):
    """A caller passed an argument the engine cannot act on."""


class UnknownSensorError(CatpointArgumentError):
    """Sensor is not registered in the state store."""

    def __init__(self, message: str, *, sensor_name: str = "") -> None:
        self.sensor_name = sensor_name
        super().__init__(message)


class InvalidFrameError(CatpointArgumentError):
    """Camera frame is missing or malformed."""


class InconsistentStateError(CatpointError):
    """A collaborator returned a value outside its contract.

    Covers status values outside the defined enums, a classifier that
    answers with something other than a ``bool``, and persisted snapshots
    that fail validation.  These are programming errors and are never
    retried.
    """


class CatpointStorageError(CatpointError):
    """Snapshot file could not be read, parsed or written."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)
