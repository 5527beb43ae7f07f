"""Sensor model."""

from __future__ import annotations

import enum

from pydantic import Field

from catpoint.models._base import CatpointBaseModel


class SensorType(enum.StrEnum):
    """Kind of input device a sensor represents."""

    DOOR = "DOOR"
    WINDOW = "WINDOW"
    MOTION = "MOTION"


class Sensor(CatpointBaseModel):
    """A binary input device of a fixed type.

    Identity is the ``(name, sensor_type)`` pair: two instances with the
    same pair compare equal and hash alike whatever their ``active``
    flag, so a sensor keeps its place in a set while it toggles.
    ``name`` and ``sensor_type`` cannot be reassigned after creation.
    """

    name: str = Field(..., min_length=1, frozen=True)
    sensor_type: SensorType = Field(..., frozen=True)
    active: bool = False

    @property
    def identity(self) -> tuple[str, SensorType]:
        return (self.name, self.sensor_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)
