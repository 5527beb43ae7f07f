"""Serializable snapshot of the security state."""

from __future__ import annotations

from pydantic import Field, model_validator

from catpoint.models._base import CatpointBaseModel
from catpoint.models.sensor import Sensor
from catpoint.models.status import AlarmStatus, ArmingStatus


class SecuritySnapshot(CatpointBaseModel):
    """Latest arming status, alarm status and sensor set."""

    alarm_status: AlarmStatus = AlarmStatus.NO_ALARM
    arming_status: ArmingStatus = ArmingStatus.DISARMED
    sensors: list[Sensor] = Field(default_factory=list)

    @model_validator(mode="after")
    def _reject_duplicate_sensors(self) -> SecuritySnapshot:
        seen: set[Sensor] = set()
        for sensor in self.sensors:
            if sensor in seen:
                raise ValueError(f"duplicate sensor {sensor.name!r} ({sensor.sensor_type})")
            seen.add(sensor)
        return self
