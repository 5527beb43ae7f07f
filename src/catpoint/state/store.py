"""State store interface and in-memory implementation.

The store is the single source of truth for the arming status, the
alarm status and the sensor set.  The decision engine reads it fresh on
every call and writes its decisions back; it never keeps copies.
Sensors are copied on the way in and on the way out, so no caller can
change stored state by mutating an object it holds.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Protocol

from catpoint.exceptions import UnknownSensorError
from catpoint.models.sensor import Sensor, SensorType
from catpoint.models.status import AlarmStatus, ArmingStatus
from catpoint.state.snapshot import SecuritySnapshot

_logger = logging.getLogger(__name__)


class StateStore(Protocol):
    """Structural interface consumed by the decision engine.

    Any backing (memory, file, database) that satisfies these calls is
    acceptable; test doubles need no inheritance.
    """

    def get_alarm_status(self) -> AlarmStatus: ...

    def set_alarm_status(self, status: AlarmStatus) -> None: ...

    def get_arming_status(self) -> ArmingStatus: ...

    def set_arming_status(self, status: ArmingStatus) -> None: ...

    def get_sensors(self) -> set[Sensor]: ...

    def add_sensor(self, sensor: Sensor) -> None: ...

    def remove_sensor(self, sensor: Sensor) -> None: ...

    def update_sensor(self, sensor: Sensor) -> None: ...

    def transaction(self) -> AbstractContextManager[None]: ...


class InMemoryStateStore:
    """Dict-backed store keyed by sensor identity."""

    def __init__(self, snapshot: SecuritySnapshot | None = None) -> None:
        self._depth = 0
        self._restore(snapshot if snapshot is not None else SecuritySnapshot())

    def _restore(self, snapshot: SecuritySnapshot) -> None:
        self._alarm_status = snapshot.alarm_status
        self._arming_status = snapshot.arming_status
        self._sensors: dict[tuple[str, SensorType], Sensor] = {
            sensor.identity: sensor.model_copy() for sensor in snapshot.sensors
        }

    def _commit(self) -> None:
        """Hook run when the outermost transaction completes."""

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Group mutations into one unit.

        If the block raises, or committing it fails, the state from
        before the outermost block is restored.  Nested blocks join the
        enclosing one.
        """
        if self._depth:
            yield
            return
        previous = self.snapshot()
        self._depth += 1
        try:
            yield
            self._commit()
        except Exception:
            self._restore(previous)
            _logger.debug("Transaction rolled back")
            raise
        finally:
            self._depth -= 1

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, status: AlarmStatus) -> None:
        with self.transaction():
            self._alarm_status = status

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, status: ArmingStatus) -> None:
        with self.transaction():
            self._arming_status = status

    def get_sensors(self) -> set[Sensor]:
        """Return copies of the stored sensors in a new set."""
        return {sensor.model_copy() for sensor in self._sensors.values()}

    def add_sensor(self, sensor: Sensor) -> None:
        """Register a copy of *sensor*, replacing any sensor with the same identity."""
        with self.transaction():
            self._sensors[sensor.identity] = sensor.model_copy()

    def remove_sensor(self, sensor: Sensor) -> None:
        """Forget *sensor*.  Removing an unknown sensor is a no-op."""
        with self.transaction():
            self._sensors.pop(sensor.identity, None)

    def update_sensor(self, sensor: Sensor) -> None:
        """Replace the stored copy of an already registered sensor."""
        if sensor.identity not in self._sensors:
            raise UnknownSensorError(
                f"sensor {sensor.name!r} ({sensor.sensor_type}) is not registered",
                sensor_name=sensor.name,
            )
        with self.transaction():
            self._sensors[sensor.identity] = sensor.model_copy()
        _logger.debug("Sensor updated name=%s active=%s", sensor.name, sensor.active)

    def snapshot(self) -> SecuritySnapshot:
        """Return the current state as a detached, serializable snapshot."""
        sensors = sorted(self._sensors.values(), key=lambda s: (s.name, s.sensor_type))
        return SecuritySnapshot(
            alarm_status=self._alarm_status,
            arming_status=self._arming_status,
            sensors=[sensor.model_copy() for sensor in sensors],
        )
