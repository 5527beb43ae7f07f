"""Alarm decision engine.

Translates sensor and camera events into alarm status transitions, and
arming changes into sensor resets and alarm overrides.  The engine
holds no security state of its own: every call reads the injected
:class:`~catpoint.state.store.StateStore`, decides, and writes back.

Alarm status transitions:

* sensor activated while armed: ``NO_ALARM -> PENDING_ALARM -> ALARM``.
  Re-activating an already active sensor still escalates a pending
  alarm.
* sensor deactivated: ``PENDING_ALARM -> NO_ALARM`` only if the sensor
  was active before.  A sensor never clears ``ALARM``.
* cat seen while ``ARMED_HOME``: any status to ``ALARM``.
* no cat and no active sensor: any status to ``NO_ALARM``.
* disarm: any status to ``NO_ALARM``.

Each operation runs inside one store transaction: a failure part way
through leaves the store as it was, and listeners hear about an
operation only after its writes are committed.  Calls are synchronous
and not thread-safe; callers serialize them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from catpoint.exceptions import (
    CatpointArgumentError,
    InconsistentStateError,
    InvalidFrameError,
    UnknownSensorError,
)
from catpoint.image import DEFAULT_CONFIDENCE_THRESHOLD, ImageClassifier
from catpoint.models.frame import ImageFrame
from catpoint.models.sensor import Sensor
from catpoint.models.status import AlarmStatus, ArmingStatus
from catpoint.state.store import StateStore

_logger = logging.getLogger(__name__)


class StatusListener(Protocol):
    """Observer of engine decisions, typically a UI panel."""

    def notify(self, status: AlarmStatus) -> None: ...

    def cat_detected(self, detected: bool) -> None: ...

    def sensor_status_changed(self) -> None: ...


class AlarmDecisionEngine:
    """Rule evaluator over a state store and an image classifier.

    Parameters
    ----------
    store : StateStore
        Owner of the arming status, alarm status and sensor set.
    classifier : ImageClassifier
        Oracle consulted by :meth:`process_image`.
    confidence_threshold : float
        Passed through to the classifier, 0-100.
    """

    def __init__(
        self,
        store: StateStore,
        classifier: ImageClassifier,
        *,
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    ) -> None:
        if not 0.0 <= confidence_threshold <= 100.0:
            raise CatpointArgumentError(f"confidence_threshold must be between 0 and 100, got {confidence_threshold}")
        self._store = store
        self._classifier = classifier
        self._confidence_threshold = float(confidence_threshold)
        self._listeners: list[StatusListener] = []
        self._outbox: list[tuple[str, tuple[Any, ...]]] = []

    @property
    def confidence_threshold(self) -> float:
        return self._confidence_threshold

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_status_listener(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        """Unregister *listener*; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, method: str, *args: Any) -> None:
        self._outbox.append((method, args))

    @contextmanager
    def _operation(self) -> Iterator[None]:
        try:
            with self._store.transaction():
                yield
            pending = list(self._outbox)
        finally:
            self._outbox.clear()
        for method, args in pending:
            for listener in list(self._listeners):
                getattr(listener, method)(*args)

    # ------------------------------------------------------------------
    # Store access
    # ------------------------------------------------------------------

    def _read_alarm_status(self) -> AlarmStatus:
        status = self._store.get_alarm_status()
        if not isinstance(status, AlarmStatus):
            raise InconsistentStateError(f"store returned unknown alarm status {status!r}")
        return status

    def _read_arming_status(self) -> ArmingStatus:
        status = self._store.get_arming_status()
        if not isinstance(status, ArmingStatus):
            raise InconsistentStateError(f"store returned unknown arming status {status!r}")
        return status

    def _set_alarm_status(self, status: AlarmStatus) -> None:
        self._store.set_alarm_status(status)
        _logger.debug("Alarm status set to %s", status)
        self._emit("notify", status)

    def _registered(self, sensor: Sensor) -> Sensor:
        if not isinstance(sensor, Sensor):
            raise CatpointArgumentError(f"expected a Sensor, got {type(sensor).__name__}")
        for candidate in self._store.get_sensors():
            if candidate == sensor:
                return candidate
        raise UnknownSensorError(
            f"sensor {sensor.name!r} ({sensor.sensor_type}) is not registered",
            sensor_name=sensor.name,
        )

    def get_alarm_status(self) -> AlarmStatus:
        return self._read_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self._read_arming_status()

    def get_sensors(self) -> set[Sensor]:
        """Return the store's current sensor set."""
        return self._store.get_sensors()

    def add_sensor(self, sensor: Sensor) -> None:
        with self._operation():
            self._store.add_sensor(sensor)
            self._emit("sensor_status_changed")

    def remove_sensor(self, sensor: Sensor) -> None:
        with self._operation():
            self._store.remove_sensor(sensor)
            self._emit("sensor_status_changed")

    # ------------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------------

    def set_arming_status(self, status: ArmingStatus) -> None:
        """Change the arming status.

        Disarming always clears the alarm.  Arming from a different
        status resets every sensor to inactive; it never raises the
        alarm by itself.
        """
        if not isinstance(status, ArmingStatus):
            raise CatpointArgumentError(f"expected an ArmingStatus, got {status!r}")

        with self._operation():
            current = self._read_arming_status()
            if not status.is_armed:
                self._set_alarm_status(AlarmStatus.NO_ALARM)
            elif status is not current:
                reset = False
                for sensor in self._store.get_sensors():
                    if sensor.active:
                        self._store.update_sensor(sensor.model_copy(update={"active": False}))
                        reset = True
                if reset:
                    _logger.debug("Sensors reset on arming to %s", status)
                    self._emit("sensor_status_changed")

            self._store.set_arming_status(status)
        _logger.debug("Arming status changed %s -> %s", current, status)

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Record a sensor state change and update the alarm status.

        Both statuses and the sensor's previous flag are read before the
        sensor is written, since the deactivation rule depends on the
        previous flag.
        """
        if not isinstance(active, bool):
            raise CatpointArgumentError(f"active must be a bool, got {active!r}")

        with self._operation():
            stored = self._registered(sensor)
            alarm_status = self._read_alarm_status()
            arming_status = self._read_arming_status()

            if active:
                self._handle_sensor_activated(alarm_status, arming_status)
            elif stored.active:
                self._handle_sensor_deactivated(alarm_status)

            self._store.update_sensor(stored.model_copy(update={"active": active}))
            self._emit("sensor_status_changed")
        _logger.debug("Sensor %s (%s) active %s -> %s", stored.name, stored.sensor_type, stored.active, active)

    def _handle_sensor_activated(self, alarm_status: AlarmStatus, arming_status: ArmingStatus) -> None:
        if not arming_status.is_armed:
            return
        if alarm_status is AlarmStatus.NO_ALARM:
            self._set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif alarm_status is AlarmStatus.PENDING_ALARM:
            self._set_alarm_status(AlarmStatus.ALARM)
        elif alarm_status is AlarmStatus.ALARM:
            pass
        else:
            raise InconsistentStateError(f"unhandled alarm status {alarm_status!r}")

    def _handle_sensor_deactivated(self, alarm_status: AlarmStatus) -> None:
        if alarm_status is AlarmStatus.PENDING_ALARM:
            self._set_alarm_status(AlarmStatus.NO_ALARM)

    def process_image(self, frame: ImageFrame) -> None:
        """Run cat detection on *frame* and update the alarm status."""
        if not isinstance(frame, ImageFrame):
            raise InvalidFrameError(f"expected an ImageFrame, got {type(frame).__name__}")
        detected = self._classifier.contains_cat(frame, self._confidence_threshold)
        if not isinstance(detected, bool):
            raise InconsistentStateError(f"classifier returned {detected!r} instead of a bool")

        with self._operation():
            arming_status = self._read_arming_status()
            if detected:
                if arming_status is ArmingStatus.ARMED_HOME:
                    self._set_alarm_status(AlarmStatus.ALARM)
            elif not any(sensor.active for sensor in self._store.get_sensors()):
                self._set_alarm_status(AlarmStatus.NO_ALARM)
            self._emit("cat_detected", detected)
        _logger.debug("Processed %dx%d frame cat=%s", frame.width, frame.height, detected)
