"""Tests for the sensor, status and frame models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from catpoint.models import AlarmStatus, ArmingStatus, ImageFrame, Sensor, SensorType


class TestSensor:
    def test_identity_ignores_active_flag(self) -> None:
        inactive = Sensor(name="front-door", sensor_type=SensorType.DOOR)
        active = Sensor(name="front-door", sensor_type=SensorType.DOOR, active=True)

        assert inactive == active
        assert hash(inactive) == hash(active)
        assert len({inactive, active}) == 1

    def test_type_is_part_of_identity(self) -> None:
        door = Sensor(name="front", sensor_type=SensorType.DOOR)
        window = Sensor(name="front", sensor_type=SensorType.WINDOW)

        assert door != window

    def test_hash_stable_while_toggling(self) -> None:
        sensor = Sensor(name="hallway", sensor_type=SensorType.MOTION)
        sensors = {sensor}

        sensor.active = True

        assert sensor in sensors

    def test_name_and_type_are_immutable(self) -> None:
        sensor = Sensor(name="hallway", sensor_type=SensorType.MOTION)

        with pytest.raises(ValidationError):
            sensor.sensor_type = SensorType.DOOR
        with pytest.raises(ValidationError):
            sensor.name = "attic"

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Sensor(name="   ", sensor_type=SensorType.DOOR)

    def test_name_is_stripped(self) -> None:
        assert Sensor(name=" porch ", sensor_type=SensorType.DOOR).name == "porch"

    def test_not_equal_to_other_types(self) -> None:
        assert Sensor(name="porch", sensor_type=SensorType.DOOR) != ("porch", SensorType.DOOR)


class TestStatus:
    def test_every_status_has_a_description(self) -> None:
        for status in (*ArmingStatus, *AlarmStatus):
            assert status.description

    def test_descriptions(self) -> None:
        assert ArmingStatus.ARMED_HOME.description == "Armed - At Home"
        assert AlarmStatus.ALARM.description == "Awooga!"

    def test_is_armed(self) -> None:
        assert not ArmingStatus.DISARMED.is_armed
        assert ArmingStatus.ARMED_HOME.is_armed
        assert ArmingStatus.ARMED_AWAY.is_armed

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError):
            AlarmStatus("SIRENS")


class TestImageFrame:
    @pytest.mark.parametrize(("width", "height"), [(0, 10), (10, 0), (-1, 5)])
    def test_dimensions_must_be_positive(self, width: int, height: int) -> None:
        with pytest.raises(ValidationError):
            ImageFrame(width=width, height=height)

    def test_frame_is_frozen(self) -> None:
        frame = ImageFrame(width=2, height=2, data=b"\x00\x01\x02\x03")

        with pytest.raises(ValidationError):
            frame.width = 4
