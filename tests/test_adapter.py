import io
import random

import pytest

from patternbook.adapter import (
    CelsiusSensor,
    Client,
    FahrenheitSensor,
    FahrenheitSensorAdapter,
    Sensor,
    main,
)


class FixedFahrenheit(FahrenheitSensor):
    def __init__(self, value):
        super().__init__()
        self.value = value

    def get_fahrenheit_temperature(self):
        return self.value


def test_sensor_is_abstract():
    with pytest.raises(TypeError):
        Sensor()


def test_celsius_readings_in_range():
    sensor = CelsiusSensor(random.Random(5))
    readings = [sensor.get_temperature() for _ in range(200)]
    assert all(-20 <= r <= 20 for r in readings)
    assert all(r == int(r) for r in readings)


def test_fahrenheit_readings_in_range():
    sensor = FahrenheitSensor(random.Random(5))
    readings = [sensor.get_fahrenheit_temperature() for _ in range(200)]
    assert all(-4 - 1e-9 <= r <= 68 + 1e-9 for r in readings)


def test_adapter_converts_known_points():
    assert FahrenheitSensorAdapter(FixedFahrenheit(212.0)).get_temperature() == pytest.approx(100.0)
    assert FahrenheitSensorAdapter(FixedFahrenheit(32.0)).get_temperature() == pytest.approx(0.0)


def test_adapter_round_trip_gives_whole_degrees():
    adapter = FahrenheitSensorAdapter(FahrenheitSensor(random.Random(9)))
    for _ in range(100):
        value = adapter.get_temperature()
        assert -20 - 1e-9 <= value <= 20 + 1e-9
        assert abs(value - round(value)) < 1e-9


def test_adapter_and_sensor_names():
    assert FahrenheitSensorAdapter(FahrenheitSensor()).name == "Fahrenheit: "
    assert CelsiusSensor().name == "Celsium: "


def test_client_alternates_sensors():
    client = Client(random.Random(1))
    names = [sensor.name for sensor in client.sensors]
    assert len(names) == 10
    assert names[0::2] == ["Fahrenheit: "] * 5
    assert names[1::2] == ["Celsium: "] * 5


def test_sensor_readings_follow_sensor_order():
    client = Client(random.Random(2))
    readings = list(client.sensor_readings())
    assert [name for name, _ in readings] == [s.name for s in client.sensors]


def test_print_sensors_data_format():
    buffer = io.StringIO()
    Client(random.Random(3)).print_sensors_data(buffer)
    lines = buffer.getvalue().splitlines()
    assert len(lines) == 10
    for line in lines:
        name, _, value = line.partition(": ")
        assert name in ("Celsium", "Fahrenheit")
        assert -20 <= float(value) <= 20
        assert "e" not in value


def test_main_without_pause(capsys):
    assert main(["--no-pause"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert lines[0].startswith("Fahrenheit: ")