"""Temperature sensors, with an adapter that makes a Fahrenheit one read Celsius."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TextIO


class Sensor(ABC):
    """A named sensor reporting degrees Celsius."""

    name = ""

    @abstractmethod
    def get_temperature(self) -> float:
        ...


class CelsiusSensor(Sensor):
    """Reports a whole-degree Celsius reading between -20 and 20."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.name = "Celsium: "

    def get_temperature(self) -> float:
        return -20.0 + self._rng.randrange(41)


class FahrenheitSensor:
    """Reports the same range of readings, in degrees Fahrenheit."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def get_fahrenheit_temperature(self) -> float:
        return (-20.0 + self._rng.randrange(41)) * 9 / 5 + 32


class FahrenheitSensorAdapter(Sensor):
    """Presents a FahrenheitSensor as a Celsius Sensor."""

    def __init__(self, fahrenheit_sensor: FahrenheitSensor) -> None:
        self._sensor = fahrenheit_sensor
        self.name = "Fahrenheit: "

    def get_temperature(self) -> float:
        return (self._sensor.get_fahrenheit_temperature() - 32) * 5 / 9


class Client:
    """Ten sensors, alternating adapted Fahrenheit and native Celsius."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.sensors: list[Sensor] = [
            CelsiusSensor(rng) if i % 2 else FahrenheitSensorAdapter(FahrenheitSensor(rng))
            for i in range(10)
        ]

    def sensor_readings(self) -> Iterator[tuple[str, float]]:
        """Yield each sensor's name with a fresh reading."""
        for sensor in self.sensors:
            yield sensor.name, sensor.get_temperature()

    def print_sensors_data(self, file: TextIO | None = None) -> None:
        out = file if file is not None else sys.stdout
        for name, temperature in self.sensor_readings():
            out.write(f"{name}{temperature:g}\n")


def _pause() -> None:
    if os.name == "nt":
        subprocess.run("pause", shell=True, check=False)
    else:
        try:
            input("Press Enter to continue . . . ")
        except EOFError:
            pass


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print readings of ten sensors.")
    parser.add_argument("--no-pause", action="store_true", help="do not wait at the end")
    args = parser.parse_args(argv)
    Client().print_sensors_data()
    if not args.no_pause:
        _pause()
    return 0


if __name__ == "__main__":
    sys.exit(main())