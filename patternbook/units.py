"""Army units of two nations, each with its own combat figures."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import TextIO


class UnitType(Enum):
    INFANTRY = "Infantry"
    ARCHER = "Archer"
    HORSEMAN = "Horseman"


class Citizenship(Enum):
    ROMAN = "Roman"
    CARTHAGE = "Carthage"


class Unit(ABC):
    """A fighting unit; concrete classes fix its type and citizenship."""

    unit_type: UnitType

    def __init__(self) -> None:
        self.title = ""
        self.attack = 0
        self.defend = 0

    @property
    @abstractmethod
    def citizenship(self) -> Citizenship:
        """The nation the unit belongs to."""

    def _label(self) -> str:
        return f"{self.citizenship.value} {self.unit_type.value}"

    def describe_move(self) -> str:
        return f"{self._label()} moved"

    def describe_battle(self, enemy: Unit) -> str:
        return f"{self._label()} vs {enemy._label()}"

    def move(self, file: TextIO | None = None) -> None:
        print(self.describe_move(), file=file if file is not None else sys.stdout)

    def battle(self, enemy: Unit, file: TextIO | None = None) -> None:
        print(self.describe_battle(enemy), file=file if file is not None else sys.stdout)


class InfantryUnit(Unit):
    unit_type = UnitType.INFANTRY

    def __init__(self) -> None:
        super().__init__()
        self.attack = 3
        self.defend = 5
        self.cold_weapon = ""


class ArcherUnit(Unit):
    unit_type = UnitType.ARCHER

    def __init__(self) -> None:
        super().__init__()
        self.attack = 5
        self.defend = 3
        self.bow_weapon = ""


class HorsemanUnit(Unit):
    unit_type = UnitType.HORSEMAN

    def __init__(self) -> None:
        super().__init__()
        self.attack = 7
        self.defend = 3
        self.weapon = ""


class RomanInfantryUnit(InfantryUnit):
    citizenship = Citizenship.ROMAN

    def __init__(self) -> None:
        super().__init__()
        self.attack += 1


class RomanArcherUnit(ArcherUnit):
    citizenship = Citizenship.ROMAN

    def __init__(self) -> None:
        super().__init__()
        self.attack -= 1


class RomanHorsemanUnit(HorsemanUnit):
    citizenship = Citizenship.ROMAN


class CarthageInfantryUnit(InfantryUnit):
    citizenship = Citizenship.CARTHAGE

    def __init__(self) -> None:
        super().__init__()
        self.attack += 1


class CarthageArcherUnit(ArcherUnit):
    citizenship = Citizenship.CARTHAGE

    def __init__(self) -> None:
        super().__init__()
        self.attack -= 1


class CarthageHorsemanUnit(HorsemanUnit):
    citizenship = Citizenship.CARTHAGE