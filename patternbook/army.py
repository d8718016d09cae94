"""Abstract factories that raise whole armies of one nation."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod

from patternbook.units import (
    ArcherUnit,
    CarthageArcherUnit,
    CarthageHorsemanUnit,
    CarthageInfantryUnit,
    Citizenship,
    HorsemanUnit,
    InfantryUnit,
    RomanArcherUnit,
    RomanHorsemanUnit,
    RomanInfantryUnit,
    Unit,
    UnitType,
)


class ArmyFactory(ABC):
    """Creates the three kinds of unit for one nation."""

    @abstractmethod
    def create_infantry(self) -> InfantryUnit:
        ...

    @abstractmethod
    def create_archer(self) -> ArcherUnit:
        ...

    @abstractmethod
    def create_horseman(self) -> HorsemanUnit:
        ...


class RomanArmyFactory(ArmyFactory):
    def create_infantry(self) -> RomanInfantryUnit:
        return RomanInfantryUnit()

    def create_archer(self) -> RomanArcherUnit:
        return RomanArcherUnit()

    def create_horseman(self) -> RomanHorsemanUnit:
        return RomanHorsemanUnit()


class CarthageArmyFactory(ArmyFactory):
    def create_infantry(self) -> CarthageInfantryUnit:
        return CarthageInfantryUnit()

    def create_archer(self) -> CarthageArcherUnit:
        return CarthageArcherUnit()

    def create_horseman(self) -> CarthageHorsemanUnit:
        return CarthageHorsemanUnit()


class ArmyClient:
    """Holds one factory per nation and raises armies of random unit types."""

    def __init__(self) -> None:
        self._factories: dict[Citizenship, ArmyFactory] = {}

    def add_factory(self, citizenship: Citizenship, factory: ArmyFactory) -> None:
        """Register a factory; the first one registered for a nation is kept."""
        self._factories.setdefault(citizenship, factory)

    def create_army(
        self,
        citizenship: Citizenship,
        size: int,
        rng: random.Random | None = None,
    ) -> list[Unit]:
        """Return *size* units, each of a randomly chosen type."""
        try:
            factory = self._factories[citizenship]
        except KeyError:
            raise KeyError(f"no army factory for {citizenship.value}") from None
        rng = rng if rng is not None else random.Random()
        makers = {
            UnitType.INFANTRY: factory.create_infantry,
            UnitType.ARCHER: factory.create_archer,
            UnitType.HORSEMAN: factory.create_horseman,
        }
        types = list(UnitType)
        return [makers[types[rng.randrange(len(types))]]() for _ in range(size)]


def main(argv: list[str] | None = None) -> int:
    client = ArmyClient()
    client.add_factory(Citizenship.ROMAN, RomanArmyFactory())
    client.add_factory(Citizenship.CARTHAGE, CarthageArmyFactory())

    for citizenship, size in ((Citizenship.ROMAN, 20), (Citizenship.CARTHAGE, 30)):
        for unit in client.create_army(citizenship, size):
            unit.move()
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())