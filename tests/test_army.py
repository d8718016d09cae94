import random

import pytest

from patternbook.army import (
    ArmyClient,
    ArmyFactory,
    CarthageArmyFactory,
    RomanArmyFactory,
    main,
)
from patternbook.units import Citizenship, UnitType


def make_client():
    client = ArmyClient()
    client.add_factory(Citizenship.ROMAN, RomanArmyFactory())
    client.add_factory(Citizenship.CARTHAGE, CarthageArmyFactory())
    return client


def test_army_factory_is_abstract():
    with pytest.raises(TypeError):
        ArmyFactory()


@pytest.mark.parametrize(
    "factory, citizenship",
    [(RomanArmyFactory(), Citizenship.ROMAN), (CarthageArmyFactory(), Citizenship.CARTHAGE)],
)
def test_factories_produce_their_nation(factory, citizenship):
    units = [factory.create_infantry(), factory.create_archer(), factory.create_horseman()]
    assert [u.citizenship for u in units] == [citizenship] * 3
    assert [u.unit_type for u in units] == list(UnitType)


def test_army_size_and_nation():
    army = make_client().create_army(Citizenship.ROMAN, 20, random.Random(1))
    assert len(army) == 20
    assert all(u.citizenship is Citizenship.ROMAN for u in army)


def test_same_seed_gives_same_army():
    client = make_client()
    first = client.create_army(Citizenship.CARTHAGE, 30, random.Random(7))
    second = client.create_army(Citizenship.CARTHAGE, 30, random.Random(7))
    assert [u.unit_type for u in first] == [u.unit_type for u in second]


def test_large_army_has_every_type():
    army = make_client().create_army(Citizenship.ROMAN, 300, random.Random(3))
    assert {u.unit_type for u in army} == set(UnitType)


def test_empty_and_negative_sizes():
    client = make_client()
    assert client.create_army(Citizenship.ROMAN, 0) == []
    assert client.create_army(Citizenship.ROMAN, -5) == []


def test_missing_factory_raises():
    with pytest.raises(KeyError):
        ArmyClient().create_army(Citizenship.CARTHAGE, 3)


def test_first_registered_factory_is_kept():
    client = ArmyClient()
    client.add_factory(Citizenship.ROMAN, RomanArmyFactory())
    client.add_factory(Citizenship.ROMAN, CarthageArmyFactory())
    army = client.create_army(Citizenship.ROMAN, 10, random.Random(0))
    assert all(u.citizenship is Citizenship.ROMAN for u in army)


def test_main_moves_both_armies(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.split("\n")
    moved = [line for line in lines if line.endswith(" moved")]
    assert len(moved) == 50
    assert sum(line.startswith("Roman ") for line in moved) == 20
    assert sum(line.startswith("Carthage ") for line in moved) == 30