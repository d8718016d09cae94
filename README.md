# patternbook

Compact, runnable examples of four classic object-oriented design patterns:

- **Builder**: `patternbook.querybuilder` builds a `Query` of SELECT, FROM,
  WHERE, JOIN and ORDER BY clauses step by step with a fluent `QueryBuilder`.
  Each clause keeps the first value it is given; `Query.render()` returns the
  statement as text and `Query.print()` writes it out.
- **Abstract factory**: `patternbook.units` defines infantry, archer and
  horseman units for two nations (`Citizenship.ROMAN`, `Citizenship.CARTHAGE`),
  and `patternbook.army` creates them through `RomanArmyFactory` and
  `CarthageArmyFactory`. `ArmyClient.create_army()` returns a list of units of
  randomly chosen types; pass a `random.Random` to make it repeatable.
- **Singleton**: `patternbook.singleton` provides `Singleton.get_instance()`
  and an `OperationSystem` that only ever starts once, guarded by a lock, even
  when several `Computer` objects launch it from different threads. Every
  later `start_system()` call returns the system started first, with its
  first title.
- **Adapter**: `patternbook.adapter` lets a `FahrenheitSensor` work as a
  Celsius `Sensor` through `FahrenheitSensorAdapter`. `Client` holds ten
  sensors, alternating adapted Fahrenheit and native `CelsiusSensor` ones.

## Installation

```
pip install .
```

## Using the library

```python
from patternbook.querybuilder import QueryBuilder

query = (
    QueryBuilder()
    .add_table("Students")
    .add_select("*")
    .add_order_by("last_name")
    .create()
)
print(query.render())
# SELECT *
# 	 FROM Students
# 	 ORDER BY last_name ASC
```

```python
import random
from patternbook.army import ArmyClient, RomanArmyFactory
from patternbook.units import Citizenship

client = ArmyClient()
client.add_factory(Citizenship.ROMAN, RomanArmyFactory())
for unit in client.create_army(Citizenship.ROMAN, 5, random.Random(1)):
    unit.move()            # e.g. "Roman Archer moved"
```

Units also describe themselves without printing, through `describe_move()`
and `describe_battle(enemy)`, and `battle(enemy)` prints a line such as
`Roman Infantry vs Carthage Horseman`.

```python
from patternbook.singleton import OperationSystem

first = OperationSystem.start_system("Ubuntu")
again = OperationSystem.start_system("Windows")
assert again is first and again.title == "Ubuntu"
```

```python
from patternbook.adapter import Client

for name, temperature in Client().sensor_readings():
    print(name, temperature)
```

## Command-line demos

Each pattern has a demo command that prints its example to standard output:

```
patternbook-query               # builds and prints two queries
patternbook-army                # creates a Roman army of 20 and a Carthaginian army of 30 and moves them
patternbook-singleton           # three computers in three threads start one shared operating system
patternbook-sensors             # reads ten Celsius and adapted Fahrenheit sensors, then waits
patternbook-sensors --no-pause  # the same, without waiting at the end
```

## What it does not do

The query builder only assembles text: it does not check the SQL or run it
against any database.

## Running the tests

```
pip install .[test]
pytest
```