# avrotypes

A small, thread-safe registry that maps Avro type names to Python types and
back.

An Avro union needs to know which Python type stands for a branch such as
`"int"`, `"long.timestamp-millis"` or a named record like `"test"`.
`avrotypes.resolver.TypeResolver` keeps that mapping in both directions. A new
resolver comes with the primitive and logical Avro types already registered:

| Avro name                  | Python type          |
|----------------------------|----------------------|
| `null`                     | `NoneType`           |
| `int`, `long`              | `int`                |
| `float`, `double`          | `float`              |
| `string`                   | `str`                |
| `bytes`                    | `bytes`              |
| `boolean`                  | `bool`               |
| `int.date`                 | `datetime.date`      |
| `int.time-millis`          | `datetime.timedelta` |
| `long.timestamp-millis`    | `datetime.datetime`  |
| `long.timestamp-micros`    | `datetime.datetime`  |
| `long.time-micros`         | `datetime.timedelta` |
| `bytes.decimal`            | `fractions.Fraction` |
| `string.uuid`              | `str`                |

## Installation

```
pip install avrotypes
```

## Usage

```python
from avrotypes.resolver import ResolveError, TypeResolver

resolver = TypeResolver()

resolver.type("long")        # int
resolver.name(float)         # ["float", "double"]
resolver.name(3.5)           # ["float", "double"]  (an instance works too)

class Person:
    pass

# Register either a class or an example instance under a name.
resolver.register("person", Person)
resolver.register("customer", Person())
resolver.type("person")      # Person
resolver.name(Person)        # ["person", "customer"]

try:
    resolver.type("unknown")
except ResolveError as exc:
    print(exc)               # avro: unable to resolve type with name unknown
```

### Rules

- `register(name, obj)` takes a class, or any other object whose class is
  then used. Registering `None` registers `NoneType`.
- `type(name)` returns the type registered under `name` most recently.
- `name(typ)` returns a new list of every name the type has been registered
  under, in registration order. Types are matched exactly, so `bool` does not
  resolve to the names of `int`.
- Looking up a name or a type that was never registered raises
  `ResolveError`, a subclass of `LookupError`.

## What this package does not do

It only keeps the mapping between names and types. It does not parse Avro
schemas, and it does not encode or decode Avro data.

## Running the tests

```
pip install -e ".[test]"
pytest
```