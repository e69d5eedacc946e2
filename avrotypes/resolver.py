"""Resolution between Avro type names and Python types."""

from __future__ import annotations

import datetime
import threading
from fractions import Fraction
from typing import Any

__all__ = ["ResolveError", "TypeResolver"]


class ResolveError(LookupError):
    """Raised when a name or a type cannot be resolved."""


def _as_type(obj: Any) -> type:
    """Return ``obj`` itself if it is a class, otherwise the class of ``obj``."""
    return obj if isinstance(obj, type) else type(obj)


class TypeResolver:
    """Resolves Python types to Avro names and Avro names to Python types.

    A name maps to the type most recently registered under it. A type maps
    to every name it was registered under, in registration order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._names: dict[str, type] = {}
        self._types: dict[type, list[str]] = {}

        # Primitive types.
        self.register("null", None)
        self.register("int", int)
        self.register("long", int)
        self.register("float", float)
        self.register("double", float)
        self.register("string", str)
        self.register("bytes", bytes)
        self.register("boolean", bool)

        # Logical types.
        self.register("int.date", datetime.date)
        self.register("int.time-millis", datetime.timedelta)
        self.register("long.timestamp-millis", datetime.datetime)
        self.register("long.timestamp-micros", datetime.datetime)
        self.register("long.time-micros", datetime.timedelta)
        self.register("bytes.decimal", Fraction)
        self.register("string.uuid", str)

    def register(self, name: str, obj: Any) -> None:
        """Register ``name`` for the type of ``obj`` (or ``obj`` if it is a class)."""
        typ = _as_type(obj)
        with self._lock:
            self._names[name] = typ
            self._types.setdefault(typ, []).append(name)

    def name(self, typ: Any) -> list[str]:
        """Return the names registered for a type (or the type of an instance)."""
        rtype = _as_type(typ)
        with self._lock:
            names = self._types.get(rtype)
            if names is None:
                raise ResolveError(f"avro: unable to resolve type {rtype.__qualname__}")
            return list(names)

    def type(self, name: str) -> type:
        """Return the type registered for ``name``."""
        with self._lock:
            try:
                return self._names[name]
            except KeyError:
                raise ResolveError(
                    f"avro: unable to resolve type with name {name}"
                ) from None