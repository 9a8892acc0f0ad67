"""
ConfigMap - per-instance step parameters.

A ConfigMap maps string keys to 32-bit float values. Iteration is always in
lexicographic key order so that persistence, the interpreter's key callback
and both code generators see the entries in the same deterministic order,
whatever order they were set in.
"""

import math
import struct
from typing import Any, Iterator, TypeVar

T = TypeVar("T")

_FLOAT32 = struct.Struct("<f")


def to_float32(value: float) -> float:
    """Round a number to the nearest 32-bit float."""
    return _FLOAT32.unpack(_FLOAT32.pack(float(value)))[0]


class ConfigMap:
    """
    Ordered key -> float32 parameter set for one step instance.

    Usage:
        config = ConfigMap()
        config.set("cnt", 10)
        config.get_value("cnt", 0)   # -> 10 (int, the type of the default)
        list(config.items())         # -> [("cnt", 10.0)]
    """

    def __init__(self, values: dict[str, float] | None = None):
        self._values: dict[str, float] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def set(self, key: str, value: float) -> None:
        """
        Store a value, replacing any previous value for the key.

        Args:
            key: Parameter name
            value: Numeric value, stored with float32 precision

        Raises:
            TypeError: If key is not a string or value is not numeric
            ValueError: If value is not finite or outside the float32 range
        """
        if not isinstance(key, str) or not key:
            raise TypeError(f"ConfigMap keys must be non-empty strings, got {key!r}")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"ConfigMap value for '{key}' must be a number, got {value!r}")
        try:
            stored = to_float32(value)
        except OverflowError:
            raise ValueError(f"ConfigMap value for '{key}' is out of float32 range: {value!r}")
        if not math.isfinite(stored):
            raise ValueError(f"ConfigMap value for '{key}' must be finite, got {value!r}")
        self._values[key] = stored

    def get_value(self, key: str, default: T) -> T:
        """
        Read a value cast to the type of ``default``.

        Args:
            key: Parameter name
            default: Returned when the key is absent; its type drives the cast

        Returns:
            The stored value converted with ``type(default)``, or ``default``
        """
        if key not in self._values:
            return default
        return type(default)(self._values[key])

    def keys(self) -> list[str]:
        return sorted(self._values)

    def items(self) -> list[tuple[str, float]]:
        return [(key, self._values[key]) for key in self.keys()]

    def to_dict(self) -> dict[str, float]:
        """Serialize to a plain dictionary (key order preserved)."""
        return dict(self.items())

    def __getitem__(self, key: str) -> float:
        return self._values[key]

    def __contains__(self, key: Any) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigMap):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"ConfigMap({self.to_dict()!r})"
