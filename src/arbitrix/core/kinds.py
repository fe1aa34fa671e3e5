# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Kind descriptors for the primitive type lattice.

Python has a single unbounded ``int``, a single binary64 ``float`` and a single
code-point ``str``. The descriptors in this module name the fixed-width
variants a property test may want to sample from (``INT8`` through ``UINT64``,
``FLOAT32``/``FLOAT64``, narrow and wide characters and strings) and carry
the bounds each policy needs. Descriptors are frozen and hashable, so they
double as registry keys.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from arbitrix._internal.exceptions import ArbitrixValidationError

if TYPE_CHECKING:
    from arbitrix.core.type_aliases import TypeKey


class ValueOutOfRangeError(ArbitrixValidationError):
    """Raised when a value does not fit the kind it is handed to."""

    def __init__(self, kind: str, value: object) -> None:
        """Initialize the exception with the kind name and offending value.

        Args:
            kind: Name of the kind whose bounds were violated.
            value: The value that fell outside those bounds.
        """
        self.kind = kind
        self.value = value
        super().__init__(f"{value!r} is out of range for {kind}")


@dataclass(slots=True, frozen=True)
class IntegerKind:
    """Fixed-width two's complement (or unsigned) integer.

    Attributes:
        name: Short identifier, e.g. ``int32``.
        bits: Width in bits.
        signed: Whether the kind holds negative values.
    """

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def require(self, value: int) -> int:
        """Return ``value`` unchanged if it fits, else raise ``ValueOutOfRangeError``."""
        if isinstance(value, bool) or not isinstance(value, int) or not self.contains(value):
            raise ValueOutOfRangeError(self.name, value)
        return value


@dataclass(slots=True, frozen=True)
class FloatKind:
    """IEEE 754 binary floating point format.

    Attributes:
        name: Short identifier, e.g. ``float32``.
        struct_code: ``struct`` format character used to round to the format.
        max: Largest finite value.
        epsilon: Difference between 1.0 and the next representable value.
        min_normal: Smallest positive normal value.
    """

    name: str
    struct_code: str
    max: float
    epsilon: float
    min_normal: float

    def round(self, value: float) -> float:
        """Round ``value`` to the nearest value representable in this format."""
        packed = struct.pack(f"<{self.struct_code}", value)
        return float(struct.unpack(f"<{self.struct_code}", packed)[0])


@dataclass(slots=True, frozen=True)
class CharKind:
    """Character type stored as a single code unit of an encoding.

    Attributes:
        name: Short identifier, e.g. ``wchar``.
        encoding: Codec whose code units the character occupies.
        unit_size: Size of one code unit in bytes.
    """

    name: str
    encoding: str
    unit_size: int

    def fits(self, char: str) -> bool:
        """Return True when ``char`` encodes to exactly one code unit."""
        return len(char) == 1 and len(char.encode(self.encoding)) == self.unit_size


@dataclass(slots=True, frozen=True)
class StringKind:
    """Immutable string whose elements are characters of ``char``."""

    name: str
    char: CharKind


@dataclass(slots=True, frozen=True)
class ArrayKind:
    """Homogeneous array of ``element`` values, represented as ``list``."""

    element: TypeKey

    @property
    def name(self) -> str:
        return f"array[{type_key_name(self.element)}]"


INT8: Final = IntegerKind("int8", 8, signed=True)
INT16: Final = IntegerKind("int16", 16, signed=True)
INT32: Final = IntegerKind("int32", 32, signed=True)
INT64: Final = IntegerKind("int64", 64, signed=True)
UINT8: Final = IntegerKind("uint8", 8, signed=False)
UINT16: Final = IntegerKind("uint16", 16, signed=False)
UINT32: Final = IntegerKind("uint32", 32, signed=False)
UINT64: Final = IntegerKind("uint64", 64, signed=False)
INTEGER_KINDS: Final[tuple[IntegerKind, ...]] = (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64)

FLOAT32: Final = FloatKind(
    "float32",
    "f",
    max=3.4028234663852886e38,
    epsilon=1.1920928955078125e-07,
    min_normal=1.1754943508222875e-38,
)
FLOAT64: Final = FloatKind(
    "float64",
    "d",
    max=sys.float_info.max,
    epsilon=sys.float_info.epsilon,
    min_normal=sys.float_info.min,
)
FLOAT_KINDS: Final[tuple[FloatKind, ...]] = (FLOAT32, FLOAT64)

CHAR: Final = CharKind("char", "utf-8", 1)
WCHAR: Final = CharKind("wchar", "utf-16-le", 2)
DCHAR: Final = CharKind("dchar", "utf-32-le", 4)
CHAR_KINDS: Final[tuple[CharKind, ...]] = (CHAR, WCHAR, DCHAR)

STRING: Final = StringKind("string", CHAR)
WSTRING: Final = StringKind("wstring", WCHAR)
DSTRING: Final = StringKind("dstring", DCHAR)
STRING_KINDS: Final[tuple[StringKind, ...]] = (STRING, WSTRING, DSTRING)

# Python builtins stand in for the widest kind of their category.
BUILTIN_ALIASES: Final[dict[type, IntegerKind | FloatKind | StringKind]] = {
    int: INT64,
    float: FLOAT64,
    str: DSTRING,
}


def type_key_name(key: TypeKey) -> str:
    """Return a readable name for a registry key.

    Args:
        key: A Python type, kind descriptor or parametrised alias.

    Returns:
        The kind name, the qualified type name, or ``repr(key)`` as a last resort.
    """
    name = getattr(key, "name", None)
    if isinstance(name, str) and not isinstance(key, type):
        return name
    if isinstance(key, type) and not hasattr(key, "__origin__"):
        return key.__qualname__
    return repr(key)


__all__ = [
    "BUILTIN_ALIASES",
    "CHAR",
    "CHAR_KINDS",
    "DCHAR",
    "DSTRING",
    "FLOAT32",
    "FLOAT64",
    "FLOAT_KINDS",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INTEGER_KINDS",
    "STRING",
    "STRING_KINDS",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "WCHAR",
    "WSTRING",
    "ArrayKind",
    "CharKind",
    "FloatKind",
    "IntegerKind",
    "StringKind",
    "ValueOutOfRangeError",
    "type_key_name",
]
