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

"""Unit tests for kind descriptors."""

from __future__ import annotations

import math
import struct

import pytest

from arbitrix.core.kinds import (
    CHAR,
    DCHAR,
    FLOAT32,
    FLOAT64,
    INT8,
    INT64,
    UINT8,
    UINT64,
    WCHAR,
    ArrayKind,
    ValueOutOfRangeError,
    type_key_name,
)

pytestmark = pytest.mark.unit


def test_integer_bounds() -> None:
    assert (INT8.min, INT8.max) == (-128, 127)
    assert (UINT8.min, UINT8.max) == (0, 255)
    assert (INT64.min, INT64.max) == (-(2**63), 2**63 - 1)
    assert UINT64.max == 2**64 - 1


@pytest.mark.parametrize("value", [128, -129, True, 1.0, "1"])
def test_integer_require_rejects_foreign_values(value: object) -> None:
    with pytest.raises(ValueOutOfRangeError, match="int8"):
        _ = INT8.require(value)  # type: ignore[arg-type]


def test_float32_round_matches_struct() -> None:
    expected = struct.unpack("<f", struct.pack("<f", 0.1))[0]
    assert FLOAT32.round(0.1) == expected
    assert FLOAT32.round(0.1) != 0.1
    assert FLOAT64.round(0.1) == 0.1


def test_float_constants_are_consistent() -> None:
    assert FLOAT32.round(FLOAT32.max) == FLOAT32.max
    assert FLOAT32.max < FLOAT64.max
    assert math.isclose(1.0 + FLOAT64.epsilon, math.nextafter(1.0, 2.0))


def test_char_fits_by_code_unit_width() -> None:
    assert CHAR.fits("a")
    assert not CHAR.fits("é")
    assert WCHAR.fits("é")
    assert WCHAR.fits("☭")
    assert not WCHAR.fits("\U0001f600")
    assert DCHAR.fits("\U0001f600")
    assert not DCHAR.fits("ab")


def test_type_key_names() -> None:
    assert type_key_name(INT8) == "int8"
    assert type_key_name(bool) == "bool"
    assert type_key_name(ArrayKind(INT64)) == "array[int64]"
    assert type_key_name(list[int]) == "list[int]"
