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

"""Property-based tests for shrink sequences."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arbitrix.arbitrary.builtin import ArrayArbitrary, FloatArbitrary, IntegerArbitrary, StringArbitrary
from arbitrix.core.kinds import DSTRING, FLOAT64, INT64, ArrayKind, IntegerKind
from arbitrix.generator import Generator
from tests.property_based.strategies import float_values, kind_and_value

pytestmark = pytest.mark.property


@given(kind_and_value())
def test_integer_shrink_bisects_toward_zero(case: tuple[IntegerKind, int]) -> None:
    kind, value = case
    shrunk = list(IntegerArbitrary(kind).shrink(value))
    if value == 0:
        assert shrunk == []
        return
    assert shrunk[-1] == 0
    assert len(shrunk) <= abs(value).bit_length()
    previous = value
    for candidate in shrunk:
        assert abs(candidate) < abs(previous)
        assert candidate == 0 or (candidate > 0) == (value > 0)
        assert kind.contains(candidate)
        previous = candidate


@given(float_values())
def test_float_shrink_terminates_near_zero(value: float) -> None:
    shrunk = list(FloatArbitrary(FLOAT64).shrink(value))
    if math.isclose(value, 0.0, abs_tol=1e-5):
        assert shrunk == []
        return
    assert abs(shrunk[-1]) <= 1e-5
    assert len(shrunk) <= 1100
    assert all(abs(b) < abs(a) for a, b in zip(shrunk, shrunk[1:]))


@given(st.text())
def test_string_shrink_takes_exactly_len_steps(value: str) -> None:
    shrunk = list(StringArbitrary(DSTRING).shrink(value))
    assert len(shrunk) == len(value)
    assert shrunk == [value[index:] for index in range(1, len(value) + 1)]


@given(st.lists(st.integers()))
def test_array_shrink_takes_exactly_len_steps(value: list[int]) -> None:
    original = list(value)
    arbitrary = ArrayArbitrary(ArrayKind(INT64), IntegerArbitrary(INT64))
    shrunk = list(arbitrary.shrink(value))
    assert len(shrunk) == len(value)
    assert all(len(candidate) == len(value) - index for index, candidate in enumerate(shrunk, start=1))
    assert value == original


@given(kind_and_value(), st.integers(min_value=1, max_value=5))
def test_exhausted_shrink_stays_exhausted(case: tuple[IntegerKind, int], extra: int) -> None:
    kind, value = case
    shrunk: Generator[int] = IntegerArbitrary(kind).shrink(value)
    _ = shrunk.take(abs(value).bit_length() + 1)
    assert shrunk.is_exhausted()
    for _ in range(extra):
        shrunk.advance()
        assert shrunk.is_exhausted()
