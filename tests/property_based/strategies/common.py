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

"""Common Hypothesis strategies."""

from __future__ import annotations

from hypothesis import strategies as st

from arbitrix.core.kinds import INTEGER_KINDS, IntegerKind


def integer_kinds() -> st.SearchStrategy[IntegerKind]:
    """Return a strategy over the fixed-width integer kinds."""
    return st.sampled_from(INTEGER_KINDS)


@st.composite
def kind_and_value(draw: st.DrawFn) -> tuple[IntegerKind, int]:
    """Draw an integer kind together with a value inside its range.

    Returns:
        Pair of kind and an in-range integer.
    """
    kind = draw(integer_kinds())
    return kind, draw(st.integers(min_value=kind.min, max_value=kind.max))


def float_values() -> st.SearchStrategy[float]:
    """Finite floats, including subnormals and zeros of both signs."""
    return st.floats(allow_nan=False, allow_infinity=False)


@st.composite
def length_bounds(draw: st.DrawFn, max_value: int = 64) -> tuple[int, int]:
    """Draw consistent ``(min_length, max_length)`` pairs.

    Args:
        draw: Hypothesis draw function.
        max_value: Upper limit for ``max_length``.

    Returns:
        Pair with ``0 <= min_length <= max_length <= max_value``.
    """
    low = draw(st.integers(min_value=0, max_value=max_value))
    high = draw(st.integers(min_value=low, max_value=max_value))
    return low, high
