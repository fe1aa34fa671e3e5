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

"""The two shrink families used by the builtin policies.

Numeric bisection halves the magnitude on every step and stops at zero (or
within a tolerance of zero for floats), so it ends after O(log |v|) steps.
Sequence truncation drops one leading element per step and ends after exactly
``len(v)`` steps. Each step object owns the last value it produced; it is
created per call to ``shrink`` and never shared between generators.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Generic, TypeVar

from arbitrix.generator import Generator
from arbitrix.maybe import Maybe, absent, present

S = TypeVar("S", bound=Sequence[object])


class IntegerBisection:
    """Step function yielding ``v/2, v/4, ...`` (truncating) down to ``0``."""

    __slots__ = ("saved",)

    def __init__(self, start: int) -> None:
        self.saved = start

    def __call__(self) -> Maybe[int]:
        if self.saved == 0:
            return absent()
        half = abs(self.saved) // 2
        self.saved = half if self.saved > 0 else -half
        return present(self.saved)


class FloatBisection:
    """Step function halving a float until it is within ``tolerance`` of zero.

    The tolerance test runs before halving, so the final value yielded is the
    first half that lands inside the tolerance band.
    """

    __slots__ = ("saved", "tolerance")

    def __init__(self, start: float, tolerance: float) -> None:
        self.saved = start
        self.tolerance = tolerance

    def __call__(self) -> Maybe[float]:
        if math.isnan(self.saved) or math.isclose(self.saved, 0.0, abs_tol=self.tolerance):
            return absent()
        self.saved = self.saved / 2
        return present(self.saved)


class FrontTruncation(Generic[S]):
    """Step function dropping exactly one leading element per call."""

    __slots__ = ("saved",)

    def __init__(self, start: S) -> None:
        self.saved = start

    def __call__(self) -> Maybe[S]:
        if len(self.saved) == 0:
            return absent()
        self.saved = self.saved[1:]  # type: ignore[assignment]  # JUSTIFIED: slicing preserves the sequence type
        return present(self.saved)


def bisect_integer(value: int) -> Generator[int]:
    """Return the bisection-toward-zero shrink sequence for ``value``."""
    return Generator(IntegerBisection(value))


def bisect_float(value: float, *, tolerance: float, restart_from: float | None = None) -> Generator[float]:
    """Return the float bisection shrink sequence for ``value``.

    Args:
        value: Starting value. NaN produces an empty sequence.
        tolerance: Absolute distance from zero at which shrinking stops.
        restart_from: Finite magnitude substituted for an infinite ``value``;
            the sequence then starts with ``+/-restart_from`` itself.

    Returns:
        Generator[float]: Finite shrink sequence.
    """
    if math.isinf(value) and restart_from is not None:
        substitute = math.copysign(restart_from, value)
        bisection = FloatBisection(substitute, tolerance)
        pending: list[float] = [substitute]

        def _step() -> Maybe[float]:
            if pending:
                return present(pending.pop())
            return bisection()

        return Generator(_step)
    return Generator(FloatBisection(value, tolerance))


def truncate_front(value: S) -> Generator[S]:
    """Return the drop-one-leading-element shrink sequence for ``value``."""
    return Generator(FrontTruncation(value))


__all__ = [
    "FloatBisection",
    "FrontTruncation",
    "IntegerBisection",
    "bisect_float",
    "bisect_integer",
    "truncate_front",
]
