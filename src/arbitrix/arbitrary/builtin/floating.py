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

"""Capability for the binary floating point kinds."""

from __future__ import annotations

import math

from arbitrix.arbitrary.base import GenerationContext
from arbitrix.arbitrary.shrinking import bisect_float
from arbitrix.core.kinds import FloatKind, ValueOutOfRangeError
from arbitrix.generator import Generator
from arbitrix.maybe import Maybe, present


class FloatArbitrary:
    """Sample, shrink and enumerate boundaries of one ``FloatKind``.

    Samples are uniform over ``[-kind.max, kind.max]`` and rounded to the
    kind's precision. Shrinking halves toward zero and stops once the value is
    within ``settings.float_tolerance`` of zero. NaN does not shrink; an
    infinity restarts from the largest finite value of the same sign.
    """

    def __init__(self, kind: FloatKind, context: GenerationContext | None = None) -> None:
        self.kind = kind
        self.context = context or GenerationContext()

    def generate(self) -> Generator[float]:
        rng = self.context.rng
        kind = self.kind

        def _step() -> Maybe[float]:
            # scale a unit draw; uniform(-max, max) overflows for float64
            return present(kind.round(kind.max * (2.0 * rng.random() - 1.0)))

        return Generator(_step)

    def shrink(self, value: float) -> Generator[float]:
        """Halve ``value`` toward zero.

        Raises:
            ValueOutOfRangeError: If ``value`` is finite and larger in
                magnitude than ``kind.max``.
        """
        value = float(value)
        if math.isfinite(value) and abs(value) > self.kind.max:
            raise ValueOutOfRangeError(self.kind.name, value)
        return bisect_float(
            value,
            tolerance=self.context.settings.float_tolerance,
            restart_from=self.kind.max,
        )

    def special_cases(self) -> Generator[float]:
        kind = self.kind
        return Generator.from_iterable(
            (-kind.max, 0.0, kind.max, math.nan, math.inf, kind.epsilon, kind.min_normal),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name})"


__all__ = ["FloatArbitrary"]
