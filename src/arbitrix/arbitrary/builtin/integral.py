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

"""Capability for the fixed-width integer kinds."""

from __future__ import annotations

from arbitrix.arbitrary.base import GenerationContext
from arbitrix.arbitrary.shrinking import bisect_integer
from arbitrix.core.kinds import IntegerKind
from arbitrix.generator import Generator
from arbitrix.maybe import Maybe, present


class IntegerArbitrary:
    """Sample, shrink and enumerate boundaries of one ``IntegerKind``.

    Attributes:
        kind: The integer kind whose range bounds every value.
        context: Random stream and settings owned by this instance.
    """

    def __init__(self, kind: IntegerKind, context: GenerationContext | None = None) -> None:
        self.kind = kind
        self.context = context or GenerationContext()

    def generate(self) -> Generator[int]:
        """Return an infinite generator uniform over ``[kind.min, kind.max]``."""
        rng = self.context.rng
        low, high = self.kind.min, self.kind.max

        def _step() -> Maybe[int]:
            return present(rng.randint(low, high))

        return Generator(_step)

    def shrink(self, value: int) -> Generator[int]:
        """Return ``value/2, value/4, ..., 0`` using truncating division.

        Raises:
            ValueOutOfRangeError: If ``value`` does not fit ``kind``.
        """
        return bisect_integer(self.kind.require(value))

    def special_cases(self) -> Generator[int]:
        return Generator.from_iterable((self.kind.min, 0, self.kind.max))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name})"


__all__ = ["IntegerArbitrary"]
