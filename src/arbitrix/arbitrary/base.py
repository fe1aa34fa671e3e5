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

"""Capability protocol and the context handed to builtin policies.

Every type that takes part in generation and shrinking is bound, in an
``ArbitraryRegistry``, to exactly one object satisfying the ``Arbitrary``
protocol below. The protocol is structural: user types do not inherit from
anything, they only need the three operations with the right shapes, which
the registry checks when the object is registered.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Generic, Protocol, runtime_checkable

from arbitrix.config.models import GenerationSettings
from arbitrix.core.type_aliases import T
from arbitrix.generator import Generator


@runtime_checkable
class Arbitrary(Protocol[T]):
    """Protocol defining the operations a capability must implement.

    ``generate`` samples the type, ``shrink`` proposes strictly simpler
    candidates for a failing value, and ``special_cases`` enumerates a finite
    set of boundary values.
    """

    def generate(self) -> Generator[T]:
        """Return a (possibly infinite) generator of random samples.

        Returns:
            Generator[T]: Fresh generator; each call starts a new stream.
        """
        ...  # pragma: no cover

    def shrink(self, value: T) -> Generator[T]:
        """Return a finite generator of candidates simpler than ``value``.

        Args:
            value: A previously generated (typically failing) value.

        Returns:
            Generator[T]: Candidates in strictly decreasing order of size.
        """
        ...  # pragma: no cover

    def special_cases(self) -> Generator[T]:
        """Return a finite generator of boundary values for the type.

        Returns:
            Generator[T]: Curated edge values, possibly none.
        """
        ...  # pragma: no cover


def _default_rng() -> random.Random:
    return random.Random()  # noqa: S311  # JUSTIFIED: test data generation, not cryptography


@dataclass(slots=True, frozen=True)
class GenerationContext:
    """Dependencies shared by a builtin capability.

    Attributes:
        settings: Length bounds and float tolerance.
        rng: Random stream owned exclusively by the capability built from
            this context.
    """

    settings: GenerationSettings = field(default_factory=GenerationSettings)
    rng: random.Random = field(default_factory=_default_rng)

    @classmethod
    def seeded(cls, seed: int, settings: GenerationSettings | None = None) -> GenerationContext:
        """Build a context whose random stream is seeded with ``seed``."""
        return cls(settings=settings or GenerationSettings(), rng=random.Random(seed))  # noqa: S311

    def draw_length(self) -> int:
        """Draw a sequence length uniformly from the configured bounds."""
        return self.rng.randint(self.settings.min_length, self.settings.max_length)


class DefaultShrink(Generic[T]):
    """Mixin for types that have no simpler values to propose.

    Annotations are resolved against this module, so the registry accepts the
    inherited ``shrink`` as is.
    """

    def shrink(self, value: T) -> Generator[T]:
        """Return an empty shrink sequence for any ``value``."""
        del value
        return Generator.empty()


class DefaultSpecialCases(Generic[T]):
    """Mixin for types with no boundary values worth enumerating."""

    def special_cases(self) -> Generator[T]:
        return Generator.empty()


class DefaultShrinkAndSpecialCases(DefaultShrink[T], DefaultSpecialCases[T]):
    """Both defaults; subclasses only implement ``generate``."""


__all__ = [
    "Arbitrary",
    "DefaultShrink",
    "DefaultShrinkAndSpecialCases",
    "DefaultSpecialCases",
    "GenerationContext",
]
