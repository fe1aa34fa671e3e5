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

"""Capability for the string kinds."""

from __future__ import annotations

from arbitrix.arbitrary.base import GenerationContext
from arbitrix.arbitrary.builtin.characters import CharArbitrary
from arbitrix.arbitrary.shrinking import truncate_front
from arbitrix.core.kinds import StringKind
from arbitrix.generator import Generator
from arbitrix.maybe import Maybe, present


class StringArbitrary:
    """Random-length strings built from a ``CharArbitrary`` of the same width."""

    def __init__(self, kind: StringKind, context: GenerationContext | None = None) -> None:
        self.kind = kind
        self.context = context or GenerationContext()
        self.chars = CharArbitrary(kind.char, self.context)

    def generate(self) -> Generator[str]:
        """Return an infinite generator of strings.

        Each string has a length drawn from ``[min_length, max_length]`` and
        is filled from a fresh character generator.

        Returns:
            Generator[str]: Infinite sample stream.
        """
        context = self.context
        chars = self.chars

        def _step() -> Maybe[str]:
            return present("".join(chars.generate().take(context.draw_length())))

        return Generator(_step)

    def shrink(self, value: str) -> Generator[str]:
        """Drop one leading character per step until the string is empty."""
        return truncate_front(value)

    def special_cases(self) -> Generator[str]:
        return Generator.from_iterable(("",))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name})"


__all__ = ["StringArbitrary"]
