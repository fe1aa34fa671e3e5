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

"""Capability for the character kinds."""

from __future__ import annotations

from typing import Final

from arbitrix.arbitrary.base import GenerationContext
from arbitrix.core.kinds import CharKind
from arbitrix.generator import Generator
from arbitrix.maybe import Maybe, present

# Latin, accented Latin, Cyrillic, Arabic-script and a few symbols.
ALPHABET: Final[str] = "abcdeABCDE12345áàäéèëÁÀÄÉÈËЯВНЛАڴٸڱ☭ତ⇕"


class CharArbitrary:
    """Draw characters uniformly from ``ALPHABET``.

    Only characters that encode to a single code unit of ``kind`` are used, so
    a narrow ``char`` samples the ASCII subset while ``dchar`` sees all of it.
    """

    def __init__(self, kind: CharKind, context: GenerationContext | None = None) -> None:
        self.kind = kind
        self.context = context or GenerationContext()
        self.alphabet = "".join(char for char in ALPHABET if kind.fits(char))

    def generate(self) -> Generator[str]:
        rng = self.context.rng
        alphabet = self.alphabet

        def _step() -> Maybe[str]:
            return present(rng.choice(alphabet))

        return Generator(_step)

    def shrink(self, value: str) -> Generator[str]:  # noqa: ARG002
        return Generator.empty()

    def special_cases(self) -> Generator[str]:
        return Generator.empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name})"


__all__ = ["ALPHABET", "CharArbitrary"]
