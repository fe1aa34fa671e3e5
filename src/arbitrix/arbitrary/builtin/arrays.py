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

"""Capability for homogeneous arrays, composed from an element capability."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic

from arbitrix._internal.logging_utils import structured_extra
from arbitrix.arbitrary.base import GenerationContext
from arbitrix.arbitrary.shrinking import truncate_front
from arbitrix.core.model_types import LogComponent, Operation
from arbitrix.core.type_aliases import T
from arbitrix.generator import Generator
from arbitrix.maybe import Maybe, present

if TYPE_CHECKING:
    from arbitrix.arbitrary.base import Arbitrary
    from arbitrix.core.kinds import ArrayKind

logger: logging.Logger = logging.getLogger("arbitrix.generation")


class ArrayArbitrary(Generic[T]):
    """Random-length lists whose elements come from ``element.generate``.

    Attributes:
        kind: Array kind this capability was composed for.
        element: Capability of the element type.
        context: Random stream and settings used for lengths.
    """

    def __init__(
        self,
        kind: ArrayKind,
        element: Arbitrary[T],
        context: GenerationContext | None = None,
    ) -> None:
        self.kind = kind
        self.element = element
        self.context = context or GenerationContext()

    def _fill(self, length: int) -> list[T]:
        values: list[T] = []
        source = self.element.generate()
        while len(values) < length:
            if source.is_exhausted():
                # finite element streams (bool) are restarted to reach length
                source = self.element.generate()
                if source.is_exhausted():
                    logger.debug(
                        "Element generator for %s is empty; array truncated at %d",
                        self.kind.name,
                        len(values),
                        extra=structured_extra(
                            component=LogComponent.GENERATION,
                            type_key=self.kind,
                            operation=Operation.GENERATE,
                            count=len(values),
                        ),
                    )
                    break
                continue
            values.append(source.front())
            source.advance()
        return values

    def generate(self) -> Generator[list[T]]:
        context = self.context

        def _step() -> Maybe[list[T]]:
            return present(self._fill(context.draw_length()))

        return Generator(_step)

    def shrink(self, value: list[T]) -> Generator[list[T]]:
        """Drop one leading element per step; ``value`` itself is not modified."""
        return truncate_front(list(value))

    def special_cases(self) -> Generator[list[T]]:
        return Generator.from_iterable(([],))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name})"


__all__ = ["ArrayArbitrary"]
