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

"""Lazy, pull-based sequences built from a fallible step function.

A ``Generator`` wraps a step function ``() -> Maybe[T]``. The first step runs at
construction so ``front`` is ready before first use; each ``advance`` runs the
step again. The first absent step exhausts the generator permanently: the step
function is never called again afterwards.

Generators may be infinite. Consumers pull only as many values as they need,
typically through ``take`` or ``itertools.islice``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeAlias

from arbitrix._internal.exceptions import ArbitrixError
from arbitrix.compat import Self
from arbitrix.core.type_aliases import T
from arbitrix.maybe import Maybe, absent, present

StepFunction: TypeAlias = Callable[[], Maybe[T]]


class EmptyStateError(ArbitrixError, LookupError):
    """Raised when the front of an exhausted generator is read."""

    def __init__(self) -> None:
        super().__init__("Generator is exhausted")


class Generator(Generic[T]):
    """Single-pass cursor over a possibly infinite sequence.

    Attributes:
        step: Function producing the next value, or absence once the sequence ends.
    """

    __slots__ = ("_current", "step")

    def __init__(self, step: StepFunction[T]) -> None:
        self.step = step
        self._current: Maybe[T] = step()

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> Generator[T]:
        """Build a finite generator that replays ``values`` in order."""
        iterator = iter(values)

        def _step() -> Maybe[T]:
            for value in iterator:
                return present(value)
            return absent()

        return cls(_step)

    @classmethod
    def empty(cls) -> Generator[Any]:
        """Return a generator that starts exhausted."""
        return cls(absent)

    def front(self) -> T:
        """Return the current value.

        Returns:
            The value produced by the most recent step.

        Raises:
            EmptyStateError: If the generator is exhausted.
        """
        if self._current.is_absent():
            raise EmptyStateError
        return self._current.unwrap()

    def is_exhausted(self) -> bool:
        return self._current.is_absent()

    def advance(self) -> None:
        """Pull the next value; a no-op once the generator is exhausted."""
        if self._current.is_absent():
            return
        self._current = self.step()

    def take(self, count: int) -> list[T]:
        """Pull at most ``count`` values, advancing past each of them.

        Args:
            count: Maximum number of values to collect.

        Returns:
            The collected values, shorter than ``count`` if the generator
            ran out first.
        """
        taken: list[T] = []
        while len(taken) < count and not self.is_exhausted():
            taken.append(self.front())
            self.advance()
        return taken

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        if self._current.is_absent():
            raise StopIteration
        value = self._current.unwrap()
        self.advance()
        return value


__all__ = ["EmptyStateError", "Generator", "StepFunction"]
