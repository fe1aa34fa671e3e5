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

"""Optional-value container used as the result of every generation step.

``Maybe`` distinguishes "a value is present" from "no value" without raising
control-flow exceptions. Presence is tracked by an explicit discriminant, so
every payload, including ``0``, ``0.0``, ``False``, ``""`` and ``None``, is a
legitimate present value. For handle-like values whose value space already
contains a natural "no value" sentinel, ``Maybe.nullable`` treats ``None`` as
absence instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Generic, cast

from arbitrix._internal.exceptions import ArbitrixError
from arbitrix.compat import override
from arbitrix.core.type_aliases import T, U

if TYPE_CHECKING:
    from collections.abc import Callable


class EmptyValueError(ArbitrixError, LookupError):
    """Raised when the payload of an absent ``Maybe`` is requested.

    This signals a programming error in the caller, which should have checked
    ``is_absent`` or used ``fold`` first.
    """

    def __init__(self) -> None:
        super().__init__("Cannot unwrap an absent value")


class Maybe(Generic[T]):
    """Immutable tagged union of ``Present(value)`` and ``Absent``."""

    __slots__ = ("_empty", "_value")

    _empty: bool
    _value: T | None

    def __init__(self, value: T | None = None, *, empty: bool = False) -> None:
        object.__setattr__(self, "_empty", empty)
        object.__setattr__(self, "_value", None if empty else value)

    @classmethod
    def present(cls, value: T) -> Maybe[T]:
        """Wrap ``value``; always succeeds."""
        return cls(value)

    @classmethod
    def absent(cls) -> Maybe[T]:
        """Return the empty instance."""
        return cls(empty=True)

    @classmethod
    def nullable(cls, value: T | None) -> Maybe[T]:
        """Wrap a handle-like value, treating ``None`` as absence.

        Only use this for values whose domain never legitimately contains
        ``None``; numbers and other value types go through ``present``.
        """
        if value is None:
            return cls(empty=True)
        return cls(value)

    def is_absent(self) -> bool:
        return self._empty

    def is_present(self) -> bool:
        return not self._empty

    def unwrap(self) -> T:
        """Return the held value.

        Returns:
            The payload stored at construction time.

        Raises:
            EmptyValueError: If the instance is absent.
        """
        if self._empty:
            raise EmptyValueError
        return cast("T", self._value)

    def fold(self, on_absent: Callable[[], U], on_present: Callable[[T], U]) -> U:
        """Dispatch on presence, invoking exactly one branch.

        Args:
            on_absent: Called with no arguments when no value is held.
            on_present: Called with the payload when a value is held.

        Returns:
            Whatever the selected branch returns.
        """
        if self._empty:
            return on_absent()
        return on_present(cast("T", self._value))

    @override
    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self._empty or other._empty:
            return self._empty and other._empty
        return bool(self._value == other._value)

    @override
    def __hash__(self) -> int:
        return hash((self._empty, self._value))

    @override
    def __repr__(self) -> str:
        if self._empty:
            return "Maybe.absent()"
        return f"Maybe.present({self._value!r})"


_ABSENT: Final[Maybe[Any]] = Maybe(empty=True)


def present(value: T) -> Maybe[T]:
    """Return a ``Maybe`` holding ``value``."""
    return Maybe(value)


def absent() -> Maybe[Any]:
    """Return the shared absent ``Maybe``."""
    return _ABSENT


def nullable(value: T | None) -> Maybe[T]:
    """Return a ``Maybe`` that is absent when ``value`` is ``None``."""
    return Maybe.nullable(value)


__all__ = ["EmptyValueError", "Maybe", "absent", "nullable", "present"]
