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

"""Shape validation for capability objects.

A capability is accepted only if all three operations exist, are callable
and can be called with the right number of positional arguments: none for
``generate`` and ``special_cases``, exactly one for ``shrink``. When an
operation carries a resolvable return annotation it must name
``arbitrix.generator.Generator``. The checks run at registration time, before
any value is generated.
"""

from __future__ import annotations

import inspect
import logging
import typing
from typing import TYPE_CHECKING, Final

from arbitrix._internal.exceptions import ArbitrixTypeError
from arbitrix._internal.logging_utils import structured_extra
from arbitrix.core.kinds import type_key_name
from arbitrix.core.model_types import LogComponent, Operation
from arbitrix.generator import Generator

if TYPE_CHECKING:
    from collections.abc import Callable

    from arbitrix.core.type_aliases import TypeKey

logger: logging.Logger = logging.getLogger("arbitrix.validation")

# Number of positional arguments each operation is called with.
OPERATION_ARITY: Final[dict[Operation, int]] = {
    Operation.GENERATE: 0,
    Operation.SHRINK: 1,
    Operation.SPECIAL_CASES: 0,
}


class CapabilityError(ArbitrixTypeError):
    """Base class for capabilities that cannot be used for a type.

    Attributes:
        type_key: The registry key the capability was meant for.
        operation: The offending operation, or None when the whole
            capability is missing.
    """

    def __init__(self, type_key: TypeKey, operation: Operation | None, message: str) -> None:
        self.type_key = type_key
        self.operation = operation
        super().__init__(message)


class MissingCapabilityError(CapabilityError):
    """Raised when a type has no capability, or a capability lacks an operation."""

    def __init__(self, type_key: TypeKey, operation: Operation | None = None) -> None:
        """Initialize the exception with the type and missing operation.

        Args:
            type_key: Registry key without a usable capability.
            operation: Name of the missing operation; None when no capability
                is registered for the type at all.
        """
        name = type_key_name(type_key)
        if operation is None:
            message = f"Type {name} doesn't have an Arbitrary capability"
        else:
            message = f"Type {name} doesn't have {operation.value} function in its Arbitrary capability"
        super().__init__(type_key, operation, message)


class MalformedCapabilityError(CapabilityError):
    """Raised when a capability operation has the wrong shape."""

    def __init__(self, type_key: TypeKey, operation: Operation, reason: str) -> None:
        """Initialize the exception with the type, operation and reason.

        Args:
            type_key: Registry key the capability was meant for.
            operation: The operation whose shape is wrong.
            reason: Human-readable description of the problem.
        """
        self.reason = reason
        message = f"Arbitrary capability for {type_key_name(type_key)}: {operation.value} {reason}"
        super().__init__(type_key, operation, message)


def check_arbitrary(type_key: TypeKey, candidate: object) -> None:
    """Verify that ``candidate`` is a well-formed capability for ``type_key``.

    Args:
        type_key: Registry key the capability is meant for, used in error messages.
        candidate: Object expected to expose ``generate``, ``shrink`` and
            ``special_cases``.

    Raises:
        MissingCapabilityError: If ``candidate`` is None or lacks an operation.
        MalformedCapabilityError: If an operation is not callable, cannot be
            called with the expected arguments, or is annotated to return
            something other than a ``Generator``.
    """
    if candidate is None:
        raise MissingCapabilityError(type_key)
    for operation, arity in OPERATION_ARITY.items():
        member = getattr(candidate, operation.value, None)
        if member is None:
            raise MissingCapabilityError(type_key, operation)
        if not callable(member):
            raise MalformedCapabilityError(type_key, operation, "is not callable")
        _check_arity(type_key, operation, member, arity)
        _check_return_annotation(type_key, operation, member)
    logger.debug(
        "Validated capability %s for %s",
        type(candidate).__qualname__,
        type_key_name(type_key),
        extra=structured_extra(component=LogComponent.VALIDATION, type_key=type_key),
    )


def is_arbitrary_like(candidate: object) -> bool:
    """Return True if ``candidate`` passes ``check_arbitrary`` for an anonymous key."""
    try:
        check_arbitrary(type(candidate), candidate)
    except CapabilityError:
        return False
    return True


def _check_arity(type_key: TypeKey, operation: Operation, member: Callable[..., object], arity: int) -> None:
    try:
        signature = inspect.signature(member)
    except (TypeError, ValueError):
        # builtins and some C callables expose no signature; nothing to check
        return
    try:
        signature.bind(*([None] * arity))
    except TypeError as exc:
        plural = "argument" if arity == 1 else "arguments"
        reason = f"must accept exactly {arity} positional {plural} ({exc})"
        raise MalformedCapabilityError(type_key, operation, reason) from exc


def _check_return_annotation(type_key: TypeKey, operation: Operation, member: Callable[..., object]) -> None:
    try:
        hints = typing.get_type_hints(member)
    # ignore JUSTIFIED: annotations may reference names only importable under TYPE_CHECKING;
    # unresolvable annotations are skipped rather than rejected
    except Exception as exc:  # noqa: BLE001
        logger.debug(
            "Skipped return annotation check for %s of %s: %s",
            operation.value,
            type_key_name(type_key),
            exc,
            extra=structured_extra(component=LogComponent.VALIDATION, type_key=type_key, operation=operation),
        )
        return
    hint = hints.get("return")
    if hint is None:
        return
    origin = typing.get_origin(hint) or hint
    if isinstance(origin, type) and issubclass(origin, Generator):
        return
    reason = f"must return Generator, not {type_key_name(hint)}"
    raise MalformedCapabilityError(type_key, operation, reason)


__all__ = [
    "OPERATION_ARITY",
    "CapabilityError",
    "MalformedCapabilityError",
    "MissingCapabilityError",
    "check_arbitrary",
    "is_arbitrary_like",
]
