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

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from arbitrix._internal.exceptions import ArbitrixError, ArbitrixTypeError, ArbitrixValidationError
from arbitrix.arbitrary.registry import DuplicateCapabilityError
from arbitrix.arbitrary.validation import CapabilityError, MalformedCapabilityError, MissingCapabilityError
from arbitrix.config.models import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    LengthBoundsError,
    UnsupportedConfigVersionError,
)
from arbitrix.core.kinds import ValueOutOfRangeError
from arbitrix.generator import EmptyStateError
from arbitrix.maybe import EmptyValueError

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    ArbitrixError: ErrorCode("AX000"),
    ArbitrixValidationError: ErrorCode("AX100"),
    ArbitrixTypeError: ErrorCode("AX101"),
    ConfigValidationError: ErrorCode("AX110"),
    LengthBoundsError: ErrorCode("AX111"),
    UnsupportedConfigVersionError: ErrorCode("AX112"),
    ConfigReadError: ErrorCode("AX113"),
    InvalidConfigFileError: ErrorCode("AX114"),
    EmptyValueError: ErrorCode("AX200"),
    EmptyStateError: ErrorCode("AX201"),
    CapabilityError: ErrorCode("AX300"),
    MissingCapabilityError: ErrorCode("AX301"),
    MalformedCapabilityError: ErrorCode("AX302"),
    DuplicateCapabilityError: ErrorCode("AX303"),
    ValueOutOfRangeError: ErrorCode("AX400"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured arbitrix exception."""
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("AX000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Intended for diagnostics, tests and documentation generation; the private
    mapping stays the single source of truth.
    """
    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
