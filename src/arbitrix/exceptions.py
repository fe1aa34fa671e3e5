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

"""Public exception types re-exported from their defining modules."""

from __future__ import annotations

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

__all__ = [
    "ArbitrixError",
    "ArbitrixTypeError",
    "ArbitrixValidationError",
    "CapabilityError",
    "ConfigReadError",
    "ConfigValidationError",
    "DuplicateCapabilityError",
    "EmptyStateError",
    "EmptyValueError",
    "InvalidConfigFileError",
    "LengthBoundsError",
    "MalformedCapabilityError",
    "MissingCapabilityError",
    "UnsupportedConfigVersionError",
    "ValueOutOfRangeError",
]
