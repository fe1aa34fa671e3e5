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

"""arbitrix - value generation and shrinking for property-based testing.

Provides an optional-value container (``Maybe``), a lazy single-pass sequence
(``Generator``) and a registry binding each type to an ``Arbitrary``
capability that samples values, shrinks failing ones and enumerates boundary
cases.
"""

from __future__ import annotations

from arbitrix._internal.exceptions import (
    ArbitrixError,
    ArbitrixTypeError,
    ArbitrixValidationError,
)

from .arbitrary import (
    Arbitrary,
    ArbitraryDescriptor,
    ArbitraryRegistry,
    CapabilityError,
    DefaultShrink,
    DefaultShrinkAndSpecialCases,
    DefaultSpecialCases,
    DuplicateCapabilityError,
    GenerationContext,
    MalformedCapabilityError,
    MissingCapabilityError,
    arbitrary_for,
    check_arbitrary,
    default_registry,
    generate,
    resolve,
    shrink,
    special_cases,
)
from .config import GenerationSettings, load_settings
from .core.kinds import (
    CHAR,
    DCHAR,
    DSTRING,
    FLOAT32,
    FLOAT64,
    INT8,
    INT16,
    INT32,
    INT64,
    STRING,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    WCHAR,
    WSTRING,
    ArrayKind,
    ValueOutOfRangeError,
)
from .generator import EmptyStateError, Generator
from .maybe import EmptyValueError, Maybe, absent, nullable, present

__version__ = "0.1.0"

__all__ = [
    "CHAR",
    "DCHAR",
    "DSTRING",
    "FLOAT32",
    "FLOAT64",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "STRING",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "WCHAR",
    "WSTRING",
    "Arbitrary",
    "ArbitraryDescriptor",
    "ArbitraryRegistry",
    "ArbitrixError",
    "ArbitrixTypeError",
    "ArbitrixValidationError",
    "ArrayKind",
    "CapabilityError",
    "DefaultShrink",
    "DefaultShrinkAndSpecialCases",
    "DefaultSpecialCases",
    "DuplicateCapabilityError",
    "EmptyStateError",
    "EmptyValueError",
    "GenerationContext",
    "GenerationSettings",
    "Generator",
    "MalformedCapabilityError",
    "Maybe",
    "MissingCapabilityError",
    "ValueOutOfRangeError",
    "__version__",
    "absent",
    "arbitrary_for",
    "check_arbitrary",
    "default_registry",
    "generate",
    "load_settings",
    "nullable",
    "present",
    "resolve",
    "shrink",
    "special_cases",
]
