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

"""Arbitrary capabilities: protocol, validation, registry and builtin policies."""

from __future__ import annotations

from .base import (
    Arbitrary,
    DefaultShrink,
    DefaultShrinkAndSpecialCases,
    DefaultSpecialCases,
    GenerationContext,
)
from .registry import (
    ENTRY_POINT_GROUP,
    ArbitraryDescriptor,
    ArbitraryRegistry,
    DuplicateCapabilityError,
    arbitrary_for,
    default_registry,
    entrypoint_arbitraries,
    generate,
    resolve,
    shrink,
    special_cases,
)
from .validation import (
    CapabilityError,
    MalformedCapabilityError,
    MissingCapabilityError,
    check_arbitrary,
    is_arbitrary_like,
)

__all__ = [
    "ENTRY_POINT_GROUP",
    "Arbitrary",
    "ArbitraryDescriptor",
    "ArbitraryRegistry",
    "CapabilityError",
    "DefaultShrink",
    "DefaultShrinkAndSpecialCases",
    "DefaultSpecialCases",
    "DuplicateCapabilityError",
    "GenerationContext",
    "MalformedCapabilityError",
    "MissingCapabilityError",
    "arbitrary_for",
    "check_arbitrary",
    "default_registry",
    "entrypoint_arbitraries",
    "generate",
    "is_arbitrary_like",
    "resolve",
    "shrink",
    "special_cases",
]
