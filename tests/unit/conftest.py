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

"""Fixtures shared across all unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from arbitrix.arbitrary.registry import ArbitraryRegistry, default_registry, entrypoint_arbitraries
from arbitrix.config import GenerationSettings

if TYPE_CHECKING:
    from collections.abc import Iterator

SEED = 20251018


@pytest.fixture
def settings() -> GenerationSettings:
    """Return default generation settings."""
    return GenerationSettings()


@pytest.fixture
def registry(settings: GenerationSettings) -> ArbitraryRegistry:
    """Provide a registry with a fixed master seed.

    Returns:
        Fresh `ArbitraryRegistry` holding only the builtin capabilities.
    """
    return ArbitraryRegistry(settings, seed=SEED)


@pytest.fixture(autouse=True)
def clear_registry_caches() -> Iterator[None]:
    default_registry.cache_clear()
    entrypoint_arbitraries.cache_clear()
    yield
    default_registry.cache_clear()
    entrypoint_arbitraries.cache_clear()
