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

"""Shared configuration defaults for arbitrix."""

from __future__ import annotations

from typing import Final

CONFIG_VERSION: Final[int] = 0

DEFAULT_MIN_LENGTH: Final[int] = 1
DEFAULT_MAX_LENGTH: Final[int] = 32
DEFAULT_FLOAT_TOLERANCE: Final[float] = 1e-5

SEED_ENV: Final[str] = "ARBITRIX_SEED"
CONFIG_FILENAMES: Final[tuple[str, ...]] = ("arbitrix.toml", ".arbitrix.toml", "pyproject.toml")

__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_VERSION",
    "DEFAULT_FLOAT_TOLERANCE",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "SEED_ENV",
]
