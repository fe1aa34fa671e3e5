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

"""Configuration management for arbitrix.

This package provides the runtime ``GenerationSettings`` consumed by the
builtin policies, the Pydantic model used to validate settings files, and the
loader that discovers ``arbitrix.toml`` or ``[tool.arbitrix]`` tables.
"""

from __future__ import annotations

from .constants import CONFIG_VERSION, DEFAULT_FLOAT_TOLERANCE, DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, SEED_ENV
from .loader import LoadedSettings, load_settings, load_settings_with_metadata
from .models import (
    ConfigReadError,
    ConfigValidationError,
    GenerationSettings,
    InvalidConfigFileError,
    LengthBoundsError,
    SettingsModel,
    UnsupportedConfigVersionError,
    settings_from_model,
)

__all__ = [
    "CONFIG_VERSION",
    "DEFAULT_FLOAT_TOLERANCE",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "SEED_ENV",
    "ConfigReadError",
    "ConfigValidationError",
    "GenerationSettings",
    "InvalidConfigFileError",
    "LengthBoundsError",
    "LoadedSettings",
    "SettingsModel",
    "UnsupportedConfigVersionError",
    "load_settings",
    "load_settings_with_metadata",
    "settings_from_model",
]
