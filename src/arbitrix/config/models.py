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

"""Configuration models and validation for arbitrix.

Settings are validated with a Pydantic model when loaded from TOML and then
converted into a frozen dataclass used at runtime by the registry and the
builtin policies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from arbitrix._internal.exceptions import ArbitrixValidationError

from .constants import CONFIG_VERSION, DEFAULT_FLOAT_TOLERANCE, DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH

if TYPE_CHECKING:
    from pathlib import Path


class ConfigValidationError(ArbitrixValidationError):
    """Raised when configuration data contains invalid values."""


class LengthBoundsError(ConfigValidationError):
    """Raised when the generated-length bounds are inconsistent."""

    def __init__(self, min_length: int, max_length: int) -> None:
        """Initialize the exception with the offending bounds.

        Args:
            min_length: Configured minimum sequence length.
            max_length: Configured maximum sequence length.
        """
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(f"max_length ({max_length}) must be >= min_length ({min_length})")


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value provided in the configuration file.
            expected: The config_version value expected by this version of arbitrix.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid arbitrix configuration in {path}: {error}")


@dataclass(slots=True, frozen=True)
class GenerationSettings:
    """Tunable parameters consumed by the builtin policies.

    Attributes:
        min_length: Minimum length of generated strings and arrays.
        max_length: Maximum length of generated strings and arrays.
        seed: Master seed for the registry's random streams; ``None`` seeds
            from system entropy.
        float_tolerance: Absolute distance from zero at which float
            bisection stops.
    """

    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    seed: int | None = None
    float_tolerance: float = DEFAULT_FLOAT_TOLERANCE

    def __post_init__(self) -> None:
        if self.min_length < 0:
            msg = f"min_length must be >= 0, got {self.min_length}"
            raise ConfigValidationError(msg)
        if self.max_length < self.min_length:
            raise LengthBoundsError(self.min_length, self.max_length)
        if self.float_tolerance <= 0:
            msg = f"float_tolerance must be > 0, got {self.float_tolerance}"
            raise ConfigValidationError(msg)


class SettingsModel(BaseModel):
    """Pydantic model for validating arbitrix settings read from TOML.

    Attributes:
        config_version: Schema version number for the configuration file.
        min_length: Minimum generated sequence length.
        max_length: Maximum generated sequence length.
        seed: Optional master seed.
        float_tolerance: Float bisection stopping distance.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    config_version: int = Field(default=CONFIG_VERSION)
    min_length: int = Field(default=DEFAULT_MIN_LENGTH, ge=0)
    max_length: int = Field(default=DEFAULT_MAX_LENGTH, ge=0)
    seed: int | None = None
    float_tolerance: float = Field(default=DEFAULT_FLOAT_TOLERANCE, gt=0)

    @field_validator("seed", mode="before")
    @classmethod
    def _reject_bool_seed(cls, value: object) -> object:
        if isinstance(value, bool):
            msg = "seed must be an integer"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _check_bounds(self) -> SettingsModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        if self.max_length < self.min_length:
            raise LengthBoundsError(self.min_length, self.max_length)
        return self


def settings_from_model(model: SettingsModel, *, seed: int | None = None) -> GenerationSettings:
    """Convert a validated SettingsModel to a GenerationSettings dataclass.

    Args:
        model: Validated settings model.
        seed: Seed override taking precedence over ``model.seed`` when given.

    Returns:
        Runtime settings.
    """
    return GenerationSettings(
        min_length=model.min_length,
        max_length=model.max_length,
        seed=model.seed if seed is None else seed,
        float_tolerance=model.float_tolerance,
    )


__all__ = [
    "ConfigReadError",
    "ConfigValidationError",
    "GenerationSettings",
    "InvalidConfigFileError",
    "LengthBoundsError",
    "SettingsModel",
    "UnsupportedConfigVersionError",
    "settings_from_model",
]
