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

"""Enumerations shared across arbitrix.

This module defines the small closed vocabularies used by the registry and the
logging layer:

- Log output formats and loggable components
- The origin of a registered capability (builtin, user, plugin, derived)
- The names of the three capability operations
"""

from __future__ import annotations

from arbitrix.compat import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable components.

    Attributes:
        REGISTRY: Capability registration and resolution.
        VALIDATION: Capability shape checks.
        CONFIG: Settings discovery and loading.
        GENERATION: Builtin generate/shrink policies.
    """

    REGISTRY = "registry"
    VALIDATION = "validation"
    CONFIG = "config"
    GENERATION = "generation"


class ArbitraryOrigin(StrEnum):
    """Where a registered capability came from.

    Attributes:
        BUILTIN: Installed by the registry for the primitive type lattice.
        USER: Registered explicitly through ``register`` or ``arbitrary_for``.
        ENTRY_POINT: Loaded from the ``arbitrix.arbitraries`` entry-point group.
        DERIVED: Composed on demand for an array key from its element capability.
    """

    BUILTIN = "builtin"
    USER = "user"
    ENTRY_POINT = "entry_point"
    DERIVED = "derived"


class Operation(StrEnum):
    """Names of the operations every capability must expose."""

    GENERATE = "generate"
    SHRINK = "shrink"
    SPECIAL_CASES = "special_cases"


__all__ = ["ArbitraryOrigin", "LogComponent", "LogFormat", "Operation"]
