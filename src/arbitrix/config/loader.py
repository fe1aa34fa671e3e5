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

"""Settings discovery and loading for arbitrix.

Settings come from the first of ``arbitrix.toml``, ``.arbitrix.toml`` or the
``[tool.arbitrix]`` table of ``pyproject.toml`` found in the search directory.
The ``ARBITRIX_SEED`` environment variable overrides the configured seed so a
failing run can be replayed without editing files.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from arbitrix._internal.logging_utils import structured_extra
from arbitrix.compat import tomllib
from arbitrix.core.model_types import LogComponent

from .constants import CONFIG_FILENAMES, SEED_ENV
from .models import (
    ConfigReadError,
    ConfigValidationError,
    GenerationSettings,
    InvalidConfigFileError,
    SettingsModel,
    settings_from_model,
)

logger: logging.Logger = logging.getLogger("arbitrix.config")


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Container for loaded settings and their source path.

    Attributes:
        settings: Parsed settings instance.
        path: Filesystem path the settings were loaded from, or None when
            defaults are used.
    """

    settings: GenerationSettings
    path: Path | None


def load_settings(explicit_path: Path | None = None, *, search_dir: Path | None = None) -> GenerationSettings:
    """Load arbitrix settings from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a settings file. If provided,
            only this file is checked.
        search_dir: Directory searched when no explicit path is given;
            defaults to the current working directory.

    Returns:
        Runtime settings with any environment override applied.
    """
    return load_settings_with_metadata(explicit_path, search_dir=search_dir).settings


def load_settings_with_metadata(
    explicit_path: Path | None = None,
    *,
    search_dir: Path | None = None,
) -> LoadedSettings:
    """Load arbitrix settings together with the path they came from.

    Args:
        explicit_path: Optional explicit path to a settings file.
        search_dir: Directory searched when no explicit path is given.

    Returns:
        LoadedSettings: Parsed settings and their source path (``None`` for defaults).
    """
    seed_override = _seed_from_env()
    for candidate in _search_order(explicit_path, search_dir):
        model = _load_candidate(candidate, explicit=explicit_path is not None)
        if model is None:
            continue
        logger.debug(
            "Loaded settings from %s",
            candidate,
            extra=structured_extra(component=LogComponent.CONFIG, path=candidate),
        )
        return LoadedSettings(settings=settings_from_model(model, seed=seed_override), path=candidate.resolve())
    return LoadedSettings(settings=GenerationSettings(seed=seed_override), path=None)


def _search_order(explicit_path: Path | None, search_dir: Path | None) -> list[Path]:
    if explicit_path is not None:
        return [explicit_path if explicit_path.is_absolute() else (Path.cwd() / explicit_path).resolve()]
    base_dir = search_dir if search_dir is not None else Path.cwd()
    return [base_dir / name for name in CONFIG_FILENAMES]


def _seed_from_env() -> int | None:
    raw = os.getenv(SEED_ENV)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip(), 0)
    except ValueError as exc:
        msg = f"{SEED_ENV} must be an integer, got '{raw}'"
        raise ConfigValidationError(msg) from exc


def _load_candidate(candidate: Path, *, explicit: bool) -> SettingsModel | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError(candidate))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw_map, explicit=explicit)
    if payload is None:
        return None
    try:
        return SettingsModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc


def _extract_payload(candidate: Path, raw_map: dict[str, object], *, explicit: bool) -> dict[str, object] | None:
    """Extract the arbitrix table from a parsed TOML document.

    Args:
        candidate: Source configuration path.
        raw_map: Data parsed from the TOML document.
        explicit: Whether the path was requested explicitly.

    Returns:
        Mapping to validate, or None when a pyproject.toml carries no
        arbitrix table.

    Raises:
        InvalidConfigFileError: If ``[tool.arbitrix]`` is not a table, or an
            explicitly requested pyproject.toml has no arbitrix table.
    """
    if candidate.name != "pyproject.toml":
        return raw_map
    tool_section = raw_map.get("tool")
    section = tool_section.get("arbitrix") if isinstance(tool_section, dict) else None
    if section is None:
        if explicit:
            message = f"{candidate.name} does not define a [tool.arbitrix] table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None
    if not isinstance(section, dict):
        message = "[tool.arbitrix] must be a TOML table"
        raise InvalidConfigFileError(candidate, ValueError(message))
    return cast("dict[str, object]", section)


__all__ = ["LoadedSettings", "load_settings", "load_settings_with_metadata"]
