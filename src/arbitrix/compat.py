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

"""Version-tolerant imports shared by arbitrix modules.

arbitrix supports Python 3.10 and newer. A handful of names it relies on only
joined the standard library in 3.11 or 3.12; this module resolves each of them
once so the rest of the package can import them unconditionally.

Attributes:
    tomllib: TOML parser (stdlib on 3.11+, ``tomli`` on 3.10).
    UTC: Timezone instance for UTC timestamps in log records.
    StrEnum: Base class for string-valued enums.
    Self, TypedDict, Unpack, override: Typing helpers from ``typing`` or
        ``typing_extensions``.
"""

from __future__ import annotations

import datetime as _dt
import enum as _enum
from datetime import timezone as _timezone
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    import tomli as tomllib
    from typing_extensions import Self, TypedDict, Unpack, override
else:
    try:
        import tomllib
    except ModuleNotFoundError:  # py<3.11
        import tomli as tomllib

    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override

    try:
        from typing import Self, Unpack  # py>=3.11
    except ImportError:  # py<3.11
        from typing_extensions import Self, Unpack

UTC = getattr(_dt, "UTC", _timezone.utc)


class _StrEnumBase(str, _enum.Enum):
    """Type base for StrEnum-like enums."""


_STR_ENUM = getattr(_enum, "StrEnum", None)

if _STR_ENUM is None:

    class _CompatStrEnum(_StrEnumBase):
        """Backport of enum.StrEnum for Python 3.10."""

        @override
        def __str__(self) -> str:
            return str(self.value)

    StrEnum: type[_StrEnumBase] = _CompatStrEnum
else:
    StrEnum = cast("type[_StrEnumBase]", _STR_ENUM)

__all__ = ["UTC", "Self", "StrEnum", "TypedDict", "Unpack", "override", "tomllib"]
