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

"""JSON value shapes and helpers used by the structured log formatter."""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias, cast

from pydantic import JsonValue

__all__ = ["JSONValue", "normalize_for_json"]

JSONValue: TypeAlias = JsonValue


def normalize_for_json(value: object) -> JSONValue:
    """Recursively convert a log payload into JSON-compatible values.

    Enum members collapse to their ``.value``, tuples and lists to lists, and
    mapping keys to strings. Anything else that ``json`` cannot encode falls
    back to ``repr`` so type keys such as ``list[int]`` stay readable.

    Args:
        value: Arbitrary Python object hierarchy.

    Returns:
        A structure built from ``dict``/``list``/primitives.
    """
    if isinstance(value, Enum):
        return cast("JSONValue", value.value)
    if isinstance(value, dict):
        mapping = cast("dict[object, object]", value)
        return {
            (str(key.value) if isinstance(key, Enum) else str(key)): normalize_for_json(item)
            for key, item in mapping.items()
        }
    if isinstance(value, (list, tuple)):
        items = cast("list[object] | tuple[object, ...]", value)
        return [normalize_for_json(item) for item in items]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return repr(value)
