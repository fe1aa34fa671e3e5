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

"""Typed aliases used across arbitrix internals."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")

# A registry key: a Python type, a kind descriptor or a parametrised alias such as list[int].
TypeKey: TypeAlias = Hashable


__all__ = ["T", "TypeKey", "U"]
