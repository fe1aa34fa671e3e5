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

"""Capability for ``bool``."""

from __future__ import annotations

from arbitrix.generator import Generator


class BoolArbitrary:
    """Enumerate both booleans instead of sampling them.

    ``generate`` yields exactly ``True`` then ``False``; there is nothing
    simpler than a boolean, so ``shrink`` and ``special_cases`` are empty.
    """

    def generate(self) -> Generator[bool]:
        return Generator.from_iterable((True, False))

    def shrink(self, value: bool) -> Generator[bool]:  # noqa: ARG002, FBT001
        return Generator.empty()

    def special_cases(self) -> Generator[bool]:
        return Generator.empty()


__all__ = ["BoolArbitrary"]
