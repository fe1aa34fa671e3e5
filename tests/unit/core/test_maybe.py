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

"""Unit tests for Maybe."""

from __future__ import annotations

import pytest

from arbitrix.maybe import EmptyValueError, Maybe, absent, nullable, present

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("value", [0, 0.0, "", False, None, []])
def test_present_keeps_falsy_payloads(value: object) -> None:
    held = present(value)
    assert held.is_present()
    assert not held.is_absent()
    assert held.unwrap() == value


def test_absent_unwrap_raises() -> None:
    empty = absent()
    assert empty.is_absent()
    with pytest.raises(EmptyValueError, match="absent"):
        _ = empty.unwrap()


def test_absent_error_is_lookup_error() -> None:
    with pytest.raises(LookupError):
        _ = Maybe.absent().unwrap()


def test_nullable_treats_none_as_absent() -> None:
    assert nullable(None).is_absent()
    marker = object()
    assert nullable(marker).unwrap() is marker
    assert Maybe.nullable(0).unwrap() == 0


def test_fold_invokes_exactly_one_branch() -> None:
    calls: list[str] = []

    def on_absent() -> str:
        calls.append("absent")
        return "none"

    def on_present(value: int) -> str:
        calls.append("present")
        return f"got {value}"

    assert present(3).fold(on_absent, on_present) == "got 3"
    assert absent().fold(on_absent, on_present) == "none"
    assert calls == ["present", "absent"]


def test_equality_and_hash() -> None:
    assert present(1) == Maybe.present(1)
    assert present(1) != present(2)
    assert absent() == Maybe.absent()
    assert present(None) != absent()
    assert len({present(1), present(1), absent(), Maybe.absent()}) == 2


def test_repr_names_the_variant() -> None:
    assert repr(present("x")) == "Maybe.present('x')"
    assert repr(absent()) == "Maybe.absent()"


def test_maybe_is_immutable() -> None:
    held = present(1)
    with pytest.raises(AttributeError):
        held._value = 2  # noqa: SLF001
