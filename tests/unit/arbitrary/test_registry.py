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

"""Unit tests for the capability registry."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

import arbitrix
from arbitrix.arbitrary.base import DefaultShrinkAndSpecialCases
from arbitrix.arbitrary.builtin import ArrayArbitrary, BoolArbitrary, IntegerArbitrary
from arbitrix.arbitrary.registry import (
    ENTRY_POINT_GROUP,
    ArbitraryDescriptor,
    ArbitraryRegistry,
    DuplicateCapabilityError,
    arbitrary_for,
    default_registry,
    entrypoint_arbitraries,
)
from arbitrix.arbitrary.validation import MalformedCapabilityError, MissingCapabilityError
from arbitrix.core.kinds import DSTRING, FLOAT64, INT8, INT64, ArrayKind
from arbitrix.core.model_types import ArbitraryOrigin
from arbitrix.generator import Generator

pytestmark = [pytest.mark.unit, pytest.mark.registry]


class Point:
    def __init__(self, x: int = 0) -> None:
        self.x = x


class PointArbitrary:
    def generate(self) -> Generator[Point]:
        return Generator.from_iterable([Point(1), Point(2)])

    def shrink(self, value: Point) -> Generator[Point]:
        return Generator.from_iterable([Point(value.x // 2)])

    def special_cases(self) -> Generator[Point]:
        return Generator.from_iterable([Point(0)])


class PluginPoint(PointArbitrary):
    target = Point


class Token:
    pass


class TokenArbitrary(DefaultShrinkAndSpecialCases[Token]):
    def generate(self) -> Generator[Token]:
        return Generator.from_iterable([Token()])


@dataclass
class _EntryPoint:
    name: str
    group: str
    obj: object

    def load(self) -> object:
        return self.obj


class _EntryPoints:
    def __init__(self, entries: list[_EntryPoint]) -> None:
        super().__init__()
        self._entries = entries

    def select(self, *, group: str) -> list[_EntryPoint]:
        return [entry for entry in self._entries if entry.group == group]


def _patch_entry_points(monkeypatch: pytest.MonkeyPatch, entries: list[_EntryPoint]) -> None:
    entry_points = _EntryPoints(entries)

    def fake_metadata_entry_points() -> _EntryPoints:
        return entry_points

    monkeypatch.setattr("arbitrix.arbitrary.registry.metadata.entry_points", fake_metadata_entry_points)


def test_builtin_aliases_resolve_to_kinds(registry: ArbitraryRegistry) -> None:
    assert registry.resolve(int) is registry.resolve(INT64)
    assert registry.resolve(float) is registry.resolve(FLOAT64)
    assert registry.resolve(str) is registry.resolve(DSTRING)
    assert isinstance(registry.resolve(bool), BoolArbitrary)
    assert isinstance(registry.resolve(INT8), IntegerArbitrary)


def test_unknown_type_is_missing(registry: ArbitraryRegistry) -> None:
    with pytest.raises(MissingCapabilityError, match="Type Point doesn't have an Arbitrary capability"):
        _ = registry.resolve(Point)
    assert Point not in registry
    assert int in registry


def test_register_and_resolve_user_type(registry: ArbitraryRegistry) -> None:
    arbitrary = PointArbitrary()
    registry.register(Point, arbitrary)
    assert registry.resolve(Point) is arbitrary
    assert [point.x for point in registry.resolve(Point).generate()] == [1, 2]


def test_register_validates_before_storing(registry: ArbitraryRegistry) -> None:
    class Broken:
        def generate(self) -> Generator[Point]:
            return Generator.empty()

        def shrink(self) -> Generator[Point]:
            return Generator.empty()

        def special_cases(self) -> Generator[Point]:
            return Generator.empty()

    with pytest.raises(MalformedCapabilityError):
        registry.register(Point, Broken())
    assert Point not in registry


def test_duplicate_registration_requires_replace(registry: ArbitraryRegistry) -> None:
    with pytest.raises(DuplicateCapabilityError, match="int64"):
        registry.register(int, IntegerArbitrary(INT64))
    replacement = IntegerArbitrary(INT64)
    registry.register(int, replacement, replace=True)
    assert registry.resolve(INT64) is replacement


def test_unregister(registry: ArbitraryRegistry) -> None:
    registry.register(Point, PointArbitrary())
    registry.unregister(Point)
    assert Point not in registry
    with pytest.raises(MissingCapabilityError):
        registry.unregister(Point)


def test_array_keys_are_composed_and_cached(registry: ArbitraryRegistry) -> None:
    arbitrary = registry.resolve(list[int])
    assert isinstance(arbitrary, ArrayArbitrary)
    assert registry.resolve(ArrayKind(INT64)) is arbitrary
    assert registry.resolve(ArrayKind(int)) is arbitrary
    values = arbitrary.generate().take(10)
    assert all(1 <= len(value) <= 32 for value in values)


def test_nested_arrays(registry: ArbitraryRegistry) -> None:
    value = registry.resolve(list[list[bool]]).generate().front()
    assert all(isinstance(item, bool) for inner in value for item in inner)


def test_array_of_user_type(registry: ArbitraryRegistry) -> None:
    registry.register(Point, PointArbitrary())
    value = registry.resolve(list[Point]).generate().front()
    assert value
    assert all(isinstance(item, Point) for item in value)


def test_array_without_element_capability_is_missing(registry: ArbitraryRegistry) -> None:
    with pytest.raises(MissingCapabilityError, match=r"array\[Point\]"):
        _ = registry.resolve(list[Point])


def test_unregister_drops_composed_arrays(registry: ArbitraryRegistry) -> None:
    registry.register(Point, PointArbitrary())
    _ = registry.resolve(list[Point])
    registry.unregister(Point)
    assert list[Point] not in registry
    with pytest.raises(MissingCapabilityError):
        _ = registry.resolve(list[Point])


def test_replace_recomposes_arrays_with_new_element(registry: ArbitraryRegistry) -> None:
    before = registry.resolve(list[int])
    assert isinstance(before, ArrayArbitrary)
    replacement = IntegerArbitrary(INT64)
    registry.register(int, replacement, replace=True)
    after = registry.resolve(list[int])
    assert isinstance(after, ArrayArbitrary)
    assert after is not before
    assert after.element is replacement


def test_generate_only_type_uses_default_mixins(registry: ArbitraryRegistry) -> None:
    registry.register(Token, TokenArbitrary())
    arbitrary = registry.resolve(Token)
    assert isinstance(arbitrary.generate().front(), Token)
    assert arbitrary.shrink(Token()).is_exhausted()
    assert arbitrary.special_cases().is_exhausted()


def test_seeded_registries_are_reproducible() -> None:
    first = ArbitraryRegistry(seed=99).resolve(int).generate().take(5)
    second = ArbitraryRegistry(seed=99).resolve(int).generate().take(5)
    assert first == second


def test_builtin_instances_own_independent_streams(registry: ArbitraryRegistry) -> None:
    int64 = registry.resolve(INT64)
    int8 = registry.resolve(INT8)
    assert isinstance(int64, IntegerArbitrary)
    assert isinstance(int8, IntegerArbitrary)
    assert int64.context.rng is not int8.context.rng


def test_spawn_copies_user_registrations(registry: ArbitraryRegistry) -> None:
    arbitrary = PointArbitrary()
    registry.register(Point, arbitrary)
    child = registry.spawn(seed=5)
    assert child.resolve(Point) is arbitrary
    assert child.resolve(INT64) is not registry.resolve(INT64)
    assert child.seed == 5


def test_verify_counts_entries(registry: ArbitraryRegistry) -> None:
    baseline = registry.verify()
    registry.register(Point, PointArbitrary())
    assert registry.verify() == baseline + 1


def test_describe_reports_origins(registry: ArbitraryRegistry) -> None:
    registry.register(Point, PointArbitrary())
    descriptors = registry.describe()
    assert all(isinstance(desc, ArbitraryDescriptor) for desc in descriptors)
    by_name = {desc.name: desc for desc in descriptors}
    assert by_name["Point"].origin is ArbitraryOrigin.USER
    assert by_name["Point"].qualified_name == "PointArbitrary"
    assert by_name["int64"].origin is ArbitraryOrigin.BUILTIN
    assert [desc.name for desc in descriptors] == sorted(by_name)


def test_arbitrary_for_registers_an_instance(registry: ArbitraryRegistry) -> None:
    @arbitrary_for(Point, registry=registry)
    class DecoratedPoint(PointArbitrary):
        pass

    assert isinstance(registry.resolve(Point), DecoratedPoint)


def test_entrypoint_arbitraries_loads_and_validates(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_entry_points(
        monkeypatch,
        [
            _EntryPoint("point", ENTRY_POINT_GROUP, PluginPoint),
            _EntryPoint("other-group", "unrelated", PluginPoint),
        ],
    )
    arbitraries = entrypoint_arbitraries()
    assert list(arbitraries) == [Point]
    assert isinstance(arbitraries[Point], PluginPoint)


def test_entrypoint_arbitraries_skips_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_entry_points(
        monkeypatch,
        [
            _EntryPoint("no-target", ENTRY_POINT_GROUP, PointArbitrary()),
            _EntryPoint("not-arbitrary", ENTRY_POINT_GROUP, object()),
        ],
    )
    assert entrypoint_arbitraries() == {}


def test_registry_installs_entry_points(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_entry_points(monkeypatch, [_EntryPoint("point", ENTRY_POINT_GROUP, PluginPoint())])
    registry = ArbitraryRegistry(seed=1, load_entry_points=True)
    assert isinstance(registry.resolve(Point), PluginPoint)
    origins = {desc.name: desc.origin for desc in registry.describe()}
    assert origins["Point"] is ArbitraryOrigin.ENTRY_POINT


def test_module_helpers_use_default_registry(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ARBITRIX_SEED", raising=False)
    _patch_entry_points(monkeypatch, [])
    assert default_registry() is default_registry()
    assert list(arbitrix.shrink(int, 100)) == [50, 25, 12, 6, 3, 1, 0]
    assert list(arbitrix.special_cases(str)) == [""]
    assert list(arbitrix.generate(bool)) == [True, False]
    assert arbitrix.resolve(int) is default_registry().resolve(INT64)


def test_spawned_default_registry_has_own_streams(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ARBITRIX_SEED", raising=False)
    _patch_entry_points(monkeypatch, [])
    shared = arbitrix.resolve(int)
    per_thread = default_registry().spawn().resolve(int)
    assert isinstance(shared, IntegerArbitrary)
    assert isinstance(per_thread, IntegerArbitrary)
    assert per_thread.context.rng is not shared.context.rng
