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

"""Capability registry and discovery for builtin and plugin-provided arbitraries.

An ``ArbitraryRegistry`` binds exactly one capability instance to each type
key. Builtin capabilities for the primitive lattice are installed when the
registry is created, user capabilities are added with ``register`` or the
``arbitrary_for`` decorator, and third-party packages can publish
capabilities under the ``arbitrix.arbitraries`` entry-point group. Array keys
(``list[X]`` or ``ArrayKind(X)``) are composed on first use from the element
capability.

Each builtin instance owns a ``random.Random`` seeded from the registry's
master stream. Registries are not shared between threads; use ``spawn`` to
hand an independent copy to another thread or test run.
"""

from __future__ import annotations

import inspect
import logging
import random
from dataclasses import dataclass
from functools import lru_cache
from importlib import metadata
from typing import TYPE_CHECKING, Any, Final, cast

from arbitrix._internal.exceptions import ArbitrixValidationError
from arbitrix._internal.logging_utils import structured_extra
from arbitrix.config.loader import load_settings
from arbitrix.config.models import GenerationSettings
from arbitrix.core.kinds import (
    BUILTIN_ALIASES,
    CHAR_KINDS,
    FLOAT_KINDS,
    INTEGER_KINDS,
    STRING_KINDS,
    ArrayKind,
    type_key_name,
)
from arbitrix.core.model_types import ArbitraryOrigin, LogComponent

from .base import GenerationContext
from .builtin import (
    ArrayArbitrary,
    BoolArbitrary,
    CharArbitrary,
    FloatArbitrary,
    IntegerArbitrary,
    StringArbitrary,
)
from .validation import MissingCapabilityError, check_arbitrary

if TYPE_CHECKING:
    from collections.abc import Callable

    from arbitrix.core.type_aliases import T, TypeKey
    from arbitrix.generator import Generator

    from .base import Arbitrary

logger: logging.Logger = logging.getLogger("arbitrix.registry")

ENTRY_POINT_GROUP: Final = "arbitrix.arbitraries"


class DuplicateCapabilityError(ArbitrixValidationError):
    """Raised when a type key already has a capability and replacement was not requested."""

    def __init__(self, type_key: TypeKey) -> None:
        self.type_key = type_key
        super().__init__(f"Type {type_key_name(type_key)} already has an Arbitrary capability")


@dataclass(slots=True, frozen=True)
class ArbitraryDescriptor:
    """Metadata description of a registered capability.

    Attributes:
        name: Display name of the type key.
        module: Module defining the capability class.
        qualified_name: Qualified name of the capability class.
        origin: Where the capability came from.
    """

    name: str
    module: str
    qualified_name: str
    origin: ArbitraryOrigin


@dataclass(slots=True, frozen=True)
class _Entry:
    arbitrary: Any
    origin: ArbitraryOrigin


def _canonical_key(type_key: TypeKey) -> TypeKey:
    """Map Python spellings onto the kind descriptors used as registry keys."""
    if isinstance(type_key, type) and type_key in BUILTIN_ALIASES:
        return BUILTIN_ALIASES[type_key]
    origin = getattr(type_key, "__origin__", None)
    args = getattr(type_key, "__args__", ())
    if origin is list and len(args) == 1:
        return ArrayKind(_canonical_key(args[0]))
    if isinstance(type_key, ArrayKind):
        return ArrayKind(_canonical_key(type_key.element))
    return type_key


def _instantiate_arbitrary(obj: object, *, source: str) -> tuple[TypeKey, object]:
    """Convert an entry point object into a ``(target, capability)`` pair.

    Args:
        obj: The loaded entry point object (class or instance).
        source: Entry point name for error messages.

    Returns:
        tuple[TypeKey, object]: The declared target key and the capability.

    Raises:
        TypeError: If the object does not declare a ``target`` type key.
    """
    candidate = obj
    if inspect.isclass(candidate):
        factory = cast("Callable[[], object]", candidate)
        candidate = factory()
    target = getattr(candidate, "target", None)
    if target is None:
        message = f"Entry point '{source}' does not declare a target type"
        raise TypeError(message)
    check_arbitrary(target, candidate)
    return _canonical_key(target), candidate


@lru_cache
def entrypoint_arbitraries() -> dict[TypeKey, object]:
    """Discover and load capabilities published under ``arbitrix.arbitraries``.

    Plugins that fail to load or validate are logged at debug level and
    skipped; they never break discovery for the others.

    Returns:
        dict[TypeKey, object]: Mapping of canonical type keys to capabilities.
    """
    arbitraries: dict[TypeKey, object] = {}
    try:
        eps = metadata.entry_points()
    # ignore JUSTIFIED: importlib metadata can fail on broken installations
    except Exception as exc:  # noqa: BLE001  # pragma: no cover
        logger.debug(
            "Failed to load entry points: %s",
            exc,
            extra=structured_extra(component=LogComponent.REGISTRY),
        )
        return arbitraries
    for entry_point in eps.select(group=ENTRY_POINT_GROUP):
        try:
            target, arbitrary = _instantiate_arbitrary(entry_point.load(), source=entry_point.name)
        # ignore JUSTIFIED: a misconfigured plugin must not hide the remaining ones
        except Exception as exc:  # noqa: BLE001
            logger.debug(
                "Failed to load arbitrary entry point '%s': %s",
                entry_point.name,
                exc,
                extra=structured_extra(
                    component=LogComponent.REGISTRY,
                    origin=ArbitraryOrigin.ENTRY_POINT,
                    details={"entry_point": entry_point.name},
                ),
            )
            continue
        arbitraries[target] = arbitrary
    return arbitraries


class ArbitraryRegistry:
    """Mapping from type keys to exactly one capability instance each.

    Args:
        settings: Generation settings shared by the builtin capabilities.
            Defaults to ``GenerationSettings()``.
        seed: Master seed for the builtin random streams. Falls back to
            ``settings.seed``; when both are None the streams are seeded from
            system entropy.
        load_entry_points: Whether to install capabilities discovered under
            the ``arbitrix.arbitraries`` entry-point group.
    """

    def __init__(
        self,
        settings: GenerationSettings | None = None,
        *,
        seed: int | None = None,
        load_entry_points: bool = False,
    ) -> None:
        self.settings = settings or GenerationSettings()
        self.seed = seed if seed is not None else self.settings.seed
        self._master = random.Random(self.seed)  # noqa: S311  # JUSTIFIED: test data generation, not cryptography
        self._entries: dict[TypeKey, _Entry] = {}
        self._install_builtins()
        if load_entry_points:
            self._install_entry_points()

    def _context(self) -> GenerationContext:
        return GenerationContext.seeded(self._master.getrandbits(64), self.settings)

    def _install_builtins(self) -> None:
        builtins: list[tuple[TypeKey, object]] = [(bool, BoolArbitrary())]
        builtins.extend((kind, IntegerArbitrary(kind, self._context())) for kind in INTEGER_KINDS)
        builtins.extend((kind, FloatArbitrary(kind, self._context())) for kind in FLOAT_KINDS)
        builtins.extend((kind, CharArbitrary(kind, self._context())) for kind in CHAR_KINDS)
        builtins.extend((kind, StringArbitrary(kind, self._context())) for kind in STRING_KINDS)
        for key, arbitrary in builtins:
            self._entries[key] = _Entry(arbitrary, ArbitraryOrigin.BUILTIN)

    def _install_entry_points(self) -> None:
        for target, arbitrary in entrypoint_arbitraries().items():
            if target in self._entries:
                logger.debug(
                    "Entry point overrides capability for %s",
                    type_key_name(target),
                    extra=structured_extra(
                        component=LogComponent.REGISTRY,
                        type_key=target,
                        origin=ArbitraryOrigin.ENTRY_POINT,
                    ),
                )
            self._entries[target] = _Entry(arbitrary, ArbitraryOrigin.ENTRY_POINT)

    def register(self, type_key: TypeKey, arbitrary: object, *, replace: bool = False) -> None:
        """Bind ``arbitrary`` to ``type_key`` after validating its shape.

        Args:
            type_key: Type the capability generates values for.
            arbitrary: Object implementing the ``Arbitrary`` protocol.
            replace: Allow overriding an existing binding.

        Raises:
            MissingCapabilityError: If ``arbitrary`` lacks an operation.
            MalformedCapabilityError: If an operation has the wrong shape.
            DuplicateCapabilityError: If ``type_key`` is already bound and
                ``replace`` is False.
        """
        key = _canonical_key(type_key)
        check_arbitrary(key, arbitrary)
        existing = self._entries.get(key)
        if existing is not None and not replace and existing.origin is not ArbitraryOrigin.DERIVED:
            raise DuplicateCapabilityError(key)
        self._drop_derived()
        self._entries[key] = _Entry(arbitrary, ArbitraryOrigin.USER)
        logger.debug(
            "Registered capability %s",
            type(arbitrary).__qualname__,
            extra=structured_extra(component=LogComponent.REGISTRY, type_key=key, origin=ArbitraryOrigin.USER),
        )

    def unregister(self, type_key: TypeKey) -> None:
        """Remove the binding for ``type_key``.

        Raises:
            MissingCapabilityError: If nothing is bound to ``type_key``.
        """
        key = _canonical_key(type_key)
        if self._entries.pop(key, None) is None:
            raise MissingCapabilityError(key)
        self._drop_derived()

    def _drop_derived(self) -> None:
        # composed arrays capture their element capability at resolve time
        stale = [key for key, entry in self._entries.items() if entry.origin is ArbitraryOrigin.DERIVED]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(
                "Dropped %d composed array capabilities",
                len(stale),
                extra=structured_extra(component=LogComponent.REGISTRY, count=len(stale)),
            )

    def __contains__(self, type_key: object) -> bool:
        try:
            self.resolve(cast("TypeKey", type_key))
        except MissingCapabilityError:
            return False
        return True

    def resolve(self, type_key: TypeKey) -> Arbitrary[Any]:
        """Return the capability bound to ``type_key``.

        Array keys are composed from the element capability and cached until
        the next ``register`` or ``unregister``.

        Raises:
            MissingCapabilityError: If no capability is bound, or an array's
                element type has none.
        """
        key = _canonical_key(type_key)
        entry = self._entries.get(key)
        if entry is not None:
            return cast("Arbitrary[Any]", entry.arbitrary)
        if isinstance(key, ArrayKind):
            try:
                element = self.resolve(key.element)
            except MissingCapabilityError as exc:
                raise MissingCapabilityError(key) from exc
            arbitrary = ArrayArbitrary(key, element, self._context())
            self._entries[key] = _Entry(arbitrary, ArbitraryOrigin.DERIVED)
            return arbitrary
        raise MissingCapabilityError(key)

    def verify(self) -> int:
        """Re-validate every bound capability.

        Returns:
            int: Number of capabilities checked.

        Raises:
            CapabilityError: On the first capability that fails validation.
        """
        for key, entry in self._entries.items():
            check_arbitrary(key, entry.arbitrary)
        count = len(self._entries)
        logger.debug(
            "Verified %d capabilities",
            count,
            extra=structured_extra(component=LogComponent.REGISTRY, count=count),
        )
        return count

    def describe(self) -> list[ArbitraryDescriptor]:
        """Return metadata for every bound capability, sorted by type name."""
        descriptors = [
            ArbitraryDescriptor(
                name=type_key_name(key),
                module=type(entry.arbitrary).__module__,
                qualified_name=type(entry.arbitrary).__qualname__,
                origin=entry.origin,
            )
            for key, entry in self._entries.items()
        ]
        descriptors.sort(key=lambda desc: desc.name)
        return descriptors

    def spawn(self, seed: int | None = None) -> ArbitraryRegistry:
        """Build an independent registry with the same user and plugin bindings.

        Builtin capabilities get fresh random streams seeded from ``seed``, or
        from this registry's master stream when ``seed`` is None.
        """
        child_seed = seed if seed is not None else self._master.getrandbits(64)
        child = ArbitraryRegistry(self.settings, seed=child_seed)
        for key, entry in self._entries.items():
            if entry.origin in {ArbitraryOrigin.USER, ArbitraryOrigin.ENTRY_POINT}:
                child._entries[key] = entry  # noqa: SLF001
        return child


@lru_cache
def default_registry() -> ArbitraryRegistry:
    """Return the process-wide registry built from discovered settings and plugins.

    The registry and the random streams of its builtin capabilities are shared
    by every caller of the module-level helpers. It is not thread-safe: give
    each thread its own registry with ``default_registry().spawn()``.
    """
    return ArbitraryRegistry(load_settings(), load_entry_points=True)


def arbitrary_for(
    type_key: TypeKey,
    *,
    registry: ArbitraryRegistry | None = None,
    replace: bool = False,
) -> Callable[[type[Any]], type[Any]]:
    """Class decorator registering an instance of the decorated class.

    The class is instantiated without arguments, validated and bound to
    ``type_key`` in ``registry`` (the default registry when None). The class
    itself is returned unchanged.
    """

    def _decorate(cls: type[Any]) -> type[Any]:
        target = registry if registry is not None else default_registry()
        target.register(type_key, cls(), replace=replace)
        return cls

    return _decorate


def resolve(type_key: TypeKey) -> Arbitrary[Any]:
    """Return the default registry's capability for ``type_key``.

    Shares ``default_registry()``; use a spawned registry per thread.
    """
    return default_registry().resolve(type_key)


def generate(type_key: type[T] | TypeKey) -> Generator[T]:
    """Return a sample generator for ``type_key`` from the default registry.

    The generator draws from the shared default registry's random stream;
    threads should use ``registry.resolve(type_key).generate()`` on their own
    spawned registry instead.
    """
    return cast("Generator[T]", resolve(type_key).generate())


def shrink(type_key: type[T] | TypeKey, value: T) -> Generator[T]:
    """Return shrink candidates for ``value`` from the default registry."""
    return cast("Generator[T]", resolve(type_key).shrink(value))


def special_cases(type_key: type[T] | TypeKey) -> Generator[T]:
    """Return boundary values for ``type_key`` from the default registry."""
    return cast("Generator[T]", resolve(type_key).special_cases())


__all__ = [
    "ENTRY_POINT_GROUP",
    "ArbitraryDescriptor",
    "ArbitraryRegistry",
    "DuplicateCapabilityError",
    "arbitrary_for",
    "default_registry",
    "entrypoint_arbitraries",
    "generate",
    "resolve",
    "shrink",
    "special_cases",
]
