"""EnumRegistry: lazy, once-per-type cache of materialized enumerators.

The registry owns every enumerator instance.  The first call touching a type
(``values()``, ``first()``, ``by_name()``, ``Color.RED``...) materializes the
whole type in declaration order:

1. The type's ``_declared_enumerators()`` hook yields its
   ``EnumeratorDefinition``.
2. Each ``(name, payload)`` entry is built through ``_create_instance`` and
   then bound to its ``name``, ``ordinal`` and ``value``.  Binding seals the
   instance.
3. The resulting tuple is stored and returned on every later call; it is the
   same object each time and constructors never run again.

Population is thread-safe.  Each type has its own re-entrant lock created
under a registry-wide guard, and the tuple is published only once it is
complete, so concurrent first accesses construct exactly once and never see a
partial sequence.  A constructor that touches its own type while being
materialized gets a ``ConstructionError`` instead of recursing forever.

A failed population caches nothing, so the next access retries.

Keyed lookups (``lookup``) are memoized in a bounded ``cachetools.LRUCache``.
Only hits are stored; a miss always rescans.  Eviction is silent.

Example::

    from enumerators.registry import EnumRegistry

    registry = EnumRegistry()
    registry.get_instances(Color)        # builds RED, GREEN, BLUE
    registry.get_instances(Color)        # same tuple, nothing rebuilt
    registry.is_materialized(Color)      # True
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

from enumerators.config import RegistryConfig
from enumerators.errors import ConstructionError

if TYPE_CHECKING:
    from enumerators.base import Enumeration
    from enumerators.definition import EnumeratorDefinition

__all__ = ["EnumRegistry", "default_registry"]

logger = logging.getLogger(__name__)


class EnumRegistry:
    """Per-type instance cache plus a memo of keyed lookups.

    Args:
        config: Registry configuration.  Defaults to ``RegistryConfig()``
            when None.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self._config: RegistryConfig = (
            config if config is not None else RegistryConfig()
        )
        self._instances: dict[type, tuple[Enumeration, ...]] = {}
        self._locks: dict[type, threading.RLock] = {}
        self._guard = threading.Lock()
        self._building = threading.local()

        self._lookups: LRUCache[tuple[Any, ...], Enumeration] | None = None
        if self._config.lookup_cache_size:
            self._lookups = LRUCache(maxsize=self._config.lookup_cache_size)
        self._lookups_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def memoized_lookups(self) -> int:
        """The current number of memoized lookups."""
        if self._lookups is None:
            return 0
        with self._lookups_lock:
            return int(self._lookups.currsize)

    # ------------------------------------------------------------------
    # Instance cache
    # ------------------------------------------------------------------

    def is_materialized(self, enum_type: type) -> bool:
        """Return True once ``enum_type``'s enumerators have been built."""
        return enum_type in self._instances

    def get_instances(self, enum_type: type[Enumeration]) -> tuple[Enumeration, ...]:
        """Return the ordered enumerators of ``enum_type``, building them once.

        Args:
            enum_type: A concrete enumeration type.

        Returns:
            The cached tuple of enumerators in declaration order.  Every call
            for the same type returns the same tuple object.

        Raises:
            ConstructionError: If the type has no usable declaration, a
                constructor rejects its payload, or the type is accessed from
                its own constructors during materialization.
        """
        instances = self._instances.get(enum_type)
        if instances is not None:
            return instances

        building = self._types_in_construction()
        if enum_type in building:
            msg = "accessed its own enumerators while they were being constructed"
            raise ConstructionError(enum_type, msg)

        with self._lock_for(enum_type):
            instances = self._instances.get(enum_type)
            if instances is None:
                building.add(enum_type)
                try:
                    instances = self._materialize(enum_type)
                finally:
                    building.discard(enum_type)
                self._instances[enum_type] = instances
        return instances

    def _types_in_construction(self) -> set[type]:
        building: set[type] | None = getattr(self._building, "types", None)
        if building is None:
            building = set()
            self._building.types = building
        return building

    def _lock_for(self, enum_type: type) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(enum_type)
            if lock is None:
                lock = threading.RLock()
                self._locks[enum_type] = lock
            return lock

    def _materialize(self, enum_type: type[Enumeration]) -> tuple[Enumeration, ...]:
        declared = getattr(enum_type, "_declared_enumerators", None)
        if declared is None:
            raise ConstructionError(enum_type, "is not an enumeration type")
        definition: EnumeratorDefinition = declared()

        instances: list[Enumeration] = []
        for ordinal, (name, payload) in enumerate(definition):
            try:
                instance = enum_type._create_instance(payload)
            except ConstructionError:
                raise
            except Exception as exc:
                msg = f"constructor rejected payload {payload!r}: {exc}"
                raise ConstructionError(enum_type, msg, name) from exc
            if type(instance) is not enum_type:
                msg = (
                    f"_create_instance returned {type(instance).__name__}, "
                    f"expected {enum_type.__name__}"
                )
                raise ConstructionError(enum_type, msg, name)
            instance._bind(name, ordinal, payload)
            instances.append(instance)

        logger.debug(
            "Materialized enumerators",
            extra={
                "enum_type": enum_type.__qualname__,
                "n_enumerators": len(instances),
            },
        )
        return tuple(instances)

    # ------------------------------------------------------------------
    # Keyed lookups
    # ------------------------------------------------------------------

    def lookup(
        self,
        enum_type: type[Enumeration],
        field: str,
        value: Any,
        predicate: Callable[[Any], bool],
        *,
        kind: str = "attr",
    ) -> Enumeration | None:
        """Return the first enumerator matching a keyed query, or None.

        ``predicate`` must be fully determined by ``(kind, field, value)``: the
        result is memoized under
        ``(enum_type, kind, field, type(value), value)``.  Unhashable values
        are scanned every time.

        Args:
            enum_type: The enumeration type to search.
            field: Name of the queried field, part of the memo key.
            value: Queried value, part of the memo key.
            predicate: Match test applied to each enumerator in order.
            kind: Tag naming the lookup that built ``predicate``, so lookups
                sharing a field label (``get_by("id", ...)`` and ``by_id``)
                never share memo entries.

        Returns:
            The earliest-declared match, or None.
        """
        key: tuple[Any, ...] | None = (enum_type, kind, field, type(value), value)
        try:
            hash(key)
        except TypeError:
            key = None

        if key is not None and self._lookups is not None:
            with self._lookups_lock:
                hit = self._lookups.get(key)
            if hit is not None:
                return hit

        for instance in self.get_instances(enum_type):
            if predicate(instance):
                if key is not None and self._lookups is not None:
                    with self._lookups_lock:
                        self._lookups[key] = instance
                return instance
        return None


# Process-wide registry used by every enumeration type that does not pick its
# own with the ``registry=`` class keyword.
default_registry = EnumRegistry()
