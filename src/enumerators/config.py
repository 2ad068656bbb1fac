"""RegistryConfig: tuning knobs for an EnumRegistry.

RegistryConfig is a frozen (immutable) dataclass.  It governs registry
infrastructure (the size of the lookup memo) and the id comparison mode used
by ``ById.by_id``.  Enumerator materialization itself has no knobs: it is
always lazy, once per type, in declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RegistryConfig"]


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Immutable configuration for an ``EnumRegistry``.

    Attributes:
        lookup_cache_size: Maximum number of keyed lookups (``by_name``,
            ``by_id``, ``get_by``) memoized per registry.
            The memo is an LRU cache; ``0`` disables it.  Default 1024.
        loose_id_matching: When True, ``by_id`` coerces numeric strings
            before comparing (e.g. ``"2"`` matches an id of ``2``).  When
            False, ids must be equal in both type and value.  Default True.
    """

    lookup_cache_size: int = 1024
    loose_id_matching: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.lookup_cache_size, bool) or not isinstance(
            self.lookup_cache_size, int
        ):
            msg = f"lookup_cache_size must be an int, got {self.lookup_cache_size!r}"
            raise TypeError(msg)
        if self.lookup_cache_size < 0:
            msg = f"lookup_cache_size must be >= 0, got {self.lookup_cache_size}"
            raise ValueError(msg)
