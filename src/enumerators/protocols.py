"""Identified Protocol: the optional id capability of an enumeration.

Any enumerator exposing an ``id()`` accessor satisfies this protocol
structurally; ``ById`` relies only on that method.

Example::

    from enumerators.protocols import Identified

    class Role(ById, Enumeration):
        ADMIN = 1

        def __init__(self, code: int) -> None:
            self.code = code

        def id(self) -> int:
            return self.code

    assert isinstance(Role.ADMIN, Identified)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["Identified"]


@runtime_checkable
class Identified(Protocol):
    """Structural protocol for enumerators that can be looked up by id.

    ``id()`` must be deterministic for a given enumerator: ``by_id`` results
    are memoized by the registry.
    """

    def id(self) -> str | int: ...
