"""ById: mixin adding ``by_id`` lookup to an enumeration.

Mix ``ById`` into an ``Enumeration`` subclass and implement ``id()``::

    class HttpStatus(ById, Enumeration):
        OK = (200, "OK")
        NOT_FOUND = (404, "Not Found")

        def __init__(self, code: int, reason: str) -> None:
            self.code = code
            self.reason = reason

        def id(self) -> int:
            return self.code

    HttpStatus.by_id(404)     # <HttpStatus.NOT_FOUND: ordinal=1>
    HttpStatus.by_id("404")   # same enumerator: numeric strings match loosely

Id comparison is loose unless the type's registry was configured with
``RegistryConfig(loose_id_matching=False)``; see ``enumerators.coercion``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from enumerators.coercion import ids_match

if TYPE_CHECKING:
    from enumerators.protocols import Identified
    from enumerators.registry import EnumRegistry

__all__ = ["ById"]


class ById:
    """Id lookup for enumerations whose enumerators implement ``id()``."""

    if TYPE_CHECKING:
        __registry__: EnumRegistry

        @classmethod
        def _find_by(
            cls, field: str, value: Any, predicate: Any, kind: str = ...
        ) -> Self: ...

    def id(self) -> str | int:
        msg = f"{type(self).__qualname__} must implement id() to support by_id()"
        raise NotImplementedError(msg)

    @classmethod
    def by_id(cls, id_: str | int) -> Self:
        """Return the first enumerator whose ``id()`` matches ``id_``.

        Raises:
            EnumeratorNotFound: If no enumerator's id matches.
        """
        loose = cls.__registry__.config.loose_id_matching

        def matches(member: Identified) -> bool:
            return ids_match(id_, member.id(), loose=loose)

        return cls._find_by("id", id_, matches, kind="id")
