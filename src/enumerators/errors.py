"""Error hierarchy for enumeration lookup and materialization.

Two failure kinds exist.  ``EnumeratorNotFound`` is raised by keyed lookups
(``by_name``, ``by_id``, ``by_ordinal``, ``get_by``) that match nothing.
``ConstructionError`` is raised while a type's enumerators are being
materialized.  Predicate scans (``first``, ``has``) never raise either: they
report an absent match as ``None`` / ``False``.
"""

from __future__ import annotations

from typing import Any

__all__ = ["ConstructionError", "EnumError", "EnumeratorNotFound"]


def _type_name(declaring_type: type) -> str:
    return getattr(declaring_type, "__qualname__", repr(declaring_type))


class EnumError(Exception):
    """Base class for all errors raised by the enumerators package."""


class EnumeratorNotFound(EnumError, LookupError):
    """Raised when a keyed lookup finds no enumerator.

    Attributes:
        declaring_type: The enumeration type that was searched.
        field: The queried field (``"name"``, ``"id"``, ``"ordinal"`` or a
            custom discriminant).
        value: The queried value, as supplied by the caller.
    """

    def __init__(self, declaring_type: type, field: str, value: Any) -> None:
        self.declaring_type = declaring_type
        self.field = field
        self.value = value
        super().__init__(
            f"No enumerator of {_type_name(declaring_type)} with {field}={value!r}"
        )

    @property
    def query(self) -> dict[str, Any]:
        """The failed query as a ``{field: value}`` mapping."""
        return {self.field: self.value}


class ConstructionError(EnumError):
    """Raised when a type's enumerators cannot be materialized.

    Covers a missing or malformed declaration as well as constructors that
    reject their payload.  The original exception, if any, is chained as
    ``__cause__``.

    Attributes:
        declaring_type: The enumeration type being materialized.
        enumerator: Name of the constant being built when the failure
            happened, or None when the declaration itself is at fault.
    """

    def __init__(
        self,
        declaring_type: type,
        message: str,
        enumerator: str | None = None,
    ) -> None:
        self.declaring_type = declaring_type
        self.enumerator = enumerator
        where = _type_name(declaring_type)
        if enumerator is not None:
            where = f"{where}.{enumerator}"
        super().__init__(f"{where}: {message}")
