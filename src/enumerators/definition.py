"""EnumeratorDefinition: the ordered name -> payload declaration of a type.

A concrete enumeration declares its constants once, at class-definition
time.  ``EnumeratorDefinition.from_declaration`` turns that raw declaration
(a mapping, or an iterable of ``(name, payload)`` pairs) into a validated,
immutable, order-preserving sequence of entries.

Payload shape decides how the enumerator's constructor is called:

- ``tuple`` / ``list``: elements become positional arguments, in order.
  An empty tuple means the constructor takes no arguments.
- anything else (including ``str``): the payload is the sole argument.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from enumerators.errors import ConstructionError

__all__ = ["EnumeratorDefinition", "constructor_args"]


def constructor_args(payload: Any) -> tuple[Any, ...]:
    """Return the positional constructor arguments for a declared payload."""
    if isinstance(payload, (tuple, list)):
        return tuple(payload)
    return (payload,)


def _pairs(owner: type, declaration: Any) -> list[tuple[Any, Any]]:
    if isinstance(declaration, Mapping):
        return list(declaration.items())
    if isinstance(declaration, (str, bytes)) or not isinstance(declaration, Iterable):
        msg = (
            "declaration must be a mapping or an iterable of (name, payload) "
            f"pairs, got {type(declaration).__name__}"
        )
        raise ConstructionError(owner, msg)

    pairs: list[tuple[Any, Any]] = []
    for item in declaration:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            msg = f"declaration entry {item!r} is not a (name, payload) pair"
            raise ConstructionError(owner, msg)
        pairs.append((item[0], item[1]))
    return pairs


@dataclass(frozen=True, slots=True)
class EnumeratorDefinition:
    """Validated, ordered declaration of one enumeration type.

    Attributes:
        entries: ``(name, payload)`` pairs in declaration order.  Names are
            unique identifiers.
    """

    entries: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def from_declaration(cls, owner: type, declaration: Any) -> EnumeratorDefinition:
        """Validate a raw declaration for ``owner``.

        Args:
            owner: The enumeration type the declaration belongs to.  Only used
                to attribute errors.
            declaration: A mapping of name to payload, or an iterable of
                ``(name, payload)`` pairs.

        Returns:
            An ``EnumeratorDefinition`` preserving declaration order.

        Raises:
            ConstructionError: If the declaration is neither a mapping nor an
                iterable of pairs, a name is not a valid identifier, or a name
                is declared twice.
        """
        seen: set[str] = set()
        entries: list[tuple[str, Any]] = []
        for name, payload in _pairs(owner, declaration):
            if not isinstance(name, str) or not name.isidentifier():
                msg = f"enumerator name must be an identifier string, got {name!r}"
                raise ConstructionError(owner, msg)
            if name in seen:
                raise ConstructionError(owner, "declared more than once", name)
            seen.add(name)
            entries.append((name, payload))
        return cls(tuple(entries))

    def merged(self, other: EnumeratorDefinition) -> EnumeratorDefinition:
        """Return this definition extended by ``other``.

        Entries of ``other`` whose names already exist here replace the payload
        in place; new names are appended in ``other``'s order.
        """
        combined = dict(self.entries)
        combined.update(other.entries)
        return EnumeratorDefinition(tuple(combined.items()))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return any(name == declared for declared, _ in self.entries)
