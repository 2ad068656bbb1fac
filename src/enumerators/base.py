"""Enumeration: base class for closed sets of named, ordered singletons.

A concrete enumeration declares its constants in the class body.  Each
constant's value is the construction payload of one enumerator; the class's
own ``__init__`` turns that payload into fields::

    class Planet(Enumeration):
        MERCURY = (3.303e23, 2.4397e6)
        VENUS = (4.869e24, 6.0518e6)

        def __init__(self, mass: float, radius: float) -> None:
            self.mass = mass
            self.radius = radius

    Planet.VENUS.ordinal        # 1
    Planet.by_name("MERCURY")   # <Planet.MERCURY: ordinal=0>
    [p.name for p in Planet]    # ["MERCURY", "VENUS"]

Constants are public ALL-UPPERCASE class attributes that are neither
descriptors nor classes.  A class may instead provide an explicit
``__enumerators__`` table (a mapping or a list of ``(name, payload)`` pairs),
which is the only way to declare names that are not upper case.

The metaclass lifts the declared constants out of the class namespace when
the class is created.  Nothing is constructed until the first access; see
``enumerators.registry`` for materialization and caching.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from typing import Any, ClassVar, Self

from enumerators.definition import EnumeratorDefinition, constructor_args
from enumerators.errors import ConstructionError, EnumeratorNotFound
from enumerators.registry import EnumRegistry, default_registry

__all__ = ["Enumeration", "EnumerationMeta"]

_DECLARATION_TABLE = "__enumerators__"
_OWN_DECLARATION = "_own_declaration"
_DEFINITION = "_enumerator_definition"
_MISSING = object()


def _is_constant(key: str, value: Any) -> bool:
    if key.startswith("_") or not key.isupper():
        return False
    return not isinstance(value, type) and not hasattr(value, "__get__")


def _collect_declaration(namespace: dict[str, Any]) -> Any:
    """Pop the declared constants out of a class body namespace."""
    if _DECLARATION_TABLE in namespace:
        return namespace.pop(_DECLARATION_TABLE)
    constants = {
        key: value for key, value in namespace.items() if _is_constant(key, value)
    }
    for key in constants:
        del namespace[key]
    return constants


def _restore(enum_type: type[Enumeration], name: str) -> Enumeration:
    """Unpickle an enumerator as the cached instance of its type."""
    return enum_type.by_name(name)


class EnumerationMeta(type):
    """Metaclass capturing declarations and giving types a container protocol.

    Accepts a ``registry`` class keyword selecting the ``EnumRegistry`` that
    caches the type's enumerators::

        class Strict(Enumeration, registry=EnumRegistry(config)):
            ...
    """

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *,
        registry: EnumRegistry | None = None,
        **kwargs: Any,
    ) -> EnumerationMeta:
        namespace = dict(namespace)
        # The root class declares nothing and stays abstract.
        if bases:
            namespace[_OWN_DECLARATION] = _collect_declaration(namespace)
        if registry is not None:
            namespace["__registry__"] = registry
        return super().__new__(mcs, name, bases, namespace, **kwargs)

    def __init__(
        cls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *,
        registry: EnumRegistry | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, bases, namespace, **kwargs)

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        msg = (
            f"{cls.__qualname__} is an enumeration and cannot be instantiated; "
            f"use {cls.__qualname__}.by_name() or its constants"
        )
        raise TypeError(msg)

    def __getattr__(cls, name: str) -> Any:
        if name.startswith("_") or not cls._is_concrete():
            raise AttributeError(name)
        msg = f"type object {cls.__qualname__!r} has no attribute {name!r}"
        try:
            declared = cls._declared_enumerators()
        except ConstructionError as exc:
            raise AttributeError(msg) from exc
        if name not in declared:
            raise AttributeError(msg)
        return cls.by_name(name)

    def __getitem__(cls, name: str) -> Any:
        return cls.by_name(name)

    def __iter__(cls) -> Iterator[Any]:
        return iter(cls.values())

    def __len__(cls) -> int:
        return len(cls.values())

    def __contains__(cls, item: object) -> bool:
        return any(item == member for member in cls.values())

    def __bool__(cls) -> bool:
        # len() must not decide truthiness: empty or abstract types are still types.
        return True


@functools.total_ordering
class Enumeration(metaclass=EnumerationMeta):
    """Base class of every enumeration type.

    Enumerators are equal when they share a declaring type and a name, and
    are ordered by ordinal within their type.  Once bound by the registry an
    enumerator is sealed: assigning or deleting attributes raises
    ``AttributeError``.

    Subclasses receive their payload through ``__init__``.  The default
    ``__init__`` accepts any payload and keeps nothing; the raw payload stays
    available as ``value``.  ``name``, ``ordinal``, ``declaring_type`` and
    ``value`` are reserved and must not be assigned by constructors.
    """

    __registry__: ClassVar[EnumRegistry] = default_registry

    _bound: bool = False
    _name: str
    _ordinal: int
    _value: Any

    def __init__(self, *args: Any) -> None:
        pass

    # ------------------------------------------------------------------
    # Declaration and construction hooks (used by EnumRegistry)
    # ------------------------------------------------------------------

    @classmethod
    def _is_concrete(cls) -> bool:
        return any(_OWN_DECLARATION in vars(klass) for klass in cls.__mro__)

    @classmethod
    def _declared_enumerators(cls) -> EnumeratorDefinition:
        """Return the type's definition, inherited declarations first.

        Raises:
            ConstructionError: If no class in the MRO declares enumerators,
                or a declaration is malformed.
        """
        cached: EnumeratorDefinition | None = vars(cls).get(_DEFINITION)
        if cached is not None:
            return cached
        if not cls._is_concrete():
            raise ConstructionError(cls, "is abstract and declares no enumerators")
        definition = EnumeratorDefinition()
        for klass in reversed(cls.__mro__):
            if _OWN_DECLARATION in vars(klass):
                own = EnumeratorDefinition.from_declaration(
                    klass, vars(klass)[_OWN_DECLARATION]
                )
                definition = definition.merged(own)
        # Declarations are read once; only a valid definition is kept.
        setattr(cls, _DEFINITION, definition)
        return definition

    @classmethod
    def _create_instance(cls, payload: Any) -> Self:
        """Construct one enumerator from its declared payload."""
        return type.__call__(cls, *constructor_args(payload))

    def _bind(self, name: str, ordinal: int, payload: Any) -> None:
        if self._bound:
            msg = f"{self} is already bound"
            raise AttributeError(msg)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_ordinal", ordinal)
        object.__setattr__(self, "_value", payload)
        object.__setattr__(self, "_bound", True)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """The declared constant name."""
        return self._name

    @property
    def ordinal(self) -> int:
        """Zero-based position in declaration order."""
        return self._ordinal

    @property
    def declaring_type(self) -> type[Self]:
        return type(self)

    @property
    def value(self) -> Any:
        """The payload exactly as declared."""
        return self._value

    def equals(self, other: object) -> bool:
        """Return True if ``other`` has the same declaring type and name."""
        if not isinstance(other, Enumeration):
            return False
        return type(self) is type(other) and self._name == other._name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self), self._name))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Enumeration) or type(self) is not type(other):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __str__(self) -> str:
        return f"{type(self).__qualname__}::{self._name}"

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__}.{self._name}: ordinal={self._ordinal}>"

    # ------------------------------------------------------------------
    # Immutability and singleton preservation
    # ------------------------------------------------------------------

    def __setattr__(self, key: str, value: Any) -> None:
        if self._bound:
            msg = f"cannot set {key!r}: {self} is immutable"
            raise AttributeError(msg)
        object.__setattr__(self, key, value)

    def __delattr__(self, key: str) -> None:
        if self._bound:
            msg = f"cannot delete {key!r}: {self} is immutable"
            raise AttributeError(msg)
        object.__delattr__(self, key)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return _restore, (type(self), self._name)

    # ------------------------------------------------------------------
    # Iteration and lookup
    # ------------------------------------------------------------------

    @classmethod
    def values(cls) -> tuple[Self, ...]:
        """Return every enumerator of this type in declaration order.

        The tuple is built on first access and the same object is returned on
        every later call.

        Raises:
            ConstructionError: If the enumerators cannot be materialized.
        """
        return cls.__registry__.get_instances(cls)  # type: ignore[return-value]

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.name for member in cls.values())

    @classmethod
    def first(cls, predicate: Callable[[Self], bool] | None = None) -> Self | None:
        """Return the earliest-declared enumerator passing ``predicate``.

        Args:
            predicate: Truth test applied in declaration order.  When None,
                the first enumerator is returned.

        Returns:
            The first match, or None if nothing matches or the type declares
            no enumerators.
        """
        for member in cls.values():
            if predicate is None or predicate(member):
                return member
        return None

    @classmethod
    def has(cls, predicate: Callable[[Self], bool]) -> bool:
        """Return True if any enumerator passes ``predicate``."""
        return cls.first(predicate) is not None

    @classmethod
    def by_name(cls, name: str) -> Self:
        """Return the enumerator declared as ``name``.

        Raises:
            EnumeratorNotFound: If no enumerator has that exact name.
        """
        return cls._find_by("name", name, lambda member: member.name == name)

    @classmethod
    def by_ordinal(cls, ordinal: int) -> Self:
        """Return the enumerator at position ``ordinal``.

        Raises:
            EnumeratorNotFound: If ``ordinal`` is not an int in ``0..len-1``.
        """
        if isinstance(ordinal, int) and not isinstance(ordinal, bool):
            members = cls.values()
            if 0 <= ordinal < len(members):
                return members[ordinal]
        raise EnumeratorNotFound(cls, "ordinal", ordinal)

    @classmethod
    def get_by(
        cls,
        field: str,
        value: Any,
        predicate: Callable[[Self], bool] | None = None,
    ) -> Self:
        """Return the first enumerator whose ``field`` equals ``value``.

        This is the building block for custom discriminant accessors::

            @classmethod
            def by_code(cls, code: str) -> Currency:
                return cls.get_by("code", code)

        Args:
            field: Attribute to compare.  Also reported on failure.
            value: Value the attribute must equal.
            predicate: Optional custom match test replacing the attribute
                comparison.  Custom predicates are not memoized.

        Raises:
            EnumeratorNotFound: If nothing matches.
        """
        if predicate is None:
            return cls._find_by(
                field,
                value,
                lambda member: getattr(member, field, _MISSING) == value,
            )
        match = cls.first(predicate)
        if match is None:
            raise EnumeratorNotFound(cls, field, value)
        return match

    @classmethod
    def _find_by(
        cls,
        field: str,
        value: Any,
        predicate: Callable[[Self], bool],
        kind: str = "attr",
    ) -> Self:
        match = cls.__registry__.lookup(cls, field, value, predicate, kind=kind)
        if match is None:
            raise EnumeratorNotFound(cls, field, value)
        return match  # type: ignore[return-value]
