"""Enumerators - named, ordered, singleton-valued constants with payloads."""

from __future__ import annotations

from enumerators.base import Enumeration, EnumerationMeta
from enumerators.by_id import ById
from enumerators.config import RegistryConfig
from enumerators.definition import EnumeratorDefinition
from enumerators.errors import ConstructionError, EnumError, EnumeratorNotFound
from enumerators.protocols import Identified
from enumerators.registry import EnumRegistry, default_registry

__version__: str = "0.1.0"
__all__: list[str] = [
    "ById",
    "ConstructionError",
    "EnumError",
    "EnumRegistry",
    "EnumeratorDefinition",
    "EnumeratorNotFound",
    "Enumeration",
    "EnumerationMeta",
    "Identified",
    "RegistryConfig",
    "default_registry",
]
