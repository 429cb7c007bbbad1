"""
Static Type Catalog.

Central storage for the static types the native engine exposes to bindings,
together with their Julia spellings. This module provides the TypeRegistry
class and the global TYPES instance, populated and frozen at import time.

Usage
-----
    from jlbind.bindings.types import TYPES, get_julia_type

    st = TYPES.resolve("arma::Row<size_t>")
    get_julia_type(st)   # "Array{UInt, 1}"

Model types are not part of the catalog; they are declared per program with
StaticType.model().
"""

from types import MappingProxyType
from typing import Dict, List, Mapping

from rapidfuzz import process, fuzz

from .errors import ConfigurationError, unknown_type_error
from .formatting import strip_type
from .schema import StaticType


class RegistryFrozenError(RuntimeError):
    """Raised when attempting to modify a frozen registry."""


# Julia spellings of container element types.
_JULIA_ELEM_TYPES = {
    "double": "Float64",
    "float": "Float32",
    "size_t": "UInt",
    "int": "Int",
}


class TypeRegistry:
    """
    Registry of known static types keyed by their C++ spelling.

    The registry can be frozen after initialization to prevent further
    modifications.
    """

    def __init__(self):
        self._types: Dict[str, StaticType] = {}
        self._frozen: bool = False
        self._types_proxy: Mapping[str, StaticType] = None

    def freeze(self) -> None:
        """Freeze the registry. Idempotent."""
        if not self._frozen:
            self._frozen = True
            self._types_proxy = MappingProxyType(self._types)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(self, static_type: StaticType) -> None:
        """
        Register a static type.

        Registering an identical definition twice is a no-op.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            ValueError: If the name is already registered with a different
                definition.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{static_type.name}': registry is frozen."
            )

        existing = self._types.get(static_type.name)
        if existing is not None:
            if existing != static_type:
                raise ValueError(f"Conflicting definitions for '{static_type.name}'")
            return

        self._types[static_type.name] = static_type

    @property
    def all_types(self) -> Mapping[str, StaticType]:
        if self._frozen and self._types_proxy is not None:
            return self._types_proxy
        return self._types

    def resolve(self, name: str) -> StaticType:
        """
        Look up a static type by its C++ spelling.

        Raises:
            ConfigurationError: If the type is not in the catalog.
        """
        try:
            return self._types[name]
        except KeyError:
            raise ConfigurationError(unknown_type_error(name, self.suggest(name))) from None

    def suggest(self, name: str, limit: int = 3, min_score: int = 60) -> List[str]:
        """Known type names similar to `name`, best match first."""
        if not name or not self._types:
            return []

        matches = process.extract(name, list(self._types), scorer=fuzz.ratio, limit=limit)
        return [match for match, score, _ in matches if score >= min_score]


def get_julia_type(static_type: StaticType) -> str:
    """
    Return the Julia spelling of a static type.

    Explicit spellings win. Containers without one become
    Array{<elem>, 1} for rows and columns and Array{<elem>, 2} otherwise;
    model types fall back to their stripped C++ name.

    Raises:
        ConfigurationError: If no spelling can be derived.
    """
    if static_type.julia_type:
        return static_type.julia_type

    if static_type.matrix and static_type.elem_type in _JULIA_ELEM_TYPES:
        dims = 1 if (static_type.is_row or static_type.is_col) else 2
        return f"Array{{{_JULIA_ELEM_TYPES[static_type.elem_type]}, {dims}}}"

    if static_type.serializable and not static_type.matrix:
        stripped = strip_type(static_type.name)
        if stripped:
            return stripped

    raise ConfigurationError(f"No Julia type known for '{static_type.name}'")


def _register_defaults(registry: TypeRegistry) -> None:
    for name, julia in [
        ("bool",                     "Bool"),
        ("int",                      "Int"),
        ("size_t",                   "UInt"),
        ("float",                    "Float32"),
        ("double",                   "Float64"),
        ("std::string",              "String"),
        ("std::vector<std::string>", "Vector{String}"),
        ("std::vector<int>",         "Vector{Int}"),
    ]:
        registry.register(StaticType.plain(name, julia_type=julia))

    for name, elem, is_row, is_col in [
        ("arma::mat",         "double", False, False),
        ("arma::Mat<size_t>", "size_t", False, False),
        ("arma::vec",         "double", False, True),
        ("arma::rowvec",      "double", True,  False),
        ("arma::Col<size_t>", "size_t", False, True),
        ("arma::Row<size_t>", "size_t", True,  False),
    ]:
        st = StaticType.arma(name, elem, is_row=is_row, is_col=is_col)
        registry.register(StaticType.arma(name, elem, is_row=is_row, is_col=is_col,
                                          julia_type=get_julia_type(st)))


# Global catalog - populated and frozen at import time
TYPES = TypeRegistry()
_register_defaults(TYPES)
TYPES.freeze()
