"""
Binding Schema Definitions.

This module defines the core dataclasses used by the Julia input-processing
generator:
- StaticType: The static (C++) type of a bound parameter and its capabilities
- ParamData: A single bound parameter as described by the upstream tool
- Plain / MatrixLike / ObjectLike: The classification of a static type

Classifications are derived values. They are computed from a StaticType each
time code is emitted and are never stored on a ParamData.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class Category(Enum):
    """
    The three families of input processing.

    - PLAIN: Scalars, strings, enumerated options, booleans
    - MATRIX_LIKE: Native numeric containers (matrix, column, row)
    - OBJECT_LIKE: Serializable model objects passed by pointer
    """
    PLAIN = auto()
    MATRIX_LIKE = auto()
    OBJECT_LIKE = auto()


class ElementKind(Enum):
    """Element kind of a native numeric container."""
    UNSIGNED_INTEGRAL = auto()
    OTHER = auto()


class Shape(Enum):
    """Static shape of a native numeric container."""
    GENERAL = auto()
    ROW_VECTOR = auto()
    COLUMN_VECTOR = auto()


@dataclass(frozen=True)
class StaticType:
    """
    Static type of a parameter, resolved at generation time.

    Attributes:
        name: C++ spelling of the type (e.g., "arma::Mat<size_t>")
        serializable: The type supports structured serialization
        matrix: The type is a native numeric container
        elem_type: Element type of the container (e.g., "double", "size_t")
        is_row: The container is statically a single row
        is_col: The container is statically a single column
        julia_type: Julia spelling of the type, if known
    """
    name: str
    serializable: bool = False
    matrix: bool = False
    elem_type: Optional[str] = None
    is_row: bool = False
    is_col: bool = False
    julia_type: Optional[str] = None

    @classmethod
    def plain(cls, name: str, julia_type: Optional[str] = None) -> "StaticType":
        return cls(name=name, julia_type=julia_type)

    @classmethod
    def arma(cls, name: str, elem_type: str, is_row: bool = False,
             is_col: bool = False, julia_type: Optional[str] = None) -> "StaticType":
        # Native containers always carry the serialization capability.
        return cls(name=name, serializable=True, matrix=True, elem_type=elem_type,
                   is_row=is_row, is_col=is_col, julia_type=julia_type)

    @classmethod
    def model(cls, name: str, julia_type: Optional[str] = None) -> "StaticType":
        return cls(name=name, serializable=True, julia_type=julia_type)


@dataclass(frozen=True)
class ParamData:
    """
    Definition of a single bound parameter.

    Attributes:
        name: Parameter name, unique within a program (e.g., "training")
        static_type: Static type of the parameter
        required: If False, the generated code is guarded by a null check
        cpp_type: Underlying type name used for ObjectLike accessor names;
                  defaults to static_type.name
        julia_type: Julia type to convert to; overrides static_type.julia_type
        description: Human-readable description (not emitted)
    """
    name: str
    static_type: StaticType
    required: bool = False
    cpp_type: Optional[str] = None
    julia_type: Optional[str] = None
    description: str = ""

    @property
    def underlying_type_name(self) -> str:
        """Type name that ObjectLike accessors are built from."""
        return self.cpp_type if self.cpp_type is not None else self.static_type.name


@dataclass(frozen=True)
class Plain:
    """Classification of a plain value (scalar, string, option, flag)."""

    @property
    def category(self) -> Category:
        return Category.PLAIN


@dataclass(frozen=True)
class MatrixLike:
    """Classification of a native numeric container."""
    element_kind: ElementKind
    shape: Shape

    @property
    def category(self) -> Category:
        return Category.MATRIX_LIKE

    @property
    def element_is_unsigned_integral(self) -> bool:
        return self.element_kind == ElementKind.UNSIGNED_INTEGRAL


@dataclass(frozen=True)
class ObjectLike:
    """Classification of a serializable object type."""
    type_name: str

    @property
    def category(self) -> Category:
        return Category.OBJECT_LIKE


TypeClassification = Union[Plain, MatrixLike, ObjectLike]
