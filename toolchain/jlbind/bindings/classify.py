"""
Static Type Classification.

Assigns every static type to exactly one of three categories:

- PLAIN:       the type does not support structured serialization
- MATRIX_LIKE: the type is a native numeric container
- OBJECT_LIKE: the type supports serialization and is not a container

The three predicates are evaluated independently. A well-formed type matches
exactly one of them; anything else is an inconsistency in the upstream type
model and raises ConfigurationError.
"""

from typing import Optional

from ..config import GeneratorConfig, DEFAULT_CONFIG
from .errors import ConfigurationError, ambiguous_type_error, shape_error
from .schema import (
    Category, ElementKind, Shape, StaticType,
    Plain, MatrixLike, ObjectLike, TypeClassification,
)


def _matching_categories(static_type: StaticType):
    matches = []
    if not static_type.serializable:
        matches.append(Category.PLAIN)
    if static_type.matrix:
        matches.append(Category.MATRIX_LIKE)
    if static_type.serializable and not static_type.matrix:
        matches.append(Category.OBJECT_LIKE)
    return matches


def _classify_matrix(static_type: StaticType, config: GeneratorConfig) -> MatrixLike:
    if static_type.elem_type is None:
        raise ConfigurationError(shape_error(static_type.name, "container has no element type"))
    if static_type.is_row and static_type.is_col:
        raise ConfigurationError(shape_error(static_type.name, "cannot be both a row and a column"))

    if static_type.elem_type in config.unsigned_elem_types:
        element_kind = ElementKind.UNSIGNED_INTEGRAL
    else:
        element_kind = ElementKind.OTHER

    if static_type.is_row:
        shape = Shape.ROW_VECTOR
    elif static_type.is_col:
        shape = Shape.COLUMN_VECTOR
    else:
        shape = Shape.GENERAL

    return MatrixLike(element_kind=element_kind, shape=shape)


def classify(static_type: StaticType, config: Optional[GeneratorConfig] = None) -> TypeClassification:
    """
    Classify a static type.

    Args:
        static_type: The type to classify
        config: Generator configuration (decides which element types count
                as unsigned integral)

    Returns:
        A Plain, MatrixLike or ObjectLike classification.

    Raises:
        ConfigurationError: If the type matches zero or several categories,
            or a container has inconsistent shape information.
    """
    config = config or DEFAULT_CONFIG

    matches = _matching_categories(static_type)
    if len(matches) != 1:
        raise ConfigurationError(ambiguous_type_error(static_type.name, [m.name for m in matches]))

    category = matches[0]
    if category == Category.MATRIX_LIKE:
        return _classify_matrix(static_type, config)
    if category == Category.OBJECT_LIKE:
        return ObjectLike(type_name=static_type.name)
    return Plain()
