"""
Name and Indentation Helpers.

Pure helpers shared by the emitters: accessor suffixes for native containers,
identifier-safe stripping of C++ type names, and indentation strings.
"""

import re

from .schema import ElementKind, Shape


_SHAPE_SUFFIX = {
    Shape.GENERAL: "",
    Shape.ROW_VECTOR: "Row",
    Shape.COLUMN_VECTOR: "Col",
}

_QUALIFIERS = ("const", "volatile", "struct", "class", "typename")
_QUALIFIER_RE = re.compile(r"\b(?:" + "|".join(_QUALIFIERS) + r")\b")
_EMPTY_ARGS_RE = re.compile(r"<\s*>")
_NAMESPACE_RE = re.compile(r"(?:\b[A-Za-z_]\w*\s*)?::\s*")
_PUNCT_SPACE_RE = re.compile(r"\s*([<>,])\s*")
_INVALID_RE = re.compile(r"[^A-Za-z0-9_]")


def suffix(element_kind: ElementKind, shape: Shape, unsigned_marker: str = "U") -> str:
    """
    Accessor suffix for a native container.

    The unsigned marker (if any) always precedes the shape suffix, so an
    unsigned row gives "URow" and a general double matrix gives "".
    """
    marker = unsigned_marker if element_kind == ElementKind.UNSIGNED_INTEGRAL else ""
    return marker + _SHAPE_SUFFIX[shape]


def strip_type(cpp_type: str) -> str:
    """
    Collapse a C++ type name into a bare identifier.

    Namespace qualifiers, cv/elaborated qualifiers, pointer or reference marks
    and empty template argument lists are dropped. Remaining template
    arguments are kept so that distinct instantiations stay distinct: each
    `<`, `>` and `,` (and any other character that cannot appear in an
    identifier) becomes an underscore.

        >>> strip_type("mlpack::LinearRegression<>*")
        'LinearRegression'
        >>> strip_type("mlpack::hmm::HMMModel<GMM>")
        'HMMModel_GMM_'

    Returns an empty string when no type name is left.
    """
    stripped = _QUALIFIER_RE.sub(" ", cpp_type)
    stripped = stripped.replace("*", " ").replace("&", " ")
    stripped = _EMPTY_ARGS_RE.sub("", stripped)
    stripped = _NAMESPACE_RE.sub("", stripped)
    stripped = _PUNCT_SPACE_RE.sub(r"\1", stripped).strip()

    if not stripped or not (stripped[0].isalpha() or stripped[0] == "_"):
        return ""

    return _INVALID_RE.sub("_", stripped)


def indent(level: int) -> str:
    """Return `level` spaces."""
    if level < 0:
        raise ValueError(f"Indentation level must be >= 0, got {level}")
    return " " * level
