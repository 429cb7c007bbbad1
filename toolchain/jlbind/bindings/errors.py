"""
Error Types and Message Formatting for Binding Generation.

All generation failures are static defects in the upstream type or parameter
model. They are raised immediately and never recovered from; the affected
program produces no output at all.

Error Message Format
--------------------
- Parameter and type names in single quotes: 'param_name'
- Clear description of the problem
- The offending value if relevant: got <value>

Examples:
- "Type 'arma::mat' matches more than one category: PLAIN, MATRIX_LIKE"
- "Parameter 'model' has type 'const <>' with no usable identifier"
- "Duplicate parameter 'lambda' in program 'linear_regression'"
"""

from typing import Any, Iterable, List, Optional

from ..common import JLBindException


class BindingError(JLBindException):
    """Base class for failures while generating binding code."""


class ConfigurationError(BindingError):
    """The upstream type model is inconsistent or incomplete."""


class MalformedDescriptorError(BindingError):
    """A parameter description cannot be rendered."""


def format_param(name: str) -> str:
    """Format a parameter or type name for error messages."""
    return f"'{name}'"


def format_value(value: Any) -> str:
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def ambiguous_type_error(type_name: str, matches: Iterable[str]) -> str:
    """
    Create an error message for a type matching zero or several categories.

    Args:
        type_name: The C++ spelling of the type
        matches: Names of the categories the type matched

    Returns:
        Formatted error message.
    """
    matches = list(matches)
    if not matches:
        return f"Type {format_param(type_name)} matches no category"
    return f"Type {format_param(type_name)} matches more than one category: {', '.join(matches)}"


def shape_error(type_name: str, requirement: str) -> str:
    return f"Type {format_param(type_name)}: {requirement}"


def unknown_type_error(type_name: str, suggestions: Optional[List[str]] = None) -> str:
    """
    Create an error message for a type missing from the type catalog.

    Args:
        type_name: The unknown type name.
        suggestions: Optional list of known type names to mention.

    Returns:
        Formatted error message with "Did you mean?" if suggestions available.
    """
    base_msg = f"Unknown type {format_param(type_name)}"
    if suggestions:
        quoted = [format_param(s) for s in suggestions]
        return f"{base_msg}. Did you mean one of: {', '.join(quoted)}?"
    return base_msg


def descriptor_error(param: str, problem: str, got: Any = None) -> str:
    """
    Create an error message for a malformed parameter description.

    Args:
        param: Parameter name (may be empty)
        problem: Description of the problem
        got: Optional offending value

    Returns:
        Formatted error message.
    """
    msg = f"Parameter {format_param(param)} {problem}"
    if got is not None:
        msg += f", got {format_value(got)}"
    return msg


def duplicate_param_error(param: str, program: Optional[str] = None) -> str:
    if program:
        return f"Duplicate parameter {format_param(param)} in program {format_param(program)}"
    return f"Duplicate parameter {format_param(param)}"
