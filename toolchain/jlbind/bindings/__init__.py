"""
Julia Binding Generation Package.

Turns the input parameters of a program into the Julia statements that pass
them to the native engine's parameter store.

Modules
-------
- schema: StaticType, ParamData and the Plain/MatrixLike/ObjectLike variants
- types: The static type catalog (TYPES) and Julia type names
- classify: Static type classification
- formatting: Accessor suffixes, type stripping and indentation
- writer: The append-only CodeWriter sink
- input_processing: The emitters
- manifest: YAML program manifests
"""

from .schema import (
    Category, ElementKind, Shape, StaticType, ParamData,
    Plain, MatrixLike, ObjectLike,
)
from .errors import BindingError, ConfigurationError, MalformedDescriptorError
from .types import TYPES, RegistryFrozenError, get_julia_type
from .classify import classify
from .writer import CodeWriter
from .input_processing import emit_param, emit_input_processing, generate_programs
from .manifest import ProgramDef, load_manifest

__all__ = [
    'Category', 'ElementKind', 'Shape', 'StaticType', 'ParamData',
    'Plain', 'MatrixLike', 'ObjectLike',
    'BindingError', 'ConfigurationError', 'MalformedDescriptorError',
    'TYPES', 'RegistryFrozenError', 'get_julia_type',
    'classify', 'CodeWriter',
    'emit_param', 'emit_input_processing', 'generate_programs',
    'ProgramDef', 'load_manifest',
]
