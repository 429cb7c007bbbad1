"""
Program Manifest Loading.

A manifest lists the input parameters of one or more programs in declaration
order:

    programs:
      linear_regression:
        - {name: training, type: "arma::mat", required: true}
        - {name: lambda, type: double}
        - {name: input_model, type: "LinearRegression<>", model: true,
           julia_type: LinearRegression}

`type` is looked up in the static type catalog unless `model: true` declares
a serializable model type.
"""

import dataclasses
from typing import Any, Dict, List, Optional

from ..common import JLBindException, file_load_yaml
from .errors import MalformedDescriptorError, descriptor_error, duplicate_param_error
from .schema import ParamData, StaticType
from .types import TYPES, TypeRegistry


_PARAM_KEYS = {"name", "type", "required", "model", "cpp_type", "julia_type", "description"}


@dataclasses.dataclass(frozen=True)
class ProgramDef:
    """A program and its input parameters, in declaration order."""
    name: str
    params: List[ParamData]

    def __post_init__(self):
        seen = set()
        for param in self.params:
            if param.name in seen:
                raise MalformedDescriptorError(duplicate_param_error(param.name, self.name))
            seen.add(param.name)


def param_from_dict(data: Dict[str, Any], registry: Optional[TypeRegistry] = None) -> ParamData:
    registry = registry or TYPES

    if not isinstance(data, dict):
        raise MalformedDescriptorError(f"Parameter entries must be mappings, got {data!r}")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedDescriptorError(descriptor_error(str(name or ""), "has no name"))

    unknown = sorted(set(data) - _PARAM_KEYS)
    if unknown:
        raise MalformedDescriptorError(descriptor_error(name, f"has unknown key(s): {', '.join(unknown)}"))

    type_name = data.get("type")
    if not isinstance(type_name, str) or not type_name:
        raise MalformedDescriptorError(descriptor_error(name, "has no type"))

    for flag in ("required", "model"):
        if not isinstance(data.get(flag, False), bool):
            raise MalformedDescriptorError(
                descriptor_error(name, f"has a non-boolean '{flag}' flag", data[flag]))

    if data.get("model", False):
        static_type = StaticType.model(type_name, julia_type=data.get("julia_type"))
    else:
        static_type = registry.resolve(type_name)

    return ParamData(
        name=name,
        static_type=static_type,
        required=data.get("required", False),
        cpp_type=data.get("cpp_type"),
        julia_type=data.get("julia_type"),
        description=data.get("description", ""),
    )


def programs_from_dict(data: Dict[str, Any], registry: Optional[TypeRegistry] = None) -> List[ProgramDef]:
    if not isinstance(data, dict) or not isinstance(data.get("programs"), dict):
        raise JLBindException("A manifest must have a top-level 'programs' mapping.")

    programs = []
    for program, entries in data["programs"].items():
        if not isinstance(entries, list):
            raise JLBindException(f"Program '{program}' must list its parameters.")
        programs.append(ProgramDef(
            name=str(program),
            params=[param_from_dict(entry, registry) for entry in entries],
        ))

    return programs


def load_manifest(filepath: str, registry: Optional[TypeRegistry] = None) -> List[ProgramDef]:
    """
    Load the programs described by a YAML manifest.

    Raises:
        JLBindException: If the file cannot be read or is not a manifest
        ConfigurationError: If a parameter names an unknown type
        MalformedDescriptorError: If a parameter entry is malformed
    """
    return programs_from_dict(file_load_yaml(filepath), registry)
