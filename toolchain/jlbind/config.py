import typing, dataclasses

from .common import JLBindException, file_load_yaml


@dataclasses.dataclass(frozen=True)
class GeneratorConfig:
    # pylint: disable=too-many-instance-attributes
    store_prefix:        str = "Store"
    unsigned_marker:     str = "U"
    object_suffix:       str = "Ptr"
    base_indent:         int = 2
    indent_step:         int = 2
    absent:              str = "nothing"
    unsigned_elem_types: typing.Tuple[str, ...] = ("size_t",)

    @staticmethod
    def from_dict(d: typing.Optional[dict]) -> "GeneratorConfig":
        """ Create a GeneratorConfig from a (possibly partial) dictionary whose
            keys are fields of GeneratorConfig. Missing keys keep their defaults. """
        d = dict(d or {})

        names   = { field.name for field in dataclasses.fields(GeneratorConfig) }
        unknown = sorted(set(d) - names)
        if unknown:
            raise JLBindException(f"Unknown generator option(s): {', '.join(unknown)}. "
                                  f"Valid options are: {', '.join(sorted(names))}.")

        if "unsigned_elem_types" in d:
            elem_types = d["unsigned_elem_types"]
            if elem_types is None:
                elem_types = ()
            elif isinstance(elem_types, str):
                elem_types = (elem_types,)
            elif not isinstance(elem_types, (list, tuple)) or not all(isinstance(e, str) for e in elem_types):
                raise JLBindException(f"Generator option 'unsigned_elem_types' must be a list of type names, got {elem_types!r}.")
            d["unsigned_elem_types"] = tuple(elem_types)

        for key in ("store_prefix", "unsigned_marker", "object_suffix", "absent"):
            if key in d and not isinstance(d[key], str):
                raise JLBindException(f"Generator option '{key}' must be a string, got {d[key]!r}.")

        for key in ("base_indent", "indent_step"):
            if key in d and (isinstance(d[key], bool) or not isinstance(d[key], int) or d[key] < 0):
                raise JLBindException(f"Generator option '{key}' must be a non-negative integer, got {d[key]!r}.")

        return GeneratorConfig(**d)

    def items(self) -> typing.Iterable[typing.Tuple[str, typing.Any]]:
        return dataclasses.asdict(self).items()

    def __str__(self) -> str:
        """ Returns a string like "store_prefix=Store & base_indent=2 & ..." """
        return ' & '.join(f"{k}={v}" for k, v in self.items())


DEFAULT_CONFIG = GeneratorConfig()


def load_config(filepath: typing.Optional[str]) -> GeneratorConfig:
    if filepath is None:
        return DEFAULT_CONFIG

    data = file_load_yaml(filepath)
    if data is not None and not isinstance(data, dict):
        raise JLBindException(f'Generator configuration "{filepath}" must be a mapping.')

    return GeneratorConfig.from_dict(data)
