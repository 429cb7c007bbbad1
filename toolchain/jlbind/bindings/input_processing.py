"""
Julia Input Processing Generator.

Generates the Julia statements that hand each input parameter of a program to
the native engine's parameter store. Every parameter produces one store call;
optional parameters are wrapped in a null check:

    Store("lambda", convert(Float64, lambda))

    if input_model !== nothing
      StoreLinearRegressionPtr("input_model", convert(LinearRegression, input_model))
    end

The accessor family is chosen by classification:

- Plain:      Store
- MatrixLike: Store + (U if unsigned elements) + (Row | Col | "")
- ObjectLike: Store + <stripped C++ type> + Ptr
"""

import re
import threading
from typing import Dict, List, Optional, Sequence

from ..config import GeneratorConfig, DEFAULT_CONFIG
from .classify import classify
from .errors import MalformedDescriptorError, descriptor_error, duplicate_param_error
from .formatting import suffix, strip_type
from .schema import ParamData, Plain, MatrixLike, ObjectLike, TypeClassification
from .types import get_julia_type
from .writer import CodeWriter


_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def target_type(param: ParamData) -> str:
    """Julia type the raw input value is converted to."""
    if param.julia_type:
        return param.julia_type
    return get_julia_type(param.static_type)


def _check_name(param: ParamData) -> None:
    if not param.name:
        raise MalformedDescriptorError(descriptor_error("", "has no name"))
    if not _IDENTIFIER_RE.match(param.name):
        raise MalformedDescriptorError(descriptor_error(param.name, "is not a valid identifier"))


def _store_call(accessor: str, param: ParamData) -> str:
    return f'{accessor}("{param.name}", convert({target_type(param)}, {param.name}))'


def _emit_guarded(param: ParamData, statement: str, writer: CodeWriter, config: GeneratorConfig) -> None:
    if param.required:
        writer.line(statement)
        return

    with writer.block(f"if {param.name} !== {config.absent}"):
        writer.line(statement)


def emit_plain(param: ParamData, classification: Plain, writer: CodeWriter,
               config: Optional[GeneratorConfig] = None) -> None:
    # pylint: disable=unused-argument
    config = config or DEFAULT_CONFIG
    _check_name(param)
    _emit_guarded(param, _store_call(config.store_prefix, param), writer, config)


def emit_matrix(param: ParamData, classification: MatrixLike, writer: CodeWriter,
                config: Optional[GeneratorConfig] = None) -> None:
    config = config or DEFAULT_CONFIG
    _check_name(param)

    accessor = config.store_prefix + suffix(classification.element_kind,
                                            classification.shape,
                                            config.unsigned_marker)
    _emit_guarded(param, _store_call(accessor, param), writer, config)


def emit_object(param: ParamData, classification: ObjectLike, writer: CodeWriter,
                config: Optional[GeneratorConfig] = None) -> None:
    # pylint: disable=unused-argument
    config = config or DEFAULT_CONFIG
    _check_name(param)

    stripped = strip_type(param.underlying_type_name)
    if not stripped:
        raise MalformedDescriptorError(
            descriptor_error(param.name, "has a model type with no usable identifier",
                             param.underlying_type_name))

    accessor = f"{config.store_prefix}{stripped}{config.object_suffix}"
    _emit_guarded(param, _store_call(accessor, param), writer, config)


def emit_classified(param: ParamData, classification: TypeClassification, writer: CodeWriter,
                    config: Optional[GeneratorConfig] = None) -> None:
    """Render one parameter with an already computed classification."""
    if isinstance(classification, MatrixLike):
        emit_matrix(param, classification, writer, config)
    elif isinstance(classification, ObjectLike):
        emit_object(param, classification, writer, config)
    elif isinstance(classification, Plain):
        emit_plain(param, classification, writer, config)
    else:
        raise TypeError(f"Unknown classification {classification!r}")


def emit_param(param: ParamData, writer: CodeWriter, config: Optional[GeneratorConfig] = None) -> None:
    """Classify one parameter and render its input processing."""
    emit_classified(param, classify(param.static_type, config), writer, config)


def emit_input_processing(params: Sequence[ParamData], writer: Optional[CodeWriter] = None,
                          config: Optional[GeneratorConfig] = None,
                          program: Optional[str] = None) -> str:
    """
    Render the input processing of a whole parameter list.

    Parameters are rendered in declaration order into a private buffer that
    is only appended to `writer` once every parameter succeeded, so a failure
    leaves `writer` untouched.

    Args:
        params: Parameters in declaration order
        writer: Optional sink to append the rendered lines to
        config: Generator configuration
        program: Program name, used in error messages

    Returns:
        The rendered chunk.

    Raises:
        ConfigurationError: If a parameter's type cannot be classified
        MalformedDescriptorError: If a parameter cannot be rendered
    """
    config = config or DEFAULT_CONFIG

    buffer = CodeWriter(base=config.base_indent, step=config.indent_step)
    seen = set()
    for param in params:
        if param.name in seen:
            raise MalformedDescriptorError(duplicate_param_error(param.name, program))
        seen.add(param.name)

        emit_param(param, buffer, config)

    if writer is not None:
        writer.extend(buffer)

    return buffer.text()


class WorkerThread(threading.Thread):
    def __init__(self, *args, **kwargs):
        self.exc = None
        self.result = None

        threading.Thread.__init__(self, *args, **kwargs)

    def run(self):
        try:
            if self._target:
                self.result = self._target(*self._args, **self._kwargs)
        except Exception as exc:  # pylint: disable=broad-except
            self.exc = exc


def generate_programs(programs: Dict[str, Sequence[ParamData]], jobs: int = 1,
                      config: Optional[GeneratorConfig] = None) -> Dict[str, str]:
    """
    Render the input processing of several programs.

    Each program is rendered into its own buffer, on up to `jobs` worker
    threads. The returned mapping preserves the order of `programs`.

    Raises:
        The first error raised while rendering, in program order. No batch
        is started once an earlier batch has failed.
    """
    config = config or DEFAULT_CONFIG
    names: List[str] = list(programs)

    if jobs <= 1:
        return {
            name: emit_input_processing(programs[name], config=config, program=name)
            for name in names
        }

    threads: List[WorkerThread] = []
    for start in range(0, len(names), jobs):
        batch = []
        for name in names[start:start + jobs]:
            thread = WorkerThread(target=emit_input_processing,
                                  args=(programs[name],),
                                  kwargs={"config": config, "program": name},
                                  name=f"jlbind-{name}")
            thread.start()
            batch.append(thread)

        for thread in batch:
            thread.join()

        for thread in batch:
            if thread.exc is not None:
                raise thread.exc

        threads.extend(batch)

    return { name: thread.result for name, thread in zip(names, threads) }
