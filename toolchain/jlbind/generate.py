"""
Command implementations for ./main.py generate and ./main.py types.
"""

import sys

import rich.table

from .printer import cons
from .common import JLBindException, file_write, format_list_to_string
from .state import ARG, CFG
from .bindings.classify import classify
from .bindings.errors import ConfigurationError
from .bindings.input_processing import emit_classified, generate_programs
from .bindings.manifest import load_manifest
from .bindings.schema import ParamData
from .bindings.types import TYPES
from .bindings.writer import CodeWriter


def render(programs: dict) -> str:
    """Join the rendered programs, each preceded by a `# <name>` comment."""
    return "\n".join(f"# {name}\n{code}" for name, code in programs.items())


def generate():
    programs = load_manifest(ARG("manifest"))

    selected = ARG("programs", [])
    if selected:
        known   = [ p.name for p in programs ]
        missing = [ name for name in selected if name not in known ]
        if missing:
            raise JLBindException(f"Unknown program(s) {format_list_to_string(missing)}. "
                                  f"The manifest defines {format_list_to_string(known)}.")
        programs = [ p for p in programs if p.name in selected ]

    cons.print(f"Generating input processing for {format_list_to_string([ p.name for p in programs ], 'magenta', 'no programs')}")
    cons.indent()
    for program in programs:
        cons.print(f"[bold]{program.name}[/bold]: {len(program.params)} parameter(s)")
    cons.unindent()

    code = render(generate_programs({ p.name: p.params for p in programs },
                                    jobs=ARG("jobs", 1), config=CFG()))

    output = ARG("output")
    if output is None:
        sys.stdout.write(code)
    else:
        file_write(output, code, if_different=True)
        cons.print(f"[green]Generated[/green] {output}")


def types():
    table = rich.table.Table(title="Static types", show_lines=False)
    table.add_column("C++ type",  style="bold")
    table.add_column("Julia type")
    table.add_column("Category",  style="magenta")
    table.add_column("Store call")

    for name, static_type in TYPES.all_types.items():
        try:
            classification = classify(static_type, CFG())
        except ConfigurationError as exc:
            table.add_row(name, static_type.julia_type or "", "[red]invalid[/red]", str(exc))
            continue

        writer = CodeWriter(base=0)
        emit_classified(ParamData(name="x", static_type=static_type, required=True),
                        classification, writer, CFG())

        table.add_row(name, static_type.julia_type or "",
                      classification.category.name, writer.lines[0])

    cons.raw.print(table)
