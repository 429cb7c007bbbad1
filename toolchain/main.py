#!/usr/bin/env python3

import sys

from rich.markup import escape

from jlbind          import args, state, generate
from jlbind.state    import ARG
from jlbind.config   import load_config
from jlbind.common   import JLBindException
from jlbind.printer  import cons


FILE_ISSUE_MSG = """\
If you believe this is an issue with jlbind rather than with your manifest, \
please file an issue together with the manifest that triggered it.\
"""


def __run():
    {"generate": generate.generate, "types": generate.types}[ARG("command")]()


if __name__ == "__main__":
    try:
        state.gARG = args.parse()
        state.gCFG = load_config(ARG("config"))

        __run()

    except JLBindException as exc:
        cons.reset()
        cons.print(f"""\
--- [bold red]FATAL jlbind ERROR[/bold red] ---

{escape(str(exc))}
""")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception:  # pylint: disable=broad-except
        cons.reset()
        cons.print_exception()
        cons.print(f"""
--- [bold red]FATAL jlbind ERROR[/bold red] ---

An unexpected exception occurred.
{FILE_ISSUE_MSG}
""")
        sys.exit(1)
