import typing

import rich, rich.console


class JLBindPrinter:
    def __init__(self):
        self.stack = []
        self.raw   = rich.console.Console(stderr=True)

    def reset(self):
        self.stack = []

    def indent(self, msg: str = None):
        self.stack.append(msg if msg is not None else "  ")

    def unindent(self, times: int = 1):
        for _ in range(times):
            self.stack.pop()

    def print(self, msg: typing.Any = None, *args, no_indent: bool = False, **kwargs):
        msg = "" if msg is None else str(msg)

        if not no_indent:
            prefix = ''.join(self.stack)
            msg    = '\n'.join(f"{prefix}{line}" for line in msg.split('\n'))

        self.raw.print(msg, *args, soft_wrap=True, **kwargs)

    def print_exception(self):
        self.raw.print_exception()


cons = JLBindPrinter()
