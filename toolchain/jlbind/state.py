import typing

from .config import GeneratorConfig, DEFAULT_CONFIG


gCFG: GeneratorConfig = DEFAULT_CONFIG
gARG: dict            = {}

def ARG(arg: str, dflt = None) -> typing.Any:
    # pylint: disable=global-variable-not-assigned
    global gARG
    if arg in gARG:
        return gARG[arg]
    if dflt is not None:
        return dflt

    raise KeyError(f"{arg} is not an argument.")

def CFG() -> GeneratorConfig:
    # pylint: disable=global-variable-not-assigned
    global gCFG
    return gCFG
