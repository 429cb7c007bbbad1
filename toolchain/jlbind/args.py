import argparse


def parse(argv=None) -> dict:
    parser = argparse.ArgumentParser(
        prog="./main.py",
        description="""\
Generates the Julia code that passes the input parameters of mlpack-style \
programs to the native parameter store. Programs and their parameters are read \
from a YAML manifest.""",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parsers = parser.add_subparsers(dest="command")

    generate = parsers.add_parser(name="generate", help="Generate input processing for a manifest.", formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    types    = parsers.add_parser(name="types",    help="List the known static types.",            formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    def add_config_argument(p):
        p.add_argument("-c", "--config", metavar="CONFIG", type=str, default=None,
                       help="YAML file overriding generator options (store_prefix, base_indent, ...).")

    # === GENERATE ===
    add_config_argument(generate)
    generate.add_argument("manifest", metavar="MANIFEST", type=str, help="YAML manifest describing the programs.")
    generate.add_argument("-o", "--output",   metavar="OUTPUT",  type=str, default=None, help="Write the generated code to OUTPUT instead of stdout.")
    generate.add_argument("-p", "--programs", metavar="PROGRAM", type=str, nargs="+", default=None, help="Only generate these programs.")
    generate.add_argument("-j", "--jobs",     metavar="JOBS",    type=int, default=1, help="Render up to JOBS programs concurrently.")

    # === TYPES ===
    add_config_argument(types)

    args: dict = vars(parser.parse_args(argv))

    if args["command"] is None:
        parser.print_help()
        exit(-1)

    return args
