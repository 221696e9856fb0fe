from argparse import ArgumentParser

from minipre.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="minipre - C-like text preprocessor with macros and `#if` blocks",
        usage=f"{prog} files... [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_files",
        help="Input text files to preprocess (`-` to read from stdin), processed in given order",
        nargs="*",
        default=[],
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_output_group(parser)
    groups.add_preprocessor_group(parser)
    groups.add_debug_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
