import argparse
from argparse import ArgumentParser


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Diagnostics of an toolchain")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from preprocessor.",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Control preprocessing output")
    group.add_argument(
        "--output",
        "-o",
        type=str,
        required=False,
        help="Output file path to write, by default preprocessed text is emitted into stdout",
    )


def add_preprocessor_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with preprocessor options into given parser."""
    group = parser.add_argument_group(
        title="Preprocessor",
        description="Flags for the preprocessor.",
    )
    group.add_argument(
        "--define",
        "-D",
        required=False,
        help="Define an macro as `NAME` (value is '1') or `NAME=VALUE` and propagate to all input files",
        action="append",
        dest="definitions",
        default=[],
    )
