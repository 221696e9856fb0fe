from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, cast

from minipre.cli.output import cli_fatal_abort
from minipre.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace

STDIN_SOURCE = Path("-")

DEFAULT_DEFINITION_VALUE = "1"


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    source_filepaths = _process_source_filepaths(args)
    definitions = _process_definitions(args)
    output = _process_output_path(source_filepaths, args)

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        # Rest of these are mostly goal-specific
        verbose=bool(args.verbose),
        source_filepaths=source_filepaths,
        output_filepath=output,
        definitions=definitions,
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_definitions(args: Namespace) -> dict[str, str]:
    """Process CLI propagated definitions as raw macro text, last definition wins."""
    user_definitions: dict[str, str] = {}

    raw_definitions = cast("list[str]", args.definitions)
    for cli_definition in raw_definitions:
        if "=" in cli_definition:
            name, value = cli_definition.split("=", maxsplit=1)
        else:
            name, value = cli_definition, DEFAULT_DEFINITION_VALUE

        if not name:
            return cli_fatal_abort(
                text=f"Macro definition `{cli_definition}` has no name!",
            )
        user_definitions[name] = value

    return user_definitions


def _process_source_filepaths(args: Namespace) -> list[Path]:
    """Process input source files as paths and validate it."""
    paths = [Path(f) for f in args.source_files]
    if args.version:
        return paths

    if len(paths) == 0:
        return cli_fatal_abort("Expected source files to preprocess!")

    if paths.count(STDIN_SOURCE) > 1:
        return cli_fatal_abort("Standard input (`-`) may be given only once!")

    files = [p for p in paths if p != STDIN_SOURCE]
    if any(not p.is_file() for p in files):
        return cli_fatal_abort(
            text="One of input source file is not exists, aborting preprocessing as safe mechanism.",
        )

    return paths


def _process_output_path(
    source_filepaths: list[Path],
    args: Namespace,
) -> Path | None:
    """Process output path, or None if output must go into stdout."""
    if not args.output:
        return None

    output = Path(args.output)
    if any(output.resolve() == p.resolve() for p in source_filepaths if p != STDIN_SOURCE):
        return cli_fatal_abort(
            text="Specified output file path will rewrite existing input file, please specify another output path.",
        )
    return output
