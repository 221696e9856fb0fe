from __future__ import annotations

import sys
from contextlib import nullcontext
from typing import TYPE_CHECKING, NoReturn, TextIO

from libminipre.preprocessor import (
    PreprocessorSyntaxError,
    preprocess_stream,
    registry_from_raw_definitions,
)
from minipre.cli.output import cli_message
from minipre.cli.parser.parser import STDIN_SOURCE

if TYPE_CHECKING:
    from contextlib import AbstractContextManager
    from pathlib import Path

    from minipre.cli.parser.arguments import CLIArguments

SOURCE_ENCODING = "utf-8"


def cli_perform_preprocess_goal(args: CLIArguments) -> NoReturn:
    """Perform preprocess goal that emits preprocessed text of all sources into output (stdout by default)."""
    macros = registry_from_raw_definitions(args.definitions)
    cli_message(
        "INFO",
        f"Defined {len(macros)} macro(s): {', '.join(sorted(macros)) or '...'}",
        verbose=args.verbose,
    )

    with open_output_text_stream(args.output_filepath) as sink:
        for path in args.source_filepaths:
            cli_message("INFO", f"Preprocessing `{path}`...", verbose=args.verbose)
            with open_source_text_stream(path) as source:
                try:
                    preprocess_stream(source, sink, macros)
                except PreprocessorSyntaxError:
                    cli_message("ERROR", f"Failed to preprocess `{path}`!")
                    raise

    if args.output_filepath:
        cli_message(
            "INFO",
            f"Preprocessed {len(args.source_filepaths)} file(s) into `{args.output_filepath}`!",
            verbose=args.verbose,
        )
    return sys.exit(0)


def open_source_text_stream(path: Path) -> AbstractContextManager[TextIO]:
    """Open source as line stream, line terminators are kept untranslated."""
    if path == STDIN_SOURCE:
        return nullcontext(sys.stdin)
    return path.open(encoding=SOURCE_ENCODING, newline="")


def open_output_text_stream(path: Path | None) -> AbstractContextManager[TextIO]:
    """Open output as text stream, terminators are written as-is."""
    if path is None:
        return nullcontext(sys.stdout)
    return path.open("w", encoding=SOURCE_ENCODING, newline="")
