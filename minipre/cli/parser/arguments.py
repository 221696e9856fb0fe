from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole minipre toolchain process."""

    # `-` stands for stdin
    source_filepaths: list[Path]

    # None stands for stdout
    output_filepath: Path | None

    definitions: dict[str, str]

    version: bool

    verbose: bool
    cli_debug_user_friendly_errors: bool
