from pathlib import Path

import pytest

from minipre.cli.parser.arguments import CLIArguments
from minipre.cli.parser.builder import build_cli_parser
from minipre.cli.parser.parser import parse_cli_arguments


def _parse(*argv: str) -> CLIArguments:
    parser = build_cli_parser("minipre")
    return parse_cli_arguments(parser.parse_args(list(argv)))


def _source(tmp_path: Path, name: str = "input.txt") -> Path:
    path = tmp_path / name
    path.write_text("text\n")
    return path


def test_cli_parser_defaults(tmp_path: Path) -> None:
    source = _source(tmp_path)
    args = _parse(str(source))

    assert args.source_filepaths == [source]
    assert args.output_filepath is None
    assert args.definitions == {}
    assert not args.version
    assert not args.verbose
    assert args.cli_debug_user_friendly_errors


def test_cli_parser_definitions(tmp_path: Path) -> None:
    source = _source(tmp_path)
    args = _parse(
        str(source),
        "-D",
        "FOO",
        "-D",
        "BAR=x=y",
        "--define",
        "FOO=0",
        "-D",
        "EMPTY=",
    )
    assert args.definitions == {"FOO": "0", "BAR": "x=y", "EMPTY": ""}


def test_cli_parser_definition_without_name(tmp_path: Path) -> None:
    source = _source(tmp_path)
    with pytest.raises(SystemExit) as exit_:
        _parse(str(source), "-D", "=1")
    assert exit_.value.code == 1


def test_cli_parser_requires_sources() -> None:
    with pytest.raises(SystemExit) as exit_:
        _parse()
    assert exit_.value.code == 1


def test_cli_parser_version_does_not_require_sources() -> None:
    args = _parse("--version")
    assert args.version
    assert args.source_filepaths == []


def test_cli_parser_missing_source(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exit_:
        _parse(str(tmp_path / "missing.txt"))
    assert exit_.value.code == 1


def test_cli_parser_stdin_source() -> None:
    args = _parse("-")
    assert args.source_filepaths == [Path("-")]

    with pytest.raises(SystemExit):
        _parse("-", "-")


def test_cli_parser_output(tmp_path: Path) -> None:
    source = _source(tmp_path)
    args = _parse(str(source), "-o", str(tmp_path / "output.txt"))
    assert args.output_filepath == tmp_path / "output.txt"


def test_cli_parser_output_rewrites_source(tmp_path: Path) -> None:
    source = _source(tmp_path)
    with pytest.raises(SystemExit) as exit_:
        _parse(str(source), "-o", str(source))
    assert exit_.value.code == 1
