import io
from collections.abc import Iterator

import pytest

from libminipre.preprocessor import MacrosRegistry, preprocess_lines, preprocess_stream
from libminipre.preprocessor.errors import UnmatchedEndifError
from libminipre.preprocessor.preprocessor import split_lines_keep_terminators


def test_preprocess_stream_writes_into_sink() -> None:
    source = io.StringIO("#if FOO\nFOO\n#endif\nbar\n", newline="")
    sink = io.StringIO()
    preprocess_stream(source, sink, MacrosRegistry().define("FOO", "1"))
    assert sink.getvalue() == "1\nbar\n"


def test_preprocess_stream_keeps_written_output_on_error() -> None:
    sink = io.StringIO()
    with pytest.raises(UnmatchedEndifError):
        preprocess_stream(["a\n", "b\n", "#endif\n", "c\n"], sink, MacrosRegistry())
    assert sink.getvalue() == "a\nb\n"


def test_preprocess_stream_propagates_source_errors() -> None:
    failure = OSError("disk is on fire")

    def source() -> Iterator[str]:
        yield "a\n"
        raise failure

    sink = io.StringIO()
    with pytest.raises(OSError) as error:
        preprocess_stream(source(), sink, MacrosRegistry())
    assert error.value is failure
    assert sink.getvalue() == "a\n"


def test_preprocess_stream_propagates_sink_errors() -> None:
    class BrokenSink:
        def write(self, s: str, /) -> int:
            raise BrokenPipeError

    with pytest.raises(BrokenPipeError):
        preprocess_stream(["a\n"], BrokenSink(), MacrosRegistry())


def test_preprocess_lines_is_lazy_and_uses_snapshot() -> None:
    macros = MacrosRegistry().define("FOO", "1")
    lines = preprocess_lines(iter(["FOO\n", "FOO\n"]), macros)

    assert next(lines) == "1\n"
    macros.define("FOO", "2")
    assert list(lines) == ["1\n"]


def test_preprocess_lines_does_not_modify_registry() -> None:
    macros = MacrosRegistry().define("FOO", "1")
    assert list(preprocess_lines(["#if FOO\n", "FOO\n", "#endif\n"], macros)) == [
        "1\n",
    ]
    assert macros == {"FOO": "1"}


def test_split_lines_keep_terminators() -> None:
    assert split_lines_keep_terminators("") == []
    assert split_lines_keep_terminators("a") == ["a"]
    assert split_lines_keep_terminators("a\n") == ["a\n"]
    assert split_lines_keep_terminators("a\r\n\nb") == ["a\r\n", "\n", "b"]
    assert split_lines_keep_terminators("a\rb\n") == ["a\rb\n"]
