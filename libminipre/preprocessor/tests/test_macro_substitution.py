from libminipre.preprocessor.macros import MacrosRegistry, build_macro_substituter


def test_macro_substitution_empty_registry() -> None:
    substitute = build_macro_substituter(MacrosRegistry())
    assert substitute.pattern is None
    assert substitute("FOO bar\n") == "FOO bar\n"


def test_macro_substitution_word_boundaries() -> None:
    substitute = build_macro_substituter(MacrosRegistry().define("FOO", "0"))
    assert substitute("FOO-BAR\n") == "0-BAR\n"
    assert substitute("FOO_BAR\n") == "FOO_BAR\n"
    assert substitute("xFOO FOO1 _FOO\n") == "xFOO FOO1 _FOO\n"
    assert substitute("FOO FOO(FOO)\n") == "0 0(0)\n"
    assert substitute("    FOO") == "    0"


def test_macro_substitution_longest_whole_name() -> None:
    substitute = build_macro_substituter(
        MacrosRegistry().define("FOO", "1").define("FOO_BAR", "2"),
    )
    assert substitute("FOO_BAR FOO\n") == "2 1\n"


def test_macro_substitution_is_single_pass() -> None:
    substitute = build_macro_substituter(
        MacrosRegistry().define("A", "B").define("B", "C"),
    )
    assert substitute("A B\n") == "B C\n"


def test_macro_substitution_special_characters_in_value() -> None:
    substitute = build_macro_substituter(MacrosRegistry().define("PATH", r"C:\new\1"))
    assert substitute("PATH\n") == "C:\\new\\1\n"


def test_macro_substitution_is_snapshot() -> None:
    registry = MacrosRegistry().define("FOO", "1")
    substitute = build_macro_substituter(registry)
    registry.define("FOO", "2").define("BAR", "3")

    assert substitute("FOO BAR\n") == "1 BAR\n"


def test_macro_substitution_ignores_empty_name() -> None:
    substitute = build_macro_substituter(MacrosRegistry().define("", "X"))
    assert substitute.pattern is None
    assert substitute("a b\n") == "a b\n"

    substitute = build_macro_substituter(
        MacrosRegistry().define("", "X").define("FOO", "1"),
    )
    assert substitute("a FOO\n") == "a 1\n"
