import pytest
from hypothesis import given, strategies as st

from ballgame.printer import show_val
from ballgame.reader.parser import SYMBOL_CHARS, lex, read_expr
from ballgame.types.character import Character
from ballgame.types.errors import BallgameSyntaxError
from ballgame.types.symbol import Symbol


def _same(a, b):
    # == alone would accept 1 == True
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(map(_same, a, b))
    return type(a) is type(b) and a == b


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a", 0)]),
        ("'a", [("quote", "'", 0), ("atom", "a", 1)]),
        ("(a 1)", [("lbracket", "(", 0), ("atom", "a", 1), ("whitespace", " ", 2), ("integer", "1", 3), ("rbracket", ")", 4)]),
        ("3.14", [("decimal", "3.14", 0)]),
        ("3.", [("integer", "3", 0), ("error", ".", 1)]),
        ('"hi"', [("string", '"hi"', 0)]),
        ("#\\space", [("char", "#\\space", 0)]),
        ("#t", [("atom", "#t", 0)]),
        ("[x}", [("lbracket", "[", 0), ("atom", "x", 1), ("rbracket", "}", 2)]),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize("char", list(SYMBOL_CHARS))
def test_symbol_chars_start_and_continue_atoms(char):
    assert list(lex(char + "a" + char)) == [("atom", char + "a" + char, 0)]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("abc", Symbol("abc")),
        ("string=?", Symbol("string=?")),
        ("-5", Symbol("-5")),  # a leading sign makes an atom, not a number
        ("#t", True),
        ("#f", False),
        ("#true", Symbol("#true")),
        ("42", 42),
        ("3.14", 3.14),
        ('"hello"', "hello"),
        ('"a\\"b\\\\c"', 'a"b\\c'),
        ('"\\a\\b\\t\\n\\v\\f\\r"', "\a\b\t\n\v\f\r"),
        ('"two\nlines"', "two\nlines"),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("''a", [Symbol("quote"), [Symbol("quote"), Symbol("a")]]),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
        ("(1\t2\n3)", [1, 2, 3]),
        ("[1 2}", [1, 2]),
        ("{1 (2)]", [1, [2]]),
        ("(1 3.5 \"x\" #f)", [1, 3.5, "x", False]),
    ],
)
def test_parser(source, expected):
    assert _same(read_expr(source), expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("#\\a", Character("a")),
        ("#\\A", Character("A")),
        ("#\\space", Character(" ")),
        ("#\\SPACE", Character(" ")),
        ("#\\newline", Character("\n")),
        ("#\\return", Character("\r")),
        ("#\\linefeed", Character("\f")),
        ("#\\tab", Character("\t")),
        ("#\\vtab", Character("\v")),
        ("#\\backspace", Character("\b")),
    ],
)
def test_char_parsing(source, expected):
    assert read_expr(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 2", 1),
        ("(1 2))", [1, 2]),
        ("foo ,,,", Symbol("foo")),
        ("3.", 3),
        ("1abc", 1),
    ],
)
def test_trailing_input_is_ignored(source, expected):
    assert _same(read_expr(source), expected)


@pytest.mark.parametrize(
    "source",
    [
        "",
        " 1",
        "( 1)",
        "(1 )",
        "(1(2))",
        "(1 2",
        "' a",
        ")",
        '"abc',
        '"a\\qb"',
        "#\\foo",
        ",x",
        "(1 2.)",
    ],
)
def test_parse_failures(source):
    with pytest.raises(BallgameSyntaxError):
        read_expr(source)


def test_parse_error_reports_position():
    with pytest.raises(BallgameSyntaxError) as info:
        read_expr("(1 2\n  )")
    err = info.value
    assert (err.line, err.column) == (2, 3)
    assert str(err) == 'Parse error at "lisp" (line 2, column 3): unexpected ")"; expecting expression'


def test_parse_error_at_end_of_input():
    with pytest.raises(BallgameSyntaxError) as info:
        read_expr("")
    assert str(info.value) == 'Parse error at "lisp" (line 1, column 1): unexpected end of input; expecting expression'


def test_unknown_character_name():
    with pytest.raises(BallgameSyntaxError) as info:
        read_expr("(a #\\bogus)")
    assert 'unknown character name "bogus"' in str(info.value)
    assert info.value.column == 4


def test_strict_brackets():
    assert read_expr("(1 2)", strict_brackets=True) == [1, 2]
    assert read_expr("[1 {2}]", strict_brackets=True) == [1, [2]]
    with pytest.raises(BallgameSyntaxError) as info:
        read_expr("'(1 2]", strict_brackets=True)
    assert str(info.value) == 'Parse error at "lisp" (line 1, column 6): unexpected "]"; expecting ")"'


# ------------------ Round trip ------------------

symbols = st.from_regex(r"\A[a-z!$%&|*+/:<=>?@^_~-][a-z0-9!$%&|*+/:<=>?@^_~-]*\Z").map(Symbol)
texts = st.text(alphabet=st.characters(exclude_characters='"\\', exclude_categories=("Cs",)))
atoms = st.one_of(st.integers(min_value=0), texts, st.booleans(), symbols)
values = st.recursive(atoms, lambda children: st.lists(children, max_size=5), max_leaves=20)


@given(values)
def test_read_show_round_trip(value):
    assert _same(read_expr(show_val(value)), value)


@given(st.sampled_from(["a", "Z", " ", "\n", "\r", "\f", "\t", "\v", "\b"]))
def test_character_round_trip(char):
    assert read_expr(show_val(Character(char))) == Character(char)
