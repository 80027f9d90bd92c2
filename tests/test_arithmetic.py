import pytest

from ballgame.builtin.primitives import PRIMITIVES, quot, rem


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(/ 7 2)", "3"),
        ("(/ 100 5 2)", "10"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(- 0 12345678901234567890 1)", "-12345678901234567891"),
        # / and mod floor, quotient and remainder truncate
        ("(/ (- 0 7) 2)", "-4"),
        ("(mod (- 0 7) 2)", "1"),
        ("(mod 7 3)", "1"),
        ("(quotient (- 0 7) 2)", "-3"),
        ("(remainder (- 0 7) 2)", "-1"),
        ("(remainder 7 3)", "1"),
        # numeric unpacking
        ('(+ "2" 3)', "5"),
        ('(+ "  4abc" 1)', "5"),
        ('(+ "-4" 1)', "-3"),
        ("(+ '(2) 3)", "5"),
        ("(+ '((2)) 3)", "5"),
        ('(+ "5." 1)', "6"),
        ('(+ "12e" 1)', "13"),
        ('(+ "0x10" 1)', "17"),
        ('(+ "0o17" 1)', "16"),
        ('(+ "-0x10" 1)', "-15"),
        # a fraction or exponent makes the string a non-integer
        ('(+ "5.5" 1)', 'Invalid type: expected number, found "5.5"'),
        ('(+ "1e3" 1)', 'Invalid type: expected number, found "1e3"'),
        ('(+ "2E-1" 1)', 'Invalid type: expected number, found "2E-1"'),
        ('(+ "123.4" 1)', 'Invalid type: expected number, found "123.4"'),
        # errors
        ("(+ 5)", "Expected 2 args: found values 5"),
        ("(+ 5))", "Expected 2 args: found values 5"),
        ("(+ 1 #t)", "Invalid type: expected number, found #t"),
        ('(+ 1 "x")', 'Invalid type: expected number, found "x"'),
        ("(+ 1 2.5)", "Invalid type: expected number, found 2.5"),
        ("(+ 1 '(2 3))", "Invalid type: expected number, found (2 3)"),
        ("(+ 1 'a)", "Invalid type: expected number, found a"),
        ("(/ 1 0)", "Division by zero"),
        ("(mod 1 0)", "Division by zero"),
        ("(quotient 1 0)", "Division by zero"),
        ("(remainder 1 0)", "Division by zero"),
    ],
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "n,d,q,r",
    [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (-7, -2, 3, -1),
        (6, 3, 2, 0),
    ],
)
def test_quot_rem(n, d, q, r):
    assert quot(n, d) == q
    assert rem(n, d) == r
    assert quot(n, d) * d + rem(n, d) == n


def test_zero_arguments_is_an_arity_error(run):
    assert run("(*)") == "Expected 2 args: found values "


def test_primitive_table_is_read_only():
    with pytest.raises(TypeError):
        PRIMITIVES["+"] = None
