import math

import pytest

from symcalc import Add, Const, Div, Ln, Mul, Neg, Pow, Precedence, Sub, Var, parse


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            "2 + 3 * 4",
            "(2 + 3) * 4",
            "a - (b + c)",
            "a - b + c",
            "a / (b * c)",
            "a / b * c",
            "2^3^2",
            "(2^3)^2",
            "-x^2",
            "(-x)^2",
            "x^(-1)",
            "-a * b",
            "ln x",
            "ln(x + 1)",
            "ln x^2",
            "(ln x)^2",
            "ln(ln x)",
            "ln(-x)",
            "--x",
            "-(a + b)",
            "3.5 * x - 0.25",
            "0.0000001",
            "0.00005 * x",
            "a * (b / c)",
            "a * (b * c)",
            "a + (b - c)",
            "a + (b + c)",
            "a * -b",
            "a + -b",
        ],
    )
    def test_render_parse_round_trip(self, source):
        tree = parse(source)
        assert parse(tree.render()) == tree

    @pytest.mark.parametrize(
        "source, rendered",
        [
            ("2+3*4", "2 + 3 * 4"),
            ("(2+3)*4", "(2 + 3) * 4"),
            ("2^3^2", "2^3^2"),
            ("(2^3)^2", "(2^3)^2"),
            ("a-(b-c)", "a - (b - c)"),
            ("a/(b/c)", "a / (b / c)"),
            ("(-x)^2", "(-x)^2"),
            ("-x^2", "-x^2"),
            ("ln x", "ln x"),
            ("ln(x*y)", "ln(x * y)"),
            ("ln 2.5", "ln 2.5"),
            ("a*(b/c)", "a * (b / c)"),
            ("a*(b*c)", "a * (b * c)"),
            ("a+(b-c)", "a + (b - c)"),
            ("a*b*c", "a * b * c"),
            ("a+b+c", "a + b + c"),
            ("a*-b", "a * (-b)"),
        ],
    )
    def test_render_text(self, source, rendered):
        assert parse(source).render() == rendered


class TestRenderLeaves:
    def test_integral_constants_print_without_fraction(self):
        assert Const(2.0).render() == "2"
        assert Const(-0.0).render() == "0"

    def test_small_constants_print_without_exponent(self):
        assert Const(1e-07).render() == "0.0000001"
        assert Const(-5e-05).render() == "-0.00005"
        assert Const(0.1).render() == "0.1"

    def test_special_values(self):
        assert Const(math.inf).render() == "inf"
        assert Const(math.nan).render() == "nan"

    def test_negative_constant_is_wrapped_like_negation(self, x):
        assert Pow(Const(-2), x).render() == "(-2)^x"
        assert Ln(Const(-1)).render() == "ln(-1)"
        assert Mul(x, Const(-3)).render() == "x * (-3)"

    def test_str_is_render(self, x):
        assert str(Add(x, Const(1))) == "x + 1"


class TestDebugForm:
    def test_every_compound_node_is_wrapped(self, x, y):
        expr = Add(Mul(x, y), Pow(x, Const(2)))
        assert expr.debug() == "((x * y) + (x ^ 2))"

    def test_unary_nodes(self, x):
        assert Neg(x).debug() == "(-x)"
        assert Ln(Sub(x, Const(1))).debug() == "ln((x - 1))"
        assert Div(Const(1), x).debug() == "(1 / x)"


class TestPrecedenceOrder:
    def test_levels_are_ordered(self):
        assert (
            Precedence.Lowest
            < Precedence.Sum
            < Precedence.Product
            < Precedence.Power
            < Precedence.PowerLeft
            < Precedence.Highest
        )
