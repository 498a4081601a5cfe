import pytest

from symcalc import LexError, TokenKind, tokenize


def kinds(source):
    return [token.kind for token in tokenize(source)]


class TestTokenKinds:
    def test_single_character_operators(self):
        assert kinds("()+-*/^") == [
            TokenKind.LeftParen,
            TokenKind.RightParen,
            TokenKind.Plus,
            TokenKind.Minus,
            TokenKind.Star,
            TokenKind.Slash,
            TokenKind.Caret,
            TokenKind.Eof,
        ]

    def test_ln_is_a_keyword_only_on_exact_match(self):
        tokens = tokenize("ln lnx Ln")
        assert [t.kind for t in tokens] == [
            TokenKind.FnLn,
            TokenKind.Ident,
            TokenKind.Ident,
            TokenKind.Eof,
        ]
        assert [t.lexeme for t in tokens[:3]] == ["ln", "lnx", "Ln"]

    def test_identifier_stops_at_digit(self):
        tokens = tokenize("ab12")
        assert [(t.kind, t.lexeme) for t in tokens[:2]] == [
            (TokenKind.Ident, "ab"),
            (TokenKind.Number, "12"),
        ]

    def test_underscore_is_part_of_identifier(self):
        tokens = tokenize("_a_b + c")
        assert tokens[0].kind == TokenKind.Ident
        assert tokens[0].lexeme == "_a_b"

    @pytest.mark.parametrize("source", ["0", "42", "3.14", "10.05"])
    def test_numbers(self, source):
        tokens = tokenize(source)
        assert tokens[0].kind == TokenKind.Number
        assert tokens[0].lexeme == source

    def test_exactly_one_eof(self):
        assert kinds("") == [TokenKind.Eof]
        assert kinds("x + 1").count(TokenKind.Eof) == 1


class TestPositions:
    def test_columns_of_first_characters(self):
        tokens = tokenize("12 +  abc")
        assert [t.position for t in tokens] == [(0, 0), (0, 3), (0, 6), (0, 9)]

    def test_newline_moves_to_next_line(self):
        tokens = tokenize("1 +\n  x")
        assert tokens[2].lexeme == "x"
        assert tokens[2].position == (1, 2)

    def test_tabs_are_skipped(self):
        assert kinds("\tx\t") == [TokenKind.Ident, TokenKind.Eof]


class TestLexErrors:
    def test_missing_fraction_digits(self):
        with pytest.raises(LexError) as excinfo:
            tokenize("3.")
        assert excinfo.value.unexpected == "."
        assert excinfo.value.position == (0, 1)

    def test_dot_followed_by_non_digit(self):
        with pytest.raises(LexError) as excinfo:
            tokenize("1 + 3.x")
        assert excinfo.value.position == (0, 5)

    def test_unexpected_character(self):
        with pytest.raises(LexError) as excinfo:
            tokenize("2 $ 3")
        assert excinfo.value.unexpected == "$"
        assert excinfo.value.position == (0, 2)
        assert "'$'" in str(excinfo.value)
        assert "0:2" in str(excinfo.value)

    def test_leading_dot_is_rejected(self):
        with pytest.raises(LexError):
            tokenize(".5")

    def test_lex_error_is_a_syntax_error(self):
        with pytest.raises(SyntaxError):
            tokenize("#")
