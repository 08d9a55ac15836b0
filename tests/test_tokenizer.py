import pytest

from pratt_calc.tokenizer import END, Token, TokenStream, TokenType, tokenize, untokenize


def atom(char: str) -> Token:
    return Token(TokenType.ATOM, char)


def op(char: str) -> Token:
    return Token(TokenType.OPERATOR, char)


@pytest.mark.parametrize(
    "code, expected_tokens",
    [
        pytest.param("", []),
        pytest.param("   \t\n", []),
        pytest.param("1", [atom("1")]),
        pytest.param("12", [atom("1"), atom("2")]),
        pytest.param("1 2", [atom("1"), atom("2")]),
        pytest.param("x=5", [atom("x"), op("="), atom("5")]),
        pytest.param(" foo + 1 ", [atom("f"), atom("o"), atom("o"), op("+"), atom("1")]),
        pytest.param("3.5", [atom("3"), op("."), atom("5")]),
        pytest.param("8√3", [atom("8"), op("√"), atom("3")]),
        pytest.param("(a)", [op("("), atom("a"), op(")")]),
        pytest.param("a_b", [atom("a"), op("_"), atom("b")]),
        pytest.param("é", [op("é")]),
        pytest.param("**", [op("*"), op("*")]),
    ],
)
def test_tokenize(code: str, expected_tokens: list[Token]) -> None:
    assert tokenize(code) == expected_tokens


def test_untokenize_drops_whitespace() -> None:
    assert untokenize(tokenize(" ( 1 + 2 ) * x ")) == "(1+2)*x"


def test_token_stream_order() -> None:
    stream = TokenStream(tokenize("a+b"))
    assert stream.peek() == atom("a")
    assert stream.peek() == atom("a")
    assert stream.next() == atom("a")
    assert stream.next() == op("+")
    assert stream.remaining() == 1
    assert stream.next() == atom("b")
    assert stream.remaining() == 0


def test_token_stream_exhausted() -> None:
    stream = TokenStream([atom("1")])
    stream.next()
    for _ in range(3):
        assert stream.peek() is END
        assert stream.next() is END
    assert stream.remaining() == 0


def test_empty_token_stream() -> None:
    stream = TokenStream([])
    assert stream.peek().type is TokenType.END
    assert stream.next().type is TokenType.END
