from dataclasses import dataclass
from typing import Union

from pratt_calc.tokenizer import Token, TokenStream, TokenType, tokenize, untokenize
from pratt_calc.utils import logger


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens))
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


class UnknownOperatorError(ParserError):
    pass


@dataclass(frozen=True)
class Atom:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Operation:
    operator: str
    operands: tuple["Expression", ...]

    def __post_init__(self) -> None:
        if len(self.operands) != 2:
            raise ValueError(f"Operation {self.operator!r} takes exactly 2 operands, got {len(self.operands)}")

    @property
    def left(self) -> "Expression":
        return self.operands[0]

    @property
    def right(self) -> "Expression":
        return self.operands[1]

    def __str__(self) -> str:
        return f"({self.operator} {' '.join(str(operand) for operand in self.operands)})"


Expression = Union[Atom, Operation]


# (left, right); left < right makes an operator left-associative, left > right right-associative
BINDING_POWERS: dict[str, tuple[float, float]] = {
    "=": (0.2, 0.1),
    "+": (1.0, 1.1),
    "-": (1.0, 1.1),
    "*": (2.0, 2.1),
    "/": (2.0, 2.1),
    "^": (3.1, 3.0),
    "√": (3.1, 3.0),
    # tightest of all, so "3.5" parses as (. 3 5) rather than a single literal
    ".": (4.0, 4.1),
}


def parse(code: str) -> Expression:
    return parse_tokens(tokenize(code))


def parse_tokens(tokens: list[Token]) -> Expression:
    """Parses a single expression from the token list.

    Tokens left over after the expression (e.g. a stray closing bracket) are not an error.
    """
    stream = TokenStream(tokens)
    expression = _parse_expression(stream, min_binding_power=0.0)
    if stream.remaining():
        logger.debug("Ignoring %d trailing token(s) in %r", stream.remaining(), untokenize(tokens))
    logger.debug("Parsed %r as %s", untokenize(tokens), expression)
    return expression


def get_binding_power(stream: TokenStream, operator: Token) -> tuple[float, float]:
    try:
        return BINDING_POWERS[operator.lexeme]
    except KeyError:
        raise UnknownOperatorError(
            f"Unknown operator {operator.lexeme!r}", tokens=stream.tokens, error_token_idx=stream.position
        ) from None


def _parse_expression(stream: TokenStream, min_binding_power: float) -> Expression:
    left = _parse_operand(stream)

    while True:
        token = stream.peek()
        if token.type is TokenType.END or token == Token(TokenType.OPERATOR, ")"):
            break
        if token.type is not TokenType.OPERATOR:
            raise ParserError(
                f"Operator expected, found {token.type} {token.lexeme!r}",
                tokens=stream.tokens,
                error_token_idx=stream.position,
            )

        left_binding_power, right_binding_power = get_binding_power(stream, token)
        if left_binding_power < min_binding_power:
            break

        stream.next()
        right = _parse_expression(stream, right_binding_power)
        left = Operation(operator=token.lexeme, operands=(left, right))

    return left


def _parse_operand(stream: TokenStream) -> Expression:
    first_idx = stream.position
    first = stream.next()
    if first.type is TokenType.ATOM:
        chars = [first.lexeme]
        while stream.peek().type is TokenType.ATOM:
            chars.append(stream.next().lexeme)
        return Atom("".join(chars))
    elif first == Token(TokenType.OPERATOR, "("):
        inner = _parse_expression(stream, min_binding_power=0.0)
        closing_idx = stream.position
        if stream.next() != Token(TokenType.OPERATOR, ")"):
            raise ParserError("Unclosed bracket, ')' expected", tokens=stream.tokens, error_token_idx=closing_idx)
        return inner
    elif first.type is TokenType.END:
        raise ParserError("Unexpected end of expression", tokens=stream.tokens, error_token_idx=first_idx)
    else:
        raise ParserError(
            f"Operand expected, found {first.type} {first.lexeme!r}", tokens=stream.tokens, error_token_idx=first_idx
        )
