import enum
import string
from dataclasses import dataclass

from pratt_calc.utils import PrintableEnum, logger


class TokenType(PrintableEnum):
    ATOM = enum.auto()
    OPERATOR = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


END = Token(type=TokenType.END, lexeme="")

# str.isspace() and str.isalnum() are unicode-aware, only ASCII counts here
WHITESPACE = frozenset(" \t\n\r\x0c")
ATOM_CHARS = frozenset(string.ascii_letters + string.digits)


def tokenize(code: str) -> list[Token]:
    """Every non-whitespace character becomes exactly one token, whitespace is dropped entirely.

    Letters and digits are atom characters, anything else is an operator character.
    Gluing consecutive atom characters into names and numbers is left to the parser.
    """
    tokens: list[Token] = []
    for char in code:
        if char in WHITESPACE:
            continue
        elif char in ATOM_CHARS:
            tokens.append(Token(type=TokenType.ATOM, lexeme=char))
        else:
            tokens.append(Token(type=TokenType.OPERATOR, lexeme=char))
    logger.debug("Tokenized %r into %s", code, " ".join(str(t) for t in tokens))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    return "".join(t.lexeme for t in tokens)


class TokenStream:
    """Cursor over a token list; yields END forever once the list is exhausted"""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.position = 0

    def peek(self) -> Token:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return END

    def next(self) -> Token:
        token = self.peek()
        if token is not END:
            self.position += 1
        return token

    def remaining(self) -> int:
        return len(self.tokens) - self.position
