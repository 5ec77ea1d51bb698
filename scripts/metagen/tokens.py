"""
Token definitions

Tokens never copy their text: they keep the offset and length of their
span inside the source buffer the tokenizer was given.
"""

import enum
from dataclasses import dataclass, field


class TokenType(enum.Enum):
    """Lexical token tags"""

    UNKNOWN = enum.auto()

    LEFT_BRACE = enum.auto()
    RIGHT_BRACE = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    LEFT_BRACKET = enum.auto()
    RIGHT_BRACKET = enum.auto()
    SLASH = enum.auto()
    ASTERISK = enum.auto()
    SEMICOLON = enum.auto()
    COLON = enum.auto()
    EQUALS = enum.auto()
    PERIOD = enum.auto()
    COMMA = enum.auto()
    LEFT_CARET = enum.auto()
    RIGHT_CARET = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    NOT = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    TILDE = enum.auto()
    QUESTION = enum.auto()

    IDENTIFIER = enum.auto()
    STRING = enum.auto()
    CHAR = enum.auto()
    NUMBER = enum.auto()

    END = enum.auto()


PUNCTUATION: dict[str, TokenType] = {
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '[': TokenType.LEFT_BRACKET,
    ']': TokenType.RIGHT_BRACKET,
    '*': TokenType.ASTERISK,
    ';': TokenType.SEMICOLON,
    ':': TokenType.COLON,
    '=': TokenType.EQUALS,
    '.': TokenType.PERIOD,
    ',': TokenType.COMMA,
    '<': TokenType.LEFT_CARET,
    '>': TokenType.RIGHT_CARET,
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '!': TokenType.NOT,
    '&': TokenType.AND,
    '|': TokenType.OR,
    '~': TokenType.TILDE,
    '?': TokenType.QUESTION,
}


@dataclass(frozen=True)
class Token:
    """A classified span of the source buffer

    Attributes:
        type: The token tag.
        line: 1-based line of the first character.
        column: 1-based column of the first character.
        offset: Index of the first character in the source buffer.
        length: Number of characters in the span.
    """
    type: TokenType
    line: int
    column: int
    offset: int
    length: int
    source: str = field(default='', repr=False, compare=False)

    @property
    def text(self) -> str:
        return self.source[self.offset:self.offset + self.length]

    def matches(self, keyword: str) -> bool:
        """Check if the token text is exactly the given keyword"""
        return self.length == len(keyword) and self.source.startswith(keyword, self.offset)

    def __str__(self) -> str:
        return f'[{self.line}:{self.column}] {self.type.name}: {self.text}'
