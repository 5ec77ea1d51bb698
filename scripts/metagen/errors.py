"""
Error types

Every fatal condition raised while reading, tokenizing or parsing an input
file derives from MetagenError. Nothing below the command line exits the
process; the CLI catches these and decides the exit status.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .tokens import Token, TokenType


class MetagenError(Exception):
    """Base class for fatal generator errors"""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None and column is not None:
            message = f'[{line}:{column}] {message}'
        super().__init__(message)
        self.line = line
        self.column = column


class InputError(MetagenError):
    """Input file is missing or unreadable"""


class TokenizeError(MetagenError):
    """Unterminated string or character literal"""


class ParseError(MetagenError):
    """A required token did not match"""

    def __init__(self, message: str, token: 'Token', expected: Optional['TokenType'] = None):
        super().__init__(message, token.line, token.column)
        self.token = token
        self.expected = expected

    @classmethod
    def mismatch(cls, token: 'Token', expected: 'TokenType') -> 'ParseError':
        """Build the error for an expected/actual token kind mismatch"""
        return cls(
            f'Expected token {expected.name}, got "{token.text}" which is type {token.type.name}',
            token, expected,
        )


class UnknownTargetError(ParseError):
    """Annotation is followed by something other than struct or enum"""


class EnumValueError(ParseError):
    """Explicit enum value is neither an identifier nor a number"""
