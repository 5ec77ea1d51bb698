"""
Tokenizer module

Converts a source buffer into classified tokens. Whitespace, comments and
preprocessor directive lines are skipped and never produce tokens.
"""

import string
from typing import Iterator

from .errors import TokenizeError
from .tokens import PUNCTUATION, Token, TokenType

WHITESPACE = ' \t\f\v\r'
IDENTIFIER_START = string.ascii_letters + '_'
IDENTIFIER_CHARS = IDENTIFIER_START + string.digits


class Tokenizer:
    """Scanner state: a cursor into the buffer plus line/column counters"""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def _current(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''

    def _after(self) -> str:
        if self.pos + 1 < len(self.source):
            return self.source[self.pos + 1]
        return ''

    def _at_line_break(self) -> bool:
        """Newline, or a carriage return not followed by one, ends the line"""
        c = self._current()
        return c == '\n' or (c == '\r' and self._after() != '\n')

    def _advance(self, distance: int = 1):
        """Consume characters, keeping line and column current"""
        while self.pos < len(self.source) and distance > 0:
            if self._at_line_break():
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1
            distance -= 1

    def _eat_whitespace(self):
        while self._current() and (self._current() in WHITESPACE or self._current() == '\n'):
            self._advance()

    def _eat_line(self):
        """Discard the rest of the current line, including its newline"""
        line = self.line
        while self._current() and self.line == line:
            self._advance()

    def _eat_block_comment(self):
        # An unterminated block comment runs to the end of the buffer
        while self._current():
            if self._current() == '*' and self._after() == '/':
                self._advance(2)
                return
            self._advance()

    def _eat_literal(self, quote: str, what: str, line: int, column: int):
        self._advance()
        while self._current() and self._current() != quote:
            if self._current() == '\\':
                self._advance()
            self._advance()
        if not self._current():
            raise TokenizeError(f'Unterminated {what} literal, started at {line}:{column}', line, column)
        self._advance()

    def next_token(self) -> Token:
        """Scan and return the next token

        Returns a TokenType.END token once the buffer is exhausted.

        Raises:
            TokenizeError: On an unterminated string or character literal.
        """
        while True:
            self._eat_whitespace()
            c = self._current()
            if c == '#':
                self._eat_line()
            elif c == '/' and self._after() == '/':
                self._eat_line()
            elif c == '/' and self._after() == '*':
                self._advance(2)
                self._eat_block_comment()
            else:
                break

        start, line, column = self.pos, self.line, self.column

        if not c:
            token_type = TokenType.END
        elif c in PUNCTUATION:
            token_type = PUNCTUATION[c]
            self._advance()
        elif c == '/':
            token_type = TokenType.SLASH
            self._advance()
        elif c == "'":
            token_type = TokenType.CHAR
            self._eat_literal(c, 'character', line, column)
        elif c == '"':
            token_type = TokenType.STRING
            self._eat_literal(c, 'string', line, column)
        elif c in IDENTIFIER_START:
            token_type = TokenType.IDENTIFIER
            while self._current() and self._current() in IDENTIFIER_CHARS:
                self._advance()
        elif c in string.digits:
            # Deliberately permissive: '1.2.3' is one number
            token_type = TokenType.NUMBER
            while self._current() and (self._current() in string.digits or self._current() == '.'):
                self._advance()
        else:
            token_type = TokenType.UNKNOWN
            self._advance()

        return Token(token_type, line, column, start, self.pos - start, self.source)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the END token"""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.END:
                return


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole buffer; the last token is always END"""
    return list(Tokenizer(source))
