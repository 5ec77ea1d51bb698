"""
Declaration parser module

Walks the token stream looking for the introspection annotation and parses
the struct or enum declaration that follows it. Everything else in the file
is tokenized and dropped.

Grammar accepted after the annotation:

    Introspect() struct Name { Type [*]name [ '[' size ']' ]; ... };
    Introspect() enum Name { A [= value] [,] ... };
"""

import logging
from typing import Optional

from .errors import EnumValueError, ParseError, UnknownTargetError
from .ir import EnumDecl, EnumMember, ScanResult, StructDecl, StructMember
from .registry import TypeRegistry
from .tokenizer import Tokenizer
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)

KEYWORD_INTROSPECT = 'Introspect'
KEYWORD_STRUCT = 'struct'
KEYWORD_ENUM = 'enum'


class DeclarationParser:
    """Recursive-descent parser for annotated declarations"""

    def __init__(self, tokenizer: Tokenizer, registry: TypeRegistry, dump_tokens: bool = False):
        self.tokenizer = tokenizer
        self.registry = registry
        self.dump_tokens = dump_tokens

    def next_token(self) -> Token:
        token = self.tokenizer.next_token()
        if self.dump_tokens:
            logger.debug('%s', token)
        return token

    def ensure(self, token: Token, token_type: TokenType) -> Token:
        """Raise ParseError unless the token has the given type"""
        if token.type != token_type:
            raise ParseError.mismatch(token, token_type)
        return token

    def require(self, token_type: TokenType) -> Token:
        """Read the next token and require it to have the given type"""
        return self.ensure(self.next_token(), token_type)

    def parse_struct(self) -> StructDecl:
        """Parse a struct body; the 'struct' keyword is already consumed"""
        struct = StructDecl(name=self.require(TokenType.IDENTIFIER))
        self.require(TokenType.LEFT_BRACE)

        while True:
            token = self.next_token()
            if token.type == TokenType.RIGHT_BRACE:
                break
            self.ensure(token, TokenType.IDENTIFIER)
            self.registry.register(token.text)
            struct.members.append(self._parse_struct_member(token))

        self.require(TokenType.SEMICOLON)
        logger.debug('struct %s: %d members', struct.type_name, len(struct.members))
        return struct

    def _parse_struct_member(self, member_type: Token) -> StructMember:
        token = self.next_token()
        if token.type == TokenType.ASTERISK:
            member = StructMember(type=member_type, name=self.require(TokenType.IDENTIFIER),
                                  is_pointer=True)
        else:
            member = StructMember(type=member_type, name=self.ensure(token, TokenType.IDENTIFIER))

        token = self.next_token()
        if token.type == TokenType.LEFT_BRACKET:
            member.is_array = True
            member.array_size = self.next_token()
            self.require(TokenType.RIGHT_BRACKET)
            self.require(TokenType.SEMICOLON)
        else:
            self.ensure(token, TokenType.SEMICOLON)

        return member

    def parse_enum(self) -> EnumDecl:
        """Parse an enum body; the 'enum' keyword is already consumed"""
        enum = EnumDecl(name=self.require(TokenType.IDENTIFIER))
        self.require(TokenType.LEFT_BRACE)

        token = self.next_token()
        while token.type != TokenType.RIGHT_BRACE:
            enum.members.append(EnumMember(name=self.ensure(token, TokenType.IDENTIFIER)))

            token = self.next_token()
            if token.type == TokenType.EQUALS:
                # The value is left for the C compiler to resolve
                value = self.next_token()
                if value.type not in (TokenType.IDENTIFIER, TokenType.NUMBER):
                    raise EnumValueError(f'Unknown enum value "{value.text}"', value)
                token = self.next_token()

            if token.type == TokenType.COMMA:
                token = self.next_token()

        self.require(TokenType.SEMICOLON)
        logger.debug('enum %s: %d members', enum.type_name, len(enum.members))
        return enum


class AnnotationScanner:
    """Drives the tokenizer over a whole file and collects declarations"""

    def __init__(self, source: str, registry: Optional[TypeRegistry] = None,
                 annotation: str = KEYWORD_INTROSPECT, dump_tokens: bool = False):
        self.registry = registry if registry is not None else TypeRegistry()
        self.annotation = annotation
        self.parser = DeclarationParser(Tokenizer(source), self.registry, dump_tokens)

    def scan(self) -> ScanResult:
        """Scan to the end of input

        Raises:
            TokenizeError: On an unterminated literal.
            ParseError: On the first malformed annotated declaration.
        """
        result = ScanResult()
        while True:
            token = self.parser.next_token()
            if token.type == TokenType.END:
                break
            if token.type == TokenType.UNKNOWN:
                logger.warning('[%d:%d] Unknown token "%s"', token.line, token.column, token.text)
            elif token.type == TokenType.IDENTIFIER and token.matches(self.annotation):
                self._scan_annotation(result)
        return result

    def _scan_annotation(self, result: ScanResult):
        # TODO: annotation parameters, e.g. Introspect(skip = field)
        self.parser.require(TokenType.LEFT_PAREN)
        self.parser.require(TokenType.RIGHT_PAREN)

        target = self.parser.require(TokenType.IDENTIFIER)
        if target.matches(KEYWORD_STRUCT):
            result.structs.append(self.parser.parse_struct())
        elif target.matches(KEYWORD_ENUM):
            result.enums.append(self.parser.parse_enum())
        else:
            raise UnknownTargetError(f'Unknown introspection target "{target.text}"', target)


def scan(source: str, registry: Optional[TypeRegistry] = None,
         annotation: str = KEYWORD_INTROSPECT) -> ScanResult:
    """Scan a source buffer and return its annotated declarations"""
    return AnnotationScanner(source, registry, annotation).scan()
