"""
IR (Intermediate Representation) module

Language-neutral model of the annotated declarations found in one input
file. Renderers consume this; the parser produces it.
"""

from dataclasses import dataclass, field
from typing import Optional

from .tokens import Token


@dataclass
class StructMember:
    """Struct member information"""
    type: Token
    name: Token
    is_pointer: bool = False
    is_array: bool = False
    array_size: Optional[Token] = None  # Raw size expression, never evaluated

    @property
    def type_name(self) -> str:
        return self.type.text

    @property
    def member_name(self) -> str:
        return self.name.text

    @property
    def array_size_text(self) -> str:
        """Array size as written in source, or '0' for non-arrays"""
        if self.is_array and self.array_size is not None:
            return self.array_size.text
        return '0'


@dataclass
class StructDecl:
    """Annotated struct declaration"""
    name: Token
    members: list[StructMember] = field(default_factory=list)

    @property
    def type_name(self) -> str:
        return self.name.text


@dataclass
class EnumMember:
    """Enum member (explicit values are parsed but not kept)"""
    name: Token

    @property
    def member_name(self) -> str:
        return self.name.text


@dataclass
class EnumDecl:
    """Annotated enum declaration"""
    name: Token
    members: list[EnumMember] = field(default_factory=list)

    @property
    def type_name(self) -> str:
        return self.name.text


@dataclass
class ScanResult:
    """Declarations collected from one input file, in source order"""
    structs: list[StructDecl] = field(default_factory=list)
    enums: list[EnumDecl] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.structs and not self.enums
