"""
metagen - reflection metadata generator for C/C++

Scans source files for declarations marked with the Introspect() annotation
and generates companion source exposing their shape at runtime: member names,
types, offsets and flags for structs, and name/value tables for enums.
"""

from .tokens import Token, TokenType
from .tokenizer import Tokenizer, tokenize
from .registry import TypeRegistry
from .ir import StructMember, StructDecl, EnumMember, EnumDecl, ScanResult
from .parser import DeclarationParser, AnnotationScanner, scan
from .codegen import CodeGen
from .struct import StructGenerator
from .enum import EnumGenerator
from .renderer import Renderer
from .config import RunConfig
from .generator import CppRenderer, Generator
from .errors import (
    MetagenError, InputError, TokenizeError, ParseError, UnknownTargetError, EnumValueError,
)

__all__ = [
    'Token', 'TokenType',
    'Tokenizer', 'tokenize',
    'TypeRegistry',
    'StructMember', 'StructDecl', 'EnumMember', 'EnumDecl', 'ScanResult',
    'DeclarationParser', 'AnnotationScanner', 'scan',
    'CodeGen',
    'StructGenerator',
    'EnumGenerator',
    'Renderer',
    'RunConfig',
    'CppRenderer', 'Generator',
    'MetagenError', 'InputError', 'TokenizeError', 'ParseError', 'UnknownTargetError',
    'EnumValueError',
]
