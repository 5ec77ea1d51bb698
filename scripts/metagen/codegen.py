"""
Code generation utilities

Provides the line/indent buffer used by every renderer, plus naming helpers
for the generated C identifiers.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ir import StructMember

FLAGS_ENUM = 'Meta_StructMember_Flags'
FLAG_NONE = f'{FLAGS_ENUM}_None'
FLAG_ARRAY = f'{FLAGS_ENUM}_Array'
FLAG_POINTER = f'{FLAGS_ENUM}_Pointer'

META_TYPE_ENUM = 'Meta_Type'


class CodeGen:
    """Code generation helper with indentation support"""

    def __init__(self):
        self._lines: list[str] = []
        self._indent: int = 0
        self._indent_str: str = '    '  # 4 spaces

    def line(self, text: str = ''):
        """Add a line with current indentation"""
        if text:
            self._lines.append(self._indent_str * self._indent + text)
        else:
            self._lines.append('')

    def indent(self):
        """Increase indentation"""
        self._indent += 1

    def dedent(self):
        """Decrease indentation"""
        if self._indent > 0:
            self._indent -= 1

    def block(self, header: str, footer: str = '}'):
        """Context manager for code blocks"""
        return _BlockContext(self, header, footer)

    def output(self) -> str:
        """Get generated code as string"""
        return '\n'.join(self._lines) + '\n'


class _BlockContext:
    """Context manager for indented code blocks"""

    def __init__(self, gen: CodeGen, header: str, footer: str):
        self._gen = gen
        self._header = header
        self._footer = footer

    def __enter__(self):
        self._gen.line(self._header)
        self._gen.indent()
        return self

    def __exit__(self, *args):
        self._gen.dedent()
        self._gen.line(self._footer)


def meta_type_name(type_name: str) -> str:
    """Meta_Type constant for a member type

    Examples:
        int -> Meta_Type_int
        Vec3 -> Meta_Type_Vec3
    """
    return f'{META_TYPE_ENUM}_{type_name}'


def member_flags(member: 'StructMember') -> str:
    """Flags expression for a struct member

    Examples:
        int a;       -> Meta_StructMember_Flags_None
        int *p;      -> Meta_StructMember_Flags_Pointer
        int *b[3];   -> Meta_StructMember_Flags_Pointer | Meta_StructMember_Flags_Array
    """
    flags = []
    if member.is_pointer:
        flags.append(FLAG_POINTER)
    if member.is_array:
        flags.append(FLAG_ARRAY)
    return ' | '.join(flags) if flags else FLAG_NONE


def c_string(text: str) -> str:
    """Quote text as a C string literal"""
    return '"' + text.replace('\\', '\\\\').replace('"', '\\"') + '"'
