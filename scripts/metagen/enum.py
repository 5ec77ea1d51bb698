"""
Enum metadata generation module

Generates the descriptor, value table, name table and accessors for an enum.
Values are the enumerator identifiers themselves; the C compiler resolves
them, so explicit values in the source never need evaluating here.
"""

from typing import TYPE_CHECKING

from .codegen import CodeGen, c_string

if TYPE_CHECKING:
    from .ir import EnumDecl


class EnumGenerator:
    """Generates enum metadata tables"""

    def generate(self, enum: 'EnumDecl', gen: CodeGen):
        """Generate all metadata for an enum"""
        name = enum.type_name

        gen.line(f'Meta_Enum meta_{name} = {{ {c_string(name)}, {len(enum.members)} }};')
        gen.line()

        with gen.block(f'Meta_EnumMember meta_{name}_members[] = {{', '};'):
            for member in enum.members:
                gen.line(f'{{ {c_string(member.member_name)}, {member.member_name} }},')
        gen.line()

        with gen.block(f'const char *meta_{name}_names[] = {{', '};'):
            for member in enum.members:
                gen.line(f'[{member.member_name}] = {c_string(member.member_name)},')
        gen.line()

        self._gen_accessors(name, gen)

    def _gen_accessors(self, name: str, gen: CodeGen):
        with gen.block(f'inline Meta_Enum *meta_get({name} value) {{'):
            gen.line(f'return &meta_{name};')
        gen.line()

        with gen.block(f'inline Meta_EnumMember *meta_getMembers({name} value) {{'):
            gen.line(f'return meta_{name}_members;')
        gen.line()

        with gen.block(f'inline const char *meta_getName({name} value) {{'):
            gen.line(f'return meta_{name}_names[value];')
        gen.line()
