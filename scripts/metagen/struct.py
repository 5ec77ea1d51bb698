"""
Struct metadata generation module

Generates the descriptor, member table and accessors for a struct.
"""

from typing import TYPE_CHECKING

from .codegen import CodeGen, c_string, member_flags, meta_type_name

if TYPE_CHECKING:
    from .ir import StructDecl, StructMember


class StructGenerator:
    """Generates struct metadata tables"""

    def generate(self, struct: 'StructDecl', gen: CodeGen):
        """Generate all metadata for a struct"""
        name = struct.type_name

        gen.line(f'Meta_Struct meta_{name} = {{ {c_string(name)}, {len(struct.members)} }};')
        gen.line()

        with gen.block(f'Meta_StructMember meta_{name}_members[] = {{', '};'):
            for member in struct.members:
                gen.line(self._member_entry(name, member))
        gen.line()

        self._gen_accessors(name, gen)

    def _member_entry(self, struct_name: str, member: 'StructMember') -> str:
        """Member table row; the offset is left to the C compiler"""
        name = member.member_name
        return (f'{{ {c_string(name)}, {meta_type_name(member.type_name)}, '
                f'{member_flags(member)}, {member.array_size_text}, '
                f'offsetof({struct_name}, {name}) }},')

    def _gen_accessors(self, name: str, gen: CodeGen):
        with gen.block(f'inline Meta_Struct *meta_get({name} *s) {{'):
            gen.line(f'return &meta_{name};')
        gen.line()

        with gen.block(f'inline Meta_StructMember *meta_getMembers({name} *s) {{'):
            gen.line(f'return meta_{name}_members;')
        gen.line()
