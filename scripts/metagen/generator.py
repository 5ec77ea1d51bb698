"""
Main generator module

Orchestrates a run: read one input file, scan it, and render the companion
metadata source for the C/C++ dialect.
"""

import logging
import sys
from typing import Optional, TYPE_CHECKING

from .codegen import CodeGen, FLAG_ARRAY, FLAG_NONE, FLAG_POINTER, FLAGS_ENUM, META_TYPE_ENUM, meta_type_name
from .config import RunConfig
from .enum import EnumGenerator
from .errors import InputError, MetagenError
from .parser import AnnotationScanner
from .registry import TypeRegistry
from .renderer import Renderer
from .struct import StructGenerator

if TYPE_CHECKING:
    from .ir import ScanResult

logger = logging.getLogger(__name__)


class CppRenderer(Renderer):
    """Renders metadata as C/C++ source"""

    def __init__(self, include_header: bool = True):
        self.include_header = include_header
        self.struct_gen = StructGenerator()
        self.enum_gen = EnumGenerator()

    def render(self, result: 'ScanResult', registry: TypeRegistry) -> str:
        gen = CodeGen()

        self._gen_preamble(gen)
        self._gen_types_enum(registry, gen)
        self._gen_definitions(gen)

        for struct in result.structs:
            self.struct_gen.generate(struct, gen)

        for enum in result.enums:
            self.enum_gen.generate(enum, gen)

        return gen.output()

    def _gen_preamble(self, gen: CodeGen):
        """Includes, helper macros and the member flags"""
        if self.include_header:
            gen.line('/* machine generated, do not edit */')
        gen.line('#include <stddef.h>')
        gen.line('#include <stdint.h>')
        gen.line()

        gen.line('#define meta_getMemberPtr(s, m) (void *)(((intptr_t)&(s)) + (m)->offset)')
        gen.line(f'#define meta_isArray(m) (((m)->flags & ({FLAG_ARRAY})) > 0)')
        gen.line(f'#define meta_isPointer(m) (((m)->flags & ({FLAG_POINTER})) > 0)')
        gen.line()

        # Bit values: a member can be a pointer and an array at once
        with gen.block(f'enum {FLAGS_ENUM} {{', '};'):
            gen.line(f'{FLAG_NONE} = 0,')
            gen.line(f'{FLAG_ARRAY} = 1 << 0,')
            gen.line(f'{FLAG_POINTER} = 1 << 1,')
        gen.line()

    def _gen_types_enum(self, registry: TypeRegistry, gen: CodeGen):
        with gen.block(f'enum {META_TYPE_ENUM} {{', '};'):
            for type_name in registry:
                gen.line(f'{meta_type_name(type_name)},')
        gen.line()

    def _gen_definitions(self, gen: CodeGen):
        """Descriptor record shapes shared by every table"""
        with gen.block('struct Meta_Struct {', '};'):
            gen.line('const char *name;')
            gen.line('int memberCount;')
        gen.line()

        with gen.block('struct Meta_StructMember {', '};'):
            gen.line('const char *name;')
            gen.line(f'{META_TYPE_ENUM} type;')
            gen.line('int flags;')
            gen.line('int arraySize;')
            gen.line('size_t offset;')
        gen.line()

        with gen.block('struct Meta_Enum {', '};'):
            gen.line('const char *name;')
            gen.line('int memberCount;')
        gen.line()

        with gen.block('struct Meta_EnumMember {', '};'):
            gen.line('const char *name;')
            gen.line('int value;')
        gen.line()


class Generator:
    """Main metadata generator"""

    def __init__(self, config: Optional[RunConfig] = None, renderer: Optional[Renderer] = None):
        self.config = config or RunConfig()
        self.renderer = renderer or CppRenderer(include_header=self.config.include_header)

    def read_source(self, path: str) -> str:
        """Read an input file into memory"""
        try:
            with open(path, 'r', encoding='utf-8', errors='replace') as f:
                return f.read()
        except OSError as e:
            raise InputError(f'Could not open {path} for reading: {e.strerror}') from e

    def generate(self, source: str) -> Optional[str]:
        """Scan a source buffer and render it

        Returns None when output generation is disabled.
        """
        registry = TypeRegistry()
        scanner = AnnotationScanner(source, registry, self.config.annotation, self.config.dump_tokens)
        result = scanner.scan()

        logger.info('%d structs, %d enums, %d meta types',
                    len(result.structs), len(result.enums), len(registry))

        if not self.config.generate_output:
            return None
        return self.renderer.render(result, registry)

    def process_file(self, path: str) -> Optional[str]:
        """Generate metadata for a single input file"""
        logger.info('%s => %s', path, self.config.output_path or '<stdout>')
        return self.generate(self.read_source(path))

    def write(self, text: str):
        """Write generated text to the configured output"""
        if self.config.output_path:
            try:
                with open(self.config.output_path, 'w', newline='\n') as f:
                    f.write(text)
            except OSError as e:
                raise MetagenError(f'Could not open {self.config.output_path} for writing: {e.strerror}') from e
        else:
            sys.stdout.write(text)
