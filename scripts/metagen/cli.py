"""
Command line interface

Usage:
    metagen [options] FILE
"""

import argparse
import logging
from typing import Optional

from .config import RunConfig
from .errors import MetagenError
from .generator import Generator
from .log import LOGGER_NAME, setup_logging
from .parser import KEYWORD_INTROSPECT

logger = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='metagen',
        description='Generate reflection metadata for annotated C/C++ structs and enums')
    parser.add_argument('file', help='Input source file')
    parser.add_argument('-o', '--output', default=None,
                        help='Write generated code to this file instead of stdout')
    parser.add_argument('--annotation', default=KEYWORD_INTROSPECT,
                        help=f'Annotation keyword (default: {KEYWORD_INTROSPECT})')
    parser.add_argument('--check', action='store_true',
                        help='Scan and validate only, do not generate code')
    parser.add_argument('--dump-tokens', action='store_true',
                        help='Log every scanned token (implies --verbose)')
    parser.add_argument('--no-header', action='store_true',
                        help='Omit the "machine generated" banner')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only log fatal errors')
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose or args.dump_tokens:
        setup_logging(logging.DEBUG)
    elif args.quiet:
        setup_logging(logging.ERROR)
    else:
        setup_logging(logging.INFO)

    generator = Generator(RunConfig.from_args(args))
    try:
        text = generator.process_file(args.file)
        if text is not None:
            generator.write(text)
    except MetagenError as e:
        logger.critical('%s', e)
        return 1
    return 0
