"""
Run configuration
"""

from typing import Optional

from .parser import KEYWORD_INTROSPECT


class RunConfig:
    """Configuration for a generator run"""

    def __init__(self, annotation: str = KEYWORD_INTROSPECT, dump_tokens: bool = False,
                 generate_output: bool = True, output_path: Optional[str] = None,
                 include_header: bool = True):
        self.annotation = annotation
        self.dump_tokens = dump_tokens
        self.generate_output = generate_output
        self.output_path = output_path
        self.include_header = include_header

    @classmethod
    def from_args(cls, args) -> 'RunConfig':
        """Build a configuration from parsed command line arguments"""
        return cls(
            annotation=args.annotation,
            dump_tokens=args.dump_tokens,
            generate_output=not args.check,
            output_path=args.output,
            include_header=not args.no_header,
        )
