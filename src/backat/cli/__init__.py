"""back-at CLI package."""

from .app import run
from .parser import Mode, build_parser, parse_args

__all__ = ["Mode", "build_parser", "parse_args", "run"]
