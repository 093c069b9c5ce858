"""
Configuration for the expression pipeline.

Author: xwest
"""

import sys
from dataclasses import dataclass
from typing import Optional


DEFAULT_FILENAME = "<expression>"

# Each nesting level costs a handful of interpreter frames, so this stays
# well below Python's default recursion limit.
DEFAULT_MAX_DEPTH = 100

# A parenthesised group descends through four parser frames.
FRAMES_PER_LEVEL_BUDGET = 8


def max_depth_ceiling() -> int:
    """Largest nesting limit the parser can honour under the current recursion limit."""
    return sys.getrecursionlimit() // FRAMES_PER_LEVEL_BUDGET


@dataclass(frozen=True)
class ParserConfig:
    """
    Settings shared by the lexer and parser.

    Attributes:
        integer_bits: Signed integer width literals must fit in. ``None``
            means literals are unbounded Python integers.
        max_depth: Maximum nesting of parentheses and negations. Must not
            exceed ``max_depth_ceiling()``.
        filename: Name reported in source locations.
    """
    integer_bits: Optional[int] = None
    max_depth: int = DEFAULT_MAX_DEPTH
    filename: str = DEFAULT_FILENAME

    def __post_init__(self):
        if self.integer_bits is not None and self.integer_bits < 2:
            raise ValueError(f"integer_bits must be at least 2, got {self.integer_bits}")

        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

        ceiling = max_depth_ceiling()
        if self.max_depth > ceiling:
            raise ValueError(
                f"max_depth must not exceed {ceiling} under the current "
                f"recursion limit, got {self.max_depth}"
            )
