"""
CC-CEDICT lexicon: line parser, headword index and maximal-munch segmenter.

Provides O(1) lookup of Chinese words by traditional or simplified headword
and greedy longest-match segmentation of running text.
"""

from .index import LexiconIndex
from .models import LexiconEntry, Segment
from .parser import iter_entries, parse_line
from .segmenter import lookup_at, segment_at, segment_blocks, segment_text

__all__ = [
    "LexiconEntry",
    "LexiconIndex",
    "Segment",
    "iter_entries",
    "parse_line",
    "lookup_at",
    "segment_at",
    "segment_blocks",
    "segment_text",
]
