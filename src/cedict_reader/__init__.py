"""
CC-CEDICT Reader - Chinese dictionary lookup and maximal-munch word segmentation,
served over MCP with FastMCP.
"""

from .errors import LexiconError, LexiconLoadError
from .lexicon import LexiconEntry, LexiconIndex, Segment, parse_line, segment_text
from .provider import LexiconProvider

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("cedict-reader")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "LexiconEntry",
    "LexiconError",
    "LexiconIndex",
    "LexiconLoadError",
    "LexiconProvider",
    "Segment",
    "parse_line",
    "segment_text",
]
