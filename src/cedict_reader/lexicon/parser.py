"""
Line parser for the CC-CEDICT dictionary format.

Each entry occupies one line:

    傢俱 家具 [jia1 ju4] /furniture/

Lines starting with the comment marker (``#`` in the published files) carry
the file header and are skipped, as is anything that does not have the
entry shape.
"""

import re
from typing import Iterable, Iterator

from .models import LexiconEntry

DEFAULT_COMMENT_MARKER = "#"

# traditional simplified [pinyin] /gloss/gloss/.../
ENTRY_PATTERN = re.compile(
    r"^(?P<traditional>\S+)\s+(?P<simplified>\S+)\s+"
    r"\[(?P<pinyin>[^\]]+)\]\s+"
    r"/(?P<definitions>.+)/$"
)


def parse_line(line: str, comment_marker: str = DEFAULT_COMMENT_MARKER) -> LexiconEntry | None:
    """Parse a single CC-CEDICT line into a LexiconEntry.

    Rejected lines (comments, blank lines, anything malformed) return None
    rather than raising, so callers can skip them and carry on.

    Args:
        line: One raw line, surrounding whitespace allowed
        comment_marker: Leading character that marks a comment line

    Returns:
        LexiconEntry if the line is a valid entry, None otherwise

    Example:
        >>> parse_line("傢俱 家具 [jia1 ju4] /furniture/").simplified
        '家具'
        >>> parse_line("#! charset=UTF-8") is None
        True
    """
    line = line.strip()
    if not line or (comment_marker and line.startswith(comment_marker)):
        return None

    match = ENTRY_PATTERN.match(line)
    if match is None:
        return None

    definitions = tuple(d for d in match.group("definitions").split("/") if d)

    return LexiconEntry(
        traditional=match.group("traditional"),
        simplified=match.group("simplified"),
        pinyin=match.group("pinyin"),
        definitions=definitions,
    )


def iter_entries(
    lines: Iterable[str],
    comment_marker: str = DEFAULT_COMMENT_MARKER,
) -> Iterator[LexiconEntry]:
    """Yield the entries of an iterable of lines, skipping rejected lines."""
    for line in lines:
        entry = parse_line(line, comment_marker)
        if entry is not None:
            yield entry
