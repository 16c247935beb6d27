"""
Greedy maximal-munch segmentation on top of a LexiconIndex.
"""

import logging

from .index import LexiconIndex
from .models import Segment

logger = logging.getLogger("cedict-reader")


def segment_text(index: LexiconIndex, text: str, offset: int = 0) -> list[Segment]:
    """Split text into dictionary words and single unmatched characters.

    At each position the longest dictionary word starting there becomes a
    matched segment; when no word starts there, one character becomes an
    unmatched segment. Segments are contiguous and their texts concatenate
    back to ``text``.

    Against an index that is not loaded yet every character comes back
    unmatched.

    Args:
        index: Lexicon to match against
        text: Text to segment
        offset: Added to every segment offset, for texts cut out of a larger one

    Returns:
        Segments in text order

    Example:
        >>> [s.text for s in segment_text(index, "他買了家具")]
        ['他', '買', '了', '家具']
    """
    if not index.is_ready:
        logger.warning("Lexicon queried before it was loaded (segment_text)")
        return [Segment(text=ch, start=offset + i, end=offset + i + 1) for i, ch in enumerate(text)]

    segments: list[Segment] = []
    i = 0
    while i < len(text):
        found = index.find_longest_entry(text, i)
        if found is not None:
            word, entry = found
            segments.append(Segment(
                text=word,
                start=offset + i,
                end=offset + i + len(word),
                matched=True,
                entry=entry,
            ))
            i += len(word)
        else:
            segments.append(Segment(text=text[i], start=offset + i, end=offset + i + 1))
            i += 1
    return segments


def segment_blocks(index: LexiconIndex, text: str) -> list[list[Segment]]:
    """Segment each line-delimited block of a document separately.

    Words never span a block boundary. Offsets refer to positions in the
    whole ``text``; the newline characters between blocks are not covered by
    any segment. Empty blocks yield empty lists so block numbers stay aligned
    with line numbers.

    Args:
        index: Lexicon to match against
        text: Document text, one block (paragraph, heading, list item) per line

    Returns:
        One list of segments per block
    """
    blocks: list[list[Segment]] = []
    offset = 0
    for block in text.split("\n"):
        blocks.append(segment_text(index, block, offset))
        offset += len(block) + 1
    return blocks


def segment_at(segments: list[Segment], position: int) -> Segment | None:
    """Return the segment covering a character position, or None."""
    for segment in segments:
        if segment.start <= position < segment.end:
            return segment
    return None


def lookup_at(index: LexiconIndex, text: str, position: int) -> Segment | None:
    """Return the dictionary word covering ``position`` in ``text``.

    The text is segmented first, so the result is the word a reader sees
    at that position, not every word that merely contains it.

    Returns:
        The matched segment, or None if the position is outside the text or
        its character is not part of a dictionary word
    """
    if not 0 <= position < len(text):
        return None
    segment = segment_at(segment_text(index, text), position)
    if segment is None or not segment.matched:
        logger.debug(f"No dictionary word at position {position}")
        return None
    return segment
