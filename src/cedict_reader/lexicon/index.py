"""
In-memory lexicon index with O(1) lookup and longest-match scanning.
"""

import logging
from pathlib import Path

from ..errors import LexiconError
from .models import LexiconEntry
from .parser import DEFAULT_COMMENT_MARKER, iter_entries

logger = logging.getLogger("cedict-reader")


class LexiconIndex:
    """Maps traditional and simplified headwords to their LexiconEntry.

    Both headwords of every entry are inserted as independent keys of a
    single mapping. When two entries share a key (a duplicate headword, or
    the traditional form of one entry equal to the simplified form of
    another) the entry parsed later wins.

    An index is loaded exactly once and is read-only afterwards, so a built
    index can be shared between threads without locking. Queries against an
    index that has not been loaded yet log a warning and report no match.

    Example:
        >>> index = LexiconIndex.build("傢俱 家具 [jia1 ju4] /furniture/")
        >>> index.get("傢俱").pinyin
        'jia1 ju4'
        >>> index.find_longest_match("他買了家具", 3)
        '家具'
    """

    def __init__(self) -> None:
        """Initialize an empty, not yet loaded index."""
        self._entries: dict[str, LexiconEntry] = {}
        self._max_key_length = 0
        self._entry_count = 0
        self._ready = False

    @classmethod
    def build(cls, raw_text: str, comment_marker: str = DEFAULT_COMMENT_MARKER) -> "LexiconIndex":
        """Build a loaded index from the complete text of a dictionary file.

        Args:
            raw_text: Full dictionary source, one entry per line
            comment_marker: Leading character that marks a comment line

        Returns:
            A ready, read-only LexiconIndex
        """
        index = cls()
        index.load(raw_text, comment_marker)
        return index

    @classmethod
    def from_file(cls, path: Path, comment_marker: str = DEFAULT_COMMENT_MARKER) -> "LexiconIndex":
        """Build a loaded index from a UTF-8 dictionary file on disk.

        Raises:
            FileNotFoundError: If the file doesn't exist
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        with open(path, "r", encoding="utf-8") as f:
            raw_text = f.read()
        return cls.build(raw_text, comment_marker)

    def load(self, raw_text: str, comment_marker: str = DEFAULT_COMMENT_MARKER) -> None:
        """Populate the index from raw dictionary text.

        Malformed lines are skipped. This is the only mutating operation and
        may run once per instance.

        Raises:
            LexiconError: If the index has already been loaded
        """
        if self._ready:
            raise LexiconError("Lexicon index is already loaded and cannot be rebuilt")

        for entry in iter_entries(raw_text.split("\n"), comment_marker):
            self._entry_count += 1
            for key in entry.headwords:
                self._entries[key] = entry

        self._max_key_length = max((len(key) for key in self._entries), default=0)
        self._ready = True

        logger.info(
            f"Lexicon loaded: {self._entry_count} entries, {len(self._entries)} keys, "
            f"longest key {self._max_key_length} characters"
        )

    @property
    def is_ready(self) -> bool:
        """Whether the index has been loaded."""
        return self._ready

    @property
    def max_key_length(self) -> int:
        """Length in characters of the longest key (0 when empty)."""
        return self._max_key_length

    @property
    def entry_count(self) -> int:
        """Number of dictionary lines that parsed into an entry."""
        return self._entry_count

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return self._ready and key in self._entries

    def _check_ready(self, operation: str) -> bool:
        if not self._ready:
            logger.warning(f"Lexicon queried before it was loaded ({operation})")
        return self._ready

    def get(self, key: str) -> LexiconEntry | None:
        """Look up an entry by its exact traditional or simplified headword.

        No normalization is applied. Returns None for unknown keys, and for
        every key while the index is not loaded.

        Args:
            key: Headword to look up

        Returns:
            LexiconEntry if found, None otherwise
        """
        if not self._check_ready("get"):
            return None
        return self._entries.get(key)

    def find_longest_match(self, text: str, start_index: int) -> str | None:
        """Find the longest dictionary word starting at ``start_index``.

        Candidate lengths are tried from ``max_key_length`` down to 1, so the
        first hit is the longest one. Candidates running past the end of the
        text are skipped.

        Args:
            text: Text to scan
            start_index: Character position to match at, 0 <= start_index <= len(text)

        Returns:
            The matched substring, or None if no word starts there

        Raises:
            ValueError: If start_index is outside the text
        """
        if not 0 <= start_index <= len(text):
            raise ValueError(f"start_index {start_index} is outside text of length {len(text)}")
        if not self._check_ready("find_longest_match"):
            return None

        longest = min(self._max_key_length, len(text) - start_index)
        for length in range(longest, 0, -1):
            candidate = text[start_index:start_index + length]
            if candidate in self._entries:
                return candidate
        return None

    def find_longest_entry(self, text: str, start_index: int) -> tuple[str, LexiconEntry] | None:
        """Like find_longest_match, but also return the matched entry."""
        word = self.find_longest_match(text, start_index)
        if word is None:
            return None
        return word, self._entries[word]
