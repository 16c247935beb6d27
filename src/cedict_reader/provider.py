"""
One-time, shared initialization of the lexicon.

The dictionary is large, so it is fetched and indexed once per process and the
resulting read-only LexiconIndex is handed to every caller. Callers that ask
for the lexicon while the load is still in flight wait on that same load.
"""

from __future__ import annotations

import asyncio
import logging

from .errors import LexiconLoadError
from .lexicon import LexiconIndex
from .lexicon.parser import DEFAULT_COMMENT_MARKER
from .sources.fetcher import DEFAULT_TIMEOUT, fetch_source

logger = logging.getLogger("cedict-reader")


class LexiconProvider:
    """Loads the lexicon at most once and shares the result.

    The first ``await provider.get()`` starts the load as a task; concurrent
    callers await the same task and receive the same LexiconIndex instance.
    A failed load raises LexiconLoadError in every waiting caller and leaves
    the provider unloaded, so a later ``get()`` starts a fresh attempt.

    Usage:
        provider = LexiconProvider("https://example.org/cedict_ts.u8")
        index = await provider.get()
        index.get("家具")
    """

    def __init__(
        self,
        source: str,
        timeout: float = DEFAULT_TIMEOUT,
        comment_marker: str = DEFAULT_COMMENT_MARKER,
    ) -> None:
        """
        Args:
            source: URL or file path of the dictionary text
            timeout: Timeout in seconds for fetching a remote source
            comment_marker: Leading character that marks a comment line
        """
        self.source = source
        self.timeout = timeout
        self.comment_marker = comment_marker
        self._index: LexiconIndex | None = None
        self._task: asyncio.Task[LexiconIndex] | None = None
        self.last_error: str | None = None

    @property
    def is_loaded(self) -> bool:
        """Whether the lexicon has finished loading."""
        return self._index is not None

    @property
    def is_loading(self) -> bool:
        """Whether a load is currently in flight."""
        return self._task is not None and not self._task.done()

    @property
    def index(self) -> LexiconIndex | None:
        """The loaded index, or None if it is not loaded yet."""
        return self._index

    async def get(self) -> LexiconIndex:
        """Return the shared index, loading it on first use.

        Raises:
            LexiconLoadError: If the dictionary source cannot be obtained
        """
        if self._index is not None:
            return self._index

        if self._task is None:
            self._task = asyncio.create_task(self._load())
        task = self._task

        try:
            # Shielded so one cancelled caller does not cancel the shared load.
            return await asyncio.shield(task)
        except Exception:
            if self._task is task and task.done():
                self._task = None
            raise

    async def _load(self) -> LexiconIndex:
        logger.info(f"Loading lexicon from {self.source}")
        try:
            raw_text = await fetch_source(self.source, self.timeout)
            index = await asyncio.to_thread(LexiconIndex.build, raw_text, self.comment_marker)
        except Exception as e:
            self.last_error = str(e)
            logger.error(f"Lexicon initialization failed: {e}")
            raise

        self._index = index
        self.last_error = None
        return index
