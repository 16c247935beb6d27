"""
CC-CEDICT Reader MCP Server
Chinese word lookup and segmentation tools built with the FastMCP framework.
"""

import json
import logging
from typing import Annotated, Literal

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from .config import ReaderConfig
from .errors import LexiconLoadError
from .lexicon import LexiconEntry, LexiconIndex, lookup_at as lookup_segment_at, segment_blocks
from .provider import LexiconProvider

logger = logging.getLogger("cedict-reader")

env_loaded = load_dotenv()
config = ReaderConfig.from_env()

logging.basicConfig(
    level=config.log_level,
    )

if not env_loaded:
    logger.warning("❌ .env file not found! Using CEDICT_* environment variables and defaults.")

logger.debug(f"📖 Dictionary source: {config.source}")

provider = LexiconProvider(
    source=config.source,
    timeout=config.timeout,
    comment_marker=config.comment_marker,
)

mcp = FastMCP(
    name="cedict-reader"
)


def format_entry(entry: LexiconEntry) -> str:
    """Render an entry the way the reader's lookup panel shows it."""
    lines = [f"**{entry.traditional} / {entry.simplified}**", f"[{entry.pinyin}]"]
    lines.extend(f"• {definition}" for definition in entry.definitions)
    return "\n".join(lines)


def _lookup_word_impl(index: LexiconIndex, word: str) -> str:
    entry = index.get(word)
    if entry is None:
        return f"❌ '{word}' not found in the dictionary."
    return format_entry(entry)


def _segment_text_impl(index: LexiconIndex, text: str, format: str = "text") -> str:
    blocks = segment_blocks(index, text)

    if format == "json":
        return json.dumps(
            [[segment.model_dump(mode="json") for segment in block] for block in blocks],
            ensure_ascii=False,
            indent=2,
        )

    # Dictionary words are bracketed; everything else is passed through.
    rendered = [
        "".join(f"[{s.text}]" if s.matched else s.text for s in block)
        for block in blocks
    ]
    return "\n".join(rendered)


def _lookup_at_impl(index: LexiconIndex, text: str, position: int) -> str:
    segment = lookup_segment_at(index, text, position)
    if segment is None:
        return f"❌ No dictionary word at position {position}."
    return f"Word at {segment.start}-{segment.end}: {segment.text}\n\n{format_entry(segment.entry)}"


def _lexicon_status_impl(lexicon_provider: LexiconProvider) -> str:
    index = lexicon_provider.index
    if index is None:
        state = "loading" if lexicon_provider.is_loading else "not loaded"
        lines = [f"**Lexicon:** {state}", f"**Source:** {lexicon_provider.source}"]
        if lexicon_provider.last_error:
            lines.append(f"**Last error:** {lexicon_provider.last_error}")
        return "\n".join(lines)

    return "\n".join([
        "**Lexicon:** loaded",
        f"**Source:** {lexicon_provider.source}",
        f"**Entries:** {index.entry_count}",
        f"**Keys:** {len(index)}",
        f"**Longest word:** {index.max_key_length} characters",
    ])


async def _load_index() -> LexiconIndex | str:
    """Return the shared index, or an error message if it cannot be loaded."""
    try:
        return await provider.get()
    except LexiconLoadError as e:
        return f"❌ Dictionary unavailable: {e}"


@mcp.tool
async def lookup_word(
    word: Annotated[str, Field(description="Chinese word in traditional or simplified characters")]
) -> str:
    """Look up a Chinese word and return its pinyin and English definitions."""
    index = await _load_index()
    if isinstance(index, str):
        return index
    return _lookup_word_impl(index, word)


@mcp.tool
async def segment_text(
    text: Annotated[str, Field(description="Chinese text to segment, one block per line")],
    format: Annotated[Literal["text", "json"], Field(description="Output format: 'text' brackets dictionary words, 'json' lists every segment")] = "text",
) -> str:
    """Split Chinese text into the longest dictionary words at each position."""
    index = await _load_index()
    if isinstance(index, str):
        return index
    return _segment_text_impl(index, text, format)


@mcp.tool
async def lookup_at(
    text: Annotated[str, Field(description="Chinese text")],
    position: Annotated[int, Field(description="Character position (0-based) inside the text", ge=0)],
) -> str:
    """Look up the dictionary word that covers a character position of a text."""
    index = await _load_index()
    if isinstance(index, str):
        return index
    return _lookup_at_impl(index, text, position)


@mcp.tool
def lexicon_status() -> str:
    """Report whether the dictionary is loaded, with entry and key counts."""
    return _lexicon_status_impl(provider)


def main() -> None:
    """Main entry point for the CC-CEDICT Reader MCP Server."""
    mcp.run()

if __name__ == "__main__":
    main()
