"""
Data models for the CC-CEDICT lexicon.
"""

from pydantic import BaseModel, ConfigDict, Field


class LexiconEntry(BaseModel):
    """A single dictionary entry in CC-CEDICT form.

    The same entry is reachable through both of its headwords. For
    characters that have no distinct traditional form the two headwords
    are identical.

    Attributes:
        traditional: Traditional-script headword (e.g., "傢俱")
        simplified: Simplified-script headword (e.g., "家具")
        pinyin: Romanized reading with tone numbers (e.g., "jia1 ju4")
        definitions: English glosses, primary sense first
    """
    model_config = ConfigDict(frozen=True)

    traditional: str = Field(..., min_length=1, description="Traditional-script headword")
    simplified: str = Field(..., min_length=1, description="Simplified-script headword")
    pinyin: str = Field(..., description="Romanized pronunciation")
    definitions: tuple[str, ...] = Field(default_factory=tuple, description="Glosses in source order")

    @property
    def headwords(self) -> tuple[str, str]:
        """Both lookup keys of this entry, traditional first."""
        return (self.traditional, self.simplified)


class Segment(BaseModel):
    """A span of text produced by the segmenter.

    Offsets are code-point positions into the segmented text, end exclusive
    (like Python slices).
    """
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Covered text")
    start: int = Field(..., ge=0, description="Start offset (inclusive)")
    end: int = Field(..., ge=0, description="End offset (exclusive)")
    matched: bool = Field(default=False, description="Whether the span is a dictionary word")
    entry: LexiconEntry | None = Field(default=None, description="Entry of a matched span")
