"""
Pytest configuration and fixtures for cedict-reader tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing cedict_reader
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from cedict_reader.lexicon import LexiconIndex  # noqa: E402


SAMPLE_CEDICT = """\
# CC-CEDICT
#! version=1
#! charset=UTF-8
傢俱 家具 [jia1 ju4] /furniture/
他 他 [ta1] /he or him/
買 买 [mai3] /to buy/
了 了 [le5] /(completed action marker)/
家 家 [jia1] /home/family/
中國 中国 [Zhong1 guo2] /China/
中國人 中国人 [Zhong1 guo2 ren2] /Chinese person/
人 人 [ren2] /person/people/
這不是一個詞條
"""


@pytest.fixture
def sample_text() -> str:
    """Raw dictionary text with comments, entries and one malformed line."""
    return SAMPLE_CEDICT


@pytest.fixture
def index(sample_text: str) -> LexiconIndex:
    """A LexiconIndex built from the sample dictionary."""
    return LexiconIndex.build(sample_text)
