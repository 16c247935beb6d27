"""
Environment-driven configuration for the reader server.
"""

import os

from pydantic import BaseModel, Field

from .lexicon.parser import DEFAULT_COMMENT_MARKER
from .sources.fetcher import DEFAULT_TIMEOUT


class ReaderConfig(BaseModel):
    """Settings for loading the dictionary and running the server."""

    source: str = Field(
        default="cedict_ts.u8",
        min_length=1,
        description="URL or file path of the CC-CEDICT dictionary text"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Timeout in seconds for fetching a remote dictionary"
    )
    comment_marker: str = Field(
        default=DEFAULT_COMMENT_MARKER,
        min_length=1,
        max_length=1,
        description="Leading character of comment lines in the dictionary"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level name"
    )

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        """Build the configuration from CEDICT_* environment variables.

        Unset variables keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        env = {
            "source": os.getenv("CEDICT_SOURCE"),
            "timeout": os.getenv("CEDICT_TIMEOUT"),
            "comment_marker": os.getenv("CEDICT_COMMENT_MARKER"),
            "log_level": os.getenv("CEDICT_LOG_LEVEL", "").upper() or None,
        }
        return cls(**{k: v for k, v in env.items() if v is not None})
