"""
Dictionary source acquisition (HTTP or local file).
"""

from .fetcher import fetch_source, fetch_url, is_remote_source, read_source_file

__all__ = ["fetch_source", "fetch_url", "is_remote_source", "read_source_file"]
