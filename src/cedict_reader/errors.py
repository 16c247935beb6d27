"""
Exceptions raised by the lexicon loader.
"""


class LexiconError(Exception):
    """Raised when the lexicon is used in a way it does not support."""


class LexiconLoadError(LexiconError):
    """Raised when the raw dictionary source cannot be obtained.

    Carries a user-facing message explaining what went wrong and,
    where possible, how to fix it.
    """
