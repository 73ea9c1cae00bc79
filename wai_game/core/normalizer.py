"""
Text normalizer applied before any answer comparison
"""
import re

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Canonicalize free text

    - lower-case
    - trim leading/trailing whitespace
    - collapse whitespace runs to a single space

    Example:
        >>> normalize_text("  Hello\\n  WORLD ")
        'hello world'
    """
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text.lower().strip())
