"""String transformation helpers"""

import re
from typing import Any

WORD_START = re.compile(r"\b\w", re.ASCII)
NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
SEPARATOR_RUNS = re.compile(r"[\s_-]+")


def _require_str(text: Any) -> None:
    if not isinstance(text, str):
        raise TypeError("Input must be a string")


def capitalize(text: str, all_words: bool = True) -> str:
    """Capitalize the first letter of each word, or of the whole string

    Args:
        text: Text to capitalize
        all_words: Upper-case the start of every word (rest untouched) when
            True; otherwise upper-case the first character and lower-case
            the remainder

    Raises:
        TypeError: If text is not a string
    """
    _require_str(text)
    if not text:
        return text

    if all_words:
        return WORD_START.sub(lambda match: match.group(0).upper(), text)

    return text[0].upper() + text[1:].lower()


def slugify(text: str) -> str:
    """Convert text to a URL-friendly slug

    >>> slugify("The Quick Brown Fox!")
    'the-quick-brown-fox'
    """
    _require_str(text)

    slug = text.lower().strip()
    slug = NON_SLUG_CHARS.sub("", slug)
    slug = SEPARATOR_RUNS.sub("-", slug)
    return slug.strip("-")
