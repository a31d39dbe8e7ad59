"""Text processing utilities."""

import re

_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?```\s*$", re.DOTALL)


def contains_bengali(text: str) -> bool:
    """Check whether text contains any Bengali script characters.

    Args:
        text: Input text

    Returns:
        True if at least one character is in the Bengali block
    """
    return any("ঀ" <= ch <= "৿" for ch in text)


def detect_language(word: str) -> str:
    """Guess the language of a headword ("bn" or "en")."""
    return "bn" if contains_bengali(word) else "en"


def normalize_query(query: str | None) -> str:
    """Trim and case-fold a search query.

    Args:
        query: Raw query text (None is treated as empty)

    Returns:
        Normalized query, empty string when there is nothing to search for
    """
    if not query:
        return ""
    return query.strip().casefold()


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence if present.

    Args:
        text: Raw model output, e.g. "```json\\n{...}\\n```"

    Returns:
        The fenced content, or the stripped input if it is not fenced
    """
    text = text.strip()
    match = _FENCE_RE.match(text)
    if match:
        return match.group(1).strip()
    return text
