"""Substring heuristics shared by the matching components.

All comparisons are case-insensitive and operate on trimmed text. Blank
values never match anything.
"""

from collections.abc import Iterable


def normalize(text: str | None) -> str:
    """Lower-case and trim a value, treating ``None`` as empty."""
    if not text:
        return ""
    return text.strip().lower()


def names_overlap(left: str | None, right: str | None) -> bool:
    """Return True if either name contains the other."""
    left_norm = normalize(left)
    right_norm = normalize(right)
    if not left_norm or not right_norm:
        return False
    return left_norm in right_norm or right_norm in left_norm


def first_token(text: str | None) -> str:
    """Return the first whitespace-delimited token, normalized."""
    parts = normalize(text).split()
    return parts[0] if parts else ""


def display_name(text: str | None) -> str:
    """Return the part of an ingredient phrase before the first comma."""
    if not text:
        return ""
    return text.split(",", maxsplit=1)[0].strip()


def contains_any(text: str | None, keywords: Iterable[str]) -> bool:
    """Return True if the normalized text contains any keyword."""
    normalized = normalize(text)
    if not normalized:
        return False
    return any(keyword in normalized for keyword in keywords)
