"""Shared name normalization utilities for bibroster.

Used by the roster loader, the bibliography parser, statistics, and
export modules so every name comparison works on the same form.
"""

import re

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends.

    Args:
        text: Raw text.

    Returns:
        Text with single-space separators and no outer whitespace.
    """
    return _WHITESPACE.sub(" ", text).strip()


def normalize_name(name: str) -> str:
    """Canonicalize a person's name into 'Given Family' order.

    A name containing a comma is read as 'Family, Given'. Only the
    first comma separates the two parts. Later commas become plain
    separators inside the given names, so the result never contains a
    comma and normalizing it again returns it unchanged.

    Args:
        name: Raw name, either 'Family, Given' or free-form.

    Returns:
        Normalized name. Empty input yields an empty string.
    """
    family, comma, given = name.partition(",")
    if comma:
        given = given.replace(",", " ")
        return collapse_whitespace(f"{given} {family}")
    return collapse_whitespace(name)


def split_author_name(name: str) -> tuple[str | None, str | None]:
    """Split a normalized author name into (given_names, family_name).

    Args:
        name: Author name in 'Given [Middle] Family' order.

    Returns:
        Tuple of (given_names, family_name). Returns (None, None)
        for empty/whitespace-only names. Returns (None, name) for
        single-word names.
    """
    parts = name.strip().split()
    if not parts:
        return None, None
    if len(parts) == 1:
        return None, parts[0]
    return " ".join(parts[:-1]), parts[-1]


def split_lines(text: str) -> list[str]:
    """Split source text on newlines only, dropping a trailing '\\r'.

    Unlike ``str.splitlines``, other line-break characters such as
    U+2028 or form feeds stay inside the line.

    Args:
        text: Full source text.

    Returns:
        Lines without terminators.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
