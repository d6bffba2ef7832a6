"""Exception hierarchy for bibroster.

Every failure the package raises derives from BibRosterError so
callers (the CLI in particular) can turn any of them into a clean
diagnostic. Entry-level failures abort the whole parse.
"""

from pathlib import Path


class BibRosterError(Exception):
    """Base class for all bibroster errors."""


class SourceIOError(BibRosterError):
    """A roster or bibliography source could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class EntryError(BibRosterError):
    """A bibliography entry violated a parsing invariant.

    Attributes:
        citation_key: Key from the entry header, if one was found.
        entry_index: 1-based position of the entry in the source.
    """

    def __init__(
        self,
        message: str,
        citation_key: str | None = None,
        entry_index: int | None = None,
    ) -> None:
        self.message = message
        self.citation_key = citation_key
        self.entry_index = entry_index
        super().__init__(message)

    def __str__(self) -> str:
        where: list[str] = []
        if self.entry_index is not None:
            where.append(f"entry #{self.entry_index}")
        if self.citation_key:
            where.append(f"key '{self.citation_key}'")
        if not where:
            return self.message
        return f"{self.message} ({', '.join(where)})"


class FormatError(EntryError):
    """Unbalanced braces or quotes in an entry."""


class DuplicateAuthorError(EntryError):
    """The same normalized author appears twice in one entry."""


class NoAffiliatedAuthorError(EntryError):
    """No author of an entry matches anyone on the roster."""


class ParseError(EntryError):
    """A mandatory field is missing or cannot be converted."""
