"""bibroster -- Roster-checked bibliography parsing and author statistics."""

from bibroster.core import BibRoster
from bibroster.exceptions import (
    BibRosterError,
    DuplicateAuthorError,
    EntryError,
    FormatError,
    NoAffiliatedAuthorError,
    ParseError,
    SourceIOError,
)
from bibroster.models import Author, Publication, PublicationType, Roster

__all__ = [
    "Author",
    "BibRoster",
    "BibRosterError",
    "DuplicateAuthorError",
    "EntryError",
    "FormatError",
    "NoAffiliatedAuthorError",
    "ParseError",
    "Publication",
    "PublicationType",
    "Roster",
    "SourceIOError",
]
