"""Pydantic data models for bibroster.

Defines the core domain types: Publication, Author, Roster, and the
publication kind enum. All models are immutable once built.
"""

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

INSTITUTE_AFFILIATION = "Institute Affiliation"
EXTERNAL_AFFILIATION = "External"


class PublicationType(StrEnum):
    """Bibliography record kind, keyed by the entry type token."""

    ARTICLE = "article"
    CONFERENCE_PAPER = "inproceedings"
    UNKNOWN = "unknown"

    @classmethod
    def from_entry_type(cls, entry_type: str) -> "PublicationType":
        """Map an '@TYPE' token to a kind, ignoring case.

        Args:
            entry_type: Raw type token from the entry header.

        Returns:
            ARTICLE, CONFERENCE_PAPER, or UNKNOWN for anything else.
        """
        token = entry_type.strip().lower()
        if token == cls.ARTICLE.value:
            return cls.ARTICLE
        if token == cls.CONFERENCE_PAPER.value:
            return cls.CONFERENCE_PAPER
        return cls.UNKNOWN


class Author(BaseModel):
    """One author of one publication, with its affiliation tag."""

    model_config = ConfigDict(frozen=True)

    name: str
    affiliation: str = EXTERNAL_AFFILIATION

    def is_from_institute(self, institute: str) -> bool:
        """Return True if this author carries the given affiliation."""
        return self.affiliation == institute


class Publication(BaseModel):
    """A single validated bibliography record.

    Authors keep the order of the source author field. Each
    publication owns its own Author values.
    """

    model_config = ConfigDict(frozen=True)

    kind: PublicationType = PublicationType.UNKNOWN
    citation_key: str
    title: str = ""
    venue: str = ""
    year: int
    doi: str | None = None
    authors: tuple[Author, ...] = ()

    def has_author(self, name: str) -> bool:
        """Check for an author whose normalized name equals ``name``.

        Args:
            name: Already normalized name.

        Returns:
            True on an exact match.
        """
        return any(a.name == name for a in self.authors)

    def has_institute_author(self, institute: str) -> bool:
        """Return True if any author carries the given affiliation."""
        return any(a.is_from_institute(institute) for a in self.authors)

    def coauthor_count(self) -> int:
        """Number of other authors for any one author of this work."""
        return max(len(self.authors) - 1, 0)


class Roster(BaseModel):
    """Normalized names of the institute's affiliated people.

    Built once by the roster loader and passed explicitly into the
    parsing pipeline together with the labels it assigns.
    """

    model_config = ConfigDict(frozen=True)

    names: frozenset[str] = frozenset()
    affiliation: str = INSTITUTE_AFFILIATION
    external: str = EXTERNAL_AFFILIATION

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)

    def affiliation_for(self, name: str) -> str:
        """Affiliation tag for a normalized author name.

        Only an exact roster hit earns the institute affiliation.

        Args:
            name: Normalized author name.

        Returns:
            The institute affiliation or the external sentinel.
        """
        return self.affiliation if name in self.names else self.external

    def matches_any(self, names: Iterable[str]) -> bool:
        """Return True if a roster name occurs inside any given name.

        This is a substring test, so partial roster entries such as
        a bare family name still match.
        """
        candidates = list(names)
        return any(
            member in candidate
            for candidate in candidates
            for member in self.names
        )
