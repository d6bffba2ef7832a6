"""Tests for BibTeX export."""

from bibroster.export.bibtex import (
    _format_authors,
    publication_to_bibtex_entry,
    publications_to_bibtex,
)
from bibroster.models import Author, Publication, PublicationType


class TestFormatAuthors:
    """Tests for _format_authors()."""

    def test_family_given(self, sample_publication: Publication) -> None:
        """Authors are written 'Family, Given' joined by ' and '."""
        assert _format_authors(sample_publication) == "Doe, Jane and Smith, John"

    def test_single_word_name(self) -> None:
        """Mononyms are written as-is."""
        pub = Publication(
            citation_key="k",
            year=2020,
            authors=[Author(name="Plato")],
        )
        assert _format_authors(pub) == "Plato"


class TestBibtexEntry:
    """Tests for publication_to_bibtex_entry()."""

    def test_article_entry(self, sample_publication: Publication) -> None:
        """Articles put the venue in 'journal'."""
        entry = publication_to_bibtex_entry(sample_publication)
        assert entry["ENTRYTYPE"] == "article"
        assert entry["ID"] == "doe2020"
        assert entry["journal"] == "Journal of Policy Analysis"
        assert entry["year"] == "2020"
        assert entry["doi"] == "10.1234/example.2020"

    def test_conference_entry(self) -> None:
        """Conference papers put the venue in 'booktitle'."""
        pub = Publication(
            kind=PublicationType.CONFERENCE_PAPER,
            citation_key="c1",
            title="T",
            venue="Proc",
            year=2021,
        )
        entry = publication_to_bibtex_entry(pub)
        assert entry["ENTRYTYPE"] == "inproceedings"
        assert entry["booktitle"] == "Proc"
        assert "doi" not in entry

    def test_unknown_entry(self) -> None:
        """Unknown kinds export as misc."""
        pub = Publication(citation_key="u1", venue="Blog", year=2022)
        entry = publication_to_bibtex_entry(pub)
        assert entry["ENTRYTYPE"] == "misc"
        assert entry["venue"] == "Blog"


class TestWorksToBibtex:
    """Tests for publications_to_bibtex()."""

    def test_renders_entries(self, sample_publication: Publication) -> None:
        """Output contains the entry header and fields."""
        text = publications_to_bibtex([sample_publication])
        assert "@article{doe2020," in text
        assert "Computational Approaches to Rulemaking" in text

    def test_empty(self) -> None:
        """No publications produce no entries."""
        assert "@" not in publications_to_bibtex([])
