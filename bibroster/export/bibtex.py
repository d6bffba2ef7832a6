"""BibTeX export for bibroster publications."""

import bibtexparser
from bibtexparser.bwriter import BibTexWriter

from bibroster.models import Publication, PublicationType
from bibroster.normalize import split_author_name

_TYPE_MAP: dict[PublicationType, str] = {
    PublicationType.ARTICLE: "article",
    PublicationType.CONFERENCE_PAPER: "inproceedings",
    PublicationType.UNKNOWN: "misc",
}


def _format_authors(publication: Publication) -> str:
    """Format authors for BibTeX.

    Args:
        publication: Publication with author data.

    Returns:
        BibTeX-formatted author string joined by ' and '.
    """
    names: list[str] = []
    for author in publication.authors:
        given, family = split_author_name(author.name)
        if given and family:
            names.append(f"{family}, {given}")
        elif family:
            names.append(family)
    return " and ".join(names)


def publication_to_bibtex_entry(publication: Publication) -> dict[str, str]:
    """Convert a Publication to a bibtexparser v1 entry dict.

    The original citation key is kept so exported entries can be
    matched back to the source bibliography.

    Args:
        publication: Publication to convert.

    Returns:
        Dictionary suitable for bibtexparser v1 BibDatabase.
    """
    entry_type = _TYPE_MAP.get(publication.kind, "misc")

    entry: dict[str, str] = {
        "ENTRYTYPE": entry_type,
        "ID": publication.citation_key,
        "title": publication.title,
        "author": _format_authors(publication),
        "year": str(publication.year),
    }

    if publication.venue:
        if entry_type == "inproceedings":
            entry["booktitle"] = publication.venue
        elif entry_type == "article":
            entry["journal"] = publication.venue
        else:
            entry["venue"] = publication.venue

    if publication.doi:
        entry["doi"] = publication.doi

    return entry


def publications_to_bibtex(publications: list[Publication]) -> str:
    """Export a list of publications as a BibTeX string.

    Args:
        publications: List of Publication objects to export.

    Returns:
        BibTeX-formatted string.
    """
    db = bibtexparser.bibdatabase.BibDatabase()
    db.entries = [publication_to_bibtex_entry(p) for p in publications]
    writer = BibTexWriter()
    return str(writer.write(db))
