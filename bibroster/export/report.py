"""Plain-text report rendering for search results."""

from bibroster.models import Publication

SEPARATOR = "-" * 42


def format_authors(publication: Publication) -> str:
    """Render 'Name (Affiliation)' pairs for every author."""
    return ", ".join(f"{a.name} ({a.affiliation})" for a in publication.authors)


def format_publication(publication: Publication) -> str:
    """Render one search hit as a multi-line text block.

    Args:
        publication: Publication to render.

    Returns:
        Citation key, authors, title, venue, and a separator line.
    """
    lines = [
        f"Citation Key: {publication.citation_key}",
        f"Authors: {format_authors(publication)}",
        f"Title: {publication.title}",
        f"Venue: {publication.venue}",
    ]
    if publication.doi:
        lines.append(f"DOI: {publication.doi}")
    lines.append(SEPARATOR)
    return "\n".join(lines)
