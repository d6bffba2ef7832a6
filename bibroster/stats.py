"""Author search and co-authorship statistics over parsed publications."""

from collections.abc import Iterable

from bibroster.models import Publication
from bibroster.normalize import normalize_name


def find_publications(
    publications: Iterable[Publication], query: str
) -> list[Publication]:
    """Find publications with an author whose name contains the query.

    Args:
        publications: Parsed publications.
        query: Author name or name fragment, in any supported form.

    Returns:
        Matching publications in their original order.
    """
    needle = normalize_name(query)
    return [
        pub
        for pub in publications
        if any(needle in normalize_name(a.name) for a in pub.authors)
    ]


def average_coauthors(
    publications: Iterable[Publication], author_name: str
) -> float:
    """Mean co-author count over the publications of one author.

    A publication counts when one of its authors has exactly the
    normalized ``author_name``. Its contribution is the number of
    other authors on it.

    Args:
        publications: Parsed publications.
        author_name: Name of the author of interest.

    Returns:
        Arithmetic mean of co-author counts, or 0.0 if the author has
        no publications.
    """
    target = normalize_name(author_name)
    total = 0
    matched = 0
    for pub in publications:
        if pub.has_author(target):
            matched += 1
            total += pub.coauthor_count()

    if matched == 0:
        return 0.0
    return total / matched
