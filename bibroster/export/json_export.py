"""Native JSON export for bibroster publications.

Each record carries its kind, citation key, title, venue, year, DOI
and the ordered author list with every author's affiliation tag.
"""

from typing import Any

from bibroster.models import Publication


def publications_to_json(publications: list[Publication]) -> list[dict[str, Any]]:
    """Export publications as JSON-serializable dictionaries.

    Args:
        publications: List of Publication objects.

    Returns:
        One dict per publication; ``authors`` is a list of
        ``{"name", "affiliation"}`` objects in source order.
    """
    return [p.model_dump(mode="json") for p in publications]
