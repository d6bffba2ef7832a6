"""Roster loading for bibroster.

A roster file lists one affiliated person per line, either as
'Family, Given' or free-form. Each line is normalized before it is
stored, so lookups compare canonical names only.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from bibroster.exceptions import SourceIOError
from bibroster.models import EXTERNAL_AFFILIATION, INSTITUTE_AFFILIATION, Roster
from bibroster.normalize import normalize_name, split_lines

logger = logging.getLogger(__name__)


def roster_from_lines(
    lines: Iterable[str],
    affiliation: str = INSTITUTE_AFFILIATION,
    external: str = EXTERNAL_AFFILIATION,
) -> Roster:
    """Build a Roster from raw name lines.

    Lines that normalize to an empty string are skipped: an empty
    roster name would be a substring of every author name and would
    let any entry through the affiliation check.

    Args:
        lines: One raw name per item.
        affiliation: Label granted to exact roster matches.
        external: Label for everyone else.

    Returns:
        Frozen Roster instance.
    """
    names: set[str] = set()
    skipped = 0
    for line in lines:
        name = normalize_name(line)
        if not name:
            skipped += 1
            continue
        names.add(name)

    if skipped:
        logger.debug("Skipped %d blank roster lines", skipped)
    return Roster(
        names=frozenset(names),
        affiliation=affiliation,
        external=external,
    )


def load_roster(
    path: str | Path,
    affiliation: str = INSTITUTE_AFFILIATION,
    external: str = EXTERNAL_AFFILIATION,
    encoding: str = "utf-8",
) -> Roster:
    """Read a roster file into a Roster.

    Malformed lines are never rejected; every non-blank line is taken
    as a name.

    Args:
        path: Path to the roster text file.
        affiliation: Label granted to exact roster matches.
        external: Label for everyone else.
        encoding: Text encoding of the file.

    Returns:
        Frozen Roster instance.

    Raises:
        SourceIOError: If the file cannot be opened or decoded.
    """
    path = Path(path)
    try:
        with open(path, encoding=encoding) as f:
            lines = split_lines(f.read())
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read roster %s: %s", path, exc)
        raise SourceIOError(path, str(exc)) from exc

    roster = roster_from_lines(lines, affiliation=affiliation, external=external)
    logger.info("Loaded %d roster names from %s", len(roster), path)
    return roster
