"""Core orchestration engine for bibroster.

Ties together configuration, the roster, the bibliography parser, and
statistics. This is the single entry point used by the CLI and by
library consumers.
"""

import logging
from pathlib import Path

from bibroster.config import BibRosterConfig, load_config
from bibroster.models import Publication, Roster
from bibroster.parser import parse_bib_file, parse_bibliography
from bibroster.roster import load_roster
from bibroster.stats import average_coauthors, find_publications

logger = logging.getLogger(__name__)


class BibRoster:
    """Parse bibliographies against a fixed roster of affiliated people.

    The roster is loaded once and never changes afterwards. Parsed
    publication lists belong to the caller.
    """

    def __init__(
        self,
        roster: Roster,
        config: BibRosterConfig | None = None,
    ) -> None:
        """Initialize with an already loaded roster.

        Args:
            roster: Affiliated names and the labels to assign.
            config: Settings; defaults are used when omitted.
        """
        self.roster = roster
        self.config = config or BibRosterConfig()

    @classmethod
    def from_roster_file(
        cls,
        roster_path: str | Path,
        config_path: str | Path | None = None,
    ) -> "BibRoster":
        """Load a roster file, applying labels from an optional config.

        Args:
            roster_path: Path to the roster text file.
            config_path: Optional path to a bibroster YAML config.

        Returns:
            Ready BibRoster instance.

        Raises:
            FileNotFoundError: If ``config_path`` does not exist.
            SourceIOError: If the roster cannot be read.
        """
        config = (
            load_config(config_path)
            if config_path is not None
            else BibRosterConfig()
        )
        roster = load_roster(
            roster_path,
            affiliation=config.institute.affiliation,
            external=config.external_label,
            encoding=config.encoding,
        )
        return cls(roster, config)

    def parse_file(self, bib_path: str | Path) -> list[Publication]:
        """Parse a bibliography file against the roster.

        Args:
            bib_path: Path to the bibliography file.

        Returns:
            Publications in source order.
        """
        return parse_bib_file(bib_path, self.roster, encoding=self.config.encoding)

    def parse_text(self, text: str) -> list[Publication]:
        """Parse bibliography text against the roster."""
        return parse_bibliography(text, self.roster)

    def search(
        self, publications: list[Publication], query: str
    ) -> list[Publication]:
        """Publications with an author name containing ``query``."""
        matches = find_publications(publications, query)
        logger.debug("Search %r matched %d publications", query, len(matches))
        return matches

    def average_coauthors(
        self, publications: list[Publication], author_name: str
    ) -> float:
        """Mean co-author count for ``author_name``; 0.0 if absent."""
        return average_coauthors(publications, author_name)
