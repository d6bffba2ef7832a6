"""Shared pytest fixtures for bibroster tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from bibroster.models import Author, Publication, PublicationType, Roster
from bibroster.roster import roster_from_lines

SAMPLE_BIB = """\
@article{doe2020,
  author={Doe, Jane and John Smith},
  title={Computational Approaches to Rulemaking},
  journal={Journal of Policy Analysis},
  year={2020},
  doi={10.1234/example.2020}
}

@inproceedings{lee2021,
  author={Ann Lee and Jane Doe and Bo Chen},
  title={A Workshop Paper},
  venue={Proc. of the Workshop},
  year={2021}
}
@misc{solo2022,
  author={Ann Lee},
  title={Solo Note},
  venue={Self Published},
  year={2022}
}
"""


@pytest.fixture
def roster() -> Roster:
    """Roster with two affiliated people."""
    return roster_from_lines(["Doe, Jane", "Ann Lee"])


@pytest.fixture
def sample_bib_text() -> str:
    """Three well-formed entries, the last one unterminated by '@'."""
    return SAMPLE_BIB


@pytest.fixture
def roster_file(tmp_path: Path) -> Path:
    """Roster file in mixed name forms."""
    path = tmp_path / "faculty.txt"
    path.write_text("Doe, Jane\nAnn Lee\n", encoding="utf-8")
    return path


@pytest.fixture
def bib_file(tmp_path: Path) -> Path:
    """Bibliography file holding SAMPLE_BIB."""
    path = tmp_path / "refs.bib"
    path.write_text(SAMPLE_BIB, encoding="utf-8")
    return path


@pytest.fixture
def sample_publication() -> Publication:
    """A parsed article with one affiliated and one external author."""
    return Publication(
        kind=PublicationType.ARTICLE,
        citation_key="doe2020",
        title="Computational Approaches to Rulemaking",
        venue="Journal of Policy Analysis",
        year=2020,
        doi="10.1234/example.2020",
        authors=[
            Author(name="Jane Doe", affiliation="Institute Affiliation"),
            Author(name="John Smith", affiliation="External"),
        ],
    )


@pytest.fixture
def make_publication() -> Callable[[str, list[str]], Publication]:
    """Factory for minimal publications with the given author names."""

    def _make(key: str, names: list[str]) -> Publication:
        return Publication(
            kind=PublicationType.ARTICLE,
            citation_key=key,
            title=f"Title {key}",
            venue="Venue",
            year=2020,
            authors=[Author(name=n) for n in names],
        )

    return _make
