"""Tests for the command-line interface."""

from pathlib import Path

import orjson
from click.testing import CliRunner

from bibroster.cli import main


class TestCli:
    """Tests for the bibroster command."""

    def test_search_report(self, roster_file: Path, bib_file: Path) -> None:
        """Matches are listed and the average is printed."""
        result = CliRunner().invoke(
            main, [str(roster_file), str(bib_file), "Doe, Jane"]
        )
        assert result.exit_code == 0
        assert 'Searching for publications by "Jane Doe"...' in result.output
        assert "Citation Key: doe2020" in result.output
        assert "Citation Key: lee2021" in result.output
        assert "Citation Key: solo2022" not in result.output
        assert (
            "Jane Doe (Institute Affiliation), John Smith (External)"
            in result.output
        )
        assert (
            'Average number of co-authors for "Doe, Jane": 1.5'
            in result.output
        )

    def test_no_results(self, roster_file: Path, bib_file: Path) -> None:
        """No hits is still a successful run."""
        result = CliRunner().invoke(
            main, [str(roster_file), str(bib_file), "Nobody"]
        )
        assert result.exit_code == 0
        assert 'No publications found for "Nobody".' in result.output
        assert 'Average number of co-authors for "Nobody": 0' in result.output

    def test_wrong_argument_count(self, roster_file: Path) -> None:
        """Too few arguments exit with status 1."""
        result = CliRunner().invoke(main, [str(roster_file)])
        assert result.exit_code == 1

    def test_too_many_arguments(
        self, roster_file: Path, bib_file: Path
    ) -> None:
        """Extra arguments exit with status 1."""
        result = CliRunner().invoke(
            main, [str(roster_file), str(bib_file), "Jane Doe", "extra"]
        )
        assert result.exit_code == 1

    def test_fatal_parse_error(
        self, roster_file: Path, tmp_path: Path
    ) -> None:
        """Parse failures produce a diagnostic and exit status 1."""
        bib = tmp_path / "bad.bib"
        bib.write_text(
            "@article{dup, author={Ann Lee and Ann Lee}, year={2020}}\n"
        )
        result = CliRunner().invoke(main, [str(roster_file), str(bib), "Ann"])
        assert result.exit_code == 1
        assert "Duplicate authors found" in result.output
        assert "dup" in result.output

    def test_missing_roster(self, tmp_path: Path, bib_file: Path) -> None:
        """An unreadable roster exits with status 1."""
        result = CliRunner().invoke(
            main, [str(tmp_path / "none.txt"), str(bib_file), "Ann"]
        )
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_json_format(self, roster_file: Path, bib_file: Path) -> None:
        """JSON output carries matches and the average."""
        result = CliRunner().invoke(
            main,
            [str(roster_file), str(bib_file), "Ann Lee", "--format", "json"],
        )
        assert result.exit_code == 0
        start = result.output.index("{")
        data = orjson.loads(result.output[start:])
        assert data["query"] == "Ann Lee"
        assert [p["citation_key"] for p in data["publications"]] == [
            "lee2021",
            "solo2022",
        ]
        assert data["average_coauthors"] == 1.0

    def test_bibtex_format(self, roster_file: Path, bib_file: Path) -> None:
        """BibTeX output keeps citation keys."""
        result = CliRunner().invoke(
            main,
            [str(roster_file), str(bib_file), "Jane Doe", "--format", "bibtex"],
        )
        assert result.exit_code == 0
        assert "@article{doe2020," in result.output
        assert "@inproceedings{lee2021," in result.output

    def test_malformed_config_yaml(
        self, roster_file: Path, bib_file: Path, tmp_path: Path
    ) -> None:
        """Unparseable YAML is reported, not raised."""
        config = tmp_path / "bad.yaml"
        config.write_text("institute: [oops\n")
        result = CliRunner().invoke(
            main, [str(roster_file), str(bib_file), "Ann", "-c", str(config)]
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: Invalid config file" in result.output

    def test_invalid_config_values(
        self, roster_file: Path, bib_file: Path, tmp_path: Path
    ) -> None:
        """Config that fails validation is reported, not raised."""
        config = tmp_path / "bad.yaml"
        config.write_text("institute: 5\n")
        result = CliRunner().invoke(
            main, [str(roster_file), str(bib_file), "Ann", "-c", str(config)]
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error: Invalid config file" in result.output

    def test_entry_error_reported_once(
        self, roster_file: Path, tmp_path: Path
    ) -> None:
        """A fatal entry error yields a single diagnostic line."""
        bib = tmp_path / "bad.bib"
        bib.write_text("@article{k, author={Ann Lee}, year={soon}}\n")
        result = CliRunner().invoke(main, [str(roster_file), str(bib), "Ann"])
        assert result.exit_code == 1
        assert result.output.count("Year is not an integer") == 1
