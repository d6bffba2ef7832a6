"""Bibliography parsing pipeline for bibroster.

Turns brace-delimited, line-oriented citation text into validated
Publication records. The pipeline is:

1. ``iter_entry_blocks`` groups lines into one block per '@' entry.
2. ``is_valid_entry`` gates each block on brace and quote balance.
3. ``extract_field`` pulls title, venue/journal, author, year and doi.
4. ``parse_authors`` splits and normalizes the author field.
5. ``build_publication`` checks authorship against the roster and
   assigns per-author affiliations.

Any violation raises an EntryError subclass and aborts the whole
parse; a partially parsed bibliography is never returned.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from bibroster.exceptions import (
    DuplicateAuthorError,
    EntryError,
    FormatError,
    NoAffiliatedAuthorError,
    ParseError,
    SourceIOError,
)
from bibroster.models import Author, Publication, PublicationType, Roster
from bibroster.normalize import normalize_name, split_lines

logger = logging.getLogger(__name__)

AUTHOR_SEPARATOR = " and "

_HEADER_RE = re.compile(r"@(\w+)\{([^,]+),")
_YEAR_RE = re.compile(r"\d+", re.ASCII)


def extract_field(entry: str, field: str) -> str | None:
    """Extract the value of ``field = {value}`` from an entry.

    The value may not contain a closing brace, so nested braces are
    not supported. The field name is matched literally. Unlike a plain
    substring search, it must not be the tail of a longer word, so
    'title' never reads the value of 'booktitle'.

    Args:
        entry: Raw entry text.
        field: Field name, matched case-sensitively.

    Returns:
        The first matching value, or None.
    """
    pattern = rf"(?<![\w-]){re.escape(field)}\s*=\s*\{{([^}}]+)\}}"
    match = re.search(pattern, entry)
    if match is None:
        return None
    return match.group(1)


def parse_entry_header(entry: str) -> tuple[str, str]:
    """Read the entry type and citation key from '@TYPE{key,'.

    Args:
        entry: Raw entry text.

    Returns:
        Tuple of (entry_type, citation_key); both empty if the entry
        has no recognizable header.
    """
    match = _HEADER_RE.search(entry)
    if match is None:
        return "", ""
    return match.group(1), match.group(2).strip()


def iter_entry_blocks(lines: Iterable[str]) -> Iterator[str]:
    """Group physical lines into one text block per entry.

    A line starting with '@' closes the current block and opens a new
    one. Other non-empty lines are appended as-is with no separator.
    The last block is yielded at end of input.

    Args:
        lines: Source lines without line terminators.

    Yields:
        Raw entry text blocks.
    """
    current = ""
    for line in lines:
        if not line:
            continue
        if line.startswith("@"):
            if current:
                yield current
            current = line
        else:
            current += line
    if current:
        yield current


def is_valid_entry(entry: str) -> bool:
    """Check brace and double-quote balance of an entry block.

    Args:
        entry: Raw entry text.

    Returns:
        False if the brace depth ever goes negative or a closing brace
        appears inside a quoted string; otherwise True only when all
        braces and quotes are closed at the end.
    """
    depth = 0
    in_quote = False
    for char in entry:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == '"':
            in_quote = not in_quote

        if depth < 0 or (in_quote and char == "}"):
            return False
    return depth == 0 and not in_quote


def parse_authors(value: str) -> list[str]:
    """Split an author field on ' and ' and normalize each name.

    Always returns at least one element; an empty field gives [''].

    Args:
        value: Raw author field value.

    Returns:
        Normalized names in source order.
    """
    return [normalize_name(part) for part in value.split(AUTHOR_SEPARATOR)]


def has_duplicates(names: list[str]) -> bool:
    """Return True if any name occurs more than once."""
    return len(set(names)) != len(names)


def has_any_roster_match(names: list[str], roster: Roster) -> bool:
    """Return True if a roster name is a substring of any author name."""
    return roster.matches_any(names)


def build_publication(
    entry: str,
    roster: Roster,
    entry_index: int | None = None,
) -> Publication:
    """Validate one raw entry and build its Publication.

    The roster gate is lenient (substring match) while each author's
    affiliation tag requires an exact roster hit.

    Args:
        entry: Raw entry text block.
        roster: Affiliated names and the labels to assign.
        entry_index: 1-based position of the entry, for diagnostics.

    Returns:
        The validated Publication.

    Raises:
        FormatError: Unbalanced braces or quotes.
        ParseError: Missing or non-integer year.
        DuplicateAuthorError: A name repeats in the author list.
        NoAffiliatedAuthorError: No author matches the roster.
    """
    entry_type, key = parse_entry_header(entry)

    if not is_valid_entry(entry):
        raise FormatError(
            "Invalid entry format: unbalanced braces or quotes",
            key,
            entry_index,
        )

    title = extract_field(entry, "title") or ""
    venue = extract_field(entry, "venue") or extract_field(entry, "journal") or ""
    author_field = extract_field(entry, "author") or ""
    year_field = extract_field(entry, "year")
    doi = extract_field(entry, "doi")

    if year_field is None:
        raise ParseError("Missing year field", key, entry_index)
    if _YEAR_RE.fullmatch(year_field.strip()) is None:
        raise ParseError(
            f"Year is not an integer: {year_field!r}", key, entry_index
        )
    year = int(year_field.strip())

    names = parse_authors(author_field)
    if has_duplicates(names):
        raise DuplicateAuthorError(
            "Duplicate authors found", key, entry_index
        )
    if not has_any_roster_match(names, roster):
        raise NoAffiliatedAuthorError(
            "No institute-affiliated authors found", key, entry_index
        )

    authors = [
        Author(name=name, affiliation=roster.affiliation_for(name))
        for name in names
    ]
    publication = Publication(
        kind=PublicationType.from_entry_type(entry_type),
        citation_key=key,
        title=title,
        venue=venue,
        year=year,
        doi=doi,
        authors=authors,
    )
    logger.debug(
        "Parsed %s entry %r with %d authors",
        publication.kind.value,
        key,
        len(authors),
    )
    return publication


def parse_bibliography(text: str, roster: Roster) -> list[Publication]:
    """Parse a whole bibliography source.

    Args:
        text: Full bibliography text.
        roster: Affiliated names and the labels to assign.

    Returns:
        Publications in source order.

    Raises:
        EntryError: On the first invalid entry; nothing is returned.
    """
    publications: list[Publication] = []
    for index, block in enumerate(iter_entry_blocks(split_lines(text)), start=1):
        try:
            publications.append(build_publication(block, roster, index))
        except EntryError as exc:
            logger.debug("Aborting parse: %s", exc)
            raise
    logger.info("Parsed %d publications", len(publications))
    return publications


def parse_bib_file(
    path: str | Path,
    roster: Roster,
    encoding: str = "utf-8",
) -> list[Publication]:
    """Read and parse a bibliography file.

    The file is read completely and closed before parsing starts.

    Args:
        path: Path to the bibliography file.
        roster: Affiliated names and the labels to assign.
        encoding: Text encoding of the file.

    Returns:
        Publications in source order.

    Raises:
        SourceIOError: If the file cannot be opened or decoded.
        EntryError: On the first invalid entry.
    """
    path = Path(path)
    try:
        with open(path, encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read bibliography %s: %s", path, exc)
        raise SourceIOError(path, str(exc)) from exc

    logger.debug("Read %d characters from %s", len(text), path)
    return parse_bibliography(text, roster)
