"""Frontmatter extraction and metadata parsing for song files.

A song file looks like::

    title: Amazing Grace
    composer: John Newton
    meter: 3/4
    bpm: 90
    ---
    melody = \\relative c' { ... }

Everything above the first ``---`` line is frontmatter, everything below is
the LilyPond body.
"""

from __future__ import annotations

from typing import Final

from openbook.errors import MissingFrontmatterError, MissingTitleError
from openbook.song_models import SongMetadata

TERMINATOR: Final[str] = "---"

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("title",)
OPTIONAL_FIELDS: Final[tuple[str, ...]] = ("composer", "meter", "bpm")


def extract_frontmatter(text: str, terminator: str = TERMINATOR) -> tuple[list[str], str]:
    """
    Split raw song text into its frontmatter lines and its body.

    The split happens at the first line that is exactly the terminator once
    surrounding whitespace is ignored. Frontmatter lines come back stripped,
    with blank lines dropped; the body is stripped as a whole.

    Raises:
        MissingFrontmatterError: If no terminator line is present.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    for index, line in enumerate(lines):
        if line.strip() == terminator:
            metadata = [stripped for stripped in (ln.strip() for ln in lines[:index]) if stripped]
            body = "\n".join(lines[index + 1:]).strip()
            return metadata, body
    raise MissingFrontmatterError(terminator)


def _split_field(line: str) -> tuple[str, str] | None:
    if line.startswith("%"):
        return None
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key.strip().lower(), value.strip()


def parse_metadata(lines: list[str]) -> SongMetadata:
    """
    Build a SongMetadata from ``key: value`` frontmatter lines.

    Unknown keys are skipped; a repeated key keeps its last value.

    Raises:
        MissingTitleError: If no non-empty ``title`` is present.
    """
    fields: dict[str, str] = {}
    for line in lines:
        pair = _split_field(line)
        if pair is None:
            continue
        key, value = pair
        if key in REQUIRED_FIELDS or key in OPTIONAL_FIELDS:
            fields[key] = value

    if not fields.get("title"):
        raise MissingTitleError()

    return SongMetadata(
        title=fields["title"],
        composer=fields.get("composer", ""),
        meter=fields.get("meter", ""),
        bpm=fields.get("bpm", ""),
    )
