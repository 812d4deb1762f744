"""BookWriter: orders rendered songs and writes the finished .ly book."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

from openbook.errors import OutputWriteError
from openbook.song_models import Song, TransposeText

OUTPUT_PREFIX: Final[str] = "openbook-"
OUTPUT_SUFFIX: Final[str] = ".ly"

# Closes the \book { opened by the intro template.
CLOSING_MARKER: Final[str] = "}\n"


def output_filename(transpose_text: TransposeText) -> str:
    """``openbook-<display text>.ly``; one file per transposition."""
    return f"{OUTPUT_PREFIX}{transpose_text.display_text}{OUTPUT_SUFFIX}"


def sort_songs(songs: Iterable[Song]) -> list[Song]:
    """Sort by title, case-sensitively; songs with equal titles keep their order."""
    return sorted(songs, key=lambda song: song.title)


class BookWriter:
    """
    Concatenates the intro, each song block and the closing marker into one file.

    The document is built in memory and written with a single ``open()`` so a
    failure earlier in the run never leaves a half-written book behind.
    """

    def __init__(self, intro: str) -> None:
        self.intro = intro

    def build(self, song_blocks: Iterable[str]) -> str:
        return "".join([self.intro, *song_blocks, CLOSING_MARKER])

    def export(self, song_blocks: Iterable[str], output_path: Path) -> None:
        """
        Write the book to ``output_path``, replacing any existing file.

        Raises:
            OutputWriteError: If the file cannot be opened or written.
        """
        content = self.build(song_blocks)
        try:
            with open(output_path, "w", encoding="utf-8") as fh:
                fh.write(content)
        except OSError as exc:
            raise OutputWriteError(output_path, exc) from exc
