"""Discover song files on disk and turn them into Song records."""

from __future__ import annotations

from pathlib import Path

from openbook.errors import (
    MissingFrontmatterError,
    MissingTitleError,
    SongDecodeError,
    SongsDirectoryError,
)
from openbook.frontmatter import TERMINATOR, extract_frontmatter, parse_metadata
from openbook.song_models import Song

SONG_EXTENSION = "ly"


def discover_song_files(songs_dir: Path, ext: str = SONG_EXTENSION) -> list[Path]:
    """
    List regular files in ``songs_dir`` ending in ``.<ext>``, sorted by path.

    Sub-directories are not searched.

    Raises:
        SongsDirectoryError: If ``songs_dir`` is not a directory.
    """
    if not songs_dir.is_dir():
        raise SongsDirectoryError(songs_dir)
    suffix = f".{ext}"
    return sorted(path for path in songs_dir.iterdir() if path.is_file() and path.suffix == suffix)


def parse_song(text: str, source_path: Path | None = None) -> Song:
    """Parse one song file's text; errors carry ``source_path`` when given."""
    try:
        metadata_lines, body = extract_frontmatter(text, TERMINATOR)
    except MissingFrontmatterError:
        raise MissingFrontmatterError(TERMINATOR, source_path) from None

    try:
        metadata = parse_metadata(metadata_lines)
    except MissingTitleError:
        raise MissingTitleError(source_path) from None

    return Song(metadata=metadata, raw_body=body, source_path=source_path)


def load_song(path: Path) -> Song:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SongDecodeError(path, exc) from exc
    return parse_song(text, source_path=path)


def load_songs(songs_dir: Path) -> list[Song]:
    """Load every song in ``songs_dir`` in discovery order, stopping at the first bad file."""
    return [load_song(path) for path in discover_song_files(songs_dir)]
