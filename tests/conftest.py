"""Shared fixtures: a minimal template set and a song-file writer."""

from pathlib import Path
from typing import Callable

import pytest

SAMPLE_TEMPLATES: dict[str, str] = {
    "intro": "\\book { % %%TRANSPOSE%% edition, %%NUM_TUNES%% tunes\n",
    "bookpart": "\\bookpart { % %%TITLE%%\n%%SONG_BODY%%}\n",
    "song-body": "%%HEADER%%\n%%CHORDS%%\n%%VOICE%%\n%%LYRICS%%\n",
    "song-header": "\\header { title = \"%%TITLE%%\" composer = \"%%COMPOSER%%\" meter = \"%%METER%%\" bpm = \"%%BPM%%\" }\n",
    "voice": "\\new Staff \\transpose %%TRANSPOSE%% { %%BODY%% }\n",
    "lyrics": "\\new Lyrics { %%BODY%% }\n",
    "chords": "\\new ChordNames \\transpose %%TRANSPOSE%% { %%BODY%% }\n",
}


def song_text(title: str | None, body: str = "c'4 d' e' f'", **fields: str) -> str:
    lines = [f"title: {title}"] if title is not None else []
    lines += [f"{key}: {value}" for key, value in fields.items()]
    return "\n".join(lines) + "\n---\n" + body + "\n"


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "templates"
    directory.mkdir()
    for name, content in SAMPLE_TEMPLATES.items():
        (directory / name).write_text(content, encoding="utf-8")
    return directory


@pytest.fixture
def songs_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "songs"
    directory.mkdir()
    return directory


@pytest.fixture
def write_song(songs_dir: Path) -> Callable[..., Path]:
    def _write(filename: str, title: str | None, body: str = "c'4 d' e' f'", **fields: str) -> Path:
        path = songs_dir / filename
        path.write_text(song_text(title, body, **fields), encoding="utf-8")
        return path

    return _write
