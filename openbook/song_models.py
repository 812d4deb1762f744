"""Data models shared by the songbook pipeline stages."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TransposeText:
    """A resolved transposition: human label plus LilyPond ``\\transpose`` pitches."""

    display_text: str
    lilypond_text: str


@dataclass(frozen=True)
class SongMetadata:
    """Frontmatter fields recognised in a song file."""

    title: str
    composer: str = ""
    meter: str = ""
    bpm: str = ""


@dataclass(frozen=True)
class Song:
    """
    One song file, parsed and (once assembled) rendered.

    The rendered_* fields stay empty until SongAssembler attaches them with
    ``dataclasses.replace``.
    """

    metadata: SongMetadata
    raw_body: str
    source_path: Path | None = None
    rendered_header: str = ""
    rendered_voice: str = ""
    rendered_lyrics: str = ""
    rendered_chords: str = ""

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def composer(self) -> str:
        return self.metadata.composer

    @property
    def meter(self) -> str:
        return self.metadata.meter

    @property
    def bpm(self) -> str:
        return self.metadata.bpm


@dataclass(frozen=True)
class TemplaterConfig:
    """Run-wide configuration, built once by the CLI."""

    transpose_text: TransposeText
    songs_dir: Path = Path("songs")
    templates_dir: Path = Path("templates")
    output_dir: Path = Path(".")
