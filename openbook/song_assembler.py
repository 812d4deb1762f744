"""SongAssembler: fills the per-song templates for one parsed Song."""

from __future__ import annotations

from dataclasses import replace

from openbook.song_models import Song, TransposeText
from openbook.template_store import TRANSPOSE_PLACEHOLDER, TemplateStore, substitute


class SongAssembler:
    """
    Render songs against a loaded TemplateStore.

    Rendering order
    ---------------
    1. ``song-header`` gets the song's title/composer/meter/bpm.
    2. ``voice``, ``lyrics`` and ``chords`` each get the song body and the
       LilyPond transposition pitches.
    3. ``song-body`` receives the four blocks above in whatever order its
       own slots appear.
    4. ``bookpart`` wraps the result into one song block.

    Every step is plain placeholder replacement.
    """

    def __init__(self, store: TemplateStore, transpose_text: TransposeText) -> None:
        self.store = store
        self.transpose_text = transpose_text

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _render_header(self, song: Song) -> str:
        return substitute(
            self.store.song_header,
            [
                ("%%TITLE%%", song.title),
                ("%%COMPOSER%%", song.composer),
                ("%%METER%%", song.meter),
                ("%%BPM%%", song.bpm),
            ],
        )

    def _render_part(self, template: str, song: Song) -> str:
        return substitute(
            template,
            [
                (TRANSPOSE_PLACEHOLDER, self.transpose_text.lilypond_text),
                ("%%BODY%%", song.raw_body),
            ],
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def assemble(self, song: Song) -> Song:
        """Return a copy of ``song`` with its header, voice, lyrics and chords rendered."""
        return replace(
            song,
            rendered_header=self._render_header(song),
            rendered_voice=self._render_part(self.store.voice, song),
            rendered_lyrics=self._render_part(self.store.lyrics, song),
            rendered_chords=self._render_part(self.store.chords, song),
        )

    def render(self, song: Song) -> str:
        """Render ``song`` into the finished block that goes into the book."""
        song = self.assemble(song)
        song_body = substitute(
            self.store.song_body,
            [
                ("%%HEADER%%", song.rendered_header),
                ("%%VOICE%%", song.rendered_voice),
                ("%%LYRICS%%", song.rendered_lyrics),
                ("%%CHORDS%%", song.rendered_chords),
            ],
        )
        return substitute(
            self.store.bookpart,
            [
                ("%%TITLE%%", song.title),
                ("%%SONG_BODY%%", song_body),
            ],
        )
