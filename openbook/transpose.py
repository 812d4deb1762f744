"""Transposition lookup: CLI key -> display label and LilyPond directive."""

from typing import Final

from openbook.errors import UnknownTranspositionError
from openbook.song_models import TransposeText

DEFAULT_TRANSPOSE: Final[str] = "c"

# ── Transposition table ─────────────────────────────────────────────────────
# lilypond_text is the "<from> <to>" pitch pair handed to \transpose.
TRANSPOSITIONS: Final[dict[str, TransposeText]] = {
    "c": TransposeText(display_text="Concert", lilypond_text="c c"),
    "bb": TransposeText(display_text="Bb", lilypond_text="c d"),
    # TODO: pick the Eb octave from each tune's highest pitch once all songs
    # use absolute pitch entry.
    "eb": TransposeText(display_text="Eb", lilypond_text="ees c"),
    "testing-f": TransposeText(display_text="Testing", lilypond_text="c g"),
}


def resolve_transposition(key: str) -> TransposeText:
    """
    Return the TransposeText registered for ``key`` (exact, case-sensitive match).

    Raises:
        UnknownTranspositionError: If ``key`` is not in TRANSPOSITIONS.
    """
    try:
        return TRANSPOSITIONS[key]
    except KeyError:
        raise UnknownTranspositionError(key) from None


def capitalize_first_letter_ascii(text: str) -> str:
    """Upper-case the first character if it is an ASCII letter; leave the rest alone."""
    if text and text[0].isascii():
        return text[0].upper() + text[1:]
    return text
