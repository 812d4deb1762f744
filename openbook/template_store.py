"""TemplateStore: the seven LilyPond template fragments used to build a book.

Placeholders are ``%%NAME%%`` tokens replaced literally:

    intro        %%TRANSPOSE%% (display text), %%NUM_TUNES%%
    bookpart     %%SONG_BODY%%, %%TITLE%%
    song-body    %%HEADER%%, %%VOICE%%, %%LYRICS%%, %%CHORDS%%
    song-header  %%TITLE%%, %%COMPOSER%%, %%METER%%, %%BPM%%
    voice        %%TRANSPOSE%% (LilyPond pitches), %%BODY%%
    lyrics       %%TRANSPOSE%%, %%BODY%%
    chords       %%TRANSPOSE%%, %%BODY%%

intro and voice get their run-wide placeholders filled at load time; the rest
are filled per song by SongAssembler.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from openbook.errors import TemplateLoadError
from openbook.song_models import TransposeText
from openbook.transpose import capitalize_first_letter_ascii

TEMPLATE_NAMES: Final[tuple[str, ...]] = (
    "intro",
    "bookpart",
    "song-body",
    "song-header",
    "voice",
    "lyrics",
    "chords",
)

TRANSPOSE_PLACEHOLDER: Final[str] = "%%TRANSPOSE%%"
NUM_TUNES_PLACEHOLDER: Final[str] = "%%NUM_TUNES%%"

_PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"%%[A-Z_]+%%")


def substitute(template: str, replacements: Iterable[tuple[str, str]]) -> str:
    """
    Fill ``(placeholder, value)`` pairs into ``template`` in a single pass.

    Only placeholders present in the template itself are replaced; text that
    arrives inside a value is never expanded again. Unknown placeholders are
    left as they are. A repeated placeholder keeps its last value.
    """
    values = dict(replacements)
    return _PLACEHOLDER_RE.sub(lambda match: values.get(match.group(0), match.group(0)), template)


class TemplateStore:
    """
    Read-only collection of named template strings.

    Build one with ``TemplateStore.load()`` for a real run, or pass a mapping
    directly to substitute templates in tests.
    """

    def __init__(self, templates: Mapping[str, str]) -> None:
        missing = [name for name in TEMPLATE_NAMES if name not in templates]
        if missing:
            raise ValueError(f"Missing templates: {', '.join(missing)}")
        self._templates: Mapping[str, str] = MappingProxyType(
            {name: templates[name] for name in TEMPLATE_NAMES}
        )

    @classmethod
    def load(
        cls,
        templates_dir: Path,
        transpose_text: TransposeText,
        num_songs: int,
    ) -> TemplateStore:
        """
        Read every template from ``templates_dir`` and fill the run-wide placeholders.

        Raises:
            TemplateLoadError: On the first template that cannot be read.
        """
        raw = {name: cls._read(templates_dir, name) for name in TEMPLATE_NAMES}

        raw["intro"] = substitute(
            raw["intro"],
            [
                (TRANSPOSE_PLACEHOLDER, capitalize_first_letter_ascii(transpose_text.display_text)),
                (NUM_TUNES_PLACEHOLDER, str(num_songs)),
            ],
        )
        raw["voice"] = substitute(
            raw["voice"],
            [(TRANSPOSE_PLACEHOLDER, transpose_text.lilypond_text)],
        )
        return cls(raw)

    @staticmethod
    def _read(templates_dir: Path, name: str) -> str:
        try:
            return (templates_dir / name).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateLoadError(name, exc) from exc

    def __getitem__(self, name: str) -> str:
        return self._templates[name]

    @property
    def intro(self) -> str:
        return self._templates["intro"]

    @property
    def bookpart(self) -> str:
        return self._templates["bookpart"]

    @property
    def song_body(self) -> str:
        return self._templates["song-body"]

    @property
    def song_header(self) -> str:
        return self._templates["song-header"]

    @property
    def voice(self) -> str:
        return self._templates["voice"]

    @property
    def lyrics(self) -> str:
        return self._templates["lyrics"]

    @property
    def chords(self) -> str:
        return self._templates["chords"]
