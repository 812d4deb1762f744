"""Unit tests for TemplateStore loading and placeholder substitution."""

from pathlib import Path

import pytest
from conftest import SAMPLE_TEMPLATES

from openbook.errors import TemplateLoadError
from openbook.template_store import TEMPLATE_NAMES, TemplateStore, substitute
from openbook.transpose import resolve_transposition


def test_substitute_does_not_expand_inserted_values() -> None:
    result = substitute("%%A%% %%B%%", [("%%A%%", "%%B%%"), ("%%B%%", "x")])
    assert result == "%%B%% x"


def test_substitute_leaves_unknown_placeholders() -> None:
    assert substitute("%%A%% %%Z%%", [("%%A%%", "a")]) == "a %%Z%%"


def test_substitute_adjacent_placeholders() -> None:
    result = substitute("%%A%%%%B%%", [("%%A%%", "1"), ("%%B%%", "2")])
    assert result == "12"


def test_substitute_repeated_pair_keeps_last_value() -> None:
    assert substitute("%%A%%", [("%%A%%", "old"), ("%%A%%", "new")]) == "new"


def test_substitute_replaces_every_occurrence() -> None:
    assert substitute("%%T%%-%%T%%", [("%%T%%", "c d")]) == "c d-c d"


def test_load_fills_intro_placeholders(templates_dir: Path) -> None:
    store = TemplateStore.load(templates_dir, resolve_transposition("bb"), 12)
    assert store.intro == "\\book { % Bb edition, 12 tunes\n"


def test_load_fills_voice_transpose(templates_dir: Path) -> None:
    store = TemplateStore.load(templates_dir, resolve_transposition("eb"), 1)
    assert "\\transpose ees c" in store.voice
    assert "%%TRANSPOSE%%" not in store.voice


def test_load_leaves_per_song_templates_untouched(templates_dir: Path) -> None:
    store = TemplateStore.load(templates_dir, resolve_transposition("bb"), 1)
    assert store.chords == SAMPLE_TEMPLATES["chords"]
    assert store.song_header == SAMPLE_TEMPLATES["song-header"]
    assert store.song_body == SAMPLE_TEMPLATES["song-body"]
    assert store.bookpart == SAMPLE_TEMPLATES["bookpart"]
    assert store.lyrics == SAMPLE_TEMPLATES["lyrics"]


def test_store_lookup_by_name(templates_dir: Path) -> None:
    store = TemplateStore.load(templates_dir, resolve_transposition("c"), 0)
    for name in TEMPLATE_NAMES:
        assert isinstance(store[name], str)
    assert store["song-body"] == store.song_body


@pytest.mark.parametrize("name", TEMPLATE_NAMES)
def test_load_missing_template_raises(templates_dir: Path, name: str) -> None:
    (templates_dir / name).unlink()
    with pytest.raises(TemplateLoadError) as excinfo:
        TemplateStore.load(templates_dir, resolve_transposition("c"), 0)
    assert excinfo.value.name == name
    assert isinstance(excinfo.value.cause, FileNotFoundError)


def test_template_load_error_is_an_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        TemplateStore.load(tmp_path / "nowhere", resolve_transposition("c"), 0)


def test_constructor_rejects_incomplete_mapping() -> None:
    with pytest.raises(ValueError, match="voice"):
        TemplateStore({name: "" for name in TEMPLATE_NAMES if name != "voice"})
