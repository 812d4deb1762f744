"""openbook CLI entry point."""

import sys
from pathlib import Path

import click

from openbook import __version__
from openbook.book_writer import BookWriter, output_filename, sort_songs
from openbook.errors import UnknownTranspositionError
from openbook.song_assembler import SongAssembler
from openbook.song_loader import load_songs
from openbook.song_models import TemplaterConfig
from openbook.template_store import TemplateStore
from openbook.transpose import DEFAULT_TRANSPOSE, TRANSPOSITIONS, resolve_transposition


class _BuildCommand(click.Command):
    """click.Command that exits with status 1, not 2, on bad arguments."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


def _build_config(
    transpose: str,
    songs_dir: Path,
    templates_dir: Path,
    output_dir: Path,
) -> TemplaterConfig:
    """Resolve CLI values into the run-wide TemplaterConfig."""
    return TemplaterConfig(
        transpose_text=resolve_transposition(transpose),
        songs_dir=songs_dir,
        templates_dir=templates_dir,
        output_dir=output_dir,
    )


@click.command(
    cls=_BuildCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
@click.version_option(version=__version__, prog_name="openbook")
@click.option(
    "--transpose",
    default=DEFAULT_TRANSPOSE,
    show_default=True,
    metavar="KEY",
    help=f"Transposing instrument for the book: {', '.join(TRANSPOSITIONS)}.",
)
@click.option(
    "--songs-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("songs"),
    show_default=True,
    help="Directory holding the .ly song files.",
)
@click.option(
    "--templates-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("templates"),
    show_default=True,
    help="Directory holding the intro/bookpart/song-body/song-header/voice/lyrics/chords templates.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory the openbook-<transposition>.ly file is written to.",
)
@click.pass_context
def main(
    ctx: click.Context,
    transpose: str,
    songs_dir: Path,
    templates_dir: Path,
    output_dir: Path,
) -> None:
    """
    Compile every song in SONGS_DIR into a single LilyPond songbook.

    \b
    Examples:
      openbook
      openbook --transpose bb
      openbook --transpose eb --songs-dir tunes --output-dir build
    """
    if ctx.args:
        click.echo(f"Warning: unused arguments left: {ctx.args}.", err=True)

    try:
        conf = _build_config(transpose, songs_dir, templates_dir, output_dir)
    except UnknownTranspositionError as exc:
        # Existing behaviour: report and stop without a failing status.
        click.echo(str(exc), err=True)
        sys.exit(0)

    output = conf.output_dir / output_filename(conf.transpose_text)

    click.echo(f"openbook v{__version__}")
    click.echo(f"  Transpose : {conf.transpose_text.display_text} ({conf.transpose_text.lilypond_text})")
    click.echo(f"  Songs     : {conf.songs_dir}")
    click.echo(f"  Templates : {conf.templates_dir}")
    click.echo(f"  Output    : {output}")
    click.echo()

    # ── Step 1: Parse songs ─────────────────────────────────────────────
    click.echo(f"[1/4] Reading songs from '{conf.songs_dir}'...")
    try:
        songs = sort_songs(load_songs(conf.songs_dir))
    except (OSError, ValueError) as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)
    click.echo(f"      Found {len(songs)} song(s)")

    # ── Step 2: Load templates ──────────────────────────────────────────
    click.echo(f"[2/4] Loading templates from '{conf.templates_dir}'...")
    try:
        store = TemplateStore.load(conf.templates_dir, conf.transpose_text, len(songs))
    except OSError as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)

    # ── Step 3: Render songs ────────────────────────────────────────────
    click.echo("[3/4] Rendering songs...")
    assembler = SongAssembler(store, conf.transpose_text)
    blocks = []
    for song in songs:
        click.echo(f"      Handling {song.title}")
        blocks.append(assembler.render(song))

    # ── Step 4: Write book ──────────────────────────────────────────────
    click.echo(f"[4/4] Writing book → '{output}'...")
    try:
        BookWriter(store.intro).export(blocks, output)
    except OSError as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)

    click.echo()
    click.echo(f"Done!  Run 'lilypond {output}' to engrave the book.")
