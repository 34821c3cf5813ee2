import logging
import sys
from pathlib import Path

import click

from . import __version__
from .diagrams import to_svg
from .engine import render_chart
from .exceptions import ChordChartError
from .formatter import ChartFormatter, export_filename, export_text, slugify
from .keys import KEYS, SPELLINGS, Key
from .models import ChartFormat
from .sections import split_slides

_FORMATS = [fmt.value for fmt in ChartFormat]


def _check_keys(*labels: str | None) -> None:
    """Exit with an error if a given key label is not a known key."""
    for label in labels:
        if not label:
            continue
        try:
            Key.parse(label)
        except ChordChartError as exc:
            click.echo(f"Error: {exc}", err=True)
            click.echo(f"Known keys: {', '.join(KEYS)}", err=True)
            sys.exit(1)


def _chart_options(func):
    """Key and format options shared by the chart commands."""
    func = click.option("--spelling", type=click.Choice(SPELLINGS), default="sharp", show_default=True,
                        help="Accidentals for rewritten roots; 'auto' follows the target key.")(func)
    func = click.option("--chords-only", "chord_lines_only", is_flag=True, default=False,
                        help="Only rewrite chords on chord-only lines, never inside lyrics.")(func)
    func = click.option("-f", "--format", "chart_format", type=click.Choice(_FORMATS, case_sensitive=False),
                        default="standard", show_default=True, envvar="CHORDCHART_FORMAT",
                        help="Letter chords or Nashville numbers.")(func)
    func = click.option("--to", "target_key", default=None, metavar="KEY",
                        help="Key to transpose into (default: the --from key).")(func)
    func = click.option("--from", "source_key", default="C", show_default=True, metavar="KEY",
                        envvar="CHORDCHART_KEY", help="Key the chart is written in.")(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="chordchart")
@click.option("-v", "--verbose", is_flag=True, help="Log fallbacks and parsing details.")
def main(verbose: bool) -> None:
    """Transpose chord charts and write them in Nashville numbers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("chart", type=click.File("r", encoding="utf-8"))
@_chart_options
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <title>-<key>.txt).")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
@click.option("--title", default=None, help="Song title for the header and default filename.")
@click.option("--author", default=None, help="Author shown in the print view header.")
@click.option("--print-view", is_flag=True, default=False,
              help="Emit titled sections under a song header instead of the flat chart.")
def render(
    chart,
    source_key: str,
    target_key: str | None,
    chart_format: str,
    chord_lines_only: bool,
    spelling: str,
    output_path: str | None,
    stdout: bool,
    title: str | None,
    author: str | None,
    print_view: bool,
) -> None:
    """Render CHART in another key or in Nashville numbers.

    CHART is a text file with chords above lyrics; use - for stdin.
    """
    _check_keys(source_key, target_key)
    result = render_chart(
        chart.read(),
        source_key=source_key,
        target_key=target_key,
        chart_format=chart_format,
        chord_lines_only=chord_lines_only,
        spelling=spelling,
    )

    if print_view:
        text = ChartFormatter().render(result, title=title, author=author)
    else:
        text = export_text(result)

    # --- Output ---
    if stdout:
        click.echo(text, nl=False)
        return

    dest = Path(output_path) if output_path else Path(export_filename(title or "chord-chart", result.key))
    dest.write_text(text, encoding="utf-8")
    click.echo(f"Written to {dest}")


@main.command()
@click.argument("chart", type=click.File("r", encoding="utf-8"))
@_chart_options
@click.option("--svg", "svg_dir", default=None, type=click.Path(file_okay=False, path_type=Path),
              help="Also write one SVG chord box per chord into this directory.")
def chords(
    chart,
    source_key: str,
    target_key: str | None,
    chart_format: str,
    chord_lines_only: bool,
    spelling: str,
    svg_dir: Path | None,
) -> None:
    """List the chords CHART uses, with their fret shapes and qualities."""
    _check_keys(source_key, target_key)
    result = render_chart(
        chart.read(),
        source_key=source_key,
        target_key=target_key,
        chart_format=chart_format,
        chord_lines_only=chord_lines_only,
        spelling=spelling,
    )

    for chord_diagram in result.diagrams:
        marker = "" if chord_diagram.known else "  (no shape)"
        click.echo(f"{chord_diagram.name:<8}{chord_diagram.shape:<8}{chord_diagram.quality.value}{marker}")

    if svg_dir is not None:
        svg_dir.mkdir(parents=True, exist_ok=True)
        for chord_diagram in result.diagrams:
            name = slugify(chord_diagram.name.replace("#", "-sharp")) or "chord"
            (svg_dir / f"{name}.svg").write_text(to_svg(chord_diagram), encoding="utf-8")
        click.echo(f"Written {len(result.diagrams)} diagram(s) to {svg_dir}")


@main.command()
@click.argument("lyrics", type=click.File("r", encoding="utf-8"))
@click.option("--separator", default="---", show_default=True,
              help="Line printed between slides.")
def slides(lyrics, separator: str) -> None:
    """Split LYRICS into projection slides at blank lines."""
    for i, slide in enumerate(split_slides(lyrics.read())):
        if i:
            click.echo(separator)
        for line in slide:
            click.echo(line)


@main.command(name="keys")
def list_keys() -> None:
    """List the twelve keys charts can be written in."""
    for label in KEYS:
        click.echo(label)
