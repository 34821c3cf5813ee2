"""Plain-text renderings of a :class:`~chordchart.models.ChartResult`.

Two outputs are provided:

* the **print view** (:class:`ChartFormatter`), a song header followed by
  each section under its title::

      Amazing Grace
      John Newton | Key: A

      Verse
      A       E        F#m       D
      Amazing grace how sweet the sound

* the **text export** (:func:`export_text`), the rendered chart exactly as
  it reads, for saving to a ``.txt`` file.

Usage::

    from chordchart.formatter import ChartFormatter
    text = ChartFormatter().render(result, title="Amazing Grace")
    Path("amazing-grace.txt").write_text(text)
"""

import re

from .models import ChartResult, ChartSection


class ChartFormatter:
    """Render a :class:`~chordchart.models.ChartResult` as a print view."""

    def render(self, result: ChartResult, title: str | None = None, author: str | None = None) -> str:
        """Return the print view for *result*.

        The returned string ends with a single newline and uses Unix line
        endings (``\\n``) throughout.  With no sections (an empty chart) only
        the header is emitted.
        """
        parts: list[str] = []

        # --- Header block ---
        if title:
            parts.append(title)
        byline = f"{author} | Key: {result.key}" if author else f"Key: {result.key}"
        parts.append(byline)

        # --- Section blocks ---
        for section in result.sections:
            parts.append("")  # blank line before every section
            parts.extend(_render_section(section))

        return "\n".join(parts) + "\n"


def _render_section(section: ChartSection) -> list[str]:
    """Return the lines for one section, title first."""
    # Trailing blank lines separate sections in the source; drop them here.
    lines = list(section.lines)
    while lines and not lines[-1].strip():
        lines.pop()
    return [section.title, *lines]


def export_text(result: ChartResult) -> str:
    """Return the rendered chart as flat text ending in one newline."""
    return result.text.rstrip("\n") + "\n"


def slugify(text: str) -> str:
    """Convert a string to a lowercase hyphenated slug suitable for filenames."""
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)   # drop punctuation
    text = re.sub(r"[\s_]+", "-", text)     # spaces/underscores → hyphens
    text = re.sub(r"-{2,}", "-", text)      # collapse multiple hyphens
    return text.strip("-")


def export_filename(title: str, key: str) -> str:
    """Return a download filename such as ``amazing-grace-f-sharp.txt``."""
    key_part = key.split("/")[0].replace("#", "-sharp")
    slug = slugify(f"{title} {key_part}") or "chord-chart"
    return f"{slug}.txt"
