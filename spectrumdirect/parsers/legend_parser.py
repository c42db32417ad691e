"""Parser for the "Field Position Legend" block of Spectrum Direct dumps.

The legend lists one field per line as a label followed by its 1-based,
inclusive column range:

    Tx Frequency (MHz)                 1 - 11
    Station Location                  13 - 52

Lines that don't look like that (headings, blank lines, stray text) are
ignored.
"""

from __future__ import annotations

import re

from spectrumdirect.config import DATA_START_MARKER, LEGEND_MARKER
from spectrumdirect.models.core import ColumnSpec

# "<label><ws><start><ws>-<ws><end>"
_LEGEND_LINE_RE = re.compile(r"^(?P<label>.*?)\s+(?P<start>\d+)\s+-\s+(?P<end>\d+)\s*$")

# Trailing "(unit)" group of a label
_UNIT_RE = re.compile(r"\(([^()]*)\)$")

_PAREN_GROUP_RE = re.compile(r"\(.*?\)")
_WHITESPACE_RE = re.compile(r"\s+")


def extract_legend_section(document: str) -> str:
    """Return the legend block of a document, or "" if there is none.

    The block starts right after the legend heading and ends at the data
    block if one follows, otherwise at the end of the document.
    """
    pos = document.find(LEGEND_MARKER)
    if pos < 0:
        return ""

    legend = document[pos + len(LEGEND_MARKER):]
    data_pos = legend.find(DATA_START_MARKER)
    if data_pos >= 0:
        legend = legend[:data_pos]
    return legend


def column_key(label: str) -> str:
    """Lookup key for a label: "Tx Antenna Height (m) AGL" → "Tx_Antenna_Height_AGL"."""
    key = _PAREN_GROUP_RE.sub("", label).rstrip()
    return _WHITESPACE_RE.sub("_", key)


def column_from_label(label: str, start: int, end: int) -> ColumnSpec:
    """Build a ColumnSpec from a legend label and its 1-based inclusive range."""
    name = label.rstrip()
    m = _UNIT_RE.search(name)
    unit = m.group(1) if m else None
    return ColumnSpec(
        name=name,
        key=column_key(name),
        start=start - 1,
        length=end - start + 1,
        unit=unit,
    )


def parse_legend(legend_text: str) -> list[ColumnSpec]:
    """Parse legend lines into column definitions, in legend order."""
    columns = []
    for line in legend_text.split("\n"):
        m = _LEGEND_LINE_RE.match(line)
        if not m:
            continue
        columns.append(column_from_label(m.group("label"), int(m.group("start")), int(m.group("end"))))
    return columns


def parse_document_legend(document: str) -> list[ColumnSpec]:
    """Locate and parse the legend of a whole document."""
    return parse_legend(extract_legend_section(document))
