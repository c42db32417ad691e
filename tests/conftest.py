"""Shared fixtures for spectrumdirect tests."""

from __future__ import annotations

import pytest

# (legend label, field width)
STATION_COLUMNS = [
    ("Tx Frequency (MHz)", 11),
    ("Rx Frequency (MHz)", 11),
    ("Station Location", 40),
    ("Link Station Location", 30),
    ("Latitude", 9),
    ("Longitude", 10),
    ("Tx Power (dBW)", 7),
    ("Tx Antenna Gain (dBi)", 6),
    ("Rx Antenna Gain (dBi)", 6),
    ("Unfaded Received Signal Level (dBW)", 8),
    ("Tx Antenna Height Above Ground Level (m)", 6),
]

STATION_ROWS = [
    ("18017.5000", "19577.5000", "OTTAWA (1 MAIN ST)", "KANATA", "45.4215", "-75.6972", "-10.0", "38.5", "38.5", "-40.0", "45"),
    ("18057.5000", "19617.5000", "NEPEAN (99 RIVER RD)", "Ottawa, ON", "45.3500", "-75.7500", "-12.0", "38.0", "38.0", "-42.0", "30"),
    ("23000.0000", "24200.0000", "TORONTO (5 KING ST)", "Toronto", "43.6500", "-79.3800", "-10.0", "40.0", "40.0", "-45.0", "60"),
    ("23100.0000", "24300.0000", "MONTREAL (7 RUE X)", "Montreal, QC", "45.5000", "-73.5600", "-10.0", "40.0", "40.0", "-45.0", "25"),
    ("18100.0000", "19660.0000", "OTTAWA (1 MAIN ST)", "NEAPEAN", "45.4215", "-75.6972", "-11.0", "38.5", "38.5", "-41.0", "45"),
    ("18200.0000", "19760.0000", "GATINEAU (12 RUE Y)", "VE3XYZ 1", "45.4800", "-75.7300", "-10.0", "38.5", "38.5", "-40.0", "20"),
    ("18300.0000", "19860.0000", "KANATA (300 MARCH RD)", "AB12345", "45.3400", "-75.9000", "-10.0", "38.5", "38.5", "-40.0", "35"),
    ("18400.0000", "19960.0000", "", "", "45.0000", "-75.0000", "-10.0", "38.5", "38.5", "-40.0", "10"),
]


def legend_lines(columns):
    """Legend lines with 1-based inclusive ranges, one separator between fields."""
    lines = []
    pos = 1
    for label, width in columns:
        lines.append(f"{label:<45s}{pos:>5d} - {pos + width - 1}")
        pos += width + 1
    return lines


def data_line(row, columns):
    return " ".join(f"{value:<{width}}" for value, (_, width) in zip(row, columns))


def build_document(rows, columns=STATION_COLUMNS, legend_first=False, extra_data_lines=()):
    """A Spectrum Direct style dump with a data block and a legend."""
    header = "Spectrum Direct - Licensee Search Results\nGlobalive Wireless Management Corp.\n\n"
    data = "[DATA]\n" + "\n".join([data_line(r, columns) for r in rows] + list(extra_data_lines)) + "\n[/DATA]\n"
    legend = "Field Position Legend\n\n" + "\n".join(legend_lines(columns)) + "\n"
    if legend_first:
        return header + legend + "\n" + data
    return header + data + "\n" + legend


@pytest.fixture
def station_document():
    return build_document(STATION_ROWS)


@pytest.fixture
def station_dump(tmp_path, station_document):
    """The station document saved to disk with DOS line endings."""
    path = tmp_path / "ontario.txt"
    path.write_bytes(station_document.replace("\n", "\r\n").encode("iso-8859-1"))
    return path
