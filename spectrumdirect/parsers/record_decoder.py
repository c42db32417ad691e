"""Fixed-width decoder for the [DATA] block of Spectrum Direct dumps.

Data lines hold the legend's fields in legend order, each padded to its
declared width, with exactly one whitespace character between consecutive
fields:

    1900.0000  OTTAWA (123 MAIN ST)                     ...
    |-- 10 --| |----------------- 40 -----------------|

Field offsets are computed once per schema from the cumulative widths, so the
declared legend offsets are only used for their widths.
"""

from __future__ import annotations

import logging

from spectrumdirect.config import DATA_END_MARKER, DATA_START_MARKER
from spectrumdirect.models.core import ColumnSpec, MalformedLine, Record

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """A document could not be parsed."""


class MissingDataSection(ParseError):
    """The [DATA] ... [/DATA] block is missing from a document."""


def extract_data_section(document: str) -> str:
    """Return the text strictly between the data start and end markers."""
    start = document.find(DATA_START_MARKER)
    if start < 0:
        raise MissingDataSection(f"no {DATA_START_MARKER} marker in document")

    start += len(DATA_START_MARKER)
    end = document.find(DATA_END_MARKER, start)
    if end < 0:
        raise MissingDataSection(f"no {DATA_END_MARKER} marker after {DATA_START_MARKER}")

    return document[start:end]


class RecordDecoder:
    """Decode data lines against a fixed schema of columns."""

    def __init__(self, columns: list[ColumnSpec]):
        self.columns = list(columns)
        self.offsets = _compute_offsets(self.columns)
        # Separator positions sit right after every field but the last
        self.separators = [off + col.length for off, col in zip(self.offsets[:-1], self.columns[:-1])]
        self.width = self.offsets[-1] + self.columns[-1].length if self.columns else 0

    def decode_line(self, line: str) -> tuple[Record | None, str]:
        """Decode one data line.

        Returns:
            Tuple of (record, reason). The record is None when the line does
            not fit the schema, and reason says why.
        """
        if len(line) < self.width:
            return None, f"line is {len(line)} chars, expected at least {self.width}"

        for pos in self.separators:
            if not line[pos].isspace():
                return None, f"no field separator at offset {pos}"

        record: Record = {}
        for col, off in zip(self.columns, self.offsets):
            record[col.key] = line[off : off + col.length].strip()
        return record, ""

    def decode_data(self, data: str) -> tuple[list[Record], list[MalformedLine]]:
        """Decode the body of a data block.

        Blank lines are ignored. Lines that don't fit the schema are skipped
        and returned as MalformedLine entries.
        """
        if not self.columns:
            logger.warning("Empty schema: no columns to decode")
            return [], []

        records: list[Record] = []
        skipped: list[MalformedLine] = []
        for line_no, line in enumerate(data.split("\n"), start=1):
            if not line.strip():
                continue
            record, reason = self.decode_line(line)
            if record is None:
                logger.debug("Skipping data line %d: %s", line_no, reason)
                skipped.append(MalformedLine(line_no=line_no, text=line, reason=reason))
                continue
            records.append(record)

        if skipped:
            logger.info("Skipped %d malformed data lines", len(skipped))
        return records, skipped

    def decode(self, document: str) -> list[Record]:
        """Decode every data line of a whole document."""
        records, _ = self.decode_data(extract_data_section(document))
        return records


def _compute_offsets(columns: list[ColumnSpec]) -> list[int]:
    """Start offset of each field: preceding widths plus one separator each."""
    offsets = []
    pos = 0
    for col in columns:
        offsets.append(pos)
        pos += col.length + 1
    return offsets
