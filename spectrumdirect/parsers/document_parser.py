"""Two-phase parser for whole Spectrum Direct documents: legend, then data."""

from __future__ import annotations

import logging
from pathlib import Path

from spectrumdirect.config import SOURCE_ENCODING
from spectrumdirect.models.core import ParsedDocument
from spectrumdirect.parsers.legend_parser import parse_document_legend
from spectrumdirect.parsers.record_decoder import RecordDecoder, extract_data_section

logger = logging.getLogger(__name__)


def normalize_newlines(text: str) -> str:
    """Convert DOS line endings to LF."""
    return text.replace("\r\n", "\n")


def parse_document(document: str) -> ParsedDocument:
    """Parse an LF-normalized document into its schema and records.

    Raises:
        MissingDataSection: if the [DATA] block is absent.
    """
    columns = parse_document_legend(document)
    if not columns:
        logger.warning("No legend columns found; no records will be decoded")

    data = extract_data_section(document)
    records, skipped = RecordDecoder(columns).decode_data(data)
    logger.debug("Decoded %d records with %d columns", len(records), len(columns))
    return ParsedDocument(columns=columns, records=records, skipped=skipped)


def read_document(path: Path) -> str:
    """Read a saved dump from disk as LF-normalized text."""
    with open(path, "rb") as f:
        raw = f.read()
    return normalize_newlines(raw.decode(SOURCE_ENCODING))


def parse_file(path: Path) -> ParsedDocument:
    """Read a saved dump from disk and parse it."""
    return parse_document(read_document(path))
