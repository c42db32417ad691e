"""Data models for legends, records, and parsed documents."""

from spectrumdirect.models.core import ColumnSpec, MalformedLine, ParsedDocument, Record

__all__ = [
    "ColumnSpec",
    "MalformedLine",
    "ParsedDocument",
    "Record",
]
