"""Core data models for Spectrum Direct documents."""

from __future__ import annotations

from dataclasses import dataclass, field

# One decoded data line: column key → trimmed value
Record = dict[str, str]


@dataclass(frozen=True)
class ColumnSpec:
    """A field definition from the document legend."""

    name: str  # e.g. "Tx Power (dBW)"
    key: str  # e.g. "Tx_Power"
    start: int  # zero-based offset
    length: int
    unit: str | None = None  # e.g. "dBW"

    @property
    def end(self) -> int:
        """One-based inclusive end offset, as declared in the legend."""
        return self.start + self.length


@dataclass(frozen=True)
class MalformedLine:
    """A data line that could not be decoded against the schema."""

    line_no: int  # 1-based, relative to the data block
    text: str
    reason: str


@dataclass
class ParsedDocument:
    """Schema and decoded records of one Spectrum Direct document."""

    columns: list[ColumnSpec] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)
    skipped: list[MalformedLine] = field(default_factory=list)

    @property
    def keys(self) -> list[str]:
        """Column keys in schema order, duplicates removed."""
        return list(dict.fromkeys(c.key for c in self.columns))

    def summary(self) -> str:
        return (
            f"{len(self.columns)} columns, {len(self.records)} records, "
            f"{len(self.skipped)} skipped lines"
        )
