"""Tower table: numeric coercion, location cleanup, range, dedup and sort."""

from __future__ import annotations

import logging

import pandas as pd

from spectrumdirect.analysis.propagation import estimate_range_series
from spectrumdirect.harmonize.metro_areas import clean_location, get_province, select_metro
from spectrumdirect.models.core import Record
from spectrumdirect.parsers.document_parser import parse_document
from spectrumdirect.parsers.record_decoder import ParseError

logger = logging.getLogger(__name__)

# Columns used as numbers downstream; everything else stays a string
NUMERIC_COLUMNS = [
    "Tx_Frequency",
    "Tx_Power",
    "Tx_Antenna_Gain",
    "Rx_Antenna_Gain",
    "Unfaded_Received_Signal_Level",
    "Tx_Antenna_Height_Above_Ground_Level",
    "Latitude",
    "Longitude",
]


def records_from_documents(documents: dict[str, str]) -> list[Record]:
    """Parse each region's document and concatenate the records in region order.

    A document without a data block is logged and skipped.
    """
    records: list[Record] = []
    for name, document in documents.items():
        try:
            parsed = parse_document(document)
        except ParseError as e:
            logger.warning("Couldn't parse data for %s: %s; skipping", name, e)
            continue
        logger.info("Parsed %s for %s", parsed.summary(), name)
        records.extend(parsed.records)
    return records


def build_tower_table(records: list[Record], province: str = "ON") -> pd.DataFrame:
    """Convert decoded records into a tower table with a Range column.

    Non-numeric values in numeric columns become NaN.
    """
    df = pd.DataFrame.from_records(records)
    for col in NUMERIC_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
        else:
            df[col] = float("nan")

    if "Station_Location" not in df.columns:
        df["Station_Location"] = ""
    df["Station_Location"] = df["Station_Location"].fillna("").map(lambda loc: clean_location(loc, province))

    df["Range"] = estimate_range_series(df)
    return df


def finalize_towers(df: pd.DataFrame, show_duplicates: bool = False) -> pd.DataFrame:
    """Sort by longitude and, unless asked not to, keep one tower per location."""
    out = df.sort_values("Longitude", kind="stable")
    if not show_duplicates:
        out = out.drop_duplicates(subset="Station_Location", keep="first")
    return out.reset_index(drop=True)


def collect_towers(
    documents: dict[str, str],
    metro: str,
    show_duplicates: bool = False,
) -> pd.DataFrame:
    """Run the whole pipeline from region documents to the final tower table."""
    records = records_from_documents(documents)
    selected = select_metro(records, metro)
    logger.info("Selected %d of %d stations in %s", len(selected), len(records), metro)

    df = build_tower_table(selected, province=get_province(metro))
    return finalize_towers(df, show_duplicates=show_duplicates)
