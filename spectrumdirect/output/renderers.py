"""Render a tower table as text, KML, GPX, or a JSON dump."""

from __future__ import annotations

import json
import math
import xml.etree.ElementTree as ET
from typing import Callable

import pandas as pd

KML_NS = "http://www.opengis.net/kml/2.2"
GPX_NS = "http://www.topografix.com/GPX/1/1"


def _num(value) -> float:
    """Numeric value for display; missing values show as 0."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return 0.0
    return float(value)


def format_tower_line(row: pd.Series) -> str:
    return (
        f"{row['Station_Location']:>40} "
        f"{_num(row['Latitude']):2.4f}lat {_num(row['Longitude']):2.4f}lng, "
        f"{int(_num(row['Tx_Frequency']))}MHz, "
        f"{int(_num(row['Tx_Antenna_Height_Above_Ground_Level']))}m AGL, "
        f"{int(_num(row['Tx_Power']))} dBW, "
        f"range {_num(row['Range']):.2f} km"
    )


def render_text(df: pd.DataFrame) -> str:
    """One fixed-format line per tower."""
    return "\n".join(format_tower_line(row) for _, row in df.iterrows())


def render_kml(df: pd.DataFrame) -> str:
    """KML 2.2 document with one placemark per tower."""
    ET.register_namespace("", KML_NS)
    kml = ET.Element(f"{{{KML_NS}}}kml")
    doc = ET.SubElement(kml, f"{{{KML_NS}}}Document")
    for _, row in df.iterrows():
        placemark = ET.SubElement(doc, f"{{{KML_NS}}}Placemark")
        ET.SubElement(placemark, f"{{{KML_NS}}}name").text = str(row["Station_Location"])
        point = ET.SubElement(placemark, f"{{{KML_NS}}}Point")
        # KML coordinates are lon,lat[,alt]
        ET.SubElement(point, f"{{{KML_NS}}}coordinates").text = (
            f"{_num(row['Longitude'])},{_num(row['Latitude'])},0"
        )
    return ET.tostring(kml, encoding="UTF-8", xml_declaration=True).decode("utf-8")


def render_gpx(df: pd.DataFrame) -> str:
    """GPX 1.1 document with one waypoint per tower."""
    ET.register_namespace("", GPX_NS)
    gpx = ET.Element(f"{{{GPX_NS}}}gpx", version="1.1", creator="spectrumdirect")
    for _, row in df.iterrows():
        wpt = ET.SubElement(
            gpx,
            f"{{{GPX_NS}}}wpt",
            lat=f"{_num(row['Latitude'])}",
            lon=f"{_num(row['Longitude'])}",
        )
        ET.SubElement(wpt, f"{{{GPX_NS}}}name").text = str(row["Station_Location"])
    return ET.tostring(gpx, encoding="UTF-8", xml_declaration=True).decode("utf-8")


def render_dump(df: pd.DataFrame) -> str:
    """Every column of every tower, as indented JSON."""
    rows = json.loads(df.to_json(orient="records"))
    return json.dumps(rows, indent=2, ensure_ascii=False)


RENDERERS: dict[str, Callable[[pd.DataFrame], str]] = {
    "text": render_text,
    "kml": render_kml,
    "gpx": render_gpx,
    "dump": render_dump,
}


def render(df: pd.DataFrame, fmt: str) -> str:
    """Render with the named format."""
    renderer = RENDERERS.get(fmt)
    if renderer is None:
        raise ValueError(f"Can't find renderer for {fmt}")
    return renderer(df)
