"""URLs, markers, and configuration."""

from __future__ import annotations

# Spectrum Direct licensee search, plain-text output
BASE_URL = "http://sd.ic.gc.ca/pls/engdoc_anon/web_search.licensee_name_results"
QUERY_PARAMS = {
    "output_format": "2",
    "selected_columns": "TX_FREQ,RX_FREQ,LOCATION",
    "col_in_fmt": "COMMA_LIST",
    "selected_column_group": "NONE",
    "extra_ascii": "LINK_STATION",
}

# Globalive Wireless (Wind Mobile)
DEFAULT_COMPANY_CD = "90045300"

# Region name → Spectrum Direct admin area code
ADMIN_AREAS = {
    "ontario": 41,
    "quebec": 51,
}

# Document markers
LEGEND_MARKER = "Field Position Legend"
DATA_START_MARKER = "[DATA]"
DATA_END_MARKER = "[/DATA]"

# Output
OUTPUT_FORMATS = ("text", "kml", "gpx", "dump")
DEFAULT_OUTPUT_FORMAT = "text"
DEFAULT_METRO = "ottawa"

# Network
DEFAULT_TIMEOUT = 60  # seconds
DEFAULT_WORKERS = 2
MAX_RETRIES = 3
RETRY_DELAY = 2  # seconds
SOURCE_ENCODING = "iso-8859-1"
