"""Retrieve Spectrum Direct licence dumps, one document per admin area."""

from __future__ import annotations

import logging
import time
import urllib.error
import urllib.parse
import urllib.request
from concurrent.futures import ThreadPoolExecutor, as_completed

from tqdm import tqdm

from spectrumdirect.config import (
    BASE_URL,
    DEFAULT_COMPANY_CD,
    DEFAULT_TIMEOUT,
    DEFAULT_WORKERS,
    MAX_RETRIES,
    QUERY_PARAMS,
    RETRY_DELAY,
    SOURCE_ENCODING,
)
from spectrumdirect.parsers.document_parser import normalize_newlines

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """A document could not be retrieved."""


def build_query_url(admin_area: int, company_cd: str = DEFAULT_COMPANY_CD) -> str:
    """Licensee results URL for one company in one admin area."""
    params = dict(QUERY_PARAMS, admin_do=str(admin_area), company_cd=company_cd)
    return f"{BASE_URL}?{urllib.parse.urlencode(params)}"


def fetch_region(
    name: str,
    admin_area: int,
    company_cd: str = DEFAULT_COMPANY_CD,
    timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """Fetch one region's document as LF-normalized text.

    Retries on throttling, server errors, and network failures.

    Raises:
        FetchError: if every attempt failed.
    """
    url = build_query_url(admin_area, company_cd)
    logger.info("Fetching data for %s", name)

    last_error = ""
    for attempt in range(MAX_RETRIES):
        try:
            with urllib.request.urlopen(url, timeout=timeout) as resp:
                raw = resp.read()
            return normalize_newlines(raw.decode(SOURCE_ENCODING))
        except urllib.error.HTTPError as e:
            last_error = f"HTTP {e.code}: {e.reason}"
            if e.code != 429 and e.code < 500:
                break
        except (urllib.error.URLError, OSError) as e:
            last_error = str(e)

        if attempt < MAX_RETRIES - 1:
            logger.debug("Retrying %s after error: %s", name, last_error)
            time.sleep(RETRY_DELAY * (attempt + 1))

    raise FetchError(f"Couldn't fetch content for {name}: {last_error}")


def fetch_regions(
    areas: dict[str, int],
    company_cd: str = DEFAULT_COMPANY_CD,
    workers: int = DEFAULT_WORKERS,
) -> dict[str, str]:
    """Fetch all regions concurrently.

    Returns:
        Region name → document, in the order of ``areas``. Regions that
        couldn't be fetched are logged and left out.
    """
    documents: dict[str, str] = {}
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            pool.submit(fetch_region, name, area, company_cd): name
            for name, area in areas.items()
        }
        for future in tqdm(as_completed(futures), total=len(futures), desc="Fetching regions"):
            name = futures[future]
            try:
                documents[name] = future.result()
            except FetchError as e:
                logger.warning("%s; skipping", e)

    return {name: documents[name] for name in areas if name in documents}
