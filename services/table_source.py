"""
services/table_source.py

Where the results table comes from.
- SheetsTableSource: Google Sheets values API (read-only, API key)
- CsvTableSource:    local CSV snapshot with the same layout

Both return a RawTable: row 0 = headers, following rows = string cells.
The table is fetched fresh on every call (no caching, no retries).
"""

import csv
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx

logger = logging.getLogger(__name__)


class TableSourceError(Exception):
    """The results table could not be fetched or read."""


class TableSource(ABC):
    @abstractmethod
    async def fetch_table(self) -> List[List[str]]: ...


# ==========================================================
# [Google Sheets]
# ==========================================================
class SheetsTableSource(TableSource):
    def __init__(self, sheet_id: str, api_key: str, sheet_range: str,
                 base_url: str = "https://sheets.googleapis.com/v4",
                 timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.sheet_id = sheet_id
        self.api_key = api_key
        self.sheet_range = sheet_range
        self.base = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport  # tests plug httpx.MockTransport in here

    @property
    def url(self) -> str:
        return f"{self.base}/spreadsheets/{self.sheet_id}/values/{self.sheet_range}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self.transport)

    async def fetch_table(self) -> List[List[str]]:
        async with self._client() as client:
            try:
                r = await client.get(self.url, params={"key": self.api_key})
                r.raise_for_status()
                data = r.json()
            except httpx.HTTPStatusError as e:
                raise TableSourceError(
                    f"Request failed with status code {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise TableSourceError(f"Sheets request failed: {e}") from e
            except ValueError as e:
                raise TableSourceError(f"Sheets response is not JSON: {e}") from e

        values = data.get("values") if isinstance(data, dict) else None
        if not isinstance(values, list):
            raise TableSourceError("Sheets response has no 'values' array")

        logger.debug("Fetched %d rows from sheet range %s", len(values), self.sheet_range)
        return values


# ==========================================================
# [CSV snapshot]
# ==========================================================
class CsvTableSource(TableSource):
    def __init__(self, path: str):
        self.path = path

    async def fetch_table(self) -> List[List[str]]:
        try:
            with open(self.path, newline="", encoding="utf-8-sig") as csvfile:
                rows = [row for row in csv.reader(csvfile)]
        except OSError as e:
            raise TableSourceError(f"Cannot read results CSV {self.path}: {e}") from e

        logger.debug("Read %d rows from %s", len(rows), self.path)
        return rows


def build_table_source(cfg) -> TableSource:
    """Pick the table source named by ``cfg.TABLE_SOURCE``."""
    if cfg.TABLE_SOURCE == "csv":
        return CsvTableSource(cfg.TABLE_CSV_PATH)
    return SheetsTableSource(
        sheet_id=cfg.SHEET_ID,
        api_key=cfg.API_KEY,
        sheet_range=cfg.SHEET_RANGE,
        base_url=cfg.SHEETS_API_BASE_URL,
        timeout=cfg.SHEETS_TIMEOUT,
    )
