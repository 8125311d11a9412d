"""HTTP flight data source backed by the Big Nerd Ranch sample API."""

import asyncio

import requests

from gatewatch.config import DEFAULT_BASE_URL
from gatewatch.exceptions import DataSourceError


class BigNerdRanchSource:
    """Flight data source using the kotlin-book sample endpoints."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def flight_endpoint(self) -> str:
        return f"{self.base_url}/flight"

    @property
    def loyalty_endpoint(self) -> str:
        return f"{self.base_url}/loyalty"

    async def fetch_flight_info(self) -> str:
        return await asyncio.to_thread(self._get, self.flight_endpoint)

    async def fetch_loyalty_info(self) -> str:
        return await asyncio.to_thread(self._get, self.loyalty_endpoint)

    def _get(self, url: str) -> str:
        """Blocking GET returning the response body as text."""
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise DataSourceError(
                f"GET {url} failed with status {status_code}",
                url=url,
                status_code=status_code,
            ) from e
        except requests.RequestException as e:
            raise DataSourceError(f"GET {url} failed: {e}", url=url) from e
        return resp.text
