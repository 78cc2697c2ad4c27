"""
NASA APOD API client.

:copyright: (c) 2025 by Meir Miyara.
:license: MPL-2.0, see LICENSE for more details.
"""

import asyncio
import logging
import ssl
from typing import Any, Dict, Iterable, List, Optional, Union

import aiohttp
import certifi
from pydantic import ValidationError

from nasa_apod.config import Config
from nasa_apod.models import APODRecord

_LOG = logging.getLogger(__name__)


class APODError(Exception):
    """Base class for errors raised by the APOD client."""


class NASAAPIError(APODError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status: int):
        super().__init__(f"NASA API error: {status}")
        self.status = status


class MalformedResponseError(APODError):
    """The API answered with a body that is not the expected APOD JSON."""


class APODClient:
    """Async client for the Astronomy Picture of the Day API.

    Each fetch performs exactly one GET request. Nothing is cached or retried,
    and the client holds no per-request state, so calls may be issued
    concurrently.
    """

    def __init__(self, config: Config, session: Optional[aiohttp.ClientSession] = None):
        """Initialize APOD client."""
        self._config = config
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> None:
        """Ensure an aiohttp session exists."""
        if self._session is None or self._session.closed:
            ssl_context = ssl.create_default_context(cafile=certifi.where())

            connector = aiohttp.TCPConnector(
                ssl=ssl_context,
                limit=0,
                enable_cleanup_closed=True
            )

            timeout = aiohttp.ClientTimeout(total=self._config.timeout)

            headers = {
                'User-Agent': 'nasa-apod-client',
                'Accept': 'application/json',
            }

            self._session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector,
                headers=headers
            )
            self._owns_session = True

            _LOG.info("APOD HTTP session created for %s", self._config.base_url)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def _request(self, params: Dict[str, str]) -> Any:
        """GET the APOD endpoint and return the decoded JSON body."""
        await self._ensure_session()

        url = self._config.base_url
        query = {"api_key": self._config.api_key, **params}

        _LOG.debug("Requesting %s with %s", url, params)
        async with self._session.get(url, params=query) as response:
            _LOG.debug("Response: HTTP %s from %s", response.status, url)

            if not 200 <= response.status < 300:
                _LOG.warning("APOD request failed with HTTP %s", response.status)
                raise NASAAPIError(response.status)

            try:
                # The API does not always label its JSON
                return await response.json(content_type=None)
            except ValueError as ex:
                raise MalformedResponseError(f"Invalid JSON from {url}: {ex}") from ex

    @staticmethod
    def _parse_record(data: Any) -> APODRecord:
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a JSON object, got {type(data).__name__}")
        try:
            return APODRecord.model_validate(data)
        except ValidationError as ex:
            raise MalformedResponseError(f"Invalid APOD record: {ex}") from ex

    def _parse_records(self, data: Any) -> List[APODRecord]:
        if not isinstance(data, list):
            raise MalformedResponseError(f"Expected a JSON array, got {type(data).__name__}")
        return [self._parse_record(item) for item in data]

    async def get_apod(self, date: Optional[str] = None) -> APODRecord:
        """
        Fetch the picture of a single day.

        :param date: day as ``YYYY-MM-DD``; the API defaults to today when omitted
        :return: the day's record
        """
        params = {}
        if date:
            params["date"] = date

        record = self._parse_record(await self._request(params))
        _LOG.info("APOD fetched for %s: %s", record.date, record.title[:30])
        return record

    async def get_apod_range(self, start_date: str, end_date: str) -> List[APODRecord]:
        """
        Fetch every picture between two days, both inclusive.

        Ordering and validation of the range are left to the API.
        """
        data = await self._request({"start_date": start_date, "end_date": end_date})
        return self._parse_records(data)

    async def get_recent_apods(self, count: int = 12) -> List[APODRecord]:
        """Fetch ``count`` pictures as selected by the API."""
        data = await self._request({"count": str(count)})
        return self._parse_records(data)

    async def get_apods(self, dates: Iterable[Optional[str]]) -> List[Union[APODRecord, BaseException]]:
        """
        Fetch several single days concurrently.

        :param dates: days as ``YYYY-MM-DD``
        :return: one entry per date, in input order: the record, or the exception its fetch raised
        """
        await self._ensure_session()
        tasks = [self.get_apod(date) for date in dates]
        return await asyncio.gather(*tasks, return_exceptions=True)
