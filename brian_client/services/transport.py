"""HTTP client for the project-brian ``/Services/ConvertCSDB`` endpoint."""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from brian_client import config
from brian_client.errors import DecodeError, TransportError
from brian_client.models.schemas import TIMESERIES_LIST, TimeSeries
from brian_client.services import fixtures

log = logging.getLogger(__name__)

_BODY_EXCERPT = 500


def decode_json(payload: bytes, dataset: Optional[str] = None) -> Any:
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"response is not valid JSON: {exc}", dataset=dataset) from exc


def decode_timeseries(data: Any, dataset: Optional[str] = None) -> List[TimeSeries]:
    """Validate a decoded JSON array into typed ``TimeSeries`` records."""

    if not isinstance(data, list):
        raise DecodeError(
            f"expected a JSON array of time series, got {type(data).__name__}",
            dataset=dataset,
        )
    try:
        return TIMESERIES_LIST.validate_python(data)
    except ValidationError as exc:
        raise DecodeError(f"response does not match the time series shape: {exc}", dataset=dataset) from exc


class BrianClient:
    """Posts CSDB fixtures to the conversion service, one request at a time.

    No retries: a failed request raises immediately.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = config.REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = config.convert_url(base_url)
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __enter__(self) -> "BrianClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def post_csdb(self, name: str) -> requests.Response:
        data = fixtures.read_input(name)
        files = {"file": (f"{name}.csdb", data, "application/octet-stream")}
        log.debug("POST %s (%s.csdb, %d bytes)", self.url, name, len(data))
        try:
            response = self.session.post(self.url, files=files, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"POST {self.url} failed: {exc}", dataset=name) from exc

        if response.status_code != 200:
            excerpt = response.text[:_BODY_EXCERPT]
            log.warning("POST %s returned %d for %s", self.url, response.status_code, name)
            response.close()
            raise TransportError(
                f"POST {self.url} returned status {response.status_code}: {excerpt}",
                dataset=name,
                status_code=response.status_code,
            )
        return response

    def convert_raw(self, name: str) -> Any:
        """Convert ``<name>.csdb`` and return the response as generic JSON."""

        response = self.post_csdb(name)
        try:
            payload = response.content
        finally:
            response.close()
        return decode_json(payload, dataset=name)

    def convert(self, name: str) -> List[TimeSeries]:
        records = decode_timeseries(self.convert_raw(name), dataset=name)
        log.debug("%s: decoded %d time series", name, len(records))
        return records
