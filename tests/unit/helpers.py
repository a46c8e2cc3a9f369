"""Builders for time series payloads and a fake HTTP session."""
from __future__ import annotations

import io
import json
from typing import Any, Dict, List, Optional

import requests


def make_value(date: str = "2000", value: str = "12.3", **overrides: str) -> Dict[str, str]:
    entry = {
        "date": date,
        "value": value,
        "year": date,
        "month": "",
        "quarter": "",
        "sourceDataset": "ott",
    }
    entry.update(overrides)
    return entry


def make_record(cdid: str = "ABMI", years: Optional[List[Dict[str, str]]] = None) -> Dict[str, Any]:
    return {
        "description": {
            "title": "Gross Domestic Product",
            "cdid": cdid,
            "unit": "m",
            "preUnit": "£",
            "source": "ONS",
            "date": "2000",
            "number": "1",
            "sampleSize": 0,
        },
        "type": "timeseries",
        "years": years if years is not None else [make_value()],
        "quarters": [make_value("2000 Q1", "3.1", year="2000", quarter="Q1")],
        "months": [make_value("2000 JAN", "1.0", year="2000", month="January")],
        "sourceDatasets": ["ott"],
        "section": None,
    }


class FakeSession:
    """Stands in for ``requests.Session``; returns canned responses."""

    def __init__(self, status: int = 200, body: Any = None, error: Optional[Exception] = None):
        self.status = status
        self.body = body if body is not None else []
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, files=None, timeout=None, **kwargs) -> requests.Response:
        self.calls.append({"url": url, "files": files, "timeout": timeout})
        if self.error is not None:
            raise self.error
        response = requests.Response()
        response.status_code = self.status
        response.url = url
        response.encoding = "utf-8"
        if isinstance(self.body, bytes):
            content = self.body
        else:
            content = json.dumps(self.body).encode("utf-8")
        response._content = content
        response._content_consumed = True
        response.raw = io.BytesIO(content)
        return response

    def close(self) -> None:
        self.closed = True
