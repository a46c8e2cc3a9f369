"""Error taxonomy for the CSDB conversion checks.

Every error is terminal for the dataset being processed; nothing here is
retried. Each carries the dataset name (when known) plus a ``context`` dict
that callers can pass straight to ``logging`` as ``extra``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class BrianClientError(Exception):
    """Base class for all client errors."""

    def __init__(
        self,
        message: str,
        dataset: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.dataset = dataset
        self.context = context or {}

    def __str__(self) -> str:
        if self.dataset:
            return f"[{self.dataset}] {self.message}"
        return self.message


class MissingFixture(BrianClientError):
    """An input ``.csdb`` file or a golden JSON file does not exist."""


class TransportError(BrianClientError):
    """The POST to the conversion service failed or returned a non-200 status."""

    def __init__(
        self,
        message: str,
        dataset: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, dataset=dataset, context=context)
        self.status_code = status_code


class DecodeError(BrianClientError):
    """A response or golden file is not valid JSON of the expected shape."""


class MismatchError(BrianClientError, AssertionError):
    """Actual and expected time series differ.

    ``path`` locates the first mismatch (``timeseries[3].years[12]``) and
    ``differences`` holds the structural diff entries behind ``report``.
    Subclasses ``AssertionError`` so pytest reports it as a test failure
    rather than an error.
    """

    def __init__(
        self,
        message: str,
        path: str,
        dataset: Optional[str] = None,
        index: Optional[int] = None,
        field: Optional[str] = None,
        sub_index: Optional[int] = None,
        differences: Optional[List[Any]] = None,
        report: str = "",
    ) -> None:
        context = {"path": path, "index": index, "field": field, "sub_index": sub_index}
        super().__init__(message, dataset=dataset, context=context)
        self.path = path
        self.index = index
        self.field = field
        self.sub_index = sub_index
        self.differences = differences or []
        self.report = report

    def __str__(self) -> str:
        text = super().__str__()
        if self.report:
            return f"{text}\n\n{self.report}"
        return text
