"""Locate and read CSDB input fixtures and their golden JSON outputs.

Layout under the resources root (``BRIAN_RESOURCES_DIR``, default
``resources``):

    inputs/<name>.csdb          binary upload
    outputs/<name>-csdb.json    golden response, two-space indent
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from brian_client import config
from brian_client.errors import DecodeError, MissingFixture, TransportError
from brian_client.models.schemas import TIMESERIES_LIST, TimeSeries

log = logging.getLogger(__name__)


def input_path(name: str) -> Path:
    return config.inputs_dir() / f"{name}.csdb"


def expected_path(name: str) -> Path:
    return config.outputs_dir() / f"{name}-csdb.json"


def read_input(name: str) -> bytes:
    """Return the raw bytes of ``<name>.csdb``.

    Raises ``MissingFixture`` when the file does not exist and
    ``TransportError`` when fewer bytes were read than the file holds.
    """

    path = input_path(name)
    if not path.is_file():
        raise MissingFixture(f"input fixture not found: {path}", dataset=name)
    with path.open("rb") as handle:
        data = handle.read()
        size = os.fstat(handle.fileno()).st_size
    if len(data) != size:
        raise TransportError(
            f"read {len(data)} bytes from {path} but the file holds {size}",
            dataset=name,
        )
    log.debug("read %d bytes from %s", len(data), path)
    return data


def _require_expected(name: str) -> Path:
    outputs = config.outputs_dir()
    if not outputs.is_dir():
        raise MissingFixture(
            f"dir {str(outputs)!r} does not exist, make sure you have unzipped "
            f"{str(config.resources_root() / 'outputs.zip')!r} before running the tests",
            dataset=name,
        )
    path = expected_path(name)
    if not path.is_file():
        raise MissingFixture(f"golden file not found: {path}", dataset=name)
    return path


def load_expected_raw(name: str) -> Any:
    path = _require_expected(name)
    try:
        return json.loads(path.read_bytes())
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"golden file {path} is not valid JSON: {exc}", dataset=name) from exc


def load_expected(name: str) -> List[TimeSeries]:
    data = load_expected_raw(name)
    try:
        return TIMESERIES_LIST.validate_python(data)
    except ValidationError as exc:
        raise DecodeError(
            f"golden file {expected_path(name)} does not match the time series shape: {exc}",
            dataset=name,
        ) from exc


def write_expected(name: str, payload: Any) -> Path:
    """Overwrite the golden file for ``name`` with ``payload``."""

    path = expected_path(name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    log.debug("wrote golden file %s", path)
    return path
