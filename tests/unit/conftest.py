"""Offline fixtures: a temporary resources tree with one CSDB dataset."""
import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from .helpers import make_record


@pytest.fixture
def resources(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "resources"
    (root / "inputs").mkdir(parents=True)
    (root / "outputs").mkdir()
    monkeypatch.setenv("BRIAN_RESOURCES_DIR", str(root))
    return root


@pytest.fixture
def ott_input(resources: Path) -> Path:
    path = resources / "inputs" / "ott.csdb"
    path.write_bytes(b"\x00\x01csdb\xff")
    return path


@pytest.fixture
def ott_golden(resources: Path) -> List[Dict[str, Any]]:
    payload = [make_record("ABMI"), make_record("YBHA")]
    (resources / "outputs" / "ott-csdb.json").write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return payload
