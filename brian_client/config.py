import os
from pathlib import Path
from typing import Optional

DEFAULT_BASE_URL = "http://localhost:8083"
CONVERT_CSDB_PATH = "/Services/ConvertCSDB"

# Requests to convert the larger files (UKEA, RAGV) can take a long time.
REQUEST_TIMEOUT = 20

DATASETS = ("ott", "bb", "berd", "ragv", "ukea", "sppi")


def base_url() -> str:
    return os.getenv("PROJECT_BRIAN_URL", DEFAULT_BASE_URL)


def convert_url(base: Optional[str] = None) -> str:
    root = base if base is not None else base_url()
    return root.rstrip("/") + CONVERT_CSDB_PATH


def resources_root() -> Path:
    return Path(os.getenv("BRIAN_RESOURCES_DIR", "resources"))


def inputs_dir() -> Path:
    return resources_root() / "inputs"


def outputs_dir() -> Path:
    return resources_root() / "outputs"


def strict_compare() -> bool:
    """Whether the integration suite also compares whole entries untyped."""
    return os.getenv("BRIAN_STRICT_COMPARE", "") not in ("", "0")
