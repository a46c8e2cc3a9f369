"""Pytest fixtures for the CSDB conversion tests against a running service."""
from pathlib import Path
from typing import Iterator

import pytest
import requests

from brian_client import config
from brian_client.services.transport import BrianClient


@pytest.fixture(scope="session")
def resources_root() -> Path:
    """Directory holding ``inputs/`` and ``outputs/``."""
    return config.resources_root()


@pytest.fixture(scope="session")
def api_root() -> str:
    """Base URL for the project-brian service."""
    return config.base_url()


@pytest.fixture(scope="session")
def api_session() -> Iterator[requests.Session]:
    """Session shared by every conversion request in the run."""
    session = requests.Session()
    yield session
    session.close()


@pytest.fixture(scope="session")
def client(api_root: str, api_session: requests.Session) -> BrianClient:
    return BrianClient(base_url=api_root, session=api_session)
