"""Shared fixtures: a fake HTTP backend and an isolated configuration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from payloads import FakeAPI

from roosterteeth import RoosterTeethClient
from roosterteeth.config import load_config, reset_config


@pytest.fixture(autouse=True)
def _isolated_config() -> Iterator[None]:
    """Never let a developer's config file leak into tests."""
    load_config(Path("/nonexistent/roosterteeth.ini"))
    yield
    reset_config()


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client(fake_api: FakeAPI) -> Iterator[RoosterTeethClient]:
    with RoosterTeethClient(transport=fake_api.transport()) as rt:
        yield rt
