import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from weatherwise.settings import UserSettings
from weatherwise.weather.api import CURRENT_URL, FORECAST_URL, SEARCH_URL

DATA_DIR = Path(__file__).parent / "data"


def load_json(name: str) -> Any:
    return json.loads((DATA_DIR / name).read_text())


def make_response(payload: Any, status_code: int = 200) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = json.dumps(payload)
    resp.reason = "OK" if status_code == 200 else "Error"
    resp.json.return_value = payload
    return resp


@pytest.fixture
def settings() -> UserSettings:
    return UserSettings(api_key="test-key-abcdef", default_location="London")


@pytest.fixture
def search_payload() -> list[dict[str, Any]]:
    return load_json("search_london.json")


@pytest.fixture
def current_payload() -> dict[str, Any]:
    return load_json("current_london.json")


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    return load_json("forecast_london.json")


@pytest.fixture
def provider_routes(
    search_payload: list[dict[str, Any]],
    current_payload: dict[str, Any],
    forecast_payload: dict[str, Any],
) -> dict[str, Mock]:
    """URL → response map for a fake requests.get; tests may replace entries."""
    return {
        SEARCH_URL: make_response(search_payload),
        CURRENT_URL: make_response(current_payload),
        FORECAST_URL: make_response(forecast_payload),
    }


@pytest.fixture
def fake_get(provider_routes: dict[str, Mock]) -> Callable[..., Mock]:
    """Dispatch on URL so concurrent fetches need no call ordering."""

    def _get(url: str, params: dict[str, Any] | None = None, timeout: int | None = None) -> Mock:
        return provider_routes[url]

    return _get
