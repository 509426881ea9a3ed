"""End-to-end tests: provider payloads in, view calls out."""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock, patch

import pytest

from conftest import make_response
from weatherwise.common.enums import ErrorCategory, TemperatureUnit
from weatherwise.controller import ERROR_MESSAGES, PLACEHOLDER_KEY_MESSAGE, WeatherApp
from weatherwise.display.protocols import MockView
from weatherwise.geolocation import StaticGeolocation
from weatherwise.settings import UserSettings
from weatherwise.weather.api import CURRENT_URL, FORECAST_URL, SEARCH_URL
from weatherwise.weather.models import Coordinates, LocationSuggestion
from weatherwise.weather.utils.icons import WeatherIcons

GET = "weatherwise.weather.api.requests.get"


@pytest.fixture
def view() -> MockView:
    return MockView()


@pytest.fixture
def weather_app(settings: UserSettings, view: MockView) -> WeatherApp:
    return WeatherApp(settings=settings, view=view, geolocation=StaticGeolocation(None))


def test_london_scenario(weather_app: WeatherApp, view: MockView, fake_get: Callable[..., Mock]) -> None:
    with patch(GET, side_effect=fake_get):
        assert weather_app.search("London") is True

    current = view.last("render_current")["current"]
    assert current.temperature_celsius == 18
    assert current.wind_speed_mps == pytest.approx(10.0)
    assert current.icon_id == "02d"

    suggestions = view.last("render_suggestions")["suggestions"]
    assert [s.category for s in suggestions] == ["Warm Weather", "Rain Protection"]
    assert len(view.last("render_forecast")["forecast"]) == 5
    assert view.loading is False
    assert "render_error" not in view.names()


def test_zero_match_geocode(
    weather_app: WeatherApp,
    view: MockView,
    fake_get: Callable[..., Mock],
    provider_routes: dict[str, Mock],
) -> None:
    provider_routes[SEARCH_URL] = make_response([])
    with patch(GET, side_effect=fake_get) as mock_get:
        assert weather_app.search("Atlantis") is False

    assert mock_get.call_count == 1
    assert view.last("render_error")["message"] == ERROR_MESSAGES[ErrorCategory.LOCATION_NOT_FOUND]
    assert "render_current" not in view.names()
    assert "render_suggestions" not in view.names()
    assert view.names()[-1] == "hide_loading"
    assert view.loading is False


def test_forecast_failure_renders_nothing_partial(
    weather_app: WeatherApp,
    view: MockView,
    fake_get: Callable[..., Mock],
    provider_routes: dict[str, Mock],
) -> None:
    provider_routes[FORECAST_URL] = make_response({"error": {"message": "Too many"}}, 429)
    with patch(GET, side_effect=fake_get):
        assert weather_app.search("London") is False

    assert "render_current" not in view.names()
    assert view.last("render_error")["message"] == ERROR_MESSAGES[ErrorCategory.RATE_LIMITED]
    assert view.loading is False


def test_unusable_provider_data_renders_error(
    weather_app: WeatherApp,
    view: MockView,
    fake_get: Callable[..., Mock],
    provider_routes: dict[str, Mock],
    current_payload: dict[str, Any],
) -> None:
    current_payload["current"]["precip_mm"] = -1
    provider_routes[CURRENT_URL] = make_response(current_payload)
    with patch(GET, side_effect=fake_get):
        assert weather_app.search("London") is False

    assert view.last("render_error")["message"] == ERROR_MESSAGES[ErrorCategory.PROVIDER]
    assert "render_current" not in view.names()
    assert view.loading is False


def test_auth_failure_message(
    weather_app: WeatherApp,
    view: MockView,
    fake_get: Callable[..., Mock],
    provider_routes: dict[str, Mock],
) -> None:
    provider_routes[SEARCH_URL] = make_response({"error": {"message": "bad key"}}, 401)
    with patch(GET, side_effect=fake_get):
        weather_app.search("London")
    assert view.last("render_error")["message"] == ERROR_MESSAGES[ErrorCategory.AUTH]


def test_failure_keeps_previous_display(
    weather_app: WeatherApp,
    view: MockView,
    fake_get: Callable[..., Mock],
    provider_routes: dict[str, Mock],
) -> None:
    with patch(GET, side_effect=fake_get):
        weather_app.search("London")
    first = weather_app.context.last_report

    provider_routes[CURRENT_URL] = make_response({"error": {"message": "boom"}}, 500)
    with patch(GET, side_effect=fake_get):
        assert weather_app.search("London") is False

    assert weather_app.context.last_report is first


def test_blank_search_does_nothing(weather_app: WeatherApp, view: MockView) -> None:
    with patch(GET) as mock_get:
        assert weather_app.search("   ") is False
    mock_get.assert_not_called()
    assert view.calls == []


def test_toggle_unit_reformats_without_refetch(
    weather_app: WeatherApp, view: MockView, fake_get: Callable[..., Mock]
) -> None:
    with patch(GET, side_effect=fake_get):
        weather_app.search("London")

    with patch(GET) as mock_get:
        assert weather_app.toggle_unit() is TemperatureUnit.FAHRENHEIT
    mock_get.assert_not_called()
    assert view.last("render_current")["unit"] is TemperatureUnit.FAHRENHEIT
    assert view.last("render_forecast")["unit"] is TemperatureUnit.FAHRENHEIT


def test_toggle_unit_before_any_query(weather_app: WeatherApp, view: MockView) -> None:
    assert weather_app.toggle_unit() is TemperatureUnit.FAHRENHEIT
    assert view.calls == []


def test_start_falls_back_to_default_location(
    weather_app: WeatherApp, fake_get: Callable[..., Mock]
) -> None:
    with patch(GET, side_effect=fake_get) as mock_get:
        assert weather_app.start() is True
    first_call = mock_get.call_args_list[0]
    assert first_call.args[0] == SEARCH_URL
    assert first_call.kwargs["params"]["q"] == "London"


def test_start_uses_device_location(
    settings: UserSettings, view: MockView, fake_get: Callable[..., Mock]
) -> None:
    here = Coordinates(latitude=48.85, longitude=2.35)
    weather_app = WeatherApp(settings=settings, view=view, geolocation=StaticGeolocation(here))
    with patch(GET, side_effect=fake_get) as mock_get:
        assert weather_app.start() is True
    urls = {c.args[0] for c in mock_get.call_args_list}
    assert SEARCH_URL not in urls
    assert weather_app.context.last_coordinates == here


def test_start_with_placeholder_key(view: MockView) -> None:
    settings = UserSettings(api_key="YOUR_WEATHERAPI_KEY")
    weather_app = WeatherApp(settings=settings, view=view)
    with patch(GET) as mock_get:
        assert weather_app.start() is False
    mock_get.assert_not_called()
    assert view.last("render_error")["message"] == PLACEHOLDER_KEY_MESSAGE


def test_short_input_clears_suggestions(weather_app: WeatherApp, view: MockView) -> None:
    with patch(GET) as mock_get:
        assert weather_app.handle_location_input(" L ") == []
    mock_get.assert_not_called()
    assert view.last("render_locations")["locations"] == []


def test_input_lists_suggestions(
    weather_app: WeatherApp, view: MockView, fake_get: Callable[..., Mock]
) -> None:
    with patch(GET, side_effect=fake_get):
        found = weather_app.handle_location_input("Lon")
    assert [s.name for s in found] == ["London, UK", "London, Canada"]
    assert view.last("render_locations")["locations"] == found


def test_suggestion_errors_are_not_shown(
    weather_app: WeatherApp,
    view: MockView,
    fake_get: Callable[..., Mock],
    provider_routes: dict[str, Mock],
) -> None:
    provider_routes[SEARCH_URL] = make_response({}, 500)
    with patch(GET, side_effect=fake_get):
        assert weather_app.handle_location_input("Lon") == []
    assert "render_error" not in view.names()


def test_select_suggestion_fetches_by_coordinates(
    weather_app: WeatherApp, view: MockView, fake_get: Callable[..., Mock]
) -> None:
    pick = LocationSuggestion(
        name="London, Canada", coordinates=Coordinates(latitude=42.98, longitude=-81.25)
    )
    with patch(GET, side_effect=fake_get) as mock_get:
        assert weather_app.select_suggestion(pick) is True
    urls = [c.args[0] for c in mock_get.call_args_list]
    assert SEARCH_URL not in urls
    assert view.names()[0] == "render_locations"


def test_superseded_query_is_not_rendered(
    weather_app: WeatherApp, view: MockView, fake_get: Callable[..., Mock]
) -> None:
    def get_then_newer_query(url: str, **kwargs: object) -> Mock:
        weather_app.context.next_token()
        return fake_get(url, **kwargs)

    with patch(GET, side_effect=get_then_newer_query):
        assert weather_app.search("London") is False

    assert "render_current" not in view.names()
    assert "render_error" not in view.names()


def test_malformed_icon_map_does_not_block_startup(
    settings: UserSettings, view: MockView, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(WeatherIcons, "_code_map", dict(WeatherIcons.get_code_map()))
    monkeypatch.chdir(tmp_path)
    (tmp_path / "icon_map.csv").write_text("condition;icon\n1000;01n\n")

    weather_app = WeatherApp(settings=settings, view=view)

    assert weather_app.settings.paths.icons_map_file == tmp_path / "icon_map.csv"
    assert WeatherIcons.code_to_icon_id(1000) == "01d"
