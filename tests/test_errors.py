import pytest

from weatherwise.common.enums import ErrorCategory
from weatherwise.weather.errors import (
    AuthenticationError,
    InvalidInput,
    LocationNotFound,
    NetworkError,
    ParseError,
    ProviderError,
    QuerySuperseded,
    RateLimitError,
    WeatherAPIError,
)


def test_weather_api_error_str() -> None:
    err = WeatherAPIError(code=404, message="Not Found")
    assert str(err) == "[404] Not Found"
    assert err.code == 404
    assert err.category is ErrorCategory.PROVIDER


@pytest.mark.parametrize(
    "code, expected_type, category",
    [
        (401, AuthenticationError, ErrorCategory.AUTH),
        (403, AuthenticationError, ErrorCategory.AUTH),
        (429, RateLimitError, ErrorCategory.RATE_LIMITED),
        (400, ProviderError, ErrorCategory.PROVIDER),
        (404, ProviderError, ErrorCategory.PROVIDER),
        (500, ProviderError, ErrorCategory.PROVIDER),
    ],
)
def test_from_response_creates_expected_error(
    code: int, expected_type: type[WeatherAPIError], category: ErrorCategory
) -> None:
    resp = {"error": {"code": 1006, "message": "test error"}}
    err = WeatherAPIError.from_response(resp, code)
    assert type(err) is expected_type
    assert err.category is category
    assert err.code == code
    assert "test error" in str(err)


def test_from_response_defaults_message() -> None:
    err = WeatherAPIError.from_response({}, 429)
    assert err.message == "WeatherAPI rate limit exceeded"


def test_location_not_found_keeps_query() -> None:
    err = LocationNotFound("Atlantis")
    assert err.query == "Atlantis"
    assert err.category is ErrorCategory.LOCATION_NOT_FOUND
    assert "Atlantis" in str(err)


def test_network_error_wraps_exception() -> None:
    try:
        raise ConnectionError("BOOM")
    except ConnectionError as e:
        err = NetworkError(message="Connection error", original_error=e)
        assert str(err) == "[0] Connection error"
        assert err.category is ErrorCategory.NETWORK
        assert isinstance(err.original_error, ConnectionError)


def test_parse_error_is_provider_error() -> None:
    err = ParseError("bad payload", ValueError("x"))
    assert isinstance(err, ProviderError)
    assert err.category is ErrorCategory.PROVIDER


def test_invalid_input_is_value_error() -> None:
    assert issubclass(InvalidInput, ValueError)
    assert InvalidInput.category is ErrorCategory.INVALID_INPUT


def test_query_superseded_message() -> None:
    err = QuerySuperseded(3, 5)
    assert (err.token, err.latest) == (3, 5)
    assert "superseded" in str(err)
