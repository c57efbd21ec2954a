"""Unit tests for the exception hierarchy."""

from productdesk.core.exceptions import (
    ApplicationError,
    ConfigurationError,
    HttpError,
    InputParseError,
    NetworkError,
)


def test_all_errors_share_base_class():
    for error in (
        NetworkError(),
        HttpError(500, "boom"),
        InputParseError("x"),
        ConfigurationError(),
    ):
        assert isinstance(error, ApplicationError)


def test_http_error_keeps_status_and_body():
    error = HttpError(400, "Price must be positive")
    assert error.status_code == 400
    assert error.body == "Price must be positive"
    assert error.code == "HTTP_ERROR"
    assert str(error) == "Price must be positive"


def test_http_error_with_empty_body_names_status():
    assert HttpError(502, "").message == "HTTP 502"


def test_input_parse_error_message():
    error = InputParseError("abc")
    assert error.message == "Invalid number: 'abc'"
    assert error.text == "abc"
