# ABOUTME: Exception hierarchy raised by the weather client.
# ABOUTME: Separates bad requests, non-2xx responses and undecodable bodies.

from pydantic import ValidationError


class WeatherError(Exception):
    """Base class for all failures raised by weatherapi_kit."""


class MalformedRequestError(WeatherError):
    """The request URL could not be built from the caller's inputs. Never transient."""


class UnexpectedResponseError(WeatherError):
    """The service answered with a status outside 200-299.

    ``body`` holds the raw response bytes, unparsed.
    """

    def __init__(self, status_code: int, body: bytes = b""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Unexpected response status {status_code}")


class DecodeError(WeatherError):
    """The response body did not match the expected schema."""

    def __init__(self, cause: ValidationError):
        self.cause = cause
        super().__init__(f"Could not decode {cause.title}: {cause}")
