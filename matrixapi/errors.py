"""Error types raised by the Matrix admin API client."""

from __future__ import annotations

from .models import APIErrorResponse


class MatrixAPIError(Exception):
    """Base class for every error the client reports to the user."""


class ServerNotDefined(MatrixAPIError):
    """The requested server profile is not in the config file."""

    def __init__(self, server_name: str) -> None:
        self.server_name = server_name
        super().__init__(f"The given server {server_name} is not defined")


class ConfigFileError(MatrixAPIError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"There was an error with the config file: {reason}")


class AccessTokenError(MatrixAPIError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"There was an error reading the access token: {reason}")


class TransportError(MatrixAPIError):
    """The HTTP request failed or its body could not be decoded."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"There was an error during the HTTP request: {reason}")


class APIRequestError(MatrixAPIError):
    """The server answered with a non-200 status and a Matrix error body."""

    def __init__(self, api_error_response: APIErrorResponse, status_code: int) -> None:
        self.api_error_response = api_error_response
        self.status_code = status_code
        super().__init__(
            "There was an error running the API request.\n"
            f'\terror:\t"{api_error_response.error}"\n'
            f'\terrcode\t"{api_error_response.errcode}"\n'
            f"\tstatus:\t{status_code}"
        )
