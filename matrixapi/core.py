"""Core Matrix admin API client."""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any, TypeVar

from .errors import APIRequestError, TransportError
from .models import APIErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

SERVER_VERSION_ENDPOINT = "/_synapse/admin/v1/server_version"
# TODO: follow `next_token` once paging through large user bases is needed
USER_LIST_ENDPOINT = "/_synapse/admin/v2/users?from=0&guests=true"
USER_DETAIL_ENDPOINT = "/_synapse/admin/v2/users/{user_id}"


@dataclass
class Response:
    """Status and raw body of a completed request."""

    url: str
    status_code: int
    body: bytes

    def json(self) -> Any:
        try:
            return json.loads(self.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            msg = f"error decoding response body from {self.url}: {e}"
            raise TransportError(msg) from e


class MatrixClient:
    """Synchronous client for a single homeserver."""

    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def make_get_request(self, endpoint: str) -> Response:
        """Issue a GET request and return the response, whatever its status."""
        url = self.build_url(endpoint)
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        logger.debug(f"GET {url}")
        try:
            request = urllib.request.Request(url, headers=headers, method="GET")
            with urllib.request.urlopen(request) as response:
                result = Response(url, response.status, response.read())
        except urllib.error.HTTPError as e:
            # Non-2xx answers still carry a Matrix error body
            result = Response(url, e.code, e.read())
            e.close()
        except (OSError, ValueError, http.client.HTTPException) as e:
            # URLError is an OSError; ValueError covers URLs without a scheme
            msg = f"request to {url} failed: {e}"
            raise TransportError(msg) from e

        logger.debug(f"GET {url} -> {result.status_code}")
        return result

    def get_json(self, endpoint: str) -> Any:
        """GET `endpoint` and return its decoded JSON body.

        Raises APIRequestError for any status other than 200.
        """
        response = self.make_get_request(endpoint)
        body = response.json()

        if response.status_code != 200:
            try:
                api_error_response = APIErrorResponse.from_dict(body)
            except ValueError as e:
                msg = f"error decoding response body from {response.url}: {e}"
                raise TransportError(msg) from e
            raise APIRequestError(api_error_response, response.status_code)

        return body

    def get_model(self, endpoint: str, model: type[T]) -> T:
        """GET `endpoint` and decode the body with `model.from_dict`."""
        body = self.get_json(endpoint)
        try:
            return model.from_dict(body)
        except ValueError as e:
            msg = f"error decoding response body from {self.build_url(endpoint)}: {e}"
            raise TransportError(msg) from e

    @staticmethod
    def quote_user_id(user_id: str) -> str:
        return urllib.parse.quote(user_id, safe="")
