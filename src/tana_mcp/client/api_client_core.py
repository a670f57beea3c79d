"""Tana API client - transport and response handling."""

import json
import sys
import threading
from datetime import datetime
from typing import Any

import httpx
from pydantic import ValidationError

from ..models import (
    AddToNodeResponse,
    APIConfiguration,
    AuthenticationError,
    DecodingError,
    EncodingError,
    NetworkError,
    Payload,
    ServerError,
    TanaNode,
)

SUCCESS_STATUSES = (200, 201)


def log_event(message: str, component: str = "CLIENT") -> None:
    """Log an event to stderr with timestamp and consistent formatting."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{timestamp}] [{component}] {message}", file=sys.stderr, flush=True)


class _ClientLogger:
    """Lightweight logger that delegates to log_event.

    stdout is the MCP stdio channel, so client events go to stderr through
    plain print. Debug lines are dropped unless ``debug`` is set.
    """

    def __init__(self, component: str = "CLIENT", debug: bool = False) -> None:
        self._component = component
        self._debug = debug

    def _msg(self, msg: object) -> str:
        try:
            return str(msg)
        except Exception:
            return repr(msg)

    def error(self, msg: object, *args: object, **kwargs: object) -> None:
        log_event(f"ERROR: {self._msg(msg)}", self._component)

    def debug(self, msg: object, *args: object, **kwargs: object) -> None:
        if self._debug:
            log_event(f"DEBUG: {self._msg(msg)}", self._component)


class TanaClientCore:
    """Core Tana API client - one POST per call against addToNodeV2."""

    def __init__(self, config: APIConfiguration, transport: httpx.BaseTransport | None = None):
        """Initialize the Tana API client."""
        self.config = config
        self.endpoint = config.endpoint
        self._transport = transport
        self._client: httpx.Client | None = None
        self._client_lock = threading.Lock()
        self._logger = _ClientLogger(debug=config.debug)

    @property
    def client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        with self._client_lock:
            if self._client is None:
                headers = {
                    "Authorization": f"Bearer {self.config.api_token.get_secret_value()}",
                    "Content-Type": "application/json",
                }
                self._client = httpx.Client(headers=headers, transport=self._transport)
            return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        with self._client_lock:
            if self._client:
                self._client.close()
                self._client = None

    def __enter__(self) -> "TanaClientCore":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def _encode(self, payload: Payload) -> bytes:
        try:
            return payload.to_json().encode("utf-8")
        except (ValueError, TypeError) as err:
            raise EncodingError(f"Could not encode {type(payload).__name__}: {err}") from err

    def _handle_response(self, response: httpx.Response) -> list[TanaNode]:
        """Turn a response into created nodes, or raise with the raw body."""
        if response.status_code not in SUCCESS_STATUSES:
            body = response.text
            self._logger.error(f"addToNode returned {response.status_code}: {body}")
            if response.status_code == 401:
                raise AuthenticationError(body, status_code=response.status_code)
            raise ServerError(body, status_code=response.status_code)

        try:
            data = json.loads(response.content)
        except (json.JSONDecodeError, UnicodeDecodeError) as err:
            raise DecodingError(f"Invalid response format from API: {err}") from err

        try:
            return AddToNodeResponse.model_validate(data).children
        except ValidationError as err:
            raise DecodingError(f"Unexpected response shape from API: {err}") from err

    def send(self, payload: Payload) -> list[TanaNode]:
        """POST ``payload`` and return the ``children`` the server reports.

        Raises:
            EncodingError: payload could not be serialized.
            NetworkError: the request failed before a response arrived.
            ServerError: status outside 200/201; message is the response body.
            DecodingError: success status with an unparseable body.
        """
        body = self._encode(payload)
        self._logger.debug(f"POST {type(payload).__name__} -> {payload.target_node_id}")

        try:
            response = self.client.post(self.endpoint, content=body)
        except httpx.HTTPError as err:
            self._logger.error(f"Request to {self.endpoint} failed: {err}")
            raise NetworkError(f"Request to {self.endpoint} failed: {err}") from err

        children = self._handle_response(response)
        self._logger.debug(f"addToNode returned {len(children)} node(s)")
        return children
