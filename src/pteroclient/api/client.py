"""HTTP client for the Pterodactyl panel client API."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from pteroclient.api.exceptions import (
    PanelDecodeError,
    PanelTransportError,
    classify_status,
)
from pteroclient.api.models import decode_object
from pteroclient.config import ClientConfig


class PanelHTTPClient:
    """Blocking API client for one Pterodactyl panel.

    Uses a single long-lived httpx.Client to reuse TCP/TLS connections.
    The client is lazily initialized on first request. Redirects are never
    followed: a 3xx is reported as an error like any other non-2xx.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        logger: structlog.typing.FilteringBoundLogger | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        self._log = logger if logger is not None else structlog.get_logger(__name__)
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self._config.base_url,
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self._config.auth_token}",
                },
                timeout=httpx.Timeout(
                    self._config.timeout, connect=self._config.connect_timeout
                ),
                follow_redirects=False,
                transport=self._transport,
            )
        return self._client

    def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> bytes:
        """Send one request and return the full body of a 2xx response."""
        client = self._get_client()
        log = self._log.bind(method=method, path=path)
        log.debug("request_sent")
        try:
            with client.stream(method, path, json=json) as response:
                self._handle_errors(response, log)
                body = response.read()
        except httpx.DecodingError as e:
            log.error("request_failed", error=str(e), error_type=type(e).__name__)
            raise PanelDecodeError(f"{method} {path}: undecodable body: {e}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            log.error("request_failed", error=str(e), error_type=type(e).__name__)
            raise PanelTransportError(f"{method} {path} failed: {e}") from e
        log.info("request_succeeded", status_code=response.status_code, size=len(body))
        return body

    def _handle_errors(self, response: httpx.Response, log: Any) -> None:
        error_cls = classify_status(response.status_code)
        if error_cls is None:
            return
        log.error(
            "request_rejected",
            status_code=response.status_code,
            error_type=error_cls.__name__,
        )
        raise error_cls(response.status_code, str(response.url))

    def get(self, path: str) -> bytes:
        return self.request("GET", path)

    def post(self, path: str, *, json: dict[str, Any] | None = None) -> bytes:
        return self.request("POST", path, json=json)

    def get_json(self, path: str) -> dict[str, Any]:
        """GET request decoded as a JSON object; an empty body gives ``{}``."""
        body = self.get(path)
        if not body.strip():
            return {}
        return decode_object(body)

    def close(self) -> None:
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> PanelHTTPClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
