"""Public client surface for the Pterodactyl panel."""

from __future__ import annotations

from typing import Protocol

import httpx
import structlog

from pteroclient.api.client import PanelHTTPClient
from pteroclient.api.endpoints.power import PowerAPI
from pteroclient.api.endpoints.servers import ServersAPI
from pteroclient.api.exceptions import POWER_OK, PanelAPIError
from pteroclient.api.models import Server
from pteroclient.config import ClientConfig, load_config


class PanelServersClient(Protocol):
    """What consumers need from a panel; implemented by PterodactylClient."""

    def list_servers(self) -> dict[str, Server]: ...

    def server_details(self, identifier: str) -> Server: ...

    def get_power_state(self, identifier: str) -> str: ...

    def change_power_state(self, identifier: str, signal: str) -> int: ...


class PterodactylClient:
    """Pterodactyl client API bound to one token and panel URL.

    Every operation is a single blocking round trip. Failures raise a
    PanelAPIError subclass; no partial result is ever returned.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        logger: structlog.typing.FilteringBoundLogger | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._log = logger if logger is not None else structlog.get_logger(__name__)
        self._http = PanelHTTPClient(config, logger=self._log, transport=transport)
        self.servers = ServersAPI(self._http)
        self.power = PowerAPI(self._http)

    @classmethod
    def from_config(
        cls, *, logger: structlog.typing.FilteringBoundLogger | None = None
    ) -> PterodactylClient:
        """Build a client from the config file, .env and environment."""
        return cls(load_config().client_config(), logger=logger)

    @property
    def config(self) -> ClientConfig:
        return self._http.config

    def list_servers(self) -> dict[str, Server]:
        servers = self.servers.list()
        self._log.info("servers_listed", count=len(servers), identifiers=sorted(servers))
        return servers

    def server_details(self, identifier: str) -> Server:
        server = self.servers.get(identifier)
        self._log.info("server_details_fetched", identifier=identifier)
        return server

    def get_power_state(self, identifier: str) -> str:
        state = self.power.get_state(identifier)
        self._log.info("power_state_fetched", identifier=identifier, state=state)
        return state

    def change_power_state(self, identifier: str, signal: str) -> int:
        """Send a power signal; returns POWER_OK (0).

        On failure the raised error has ``result == POWER_FAILED`` (-1).
        """
        try:
            self.power.send_signal(identifier, signal)
        except PanelAPIError as e:
            self._log.error(
                "power_change_failed",
                identifier=identifier,
                signal=str(signal),
                error=str(e),
            )
            raise
        self._log.info(
            "power_changed",
            identifier=identifier,
            signal=str(signal),
        )
        return POWER_OK

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> PterodactylClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
