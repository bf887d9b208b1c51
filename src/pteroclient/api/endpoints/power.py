"""Power state API endpoints."""

from __future__ import annotations

from pteroclient.api.client import PanelHTTPClient
from pteroclient.api.models import DataItem, parse_model


class PowerAPI:
    def __init__(self, client: PanelHTTPClient) -> None:
        self._client = client

    def get_state(self, identifier: str) -> str:
        data = self._client.get_json(f"/api/client/servers/{identifier}/resources")
        return parse_model(DataItem, data).attributes.current_state

    def send_signal(self, identifier: str, signal: str) -> None:
        """Ask the panel to start/stop/restart/kill a server.

        Any 2xx counts as accepted; the body (usually empty on 204) is not
        interpreted.
        """
        self._client.post(
            f"/api/client/servers/{identifier}/power",
            json={"signal": str(signal)},
        )
