"""Server API endpoints."""

from __future__ import annotations

from pteroclient.api.client import PanelHTTPClient
from pteroclient.api.models import DataItem, Envelope, Server, parse_model


class ServersAPI:
    def __init__(self, client: PanelHTTPClient) -> None:
        self._client = client

    def list(self) -> dict[str, Server]:
        """Servers visible to the token, keyed by identifier.

        A repeated identifier keeps the last entry in payload order.
        """
        envelope = parse_model(Envelope, self._client.get_json("/api/client"))
        servers: dict[str, Server] = {}
        for item in envelope.data:
            servers[item.attributes.identifier] = Server.from_attributes(item.attributes)
        return servers

    def get(self, identifier: str) -> Server:
        data = self._client.get_json(f"/api/client/servers/{identifier}")
        item = parse_model(DataItem, data)
        return Server.from_attributes(item.attributes)
