"""Configuration management for pteroclient.

Reads and writes TOML config at ~/.config/pteroclient/config.toml. A .env
file in the current directory and the PTERO_API_KEY / BASE_URL environment
variables override the file, in that order.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from pteroclient.utils.env_parser import parse_env

CONFIG_DIR = Path.home() / ".config" / "pteroclient"
CONFIG_PATH = CONFIG_DIR / "config.toml"

API_KEY_VAR = "PTERO_API_KEY"
BASE_URL_VAR = "BASE_URL"

DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientConfig:
    """Token and panel address a client is bound to for its whole life."""

    auth_token: str
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def __repr__(self) -> str:
        return f"ClientConfig(auth_token='***', base_url={self.base_url!r})"


@dataclass
class PanelConfig:
    api_key: str = ""
    base_url: str = ""
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class PteroConfig:
    panel: PanelConfig = field(default_factory=PanelConfig)

    def client_config(self) -> ClientConfig:
        return ClientConfig(
            auth_token=self.panel.api_key,
            base_url=self.panel.base_url,
            timeout=self.panel.timeout,
        )


def _load_dotenv() -> dict[str, str]:
    path = Path.cwd() / ".env"
    if not path.exists():
        return {}
    try:
        return parse_env(path.read_text())
    except OSError:
        return {}


def load_config() -> PteroConfig:
    """Load config from TOML, then apply .env and environment overrides."""
    data: dict = {}
    if CONFIG_PATH.exists():
        try:
            with open(CONFIG_PATH, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            data = {}

    panel_data = data.get("panel", {})
    panel = PanelConfig(
        api_key=panel_data.get("api_key", ""),
        base_url=panel_data.get("base_url", ""),
        timeout=float(panel_data.get("timeout", DEFAULT_TIMEOUT)),
    )

    for source in (_load_dotenv(), os.environ):
        if source.get(API_KEY_VAR):
            panel.api_key = source[API_KEY_VAR]
        if source.get(BASE_URL_VAR):
            panel.base_url = source[BASE_URL_VAR]

    return PteroConfig(panel=panel)


def save_config(config: PteroConfig) -> None:
    """Write config to TOML file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    os.chmod(CONFIG_DIR, 0o700)

    data = {
        "panel": {
            "api_key": config.panel.api_key,
            "base_url": config.panel.base_url,
            "timeout": config.panel.timeout,
        },
    }

    with open(CONFIG_PATH, "wb") as f:
        tomli_w.dump(data, f)
    os.chmod(CONFIG_PATH, 0o600)


def has_api_key() -> bool:
    """Quick check if an API key is configured."""
    config = load_config()
    return bool(config.panel.api_key)
