"""Tests for the configuration module."""

from __future__ import annotations

import dataclasses

import pytest
import tomli_w

from pteroclient.config import (
    ClientConfig,
    PanelConfig,
    PteroConfig,
    has_api_key,
    load_config,
    save_config,
)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Redirect config to a temp directory and isolate from env and .env."""
    config_dir = tmp_path / ".config" / "pteroclient"
    config_path = config_dir / "config.toml"
    monkeypatch.setattr("pteroclient.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("pteroclient.config.CONFIG_PATH", config_path)
    monkeypatch.delenv("PTERO_API_KEY", raising=False)
    monkeypatch.delenv("BASE_URL", raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return config_dir


@pytest.fixture
def config_path(config_dir):
    return config_dir / "config.toml"


def _write(config_dir, config_path, data):
    config_dir.mkdir(parents=True, exist_ok=True)
    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)


class TestClientConfig:
    def test_strips_trailing_slash(self):
        assert ClientConfig("t", "https://panel.test/").base_url == "https://panel.test"

    def test_is_immutable(self):
        config = ClientConfig("t", "https://panel.test")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.auth_token = "other"

    def test_repr_hides_token(self):
        assert "secret" not in repr(ClientConfig("secret", "https://panel.test"))

    def test_default_timeouts(self):
        config = ClientConfig("t", "https://panel.test")
        assert config.timeout == 30.0
        assert config.connect_timeout == 10.0


class TestLoadConfig:
    def test_returns_defaults_when_no_file(self, config_dir):
        config = load_config()
        assert config.panel.api_key == ""
        assert config.panel.base_url == ""
        assert config.panel.timeout == 30.0

    def test_loads_existing_config(self, config_dir, config_path):
        _write(config_dir, config_path, {
            "panel": {"api_key": "file-key", "base_url": "https://file.test", "timeout": 5},
        })
        config = load_config()
        assert config.panel.api_key == "file-key"
        assert config.panel.base_url == "https://file.test"
        assert config.panel.timeout == 5.0

    def test_returns_defaults_on_corrupt_file(self, config_dir, config_path):
        config_dir.mkdir(parents=True, exist_ok=True)
        config_path.write_text("this is not valid toml {{{")
        assert load_config().panel.api_key == ""

    def test_dotenv_overrides_file(self, config_dir, config_path):
        _write(config_dir, config_path, {"panel": {"api_key": "file-key"}})
        (config_dir.parent.parent / "work" / ".env").write_text(
            "PTERO_API_KEY=dotenv-key\nBASE_URL=https://dotenv.test\n"
        )
        config = load_config()
        assert config.panel.api_key == "dotenv-key"
        assert config.panel.base_url == "https://dotenv.test"

    def test_environment_overrides_dotenv(self, config_dir, monkeypatch):
        (config_dir.parent.parent / "work" / ".env").write_text("PTERO_API_KEY=dotenv-key\n")
        monkeypatch.setenv("PTERO_API_KEY", "env-key")
        assert load_config().panel.api_key == "env-key"

    def test_empty_environment_value_ignored(self, config_dir, config_path, monkeypatch):
        _write(config_dir, config_path, {"panel": {"base_url": "https://file.test"}})
        monkeypatch.setenv("BASE_URL", "")
        assert load_config().panel.base_url == "https://file.test"

    def test_client_config(self, config_dir, config_path):
        _write(config_dir, config_path, {
            "panel": {"api_key": "k", "base_url": "https://file.test/", "timeout": 12.5},
        })
        client_config = load_config().client_config()
        assert client_config == ClientConfig("k", "https://file.test", timeout=12.5)


class TestSaveConfig:
    def test_roundtrip(self, config_dir, config_path):
        original = PteroConfig(
            panel=PanelConfig(api_key="saved-key", base_url="https://saved.test", timeout=15.0)
        )
        save_config(original)
        assert config_path.exists()
        assert load_config() == original

    def test_file_permissions(self, config_dir, config_path):
        save_config(PteroConfig(panel=PanelConfig(api_key="k")))
        assert config_path.stat().st_mode & 0o777 == 0o600
        assert config_dir.stat().st_mode & 0o777 == 0o700


class TestHasApiKey:
    def test_no_key(self, config_dir):
        assert has_api_key() is False

    def test_with_key(self, config_dir, config_path):
        _write(config_dir, config_path, {"panel": {"api_key": "some-key"}})
        assert has_api_key() is True

    def test_key_from_environment(self, config_dir, monkeypatch):
        monkeypatch.setenv("PTERO_API_KEY", "env-key")
        assert has_api_key() is True
