"""
Unit tests for client configuration.
"""

import dataclasses

import pytest

from vagon_streams import Configuration, ConfigurationError, VagonStreamsClient


class TestConfiguration:
    """Test Configuration validation and loading."""

    def test_defaults(self):
        config = Configuration("key", "secret")

        assert config.api_key == "key"
        assert config.api_secret == "secret"
        assert config.request_timeout is None

    def test_immutable(self):
        config = Configuration("key", "secret")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "other"

    @pytest.mark.parametrize("api_key, api_secret", [
        ("", "secret"),
        (None, "secret"),
        ("key", ""),
        ("key", None),
        ("", ""),
    ])
    def test_missing_credentials(self, api_key, api_secret):
        """Missing credentials fail regardless of other fields."""
        with pytest.raises(ConfigurationError):
            Configuration(api_key, api_secret).validate()

        with pytest.raises(ConfigurationError):
            VagonStreamsClient(Configuration(api_key, api_secret, request_timeout=5))

    def test_client_without_config(self):
        with pytest.raises(ConfigurationError):
            VagonStreamsClient(None)

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ConfigurationError):
            Configuration("key", "secret", request_timeout=timeout).validate()

    def test_from_env(self):
        config = Configuration.from_env({
            "VAGON_API_KEY": "env-key",
            "VAGON_API_SECRET": "env-secret",
            "VAGON_REQUEST_TIMEOUT": "2.5"
        })

        assert config == Configuration("env-key", "env-secret", 2.5)

    def test_from_env_without_timeout(self):
        config = Configuration.from_env({
            "VAGON_API_KEY": "env-key",
            "VAGON_API_SECRET": "env-secret"
        })

        assert config.request_timeout is None

    def test_from_env_missing_secret(self):
        with pytest.raises(ConfigurationError):
            Configuration.from_env({"VAGON_API_KEY": "env-key"})

    def test_from_env_invalid_timeout(self):
        with pytest.raises(ConfigurationError):
            Configuration.from_env({
                "VAGON_API_KEY": "env-key",
                "VAGON_API_SECRET": "env-secret",
                "VAGON_REQUEST_TIMEOUT": "soon"
            })

    def test_client_from_env(self, monkeypatch):
        monkeypatch.setenv("VAGON_API_KEY", "env-key")
        monkeypatch.setenv("VAGON_API_SECRET", "env-secret")
        monkeypatch.delenv("VAGON_REQUEST_TIMEOUT", raising=False)

        with VagonStreamsClient.from_env() as client:
            assert client.config.api_key == "env-key"
