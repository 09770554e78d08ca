"""
Client configuration.

A Configuration is created once and shared, read-only, by every call the
client makes.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    DEFAULT_CONFIG,
    ENV_API_KEY,
    ENV_API_SECRET,
    ENV_REQUEST_TIMEOUT
)
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class Configuration:
    """
    Credentials and transport options for VagonStreamsClient.

    Attributes:
        api_key: API key from the Vagon organization settings
        api_secret: API secret paired with the key
        request_timeout: Seconds before a call is aborted (None disables)
    """

    api_key: str
    api_secret: str
    request_timeout: Optional[float] = DEFAULT_CONFIG['request_timeout']

    def validate(self):
        """Validate configuration values."""
        if not self.api_key:
            raise ConfigurationError("api_key cannot be empty")

        if not self.api_secret:
            raise ConfigurationError("api_secret cannot be empty")

        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        """
        Build a configuration from environment variables.

        Reads VAGON_API_KEY, VAGON_API_SECRET and, optionally,
        VAGON_REQUEST_TIMEOUT (seconds).

        Raises:
            ConfigurationError: If a credential is missing or the timeout
                is not a number
        """
        if environ is None:
            environ = os.environ

        timeout = DEFAULT_CONFIG['request_timeout']
        raw_timeout = environ.get(ENV_REQUEST_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_REQUEST_TIMEOUT} must be a number, got {raw_timeout!r}"
                ) from None

        config = cls(
            api_key=environ.get(ENV_API_KEY, ""),
            api_secret=environ.get(ENV_API_SECRET, ""),
            request_timeout=timeout
        )
        config.validate()
        return config
