"""
Vagon Streams Client Library

A Python client for the Vagon app stream management API. Requests are
signed with the HMAC-SHA256 scheme the API expects.

Example usage:
    from vagon_streams import Configuration, VagonStreamsClient

    client = VagonStreamsClient(Configuration("your-api-key", "your-api-secret"))
    applications = client.application_list()
"""

from .client import VagonStreamsClient
from .config import Configuration
from .exceptions import (
    VagonStreamsError,
    ConfigurationError,
    HTTPError,
    TransportError,
    RequestTimeoutError
)
from .constants import (
    API_BASE_URL,
    API_PREFIX,
    AUTH_SCHEME,
    DEFAULT_CONFIG
)
from .models import (
    ApplicationConfigurationSet,
    Capacity,
    CapacityType,
    DockPosition,
    DurationAutoTurnOff,
    DurationIdle,
    DurationMaximumSession,
    GameEngine,
    KeyMappingSelection,
    MachineStatsQuery,
    Microphone,
    Region,
    RequestMethod,
    Resolution,
    Sound,
    StreamConfig,
    StreamCreatePayload
)
from .signer import RequestSigner, SignedRequest

__version__ = "1.0.0"
__all__ = [
    "VagonStreamsClient",
    "Configuration",
    "RequestSigner",
    "SignedRequest",
    "VagonStreamsError",
    "ConfigurationError",
    "HTTPError",
    "TransportError",
    "RequestTimeoutError",
    "API_BASE_URL",
    "API_PREFIX",
    "AUTH_SCHEME",
    "DEFAULT_CONFIG",
    "ApplicationConfigurationSet",
    "Capacity",
    "CapacityType",
    "DockPosition",
    "DurationAutoTurnOff",
    "DurationIdle",
    "DurationMaximumSession",
    "GameEngine",
    "KeyMappingSelection",
    "MachineStatsQuery",
    "Microphone",
    "Region",
    "RequestMethod",
    "Resolution",
    "Sound",
    "StreamConfig",
    "StreamCreatePayload"
]
