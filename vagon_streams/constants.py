"""
Constants for the Vagon streams client library.
Values are fixed by the Vagon app stream management API.
"""

# Endpoint roots
API_BASE_URL = "https://api.vagon.io"
API_PREFIX = "/app-stream-management/v2"

# HTTP Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"

# Authorization header scheme: HMAC <key>:<signature>:<nonce>:<timestamp>
AUTH_SCHEME = "HMAC"
AUTH_DELIMITER = ":"

# Default configuration values
DEFAULT_CONFIG = {
    'request_timeout': None,  # seconds, None waits indefinitely
}

# Pagination defaults per endpoint family
DEFAULT_PAGE = 1
DEFAULT_LIST_PER_PAGE = 100   # applications, streams
DEFAULT_STATS_PER_PAGE = 20   # machine and session statistics

# Other constants
NONCE_BYTES = 16

# Environment variables read by Configuration.from_env()
ENV_API_KEY = "VAGON_API_KEY"
ENV_API_SECRET = "VAGON_API_SECRET"
ENV_REQUEST_TIMEOUT = "VAGON_REQUEST_TIMEOUT"
