"""
Custom exceptions for the Vagon streams client library.
"""


class VagonStreamsError(Exception):
    """Base exception for Vagon streams client errors."""
    pass


class ConfigurationError(VagonStreamsError):
    """Raised when client configuration is invalid."""
    pass


class HTTPError(VagonStreamsError):
    """
    Raised when the API answers with a non-success status.

    The body is kept as raw text since error responses are not always JSON.
    """

    def __init__(self, status: int, body: str):
        super().__init__(f"HTTP Error {status}")
        self.status = status
        self.body = body


class TransportError(VagonStreamsError):
    """Raised when a request never received a response."""
    pass


class RequestTimeoutError(TransportError):
    """Raised when the configured request timeout elapsed."""
    pass
