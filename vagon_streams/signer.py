"""
HMAC-SHA256 request signing for the Vagon API.

The server rebuilds the canonical payload from the request it receives, so
the concatenation order here must not change:

    api_key + METHOD + path + timestamp + nonce + body

The query string is never part of the signed path and the body is empty for
GET requests.
"""

import hashlib
import hmac
import secrets
import time
from typing import Callable, NamedTuple, Optional

from .constants import AUTH_DELIMITER, AUTH_SCHEME, NONCE_BYTES


def generate_nonce() -> str:
    """Return a fresh hex-encoded nonce from a secure random source."""
    return secrets.token_hex(NONCE_BYTES)


def current_timestamp() -> str:
    """Return the wall-clock time in milliseconds since epoch."""
    return str(int(time.time() * 1000))


def canonical_payload(api_key: str, method: str, path: str,
                      timestamp: str, nonce: str, body: str = '') -> str:
    """Build the exact string covered by the signature."""
    return f"{api_key}{method.upper()}{path}{timestamp}{nonce}{body}"


def sign_payload(secret: str, payload: str) -> str:
    """
    Compute a hex-encoded HMAC-SHA256 of payload.

    Args:
        secret: Shared API secret used as the HMAC key
        payload: Canonical payload string

    Returns:
        Hex-encoded signature
    """
    mac = hmac.new(
        secret.encode('utf-8'),
        payload.encode('utf-8'),
        hashlib.sha256
    )
    return mac.hexdigest()


def authorization_header(api_key: str, signature: str, nonce: str, timestamp: str) -> str:
    fields = AUTH_DELIMITER.join((api_key, signature, nonce, timestamp))
    return f"{AUTH_SCHEME} {fields}"


class SignedRequest(NamedTuple):
    """Per-call signing result. Never reused across requests."""
    signature: str
    nonce: str
    timestamp: str
    authorization: str


class RequestSigner:
    """
    Signs requests with the API key/secret pair.

    The nonce and clock sources can be replaced to make signatures
    reproducible in tests.
    """

    def __init__(self, api_key: str, api_secret: str,
                 nonce_factory: Callable[[], str] = generate_nonce,
                 clock: Callable[[], str] = current_timestamp):
        self.api_key = api_key
        self._api_secret = api_secret
        self._nonce_factory = nonce_factory
        self._clock = clock

    def uses_credentials(self, api_key: str, api_secret: str) -> bool:
        """Whether this signer signs with the given key/secret pair."""
        return (self.api_key == api_key
                and hmac.compare_digest(self._api_secret.encode('utf-8'), api_secret.encode('utf-8')))

    def signature(self, method: str, path: str, timestamp: str,
                  nonce: str, body: str = '') -> str:
        """Deterministic signature for fixed inputs."""
        payload = canonical_payload(self.api_key, method, path, timestamp, nonce, body)
        return sign_payload(self._api_secret, payload)

    def sign(self, method: str, path: str, body: str = '',
             timestamp: Optional[str] = None, nonce: Optional[str] = None) -> SignedRequest:
        """
        Sign a request with a fresh nonce and the current time.

        Args:
            method: HTTP method
            path: URL path without query string
            body: Serialized request body (empty for GET)
            timestamp: Override for the millisecond timestamp
            nonce: Override for the hex nonce

        Returns:
            SignedRequest carrying the Authorization header value
        """
        if timestamp is None:
            timestamp = self._clock()
        if nonce is None:
            nonce = self._nonce_factory()

        signature = self.signature(method, path, timestamp, nonce, body)
        return SignedRequest(
            signature=signature,
            nonce=nonce,
            timestamp=timestamp,
            authorization=authorization_header(self.api_key, signature, nonce, timestamp)
        )
