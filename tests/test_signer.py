"""
Unit tests for request signing.
"""

import hashlib
import hmac
import re

import pytest

from vagon_streams.signer import (
    RequestSigner,
    authorization_header,
    canonical_payload,
    current_timestamp,
    generate_nonce,
    sign_payload
)


API_KEY = "test-key"
API_SECRET = "test-secret"
TIMESTAMP = "1700000000000"
NONCE = "0123456789abcdef0123456789abcdef"
PATH = "/app-stream-management/v2/applications"


def expected_signature(payload: str) -> str:
    return hmac.new(
        API_SECRET.encode('utf-8'),
        payload.encode('utf-8'),
        hashlib.sha256
    ).hexdigest()


class TestSigningPrimitives:
    """Test the signing building blocks."""

    def test_generate_nonce_format(self):
        """Nonce is 16 random bytes, hex encoded."""
        nonce = generate_nonce()

        assert len(nonce) == 32
        int(nonce, 16)  # Should not raise

    def test_generate_nonce_unique(self):
        assert generate_nonce() != generate_nonce()

    def test_current_timestamp_is_milliseconds(self):
        timestamp = current_timestamp()

        assert timestamp.isdigit()
        assert len(timestamp) == 13

    def test_canonical_payload_order(self):
        """Payload concatenates key, method, path, timestamp, nonce and body."""
        payload = canonical_payload(API_KEY, "post", PATH, TIMESTAMP, NONCE, '{"a":1}')

        assert payload == f"{API_KEY}POST{PATH}{TIMESTAMP}{NONCE}" + '{"a":1}'

    def test_canonical_payload_empty_body(self):
        payload = canonical_payload(API_KEY, "GET", PATH, TIMESTAMP, NONCE)

        assert payload.endswith(NONCE)

    def test_sign_payload(self):
        payload = "some payload"
        signature = sign_payload(API_SECRET, payload)

        assert len(signature) == 64
        assert signature == expected_signature(payload)

    def test_authorization_header_format(self):
        header = authorization_header(API_KEY, "sig", NONCE, TIMESTAMP)

        assert header == f"HMAC {API_KEY}:sig:{NONCE}:{TIMESTAMP}"


class TestRequestSigner:
    """Test RequestSigner."""

    @pytest.fixture
    def signer(self):
        return RequestSigner(API_KEY, API_SECRET)

    def test_signature_is_deterministic(self, signer):
        """Fixed inputs always produce the same, independently verifiable signature."""
        first = signer.signature("GET", PATH, TIMESTAMP, NONCE)
        second = signer.signature("GET", PATH, TIMESTAMP, NONCE)

        payload = f"{API_KEY}GET{PATH}{TIMESTAMP}{NONCE}"
        assert first == second == expected_signature(payload)

    def test_sign_with_fixed_inputs(self, signer):
        body = '{"email":"user@example.com"}'
        signed = signer.sign("POST", PATH, body, timestamp=TIMESTAMP, nonce=NONCE)

        payload = f"{API_KEY}POST{PATH}{TIMESTAMP}{NONCE}{body}"
        assert signed.signature == expected_signature(payload)
        assert signed.nonce == NONCE
        assert signed.timestamp == TIMESTAMP
        assert signed.authorization == (
            f"HMAC {API_KEY}:{signed.signature}:{NONCE}:{TIMESTAMP}"
        )

    def test_sign_uses_fresh_nonce(self, signer):
        """Two signings of the same request never share a signature."""
        first = signer.sign("GET", PATH)
        second = signer.sign("GET", PATH)

        assert first.nonce != second.nonce
        assert first.signature != second.signature

    def test_sign_different_timestamps(self, signer):
        first = signer.sign("GET", PATH, timestamp="1", nonce=NONCE)
        second = signer.sign("GET", PATH, timestamp="2", nonce=NONCE)

        assert first.signature != second.signature

    def test_sign_injected_sources(self):
        signer = RequestSigner(
            API_KEY, API_SECRET,
            nonce_factory=lambda: NONCE,
            clock=lambda: TIMESTAMP
        )
        signed = signer.sign("DELETE", PATH)

        assert signed.nonce == NONCE
        assert signed.timestamp == TIMESTAMP
        assert re.fullmatch(r"HMAC test-key:[0-9a-f]{64}:[0-9a-f]{32}:\d+", signed.authorization)

    def test_method_is_uppercased(self, signer):
        lower = signer.signature("put", PATH, TIMESTAMP, NONCE)
        upper = signer.signature("PUT", PATH, TIMESTAMP, NONCE)

        assert lower == upper
