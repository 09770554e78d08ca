"""
Client for the Vagon app stream management API.

This module signs every request with the HMAC-SHA256 scheme expected by
api.vagon.io and maps each API operation to a method on VagonStreamsClient.
"""

import json
import logging
from concurrent import futures
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .config import Configuration
from .constants import (
    API_BASE_URL,
    API_PREFIX,
    CONTENT_TYPE_JSON,
    DEFAULT_LIST_PER_PAGE,
    DEFAULT_PAGE,
    DEFAULT_STATS_PER_PAGE,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE
)
from .exceptions import (
    ConfigurationError,
    HTTPError,
    RequestTimeoutError,
    TransportError
)
from .models import (
    ApplicationConfigurationSet,
    ApplicationListResponse,
    CoreApiResponse,
    MachineAssignResponse,
    MachineGetResponse,
    MachinesListResponse,
    MachineStatsQuery,
    MachineStatsResponse,
    Payload,
    Region,
    RequestMethod,
    StreamConfig,
    StreamConfigResponse,
    StreamCreatePayload,
    StreamCreateResponse,
    StreamListResponse,
    StreamMachineStatusChangeResponse,
    StreamStatusChangeResponse,
    UserCreateApiResponse,
    to_payload,
    to_query_params
)
from .signer import RequestSigner

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Quote an identifier for use as a single path segment."""
    return quote(str(value), safe='')


class VagonStreamsClient:
    """
    Client for the Vagon app stream management API.

    Each call builds, signs and sends exactly one request and keeps its
    state local. The underlying requests.Session is not documented as
    thread-safe, so concurrent callers should use one client per thread;
    sharing an instance across threads is at the caller's risk.
    """

    def __init__(self, config: Configuration,
                 session: Optional[requests.Session] = None,
                 signer: Optional[RequestSigner] = None):
        """
        Initialize the client.

        Args:
            config: API credentials and request timeout
            session: HTTP session to send requests through
            signer: Request signer (built from config when omitted), must
                sign with the configured key/secret pair

        Raises:
            ConfigurationError: If credentials are missing or the signer
                was built for other credentials
        """
        if config is None:
            raise ConfigurationError("API key and secret are required")
        config.validate()

        if signer is not None and not signer.uses_credentials(config.api_key, config.api_secret):
            raise ConfigurationError("signer credentials do not match configuration")

        self.config = config
        self.signer = signer or RequestSigner(config.api_key, config.api_secret)

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_env(cls, **kwargs) -> "VagonStreamsClient":
        """Create a client from VAGON_API_KEY / VAGON_API_SECRET."""
        return cls(Configuration.from_env(), **kwargs)

    def _serialize_body(self, data: Optional[Payload]) -> str:
        if data is None:
            return ''
        return json.dumps(to_payload(data), separators=(',', ':'), ensure_ascii=False)

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        """
        Send through the session, bounded by request_timeout as a whole.

        requests only bounds the connect and each socket read, so a server
        trickling bytes would never time out. With a timeout configured the
        request runs in a worker and the caller stops waiting at the
        deadline; the abandoned worker ends with the transport's own timeout
        or when the server finishes.
        """
        timeout = self.config.request_timeout
        if timeout is None:
            return self.session.request(method, url, timeout=None, **kwargs)

        executor = futures.ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self.session.request, method, url, timeout=timeout, **kwargs)
        finally:
            executor.shutdown(wait=False)
        return future.result(timeout=timeout)

    def _request(self, method: RequestMethod, path: str,
                 data: Optional[Payload] = None) -> Any:
        """
        Send a signed request and return the parsed JSON response.

        Args:
            method: HTTP method
            path: URL path, sent and signed without query string
            data: Query parameters for GET, JSON body otherwise

        Returns:
            Parsed JSON response

        Raises:
            HTTPError: If the API answers with a non-2xx status
            RequestTimeoutError: If the configured timeout elapsed
            TransportError: If no response was received
        """
        url = f"{API_BASE_URL}{path}"
        params = None
        body = ''

        if method is RequestMethod.GET:
            params = to_query_params(data) or None
        else:
            body = self._serialize_body(data)

        signed = self.signer.sign(method.value, path, body)

        headers = {HEADER_AUTHORIZATION: signed.authorization}
        if method is not RequestMethod.GET and data is not None:
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

        logger.debug("Vagon API request: %s %s", method.value, path)

        try:
            response = self._send(
                method.value,
                url,
                params=params,
                data=body.encode('utf-8') if body else None,
                headers=headers
            )
        except (requests.Timeout, futures.TimeoutError) as e:
            raise RequestTimeoutError(
                f"{method.value} {path} timed out after {self.config.request_timeout}s"
            ) from e
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("Vagon API response: %s %s -> %s", method.value, path, response.status_code)

        if not 200 <= response.status_code < 300:
            raise HTTPError(response.status_code, response.text)

        if not response.content:
            return {}
        return response.json()

    # Applications

    def application_list(self, page: int = DEFAULT_PAGE,
                         per_page: int = DEFAULT_LIST_PER_PAGE) -> ApplicationListResponse:
        """List the organization's applications."""
        return self._request(RequestMethod.GET, f"{API_PREFIX}/applications", {
            'page': page,
            'per_page': per_page
        })

    def application_config_set(self, application_id: str,
                               config: ApplicationConfigurationSet) -> CoreApiResponse:
        """Update application name, key mapping and machine type."""
        return self._request(
            RequestMethod.PUT,
            f"{API_PREFIX}/applications/{_segment(application_id)}",
            config
        )

    # Streams

    def stream_list(self, application_id: str, page: int = DEFAULT_PAGE,
                    per_page: int = DEFAULT_LIST_PER_PAGE) -> StreamListResponse:
        """List the streams of an application."""
        return self._request(RequestMethod.GET, f"{API_PREFIX}/streams", {
            'application_id': application_id,
            'page': page,
            'per_page': per_page
        })

    def stream_create(self, application_id: str,
                      config: StreamCreatePayload) -> StreamCreateResponse:
        """
        Create a stream for an application.

        Args:
            application_id: Application to stream
            config: Capacity type and per-region capacities

        Returns:
            The created stream
        """
        return self._request(RequestMethod.POST, f"{API_PREFIX}/streams", {
            'application_id': application_id,
            'config': config
        })

    def stream_pause(self, stream_id: str) -> StreamStatusChangeResponse:
        return self._request(RequestMethod.PUT, f"{API_PREFIX}/streams/{_segment(stream_id)}/pause")

    def stream_activate(self, stream_id: str) -> StreamStatusChangeResponse:
        return self._request(RequestMethod.PUT, f"{API_PREFIX}/streams/{_segment(stream_id)}/activate")

    def stream_delete(self, stream_id: str) -> StreamStatusChangeResponse:
        return self._request(RequestMethod.DELETE, f"{API_PREFIX}/streams/{_segment(stream_id)}")

    def stream_config_get(self, stream_id: str) -> StreamConfigResponse:
        """Fetch the stream settings together with its application."""
        return self._request(RequestMethod.GET, f"{API_PREFIX}/streams/{_segment(stream_id)}/config")

    def stream_config_set(self, stream_id: str, config: StreamConfig) -> CoreApiResponse:
        """Update stream settings. Fields left as None are not sent."""
        return self._request(
            RequestMethod.PUT,
            f"{API_PREFIX}/streams/{_segment(stream_id)}/config",
            config
        )

    # Machines

    def machine_list(self, stream_id: str) -> MachinesListResponse:
        return self._request(RequestMethod.GET, f"{API_PREFIX}/streams/{_segment(stream_id)}/machines")

    def machine_start(self, stream_id: str) -> StreamMachineStatusChangeResponse:
        return self._request(RequestMethod.POST, f"{API_PREFIX}/streams/{_segment(stream_id)}/start-machine")

    def machine_stop(self, stream_id: str, machine_id: str) -> CoreApiResponse:
        return self._request(
            RequestMethod.POST,
            f"{API_PREFIX}/streams/{_segment(stream_id)}/stop-machine",
            {'machine_id': machine_id}
        )

    def machine_assign(self, stream_id: str, region: Region,
                       user_id: Optional[str] = None) -> MachineAssignResponse:
        """
        Assign a machine of the stream to a visitor.

        Args:
            stream_id: Stream to take the machine from
            region: Region the machine should run in
            user_id: User to assign the machine to (omitted when None)

        Returns:
            Connection link and the assigned machine
        """
        return self._request(
            RequestMethod.POST,
            f"{API_PREFIX}/streams/{_segment(stream_id)}/assign-machine",
            {'region': region, 'user_id': user_id}
        )

    def stream_machine_get(self, machine_id: str) -> MachineGetResponse:
        return self._request(RequestMethod.GET, f"{API_PREFIX}/machines/{_segment(machine_id)}")

    def stream_machine_stats(self, page: int = DEFAULT_PAGE,
                             per_page: int = DEFAULT_STATS_PER_PAGE,
                             query: Optional[MachineStatsQuery] = None) -> MachineStatsResponse:
        """Machine usage statistics, optionally filtered by date, application or stream."""
        return self._request(
            RequestMethod.GET,
            f"{API_PREFIX}/machines",
            self._stats_params(page, per_page, query)
        )

    # Users

    def user_create(self, email: str) -> UserCreateApiResponse:
        return self._request(RequestMethod.POST, f"{API_PREFIX}/users", {'email': email})

    def user_remove(self, user_id: str) -> CoreApiResponse:
        return self._request(RequestMethod.DELETE, f"{API_PREFIX}/users/{_segment(user_id)}")

    # Sessions

    def visitor_session_stats(self, page: int = DEFAULT_PAGE,
                              per_page: int = DEFAULT_STATS_PER_PAGE,
                              query: Optional[MachineStatsQuery] = None) -> Dict[str, Any]:
        """Visitor session statistics, filtered like stream_machine_stats()."""
        return self._request(
            RequestMethod.GET,
            f"{API_PREFIX}/sessions",
            self._stats_params(page, per_page, query)
        )

    @staticmethod
    def _stats_params(page: int, per_page: int,
                      query: Optional[MachineStatsQuery]) -> Dict[str, Any]:
        params = {'page': page, 'per_page': per_page}
        if query is not None:
            params.update(to_payload(query))
        return params

    def close(self):
        """Close HTTP session if the client created it."""
        if self.session and self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
