"""Low-level HTTP client shared by every provider.

Handles base URL resolution, static token authentication, body encoding,
status checking and typed decoding.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from apiclients import __version__

from .exceptions import HttpStatusError, TransportError
from .marshal import decode_body, encode_body
from .pagination import LinkHeaderPagination, Page, PaginationStrategy

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"apiclients/{__version__}"


class ApiClient:
    """HTTP client for a token-authenticated JSON REST API.

    Features:
    - One base URL and credential reused for every call
    - Centralized error handling (transport, status, decoding)
    - Pluggable pagination strategy per integration

    No retries are attempted and, unless ``timeout`` is given, requests
    uses its own default (wait indefinitely).

    Usage:
        client = ApiClient("https://example.okta.com", "token")
        factor = client.get("/api/v1/users/u1/factors/f1", response_type=UserFactor)
    """

    provider: Optional[str] = None
    auth_scheme: str = "Bearer"
    pagination: PaginationStrategy = LinkHeaderPagination()

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
        pagination: Optional[PaginationStrategy] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, e.g. https://api.gusto.com
            token: Static API credential sent on every request
            timeout: Per-request timeout in seconds (None keeps the transport default)
            user_agent: User-Agent header value
            session: Pre-built requests session; the caller keeps ownership
                and close() leaves it open
            pagination: Override for the class-level pagination strategy
        """
        self.base_url = base_url.rstrip("/")
        self._token = token
        self.timeout = timeout
        self.user_agent = user_agent
        self._owns_session = session is None
        self.session = session or requests.Session()
        if pagination is not None:
            self.pagination = pagination

    @classmethod
    def from_settings(cls, settings=None, **kwargs):
        """Build a client from ProviderSettings, loading them from the environment if omitted."""
        from apiclients.config import load_settings

        if settings is None:
            settings = load_settings(cls.provider)
        kwargs.setdefault("timeout", settings.timeout)
        kwargs.setdefault("user_agent", settings.user_agent or DEFAULT_USER_AGENT)
        return cls(settings.base_url, settings.token, **kwargs)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _make_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return urljoin(self.base_url + "/", path.lstrip("/"))

    def _headers(self, extra: Optional[Dict[str, str]], has_body: bool) -> Dict[str, str]:
        headers = {
            "Authorization": f"{self.auth_scheme} {self._token}",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        if extra:
            headers.update(extra)
        return headers

    def send(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Execute a request and return the raw response once its status is checked.

        Raises:
            EncodeError: If the body cannot be serialized (nothing is sent)
            TransportError: If no response was received
            HttpStatusError: On non-2xx status
        """
        data = encode_body(body) if body is not None else None
        url = self._make_url(path)
        logger.debug(f"{method} {url}")

        try:
            resp = self.session.request(
                method,
                url,
                data=data,
                headers=self._headers(headers, data is not None),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        self._handle_error(resp)
        return resp

    def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        response_type: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Execute a request and decode the body as ``response_type``.

        Returns:
            Decoded value, or None when ``response_type`` is None
        """
        resp = self.send(method, path, body=body, headers=headers)
        return decode_body(resp.content, response_type, url=resp.url)

    def get(self, path: str, response_type: Any = None, **kwargs) -> Any:
        return self.request("GET", path, response_type=response_type, **kwargs)

    def post(self, path: str, body: Any = None, response_type: Any = None, **kwargs) -> Any:
        return self.request("POST", path, body=body, response_type=response_type, **kwargs)

    def put(self, path: str, body: Any = None, response_type: Any = None, **kwargs) -> Any:
        return self.request("PUT", path, body=body, response_type=response_type, **kwargs)

    def delete(self, path: str, response_type: Any = None, **kwargs) -> Any:
        return self.request("DELETE", path, response_type=response_type, **kwargs)

    def request_page(
        self,
        path: str,
        item_type: Any,
        headers: Optional[Dict[str, str]] = None,
        strategy: Optional[PaginationStrategy] = None,
    ) -> Page:
        """GET one page of a list endpoint and split it with the pagination strategy.

        Args:
            path: Page URL, relative to the base URL or absolute
            item_type: Type of one element of the page
            headers: Extra request headers
            strategy: Override for the client's pagination strategy
        """
        resp = self.send("GET", path, headers=headers)
        return (strategy or self.pagination).parse(resp, item_type)

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Args:
            resp: Response object to check

        Raises:
            HttpStatusError: If the status is outside 2xx
        """
        if not 200 <= resp.status_code < 300:
            logger.warning(f"{resp.url} returned HTTP {resp.status_code}")
            raise HttpStatusError(resp.status_code, resp.text, resp.url)
