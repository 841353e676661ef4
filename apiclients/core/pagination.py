"""Pagination strategies and the page-following aggregator.

Each integration tells the client where a page keeps its items and its
continuation cursor:

- LinkHeaderPagination: JSON array body, ``Link: <url>; rel="next"`` header
- CursorFieldPagination: items under a body field, cursor under a dotted
  body path, next page requested by adding the cursor as a query parameter

Paginator walks the cursors strictly in order. A failure on any page
propagates and nothing collected so far is returned.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from urllib.parse import parse_qsl, urlsplit, urlunsplit

import requests

from .encoding import build_query
from .exceptions import DecodeError
from .marshal import decode_body, decode_value

if TYPE_CHECKING:
    from .client import ApiClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """Items of one response plus the cursor to the next one, if any."""
    items: List[Any] = field(default_factory=list)
    next_cursor: Optional[str] = None


class PaginationStrategy:
    """Extracts a Page from a response and builds the follow-up URL."""

    def parse(self, resp: requests.Response, item_type: Any) -> Page:
        raise NotImplementedError

    def next_url(self, start_url: str, cursor: str) -> str:
        raise NotImplementedError


class LinkHeaderPagination(PaginationStrategy):
    """Array body, next page advertised through the ``Link`` header."""

    def parse(self, resp: requests.Response, item_type: Any) -> Page:
        items = decode_body(resp.content, List[item_type], url=resp.url)
        next_link = resp.links.get("next", {}).get("url")
        return Page(items=items, next_cursor=next_link or None)

    def next_url(self, start_url: str, cursor: str) -> str:
        # The link already carries every query parameter of the next page
        return cursor


class CursorFieldPagination(PaginationStrategy):
    """Object body with the items in one field and an opaque cursor in another.

    Args:
        items_field: Body field holding the page's array
        cursor_field: Dotted path of the cursor inside the body
        cursor_param: Query parameter that sends the cursor back
    """

    def __init__(
        self,
        items_field: str,
        cursor_field: str = "response_metadata.next_cursor",
        cursor_param: str = "cursor",
    ):
        self.items_field = items_field
        self.cursor_field = cursor_field
        self.cursor_param = cursor_param

    def parse(self, resp: requests.Response, item_type: Any) -> Page:
        try:
            data = resp.json()
        except ValueError as exc:
            raise DecodeError(f"Response is not JSON: {exc}", resp.url) from exc
        if not isinstance(data, dict) or self.items_field not in data:
            raise DecodeError(f"Response has no '{self.items_field}' field", resp.url)

        items = decode_value(data[self.items_field], List[item_type], url=resp.url)
        cursor = _lookup(data, self.cursor_field)
        return Page(items=items, next_cursor=str(cursor) if cursor else None)

    def next_url(self, start_url: str, cursor: str) -> str:
        parts = urlsplit(start_url)
        pairs = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != self.cursor_param]
        pairs.append((self.cursor_param, cursor))
        return urlunsplit((parts.scheme, parts.netloc, parts.path, build_query(pairs), parts.fragment))


def _lookup(data: Dict[str, Any], dotted: str) -> Any:
    current: Any = data
    for key in dotted.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


class Paginator:
    """Fetches one or all pages of a list endpoint through an ApiClient.

    Usage:
        paginator = Paginator(client)
        first = paginator.fetch_one("/api/v1/users/u1/factors", UserFactor)
        every = paginator.fetch_all("/api/v1/users/u1/factors", UserFactor)
    """

    def __init__(self, client: "ApiClient", strategy: Optional[PaginationStrategy] = None):
        self.client = client
        self.strategy = strategy or client.pagination

    def fetch_one(self, url: str, item_type: Any, headers: Optional[Dict[str, str]] = None) -> List[Any]:
        """Return the first page only; any continuation cursor is ignored."""
        return self.client.request_page(url, item_type, headers=headers, strategy=self.strategy).items

    def fetch_all(self, start_url: str, item_type: Any, headers: Optional[Dict[str, str]] = None) -> List[Any]:
        """Follow continuation cursors until the server stops sending one.

        Returns:
            Items of every page, in server order

        Raises:
            ApiClientError: From whichever page failed
        """
        page = self.client.request_page(start_url, item_type, headers=headers, strategy=self.strategy)
        items = list(page.items)
        pages = 1

        while page.next_cursor:
            url = self.strategy.next_url(start_url, page.next_cursor)
            logger.debug(f"Following page {pages + 1} of {start_url}")
            page = self.client.request_page(url, item_type, headers=headers, strategy=self.strategy)
            items.extend(page.items)
            pages += 1

        logger.debug(f"Fetched {len(items)} item(s) over {pages} page(s) from {start_url}")
        return items
