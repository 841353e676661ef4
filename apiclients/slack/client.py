"""Slack Web API client."""
from __future__ import annotations
import logging

import requests

from apiclients.core.client import ApiClient
from apiclients.core.exceptions import ApiClientError

from .team import TeamService

logger = logging.getLogger(__name__)


class SlackApiError(ApiClientError):
    """Slack answered ``{"ok": false, "error": ...}``.

    Attributes:
        error: Slack error code, e.g. ``not_authed``
        status_code: HTTP status of the response (usually 200)
        url: Method URL that failed
    """

    def __init__(self, error: str, status_code: int, url: str):
        self.error = error
        self.status_code = status_code
        self.url = url
        super().__init__(f"[{status_code}] {url}: {error}")


class SlackClient(ApiClient):
    """Client for the Slack Web API (https://slack.com/api).

    Slack reports most failures with HTTP 200 and ``ok: false`` in the body;
    those are raised as SlackApiError. Cursor-paginated methods keep their
    items under a method-specific field, so each declares its own
    CursorFieldPagination.
    """

    provider = "slack"

    def __init__(self, base_url: str, token: str, **kwargs):
        super().__init__(base_url, token, **kwargs)
        self.team = TeamService(self)

    def _handle_error(self, resp: requests.Response) -> None:
        super()._handle_error(resp)
        try:
            data = resp.json()
        except ValueError:
            # Left for the decoder to report against the expected type
            return
        if isinstance(data, dict) and data.get("ok") is False:
            error = data.get("error") or "unknown_error"
            logger.warning(f"{resp.url} returned Slack error {error}")
            raise SlackApiError(error, resp.status_code, resp.url)
