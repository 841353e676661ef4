"""Gusto API client."""
from __future__ import annotations

from apiclients.core.client import ApiClient

from .garnishments import GarnishmentsService


class GustoClient(ApiClient):
    """Client for the Gusto payroll API (https://api.gusto.com)."""

    provider = "gusto"

    def __init__(self, base_url: str, token: str, **kwargs):
        super().__init__(base_url, token, **kwargs)
        self.garnishments = GarnishmentsService(self)
