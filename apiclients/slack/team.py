"""Slack ``team.*`` methods."""
from __future__ import annotations
from typing import List

from apiclients.core.endpoint import ApiService, Endpoint
from apiclients.core.pagination import CursorFieldPagination

from .models import (
    AccessLogEntry,
    TeamAccessLogsSchema,
    TeamBillableInfoSchema,
    TeamInfoSchema,
    TeamIntegrationLogsSchema,
)


class TeamService(ApiService):
    """Team-level information and audit logs. Most methods need the ``admin`` scope."""

    access_log = Endpoint(
        "GET", "/team.accessLogs",
        query=("before", "count", "page"),
        response=TeamAccessLogsSchema,
        doc="Gets the access logs for the current team (page-numbered).",
    )

    list_access_logs = Endpoint(
        "GET", "/team.accessLogs",
        query=("before", "limit", "cursor"),
        response=List[AccessLogEntry],
        paginated=True,
        pagination=CursorFieldPagination("logins"),
        doc="Gets the access logs for the current team, one cursor page at a time.",
    )

    billable_info = Endpoint(
        "GET", "/team.billableInfo",
        query=("user",),
        response=TeamBillableInfoSchema,
        doc="Gets billable users information for the current team. Defaults to all users.",
    )

    info = Endpoint(
        "GET", "/team.info",
        query=("team",),
        response=TeamInfoSchema,
        doc="Gets information about the current team, or another team visible through shared channels.",
    )

    integration_log = Endpoint(
        "GET", "/team.integrationLogs",
        query=("app_id", "change_type", "count", "page", "service_id", "user"),
        response=TeamIntegrationLogsSchema,
        doc="Gets the integration logs for the current team.",
    )
