"""Slack Web API team schemas."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from apiclients.core.marshal import ApiModel


class Paging(ApiModel):
    count: Optional[int] = None
    page: Optional[int] = None
    pages: Optional[int] = None
    per_page: Optional[int] = None
    spill: Optional[int] = None
    total: Optional[int] = None


class ResponseMetadata(ApiModel):
    next_cursor: Optional[str] = None


class AccessLogEntry(ApiModel):
    """One login of one user from one device and address."""
    user_id: str
    username: Optional[str] = None
    date_first: Optional[int] = None
    date_last: Optional[int] = None
    count: Optional[int] = None
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    isp: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None


class IntegrationLogEntry(ApiModel):
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    date: Optional[str] = None
    change_type: Optional[str] = None
    app_id: Optional[str] = None
    app_type: Optional[str] = None
    service_id: Optional[str] = None
    service_type: Optional[str] = None
    channel: Optional[str] = None
    scope: Optional[str] = None
    reason: Optional[str] = None


class BillableInfo(ApiModel):
    billing_active: bool


class Team(ApiModel):
    id: str
    name: Optional[str] = None
    domain: Optional[str] = None
    email_domain: Optional[str] = None
    enterprise_id: Optional[str] = None
    enterprise_name: Optional[str] = None
    icon: Optional[Dict[str, Any]] = None


class TeamAccessLogsSchema(ApiModel):
    ok: bool
    logins: List[AccessLogEntry]
    paging: Optional[Paging] = None
    response_metadata: Optional[ResponseMetadata] = None


class TeamBillableInfoSchema(ApiModel):
    ok: bool
    billable_info: Dict[str, BillableInfo] = {}


class TeamInfoSchema(ApiModel):
    ok: bool
    team: Team


class TeamIntegrationLogsSchema(ApiModel):
    ok: bool
    logs: List[IntegrationLogEntry]
    paging: Optional[Paging] = None
