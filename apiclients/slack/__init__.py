"""Slack messaging API client."""
from .client import SlackApiError, SlackClient
from .models import (
    AccessLogEntry,
    IntegrationLogEntry,
    Team,
    TeamAccessLogsSchema,
    TeamBillableInfoSchema,
    TeamInfoSchema,
    TeamIntegrationLogsSchema,
)
from .team import TeamService

__all__ = [
    "SlackClient",
    "SlackApiError",
    "TeamService",
    "AccessLogEntry",
    "IntegrationLogEntry",
    "Team",
    "TeamAccessLogsSchema",
    "TeamBillableInfoSchema",
    "TeamInfoSchema",
    "TeamIntegrationLogsSchema",
]
