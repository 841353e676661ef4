"""Tests for the Slack team service."""
import pytest

from apiclients.core.exceptions import ApiClientError, HttpStatusError
from apiclients.slack import SlackApiError, SlackClient, TeamInfoSchema
from tests.conftest import make_response

API = "https://slack.com/api"

LOGIN = {
    "user_id": "U45678",
    "username": "alice",
    "date_first": 1422922864,
    "date_last": 1422922864,
    "count": 1,
    "ip": "127.0.0.1",
    "user_agent": "SlackWeb Mozilla/5.0",
    "isp": "BigCo ISP",
    "country": "US",
    "region": "CA",
}


@pytest.fixture()
def slack(fake_session):
    return SlackClient(API, "xoxb-token", session=fake_session)


def test_info_without_team_sends_no_query(slack, fake_session):
    fake_session.queue(make_response(200, {"ok": True, "team": {"id": "T12345", "name": "My Team", "domain": "example"}}))

    result = slack.team.info()

    assert isinstance(result, TeamInfoSchema)
    assert result.team.domain == "example"
    assert fake_session.urls == [f"{API}/team.info"]
    assert fake_session.calls[0]["headers"]["Authorization"] == "Bearer xoxb-token"


def test_info_for_other_team(slack, fake_session):
    fake_session.queue(make_response(200, {"ok": True, "team": {"id": "T999"}}))
    slack.team.info(team="T999")
    assert fake_session.urls == [f"{API}/team.info?team=T999"]


def test_access_log(slack, fake_session):
    fake_session.queue(make_response(200, {
        "ok": True,
        "logins": [LOGIN],
        "paging": {"count": 100, "total": 1, "page": 1, "pages": 1},
    }))

    result = slack.team.access_log(count=100, page=1, before="")

    assert result.logins[0].username == "alice"
    assert result.paging.pages == 1
    assert fake_session.urls == [f"{API}/team.accessLogs?count=100&page=1"]


def test_list_all_access_logs_follows_cursor(slack, fake_session):
    fake_session.queue(
        make_response(200, {"ok": True, "logins": [LOGIN], "response_metadata": {"next_cursor": "dXNlcjpVMEc5V0ZYTlo="}}),
        make_response(200, {"ok": True, "logins": [{**LOGIN, "user_id": "U99"}], "response_metadata": {"next_cursor": ""}}),
    )

    logins = slack.team.list_all_access_logs(limit=1)

    assert [entry.user_id for entry in logins] == ["U45678", "U99"]
    assert fake_session.urls == [
        f"{API}/team.accessLogs?limit=1",
        f"{API}/team.accessLogs?limit=1&cursor=dXNlcjpVMEc5V0ZYTlo%3D",
    ]


def test_billable_info(slack, fake_session):
    fake_session.queue(make_response(200, {"ok": True, "billable_info": {"U02UCPE1R": {"billing_active": True}}}))

    result = slack.team.billable_info(user="U02UCPE1R")

    assert result.billable_info["U02UCPE1R"].billing_active is True
    assert fake_session.urls == [f"{API}/team.billableInfo?user=U02UCPE1R"]


def test_integration_log_query_order(slack, fake_session):
    fake_session.queue(make_response(200, {"ok": True, "logs": [
        {"service_id": "1234567890", "service_type": "Google Drive", "user_id": "U1234ABCD",
         "user_name": "Johnny", "channel": "C1234567890", "date": "1392163200", "change_type": "enabled",
         "scope": "incoming-webhook"},
    ]}))

    result = slack.team.integration_log(app_id="A1", change_type="enabled", count=10, service_id="", user="U1")

    assert result.logs[0].service_type == "Google Drive"
    assert fake_session.urls == [f"{API}/team.integrationLogs?app_id=A1&change_type=enabled&count=10&user=U1"]


def test_ok_false_raises_slack_api_error(slack, fake_session):
    fake_session.queue(make_response(200, {"ok": False, "error": "paid_only"}))

    with pytest.raises(SlackApiError) as excinfo:
        slack.team.access_log()

    assert excinfo.value.error == "paid_only"
    assert excinfo.value.status_code == 200
    assert isinstance(excinfo.value, ApiClientError)


def test_ok_false_on_second_page_aborts_walk(slack, fake_session):
    fake_session.queue(
        make_response(200, {"ok": True, "logins": [LOGIN], "response_metadata": {"next_cursor": "c2"}}),
        make_response(200, {"ok": False, "error": "ratelimited"}),
    )

    with pytest.raises(SlackApiError, match="ratelimited"):
        slack.team.list_all_access_logs()


def test_http_error_still_raised(slack, fake_session):
    fake_session.queue(make_response(500, content=b"upstream error"))

    with pytest.raises(HttpStatusError) as excinfo:
        slack.team.info()

    assert excinfo.value.status_code == 500
