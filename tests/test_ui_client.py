import pytest
import requests

from prodash_ui import visualizations
from prodash_ui.data import api_client, repositories
from prodash_ui.data.api_client import ApiError


class FakeResponse:
    def __init__(self, status_code=200, payload=None, cookies=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.cookies = cookies or {}
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_session(monkeypatch):
    def install(*responses, token="tok"):
        session = FakeSession(*responses)
        monkeypatch.setattr(api_client, "_SESSION", session)
        api_client.configure(lambda path, default=None: "http://api.test/" if path == ("API_BASE_URL",) else default, lambda: token)
        return session

    yield install
    api_client.configure(None, None)
    repositories.configure(None)


def test_request_sends_session_cookie(fake_session) -> None:
    session = fake_session(FakeResponse(payload={"items": [], "total": 0}))
    assert api_client.request("GET", "/v1/tasks") == {"items": [], "total": 0}
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://api.test/v1/tasks")
    assert kwargs["cookies"] == {api_client.SESSION_COOKIE: "tok"}


def test_request_raises_api_error_with_detail(fake_session) -> None:
    fake_session(FakeResponse(status_code=409, payload={"detail": "No next stage after 'offer'"}))
    with pytest.raises(ApiError) as excinfo:
        api_client.request("POST", "/v1/jobs/1/advance")
    assert excinfo.value.status_code == 409
    assert excinfo.value.detail == "No next stage after 'offer'"


def test_login_returns_user_and_cookie(fake_session) -> None:
    fake_session(
        FakeResponse(payload={"ok": True, "user": {"email": "ada@example.com"}}, cookies={api_client.SESSION_COOKIE: "abc"}),
        token=None,
    )
    user, token = api_client.login("ada@example.com", "correct-horse")
    assert user["email"] == "ada@example.com"
    assert token == "abc"


def test_current_user_handles_missing_session(fake_session) -> None:
    fake_session(FakeResponse(status_code=401, payload={"user": None}))
    assert api_client.current_user() is None

    fake_session(token=None)
    assert api_client.current_user() is None


def test_list_falls_back_to_empty_and_notifies(fake_session) -> None:
    messages = []
    repositories.configure(messages.append)
    fake_session(requests.ConnectionError("down"))
    assert repositories.list_tasks() == []
    assert messages == ["Failed to load tasks"]


def test_delete_reports_success(fake_session) -> None:
    fake_session(FakeResponse(payload={"ok": True}), FakeResponse(status_code=404, payload={"detail": "Task not found"}))
    assert repositories.delete_task("t1") is True
    assert repositories.delete_task("t1") is False


def test_budget_summary_defaults_to_zero(fake_session) -> None:
    fake_session(FakeResponse(status_code=500, payload={"detail": "Internal error"}))
    assert repositories.budget_summary() == {"income": 0, "expenses": 0, "balance": 0}


def test_send_chat_extracts_content(fake_session) -> None:
    session = fake_session(FakeResponse(payload={"message": {"role": "assistant", "content": "Plan tomorrow tonight."}}))
    assert repositories.send_chat([{"role": "user", "content": "tip?"}]) == "Plan tomorrow tonight."
    assert session.calls[0][2]["json"] == {"messages": [{"role": "user", "content": "tip?"}]}


def test_format_money() -> None:
    assert visualizations.format_money("1234.5") == "£1,234.50"
    assert visualizations.format_money(None) == "£0.00"
    assert visualizations.format_money("n/a") == "£0.00"


def test_category_chart_uses_amounts() -> None:
    fig = visualizations.category_chart([{"category": "Rent", "amount": 800}, {"category": "Food", "amount": "120.5"}])
    pie = fig.data[0]
    assert list(pie.labels) == ["Rent", "Food"]
    assert list(pie.values) == [800.0, 120.5]


def test_progress_percent() -> None:
    assert visualizations.progress_percent(1, 3) == 33
    assert visualizations.progress_percent(5, 0) == 0
