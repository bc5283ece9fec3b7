import pytest

from sonar_app.core.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT
from sonar_app.core.models import ActionRequest
from sonar_app.core.sonar_client import SonarAPI
from fakes import FakeResponse, FakeSession


def test_default_settings():
    session = FakeSession()
    api = SonarAPI("http://sonar.example/", session=session)
    assert api.base_url() == "http://sonar.example/"
    assert api.timeout == (DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT)
    assert session.headers["Accept"] == "application/json"
    assert session.headers["Accept-Charset"] == "UTF-8"
    assert session.auth is None


def test_token_is_sent_as_login():
    session = FakeSession()
    SonarAPI("http://sonar.example", token="theToken", session=session)
    assert session.auth == ("theToken", "")


def test_login_with_missing_password():
    session = FakeSession()
    SonarAPI("http://sonar.example", login="theLogin", session=session)
    assert session.auth == ("theLogin", "")


def test_override_timeouts():
    api = SonarAPI("http://sonar.example", connect_timeout=7.4, read_timeout=4.2, session=FakeSession())
    assert api.timeout == (7.4, 4.2)


def test_execute_posts_absent_values_as_empty_fields():
    session = FakeSession(post_response=FakeResponse({"issue": {"key": "AX-1"}}))
    api = SonarAPI("http://sonar.example", session=session)
    result = api.execute(ActionRequest("/api/issues/assign", {"issue": "AX-1", "assignee": None}))
    assert result == {"issue": {"key": "AX-1"}}
    assert session.posts[0]["url"] == "http://sonar.example/api/issues/assign"
    assert session.posts[0]["data"] == {"issue": "AX-1", "assignee": ""}


def test_execute_empty_body():
    session = FakeSession(post_response=FakeResponse(None, status_code=204))
    api = SonarAPI("http://sonar.example", session=session)
    assert api.execute(ActionRequest("/api/issues/plan", {"issue": "AX-1", "plan": "p"})) == {}


def test_execute_error_raises():
    session = FakeSession(post_response=FakeResponse({"errors": [{"msg": "nope"}]}, status_code=400))
    api = SonarAPI("http://sonar.example", session=session)
    with pytest.raises(RuntimeError, match="400"):
        api.execute(ActionRequest("/api/issues/set_severity", {"issue": "AX-1", "severity": "HUGE"}))


def test_search_issues_paginates_and_caches():
    pages = [
        FakeResponse({"paging": {"pageIndex": 1, "pageSize": 2, "total": 3}, "issues": [{"key": "A"}, {"key": "B"}]}),
        FakeResponse({"paging": {"pageIndex": 2, "pageSize": 2, "total": 3}, "issues": [{"key": "C"}]}),
    ]
    session = FakeSession(get_responses=pages)
    api = SonarAPI("http://sonar.example", session=session)
    out = api.search_issues(["proj"], page_size=2)
    assert [i["key"] for i in out] == ["A", "B", "C"]
    assert [g["params"]["p"] for g in session.gets] == [1, 2]
    assert session.gets[0]["params"]["componentKeys"] == "proj"
    # second call served from cache
    assert api.search_issues(["proj"], page_size=2) == out
    assert len(session.gets) == 2


def test_fetch_issue_raw_wraps_issue():
    session = FakeSession(get_responses=[FakeResponse({"issues": [{"key": "AX-1", "status": "OPEN"}]})])
    api = SonarAPI("http://sonar.example", session=session)
    assert api.fetch_issue_raw("AX-1") == {"issue": {"key": "AX-1", "status": "OPEN"}}
    assert session.gets[0]["params"]["issues"] == "AX-1"


def test_fetch_issue_raw_missing():
    session = FakeSession(get_responses=[FakeResponse({"issues": []})])
    api = SonarAPI("http://sonar.example", session=session)
    with pytest.raises(RuntimeError, match="not found"):
        api.fetch_issue_raw("AX-404")


def test_search_profiles():
    session = FakeSession(get_responses=[FakeResponse({"profiles": [{"key": "java-way", "name": "Sonar way"}]})])
    api = SonarAPI("http://sonar.example", session=session)
    assert api.search_profiles("java")[0]["key"] == "java-way"
    assert session.gets[0]["params"] == {"language": "java"}
