import pytest
from fastapi.testclient import TestClient

from app.core.errors import UpstreamUnavailable
from app.core.security import create_access_token
from app.main import app
from app.routers.ai import get_ai_service
from app.services.ai.context import ContextAssembler, build_context_map
from app.services.ai.service import AIService
from app.services.llm.client import get_completion_client
from conftest import FakeCompletion


@pytest.fixture
def completion():
    return FakeCompletion()


@pytest.fixture
def client(completion, users, classes):
    service = AIService(completion, ContextAssembler(build_context_map(users, classes)))
    app.dependency_overrides[get_ai_service] = lambda: service
    app.dependency_overrides[get_completion_client] = lambda: completion
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def auth():
    return {"Authorization": f"Bearer {create_access_token('u-1')}"}


def test_generate_text_envelope(client, completion, auth):
    completion.replies = ["Task 1 is a report."]

    res = client.post(
        "/ai/generate-text", json={"prompt": "What is IELTS Task 1?"}, headers=auth
    )

    assert res.status_code == 201
    assert res.json() == {
        "status": True,
        "message": "Created successfully",
        "data": "Task 1 is a report.",
        "statusCode": 201,
    }


def test_generate_text_requires_token(client, completion):
    res = client.post("/ai/generate-text", json={"prompt": "hi"})

    assert res.status_code == 401
    assert res.json()["status"] is False
    assert completion.calls == []


def test_context_endpoint_requires_token(client, completion):
    res = client.post("/ai/generate-text-with-context", json={"prompt": "my classes"})

    assert res.status_code == 401
    assert res.json()["status"] is False
    assert res.json()["data"] is None
    assert completion.calls == []


def test_context_endpoint_rejects_bad_token(client):
    res = client.post(
        "/ai/generate-text-with-context",
        json={"prompt": "my classes"},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert res.status_code == 401


def test_context_endpoint_uses_token_identity(client, completion, classes, auth):
    completion.replies = ["You are in IELTS Writing Intensive."]

    res = client.post(
        "/ai/generate-text-with-context",
        json={"prompt": "What classes am I enrolled in?"},
        headers=auth,
    )

    assert res.status_code == 201
    assert res.json()["data"] == "You are in IELTS Writing Intensive."
    assert classes.calls == ["u-1"]


def test_upstream_failure_is_502(client, completion, auth):
    completion.replies = [UpstreamUnavailable("Completion service error: timeout")]

    res = client.post("/ai/generate-text-with-context", json={"prompt": "asdkjasd"}, headers=auth)

    body = res.json()
    assert res.status_code == 502
    assert body["status"] is False
    assert body["statusCode"] == 502
    assert "timeout" in body["details"]


def test_missing_user_is_404(client, completion):
    headers = {"Authorization": f"Bearer {create_access_token('ghost')}"}

    res = client.post(
        "/ai/generate-text-with-context",
        json={"prompt": "show my profile"},
        headers=headers,
    )

    assert res.status_code == 404
    assert "ghost" in res.json()["message"]
    assert completion.calls == []


def test_grade_writing(client, completion, auth):
    completion.replies = ["Band 6"]

    res = client.post(
        "/ai/grade/writing",
        json={"question": "Discuss both views.", "submission": "Some people believe..."},
        headers=auth,
    )

    assert res.status_code == 201
    assert res.json()["data"] == "Band 6"
    content = completion.calls[0]["turns"][0]["content"]
    assert "Discuss both views." in content and "Some people believe..." in content


def test_grade_speaking_rejects_empty_answer(client, completion, auth):
    res = client.post(
        "/ai/grade/speaking",
        json={"question": "Describe your hometown.", "answer": ""},
        headers=auth,
    )

    assert res.status_code == 422
    assert res.json()["status"] is False
    assert completion.calls == []


def test_classify_reports_route(client, completion, auth):
    completion.replies = ["Weather"]

    res = client.post("/ai/classify", json={"prompt": "asdkjasd"}, headers=auth)

    assert res.status_code == 200
    assert res.json()["data"] == {
        "category": "Weather",
        "resolved_category": "Others",
        "language": "primary",
    }


def test_classify_vietnamese(client, completion, auth):
    res = client.post(
        "/ai/classify", json={"prompt": "bài tập của tôi có hạn nộp khi nào"}, headers=auth
    )

    assert res.json()["data"]["category"] == "Assignment"
    assert res.json()["data"]["language"] == "secondary"
    assert completion.calls == []


def test_models_and_health(client):
    models = client.get("/models").json()
    assert any(m["id"] == "gpt-5-nano" and m["is_default"] for m in models)
    assert client.get("/health").json() == {"status": "healthy"}


@pytest.mark.parametrize(
    "path, body",
    [
        ("/ai/grade/writing", {"question": "", "submission": "Some people believe..."}),
        ("/ai/grade/speaking", {"question": "", "answer": "My hometown is Hue."}),
    ],
)
def test_grading_rejects_empty_question(client, completion, auth, path, body):
    res = client.post(path, json=body, headers=auth)

    assert res.status_code == 422
    assert completion.calls == []


def _no_database():
    raise RuntimeError("database is not configured")


@pytest.mark.parametrize(
    "path, body",
    [
        ("/ai/generate-text", {"prompt": "What is IELTS Task 1?"}),
        ("/ai/grade/writing", {"question": "Discuss both views.", "submission": "Some..."}),
        ("/ai/grade/speaking", {"question": "Describe your hometown.", "answer": "Hue."}),
    ],
)
def test_ungrounded_routes_do_not_need_database(client, completion, auth, path, body):
    app.dependency_overrides[get_ai_service] = _no_database
    completion.replies = ["done"]

    res = client.post(path, json=body, headers=auth)

    assert res.status_code == 201
    assert res.json()["data"] == "done"
    assert len(completion.calls) == 1
