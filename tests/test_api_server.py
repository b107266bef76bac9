"""Tests for the browser-facing HTTP API."""

from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient
import pytest

from study_quiz.core.catalog import SubjectCatalog
from study_quiz.core.question_loader import InMemoryQuestionProvider
from study_quiz.core.quiz_manager import QuizManager
from study_quiz.core.services.selection_store import InMemorySelectionStore
from study_quiz.core.services.session_builder import SessionBuilder
from study_quiz.server.api_server import create_api_app
from tests.conftest import make_questions


@pytest.fixture
def client(small_catalog: SubjectCatalog) -> TestClient:
    provider = InMemoryQuestionProvider({"alpha": make_questions("alpha", 2), "beta": make_questions("beta", 1)})
    manager = QuizManager(
        builder=SessionBuilder(provider, small_catalog),
        selection_store=InMemorySelectionStore(),
    )
    return TestClient(create_api_app(manager))


class TestStaticRoutes:
    def test_student_page(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    def test_catalog(self, client: TestClient) -> None:
        body = client.get("/catalog").json()
        assert [module["number"] for module in body["modules"]] == [1, 2]
        assert body["modules"][0]["subjects"][0] == {"name": "alpha", "display_name": "Alpha"}
        assert body["custom_selection_size"] == 0

    def test_idle_state(self, client: TestClient) -> None:
        body = client.get("/state").json()
        assert body["status"] == "idle"
        assert body["question"] is None


class TestSessionRoutes:
    """Tests for running a quiz over HTTP."""

    def test_start_subject_quiz(self, client: TestClient) -> None:
        response = client.post("/session", json={"type": "subject", "subject_name": "alpha"})
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "in_progress"
        assert body["phase"] == "awaiting_answer"
        assert body["total"] == 2
        assert [option["original_index"] for option in body["question"]["options"]] == [0, 1, 2, 3]
        assert body["feedback"] is None

    def test_module_requires_number(self, client: TestClient) -> None:
        assert client.post("/session", json={"type": "module"}).status_code == 422

    def test_unknown_mode(self, client: TestClient) -> None:
        assert client.post("/session", json={"type": "weekly"}).status_code == 422

    def test_no_questions(self, client: TestClient) -> None:
        body = client.post("/session", json={"type": "subject", "subject_name": "gamma"}).json()
        assert body["status"] == "no_questions"

    def test_answer_flow(self, client: TestClient) -> None:
        client.post("/session", json={"type": "subject", "subject_name": "beta"})

        assert client.post("/session/select", json={"option_index": 0}).status_code == 200
        body = client.post("/session/answer", json={}).json()
        assert body["phase"] == "showing_feedback"
        assert body["feedback"] == {"is_correct": True, "selected_option_index": 0, "correct_option_index": 0}

        body = client.post("/session/continue").json()
        assert body["status"] == "completed"
        assert body["score_percentage"] == 100

    def test_wrong_answer_is_requeued(self, client: TestClient) -> None:
        client.post("/session", json={"type": "subject", "subject_name": "beta"})
        body = client.post("/session/answer", json={"option_index": 3}).json()
        assert body["feedback"]["is_correct"] is False
        assert body["total"] == 2

    def test_rejected_transitions(self, client: TestClient) -> None:
        client.post("/session", json={"type": "subject", "subject_name": "alpha"})
        assert client.post("/session/continue").status_code == 409
        assert client.post("/session/answer", json={}).status_code == 409
        assert client.post("/session/select", json={"option_index": 9}).status_code == 409

    def test_leave_session(self, client: TestClient) -> None:
        client.post("/session", json={"type": "all"})
        body = client.delete("/session").json()
        assert body["status"] == "idle"


class TestSelectionRoutes:
    """Tests for editing the custom selection."""

    def test_question_pool(self, client: TestClient) -> None:
        questions = client.get("/questions").json()["questions"]
        assert [question["question_id"] for question in questions] == ["alpha_0", "alpha_1", "beta_0"]
        assert not any(question["selected"] for question in questions)

    def test_replace_and_toggle(self, client: TestClient) -> None:
        body = client.put("/selection", json={"selected_question_ids": ["alpha_1", "alpha_1"]}).json()
        assert body == {"selected_question_ids": ["alpha_1"]}

        body = client.post("/selection/toggle", json={"question_id": "beta_0"}).json()
        assert body == {"question_id": "beta_0", "selected": True}
        assert client.get("/selection").json() == {"selected_question_ids": ["alpha_1", "beta_0"]}

    def test_custom_quiz_uses_stored_selection(self, client: TestClient) -> None:
        client.put("/selection", json={"selected_question_ids": ["alpha_1"]})
        body = client.post("/session", json={"type": "custom"}).json()
        assert body["status"] == "in_progress"
        assert body["total"] == 1

    def test_custom_quiz_with_explicit_ids(self, client: TestClient) -> None:
        body = client.post("/session", json={"type": "custom", "selected_question_ids": []}).json()
        assert body["status"] == "no_questions"


def test_images_are_served(tmp_path: Path, small_catalog: SubjectCatalog) -> None:
    (tmp_path / "diagram.png").write_bytes(b"png-bytes")
    manager = QuizManager(
        builder=SessionBuilder(InMemoryQuestionProvider({}), small_catalog),
        selection_store=InMemorySelectionStore(),
    )
    client = TestClient(create_api_app(manager, image_root=tmp_path))

    response = client.get("/images/diagram.png")
    assert response.status_code == 200
    assert response.content == b"png-bytes"
