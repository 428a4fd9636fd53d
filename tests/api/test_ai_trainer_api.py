"""API tests for the AI tutor."""

from fastapi.testclient import TestClient

from edustocks.main import app
from edustocks.api import deps
from edustocks.services import AITrainerService

from tests.conftest import StubTutorClient


class TestAiTrainerApi:
    def test_generate_question(self, client: TestClient, auth_headers, tutor_client):
        tutor_client.replies = ["QUESTION: What is a P/E ratio? OPTIONS: [...] ANSWER: A"]

        response = client.post(
            "/api/ai-trainer/question",
            json={"level": "beginner", "topic": "valuation"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["text"].startswith("QUESTION:")
        assert data["level"] == "beginner"
        assert data["topic"] == "valuation"
        assert data["question_id"]
        assert data["generated_at"]

    def test_unknown_level_is_400(self, client: TestClient, auth_headers):
        response = client.post(
            "/api/ai-trainer/question",
            json={"level": "guru", "topic": "valuation"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_check_answer(self, client: TestClient, auth_headers, tutor_client):
        """
        GIVEN the tutor judges the answer correct
        WHEN u1 submits option 1
        THEN the evaluation echoes the answer and carries the explanation
        """
        tutor_client.replies = ["CORRECT\nEquity means ownership."]

        response = client.post(
            "/api/ai-trainer/answer",
            json={"question_id": "q-42", "answer": 1},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["question_id"] == "q-42"
        assert data["user_answer"] == 1
        assert data["correct"] is True
        assert data["explanation"] == "Equity means ownership."

    def test_answer_out_of_range_is_400(self, client: TestClient, auth_headers):
        response = client.post(
            "/api/ai-trainer/answer",
            json={"question_id": "q-42", "answer": 7},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_ask(self, client: TestClient, auth_headers, tutor_client):
        tutor_client.replies = ["Volume is the number of shares traded."]

        response = client.post(
            "/api/ai-trainer/ask",
            json={"query": "What is volume?"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["level"] == "beginner"
        assert data["response"] == "Volume is the number of shares traded."

    def test_requires_token(self, client: TestClient):
        response = client.post("/api/ai-trainer/ask", json={"query": "What is volume?"})

        assert response.status_code == 401

    def test_unconfigured_tutor_is_503(self, client: TestClient, auth_headers):
        service = AITrainerService(client=StubTutorClient(configured=False))
        app.dependency_overrides[deps.get_ai_trainer_service] = lambda: service

        response = client.post(
            "/api/ai-trainer/ask",
            json={"query": "What is volume?"},
            headers=auth_headers,
        )

        assert response.status_code == 503
        assert response.json()["error"] == "CONFIGURATION_ERROR"
