"""
API tests for the assistant endpoints.

Run with: python -m pytest assistant/tests/test_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from assistant.services.session_registry import get_session_registry, reset_session_registry

CHAT_URL = "/api/v1/assistant/chat/"
HEALTH_URL = "/api/v1/assistant/health/"


@pytest.fixture
def client():
    reset_session_registry()
    yield APIClient()
    reset_session_registry()


def chat(client, message, session_id=None):
    payload = {"message": message}
    if session_id is not None:
        payload["session_id"] = session_id
    return client.post(CHAT_URL, payload, format="json")


class TestChatEndpoint:

    def test_chat_returns_session_and_result(self, client):
        response = chat(client, "paket vip")
        assert response.status_code == 200
        data = response.json()
        assert data["session_id"]
        assert data["result"]["query_count"] == 1
        assert data["result"]["results"]
        assert "price_label" in data["result"]["results"][0]

    def test_session_continues(self, client):
        first = chat(client, "paket vip").json()
        second = chat(client, "alamat kantor", session_id=first["session_id"]).json()
        assert second["session_id"] == first["session_id"]
        assert second["result"]["query_count"] == 2

    def test_unknown_session_id_starts_fresh(self, client):
        data = chat(client, "paket vip", session_id="abc123").json()
        assert data["session_id"] == "abc123"
        assert data["result"]["query_count"] == 1

    def test_greeting(self, client):
        data = chat(client, "halo").json()
        assert data["reply"]["text"].startswith("Wa'alaikumussalam")

    def test_empty_message_rejected(self, client):
        response = chat(client, "   ")
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["message"] == "Pesan tidak boleh kosong"
        assert data["detail"]["field"] == "message"

    def test_bad_session_id_rejected(self, client):
        response = chat(client, "paket vip", session_id="../etc/passwd")
        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "session_id"

    def test_contact_url_after_third_message(self, client):
        session_id = chat(client, "jadwal keberangkatan").json()["session_id"]
        chat(client, "syarat pendaftaran", session_id=session_id)
        data = chat(client, "legalitas", session_id=session_id).json()
        assert data["result"]["should_show_whatsapp"]
        assert data["contact_url"].startswith("https://wa.me/6281222442100?text=")

    def test_wrong_method_uses_error_shape(self, client):
        response = client.get(CHAT_URL)
        assert response.status_code == 405
        data = response.json()
        assert data["error"] == "method_not_allowed"
        assert "GET" in data["message"]

    def test_malformed_json_uses_error_shape(self, client):
        response = client.post(CHAT_URL, data="{\"message\": ", content_type="application/json")
        assert response.status_code == 400
        assert response.json()["error"] == "parse_error"


class TestSessionEndpoint:

    def test_delete_known_session(self, client):
        session_id = chat(client, "paket vip").json()["session_id"]
        response = client.delete(f"/api/v1/assistant/sessions/{session_id}/")
        assert response.status_code == 204
        assert len(get_session_registry()) == 0

    def test_delete_unknown_session(self, client):
        response = client.delete("/api/v1/assistant/sessions/missing/")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestHealthEndpoint:

    def test_health(self, client):
        data = client.get(HEALTH_URL).json()
        assert data["status"] == "healthy"
        assert data["catalog_items"] == 16
        assert data["active_sessions"] == 0
