"""
Tests for the HTTP layer.

The client fixture injects a generation client without a credential, so
every AI endpoint answers with fallback content.
"""

from app.ai.content.fallbacks import (
    chat_reply_fallback,
    design_suggestions_fallback,
    seo_content_fallback,
    website_content_fallback,
)


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["version"] == "1.0.0"
        assert "uptime" in data

    def test_api_index(self, client):
        response = client.get("/api")

        assert response.status_code == 200
        assert response.json()["endpoints"]["ai"] == "/api/ai/*"

    def test_unknown_route(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Route not found"
        assert "GET /health" in data["available_routes"]


class TestAIEndpoints:

    def test_status(self, client):
        response = client.get("/api/ai/status")

        assert response.json() == {"success": True, "data": {"ready": False}}

    def test_website_content(self, client):
        response = client.post("/api/ai/website-content", json={
            "business_type": "מסעדה",
            "description": "מסעדה איטלקית בתל אביב",
        })

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": website_content_fallback("מסעדה", "מסעדה איטלקית בתל אביב").model_dump(),
        }

    def test_seo(self, client):
        response = client.post("/api/ai/seo", json={
            "business_type": "צלם",
            "target_keywords": ["חתונות"],
        })

        assert response.status_code == 200
        assert response.json()["data"] == seo_content_fallback("צלם", "").model_dump()

    def test_chat(self, client):
        response = client.post("/api/ai/chat", json={"message": "שלום"})

        assert response.status_code == 200
        assert response.json()["data"] == chat_reply_fallback("שלום").model_dump()

    def test_design(self, client):
        response = client.post("/api/ai/design", json={
            "business_type": "מספרה",
            "preferences": {"style": "מודרני"},
        })

        assert response.status_code == 200
        assert response.json()["data"] == design_suggestions_fallback("מספרה", "").model_dump()

    def test_missing_business_type_is_rejected(self, client):
        response = client.post("/api/ai/website-content", json={"description": "x"})

        assert response.status_code == 422

    def test_empty_chat_message_is_rejected(self, client):
        response = client.post("/api/ai/chat", json={"message": ""})

        assert response.status_code == 422


class TestTemplates:

    def test_all_templates(self, client):
        response = client.get("/api/templates")

        data = response.json()
        assert data["success"] is True
        assert data["total"] == 4
        assert len(data["data"]) == 4
        assert "מזון" in data["categories"]

    def test_filter_by_category(self, client):
        response = client.get("/api/templates", params={"category": "רפואי"})

        data = response.json()
        assert data["total"] == 1
        assert data["data"][0]["name"] == "רופא/קליניקה"

    def test_limit(self, client):
        response = client.get("/api/templates", params={"limit": 2})

        data = response.json()
        assert data["total"] == 4
        assert [t["id"] for t in data["data"]] == [1, 2]

    def test_unknown_category(self, client):
        response = client.get("/api/templates", params={"category": "Unknown"})

        assert response.json()["data"] == []
