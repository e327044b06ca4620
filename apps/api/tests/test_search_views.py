"""
Tests for the smart search endpoint
"""
from conftest import FakeChatProvider, FakeProfileStore, make_profile, model_reply
from talent_api.providers import ChatBadStatusError


class TestSmartSearchView:
    def test_keyword_only_without_credential(self, api, sample_profiles):
        """Scenario: 3 profiles, no model credential, query React"""
        client = api.use(FakeProfileStore(sample_profiles), chat_provider=None)

        response = client.post("/smart-search", json={"query": "React"})

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data["profiles"]] == ["id-1"]
        assert data["query"] == "React"
        assert "keyword" in data["reasoning"]
        assert "1" in data["reasoning"]

    def test_model_path(self, api):
        """Scenario: 2 profiles, model returns id-2"""
        profiles = [
            make_profile("id-1", "Ann", "ann", "Frontend | React"),
            make_profile("id-2", "Bo", "bo", "Cloud engineer with AWS and Kubernetes"),
        ]
        chat = FakeChatProvider(reply=model_reply(["id-2"], "strong cloud skills"))
        client = api.use(FakeProfileStore(profiles), chat_provider=chat)

        response = client.post("/smart-search", json={"query": "cloud experts"})

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data["profiles"]] == ["id-2"]
        assert data["reasoning"] == "strong cloud skills"
        assert data["profiles"][0]["display_name"] == "Bo"
        assert data["profiles"][0]["skills"] == ["AWS", "Kubernetes"]

    def test_model_http_500_falls_back(self, api, sample_profiles):
        """Scenario: provider answers 500; still 200 with keyword results"""
        chat = FakeChatProvider(error=ChatBadStatusError(500, "Chat API returned 500."))
        client = api.use(FakeProfileStore(sample_profiles), chat_provider=chat)

        response = client.post("/smart-search", json={"query": "agile"})

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data["profiles"]] == ["id-3"]
        assert "model error occurred" in data["reasoning"]
        assert "keyword fallback" in data["reasoning"]

    def test_missing_query(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.post("/smart-search", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Query parameter is required"}

    def test_blank_query_even_when_store_is_down(self, api):
        client = api.use(FakeProfileStore(fail=True))

        response = client.post("/smart-search", json={"query": "   "})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_non_string_query(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.post("/smart-search", json={"query": 123})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_invalid_json_body(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.post(
            "/smart-search", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_store_failure(self, api):
        client = api.use(FakeProfileStore(fail=True), chat_provider=FakeChatProvider(reply="{}"))

        response = client.post("/smart-search", json={"query": "react"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch profiles"}

    def test_empty_store(self, api):
        client = api.use(FakeProfileStore([]))

        response = client.post("/smart-search", json={"query": "react"})

        assert response.status_code == 200
        assert response.json()["profiles"] == []
        assert response.json()["reasoning"] == "No profiles in store."


class TestSmartSearchPreflight:
    def test_plain_options(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.options("/smart-search")

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert "content-type" in response.headers["access-control-allow-headers"]

    def test_browser_preflight(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.options(
            "/smart-search",
            headers={
                "Origin": "https://talent.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type, apikey",
            },
        )

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] in ("*", "https://talent.example.com")
        assert "POST" in response.headers["access-control-allow-methods"]


class TestHealth:
    def test_health(self, api):
        response = api.client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
