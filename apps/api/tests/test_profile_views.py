"""
Tests for the profile directory endpoints
"""
from conftest import FakeProfileStore


class TestProfileViews:
    def test_list_profiles(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.get("/profiles")

        assert response.status_code == 200
        profiles = response.json()["profiles"]
        assert [p["id"] for p in profiles] == ["id-1", "id-2", "id-3"]
        assert profiles[2]["display_name"] == "pm_jess"
        assert profiles[2]["skills"] == ["Agile", "Scrum"]

    def test_get_profile(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.get("/profiles/id-2")

        assert response.status_code == 200
        assert response.json()["full_name"] == "Sarah Chen"

    def test_get_unknown_profile(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.get("/profiles/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Profile not found"}

    def test_create_profile(self, api):
        store = FakeProfileStore([])
        client = api.use(store)

        response = client.post(
            "/profiles",
            json={"username": "newdev", "headline": "Mobile engineer | Kotlin, Swift"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["display_name"] == "newdev"
        assert data["skills"] == ["Kotlin", "Swift"]
        assert len(store.profiles) == 1

    def test_create_requires_a_name(self, api):
        client = api.use(FakeProfileStore([]))

        response = client.post("/profiles", json={"full_name": " ", "headline": "Anything"})

        assert response.status_code == 400
        assert "full_name or username" in response.json()["error"]

    def test_create_duplicate_username(self, api, sample_profiles):
        client = api.use(FakeProfileStore(sample_profiles))

        response = client.post("/profiles", json={"username": "alexj"})

        assert response.status_code == 409

    def test_store_failure(self, api):
        client = api.use(FakeProfileStore(fail=True))

        response = client.get("/profiles")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch profiles"}
