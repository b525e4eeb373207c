from fastapi.testclient import TestClient

from leadgen_assets.backends import TextBackend
from leadgen_assets.errors import GenerationError
from leadgen_assets.web import create_app


class CountingBackend(TextBackend):
    name = "counting"

    def __init__(self):
        self.calls = 0

    def draft(self, profile):
        self.calls += 1
        raise AssertionError("generation should not run")


class TimeoutBackend(TextBackend):
    name = "timeout"

    def draft(self, profile):
        raise GenerationError("timeout")


def test_index_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert 'id="businessName"' in r.text
    assert "CSV Outreach" in r.text


def test_generate_acme_solar(client, acme_payload):
    r = client.post("/api/agent", json=acme_payload)
    assert r.status_code == 200
    data = r.json()
    assert data["icp"]
    assert data["valueProp"]
    assert len(data["emails"]) >= 1
    assert len(data["adHeadlines"]) >= 1
    assert data["landing"]["hero"]
    assert len(data["landing"]["sections"]) >= 1
    assert len(data["discoveryQuestions"]) >= 1
    assert len(data["callScriptBullets"]) >= 1
    assert len(data["personalized"]) >= 1
    assert "Acme Solar" in data["personalized"][0]["company"]
    assert set(data["personalized"][0]) == {
        "company", "contactName", "title", "email", "personalizedIntro", "emailVariant", "cta",
    }


def test_identical_requests_identical_responses(client, acme_payload):
    first = client.post("/api/agent", json=acme_payload)
    second = client.post("/api/agent", json=acme_payload)
    assert first.content == second.content


def test_missing_field_is_400_and_skips_generation(acme_payload):
    backend = CountingBackend()
    client = TestClient(create_app(backend=backend))
    del acme_payload["offer"]

    r = client.post("/api/agent", json=acme_payload)

    assert r.status_code == 400
    assert "offer" in r.json()["error"]
    assert backend.calls == 0


def test_bad_website_is_400(client, acme_payload):
    acme_payload["website"] = "not a url"
    r = client.post("/api/agent", json=acme_payload)
    assert r.status_code == 400
    assert "website" in r.json()["error"]


def test_empty_website_is_ok(client, acme_payload):
    acme_payload["website"] = ""
    assert client.post("/api/agent", json=acme_payload).status_code == 200


def test_malformed_json_is_400(client):
    r = client.post("/api/agent", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Request body must be valid JSON"}


def test_non_object_body_is_400(client):
    r = client.post("/api/agent", json=["Acme Solar"])
    assert r.status_code == 400
    assert "error" in r.json()


def test_generation_failure_is_400(acme_payload):
    client = TestClient(create_app(backend=TimeoutBackend()))
    r = client.post("/api/agent", json=acme_payload)
    assert r.status_code == 400
    assert r.json() == {"error": "Failed to generate assets (timeout)"}


def test_csv_download(client, acme_payload):
    r = client.post("/api/agent/csv", json=acme_payload)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert "leadgen_personalized_outreach.csv" in r.headers["content-disposition"]
    assert r.text.startswith('"company","contact_name","title"')
    assert '"Acme Solar prospect 1"' in r.text


def test_csv_download_validation_error(client):
    r = client.post("/api/agent/csv", json={})
    assert r.status_code == 400
    assert "businessName" in r.json()["error"]
