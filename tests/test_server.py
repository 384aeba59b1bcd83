"""Tests for the HTTP API."""

import json

import pytest
from starlette.testclient import TestClient

from dyn_form.config import DynFormConfig
from dyn_form.default_schema import DEFAULT_SCHEMA_DOCUMENT, build_default_schema
from dyn_form.server import create_app
from dyn_form.storage import SubmissionStore


VALID_PAYLOAD = {
    "firstName": "Jo",
    "lastName": "Doe",
    "age": 30,
    "startDate": "2021-01-01",
    "role": "Developer",
}


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def store(db_path):
    return SubmissionStore(db_path)


@pytest.fixture
def client(store):
    app = create_app(build_default_schema(), store, DynFormConfig())
    with TestClient(app) as test_client:
        yield test_client


def _seed(db_path, count):
    """Write ``count`` records, one day apart, newest first."""
    submissions = [
        {
            "id": f"id-{i}",
            "createdAt": f"2024-01-{i:02d}T00:00:00.000Z",
            "data": {"n": i},
        }
        for i in range(count, 0, -1)
    ]
    db_path.write_text(json.dumps({"submissions": submissions}))


class TestFormSchemaEndpoint:
    """Tests for GET /api/form-schema."""

    def test_returns_schema(self, client):
        """Test that the schema document is served as-is."""
        response = client.get("/api/form-schema")
        assert response.status_code == 200
        assert response.json() == DEFAULT_SCHEMA_DOCUMENT


class TestCreateSubmission:
    """Tests for POST /api/submissions."""

    def test_accepts_valid_payload(self, client, store):
        """Test that a valid payload is stored and acknowledged."""
        response = client.post("/api/submissions", json=VALID_PAYLOAD)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["createdAt"].endswith("Z")

        stored = store.all()
        assert len(stored) == 1
        assert stored[0].id == body["id"]
        assert stored[0].data == VALID_PAYLOAD

    def test_rejects_invalid_payload(self, client, store):
        """Test that validation errors come back field-keyed with 400."""
        payload = dict(VALID_PAYLOAD, age=15, firstName="")
        response = client.post("/api/submissions", json=payload)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "errors": {
                "firstName": "This field is required.",
                "age": "Minimum value is 18",
            },
        }
        assert store.count() == 0

    def test_rejects_malformed_json(self, client, store):
        """Test that a body that is not JSON is rejected."""
        response = client.post(
            "/api/submissions",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "errors": {"_body": "Invalid JSON body."}}
        assert store.count() == 0

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_rejects_non_standard_constants(self, client, store, literal):
        """Test that NaN and Infinity literals count as malformed JSON."""
        body = (
            '{"firstName":"Jo","lastName":"Doe","age":30,'
            f'"startDate":"2021-01-01","role":{literal}}}'
        )
        response = client.post(
            "/api/submissions",
            content=body.encode(),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "errors": {"_body": "Invalid JSON body."}}
        assert store.count() == 0

    def test_non_object_payload(self, client):
        """Test that a JSON array is validated as an empty payload."""
        response = client.post("/api/submissions", json=["Jo"])
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert set(errors) == {"firstName", "lastName", "age", "startDate", "role"}


class TestListSubmissions:
    """Tests for GET /api/submissions."""

    def test_empty(self, client):
        """Test listing with no submissions."""
        response = client.get("/api/submissions")
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "page": 1,
            "limit": 10,
            "total": 0,
            "totalPages": 1,
            "items": [],
        }

    def test_pagination(self, client, db_path):
        """Test page and limit parameters."""
        _seed(db_path, 5)
        body = client.get("/api/submissions", params={"page": 2, "limit": 2}).json()
        assert body["total"] == 5
        assert body["totalPages"] == 3
        assert [item["id"] for item in body["items"]] == ["id-3", "id-2"]

    def test_ascending(self, client, db_path):
        """Test sortOrder=asc."""
        _seed(db_path, 3)
        body = client.get(
            "/api/submissions",
            params={"sortBy": "createdAt", "sortOrder": "asc"},
        ).json()
        assert [item["id"] for item in body["items"]] == ["id-1", "id-2", "id-3"]

    @pytest.mark.parametrize(
        "params, page, limit",
        [
            ({"page": "abc"}, 1, 10),
            ({"page": "0"}, 1, 10),
            ({"page": "3abc"}, 3, 10),
            ({"limit": "0"}, 1, 10),
            ({"limit": "-5"}, 1, 10),
            ({"limit": "500"}, 1, 100),
            ({"limit": "20"}, 1, 20),
        ],
    )
    def test_query_parsing(self, client, params, page, limit):
        """Test fallbacks for bad paging parameters."""
        body = client.get("/api/submissions", params=params).json()
        assert body["page"] == page
        assert body["limit"] == limit

    def test_store_failure(self, client, db_path):
        """Test that a corrupt store yields a 500 JSON error."""
        db_path.write_text("{not json")
        response = client.get("/api/submissions")
        assert response.status_code == 500
        assert response.json()["success"] is False


class TestExportSubmissions:
    """Tests for GET /api/submissions/export.csv."""

    def test_csv_download(self, client, db_path):
        """Test that the requested page is exported as CSV."""
        _seed(db_path, 3)
        response = client.get("/api/submissions/export.csv", params={"limit": 2})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "submissions.csv" in response.headers["content-disposition"]

        lines = response.text.splitlines()
        assert lines[0] == "ID,Created At,Data"
        assert len(lines) == 3
        assert lines[1].startswith("id-3,2024-01-03T00:00:00.000Z,")


class TestHealth:
    """Tests for GET /api/health."""

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_cors_header(self, client):
        """Test that cross-origin requests are allowed."""
        response = client.get("/api/health", headers={"Origin": "http://example.com"})
        assert response.headers["access-control-allow-origin"] == "*"
