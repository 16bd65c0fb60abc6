"""Tests for the /advocates and /advocates/search endpoints."""

import pytest

from app.advocates.management.commands.seed_advocates import seed_advocates
from app.advocates.management.data import ADVOCATES


class TestListAdvocates:
    """Tests for GET /advocates."""

    def test_default_page(self, client) -> None:
        response = client.get("/advocates")
        assert response.status_code == 200

        body = response.get_json()
        assert len(body["data"]) == 5
        assert body["pagination"] == {
            "page": 1,
            "limit": 20,
            "total": 5,
            "totalPages": 1,
            "hasNext": False,
            "hasPrev": False,
        }
        assert "query" not in body

    def test_advocate_shape(self, client) -> None:
        first = client.get("/advocates?limit=1").get_json()["data"][0]
        assert first["firstName"] == "John"
        assert first["lastName"] == "Doe"
        assert first["city"] == "Austin"
        assert first["degree"] == "MD"
        assert first["specialties"] == ["Bipolar", "LGBTQ"]
        assert first["yearsOfExperience"] == 10
        assert first["phoneNumber"] == 5551234567
        assert isinstance(first["id"], int)
        assert "createdAt" in first

    def test_pages_are_ordered_and_disjoint(self, client) -> None:
        page1 = client.get("/advocates?page=1&limit=2").get_json()
        page2 = client.get("/advocates?page=2&limit=2").get_json()
        page3 = client.get("/advocates?page=3&limit=2").get_json()

        ids = [a["id"] for p in (page1, page2, page3) for a in p["data"]]
        assert ids == sorted(ids)
        assert len(set(ids)) == 5
        assert page2["pagination"]["hasNext"] is True
        assert page2["pagination"]["hasPrev"] is True
        assert page3["pagination"]["hasNext"] is False

    def test_page_beyond_last(self, client) -> None:
        body = client.get("/advocates?page=5&limit=2").get_json()
        assert body["data"] == []
        assert body["pagination"]["totalPages"] == 3
        assert body["pagination"]["hasNext"] is False
        assert body["pagination"]["hasPrev"] is True

    def test_limit_out_of_range(self, client) -> None:
        response = client.get("/advocates?limit=51")
        assert response.status_code == 400
        assert response.get_json() == {
            "error": "Validation failed",
            "message": "Limit must be between 1 and 50",
            "code": "LIMIT_OUT_OF_RANGE",
        }

    def test_limit_max_accepted(self, client) -> None:
        assert client.get("/advocates?limit=50").status_code == 200

    def test_invalid_page(self, client) -> None:
        response = client.get("/advocates?page=abc")
        assert response.status_code == 400
        assert response.get_json()["code"] == "INVALID_NUMBER"

    def test_non_ascii_digits_rejected(self, client) -> None:
        response = client.get("/advocates?page=%D9%A3")
        assert response.status_code == 400
        assert response.get_json()["code"] == "INVALID_NUMBER"

    def test_oversized_page_number(self, client) -> None:
        """A digit string too long to convert is a range error, not a 500"""
        response = client.get("/advocates?page=" + "9" * 5000)
        assert response.status_code == 400
        assert response.get_json() == {
            "error": "Validation failed",
            "message": "Page must be between 1 and 1000",
            "code": "PAGE_OUT_OF_RANGE",
        }


class TestSearchAdvocates:
    """Tests for GET /advocates/search."""

    def test_scenario_single_term(self, client) -> None:
        body = client.get("/advocates/search?q=john").get_json()
        assert [a["lastName"] for a in body["data"]] == ["Doe"]
        assert body["query"] == "john"
        assert body["pagination"]["total"] == 1

    def test_scenario_terms_across_fields(self, client) -> None:
        body = client.get("/advocates/search?q=oncology+austin").get_json()
        assert [(a["firstName"], a["city"]) for a in body["data"]] == [
            ("Sarah", "Austin")
        ]

    def test_echoes_sanitized_query(self, client) -> None:
        body = client.get("/advocates/search?q=%20%20oncology%20%20%20austin%20").get_json()
        assert body["query"] == "oncology austin"

    @pytest.mark.parametrize("q", [None, "", "%20%20%20"])
    def test_empty_query_equals_listing(self, client, q) -> None:
        url = "/advocates/search?page=1&limit=3"
        if q is not None:
            url += f"&q={q}"
        search = client.get(url).get_json()
        listing = client.get("/advocates?page=1&limit=3").get_json()

        assert search["query"] is None
        assert search["data"] == listing["data"]
        assert search["pagination"] == listing["pagination"]

    def test_search_pagination(self, client) -> None:
        body = client.get("/advocates/search?q=austin&limit=1&page=2").get_json()
        assert len(body["data"]) == 1
        assert body["pagination"] == {
            "page": 2,
            "limit": 1,
            "total": 2,
            "totalPages": 2,
            "hasNext": False,
            "hasPrev": True,
        }

    @pytest.mark.parametrize(
        "q",
        ["SELECT%20name", "%3Cscript%3E", "javascript:alert(1)", "%7Bx%7D", "a%5Cb"],
    )
    def test_invalid_characters(self, client, q) -> None:
        response = client.get(f"/advocates/search?q={q}")
        assert response.status_code == 400
        assert response.get_json()["code"] == "QUERY_INVALID_CHARS"

    def test_too_many_terms(self, client) -> None:
        q = "+".join(["a"] * 11)
        response = client.get(f"/advocates/search?q={q}")
        assert response.status_code == 400
        assert response.get_json()["code"] == "TOO_MANY_TERMS"

    def test_query_too_long(self, client) -> None:
        response = client.get(f"/advocates/search?q={'a' * 101}")
        assert response.status_code == 400
        assert response.get_json()["code"] == "QUERY_TOO_LONG"

    def test_page_out_of_range(self, client) -> None:
        response = client.get("/advocates/search?q=john&page=1001")
        assert response.status_code == 400
        assert response.get_json() == {
            "error": "Validation failed",
            "message": "Page must be between 1 and 1000",
            "code": "PAGE_OUT_OF_RANGE",
        }

    def test_validation_failure_skips_database(self, client, app, monkeypatch) -> None:
        repository = app.extensions["advocate_repository"]

        def fail(*args, **kwargs):
            raise AssertionError("database should not be queried")

        monkeypatch.setattr(repository, "fetch_page", fail)
        monkeypatch.setattr(repository, "count", fail)

        response = client.get("/advocates/search?limit=0")
        assert response.status_code == 400


class TestUnexpectedErrors:
    """Unexpected failures return a generic 500 body."""

    @pytest.mark.parametrize(
        "url,message",
        [
            ("/advocates", "Failed to fetch advocates"),
            ("/advocates/search?q=john", "Failed to search advocates"),
        ],
    )
    def test_database_failure(self, client, app, monkeypatch, url, message) -> None:
        repository = app.extensions["advocate_repository"]

        def broken_count(predicate):
            raise RuntimeError("connection refused to db-internal:5432")

        monkeypatch.setattr(repository, "count", broken_count)

        response = client.get(url)
        assert response.status_code == 500

        body = response.get_json()
        assert body["error"] == "Internal server error"
        assert body["message"] == message
        assert "timestamp" in body
        assert "db-internal" not in response.get_data(as_text=True)


class TestOpenApi:
    """Tests for the generated OpenAPI document."""

    def test_validation_error_schema_has_its_own_name(self, client) -> None:
        response = client.get("/openapi.json")
        assert response.status_code == 200

        schemas = response.get_json()["components"]["schemas"]
        assert "code" in schemas["ValidationError"]["properties"]
        assert "Error1" not in schemas

    def test_advocate_responses_documented(self, client) -> None:
        paths = client.get("/openapi.json").get_json()["paths"]
        for path in ("/advocates", "/advocates/search"):
            assert set(paths[path]["get"]["responses"]) >= {"200", "400"}


class TestHealth:
    """Tests for the health endpoints."""

    def test_health(self, client) -> None:
        body = client.get("/health/").get_json()
        assert body["status"] == "healthy"

    def test_ready(self, client) -> None:
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.get_json()["checks"]["database"] is True


class TestSeedCommand:
    """Tests for the seed-advocates CLI command."""

    def test_replaces_all_rows(self, app, client, reseed) -> None:
        result = app.test_cli_runner().invoke(seed_advocates)
        assert result.exit_code == 0
        assert f"Seeded {len(ADVOCATES)} advocates" in result.output

        body = client.get("/advocates?limit=50").get_json()
        assert body["pagination"]["total"] == len(ADVOCATES)
