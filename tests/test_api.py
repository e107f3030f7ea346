"""Tests for the FastAPI routes.

Covers:
- GET /provinces: reference list ordered by name
- POST /members/validate: dry-run normalization
- POST /members: create, 422 with failures
- GET /members, GET /members/{id}
- PUT /members/{id}
- DELETE /members/{id}
"""
from __future__ import annotations

from fastapi.testclient import TestClient


def _body(**overrides) -> dict:
    body = {
        "first_name": "john",
        "last_name": "SMITH",
        "home_phone": "(416) 555-1234",
        "email": " john@sailclub.ca ",
        "year_joined": 2012,
        "province_code": "on",
        "postal_code": "k1a0b1",
    }
    body.update(overrides)
    return body


def _create(client: TestClient, **overrides) -> dict:
    resp = client.post("/members", json=_body(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestProvinces:
    def test_lists_provinces_by_name(self, client: TestClient) -> None:
        resp = client.get("/provinces")
        assert resp.status_code == 200
        body = resp.json()
        assert body[0] == {"code": "AL", "name": "Alabama", "country_code": "US"}
        assert {"code": "ON", "name": "Ontario", "country_code": "CA"} in body


class TestValidateEndpoint:
    def test_returns_normalized_member(self, client: TestClient) -> None:
        resp = client.post("/members/validate", json=_body())
        assert resp.status_code == 200
        body = resp.json()
        assert body["failures"] == []
        assert body["member"]["full_name"] == "Smith, John"
        assert body["member"]["postal_code"] == "K1A 0B1"
        assert body["member"]["email"] == "john@sailclub.ca"

    def test_reports_failures_in_rule_order(self, client: TestClient) -> None:
        resp = client.post(
            "/members/validate",
            json=_body(province_code="ZZ", home_phone="12345", email="", year_joined=None),
        )
        assert resp.status_code == 200
        assert [f["field"] for f in resp.json()["failures"]] == [
            "province_code",
            "home_phone",
            "year_joined",
            "email",
        ]

    def test_blank_year_joined_reaches_validator(self, client: TestClient) -> None:
        resp = client.post("/members/validate", json=_body(year_joined=""))
        assert resp.status_code == 200
        assert resp.json()["failures"] == [
            {"field": "year_joined", "message": "Year Joined cannot be empty for a new record"},
        ]

    def test_does_not_save(self, client: TestClient) -> None:
        client.post("/members/validate", json=_body())
        assert client.get("/members").json() == []


class TestCreateMember:
    def test_creates_member(self, client: TestClient) -> None:
        member = _create(client)
        assert member["member_id"] > 0
        assert member["home_phone"] == "416-555-1234"
        assert member["task_exempt"] is False

    def test_validation_failures_return_422(self, client: TestClient) -> None:
        resp = client.post("/members", json=_body(use_canada_post=True, street="", email=None))
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["failures"] == [
            {"field": "street", "message": "Member wants to use Canada Post - Street Address is required"},
            {"field": "city", "message": "Member wants to use Canada Post - City/Town is required"},
        ]
        assert detail["member"]["full_name"] == "Smith, John"

    def test_blank_required_field_rejected_before_validation(self, client: TestClient) -> None:
        resp = client.post("/members", json=_body(first_name="   "))
        assert resp.status_code == 422
        assert isinstance(resp.json()["detail"], list)

    def test_missing_required_field_rejected(self, client: TestClient) -> None:
        body = _body()
        del body["home_phone"]
        assert client.post("/members", json=body).status_code == 422


class TestReadMembers:
    def test_list_ordered_by_full_name(self, client: TestClient) -> None:
        _create(client, last_name="young")
        _create(client, last_name="adams")
        names = [m["full_name"] for m in client.get("/members").json()]
        assert names == ["Adams, John", "Young, John"]

    def test_list_respects_limit(self, client: TestClient) -> None:
        _create(client, last_name="young")
        _create(client, last_name="adams")
        assert len(client.get("/members", params={"limit": 1}).json()) == 1

    def test_get_member(self, client: TestClient) -> None:
        member = _create(client)
        resp = client.get(f"/members/{member['member_id']}")
        assert resp.status_code == 200
        assert resp.json()["full_name"] == "Smith, John"

    def test_get_unknown_member(self, client: TestClient) -> None:
        assert client.get("/members/9999").status_code == 404


class TestUpdateMember:
    def test_updates_member(self, client: TestClient) -> None:
        member = _create(client)
        resp = client.put(
            f"/members/{member['member_id']}",
            json=_body(spouse_first_name="jane", spouse_last_name="doe", year_joined=None),
        )
        assert resp.status_code == 200
        assert resp.json()["full_name"] == "Smith, John & Doe, Jane"

    def test_update_failures_return_422(self, client: TestClient) -> None:
        member = _create(client)
        resp = client.put(f"/members/{member['member_id']}", json=_body(year_joined=3000))
        assert resp.status_code == 422
        assert [f["field"] for f in resp.json()["detail"]["failures"]] == ["year_joined"]

    def test_update_unknown_member(self, client: TestClient) -> None:
        assert client.put("/members/9999", json=_body()).status_code == 404


class TestDeleteMember:
    def test_deletes_member(self, client: TestClient) -> None:
        member = _create(client)
        assert client.delete(f"/members/{member['member_id']}").status_code == 204
        assert client.get(f"/members/{member['member_id']}").status_code == 404

    def test_delete_unknown_member(self, client: TestClient) -> None:
        assert client.delete("/members/9999").status_code == 404
