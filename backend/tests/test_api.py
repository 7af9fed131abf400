"""
Tests for the HTTP API: envelopes, status codes and error mapping.
"""

import uuid
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from fas.deps import get_session
from fas.main import app

API = "/api/v1"


async def post_applicant(client, name="Jane", employment_status="unemployed", born=None, **extra):
    payload = {
        "name": name,
        "employment_status": employment_status,
        "marital_status": "single",
        "sex": "female",
        "date_of_birth": (born or date(date.today().year - 30, 1, 1)).isoformat(),
        **extra,
    }
    response = await client.post(f"{API}/applicants/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def post_scheme(client, name="Retirement Support", criteria=()):
    response = await client.post(f"{API}/schemes/", json={"name": name})
    assert response.status_code == 201, response.text
    scheme = response.json()["data"]
    for criteria_name, value in criteria:
        response = await client.post(
            f"{API}/schemes/{scheme['id']}/criteria",
            json={"name": criteria_name, "value": value},
        )
        assert response.status_code == 201, response.text
    return scheme


async def test_root_endpoint(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


async def test_health_check(client):
    response = await client.get(f"{API}/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "healthy"


# ===== Applicants =====


async def test_applicant_crud(client):
    created = await post_applicant(client)
    assert created["employment_status"] == "unemployed"

    response = await client.get(f"{API}/applicants/{created['id']}")
    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["message"] == "Successfully retrieved applicant."
    assert body["data"]["name"] == "Jane"

    response = await client.put(
        f"{API}/applicants/{created['id']}", json={"employment_status": "employed"}
    )
    assert response.status_code == 200
    assert response.json()["data"]["employment_status"] == "employed"
    assert response.json()["data"]["name"] == "Jane"

    response = await client.get(f"{API}/applicants/")
    assert [a["id"] for a in response.json()["data"]] == [created["id"]]

    response = await client.delete(f"{API}/applicants/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Successfully deleted applicant.",
        "data": None,
    }

    response = await client.get(f"{API}/applicants/{created['id']}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Applicant not found."}


async def test_empty_update_rejected(client):
    created = await post_applicant(client)
    response = await client.put(f"{API}/applicants/{created['id']}", json={})
    assert response.status_code == 400
    assert response.json()["message"] == "No fields to update."


@pytest.mark.parametrize(
    "path, message",
    [
        ("/applicants/not-a-uuid", "Invalid applicant id."),
        ("/schemes/not-a-uuid", "Invalid scheme id."),
        ("/applications/not-a-uuid", "Invalid application id."),
    ],
)
async def test_malformed_ids(client, path, message):
    response = await client.get(f"{API}{path}")
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": message}


async def test_request_validation_error_envelope(client):
    response = await client.post(
        f"{API}/applicants/",
        json={"employment_status": "retired", "marital_status": "single", "sex": "male"},
    )
    body = response.json()
    assert response.status_code == 400
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert {"name", "employment_status"} <= set(body["errors"])


async def test_family_endpoints(client):
    parent = await post_applicant(client, name="Parent")
    child = await post_applicant(client, name="Child")

    response = await client.post(
        f"{API}/applicants/{parent['id']}/family",
        json={"related_applicant_id": child["id"], "relationship_type": "child"},
    )
    assert response.status_code == 201, response.text
    relationship = response.json()["data"]
    assert relationship["applicant_id"] == parent["id"]
    assert relationship["related_applicant_id"] == child["id"]
    assert relationship["related_applicant"]["name"] == "Child"

    response = await client.get(f"{API}/applicants/{parent['id']}/family")
    assert [r["id"] for r in response.json()["data"]] == [relationship["id"]]

    response = await client.delete(
        f"{API}/applicants/{parent['id']}/family/{relationship['id']}"
    )
    assert response.status_code == 200

    response = await client.get(f"{API}/applicants/{parent['id']}/family")
    assert response.json()["data"] == []


async def test_self_relationship_rejected(client):
    applicant = await post_applicant(client)
    response = await client.post(
        f"{API}/applicants/{applicant['id']}/family",
        json={"related_applicant_id": applicant["id"], "relationship_type": "spouse"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "An applicant cannot be related to themselves."


# ===== Schemes, benefits and criteria =====


async def test_scheme_with_benefits_and_criteria(client):
    scheme = await post_scheme(client, criteria=[("Age", ">=60")])

    response = await client.post(
        f"{API}/schemes/{scheme['id']}/benefits",
        json={"name": "Monthly allowance", "amount": "250.50"},
    )
    assert response.status_code == 201, response.text
    benefit = response.json()["data"]
    assert benefit["amount"] == 250.5

    response = await client.get(f"{API}/schemes/{scheme['id']}")
    data = response.json()["data"]
    assert [(c["name"], c["value"]) for c in data["criteria"]] == [("age", ">=60")]
    assert [b["id"] for b in data["benefits"]] == [benefit["id"]]

    response = await client.put(
        f"{API}/schemes/benefits/{benefit['id']}", json={"amount": 300}
    )
    assert response.status_code == 200
    assert response.json()["data"]["amount"] == 300.0

    response = await client.delete(f"{API}/schemes/benefits/{benefit['id']}")
    assert response.status_code == 200
    response = await client.get(f"{API}/schemes/{scheme['id']}")
    assert response.json()["data"]["benefits"] == []


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": "favorite_color", "value": "blue"}, "Invalid scheme criteria name."),
        ({"name": "age", "value": "abc"}, "Invalid age criteria value."),
        ({"name": "age"}, "Scheme criteria name and value are required."),
        ({"name": "marital_status", "value": "divorce"}, "Invalid marital status criteria value."),
    ],
)
async def test_invalid_criteria_rejected(client, payload, message):
    scheme = await post_scheme(client)
    response = await client.post(f"{API}/schemes/{scheme['id']}/criteria", json=payload)
    assert response.status_code == 400
    assert response.json()["message"].startswith(message)


async def test_criteria_update_and_delete(client):
    scheme = await post_scheme(client, criteria=[("has_children", "true")])
    criteria_id = (
        await client.get(f"{API}/schemes/{scheme['id']}")
    ).json()["data"]["criteria"][0]["id"]

    response = await client.put(f"{API}/schemes/criteria/{criteria_id}", json={"value": "FALSE"})
    assert response.status_code == 200
    assert response.json()["data"]["value"] == "false"

    response = await client.delete(f"{API}/schemes/criteria/{criteria_id}")
    assert response.status_code == 200
    response = await client.delete(f"{API}/schemes/criteria/{criteria_id}")
    assert response.status_code == 404
    assert response.json()["message"] == "Scheme criteria not found."


async def test_missing_scheme_returns_404(client):
    response = await client.get(f"{API}/schemes/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Scheme not found."}


async def test_eligible_schemes(client):
    this_year = date.today().year
    senior = await post_applicant(client, name="A", born=date(this_year - 65, 1, 1))
    employed = await post_applicant(
        client, name="B", employment_status="employed", born=date(this_year - 65, 1, 1)
    )
    younger = await post_applicant(client, name="C", born=date(this_year - 50, 1, 1))
    retirement = await post_scheme(
        client, criteria=[("employment_status", "unemployed"), ("age", ">=60")]
    )
    open_scheme = await post_scheme(client, name="Open Scheme")

    async def eligible_ids(applicant):
        response = await client.get(f"{API}/schemes/eligible", params={"applicant": applicant["id"]})
        assert response.status_code == 200
        return [s["id"] for s in response.json()["data"]]

    assert await eligible_ids(senior) == [retirement["id"], open_scheme["id"]]
    assert await eligible_ids(employed) == [open_scheme["id"]]
    assert await eligible_ids(younger) == [open_scheme["id"]]


async def test_eligible_schemes_requires_valid_applicant(client):
    response = await client.get(f"{API}/schemes/eligible")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid applicant id."

    response = await client.get(f"{API}/schemes/eligible", params={"applicant": str(uuid.uuid4())})
    assert response.status_code == 404


# ===== Applications =====


async def test_application_lifecycle(client):
    this_year = date.today().year
    senior = await post_applicant(client, name="A", born=date(this_year - 65, 1, 1))
    employed = await post_applicant(
        client, name="B", employment_status="employed", born=date(this_year - 65, 1, 1)
    )
    scheme = await post_scheme(
        client, criteria=[("employment_status", "unemployed"), ("age", ">=60")]
    )

    response = await client.post(
        f"{API}/applications/",
        json={"applicant_id": employed["id"], "scheme_id": scheme["id"]},
    )
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Applicant does not meet the eligibility criteria for the scheme.",
    }
    assert (await client.get(f"{API}/applications/")).json()["data"] == []

    response = await client.post(
        f"{API}/applications/",
        json={"applicant_id": senior["id"], "scheme_id": scheme["id"]},
    )
    assert response.status_code == 201, response.text
    application = response.json()["data"]
    assert application["applicant_id"] == senior["id"]

    response = await client.put(
        f"{API}/applications/{application['id']}", json={"applicant_id": employed["id"]}
    )
    assert response.status_code == 400

    response = await client.get(f"{API}/applications/{application['id']}")
    assert response.json()["data"]["applicant_id"] == senior["id"]

    response = await client.delete(f"{API}/applications/{application['id']}")
    assert response.status_code == 200
    response = await client.get(f"{API}/applications/{application['id']}")
    assert response.status_code == 404


async def test_application_malformed_body_ids(client):
    scheme = await post_scheme(client)
    response = await client.post(
        f"{API}/applications/", json={"applicant_id": "nope", "scheme_id": scheme["id"]}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid applicant id."

    applicant = await post_applicant(client)
    response = await client.post(
        f"{API}/applications/", json={"applicant_id": applicant["id"], "scheme_id": "nope"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid scheme id."


# ===== Unexpected errors =====


async def test_unexpected_error_is_generic_500():
    """Unhandled exceptions map to a fixed message without leaking details."""

    async def broken_session():
        raise RuntimeError("db password is hunter2")
        yield  # pragma: no cover

    app.dependency_overrides[get_session] = broken_session
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get(f"{API}/applicants/")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error."}
    assert "hunter2" not in response.text
