import pytest


def test_logs_are_paginated(client, acme, create_team):
    for index in range(4):
        create_team(acme["headers"], name=f"Team {index}")

    # organisation_registered plus four team creations
    first = client.get("/api/logs?page=1&limit=2", headers=acme["headers"]).get_json()["data"]
    last = client.get("/api/logs?page=3&limit=2", headers=acme["headers"]).get_json()["data"]

    assert first["total"] == 5
    assert first["page"] == 1
    assert first["totalPages"] == 3
    assert len(first["logs"]) == 2
    assert [entry["action"] for entry in last["logs"]] == ["organisation_registered"]


def test_logs_newest_first(client, acme, create_employee, create_team):
    create_employee(acme["headers"])
    create_team(acme["headers"])

    logs = client.get("/api/logs", headers=acme["headers"]).get_json()["data"]["logs"]

    assert [entry["action"] for entry in logs] == [
        "POST /api/teams",
        "POST /api/employees",
        "organisation_registered",
    ]
    assert logs[0]["user"] == {
        "id": acme["user"]["id"],
        "name": "Ann",
        "email": "ann@acme.com",
    }


def test_page_past_the_end_is_empty(client, acme):
    data = client.get("/api/logs?page=9", headers=acme["headers"]).get_json()["data"]

    assert data["logs"] == []
    assert data["total"] == 1
    assert data["page"] == 9
    assert data["totalPages"] == 1


def test_limit_is_capped(app, client, acme):
    app.config["LOGS_MAX_PAGE_SIZE"] = 1
    client.post("/api/teams", json={"name": "Platform"}, headers=acme["headers"])

    data = client.get("/api/logs?limit=500", headers=acme["headers"]).get_json()["data"]

    assert len(data["logs"]) == 1
    assert data["totalPages"] == 2


def test_filter_by_action(client, acme, create_employee, create_team):
    create_employee(acme["headers"], email="jo@acme.com")
    create_employee(acme["headers"], email="sam@acme.com")
    create_team(acme["headers"])

    response = client.get(
        "/api/logs", query_string={"action": "POST /api/employees"}, headers=acme["headers"]
    )

    data = response.get_json()["data"]
    assert data["total"] == 2
    assert {entry["action"] for entry in data["logs"]} == {"POST /api/employees"}


def test_logs_scoped_to_organisation(client, acme, globex, create_team):
    create_team(acme["headers"])

    data = client.get("/api/logs", headers=globex["headers"]).get_json()["data"]

    assert [entry["action"] for entry in data["logs"]] == ["organisation_registered"]
    assert data["logs"][0]["organisation_id"] == globex["organisation"]["id"]


@pytest.mark.parametrize("query", ["page=0", "page=-1", "page=abc", "limit=0", "limit=x"])
def test_invalid_paging_is_rejected(client, acme, query):
    response = client.get(f"/api/logs?{query}", headers=acme["headers"])

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_logs_require_token(client):
    response = client.get("/api/logs")

    assert response.status_code == 401


def test_huge_page_returns_empty_page(client, acme):
    response = client.get("/api/logs?page=100000000000000000000", headers=acme["headers"])

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["logs"] == []
    assert data["total"] == 1
