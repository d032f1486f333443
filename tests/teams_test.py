import pytest


def test_create_team(client, acme):
    response = client.post(
        "/api/teams",
        json={"name": "Platform", "description": "Infra and tooling"},
        headers=acme["headers"],
    )

    assert response.status_code == 201
    team = response.get_json()["data"]
    assert team["name"] == "Platform"
    assert team["description"] == "Infra and tooling"
    assert team["organisation_id"] == acme["organisation"]["id"]
    assert team["employees"] == []


def test_create_team_requires_name(client, acme):
    response = client.post("/api/teams", json={"description": "No name"}, headers=acme["headers"])

    assert response.status_code == 400
    assert "name" in response.get_json()["message"]


def test_create_team_with_members(client, acme, globex, create_employee, create_team):
    jo = create_employee(acme["headers"], email="jo@acme.com")
    sam = create_employee(acme["headers"], first_name="Sam", email="sam@acme.com")
    outsider = create_employee(globex["headers"], email="x@globex.com")

    team = create_team(acme["headers"], employee_ids=[jo["id"], sam["id"], outsider["id"]])

    assert [member["id"] for member in team["employees"]] == [jo["id"], sam["id"]]


def test_list_teams_includes_members(client, acme, create_employee, create_team):
    jo = create_employee(acme["headers"])
    create_team(acme["headers"], name="Platform", employee_ids=[jo["id"]])
    create_team(acme["headers"], name="Data")

    response = client.get("/api/teams", headers=acme["headers"])

    assert response.status_code == 200
    teams = response.get_json()["data"]
    assert [team["name"] for team in teams] == ["Data", "Platform"]
    assert teams[1]["employees"][0]["email"] == "jo@acme.com"


def test_assign_is_idempotent(client, acme, create_employee, create_team, count_memberships):
    employee = create_employee(acme["headers"])
    team = create_team(acme["headers"])

    for _ in range(2):
        response = client.post(
            f"/api/teams/{team['id']}/assign",
            json={"employee_id": employee["id"]},
            headers=acme["headers"],
        )
        assert response.status_code == 200
        assert response.get_json()["message"] == "Employee assigned to team successfully"

    assert count_memberships(employee_id=employee["id"], team_id=team["id"]) == 1


def test_remove_member(client, acme, create_employee, create_team, count_memberships):
    employee = create_employee(acme["headers"])
    team = create_team(acme["headers"], employee_ids=[employee["id"]])

    response = client.post(
        f"/api/teams/{team['id']}/remove",
        json={"employee_id": employee["id"]},
        headers=acme["headers"],
    )

    assert response.status_code == 200
    assert count_memberships(team_id=team["id"]) == 0


def test_remove_non_member_succeeds(client, acme, create_employee, create_team):
    employee = create_employee(acme["headers"])
    team = create_team(acme["headers"])

    response = client.post(
        f"/api/teams/{team['id']}/remove",
        json={"employee_id": employee["id"]},
        headers=acme["headers"],
    )

    assert response.status_code == 200
    assert response.get_json()["message"] == "Employee removed from team successfully"


@pytest.mark.parametrize("action", ["assign", "remove"])
@pytest.mark.parametrize("payload", [{}, {"employee_id": "abc"}, {"employee_id": None}])
def test_membership_requires_employee_id(client, acme, create_team, action, payload):
    team = create_team(acme["headers"])

    response = client.post(
        f"/api/teams/{team['id']}/{action}", json=payload, headers=acme["headers"]
    )

    assert response.status_code == 400


def test_assign_unknown_employee(client, acme, create_team):
    team = create_team(acme["headers"])

    response = client.post(
        f"/api/teams/{team['id']}/assign", json={"employee_id": 999}, headers=acme["headers"]
    )

    assert response.status_code == 404
    assert response.get_json()["message"] == "Employee not found"


def test_assign_to_unknown_team(client, acme, create_employee):
    employee = create_employee(acme["headers"])

    response = client.post(
        "/api/teams/999/assign", json={"employee_id": employee["id"]}, headers=acme["headers"]
    )

    assert response.status_code == 404
    assert response.get_json()["message"] == "Team not found"


def test_cannot_mix_organisations(
    client, acme, globex, create_employee, create_team, count_memberships
):
    acme_team = create_team(acme["headers"])
    globex_employee = create_employee(globex["headers"], email="x@globex.com")

    response = client.post(
        f"/api/teams/{acme_team['id']}/assign",
        json={"employee_id": globex_employee["id"]},
        headers=acme["headers"],
    )

    assert response.status_code == 404
    assert count_memberships(team_id=acme_team["id"]) == 0


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", ""),
        ("put", ""),
        ("delete", ""),
        ("post", "/assign"),
        ("post", "/remove"),
    ],
)
def test_team_of_other_organisation_is_not_found(
    client, acme, globex, create_employee, create_team, method, path
):
    team = create_team(acme["headers"])
    employee = create_employee(globex["headers"], email="x@globex.com")

    response = getattr(client, method)(
        f"/api/teams/{team['id']}{path}",
        json={"name": "Hijacked", "employee_id": employee["id"]},
        headers=globex["headers"],
    )

    assert response.status_code == 404
    assert response.get_json()["message"] == "Team not found"
    unchanged = client.get(f"/api/teams/{team['id']}", headers=acme["headers"])
    assert unchanged.get_json()["data"]["name"] == "Platform"


def test_update_team_replaces_members(client, acme, create_employee, create_team):
    jo = create_employee(acme["headers"], email="jo@acme.com")
    sam = create_employee(acme["headers"], first_name="Sam", email="sam@acme.com")
    team = create_team(acme["headers"], employee_ids=[jo["id"]])

    response = client.put(
        f"/api/teams/{team['id']}",
        json={"name": "Core", "employee_ids": [sam["id"]]},
        headers=acme["headers"],
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["name"] == "Core"
    assert [member["id"] for member in data["employees"]] == [sam["id"]]


def test_update_team_keeps_members_when_ids_omitted(client, acme, create_employee, create_team):
    jo = create_employee(acme["headers"])
    team = create_team(acme["headers"], employee_ids=[jo["id"]])

    response = client.put(
        f"/api/teams/{team['id']}", json={"description": "Renamed"}, headers=acme["headers"]
    )

    assert response.status_code == 200
    assert [member["id"] for member in response.get_json()["data"]["employees"]] == [jo["id"]]


def test_update_team_rejects_null_name(client, acme, create_team):
    team = create_team(acme["headers"])

    response = client.put(f"/api/teams/{team['id']}", json={"name": None}, headers=acme["headers"])

    assert response.status_code == 400


def test_delete_team_clears_memberships(
    client, acme, create_employee, create_team, count_memberships
):
    employee = create_employee(acme["headers"])
    team = create_team(acme["headers"], employee_ids=[employee["id"]])

    response = client.delete(f"/api/teams/{team['id']}", headers=acme["headers"])

    assert response.status_code == 200
    assert count_memberships(team_id=team["id"]) == 0
    fetched = client.get(f"/api/employees/{employee['id']}", headers=acme["headers"])
    assert fetched.get_json()["data"]["teams"] == []


@pytest.mark.parametrize(
    "method,path", [("get", ""), ("put", ""), ("delete", ""), ("post", "/assign")]
)
def test_team_id_beyond_integer_range_is_not_found(
    client, acme, create_employee, method, path
):
    employee = create_employee(acme["headers"])

    response = getattr(client, method)(
        f"/api/teams/100000000000000000000{path}",
        json={"name": "Core", "employee_id": employee["id"]},
        headers=acme["headers"],
    )

    assert response.status_code == 404
    assert response.get_json()["message"] == "Team not found"


@pytest.mark.parametrize("employee_id", [100000000000000000000, 0, -3])
def test_assign_rejects_out_of_range_employee_id(client, acme, create_team, employee_id):
    team = create_team(acme["headers"])

    response = client.post(
        f"/api/teams/{team['id']}/assign",
        json={"employee_id": employee_id},
        headers=acme["headers"],
    )

    assert response.status_code == 400
