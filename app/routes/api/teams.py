"""Team routes for the HRMS API."""

from http import HTTPStatus

from flask import request
from flask_restx import Namespace, Resource, fields

from app.helpers.auth import CallerContext, org_required
from app.helpers.responses import api_response
from app.helpers.teams import (
    assign_employee,
    create_team,
    delete_team,
    get_team,
    list_teams,
    remove_employee,
    serialize_team,
    update_team,
)
from app.helpers.validation import parse_payload
from app.schemas import MembershipRequest, TeamCreateRequest, TeamUpdateRequest

teams_ns = Namespace("teams", description="Teams and team membership")

team_model = teams_ns.model(
    "Team",
    {
        "name": fields.String(required=True, description="Team name"),
        "description": fields.String(description="Team description"),
        "employee_ids": fields.List(
            fields.Integer, description="Employees of the organisation to put on the team"
        ),
    },
)

membership_model = teams_ns.model(
    "Membership",
    {"employee_id": fields.Integer(required=True, description="Employee ID")},
)


@teams_ns.route("")
class TeamList(Resource):
    """Teams of the caller's organisation."""

    @teams_ns.doc(security="Bearer Auth")
    @teams_ns.response(200, "Success")
    @teams_ns.response(401, "Missing or invalid token")
    @org_required
    def get(self, caller: CallerContext):
        """List teams with their members, newest first."""
        return api_response(list_teams(caller.organisation_id))

    @teams_ns.doc(security="Bearer Auth")
    @teams_ns.expect(team_model)
    @teams_ns.response(201, "Team created")
    @teams_ns.response(400, "Validation error")
    @org_required
    def post(self, caller: CallerContext):
        """Create a team, optionally with initial members."""
        payload = parse_payload(TeamCreateRequest, request.get_json(silent=True))
        team = create_team(payload, caller.organisation_id)
        return api_response(
            serialize_team(team), message="Team created successfully", status=HTTPStatus.CREATED
        )


@teams_ns.route("/<int:team_id>")
class TeamResource(Resource):
    """A single team of the caller's organisation."""

    @teams_ns.doc(security="Bearer Auth")
    @teams_ns.response(200, "Success")
    @teams_ns.response(404, "Team not found")
    @org_required
    def get(self, team_id: int, caller: CallerContext):
        """Get a team with its members."""
        team = get_team(team_id, caller.organisation_id)
        return api_response(serialize_team(team))

    @teams_ns.doc(security="Bearer Auth")
    @teams_ns.expect(team_model)
    @teams_ns.response(200, "Team updated")
    @teams_ns.response(400, "Validation error")
    @teams_ns.response(404, "Team not found")
    @org_required
    def put(self, team_id: int, caller: CallerContext):
        """Update a team."""
        payload = parse_payload(TeamUpdateRequest, request.get_json(silent=True))
        team = update_team(team_id, payload, caller.organisation_id)
        return api_response(serialize_team(team), message="Team updated successfully")

    @teams_ns.doc(security="Bearer Auth")
    @teams_ns.response(200, "Team deleted")
    @teams_ns.response(404, "Team not found")
    @org_required
    def delete(self, team_id: int, caller: CallerContext):
        """Delete a team."""
        delete_team(team_id, caller.organisation_id)
        return api_response(message="Team deleted successfully")


@teams_ns.route("/<int:team_id>/assign")
class TeamAssign(Resource):
    """Add an employee to a team."""

    @teams_ns.doc(security="Bearer Auth")
    @teams_ns.expect(membership_model)
    @teams_ns.response(200, "Employee is on the team")
    @teams_ns.response(400, "Validation error")
    @teams_ns.response(404, "Team or employee not found")
    @org_required
    def post(self, team_id: int, caller: CallerContext):
        """Put an employee on the team; assigning an existing member is a no-op."""
        payload = parse_payload(MembershipRequest, request.get_json(silent=True))
        assign_employee(team_id, payload.employee_id, caller.organisation_id)
        return api_response(message="Employee assigned to team successfully")


@teams_ns.route("/<int:team_id>/remove")
class TeamRemove(Resource):
    """Remove an employee from a team."""

    @teams_ns.doc(security="Bearer Auth")
    @teams_ns.expect(membership_model)
    @teams_ns.response(200, "Employee is not on the team")
    @teams_ns.response(400, "Validation error")
    @teams_ns.response(404, "Team or employee not found")
    @org_required
    def post(self, team_id: int, caller: CallerContext):
        """Take an employee off the team; removing a non-member is a no-op."""
        payload = parse_payload(MembershipRequest, request.get_json(silent=True))
        remove_employee(team_id, payload.employee_id, caller.organisation_id)
        return api_response(message="Employee removed from team successfully")
