"""Employee routes for the HRMS API."""

from http import HTTPStatus

from flask import request
from flask_restx import Namespace, Resource, fields

from app.helpers.auth import CallerContext, org_required
from app.helpers.employees import (
    create_employee,
    delete_employee,
    get_employee,
    list_employees,
    serialize_employee,
    update_employee,
)
from app.helpers.responses import api_response
from app.helpers.validation import parse_payload
from app.schemas import EmployeeCreateRequest, EmployeeUpdateRequest

employees_ns = Namespace("employees", description="Employee records")

employee_model = employees_ns.model(
    "Employee",
    {
        "first_name": fields.String(required=True, description="First name"),
        "last_name": fields.String(required=True, description="Last name"),
        "email": fields.String(required=True, description="Email address"),
        "phone": fields.String(description="Phone number"),
        "position": fields.String(description="Job title"),
        "team_ids": fields.List(
            fields.Integer, description="Teams of the organisation to put the employee on"
        ),
    },
)


@employees_ns.route("")
class EmployeeList(Resource):
    """Employees of the caller's organisation."""

    @employees_ns.doc(security="Bearer Auth")
    @employees_ns.response(200, "Success")
    @employees_ns.response(401, "Missing or invalid token")
    @org_required
    def get(self, caller: CallerContext):
        """List employees, newest first."""
        return api_response(list_employees(caller.organisation_id))

    @employees_ns.doc(security="Bearer Auth")
    @employees_ns.expect(employee_model)
    @employees_ns.response(201, "Employee created")
    @employees_ns.response(400, "Validation error")
    @employees_ns.response(401, "Missing or invalid token")
    @org_required
    def post(self, caller: CallerContext):
        """Create an employee."""
        payload = parse_payload(EmployeeCreateRequest, request.get_json(silent=True))
        employee = create_employee(payload, caller.organisation_id)
        return api_response(
            serialize_employee(employee),
            message="Employee created successfully",
            status=HTTPStatus.CREATED,
        )


@employees_ns.route("/<int:employee_id>")
class EmployeeResource(Resource):
    """A single employee of the caller's organisation."""

    @employees_ns.doc(security="Bearer Auth")
    @employees_ns.response(200, "Success")
    @employees_ns.response(404, "Employee not found")
    @org_required
    def get(self, employee_id: int, caller: CallerContext):
        """Get an employee with their teams."""
        employee = get_employee(employee_id, caller.organisation_id)
        return api_response(serialize_employee(employee))

    @employees_ns.doc(security="Bearer Auth")
    @employees_ns.expect(employee_model)
    @employees_ns.response(200, "Employee updated")
    @employees_ns.response(400, "Validation error")
    @employees_ns.response(404, "Employee not found")
    @org_required
    def put(self, employee_id: int, caller: CallerContext):
        """Update an employee."""
        payload = parse_payload(EmployeeUpdateRequest, request.get_json(silent=True))
        employee = update_employee(employee_id, payload, caller.organisation_id)
        return api_response(serialize_employee(employee), message="Employee updated successfully")

    @employees_ns.doc(security="Bearer Auth")
    @employees_ns.response(200, "Employee deleted")
    @employees_ns.response(404, "Employee not found")
    @org_required
    def delete(self, employee_id: int, caller: CallerContext):
        """Delete an employee."""
        delete_employee(employee_id, caller.organisation_id)
        return api_response(message="Employee deleted successfully")
