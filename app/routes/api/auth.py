"""Auth routes for the HRMS API."""

from http import HTTPStatus

from flask import request
from flask_restx import Namespace, Resource, fields

from app.helpers.auth import (
    CallerContext,
    authenticate_user,
    org_required,
    profile_response,
    register_organisation,
)
from app.helpers.responses import api_response
from app.helpers.validation import parse_payload
from app.schemas import LoginRequest, RegisterRequest

auth_ns = Namespace("auth", description="Registration and authentication")

# Define request/response models for Swagger documentation
register_model = auth_ns.model(
    "Register",
    {
        "organisationName": fields.String(required=True, description="Organisation name"),
        "adminName": fields.String(required=True, description="Admin user's name"),
        "email": fields.String(required=True, description="Admin user's email address"),
        "password": fields.String(required=True, description="Password, at least 6 characters"),
    },
)

login_model = auth_ns.model(
    "Login",
    {
        "email": fields.String(required=True, description="User email address"),
        "password": fields.String(required=True, description="User password"),
    },
)

identity_model = auth_ns.model(
    "Identity",
    {
        "id": fields.Integer(description="ID"),
        "name": fields.String(description="Name"),
    },
)

session_model = auth_ns.model(
    "Session",
    {
        "token": fields.String(description="Bearer token, valid for 24 hours"),
        "user": fields.Nested(identity_model),
        "organisation": fields.Nested(identity_model),
    },
)

session_response_model = auth_ns.model(
    "SessionResponse",
    {
        "success": fields.Boolean(description="Whether the request succeeded"),
        "message": fields.String(description="Response message"),
        "data": fields.Nested(session_model),
    },
)


# To try this out:
# curl -X POST http://localhost:5000/api/auth/register \
#   -H "Content-Type: application/json" \
#   -d '{"organisationName": "Acme", "adminName": "Ann",
#        "email": "ann@acme.com", "password": "secret1"}'
@auth_ns.route("/register")
class RegisterResource(Resource):
    """Resource for organisation registration."""

    @auth_ns.expect(register_model)
    @auth_ns.response(201, "Organisation created", session_response_model)
    @auth_ns.response(400, "Validation error or email already registered")
    def post(self):
        """Create an organisation and its admin user, and return a token."""
        payload = parse_payload(RegisterRequest, request.get_json(silent=True))
        data = register_organisation(payload)
        return api_response(
            data, message="Organisation created successfully", status=HTTPStatus.CREATED
        )


@auth_ns.route("/login")
class LoginResource(Resource):
    """Resource for user login."""

    @auth_ns.expect(login_model)
    @auth_ns.response(200, "Success", session_response_model)
    @auth_ns.response(400, "Validation error")
    @auth_ns.response(401, "Invalid credentials")
    def post(self):
        """Authenticate with email and password and return a token."""
        payload = parse_payload(LoginRequest, request.get_json(silent=True))
        data = authenticate_user(payload)
        return api_response(data, message="Login successful")


@auth_ns.route("/profile")
class ProfileResource(Resource):
    """Resource for the caller's identity."""

    @auth_ns.doc(security="Bearer Auth")
    @auth_ns.response(200, "Success")
    @auth_ns.response(401, "Missing or invalid token")
    @org_required
    def get(self, caller: CallerContext):
        """Return the calling user and organisation."""
        return api_response(profile_response(caller))
