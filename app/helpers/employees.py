"""Employee helper functions.

Every query filters on the caller's organisation; an employee of another organisation
is reported exactly like a missing one.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from app.database import db
from app.helpers.membership import clear_employee, replace_employee_teams
from app.models.employee import Employee
from app.schemas import EmployeeCreateRequest, EmployeeSchema, EmployeeUpdateRequest
from app.schemas.types import MAX_ROW_ID
from hrms.errors import InternalError, NotFoundError

EMPLOYEE_FIELDS = ("first_name", "last_name", "email", "phone", "position")


def serialize_employee(employee: Employee) -> dict:
    """Serialise an employee with its teams."""
    return EmployeeSchema.model_validate(employee).model_dump(mode="json")


def list_employees(organisation_id: int) -> list[dict]:
    """List the organisation's employees, newest first."""
    employees = (
        Employee.query.filter_by(organisation_id=organisation_id)
        .order_by(Employee.created_at.desc(), Employee.id.desc())
        .all()
    )
    return [serialize_employee(employee) for employee in employees]


def get_employee(employee_id: int, organisation_id: int) -> Employee:
    """Get an employee of the organisation.

    Raises
    ------
    NotFoundError
        If there is no such employee in the organisation.
    """
    if employee_id > MAX_ROW_ID:
        raise NotFoundError("Employee not found")
    employee = Employee.query.filter_by(id=employee_id, organisation_id=organisation_id).first()
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


def create_employee(payload: EmployeeCreateRequest, organisation_id: int) -> Employee:
    """Create an employee and its initial team memberships in one transaction."""
    try:
        employee = Employee(
            **payload.model_dump(include=set(EMPLOYEE_FIELDS)),
            organisation_id=organisation_id,
        )
        db.session.add(employee)
        db.session.flush()
        if payload.team_ids:
            replace_employee_teams(employee, payload.team_ids)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error creating employee: {e}")
        raise InternalError("Server error while creating employee") from e

    logging.info(f"Employee {employee.id} created in organisation {organisation_id}")
    return employee


def update_employee(
    employee_id: int, payload: EmployeeUpdateRequest, organisation_id: int
) -> Employee:
    """Update the fields sent in the payload; ``team_ids`` replaces the memberships."""
    employee = get_employee(employee_id, organisation_id)
    changes = payload.model_dump(include=set(EMPLOYEE_FIELDS), exclude_unset=True)

    try:
        for field, value in changes.items():
            setattr(employee, field, value)
        if payload.team_ids is not None:
            replace_employee_teams(employee, payload.team_ids)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error updating employee {employee_id}: {e}")
        raise InternalError("Server error while updating employee") from e

    logging.info(f"Employee {employee_id} updated in organisation {organisation_id}")
    return employee


def delete_employee(employee_id: int, organisation_id: int) -> None:
    """Delete an employee together with its memberships."""
    employee = get_employee(employee_id, organisation_id)

    try:
        clear_employee(employee.id)
        db.session.delete(employee)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error deleting employee {employee_id}: {e}")
        raise InternalError("Server error while deleting employee") from e

    logging.info(f"Employee {employee_id} deleted from organisation {organisation_id}")
