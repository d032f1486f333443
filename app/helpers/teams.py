"""Team helper functions, including membership changes.

Every query filters on the caller's organisation; a team of another organisation is
reported exactly like a missing one.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.database import db
from app.helpers.employees import get_employee
from app.helpers.membership import (
    add_membership,
    clear_team,
    remove_membership,
    replace_team_members,
)
from app.models.team import Team
from app.schemas import TeamCreateRequest, TeamSchema, TeamUpdateRequest
from app.schemas.types import MAX_ROW_ID
from hrms.errors import InternalError, NotFoundError


def serialize_team(team: Team) -> dict:
    """Serialise a team with its members."""
    return TeamSchema.model_validate(team).model_dump(mode="json")


def list_teams(organisation_id: int) -> list[dict]:
    """List the organisation's teams, newest first."""
    teams = (
        Team.query.filter_by(organisation_id=organisation_id)
        .order_by(Team.created_at.desc(), Team.id.desc())
        .all()
    )
    return [serialize_team(team) for team in teams]


def get_team(team_id: int, organisation_id: int) -> Team:
    """Get a team of the organisation.

    Raises
    ------
    NotFoundError
        If there is no such team in the organisation.
    """
    if team_id > MAX_ROW_ID:
        raise NotFoundError("Team not found")
    team = Team.query.filter_by(id=team_id, organisation_id=organisation_id).first()
    if team is None:
        raise NotFoundError("Team not found")
    return team


def create_team(payload: TeamCreateRequest, organisation_id: int) -> Team:
    """Create a team and attach its initial members.

    Team and members are committed together; if attaching members fails the team is not
    created either.
    """
    try:
        team = Team(
            name=payload.name,
            description=payload.description,
            organisation_id=organisation_id,
        )
        db.session.add(team)
        db.session.flush()
        if payload.employee_ids:
            replace_team_members(team, payload.employee_ids)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error creating team: {e}")
        raise InternalError("Server error while creating team") from e

    logging.info(f"Team {team.id} created in organisation {organisation_id}")
    return team


def update_team(team_id: int, payload: TeamUpdateRequest, organisation_id: int) -> Team:
    """Update the fields sent in the payload; ``employee_ids`` replaces the members."""
    team = get_team(team_id, organisation_id)
    changes = payload.model_dump(include={"name", "description"}, exclude_unset=True)

    try:
        for field, value in changes.items():
            setattr(team, field, value)
        if payload.employee_ids is not None:
            replace_team_members(team, payload.employee_ids)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error updating team {team_id}: {e}")
        raise InternalError("Server error while updating team") from e

    logging.info(f"Team {team_id} updated in organisation {organisation_id}")
    return team


def delete_team(team_id: int, organisation_id: int) -> None:
    """Delete a team together with its memberships."""
    team = get_team(team_id, organisation_id)

    try:
        clear_team(team.id)
        db.session.delete(team)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error deleting team {team_id}: {e}")
        raise InternalError("Server error while deleting team") from e

    logging.info(f"Team {team_id} deleted from organisation {organisation_id}")


def assign_employee(team_id: int, employee_id: int, organisation_id: int) -> bool:
    """Put an employee of the organisation on one of its teams.

    Returns
    -------
    bool
        True if the employee was added, False if they were already a member.

    Raises
    ------
    NotFoundError
        If the team or the employee is not in the organisation.
    """
    team = get_team(team_id, organisation_id)
    employee = get_employee(employee_id, organisation_id)

    try:
        added = add_membership(employee.id, team.id)
        db.session.commit()
    except IntegrityError:
        # A concurrent request inserted the same pair first
        db.session.rollback()
        added = False
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error assigning employee {employee_id} to team {team_id}: {e}")
        raise InternalError("Server error while assigning employee to team") from e

    logging.info(f"Employee {employee_id} assigned to team {team_id} (new link: {added})")
    return added


def remove_employee(team_id: int, employee_id: int, organisation_id: int) -> bool:
    """Take an employee of the organisation off one of its teams.

    Returns
    -------
    bool
        True if the employee was removed, False if they were not a member.

    Raises
    ------
    NotFoundError
        If the team or the employee is not in the organisation.
    """
    team = get_team(team_id, organisation_id)
    employee = get_employee(employee_id, organisation_id)

    try:
        removed = remove_membership(employee.id, team.id)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error removing employee {employee_id} from team {team_id}: {e}")
        raise InternalError("Server error while removing employee from team") from e

    logging.info(f"Employee {employee_id} removed from team {team_id} (link existed: {removed})")
    return removed
