"""Set operations on the employee/team membership table.

Functions here write through the session but never commit; the caller owns the
transaction. Adding an existing pair and removing a missing pair are no-ops.
"""

from sqlalchemy import and_, delete, insert, select

from app.database import db
from app.models.employee import Employee
from app.models.team import Team, employee_teams


def scoped_ids(model, ids, organisation_id: int) -> set[int]:
    """Keep only the ids of rows of ``model`` that belong to the organisation."""
    if not ids:
        return set()
    rows = db.session.execute(
        select(model.id).where(model.id.in_(set(ids)), model.organisation_id == organisation_id)
    )
    return {row[0] for row in rows}


def has_membership(employee_id: int, team_id: int) -> bool:
    """Check whether the employee is on the team."""
    found = db.session.execute(
        select(employee_teams.c.employee_id).where(
            employee_teams.c.employee_id == employee_id, employee_teams.c.team_id == team_id
        )
    ).first()
    return found is not None


def add_membership(employee_id: int, team_id: int) -> bool:
    """Put the employee on the team.

    Returns
    -------
    bool
        True if a link was inserted, False if it already existed.
    """
    if has_membership(employee_id, team_id):
        return False
    db.session.execute(insert(employee_teams).values(employee_id=employee_id, team_id=team_id))
    return True


def remove_membership(employee_id: int, team_id: int) -> bool:
    """Take the employee off the team.

    Returns
    -------
    bool
        True if a link was deleted, False if there was none.
    """
    result = db.session.execute(
        delete(employee_teams).where(
            and_(employee_teams.c.employee_id == employee_id, employee_teams.c.team_id == team_id)
        )
    )
    return result.rowcount > 0


def replace_team_members(team: Team, employee_ids) -> None:
    """Make the team's members exactly the given employees of its organisation."""
    wanted = scoped_ids(Employee, employee_ids, team.organisation_id)
    current = {
        row[0]
        for row in db.session.execute(
            select(employee_teams.c.employee_id).where(employee_teams.c.team_id == team.id)
        )
    }
    for employee_id in current - wanted:
        remove_membership(employee_id, team.id)
    for employee_id in wanted - current:
        add_membership(employee_id, team.id)


def replace_employee_teams(employee: Employee, team_ids) -> None:
    """Make the employee's teams exactly the given teams of its organisation."""
    wanted = scoped_ids(Team, team_ids, employee.organisation_id)
    current = {
        row[0]
        for row in db.session.execute(
            select(employee_teams.c.team_id).where(employee_teams.c.employee_id == employee.id)
        )
    }
    for team_id in current - wanted:
        remove_membership(employee.id, team_id)
    for team_id in wanted - current:
        add_membership(employee.id, team_id)


def clear_team(team_id: int) -> None:
    """Remove every membership of a team."""
    db.session.execute(delete(employee_teams).where(employee_teams.c.team_id == team_id))


def clear_employee(employee_id: int) -> None:
    """Remove every membership of an employee."""
    db.session.execute(delete(employee_teams).where(employee_teams.c.employee_id == employee_id))
