"""
Data loader for scheduling service.
Fetches all relevant data from the database and converts to internal types.
"""

from datetime import date
from sqlalchemy import select, and_, or_
from sqlalchemy.orm import Session

from shiftbuilder.db.models.availability import Availability
from shiftbuilder.db.models.employees import Employees
from shiftbuilder.db.models.staffing import StaffingRules, StaffingTemplates

from .errors import TemplateNotFoundError
from .types import (
    Employee,
    AvailabilityRecord,
    StaffingRule,
    DateRange,
    ScheduleContext,
)


def load_staffing_rules(db: Session, template_id: int) -> list[StaffingRule]:
    """Load a template's rules, earliest start first."""

    stmt = (
        select(StaffingRules)
        .where(StaffingRules.template_id == template_id)
        .order_by(StaffingRules.start_time, StaffingRules.id)
    )
    rows = db.execute(stmt).scalars().all()

    return [
        StaffingRule(
            id=r.id,
            template_id=r.template_id,
            role=r.role,
            start_time=r.start_time,
            end_time=r.end_time,
            min_staff=r.min_staff,
            days_of_week=list(r.days_of_week or []),
        )
        for r in rows
    ]


def load_employees(db: Session, location_id: int) -> list[Employee]:
    """Load active employees for a location."""

    stmt = (
        select(Employees)
        .where(
            and_(
                Employees.location_id == location_id,
                Employees.is_active == True,
            )
        )
        .order_by(Employees.id)
    )
    rows = db.execute(stmt).scalars().all()

    return [
        Employee(
            id=e.id,
            first_name=e.first_name,
            last_name=e.last_name,
            primary_role=e.role,
            secondary_roles=list(e.secondary_roles or []),
            max_weekly_hours=e.max_weekly_hours,
            hourly_rate=e.hourly_rate or 0.0,
            is_active=e.is_active,
        )
        for e in rows
    ]


def load_availability(
    db: Session,
    employee_ids: list[int],
    date_range: DateRange,
) -> list[AvailabilityRecord]:
    """Load weekly defaults plus date-specific records inside the range."""

    if not employee_ids:
        return []

    stmt = (
        select(Availability)
        .where(
            and_(
                Availability.employee_id.in_(employee_ids),
                or_(
                    Availability.date.is_(None),
                    and_(
                        Availability.date >= date_range.start,
                        Availability.date <= date_range.end,
                    ),
                ),
            )
        )
        .order_by(Availability.id)
    )
    rows = db.execute(stmt).scalars().all()

    return [
        AvailabilityRecord(
            employee_id=a.employee_id,
            date=a.date,
            day_of_week=a.day_of_week,
            start_time=a.start_time,
            end_time=a.end_time,
            is_available=a.is_available,
        )
        for a in rows
    ]


def load_schedule_context(
    db: Session,
    template_id: int,
    location_id: int,
    start_date: date,
    end_date: date,
) -> ScheduleContext:
    """
    Load everything needed to generate a schedule.

    Raises:
        TemplateNotFoundError: if the template does not exist
    """
    template = db.get(StaffingTemplates, template_id)
    if template is None:
        raise TemplateNotFoundError(f"Staffing template {template_id} not found")

    date_range = DateRange(start=start_date, end=end_date)
    rules = load_staffing_rules(db, template_id)
    employees = load_employees(db, location_id)
    availability = load_availability(db, [e.id for e in employees], date_range)

    return ScheduleContext(
        date_range=date_range,
        rules=rules,
        employees=employees,
        availability=availability,
        template_id=template_id,
        location_id=location_id,
    )
