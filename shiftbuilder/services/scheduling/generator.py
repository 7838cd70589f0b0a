"""
Schedule generator - main orchestration layer.

This module provides the high-level API for generating schedules,
combining data loading and solving into a single flow.
"""

from datetime import date
from sqlalchemy.orm import Session

from .data_loader import load_schedule_context
from .errors import NothingToGenerate
from .solver import solve_schedule
from .types import (
    AvailabilityRecord,
    DateRange,
    Employee,
    ScheduleContext,
    ScheduleResult,
    StaffingRule,
)


def generate(
    date_range: DateRange,
    rules: list[StaffingRule],
    employees: list[Employee],
    availability: list[AvailabilityRecord],
) -> ScheduleResult:
    """
    Generate shifts from in-memory inputs. Pure: no I/O, no shared state.

    Empty rules, employees or availability give an empty result, not an error.

    Raises:
        ScheduleInputError: inverted date range, a rule with start >= end,
            or an unknown role
    """
    context = ScheduleContext(
        date_range=date_range,
        rules=rules,
        employees=employees,
        availability=availability,
    )
    return solve_schedule(context)


def generate_schedule(
    db: Session,
    template_id: int,
    location_id: int,
    start_date: date,
    end_date: date,
) -> ScheduleResult:
    """
    Generate a schedule for a location from a staffing template.

    main entry point for schedule generation. This function:
    1. Loads the template's rules, active employees and availability
    2. Runs the greedy solver
    3. Returns the result with generated shifts

    Args:
        db: Database session
        template_id: Staffing template whose rules drive generation
        location_id: Location whose employees are scheduled
        start_date: First day of the range
        end_date: Last day of the range (inclusive)

    Returns:
        ScheduleResult containing:
        - shifts: list of GeneratedShift objects
        - warnings: overtime warnings
        - coverage_gaps: slots that could not be fully staffed

    Raises:
        TemplateNotFoundError: If the template does not exist
        NothingToGenerate: If the template has no staffing rules
        ScheduleInputError: If the range or rules are invalid

    Example:
        from datetime import date
        from shiftbuilder.services.scheduling import generate_schedule

        result = generate_schedule(db, template_id=1, location_id=1,
                                   start_date=date(2025, 1, 19), end_date=date(2025, 1, 25))

        for gap in result.coverage_gaps:
            print(f"{gap.date} {gap.role.value} {gap.slot}: {gap.scheduled}/{gap.needed}")
    """
    context = load_schedule_context(db, template_id, location_id, start_date, end_date)
    return generate_schedule_from_context(context)


def generate_schedule_from_context(context: ScheduleContext) -> ScheduleResult:
    """
    Generate a schedule from a pre-loaded context.

    Useful for testing or when you want to manipulate the context
    before solving.

    Raises:
        NothingToGenerate: If the context has no staffing rules
    """
    if not context.rules:
        raise NothingToGenerate()
    return solve_schedule(context)
