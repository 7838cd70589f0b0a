"""
Scheduling service package.

Usage:
    from datetime import date
    from shiftbuilder.services.scheduling import generate_schedule

    # Simple usage - load data and solve in one call
    result = generate_schedule(db, template_id=1, location_id=1,
                               start_date=date(2025, 1, 19), end_date=date(2025, 1, 25))

    # Or load context separately for inspection/testing
    from shiftbuilder.services.scheduling import load_schedule_context, generate_schedule_from_context

    context = load_schedule_context(db, 1, 1, date(2025, 1, 19), date(2025, 1, 25))
    result = generate_schedule_from_context(context)

    # Pure in-memory generation
    from shiftbuilder.services.scheduling import generate, DateRange
    result = generate(DateRange(start, end), rules, employees, availability)
"""

from .types import (
    Role,
    StaffingRule,
    Employee,
    AvailabilityRecord,
    GeneratedShift,
    ScheduleWarning,
    CoverageGap,
    DateRange,
    ScheduleContext,
    ScheduleResult,
    DEFAULT_MAX_WEEKLY_HOURS,
)
from .errors import (
    ScheduleInputError,
    InvalidTimeRange,
    NothingToGenerate,
    TemplateNotFoundError,
    SchedulePublishError,
)
from .data_loader import load_schedule_context
from .generator import generate, generate_schedule, generate_schedule_from_context
from .publisher import BatchInfo, publish_schedule
from .solver import solve_schedule

__all__ = [
    # Types
    "Role",
    "StaffingRule",
    "Employee",
    "AvailabilityRecord",
    "GeneratedShift",
    "ScheduleWarning",
    "CoverageGap",
    "DateRange",
    "ScheduleContext",
    "ScheduleResult",
    "DEFAULT_MAX_WEEKLY_HOURS",
    # Errors
    "ScheduleInputError",
    "InvalidTimeRange",
    "NothingToGenerate",
    "TemplateNotFoundError",
    "SchedulePublishError",
    # Main entry points
    "generate",
    "generate_schedule",
    "generate_schedule_from_context",
    "publish_schedule",
    "BatchInfo",
    # Lower-level functions
    "load_schedule_context",
    "solve_schedule",
]
