"""
Availability checking utilities.
Determines if an employee can work a given shift.
"""

from datetime import date, time
from typing import Optional

from .hours import sunday_based_weekday
from .types import (
    Employee,
    AvailabilityRecord,
    Role,
)


def resolve_availability(
    employee_id: int,
    target_date: date,
    records: list[AvailabilityRecord]
) -> Optional[AvailabilityRecord]:
    """
    Get the availability record that applies to an employee on a date.

    A date-specific record always wins, even when it marks the employee as
    unavailable. Otherwise the weekly default for that day of week applies.

    Returns:
        The applicable record, or None (no info = unavailable)
    """
    for record in records:
        if record.employee_id == employee_id and record.date == target_date:
            return record

    day_of_week = sunday_based_weekday(target_date)
    for record in records:
        if (
            record.employee_id == employee_id
            and record.date is None
            and record.day_of_week == day_of_week
        ):
            return record

    return None


def check_eligibility(
    employee: Employee,
    target_date: date,
    shift_start: time,
    shift_end: time,
    role: Role,
    records: list[AvailabilityRecord],
) -> tuple[bool, str]:
    """
    Check if an employee may be assigned a shift.
    """
    if not employee.is_active:
        return False, "Employee is not active"

    availability = resolve_availability(employee.id, target_date, records)
    if availability is None:
        return False, "No availability on file for this date"
    if not availability.is_available:
        return False, "Employee marked unavailable"

    # Must be available for the entire shift, no partial coverage
    if not availability.contains(shift_start, shift_end):
        return False, "Shift falls outside availability window"

    if not employee.can_fill_role(role):
        return False, f"Employee cannot work role {Role(role).value}"

    return True, "OK"


def can_work(
    employee: Employee,
    target_date: date,
    shift_start: time,
    shift_end: time,
    role: Role,
    records: list[AvailabilityRecord],
) -> bool:
    ok, _ = check_eligibility(employee, target_date, shift_start, shift_end, role, records)
    return ok


def get_eligible_employees(
    employees: list[Employee],
    target_date: date,
    shift_start: time,
    shift_end: time,
    role: Role,
    records: list[AvailabilityRecord],
) -> list[Employee]:
    """Employees who can work the shift, in input order."""
    return [
        emp for emp in employees
        if can_work(emp, target_date, shift_start, shift_end, role, records)
    ]
