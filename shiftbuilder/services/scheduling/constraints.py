"""
Constraint utilities: double-booking detection, fairness ranking, and a
post-hoc audit of a generated schedule.
"""

from collections import defaultdict
from datetime import date, time

from .availability import resolve_availability
from .hours import sunday_based_weekday, times_overlap
from .types import (
    Employee,
    GeneratedShift,
    ScheduleContext,
    ScheduleResult,
    StaffingRule,
)


def has_conflict(
    employee_id: int,
    target_date: date,
    shift_start: time,
    shift_end: time,
    assigned_shifts: list[GeneratedShift],
) -> bool:
    """True if the employee already has an overlapping shift that day."""
    for shift in assigned_shifts:
        if shift.employee_id != employee_id or shift.date != target_date:
            continue
        if times_overlap(shift.start_time, shift.end_time, shift_start, shift_end):
            return True
    return False


def rank_candidates(
    candidates: list[Employee],
    hours_ledger: dict[int, float],
) -> list[Employee]:
    """
    Order candidates by hours already assigned this run, fewest first.

    Ties keep input order (sorted() is stable); there is no secondary key.
    """
    return sorted(candidates, key=lambda e: hours_ledger.get(e.id, 0))


def calculate_employee_hours(shifts: list[GeneratedShift], employee_id: int) -> float:
    """Calculate total hours assigned to an employee."""
    return sum(s.duration_hours for s in shifts if s.employee_id == employee_id)


def count_scheduled(shifts: list[GeneratedShift], target_date: date, rule: StaffingRule) -> int:
    """Shifts that fill a rule's slot on a date."""
    return sum(
        1 for s in shifts
        if s.date == target_date
        and s.role == rule.role
        and s.start_time == rule.start_time
        and s.end_time == rule.end_time
    )


def find_double_bookings(shifts: list[GeneratedShift]) -> list[tuple[GeneratedShift, GeneratedShift]]:
    by_employee_day: dict[tuple, list[GeneratedShift]] = defaultdict(list)
    for shift in shifts:
        by_employee_day[(shift.employee_id, shift.date)].append(shift)

    clashes = []
    for day_shifts in by_employee_day.values():
        for i, first in enumerate(day_shifts):
            for second in day_shifts[i + 1:]:
                if times_overlap(first.start_time, first.end_time, second.start_time, second.end_time):
                    clashes.append((first, second))
    return clashes


def validate_schedule(context: ScheduleContext, result: ScheduleResult) -> dict:
    """
    Audit a generated schedule against its inputs.

    Returns:
        {
            'valid': bool,
            'double_bookings': [(shift, shift)],
            'role_violations': [shift],
            'availability_violations': [shift],
            'unknown_employees': [shift],
            'coverage_mismatches': [(date, rule, scheduled)],
        }
    """
    emp_map = {e.id: e for e in context.employees}

    role_violations = []
    availability_violations = []
    unknown_employees = []
    for shift in result.shifts:
        employee = emp_map.get(shift.employee_id)
        if employee is None:
            unknown_employees.append(shift)
            continue
        if not employee.can_fill_role(shift.role):
            role_violations.append(shift)
        avail = resolve_availability(employee.id, shift.date, context.availability)
        if avail is None or not avail.is_available or not avail.contains(shift.start_time, shift.end_time):
            availability_violations.append(shift)

    # A gap must be reported for exactly the slots that fell short
    reported = {(g.date, g.role, g.slot): g.scheduled for g in result.coverage_gaps}
    coverage_mismatches = []
    for day in context.date_range.days():
        day_of_week = sunday_based_weekday(day)
        day_rules = [r for r in context.rules if day_of_week in r.days_of_week]
        slot_counts = defaultdict(int)
        for rule in day_rules:
            slot_counts[(rule.role, rule.slot)] += 1
        for rule in day_rules:
            # duplicate slots share shifts, so per-rule counts are ambiguous
            if slot_counts[(rule.role, rule.slot)] > 1:
                continue
            scheduled = count_scheduled(result.shifts, day, rule)
            short = scheduled < rule.min_staff
            key = (day, rule.role, rule.slot)
            if short and reported.get(key) != scheduled:
                coverage_mismatches.append((day, rule, scheduled))
            elif not short and key in reported:
                coverage_mismatches.append((day, rule, scheduled))

    double_bookings = find_double_bookings(result.shifts)

    return {
        'valid': not (
            double_bookings or role_violations or availability_violations
            or unknown_employees or coverage_mismatches
        ),
        'double_bookings': double_bookings,
        'role_violations': role_violations,
        'availability_violations': availability_violations,
        'unknown_employees': unknown_employees,
        'coverage_mismatches': coverage_mismatches,
    }
