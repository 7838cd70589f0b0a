"""
Greedy schedule solver.

Strategy:
1. Walk every date in the range, oldest first
2. For each staffing rule that applies that day (in given order), build the
   pool of eligible, non-conflicting employees
3. Rank the pool by hours already assigned this run (fairness)
4. Assign until min_staff is met; overtime is flagged, never blocked
5. Record a coverage gap for any slot left short
"""

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from .availability import check_eligibility
from .constraints import has_conflict, rank_candidates
from .errors import InvalidTimeRange, ScheduleInputError
from .hours import duration_hours, sunday_based_weekday
from .types import (
    OVERTIME_WARNING,
    CoverageGap,
    DateRange,
    Employee,
    GeneratedShift,
    ScheduleContext,
    ScheduleResult,
    ScheduleWarning,
    StaffingRule,
    parse_role,
)


logger = logging.getLogger(__name__)


def validate_inputs(date_range: DateRange, rules: list[StaffingRule]) -> None:
    """
    Reject structurally invalid input before any processing.

    Raises:
        ScheduleInputError: inverted range, unknown role, bad min_staff or
            day of week
        InvalidTimeRange: a rule whose end time is not after its start
    """
    if date_range.end < date_range.start:
        raise ScheduleInputError(
            f"End date {date_range.end.isoformat()} is before start date {date_range.start.isoformat()}"
        )

    for rule in rules:
        parse_role(rule.role)
        if rule.end_time <= rule.start_time:
            raise InvalidTimeRange(
                f"Staffing rule {rule.id}: end time must be after start time ({rule.slot})"
            )
        if rule.min_staff < 1:
            raise ScheduleInputError(f"Staffing rule {rule.id}: min_staff must be at least 1")
        if any(d not in range(7) for d in rule.days_of_week):
            raise ScheduleInputError(f"Staffing rule {rule.id}: days_of_week must be within 0-6")


def _format_hours(hours: float) -> str:
    """One decimal place, exact halves rounded up (8.25 -> "8.3")."""
    return str(Decimal(str(hours)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _format_cap(hours: float) -> str:
    return f"{hours:g}"


class ScheduleSolver:
    """
    Greedy, fairness-ordered assignment of employees to staffing rules.

    One solver instance owns one run's hours ledger and shift list; create a
    new instance per generation.
    """

    def __init__(self, context: ScheduleContext):
        self.context = context
        self.shifts: list[GeneratedShift] = []
        self.warnings: list[ScheduleWarning] = []
        self.coverage_gaps: list[CoverageGap] = []
        self.employee_hours: dict[int, float] = {e.id: 0.0 for e in context.employees}

    def solve(self) -> ScheduleResult:
        """
        Main solving method.

        Returns:
            ScheduleResult with generated shifts, overtime warnings and coverage gaps
        """
        validate_inputs(self.context.date_range, self.context.rules)

        for day in self.context.date_range.days():
            day_of_week = sunday_based_weekday(day)
            for rule in self.context.rules:
                if day_of_week in rule.days_of_week:
                    self._cover_rule(rule, day)

        logger.info(
            f"Generated {len(self.shifts)} shifts over {self.context.date_range.num_days} days "
            f"({len(self.warnings)} overtime warnings, {len(self.coverage_gaps)} coverage gaps)"
        )
        return self._build_result()

    def _candidate_pool(self, rule: StaffingRule, day: date) -> list[Employee]:
        """Eligible employees with no overlapping shift already this day, ranked."""
        pool = []
        for emp in self.context.employees:
            ok, reason = check_eligibility(
                emp, day, rule.start_time, rule.end_time, rule.role, self.context.availability
            )
            if not ok:
                logger.debug(f"{day} {rule.slot} {rule.role.value}: skip employee {emp.id}: {reason}")
                continue
            if has_conflict(emp.id, day, rule.start_time, rule.end_time, self.shifts):
                logger.debug(f"{day} {rule.slot} {rule.role.value}: skip employee {emp.id}: already booked")
                continue
            pool.append(emp)

        return rank_candidates(pool, self.employee_hours)

    def _cover_rule(self, rule: StaffingRule, day: date):
        """Fill one rule's slot on one day."""
        shift_hours = duration_hours(rule.start_time, rule.end_time)
        scheduled = 0

        for emp in self._candidate_pool(rule, day):
            if scheduled >= rule.min_staff:
                break
            self._assign(emp, rule, day, shift_hours)
            scheduled += 1

        if scheduled < rule.min_staff:
            self.coverage_gaps.append(CoverageGap(
                date=day,
                role=rule.role,
                slot=rule.slot,
                needed=rule.min_staff,
                scheduled=scheduled,
            ))

    def _assign(self, employee: Employee, rule: StaffingRule, day: date, shift_hours: float):
        """Add a shift to the schedule and update the hours ledger."""
        new_hours = self.employee_hours.get(employee.id, 0.0) + shift_hours
        cap = employee.weekly_hours_cap
        warning = None

        if new_hours > cap:
            warning = f"Overtime: {_format_hours(new_hours)}h / {_format_cap(cap)}h max"
            self.warnings.append(ScheduleWarning(
                type=OVERTIME_WARNING,
                message=f"{employee.full_name} scheduled for {_format_hours(new_hours)}h (max: {_format_cap(cap)}h)",
                employee_id=employee.id,
            ))

        self.shifts.append(GeneratedShift(
            employee_id=employee.id,
            date=day,
            start_time=rule.start_time,
            end_time=rule.end_time,
            role=rule.role,
            warning=warning,
        ))
        self.employee_hours[employee.id] = new_hours

    def _build_result(self) -> ScheduleResult:
        return ScheduleResult(
            shifts=list(self.shifts),
            warnings=list(self.warnings),
            coverage_gaps=list(self.coverage_gaps),
        )


def solve_schedule(context: ScheduleContext) -> ScheduleResult:
    """
    Main entry point for schedule generation.

    Args:
        context: ScheduleContext with all required data

    Returns:
        ScheduleResult with generated shifts
    """
    solver = ScheduleSolver(context)
    return solver.solve()
