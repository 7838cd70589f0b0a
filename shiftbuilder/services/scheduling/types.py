"""
Internal data types for scheduling logic.
decoupled from SQLAlchemy models for cleaner logic.

Days of week follow the storage convention: 0 = Sunday ... 6 = Saturday.
"""

from collections import defaultdict
from dataclasses import dataclass, field, asdict
from datetime import date, time, timedelta
from enum import Enum
from typing import Iterator, Optional, Union

from .errors import ScheduleInputError
from .hours import duration_hours, format_slot, format_time, parse_time


DEFAULT_MAX_WEEKLY_HOURS = 40.0
OVERTIME_WARNING = "overtime"


class Role(str, Enum):
    SERVER = "server"
    BARTENDER = "bartender"
    COOK = "cook"
    HOST = "host"
    BUSSER = "busser"
    DISHWASHER = "dishwasher"


def parse_role(value: Union[Role, str]) -> Role:
    try:
        return Role(value)
    except ValueError:
        raise ScheduleInputError(f"Unknown role: {value!r}") from None


@dataclass
class StaffingRule:
    id: int
    template_id: Optional[int]
    role: Role
    start_time: time
    end_time: time
    min_staff: int = 1
    days_of_week: list[int] = field(default_factory=lambda: list(range(7)))

    def __post_init__(self):
        self.role = parse_role(self.role)
        self.start_time = parse_time(self.start_time)
        self.end_time = parse_time(self.end_time)

    @property
    def slot(self) -> str:
        return format_slot(self.start_time, self.end_time)

    @property
    def duration_hours(self) -> float:
        return duration_hours(self.start_time, self.end_time)


@dataclass
class Employee:
    id: int
    first_name: str
    last_name: str
    primary_role: Role
    secondary_roles: list[Role] = field(default_factory=list)
    max_weekly_hours: Optional[float] = None  # unset/0 falls back to DEFAULT_MAX_WEEKLY_HOURS
    hourly_rate: float = 0.0
    is_active: bool = True

    def __post_init__(self):
        self.primary_role = parse_role(self.primary_role)
        self.secondary_roles = [parse_role(r) for r in self.secondary_roles or []]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def weekly_hours_cap(self) -> float:
        return self.max_weekly_hours or DEFAULT_MAX_WEEKLY_HOURS

    def can_fill_role(self, role: Union[Role, str]) -> bool:
        return self.primary_role == role or role in self.secondary_roles


@dataclass
class AvailabilityRecord:
    employee_id: int
    date: Optional[date]  # None means weekly recurring default
    day_of_week: int  # 0-6, Sunday = 0
    start_time: time
    end_time: time
    is_available: bool = True

    def __post_init__(self):
        self.start_time = parse_time(self.start_time)
        self.end_time = parse_time(self.end_time)

    def contains(self, start: time, end: time) -> bool:
        """True if [start, end) lies entirely inside this window."""
        return self.start_time <= start and end <= self.end_time


@dataclass
class GeneratedShift:
    """A proposed shift. Becomes durable only once published in a batch."""
    employee_id: int
    date: date
    start_time: time
    end_time: time
    role: Role
    warning: Optional[str] = None

    @property
    def duration_hours(self) -> float:
        return duration_hours(self.start_time, self.end_time)

    @property
    def slot(self) -> str:
        return format_slot(self.start_time, self.end_time)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "date": self.date.isoformat(),
            "start_time": format_time(self.start_time),
            "end_time": format_time(self.end_time),
            "role": Role(self.role).value,
            "warning": self.warning,
        }


@dataclass
class ScheduleWarning:
    type: str
    message: str
    employee_id: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CoverageGap:
    date: date
    role: Role
    slot: str  # "HH:MM - HH:MM"
    needed: int
    scheduled: int

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "role": Role(self.role).value,
            "slot": self.slot,
            "needed": self.needed,
            "scheduled": self.scheduled,
        }


@dataclass
class DateRange:
    """Inclusive calendar range."""
    start: date
    end: date

    def days(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    @property
    def num_days(self) -> int:
        return max((self.end - self.start).days + 1, 0)


@dataclass
class ScheduleContext:
    """All data needed to generate a schedule for one template/date range."""
    date_range: DateRange
    rules: list[StaffingRule]
    employees: list[Employee]
    availability: list[AvailabilityRecord]
    template_id: Optional[int] = None
    location_id: Optional[int] = None


@dataclass
class ScheduleResult:
    """Output of one generation run."""
    shifts: list[GeneratedShift] = field(default_factory=list)
    warnings: list[ScheduleWarning] = field(default_factory=list)
    coverage_gaps: list[CoverageGap] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Every staffing minimum was met (overtime does not count against this)."""
        return not self.coverage_gaps

    @property
    def has_issues(self) -> bool:
        return bool(self.warnings or self.coverage_gaps)

    @property
    def total_hours(self) -> float:
        return sum(s.duration_hours for s in self.shifts)

    @property
    def employee_count(self) -> int:
        return len({s.employee_id for s in self.shifts})

    def hours_by_employee(self) -> dict[int, float]:
        hours: dict[int, float] = defaultdict(float)
        for shift in self.shifts:
            hours[shift.employee_id] += shift.duration_hours
        return dict(hours)

    def labour_cost(self, employees: list[Employee]) -> float:
        """Estimated wage cost at each employee's hourly rate."""
        rates = {e.id: e.hourly_rate or 0 for e in employees}
        return sum(s.duration_hours * rates.get(s.employee_id, 0) for s in self.shifts)

    def shifts_for(self, employee_id: int, on: date) -> list[GeneratedShift]:
        return [s for s in self.shifts if s.employee_id == employee_id and s.date == on]

    def to_dict(self) -> dict:
        return {
            "shifts": [s.to_dict() for s in self.shifts],
            "warnings": [w.to_dict() for w in self.warnings],
            "coverage_gaps": [g.to_dict() for g in self.coverage_gaps],
        }
