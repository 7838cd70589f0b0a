import pytest
from datetime import date, time

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import shiftbuilder.db.models  # noqa: F401  registers tables on Base.metadata
from shiftbuilder.db.database import Base
from shiftbuilder.services.scheduling.types import (
    AvailabilityRecord,
    DateRange,
    Employee,
    Role,
    StaffingRule,
)


# Fixed dates for deterministic tests
MONDAY = date(2025, 1, 20)
SUNDAY = date(2025, 1, 19)


@pytest.fixture
def monday() -> date:
    return MONDAY


@pytest.fixture
def week() -> DateRange:
    # Sunday to Saturday
    return DateRange(start=SUNDAY, end=date(2025, 1, 25))


@pytest.fixture
def server_rule() -> StaffingRule:
    # Monday lunch/dinner server slot
    return StaffingRule(
        id=1, template_id=1, role=Role.SERVER,
        start_time=time(9, 0), end_time=time(17, 0),
        min_staff=2, days_of_week=[1],
    )


@pytest.fixture
def two_servers() -> list[Employee]:
    return [
        Employee(id=1, first_name="Ana", last_name="Diaz", primary_role=Role.SERVER,
                 max_weekly_hours=40, hourly_rate=15.0),
        Employee(id=2, first_name="Ben", last_name="Cole", primary_role=Role.SERVER,
                 max_weekly_hours=40, hourly_rate=12.0),
    ]


@pytest.fixture
def mixed_staff() -> list[Employee]:
    # 1: server, 2: cook who can serve, 3: host only, 4: inactive server
    return [
        Employee(id=1, first_name="Ana", last_name="Diaz", primary_role=Role.SERVER),
        Employee(id=2, first_name="Ben", last_name="Cole", primary_role=Role.COOK,
                 secondary_roles=[Role.SERVER]),
        Employee(id=3, first_name="Cai", last_name="Wu", primary_role=Role.HOST),
        Employee(id=4, first_name="Dee", last_name="Ray", primary_role=Role.SERVER, is_active=False),
    ]


def weekly(employee_id: int, day_of_week: int, start: str = "08:00", end: str = "18:00",
           is_available: bool = True) -> AvailabilityRecord:
    return AvailabilityRecord(
        employee_id=employee_id, date=None, day_of_week=day_of_week,
        start_time=start, end_time=end, is_available=is_available,
    )


@pytest.fixture
def weekly_record():
    """Factory for weekly recurring availability records."""
    return weekly


@pytest.fixture
def all_week_availability():
    """Factory: every listed employee available 08:00-18:00 all week."""
    def _build(employee_ids, start="08:00", end="18:00"):
        return [weekly(emp_id, day, start, end) for emp_id in employee_ids for day in range(7)]
    return _build


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
