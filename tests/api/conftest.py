import pytest
from datetime import time

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import shiftbuilder.db.models  # noqa: F401
from shiftbuilder.api.deps import get_db
from shiftbuilder.db.database import Base
from shiftbuilder.db.models.availability import Availability
from shiftbuilder.db.models.employees import Employees
from shiftbuilder.db.models.staffing import StaffingRules, StaffingTemplates
from shiftbuilder.main import app


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def restaurant(session_factory):
    """Template 1 with a Monday server rule, two servers available Mondays."""
    db = session_factory()
    db.add(StaffingTemplates(id=1, location_id=10, organization_id=1, name="Default", is_default=True))
    db.add(StaffingTemplates(id=2, location_id=10, organization_id=1, name="Empty"))
    db.add(StaffingRules(id=1, template_id=1, role="server", start_time=time(9, 0), end_time=time(17, 0),
                         min_staff=2, days_of_week=[1]))
    db.add_all([
        Employees(id=1, location_id=10, organization_id=1, first_name="Ana", last_name="Diaz",
                  role="server", secondary_roles=[], max_weekly_hours=40, hourly_rate=15),
        Employees(id=2, location_id=10, organization_id=1, first_name="Ben", last_name="Cole",
                  role="server", secondary_roles=[], max_weekly_hours=6, hourly_rate=12.5),
    ])
    db.add_all([
        Availability(employee_id=1, date=None, day_of_week=1, start_time=time(8, 0), end_time=time(18, 0)),
        Availability(employee_id=2, date=None, day_of_week=1, start_time=time(8, 0), end_time=time(18, 0)),
    ])
    db.commit()
    db.close()
