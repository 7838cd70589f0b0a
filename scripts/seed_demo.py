"""
Seed script for a ShiftBuilder development database.

One location (100001) with a default staffing template:
- Servers 11:00-15:00 and 17:00-22:00, two each, every day
- Bartender 17:00-23:00, one, Thu-Sat
- Cook 10:00-16:00, one, every day
- 6 employees with weekly availability, one date-specific day off

Run with: python -m scripts.seed_demo
"""

from datetime import date, time, timedelta

from shiftbuilder.db.database import Base, SessionLocal, engine
from shiftbuilder.db.models.availability import Availability
from shiftbuilder.db.models.employees import Employees
from shiftbuilder.db.models.shifts import ScheduleBatches, Shifts
from shiftbuilder.db.models.staffing import StaffingRules, StaffingTemplates


LOCATION_ID = 100001
ORGANIZATION_ID = 1
TEMPLATE_ID = 100001
ALL_DAYS = [0, 1, 2, 3, 4, 5, 6]


def clear_tables(db):
    """Delete all rows, children first."""
    print("Clearing tables...")
    for model in (Shifts, ScheduleBatches, Availability, StaffingRules, StaffingTemplates, Employees):
        db.query(model).delete()
    db.commit()


def seed_template(db):
    print("Seeding staffing template and rules...")
    db.add(StaffingTemplates(
        id=TEMPLATE_ID,
        location_id=LOCATION_ID,
        organization_id=ORGANIZATION_ID,
        name="Standard week",
        description="Default front and back of house coverage",
        is_default=True,
    ))
    db.flush()

    rules = [
        StaffingRules(id=100001, template_id=TEMPLATE_ID, role="cook",
                      start_time=time(10, 0), end_time=time(16, 0), min_staff=1, days_of_week=ALL_DAYS),
        StaffingRules(id=100002, template_id=TEMPLATE_ID, role="server",
                      start_time=time(11, 0), end_time=time(15, 0), min_staff=2, days_of_week=ALL_DAYS),
        StaffingRules(id=100003, template_id=TEMPLATE_ID, role="server",
                      start_time=time(17, 0), end_time=time(22, 0), min_staff=2, days_of_week=ALL_DAYS),
        StaffingRules(id=100004, template_id=TEMPLATE_ID, role="bartender",
                      start_time=time(17, 0), end_time=time(23, 0), min_staff=1, days_of_week=[4, 5, 6]),
    ]
    db.add_all(rules)
    db.commit()
    print(f"Seeded {len(rules)} staffing rules.")


def seed_employees(db):
    """Create employee records."""
    print("Seeding employees...")

    employees = [
        # Alice - server, covers bar, 40h
        Employees(id=100001, location_id=LOCATION_ID, organization_id=ORGANIZATION_ID,
                  first_name="Alice", last_name="Moreno", role="server",
                  secondary_roles=["bartender"], max_weekly_hours=40, hourly_rate=15.5),
        # Bob - server, 32h
        Employees(id=100002, location_id=LOCATION_ID, organization_id=ORGANIZATION_ID,
                  first_name="Bob", last_name="Ng", role="server",
                  secondary_roles=[], max_weekly_hours=32, hourly_rate=14.0),
        # Carol - server/host, no cap set (defaults to 40h)
        Employees(id=100003, location_id=LOCATION_ID, organization_id=ORGANIZATION_ID,
                  first_name="Carol", last_name="Price", role="server",
                  secondary_roles=["host"], max_weekly_hours=None, hourly_rate=14.5),
        # Dan - bartender, 30h
        Employees(id=100004, location_id=LOCATION_ID, organization_id=ORGANIZATION_ID,
                  first_name="Dan", last_name="Okafor", role="bartender",
                  secondary_roles=["server"], max_weekly_hours=30, hourly_rate=16.0),
        # Eve - cook, 40h
        Employees(id=100005, location_id=LOCATION_ID, organization_id=ORGANIZATION_ID,
                  first_name="Eve", last_name="Lindqvist", role="cook",
                  secondary_roles=["dishwasher"], max_weekly_hours=40, hourly_rate=18.0),
        # Frank - inactive, never scheduled
        Employees(id=100006, location_id=LOCATION_ID, organization_id=ORGANIZATION_ID,
                  first_name="Frank", last_name="Dube", role="server",
                  secondary_roles=[], max_weekly_hours=40, hourly_rate=14.0, is_active=False),
    ]
    db.add_all(employees)
    db.commit()
    print(f"Seeded {len(employees)} employees.")


def seed_availability(db, week_start: date):
    """Weekly defaults for everyone plus one date-specific day off."""
    print("Seeding availability...")

    weekly_windows = {
        100001: (time(10, 0), time(23, 0)),
        100002: (time(10, 0), time(22, 0)),
        100003: (time(11, 0), time(22, 0)),
        100004: (time(16, 0), time(23, 30)),
        100005: (time(8, 0), time(17, 0)),
        100006: (time(8, 0), time(23, 0)),
    }

    rows = []
    for employee_id, (start, end) in weekly_windows.items():
        for day in ALL_DAYS:
            rows.append(Availability(
                employee_id=employee_id, date=None, day_of_week=day,
                start_time=start, end_time=end, is_available=True,
            ))

    # Bob is off on the Wednesday of the seeded week
    wednesday = week_start + timedelta(days=3)
    rows.append(Availability(
        employee_id=100002, date=wednesday, day_of_week=3,
        start_time=time(0, 0), end_time=time(23, 59), is_available=False,
    ))

    db.add_all(rows)
    db.commit()
    print(f"Seeded {len(rows)} availability records.")


def get_next_sunday() -> date:
    today = date.today()
    return today + timedelta(days=(6 - today.weekday()) or 7)


def seed_demo(db, week_start: date) -> None:
    clear_tables(db)
    seed_employees(db)
    seed_template(db)
    seed_availability(db, week_start)


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    week_start = get_next_sunday()

    try:
        seed_demo(db, week_start)

        print("\n" + "=" * 50)
        print("Seeding complete!")
        print("=" * 50)
        print(f"\nGenerate with template_id={TEMPLATE_ID}, location_id={LOCATION_ID}")
        print(f"Week: {week_start} to {week_start + timedelta(days=6)}")
        print("=" * 50 + "\n")

    except Exception as e:
        db.rollback()
        print(f"\nError during seeding: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
