from datetime import date, timedelta

from scripts.seed_demo import LOCATION_ID, TEMPLATE_ID, seed_demo
from shiftbuilder.services.scheduling.constraints import validate_schedule
from shiftbuilder.services.scheduling.data_loader import load_schedule_context
from shiftbuilder.services.scheduling.generator import generate_schedule_from_context


WEEK_START = date(2025, 1, 19)  # Sunday


def test_seeded_week_generates_consistent_schedule(db):
    seed_demo(db, WEEK_START)
    context = load_schedule_context(db, TEMPLATE_ID, LOCATION_ID, WEEK_START, WEEK_START + timedelta(days=6))

    # Frank is inactive
    assert len(context.employees) == 5
    assert [r.start_time.hour for r in context.rules] == [10, 11, 17, 17]

    result = generate_schedule_from_context(context)
    assert validate_schedule(context, result)['valid'] is True

    wednesday = WEEK_START + timedelta(days=3)
    assert all(s.employee_id != 100002 for s in result.shifts if s.date == wednesday)
    assert all(s.employee_id != 100006 for s in result.shifts)


def test_reseeding_replaces_data(db):
    seed_demo(db, WEEK_START)
    seed_demo(db, WEEK_START)
    context = load_schedule_context(db, TEMPLATE_ID, LOCATION_ID, WEEK_START, WEEK_START)
    assert len(context.rules) == 4
