import pytest
from datetime import time

from sqlalchemy.exc import OperationalError

from shiftbuilder.db.models.shifts import BatchStatus, ScheduleBatches, Shifts
from shiftbuilder.services.scheduling.types import (
    DateRange,
    GeneratedShift,
    Role,
    ScheduleContext,
    ScheduleResult,
)
from shiftbuilder.services.scheduling.errors import ScheduleInputError, SchedulePublishError
from shiftbuilder.services.scheduling.publisher import BatchInfo, build_batch, publish_schedule
from shiftbuilder.services.scheduling.solver import solve_schedule


@pytest.fixture
def context(server_rule, two_servers, monday, weekly_record) -> ScheduleContext:
    # only one server available: one shift plus a coverage gap
    return ScheduleContext(
        date_range=DateRange(monday, monday),
        rules=[server_rule],
        employees=two_servers,
        availability=[weekly_record(1, 1)],
        template_id=None,
        location_id=10,
    )


@pytest.fixture
def info() -> BatchInfo:
    return BatchInfo(location_id=10, organization_id=1, created_by=1, approved_by=1)


class TestBuildBatch:

    def test_batch_fields(self, context, info, monday):
        from datetime import datetime, timezone
        result = solve_schedule(context)
        now = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
        batch = build_batch(context, result, info, now)

        assert batch.status == BatchStatus.PUBLISHED
        assert batch.start_date == monday and batch.end_date == monday
        assert batch.published_at == now and batch.approved_at == now
        assert batch.coverage_gaps == [{
            "date": "2025-01-20", "role": "server", "slot": "09:00 - 17:00",
            "needed": 2, "scheduled": 1,
        }]
        assert batch.overtime_warnings == []
        assert len(batch.shifts) == 1
        assert batch.shifts[0].role == "server"
        assert batch.shifts[0].is_published is True


class TestPublishSchedule:

    def test_persists_batch_and_shifts(self, db, context, info):
        result = solve_schedule(context)
        batch = publish_schedule(db, context, result, info)

        assert batch.id is not None
        assert db.query(ScheduleBatches).count() == 1
        rows = db.query(Shifts).all()
        assert len(rows) == 1
        assert rows[0].batch_id == batch.id
        assert rows[0].start_time == time(9, 0)
        assert rows[0].location_id == 10

    def test_failed_commit_saves_nothing(self, db, context, info, monkeypatch):
        result = solve_schedule(context)

        def boom():
            raise OperationalError("INSERT INTO shifts", {}, Exception("disk I/O error"))

        monkeypatch.setattr(db, "commit", boom)
        with pytest.raises(SchedulePublishError):
            publish_schedule(db, context, result, info)

        monkeypatch.undo()
        assert db.query(ScheduleBatches).count() == 0
        assert db.query(Shifts).count() == 0

        # the same result can be published on retry
        batch = publish_schedule(db, context, result, info)
        assert len(batch.shifts) == 1

    def test_rejects_inconsistent_result(self, db, context, info, monday):
        # employee 2 has no availability on file
        tampered = ScheduleResult(shifts=[
            GeneratedShift(employee_id=2, date=monday, start_time=time(9, 0),
                           end_time=time(17, 0), role=Role.SERVER),
        ])
        with pytest.raises(ScheduleInputError):
            publish_schedule(db, context, tampered, info)
        assert db.query(ScheduleBatches).count() == 0
