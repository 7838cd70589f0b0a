"""
Publishing a generated schedule.

The batch row and all of its shift rows are written in one transaction:
either everything commits or nothing does.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shiftbuilder.db.models.shifts import BatchStatus, ScheduleBatches, Shifts

from .constraints import validate_schedule
from .errors import ScheduleInputError, SchedulePublishError
from .types import Role, ScheduleContext, ScheduleResult


logger = logging.getLogger(__name__)


@dataclass
class BatchInfo:
    """Batch metadata supplied by the calling layer."""
    location_id: int
    organization_id: int
    template_id: Optional[int] = None
    created_by: Optional[int] = None
    approved_by: Optional[int] = None


def build_batch(
    context: ScheduleContext,
    result: ScheduleResult,
    info: BatchInfo,
    published_at: datetime,
) -> ScheduleBatches:
    """Build (unsaved) batch and shift rows for a result."""
    batch = ScheduleBatches(
        location_id=info.location_id,
        organization_id=info.organization_id,
        template_id=info.template_id,
        start_date=context.date_range.start,
        end_date=context.date_range.end,
        status=BatchStatus.PUBLISHED,
        created_by=info.created_by,
        approved_by=info.approved_by,
        approved_at=published_at,
        published_at=published_at,
        overtime_warnings=[w.to_dict() for w in result.warnings],
        coverage_gaps=[g.to_dict() for g in result.coverage_gaps],
    )
    batch.shifts = [
        Shifts(
            location_id=info.location_id,
            organization_id=info.organization_id,
            employee_id=s.employee_id,
            date=s.date,
            start_time=s.start_time,
            end_time=s.end_time,
            role=Role(s.role).value,
            is_published=True,
        )
        for s in result.shifts
    ]
    return batch


def publish_schedule(
    db: Session,
    context: ScheduleContext,
    result: ScheduleResult,
    info: BatchInfo,
) -> ScheduleBatches:
    """
    Persist a generated schedule as a published batch.

    Raises:
        ScheduleInputError: if the result does not hold up against its inputs
            (double bookings, role or availability violations)
        SchedulePublishError: if the database write fails; nothing is saved
            and the same result can be published again
    """
    audit = validate_schedule(context, result)
    if not audit['valid']:
        raise ScheduleInputError("Generated schedule is inconsistent with its inputs; regenerate before publishing")

    batch = build_batch(context, result, info, datetime.now(timezone.utc))

    try:
        db.add(batch)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to publish schedule for location {info.location_id}: {e}")
        raise SchedulePublishError("Failed to publish schedule") from e

    db.refresh(batch)
    logger.info(
        f"Published batch {batch.id} for location {info.location_id}: "
        f"{len(result.shifts)} shifts, {context.date_range.start} to {context.date_range.end}"
    )
    return batch
