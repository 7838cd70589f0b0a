import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from shiftbuilder.api.deps import get_db
from shiftbuilder.core.config import settings
from shiftbuilder.db.models.shifts import ScheduleBatches
from shiftbuilder.schemas.schedules import (
    ScheduleGenerateRequest,
    ScheduleGenerateResponse,
    SchedulePublishRequest,
    ScheduleBatchResponse,
)
from shiftbuilder.services.scheduling import (
    BatchInfo,
    NothingToGenerate,
    ScheduleContext,
    ScheduleInputError,
    SchedulePublishError,
    ScheduleResult,
    TemplateNotFoundError,
    generate_schedule_from_context,
    load_schedule_context,
    publish_schedule,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["schedules"])


def _run_generation(db: Session, payload: ScheduleGenerateRequest) -> tuple[ScheduleContext, ScheduleResult]:
    """Load inputs and generate, mapping scheduling errors to HTTP errors."""
    num_days = (payload.end_date - payload.start_date).days + 1
    if num_days > settings.MAX_SCHEDULE_DAYS:
        raise HTTPException(
            status_code=422,
            detail=f"Date range too long ({num_days} days, max {settings.MAX_SCHEDULE_DAYS})",
        )

    try:
        context = load_schedule_context(
            db, payload.template_id, payload.location_id, payload.start_date, payload.end_date
        )
        result = generate_schedule_from_context(context)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NothingToGenerate as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ScheduleInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return context, result


def _to_response(context: ScheduleContext, result: ScheduleResult) -> dict:
    return {
        **result.to_dict(),
        "summary": {
            "total_shifts": len(result.shifts),
            "employees_scheduled": result.employee_count,
            "total_hours": result.total_hours,
            "labour_cost": round(result.labour_cost(context.employees), 2),
        },
    }


def _batch_response(batch: ScheduleBatches) -> dict:
    return {
        "id": batch.id,
        "location_id": batch.location_id,
        "organization_id": batch.organization_id,
        "template_id": batch.template_id,
        "start_date": batch.start_date,
        "end_date": batch.end_date,
        "status": batch.status.value,
        "created_by": batch.created_by,
        "approved_by": batch.approved_by,
        "approved_at": batch.approved_at,
        "published_at": batch.published_at,
        "overtime_warnings": batch.overtime_warnings,
        "coverage_gaps": batch.coverage_gaps,
        "shift_count": len(batch.shifts),
    }


@router.post("/generate", response_model=ScheduleGenerateResponse)
def generate_schedule_preview(
    payload: ScheduleGenerateRequest,
    db: Session = Depends(get_db),
):
    context, result = _run_generation(db, payload)
    return _to_response(context, result)


@router.post("/publish", response_model=ScheduleBatchResponse, status_code=status.HTTP_201_CREATED)
def publish_generated_schedule(
    payload: SchedulePublishRequest,
    db: Session = Depends(get_db),
):
    # generation is deterministic, so regenerating reproduces the reviewed preview
    context, result = _run_generation(db, payload)
    if not result.shifts:
        raise HTTPException(status_code=400, detail="Nothing to publish: no shifts were generated")

    info = BatchInfo(
        location_id=payload.location_id,
        organization_id=payload.organization_id,
        template_id=payload.template_id,
        created_by=payload.created_by,
        approved_by=payload.approved_by,
    )
    try:
        batch = publish_schedule(db, context, result, info)
    except ScheduleInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SchedulePublishError as e:
        logger.error(f"Publish failed for template {payload.template_id}: {e.__cause__}")
        raise HTTPException(status_code=503, detail="Failed to save schedule, please retry")

    return _batch_response(batch)
