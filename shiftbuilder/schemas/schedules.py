from pydantic import BaseModel, model_validator
from datetime import date, datetime, time
from typing import List, Optional


class ScheduleGenerateRequest(BaseModel):
    template_id: int
    location_id: int
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class GeneratedShiftOut(BaseModel):
    employee_id: int
    date: date
    start_time: time
    end_time: time
    role: str
    warning: Optional[str] = None


class ScheduleWarningOut(BaseModel):
    type: str
    message: str
    employee_id: int


class CoverageGapOut(BaseModel):
    date: date
    role: str
    slot: str
    needed: int
    scheduled: int


class ScheduleSummary(BaseModel):
    total_shifts: int
    employees_scheduled: int
    total_hours: float
    labour_cost: float


class ScheduleGenerateResponse(BaseModel):
    shifts: List[GeneratedShiftOut]
    warnings: List[ScheduleWarningOut]
    coverage_gaps: List[CoverageGapOut]
    summary: ScheduleSummary


class SchedulePublishRequest(ScheduleGenerateRequest):
    organization_id: int
    created_by: Optional[int] = None
    approved_by: Optional[int] = None


class ScheduleBatchResponse(BaseModel):
    id: int
    location_id: int
    organization_id: int
    template_id: Optional[int]
    start_date: date
    end_date: date
    status: str
    created_by: Optional[int]
    approved_by: Optional[int]
    approved_at: Optional[datetime]
    published_at: Optional[datetime]
    overtime_warnings: list
    coverage_gaps: list
    shift_count: int
