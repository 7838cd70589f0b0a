from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import time, datetime
from typing import List, Optional
from shiftbuilder.services.scheduling.types import Role


class StaffingRuleBase(BaseModel):
    template_id: int
    role: Role
    start_time: time
    end_time: time
    min_staff: int = Field(default=1, ge=1)
    days_of_week: List[int] = Field(default_factory=lambda: [0, 1, 2, 3, 4, 5, 6])  # 0 = Sunday

    @field_validator("days_of_week")
    @classmethod
    def check_days(cls, days: List[int]) -> List[int]:
        if any(d < 0 or d > 6 for d in days):
            raise ValueError("days_of_week must be between 0 (Sunday) and 6 (Saturday)")
        return days


class StaffingRuleCreate(StaffingRuleBase):

    @model_validator(mode="after")
    def check_window(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class StaffingRuleUpdate(BaseModel):
    role: Optional[Role] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    min_staff: Optional[int] = Field(default=None, ge=1)
    days_of_week: Optional[List[int]] = None

    @field_validator("days_of_week")
    @classmethod
    def check_days(cls, days: Optional[List[int]]) -> Optional[List[int]]:
        if days is not None and any(d < 0 or d > 6 for d in days):
            raise ValueError("days_of_week must be between 0 (Sunday) and 6 (Saturday)")
        return days


class StaffingRuleResponse(StaffingRuleBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
