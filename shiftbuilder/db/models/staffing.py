from datetime import datetime, time
from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, Time, JSON, func
from sqlalchemy.orm import Mapped, mapped_column

from shiftbuilder.db.database import Base


class StaffingTemplates(Base):
    __tablename__ = "staffing_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    location_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    organization_id: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class StaffingRules(Base):
    __tablename__ = "staffing_rules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    template_id: Mapped[int] = mapped_column(Integer, ForeignKey("staffing_templates.id"), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    min_staff: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    days_of_week: Mapped[list] = mapped_column(JSON, nullable=False)  # ints 0–6, Sunday = 0
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
