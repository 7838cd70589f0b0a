from sqlalchemy import Integer, String, Boolean, Date, DateTime, Time, ForeignKey, JSON, Enum as SQLEnum, Index, func
import datetime as dt
from sqlalchemy.orm import Mapped, mapped_column, relationship
from enum import Enum
from typing import Optional
from shiftbuilder.db.database import Base


class BatchStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class ScheduleBatches(Base):
    __tablename__ = "schedule_batches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    location_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    organization_id: Mapped[int] = mapped_column(Integer, nullable=False)
    template_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("staffing_templates.id"), nullable=True)
    start_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    end_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    status: Mapped[BatchStatus] = mapped_column(SQLEnum(BatchStatus, name="batch_status_enum"), nullable=False)
    created_by: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("employees.id"), nullable=True)
    approved_by: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("employees.id"), nullable=True)
    approved_at: Mapped[Optional[dt.datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    published_at: Mapped[Optional[dt.datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    overtime_warnings: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    coverage_gaps: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    shifts: Mapped[list["Shifts"]] = relationship(back_populates="batch", cascade="all, delete-orphan")


class Shifts(Base):
    __tablename__ = "shifts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    location_id: Mapped[int] = mapped_column(Integer, nullable=False)
    organization_id: Mapped[int] = mapped_column(Integer, nullable=False)
    employee_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id"), nullable=False)
    batch_id: Mapped[int] = mapped_column(Integer, ForeignKey("schedule_batches.id"), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    start_time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    end_time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    batch: Mapped[ScheduleBatches] = relationship(back_populates="shifts")

    __table_args__ = (
        Index("ix_shifts_location_date", "location_id", "date"),
        Index("ix_shifts_employee_date", "employee_id", "date"),
    )
