import datetime as dt
from typing import Optional
from sqlalchemy import Boolean, Date, ForeignKey, Integer, Time, Index
from sqlalchemy.orm import Mapped, mapped_column

from shiftbuilder.db.database import Base


class Availability(Base):
    __tablename__ = "availability"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id"), nullable=False)
    date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)  # NULL = weekly default
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)  # 0–6, Sunday = 0
    start_time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    end_time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_availability_employee_date", "employee_id", "date"),
    )
