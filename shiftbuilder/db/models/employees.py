from typing import Optional
from datetime import datetime
from sqlalchemy import Integer, String, Boolean, Float, Numeric, DateTime, JSON, func
from sqlalchemy.orm import Mapped, mapped_column
from shiftbuilder.db.database import Base


class Employees(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    location_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    organization_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    secondary_roles: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    max_weekly_hours: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    hourly_rate: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
