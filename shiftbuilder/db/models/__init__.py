from shiftbuilder.db.database import Base

# Import models
from shiftbuilder.db.models.employees import Employees
from shiftbuilder.db.models.availability import Availability
from shiftbuilder.db.models.staffing import StaffingTemplates, StaffingRules
from shiftbuilder.db.models.shifts import ScheduleBatches, Shifts, BatchStatus

__all__ = [
    "Base",
    # Models
    "Employees",
    "Availability",
    "StaffingTemplates",
    "StaffingRules",
    "ScheduleBatches",
    "Shifts",
    # Enums
    "BatchStatus",
]
