"""
Exceptions raised by the scheduling service.

Coverage gaps and overtime are never raised, they are returned as data on
the ScheduleResult.
"""


class ScheduleInputError(ValueError):
    """Structurally invalid generation input (rejected before any work is done)."""


class InvalidTimeRange(ScheduleInputError):
    """A time window whose end is not after its start, or a malformed HH:MM string."""


class NothingToGenerate(ScheduleInputError):
    """The selected template has no staffing rules."""

    def __init__(self, message: str = "Please select a template with staffing rules first."):
        super().__init__(message)


class TemplateNotFoundError(LookupError):
    pass


class SchedulePublishError(Exception):
    """Persisting a generated schedule failed. The generation result is still usable."""
