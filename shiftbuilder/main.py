from fastapi import FastAPI

from shiftbuilder.api.routes import schedules, staffing_rules
from shiftbuilder.core.config import settings
from shiftbuilder.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="ShiftBuilder API", version="0.1.0")

app.include_router(staffing_rules.router, prefix="/api/v1")
app.include_router(schedules.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
