"""FastAPI application entry point for the Fitness Tracker API."""

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitness_tracker.config import get_settings
from fitness_tracker.database import SessionLocal, create_tables
from fitness_tracker.error_handlers import register_error_handlers
from fitness_tracker.observability import setup_logging
from fitness_tracker.routers import reports, statistics, trainings, users
from fitness_tracker.services.data_loader import load_initial_data
from fitness_tracker.services.email_service import create_email_sender
from fitness_tracker.services.report_dispatcher import run_monthly_reports
from fitness_tracker.services.scheduler import MonthlyReportScheduler

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    create_tables()

    if settings.LOAD_INITIAL_DATA:
        db = SessionLocal()
        try:
            load_initial_data(db)
        finally:
            db.close()

    scheduler = None
    if settings.REPORTS_ENABLED:
        scheduler = MonthlyReportScheduler(
            partial(run_monthly_reports, SessionLocal, create_email_sender(settings)),
            day_of_month=settings.REPORT_DAY_OF_MONTH,
            hour=settings.REPORT_HOUR,
        )
        scheduler.start()

    yield

    # Shutdown
    if scheduler is not None:
        await scheduler.stop()


app = FastAPI(
    title="Fitness Tracker API",
    description="Users, trainings, statistics and monthly training summaries",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(users.router, prefix="/v1/users", tags=["Users"])
app.include_router(trainings.router, prefix="/v1/trainings", tags=["Trainings"])
app.include_router(statistics.router, prefix="/v1/statistics", tags=["Statistics"])
app.include_router(reports.router, prefix="/v1/reports", tags=["Reports"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Fitness Tracker API",
        "version": "1.0.0",
        "status": "running",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
