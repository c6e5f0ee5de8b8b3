"""Services package for business logic."""

from fitness_tracker.services.user_service import UserProvider, UserService
from fitness_tracker.services.training_service import TrainingService
from fitness_tracker.services.statistics_service import StatisticsService
from fitness_tracker.services.report_service import (
    MonthlyAggregate,
    TrainingReportService,
    previous_month_window,
)
from fitness_tracker.services.report_dispatcher import (
    DispatchSummary,
    MonthlyReportDispatcher,
    build_report_email,
)
from fitness_tracker.services.email_service import (
    EmailMessage,
    EmailSender,
    LoggingEmailSender,
    SmtpEmailSender,
)
from fitness_tracker.services.scheduler import MonthlyReportScheduler, next_run_after

__all__ = [
    "UserProvider",
    "UserService",
    "TrainingService",
    "StatisticsService",
    "MonthlyAggregate",
    "TrainingReportService",
    "previous_month_window",
    "DispatchSummary",
    "MonthlyReportDispatcher",
    "build_report_email",
    "EmailMessage",
    "EmailSender",
    "LoggingEmailSender",
    "SmtpEmailSender",
    "MonthlyReportScheduler",
    "next_run_after",
]
