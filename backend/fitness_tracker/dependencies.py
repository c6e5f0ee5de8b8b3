"""FastAPI dependencies wiring services to the request-scoped database session."""

from fastapi import Depends
from sqlalchemy.orm import Session

from fitness_tracker.config import get_settings
from fitness_tracker.database import get_db
from fitness_tracker.repositories import (
    StatisticsRepository,
    TrainingRepository,
    UserRepository,
)
from fitness_tracker.services.email_service import EmailSender, create_email_sender
from fitness_tracker.services.report_dispatcher import MonthlyReportDispatcher
from fitness_tracker.services.report_service import TrainingReportService
from fitness_tracker.services.statistics_service import StatisticsService
from fitness_tracker.services.training_service import TrainingService
from fitness_tracker.services.user_service import UserService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_training_service(
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> TrainingService:
    return TrainingService(TrainingRepository(db), user_service)


def get_statistics_service(
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
) -> StatisticsService:
    return StatisticsService(StatisticsRepository(db), user_service)


def get_report_service(db: Session = Depends(get_db)) -> TrainingReportService:
    return TrainingReportService(UserRepository(db), TrainingRepository(db))


def get_email_sender() -> EmailSender:
    return create_email_sender(get_settings())


def get_report_dispatcher(
    report_service: TrainingReportService = Depends(get_report_service),
    email_sender: EmailSender = Depends(get_email_sender),
) -> MonthlyReportDispatcher:
    return MonthlyReportDispatcher(report_service, email_sender)
