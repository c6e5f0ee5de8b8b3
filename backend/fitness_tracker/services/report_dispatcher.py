"""
Monthly report dispatch.

Turns each monthly aggregate into an email and hands it to the configured
``EmailSender``. Sends are independent: one failing recipient is logged and
recorded, and the remaining reports are still sent.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from fitness_tracker.errors import DispatchError
from fitness_tracker.repositories.training_repository import TrainingRepository
from fitness_tracker.repositories.user_repository import UserRepository
from fitness_tracker.services.email_service import EmailMessage, EmailSender
from fitness_tracker.services.report_service import MonthlyAggregate, TrainingReportService

logger = logging.getLogger(__name__)

REPORT_SUBJECT = "Miesięczne podsumowanie treningów"

REPORT_BODY_TEMPLATE = (
    "Cześć!\n"
    "\n"
    "Twoje podsumowanie treningowe:\n"
    "- Treningi: {count}\n"
    "- Dystans: {distance:.2f} km\n"
    "- Średnia prędkość: {speed:.2f} km/h\n"
    "\n"
    "Do zobaczenia na kolejnych treningach!\n"
)


def build_report_email(aggregate: MonthlyAggregate) -> EmailMessage:
    """Render the monthly summary email for one user."""
    return EmailMessage(
        to_address=aggregate.user_email,
        subject=REPORT_SUBJECT,
        content=REPORT_BODY_TEMPLATE.format(
            count=aggregate.training_count,
            distance=aggregate.total_distance,
            speed=aggregate.average_speed,
        ),
    )


@dataclass
class DispatchSummary:
    """Recipients reached and recipients that failed during one dispatch run."""

    sent: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.sent) + len(self.failed)


class MonthlyReportDispatcher:
    """Generate monthly aggregates and email them to their users."""

    def __init__(self, report_service: TrainingReportService, email_sender: EmailSender):
        self.report_service = report_service
        self.email_sender = email_sender

    def send_reports(self, now: Optional[datetime] = None) -> DispatchSummary:
        """
        Send one summary email per aggregate produced for the previous month.

        Returns:
            Which recipients were sent their report and which failed
        """
        summary = DispatchSummary()
        for aggregate in self.report_service.generate_reports(now):
            message = build_report_email(aggregate)
            try:
                self.email_sender.send(message)
            except DispatchError as e:
                logger.error(
                    f"Monthly report for {message.to_address} not delivered: {e.message}",
                    extra={"recipient": message.to_address, "error_code": e.code},
                )
                summary.failed.append(message.to_address)
                continue
            except Exception:
                logger.exception(
                    f"Unexpected failure sending monthly report to {message.to_address}",
                    extra={"recipient": message.to_address},
                )
                summary.failed.append(message.to_address)
                continue
            summary.sent.append(message.to_address)

        logger.info(
            f"Monthly report dispatch finished: {len(summary.sent)} sent, "
            f"{len(summary.failed)} failed"
        )
        return summary


def run_monthly_reports(
    session_factory: Callable[[], Session],
    email_sender: EmailSender,
    now: Optional[datetime] = None,
) -> DispatchSummary:
    """Run one dispatch with its own database session. Used by the scheduler."""
    db = session_factory()
    try:
        report_service = TrainingReportService(UserRepository(db), TrainingRepository(db))
        return MonthlyReportDispatcher(report_service, email_sender).send_reports(now)
    finally:
        db.close()
