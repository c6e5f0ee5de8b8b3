"""Tests for the monthly aggregation window and per-user summaries."""

from datetime import datetime

import pytest

from fitness_tracker.services.report_service import (
    MonthlyAggregate,
    TrainingReportService,
    previous_month_window,
)

NOW = datetime(2024, 3, 1, 8, 0)


@pytest.fixture
def report_service(user_repository, training_repository):
    return TrainingReportService(user_repository, training_repository, clock=lambda: NOW)


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2024, 3, 1, 8, 0), (datetime(2024, 2, 1), datetime(2024, 3, 1))),
        (datetime(2024, 3, 31, 23, 59), (datetime(2024, 2, 1), datetime(2024, 3, 1))),
        (datetime(2024, 1, 15, 12, 0), (datetime(2023, 12, 1), datetime(2024, 1, 1))),
    ],
)
def test_previous_month_window(now, expected):
    assert previous_month_window(now) == expected


def test_aggregate_uses_unweighted_mean_speed(report_service, make_user, make_training):
    user = make_user(email="runner@domain.com")
    make_training(user, start_time=datetime(2024, 2, 5, 8, 0), distance=10.0, average_speed=8.0)
    make_training(user, start_time=datetime(2024, 2, 20, 8, 0), distance=0.0, average_speed=0.0)

    reports = report_service.generate_reports()

    assert reports == [MonthlyAggregate(
        user_email="runner@domain.com",
        training_count=2,
        total_distance=10.0,
        average_speed=4.0,
    )]


def test_window_start_is_inclusive_and_end_exclusive(report_service, make_user, make_training):
    user = make_user()
    make_training(user, start_time=datetime(2024, 2, 1, 0, 0), end_time=datetime(2024, 2, 1, 1, 0))
    make_training(user, start_time=datetime(2024, 3, 1, 0, 0), end_time=datetime(2024, 3, 1, 1, 0))
    make_training(user, start_time=datetime(2024, 1, 31, 22, 0), end_time=datetime(2024, 1, 31, 23, 0))

    [report] = report_service.generate_reports()

    assert report.training_count == 1


def test_users_without_trainings_in_window_are_skipped(report_service, make_user, make_training):
    active = make_user(email="active@domain.com")
    idle = make_user(email="idle@domain.com")
    make_user(email="never@domain.com")
    make_training(active, start_time=datetime(2024, 2, 10, 8, 0))
    make_training(idle, start_time=datetime(2024, 3, 2, 8, 0))

    reports = report_service.generate_reports()

    assert [r.user_email for r in reports] == ["active@domain.com"]
    assert all(r.training_count >= 1 for r in reports)


def test_explicit_now_overrides_clock(report_service, make_user, make_training):
    user = make_user()
    make_training(user, start_time=datetime(2023, 12, 24, 8, 0))

    assert report_service.generate_reports() == []
    assert len(report_service.generate_reports(datetime(2024, 1, 1, 8, 0))) == 1


def test_no_users_produces_no_reports(report_service):
    assert report_service.generate_reports() == []
