"""HTTP tests for /v1/reports and the health endpoints."""

import inspect
from datetime import datetime

import pytest

from fitness_tracker.routers.reports import send_monthly_reports
from fitness_tracker.services.report_service import previous_month_window


@pytest.fixture
def last_month_start():
    start, _ = previous_month_window(datetime.now())
    return start


def _create_training(client, user_id, start, distance, speed):
    response = client.post("/v1/trainings/", json={
        "user_id": user_id,
        "start_time": start.replace(hour=8).isoformat(),
        "end_time": start.replace(hour=9).isoformat(),
        "activity_type": "RUNNING",
        "distance": distance,
        "average_speed": speed,
    })
    assert response.status_code == 201, response.text


def test_monthly_preview(client, create_user, last_month_start):
    user = create_user(email="runner@domain.com")
    create_user(email="idle@domain.com")
    _create_training(client, user["id"], last_month_start, 10.0, 8.0)
    _create_training(client, user["id"], last_month_start.replace(day=2), 0.0, 0.0)

    response = client.get("/v1/reports/monthly")

    assert response.status_code == 200
    assert response.json() == [{
        "user_email": "runner@domain.com",
        "training_count": 2,
        "total_distance": 10.0,
        "average_speed": 4.0,
    }]


def test_send_monthly_reports(client, create_user, email_sender, last_month_start):
    runner = create_user(email="runner@domain.com")
    walker = create_user(email="walker@domain.com")
    _create_training(client, runner["id"], last_month_start, 5.0, 10.0)
    _create_training(client, walker["id"], last_month_start, 3.0, 5.0)
    email_sender.failing.add("walker@domain.com")

    response = client.post("/v1/reports/monthly/send")

    assert response.status_code == 200
    assert response.json() == {"sent": ["runner@domain.com"], "failed": ["walker@domain.com"]}
    assert [m.to_address for m in email_sender.sent] == ["runner@domain.com"]


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "running"


def test_send_route_runs_in_threadpool():
    # Sync endpoints are executed off the event loop
    assert not inspect.iscoroutinefunction(send_monthly_reports)
