"""Root conftest: environment defaults, in-memory database and service fixtures."""

import os

# Keep tests away from real databases, mail servers and the report scheduler
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("MAIL_ENABLED", "false")
os.environ.setdefault("REPORTS_ENABLED", "false")
os.environ.setdefault("LOAD_INITIAL_DATA", "false")

from datetime import date, datetime  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fitness_tracker.database import enable_sqlite_foreign_keys  # noqa: E402
from fitness_tracker.models import ActivityType, Base  # noqa: E402
from fitness_tracker.repositories import (  # noqa: E402
    StatisticsRepository,
    TrainingRepository,
    UserRepository,
)
from fitness_tracker.schemas.training import TrainingCreate  # noqa: E402
from fitness_tracker.schemas.user import UserCreate  # noqa: E402
from fitness_tracker.services.statistics_service import StatisticsService  # noqa: E402
from fitness_tracker.services.training_service import TrainingService  # noqa: E402
from fitness_tracker.services.user_service import UserService  # noqa: E402

TODAY = date(2024, 6, 15)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def user_repository(db):
    return UserRepository(db)


@pytest.fixture
def training_repository(db):
    return TrainingRepository(db)


@pytest.fixture
def statistics_repository(db):
    return StatisticsRepository(db)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository, today=lambda: TODAY)


@pytest.fixture
def training_service(training_repository, user_service):
    return TrainingService(training_repository, user_service)


@pytest.fixture
def statistics_service(statistics_repository, user_service):
    return StatisticsService(statistics_repository, user_service)


@pytest.fixture
def make_user(user_service):
    """Create persisted users with unique emails."""
    sequence = count(1)

    def _make_user(first_name="Emma", last_name="Johnson", birthdate=date(1996, 4, 12), email=None):
        n = next(sequence)
        return user_service.create_user(UserCreate(
            first_name=first_name,
            last_name=last_name,
            birthdate=birthdate,
            email=email or f"user{n}@domain.com",
        ))

    return _make_user


@pytest.fixture
def make_training(training_service):
    """Create persisted trainings for a user."""

    def _make_training(
        user,
        start_time=datetime(2024, 5, 10, 8, 0),
        end_time=None,
        activity_type=ActivityType.RUNNING,
        distance=10.0,
        average_speed=8.0,
    ):
        return training_service.create_training(
            TrainingCreate(
                start_time=start_time,
                end_time=end_time or start_time.replace(hour=start_time.hour + 1),
                activity_type=activity_type,
                distance=distance,
                average_speed=average_speed,
            ),
            user.id,
        )

    return _make_training
