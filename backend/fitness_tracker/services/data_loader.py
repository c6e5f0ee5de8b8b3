"""Sample data for local development: ten users, each with one training and one statistics row."""

import logging
from datetime import date, datetime
from typing import Callable, List

from sqlalchemy.orm import Session

from fitness_tracker.models.statistics import Statistics
from fitness_tracker.models.training import ActivityType, Training
from fitness_tracker.models.user import User
from fitness_tracker.repositories.statistics_repository import StatisticsRepository
from fitness_tracker.repositories.training_repository import TrainingRepository
from fitness_tracker.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    ("Emma", "Johnson", 28),
    ("Ethan", "Taylor", 51),
    ("Olivia", "Davis", 76),
    ("Daniel", "Thomas", 34),
    ("Sophia", "Baker", 49),
    ("Liam", "Jones", 23),
    ("Ava", "Williams", 21),
    ("Noah", "Miller", 39),
    ("Grace", "Anderson", 33),
    ("Oliver", "Swift", 29),
]

# (start, end, activity, distance km, average speed km/h), one per sample user
SAMPLE_TRAININGS = [
    ("2024-01-19 08:00", "2024-01-19 09:30", ActivityType.RUNNING, 10.5, 8.2),
    ("2024-01-18 15:30", "2024-01-18 17:00", ActivityType.CYCLING, 25.0, 18.5),
    ("2024-01-17 07:45", "2024-01-17 09:00", ActivityType.WALKING, 5.2, 5.8),
    ("2024-01-16 18:00", "2024-01-16 19:30", ActivityType.RUNNING, 12.3, 9.0),
    ("2024-01-15 12:30", "2024-01-15 13:45", ActivityType.CYCLING, 18.7, 15.3),
    ("2024-01-14 09:00", "2024-01-14 10:15", ActivityType.WALKING, 3.5, 4.0),
    ("2024-01-13 16:45", "2024-01-13 18:30", ActivityType.RUNNING, 15.0, 10.8),
    ("2024-01-12 11:30", "2024-01-12 12:45", ActivityType.CYCLING, 22.5, 17.2),
    ("2024-01-11 07:15", "2024-01-11 08:30", ActivityType.WALKING, 4.2, 4.5),
    ("2024-01-10 14:00", "2024-01-10 15:15", ActivityType.RUNNING, 11.8, 8.5),
]

# (total trainings, total distance km, total calories), one per sample user
SAMPLE_STATISTICS = [
    (15, 150.5, 12000),
    (8, 80.2, 6500),
    (5, 25.0, 2000),
    (20, 200.0, 15000),
    (12, 120.5, 9500),
    (7, 70.0, 5500),
    (10, 100.0, 8000),
    (18, 180.0, 14000),
    (6, 60.0, 4800),
    (9, 90.0, 7200),
]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def _years_ago(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return today.replace(year=today.year - years, day=28)


def load_initial_data(db: Session, today: Callable[[], date] = date.today) -> List[User]:
    """
    Seed sample users, trainings and statistics if there are no users yet.

    Returns:
        The created users, or an empty list when data already exists
    """
    users_repo = UserRepository(db)
    if users_repo.find_all():
        logger.info("Users already present, skipping initial data load")
        return []

    logger.info("Loading initial data to the database")
    trainings_repo = TrainingRepository(db)
    statistics_repo = StatisticsRepository(db)
    reference = today()

    users = []
    for first_name, last_name, age in SAMPLE_USERS:
        users.append(users_repo.save(User(
            first_name=first_name,
            last_name=last_name,
            birthdate=_years_ago(reference, age),
            email=f"{first_name}.{last_name}@domain.com",
        )))

    for user, (start, end, activity, distance, speed) in zip(users, SAMPLE_TRAININGS):
        trainings_repo.save(Training(
            user=user,
            start_time=datetime.strptime(start, TIMESTAMP_FORMAT),
            end_time=datetime.strptime(end, TIMESTAMP_FORMAT),
            activity_type=activity,
            distance=distance,
            average_speed=speed,
        ))

    for user, (total_trainings, total_distance, calories) in zip(users, SAMPLE_STATISTICS):
        statistics_repo.save(Statistics(
            user=user,
            total_trainings=total_trainings,
            total_distance=total_distance,
            total_calories_burned=calories,
        ))

    logger.info(f"Finished loading initial data: {len(users)} users")
    return users
