"""Tests for UserService: validation, email uniqueness, updates and lookups."""

from datetime import date

import pytest

from fitness_tracker.errors import ConflictError, NotFoundError, PersistenceError, ValidationError
from fitness_tracker.schemas.user import UserCreate, UserUpdate


def _user_data(**overrides):
    data = {
        "first_name": "Emma",
        "last_name": "Johnson",
        "birthdate": date(1996, 4, 12),
        "email": "emma.johnson@domain.com",
    }
    data.update(overrides)
    return data


# Creation

def test_create_user_assigns_id_and_keeps_fields(user_service):
    user = user_service.create_user(UserCreate(**_user_data()))

    assert user.id is not None
    assert user.first_name == "Emma"
    assert user.last_name == "Johnson"
    assert user.birthdate == date(1996, 4, 12)
    assert user.email == "emma.johnson@domain.com"
    assert user_service.get_user(user.id) is user


def test_create_user_rejects_preassigned_id(user_service):
    with pytest.raises(ValidationError, match="already DB ID"):
        user_service.create_user(UserCreate(id=7, **_user_data()))


def test_create_user_rejects_missing_data(user_service):
    with pytest.raises(ValidationError):
        user_service.create_user(None)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"first_name": "  "}, "First name is required"),
        ({"last_name": None}, "Last name is required"),
        ({"email": ""}, "Email is required"),
        ({"birthdate": None}, "Birthdate is required"),
    ],
)
def test_create_user_requires_every_field(user_service, overrides, message):
    with pytest.raises(ValidationError) as exc_info:
        user_service.create_user(UserCreate(**_user_data(**overrides)))

    assert exc_info.value.message == message
    assert user_service.find_all_users() == []


def test_create_user_rejects_duplicate_email(user_service):
    user_service.create_user(UserCreate(**_user_data()))

    with pytest.raises(ConflictError, match="Email is already in use"):
        user_service.create_user(UserCreate(**_user_data(first_name="Other")))

    assert len(user_service.find_all_users()) == 1


# Updates

def test_update_user_overwrites_all_fields(user_service, make_user):
    user = make_user()

    updated = user_service.update_user(user.id, UserUpdate(**_user_data(
        first_name="Olivia", last_name="Davis", birthdate=date(1950, 1, 1), email="olivia@domain.com",
    )))

    assert updated.id == user.id
    assert updated.first_name == "Olivia"
    assert updated.last_name == "Davis"
    assert updated.birthdate == date(1950, 1, 1)
    assert updated.email == "olivia@domain.com"


def test_update_user_keeping_own_email_is_allowed(user_service, make_user):
    user = make_user(email="same@domain.com")

    updated = user_service.update_user(user.id, UserUpdate(**_user_data(email="same@domain.com")))

    assert updated.email == "same@domain.com"


def test_update_user_rejects_email_of_another_user(user_service, make_user):
    make_user(email="taken@domain.com")
    user = make_user(email="mine@domain.com")

    with pytest.raises(ConflictError, match="another user"):
        user_service.update_user(user.id, UserUpdate(**_user_data(email="taken@domain.com")))


def test_update_unknown_user_raises_not_found_and_creates_nothing(user_service):
    with pytest.raises(NotFoundError):
        user_service.update_user(999, UserUpdate(**_user_data()))

    assert user_service.find_all_users() == []


def test_update_user_requires_id(user_service):
    with pytest.raises(ValidationError, match="User ID cannot be null"):
        user_service.update_user(None, UserUpdate(**_user_data()))


def test_update_user_requires_fields(user_service, make_user):
    user = make_user()

    with pytest.raises(ValidationError, match="Email is required"):
        user_service.update_user(user.id, UserUpdate(**_user_data(email=" ")))


# Removal

def test_remove_user_deletes_it(user_service, make_user):
    user = make_user()

    user_service.remove_user(user.id)

    assert user_service.get_user(user.id) is None


def test_remove_unknown_user_is_a_no_op(user_service, make_user):
    make_user()

    user_service.remove_user(12345)

    assert len(user_service.find_all_users()) == 1


def test_remove_user_with_trainings_is_refused(user_service, make_user, make_training):
    user = make_user()
    make_training(user)

    with pytest.raises(PersistenceError):
        user_service.remove_user(user.id)


# Queries

def test_find_all_users_is_ordered_by_id(user_service, make_user):
    created = [make_user() for _ in range(3)]

    assert [u.id for u in user_service.find_all_users()] == sorted(u.id for u in created)


def test_get_user_by_email(user_service, make_user):
    user = make_user(email="exact@domain.com")

    assert user_service.get_user_by_email("exact@domain.com") is user
    assert user_service.get_user_by_email("missing@domain.com") is None
    assert user_service.get_user_by_email("  ") is None


def test_find_users_by_email_fragment_is_case_insensitive(user_service, make_user):
    emma = make_user(email="Emma.Johnson@domain.com")
    make_user(email="liam.jones@other.org")

    assert user_service.find_users_by_email("emma") == [emma]
    assert user_service.find_users_by_email("DOMAIN.COM") == [emma]
    assert user_service.find_users_by_email("") == []


def test_find_users_by_email_treats_wildcards_literally(user_service, make_user):
    make_user(email="plain@domain.com")

    assert user_service.find_users_by_email("%") == []
    assert user_service.find_users_by_email("_") == []


def test_find_users_older_than_is_strict(user_service, make_user):
    older = make_user(birthdate=date(1970, 5, 1))
    make_user(birthdate=date(1990, 1, 1))

    assert user_service.find_users_older_than(date(1990, 1, 1)) == [older]


def test_find_users_older_than_requires_cutoff(user_service):
    with pytest.raises(ValidationError):
        user_service.find_users_older_than(None)


def test_find_users_by_email_matches_fragment_literally(user_service, make_user):
    smith = make_user(email="smith@domain.com")

    assert user_service.find_users_by_email("smith") == [smith]
    assert user_service.find_users_by_email(" smith") == []
