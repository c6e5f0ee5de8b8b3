"""Users API router."""

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from fitness_tracker.dependencies import get_user_service
from fitness_tracker.models.user import User
from fitness_tracker.schemas.user import (
    UserCreate,
    UserEmailResponse,
    UserResponse,
    UserSimpleResponse,
    UserUpdate,
)
from fitness_tracker.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=List[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """List all users ordered by ID."""
    return service.find_all_users()


@router.get("/simple", response_model=List[UserSimpleResponse])
async def list_users_simple(service: UserService = Depends(get_user_service)) -> List[User]:
    """List all users with only their ID and names."""
    return service.find_all_users()


@router.get("/email", response_model=List[UserEmailResponse])
async def find_users_by_email(
    email: str = Query("", description="Case-insensitive fragment of the email address"),
    service: UserService = Depends(get_user_service),
) -> List[User]:
    """Search users by email fragment. A blank fragment returns no users."""
    return service.find_users_by_email(email)


@router.get("/older/{cutoff}", response_model=List[UserResponse])
async def find_users_older_than(
    cutoff: date,
    service: UserService = Depends(get_user_service),
) -> List[User]:
    """List users born before the given date."""
    return service.find_users_older_than(cutoff)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    """
    Get user details by ID.

    Raises:
        HTTPException: 404 if user not found
    """
    user = service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id {user_id} not found",
        )
    return user


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user."""
    return service.create_user(payload)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace a user's first name, last name, birthdate and email."""
    return service.update_user(user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    """Delete a user. Deleting an unknown ID succeeds."""
    service.remove_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
