"""Trainings API router."""

from datetime import date, datetime, time
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fitness_tracker.dependencies import get_training_service
from fitness_tracker.models.training import ActivityType, Training
from fitness_tracker.schemas.training import TrainingCreate, TrainingResponse, TrainingUpdate
from fitness_tracker.services.training_service import TrainingService

router = APIRouter()


@router.get("/", response_model=List[TrainingResponse])
async def list_trainings(service: TrainingService = Depends(get_training_service)) -> List[Training]:
    """List all trainings."""
    return service.find_all_trainings()


@router.get("/user/{user_id}", response_model=List[TrainingResponse])
async def list_trainings_for_user(
    user_id: int,
    service: TrainingService = Depends(get_training_service),
) -> List[Training]:
    """List trainings owned by a user."""
    return service.find_trainings_by_user_id(user_id)


@router.get("/activity/{activity_type}", response_model=List[TrainingResponse])
async def list_trainings_by_activity(
    activity_type: ActivityType,
    service: TrainingService = Depends(get_training_service),
) -> List[Training]:
    """List trainings of one activity type."""
    return service.find_trainings_by_activity_type(activity_type)


@router.get("/finished/{after}", response_model=List[TrainingResponse])
async def list_trainings_finished_after(
    after: date,
    service: TrainingService = Depends(get_training_service),
) -> List[Training]:
    """List trainings that ended after midnight of the given date."""
    return service.find_trainings_with_end_date_after(datetime.combine(after, time.min))


@router.get("/range", response_model=List[TrainingResponse])
async def list_trainings_in_range(
    start: Optional[datetime] = Query(None, description="Earliest start time, inclusive"),
    end: Optional[datetime] = Query(None, description="Latest start time, inclusive"),
    service: TrainingService = Depends(get_training_service),
) -> List[Training]:
    """List trainings that started within the given range."""
    return service.find_trainings_by_date_range(start, end)


@router.get("/{training_id}", response_model=TrainingResponse)
async def get_training(
    training_id: int,
    service: TrainingService = Depends(get_training_service),
) -> Training:
    """
    Get training details by ID.

    Raises:
        HTTPException: 404 if training not found
    """
    training = service.get_training(training_id)
    if training is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Training with id {training_id} not found",
        )
    return training


@router.post("/", response_model=TrainingResponse, status_code=status.HTTP_201_CREATED)
async def create_training(
    payload: TrainingCreate,
    service: TrainingService = Depends(get_training_service),
) -> Training:
    """Create a training for the user given in the body."""
    return service.create_training(payload, payload.user_id)


@router.put("/{training_id}", response_model=TrainingResponse)
async def update_training(
    training_id: int,
    payload: TrainingUpdate,
    service: TrainingService = Depends(get_training_service),
) -> Training:
    """Replace every mutable field of a training, owner included."""
    return service.update_training(payload, training_id, payload.user_id)
