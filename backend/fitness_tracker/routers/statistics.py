"""Statistics API router."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from fitness_tracker.dependencies import get_statistics_service
from fitness_tracker.models.statistics import Statistics
from fitness_tracker.schemas.statistics import (
    StatisticsCreate,
    StatisticsResponse,
    StatisticsUpdate,
)
from fitness_tracker.services.statistics_service import StatisticsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=List[StatisticsResponse])
async def list_statistics(
    service: StatisticsService = Depends(get_statistics_service),
) -> List[Statistics]:
    """List all statistics."""
    statistics = service.find_all_statistics()
    logger.info(f"Returning {len(statistics)} statistics records")
    return statistics


@router.get("/user/{user_id}", response_model=StatisticsResponse)
async def get_statistics_for_user(
    user_id: int,
    service: StatisticsService = Depends(get_statistics_service),
) -> Statistics:
    """
    Get the statistics of a user.

    Raises:
        HTTPException: 404 if the user has no statistics
    """
    statistics = service.get_statistics_by_user_id(user_id)
    if statistics is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No statistics found for user with id {user_id}",
        )
    return statistics


@router.get("/calories", response_model=List[StatisticsResponse])
async def list_statistics_above_calories(
    calories: int = Query(..., description="Exclusive lower bound on calories burned"),
    service: StatisticsService = Depends(get_statistics_service),
) -> List[Statistics]:
    """List statistics with more calories burned than the threshold."""
    return service.find_statistics_with_calories_greater_than(calories)


@router.get("/{statistics_id}", response_model=StatisticsResponse)
async def get_statistics(
    statistics_id: int,
    service: StatisticsService = Depends(get_statistics_service),
) -> Statistics:
    """
    Get statistics by ID.

    Raises:
        HTTPException: 404 if statistics not found
    """
    statistics = service.get_statistics(statistics_id)
    if statistics is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Statistics with id {statistics_id} not found",
        )
    return statistics


@router.post("/", response_model=StatisticsResponse, status_code=status.HTTP_201_CREATED)
async def create_statistics(
    payload: StatisticsCreate,
    service: StatisticsService = Depends(get_statistics_service),
) -> Statistics:
    """Create statistics for the user given in the body."""
    return service.create_statistics(payload, payload.user_id)


@router.put("/{statistics_id}", response_model=StatisticsResponse)
async def update_statistics(
    statistics_id: int,
    payload: StatisticsUpdate,
    service: StatisticsService = Depends(get_statistics_service),
) -> Statistics:
    """Replace every mutable field of a statistics row, owner included."""
    return service.update_statistics(payload, statistics_id, payload.user_id)


@router.delete("/{statistics_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_statistics(
    statistics_id: int,
    service: StatisticsService = Depends(get_statistics_service),
) -> Response:
    """Delete statistics by ID. Unknown IDs answer 404."""
    service.delete_statistics(statistics_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
