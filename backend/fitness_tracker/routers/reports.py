"""Monthly reports API router."""

from typing import List

from fastapi import APIRouter, Depends

from fitness_tracker.dependencies import get_report_dispatcher, get_report_service
from fitness_tracker.schemas.report import DispatchSummaryResponse, MonthlyAggregateResponse
from fitness_tracker.services.report_dispatcher import MonthlyReportDispatcher
from fitness_tracker.services.report_service import TrainingReportService

router = APIRouter()


@router.get("/monthly", response_model=List[MonthlyAggregateResponse])
async def preview_monthly_reports(
    service: TrainingReportService = Depends(get_report_service),
) -> List[MonthlyAggregateResponse]:
    """Preview the aggregates the next dispatch would send for the previous month."""
    return [MonthlyAggregateResponse.model_validate(a) for a in service.generate_reports()]


@router.post("/monthly/send", response_model=DispatchSummaryResponse)
def send_monthly_reports(
    dispatcher: MonthlyReportDispatcher = Depends(get_report_dispatcher),
) -> DispatchSummaryResponse:
    """Send the previous month's summary emails now. Blocking; runs in the threadpool."""
    summary = dispatcher.send_reports()
    return DispatchSummaryResponse(sent=summary.sent, failed=summary.failed)
