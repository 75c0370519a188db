from datetime import datetime

from fastapi import APIRouter, Depends, Query
from starlette import status

from libcat.application.reporting.use_cases.generate_borrowing_report_use_case import (
    GenerateBorrowingReportUseCase,
)
from libcat.constants import ResponseMessages
from libcat.infrastructure.common.di import inject_use_case
from libcat.infrastructure.common.schemas import ApiResponse
from libcat.infrastructure.reporting.schemas import BorrowingReport

router = APIRouter(prefix="/books", tags=["reports"])


@router.get(
    "/borrowing-report",
    response_model=ApiResponse[BorrowingReport],
    status_code=status.HTTP_200_OK,
)
def get_borrowing_report(
    start_date: datetime = Query(..., description="Start of the range (ISO 8601), inclusive"),
    end_date: datetime = Query(..., description="End of the range (ISO 8601), inclusive"),
    use_case: GenerateBorrowingReportUseCase = Depends(
        inject_use_case("generate_borrowing_report_use_case")
    ),
) -> ApiResponse[BorrowingReport]:
    """
    Get borrowing counts per book and the borrowing events of a date range.

    Datetimes without an offset are read as UTC. An empty range is not an error.

    Raises:
        InvalidOperationError: If end_date is before start_date
    """
    report = use_case.generate_report(start_date, end_date)
    message = (
        ResponseMessages.NO_BORROWINGS_IN_PERIOD
        if report.is_empty()
        else ResponseMessages.REPORT_GENERATED
    )
    return ApiResponse.ok(BorrowingReport.from_report(report), message)
