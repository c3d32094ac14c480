"""앱 피드백 라우터 — 주민용 피드백 API.

App Feedback Router — Resident-facing feedback endpoints.
Anyone can browse and submit feedback; anonymous submissions omit userId.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.api.deps import get_feedback_service
from app.api.envelope import envelope_response
from app.schemas.feedback import FeedbackCreate, FeedbackStatus, IssueType, UrgencyLevel
from app.services.feedback_service import FeedbackService

router: APIRouter = APIRouter()


@router.get("/feedback")
async def list_feedback(
    service: Annotated[FeedbackService, Depends(get_feedback_service)],
    q: str | None = Query(None),
    status: FeedbackStatus | None = Query(None),
    issue_type: IssueType | None = Query(None),
    urgency: UrgencyLevel | None = Query(None),
) -> JSONResponse:
    """피드백 목록 — 검색어/필터 적용 시 최신순.

    List feedback. Without filters returns the stored snapshot; with any
    filter returns matches newest first.
    """
    if q is None and status is None and issue_type is None and urgency is None:
        return await envelope_response(service.get_all())
    return await envelope_response(service.search(q, status, issue_type, urgency))


@router.get("/feedback/{feedback_id}")
async def get_feedback(
    feedback_id: str,
    service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> JSONResponse:
    """피드백 상세 조회."""
    return await envelope_response(service.get_by_id(feedback_id))


@router.post("/feedback")
async def submit_feedback(
    data: FeedbackCreate,
    service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> JSONResponse:
    """피드백 제출. 상태는 항상 pending."""
    return await envelope_response(service.submit(data), success_status=201)


@router.get("/users/{user_id}/feedback")
async def list_user_feedback(
    user_id: str,
    service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> JSONResponse:
    """사용자별 피드백 목록 (Feedback owned by one user)."""
    return await envelope_response(service.get_by_user(user_id))
