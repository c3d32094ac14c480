"""관리자 피드백 라우터 — 피드백 처리 API.

Admin Feedback Router — Triage endpoints: status transitions and deletion.
The acting admin is identified by the adminId in the request body.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_feedback_service
from app.api.envelope import envelope_response
from app.schemas.feedback import FeedbackStatusUpdate
from app.services.feedback_service import UNSET, FeedbackService

router: APIRouter = APIRouter()


@router.patch("/{feedback_id}/status")
async def update_feedback_status(
    feedback_id: str,
    data: FeedbackStatusUpdate,
    service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> JSONResponse:
    """피드백 상태 변경.

    Change status. Omitting adminResponse keeps the existing response;
    an empty string clears it.
    """
    # 전달된 필드만 반영 — Only fields present in the request count as changes
    update_data = data.model_dump(exclude_unset=True)
    admin_response = update_data.get("admin_response", UNSET)
    return await envelope_response(
        service.update_status(feedback_id, data.status, data.admin_id, admin_response)
    )


@router.delete("/{feedback_id}")
async def delete_feedback(
    feedback_id: str,
    service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> JSONResponse:
    """피드백 삭제."""
    return await envelope_response(service.delete(feedback_id))
