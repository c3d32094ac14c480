"""관리자 API 라우터 패키지 — 모든 관리자 엔드포인트 통합.

Admin API Router package — Aggregates all admin-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - feedback: 피드백 상태 변경/삭제 (Feedback status transitions and deletion)
    - reports: 피드백 분석 (Feedback analytics)
"""

from fastapi import APIRouter

from app.api.admin.feedback import router as feedback_router
from app.api.admin.reports import router as reports_router

admin_router: APIRouter = APIRouter()

admin_router.include_router(feedback_router, prefix="/feedback", tags=["Admin Feedback"])
admin_router.include_router(reports_router, prefix="/reports", tags=["Admin Reports"])
