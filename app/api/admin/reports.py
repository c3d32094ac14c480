"""관리자 리포트 라우터 — 피드백 분석.

Admin Reports Router — Feedback analytics for the admin dashboard.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_analytics_service
from app.api.envelope import envelope_response
from app.services.analytics_service import AnalyticsService

router: APIRouter = APIRouter()


@router.get("/analytics")
async def get_analytics(
    service: Annotated[AnalyticsService, Depends(get_analytics_service)],
) -> JSONResponse:
    """피드백 집계 — 상태/분류/긴급도 분포, 평균 해결 시간, 최근 활동."""
    return await envelope_response(service.get_analytics())
