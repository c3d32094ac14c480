"""앱 API 라우터 패키지 — 모든 주민용 엔드포인트 통합.

App API Router package — Aggregates all resident-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - auth: 회원가입, 로그인 (Signup and login)
    - feedback: 피드백 조회/제출 (Browse and submit feedback)
"""

from fastapi import APIRouter

from app.api.app.auth import router as auth_router
from app.api.app.feedback import router as feedback_router

app_router: APIRouter = APIRouter()

app_router.include_router(auth_router, prefix="/auth", tags=["App Auth"])
# 피드백: /feedback, /feedback/{id}, /users/{user_id}/feedback
app_router.include_router(feedback_router, tags=["App Feedback"])
