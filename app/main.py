"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Configures CORS, Axiom logging, the health check, and the app/admin routers.
The record store is attached through the slot backend passed to create_app.
"""

import asyncio

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.repositories.slot_repository import SlotBackend, SqlSlotRepository


def create_app(slot_backend: SlotBackend | None = None) -> FastAPI:
    """애플리케이션을 생성합니다.

    Build the FastAPI application over ``slot_backend`` (defaults to the
    kv_slots table in settings.DATABASE_URL).
    """
    application: FastAPI = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # 저장소 상태 — Record store is loaded lazily by app.api.deps.get_store
    application.state.slot_backend = slot_backend or SqlSlotRepository()
    application.state.store = None
    application.state.store_lock = asyncio.Lock()

    # Axiom API 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
    application.add_middleware(AxiomLoggingMiddleware)

    # CORS 미들웨어 — Cross-Origin Resource Sharing middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """서버 상태 확인 엔드포인트 (Health check for load balancers and monitoring)."""
        return {"status": "ok"}

    # ---------------------------------------------------------------------------
    # 라우터 등록 — Router registration
    # ---------------------------------------------------------------------------
    # app_router: 주민용 인증/피드백 (Resident auth and feedback)
    # admin_router: 관리자용 상태 변경/삭제/분석 (Admin triage and analytics)
    from app.api.admin import admin_router
    from app.api.app import app_router

    application.include_router(app_router, prefix="/api/v1/app")
    application.include_router(admin_router, prefix="/api/v1/admin")
    return application


app: FastAPI = create_app()
