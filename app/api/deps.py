"""FastAPI 의존성 주입 모듈 — 저장소 및 서비스 제공.

FastAPI dependency injection module — Record store and service providers.
The record store is built lazily on first use from the slot backend attached
to the application (``app.state.slot_backend``), so that tests can create an
app over an in-memory backend without running lifespan events.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.repositories.record_store import RecordStore
from app.services.analytics_service import AnalyticsService
from app.services.auth_service import AuthService
from app.services.feedback_service import FeedbackService


async def get_store(request: Request) -> RecordStore:
    """애플리케이션 공유 레코드 저장소를 반환합니다.

    Return the application-wide record store, loading it on first access.
    """
    state = request.app.state
    if state.store is None:
        async with state.store_lock:
            if state.store is None:
                store = RecordStore(state.slot_backend)
                await store.load()
                state.store = store
    return state.store


def get_auth_service(store: Annotated[RecordStore, Depends(get_store)]) -> AuthService:
    return AuthService(store)


def get_feedback_service(store: Annotated[RecordStore, Depends(get_store)]) -> FeedbackService:
    return FeedbackService(store)


def get_analytics_service(store: Annotated[RecordStore, Depends(get_store)]) -> AnalyticsService:
    return AnalyticsService(store)
