"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services take a RecordStore in their constructor, raise domain errors from
app.utils.exceptions, and never hand out references to stored records.
"""

import asyncio

from app.config import settings


async def simulate_latency(delay_ms: int | None = None) -> None:
    """인공 지연 — 0이면 건너뜀 (Artificial per-call latency; skipped when 0)."""
    delay = settings.SIMULATED_DELAY_MS if delay_ms is None else delay_ms
    if delay > 0:
        await asyncio.sleep(delay / 1000)
