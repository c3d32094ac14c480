"""분석 서비스 — 피드백 집계 로직.

Analytics Service — Aggregation over the current feedback collection.
compute_analytics is a pure function of the items and a reference time;
AnalyticsService feeds it the record store's snapshot.
"""

from collections import Counter
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Sequence

from app.config import settings
from app.repositories.record_store import RecordStore
from app.schemas.analytics import AnalyticsReport
from app.schemas.feedback import FeedbackItem
from app.services import simulate_latency

_SECONDS_PER_DAY: float = 24 * 60 * 60


def round_half_up(value: float, places: int = 0) -> Decimal:
    """반올림(0.5는 올림) — Python round()의 은행원 반올림 대신 사용.

    Round half up. Python's round() rounds half to even.
    """
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def _percentage(count: int, total: int) -> int:
    if total == 0:
        return 0
    return int(round_half_up(count * 100 / total))


def compute_analytics(
    items: Sequence[FeedbackItem],
    now: datetime | None = None,
    recent_days: int | None = None,
) -> AnalyticsReport:
    """피드백 목록을 집계합니다.

    Aggregate feedback items into an analytics report.

    Args:
        items: 집계 대상 피드백 (Feedback items to aggregate)
        now: 최근 활동 기준 시각 (Reference time for the recent-activity window)
        recent_days: 최근 활동 기간(일) (Recent-activity window in days)

    Returns:
        AnalyticsReport: 집계 결과 (Aggregated report)
    """
    now = now or datetime.now(timezone.utc)
    window = timedelta(days=settings.RECENT_ACTIVITY_DAYS if recent_days is None else recent_days)
    total = len(items)

    # 관측된 값만 집계 — Only observed values appear in the breakdowns
    status_counts = Counter(item.status for item in items)
    type_counts = Counter(item.issue_type for item in items)
    urgency_counts = Counter(item.urgency for item in items)

    resolved = [item for item in items if item.status == "resolved"]
    avg_resolution_days = 0.0
    if resolved:
        total_seconds = sum(
            (item.updated_at - item.created_at).total_seconds() for item in resolved
        )
        avg_resolution_days = total_seconds / len(resolved) / _SECONDS_PER_DAY

    cutoff = now - window
    recent = sum(1 for item in items if item.updated_at > cutoff)

    return AnalyticsReport(
        total_feedback=total,
        status_breakdown=dict(status_counts),
        type_breakdown=dict(type_counts),
        urgency_breakdown=dict(urgency_counts),
        avg_resolution_time=float(round_half_up(avg_resolution_days, 1)),
        recent_activity=recent,
        resolved_percentage=_percentage(status_counts.get("resolved", 0), total),
        pending_percentage=_percentage(status_counts.get("pending", 0), total),
    )


class AnalyticsService:
    """분석 서비스 (Read-only analytics over the record store)."""

    def __init__(
        self,
        store: RecordStore,
        delay_ms: int | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.store: RecordStore = store
        self.delay_ms: int | None = delay_ms
        self.clock: Callable[[], datetime] = clock or (lambda: datetime.now(timezone.utc))

    async def get_analytics(self) -> AnalyticsReport:
        await simulate_latency(self.delay_ms)
        return compute_analytics(self.store.feedback(), now=self.clock())
