"""분석 리포트 Pydantic 스키마.

Analytics report schema returned by the reports endpoint.
"""

from app.schemas.base import CamelModel


class AnalyticsReport(CamelModel):
    """피드백 집계 결과.

    Aggregated feedback analytics.

    Attributes:
        total_feedback: 전체 건수 (Collection size)
        status_breakdown: 상태별 건수 — 관측된 값만 (Counts per observed status)
        type_breakdown: 이슈 분류별 건수 (Counts per observed issue type)
        urgency_breakdown: 긴급도별 건수 (Counts per observed urgency)
        avg_resolution_time: 평균 해결 일수, 소수 1자리 (Mean days to resolve, 1 decimal)
        recent_activity: 최근 30일 내 갱신 건수 (Items updated in the recent window)
        resolved_percentage: 해결 비율 정수 % (Resolved share, whole percent)
        pending_percentage: 대기 비율 정수 % (Pending share, whole percent)
    """

    total_feedback: int
    status_breakdown: dict[str, int]
    type_breakdown: dict[str, int]
    urgency_breakdown: dict[str, int]
    avg_resolution_time: float
    recent_activity: int
    resolved_percentage: int
    pending_percentage: int
