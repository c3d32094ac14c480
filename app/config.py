"""애플리케이션 환경 설정 모듈.

Application configuration module using pydantic-settings.
All settings can be overridden via environment variables or a .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings

# .env 파일 절대 경로 — CWD와 무관하게 항상 프로젝트 루트의 .env를 참조
# Absolute path to .env file — ensures correct loading regardless of CWD
_ENV_FILE: Path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    """애플리케이션 전역 설정 — 환경 변수 기반 구성.

    Global application settings loaded from environment variables.
    Uses pydantic-settings for automatic env var parsing and .env file support.

    Attributes:
        DATABASE_URL: 슬롯 저장소용 비동기 DB 연결 문자열 (Async connection string for the slot table)
        APP_NAME: 애플리케이션 표시 이름 (Application display name)
        DEBUG: 디버그 모드 플래그 (Debug mode flag, enables SQL echo)
        SIMULATED_DELAY_MS: 서비스 호출 인공 지연 (Artificial latency per service call)
        BCRYPT_ROUNDS: 비밀번호 해시 비용 (bcrypt cost factor)
        ENFORCE_FORWARD_TRANSITIONS: 상태 역행 금지 여부 (Reject backwards status moves)
        RECENT_ACTIVITY_DAYS: 최근 활동 집계 기간 (Window for recent activity, in days)
    """

    # 데이터베이스 — 로컬 SQLite 파일 (aiosqlite 드라이버), PostgreSQL은 asyncpg URL 사용
    DATABASE_URL: str = "sqlite+aiosqlite:///./civic_portal.db"

    # 앱 메타데이터 — Application metadata
    APP_NAME: str = "Civic Feedback Portal API"
    DEBUG: bool = False  # True이면 SQLAlchemy SQL 로그 출력 (Enables SQL echo when True)

    # Axiom 로깅 설정 — Axiom observability platform settings
    AXIOM_API_TOKEN: str = ""  # Axiom API 토큰 (API token from Axiom dashboard)
    AXIOM_DATASET: str = ""  # Axiom 데이터셋 이름 (Dataset name for API logs)

    # 서비스 동작 설정 — Service behaviour
    SIMULATED_DELAY_MS: int = 0  # 0이면 지연 없음 (0 disables the delay)
    BCRYPT_ROUNDS: int = 12
    ENFORCE_FORWARD_TRANSITIONS: bool = False  # 기본값: 관리자 재량 전환 (Admin-discretionary by default)
    RECENT_ACTIVITY_DAYS: int = 30

    model_config = {"env_file": _ENV_FILE, "env_file_encoding": "utf-8"}


# 전역 설정 싱글턴 인스턴스 — Global settings singleton instance
settings: Settings = Settings()
