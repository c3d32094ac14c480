"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class
backing the durable key-value slots.
"""

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    All models inherit from this class to register with the metadata.
    """

    pass


def create_engine(database_url: str | None = None) -> AsyncEngine:
    """비동기 엔진을 생성합니다.

    Create an async engine for the given URL (defaults to settings.DATABASE_URL).
    pool_pre_ping=True validates pooled connections before use.
    """
    return create_async_engine(
        database_url or settings.DATABASE_URL,
        echo=settings.DEBUG,
        pool_pre_ping=True,
    )


def create_session_factory(eng: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit)
    return async_sessionmaker(eng, class_=AsyncSession, expire_on_commit=False)


async def create_tables(eng: AsyncEngine) -> None:
    """ORM 메타데이터로 테이블을 생성합니다 (이미 있으면 건너뜀).

    Create all tables registered on Base.metadata; existing tables are left alone.
    """
    # 모델 등록 — Register models with metadata before create_all
    import app.models  # noqa: F401

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# 비동기 데이터베이스 엔진 — Default engine built from settings
engine: AsyncEngine = create_engine()

# 비동기 세션 팩토리 — Default async session factory
async_session: async_sessionmaker[AsyncSession] = create_session_factory(engine)
