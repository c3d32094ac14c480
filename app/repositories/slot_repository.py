"""영속 키-값 슬롯 레포지토리.

Durable key-value slot repositories.
A slot backend stores one serialized collection per key. The record store is
the only component that talks to a backend.

Usage:
    backend = SqlSlotRepository()              # kv_slots table via async SQLAlchemy
    backend = MemorySlotRepository()           # in-process fake for tests
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.database import create_session_factory, create_tables
from app.models.slot import KeyValueSlot


class SlotBackend(Protocol):
    """슬롯 백엔드 인터페이스 (Durable slot interface)."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class MemorySlotRepository:
    """메모리 슬롯 — 프로세스 수명 동안만 유지.

    In-memory slot backend. Survives store reloads within one process,
    which is enough to simulate a restart in tests.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.slots: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.slots.get(key)

    async def set(self, key: str, value: str) -> None:
        self.slots[key] = value


class SqlSlotRepository:
    """kv_slots 테이블 기반 영속 슬롯.

    Durable slot backend stored in the ``kv_slots`` table.
    The table is created on first access.

    Attributes:
        engine: 비동기 엔진 (Async engine)
    """

    def __init__(self, engine: AsyncEngine | None = None) -> None:
        if engine is None:
            from app.database import engine as default_engine
            engine = default_engine
        self.engine: AsyncEngine = engine
        self._session_factory: async_sessionmaker[AsyncSession] = create_session_factory(engine)
        self._schema_ready: bool = False

    async def _ensure_schema(self) -> None:
        if not self._schema_ready:
            await create_tables(self.engine)
            self._schema_ready = True

    async def get(self, key: str) -> str | None:
        """슬롯 값을 조회합니다. 없으면 None (Return the slot value or None)."""
        await self._ensure_schema()
        async with self._session_factory() as db:
            slot: KeyValueSlot | None = await db.get(KeyValueSlot, key)
            return slot.value if slot is not None else None

    async def set(self, key: str, value: str) -> None:
        """슬롯 값을 통째로 교체합니다 (Replace the whole slot value)."""
        await self._ensure_schema()
        async with self._session_factory() as db:
            slot: KeyValueSlot | None = await db.get(KeyValueSlot, key)
            if slot is None:
                db.add(KeyValueSlot(key=key, value=value))
            else:
                slot.value = value
            await db.commit()
