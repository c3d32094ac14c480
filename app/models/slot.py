"""키-값 슬롯 SQLAlchemy ORM 모델 정의.

Key-value slot SQLAlchemy ORM model definition.
Each row is one durable slot holding a serialized collection.

Tables:
    - kv_slots: 영속 슬롯 (Named durable slots, e.g. db_users / db_feedback)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class KeyValueSlot(Base):
    """영속 슬롯 모델 — 컬렉션 하나의 직렬화된 JSON을 보관.

    Durable slot model — Stores the serialized JSON of one collection.
    The record store rewrites the whole value on every mutation.

    Attributes:
        key: 슬롯 이름 (Slot name, primary key)
        value: 직렬화된 컬렉션 (Serialized collection text)
        updated_at: 마지막 기록 일시 UTC (Last write timestamp)
    """

    __tablename__ = "kv_slots"

    # 슬롯 이름 — Slot name ("db_users", "db_feedback", "db_sequences")
    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    # 직렬화된 값 — Serialized collection (JSON text)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    # 기록 일시 — Last write timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
