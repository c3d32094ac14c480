"""SQLAlchemy ORM 모델 패키지 — 모든 ORM 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all ORM models.
Importing from this package ensures every model is registered with the
SQLAlchemy metadata before create_all runs.

Modules:
    slot: 키-값 영속 슬롯 (Durable key-value slots)
"""

from app.models.slot import KeyValueSlot

__all__ = [
    "KeyValueSlot",
]
