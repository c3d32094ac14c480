"""레코드 저장소 — 사용자/피드백 컬렉션의 단일 소스.

Record store — Single source of truth for the user and feedback collections.
Collections live in memory and are written through to a durable slot backend
on every mutation (whole-collection replace, no batching).

Slots:
    - db_users: 사용자 JSON 배열 (User records)
    - db_feedback: 피드백 JSON 배열 (Feedback records)
    - db_sequences: 컬렉션별 마지막 발급 ID (Last issued id per collection)

Mutating methods must run inside ``transaction()`` so that a read-check-write
sequence from one coroutine is never interleaved with another's.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from app.repositories.slot_repository import SlotBackend
from app.schemas.feedback import FeedbackItem
from app.schemas.user import User
from app.seed import bootstrap_feedback, bootstrap_users

logger = logging.getLogger(__name__)

USERS_KEY: str = "db_users"
FEEDBACK_KEY: str = "db_feedback"
SEQUENCES_KEY: str = "db_sequences"

T = TypeVar("T")

_users_adapter: TypeAdapter[list[User]] = TypeAdapter(list[User])
_feedback_adapter: TypeAdapter[list[FeedbackItem]] = TypeAdapter(list[FeedbackItem])
_sequences_adapter: TypeAdapter[dict[str, int]] = TypeAdapter(dict[str, int])


def _max_numeric_id(records: list[Any]) -> int:
    """숫자형 ID 중 최댓값, 없으면 컬렉션 길이 (Largest numeric id, else collection size)."""
    numeric = [int(r.id) for r in records if r.id.isdecimal()]
    return max(numeric) if numeric else len(records)


class RecordStore:
    """사용자/피드백 레코드 저장소.

    Owns the user and feedback collections. Every value handed out is a deep
    copy; callers change stored state only through the mutation methods.

    Attributes:
        backend: 영속 슬롯 백엔드 (Durable slot backend)
    """

    def __init__(self, backend: SlotBackend) -> None:
        self.backend: SlotBackend = backend
        self._users: list[User] = []
        self._feedback: list[FeedbackItem] = []
        self._sequences: dict[str, int] = {"users": 0, "feedback": 0}
        self._lock: asyncio.Lock = asyncio.Lock()
        self.loaded: bool = False

    # --- 로딩 — Loading ---

    async def _read(self, key: str, adapter: TypeAdapter[T]) -> T | None:
        raw: str | None = await self.backend.get(key)
        if raw is None:
            return None
        try:
            return adapter.validate_json(raw)
        except ValidationError as exc:
            # 손상된 슬롯은 없는 것으로 취급 — Corrupt slot is treated as absent
            logger.warning("Discarding unreadable slot %s: %s", key, exc.error_count())
            return None

    async def load(self, now: datetime | None = None) -> None:
        """슬롯에서 컬렉션을 읽고, 없거나 손상되면 부트스트랩 데이터로 채웁니다.

        Load both collections from the backend. A missing or malformed slot is
        replaced by the bootstrap dataset, which is persisted immediately.

        Args:
            now: 부트스트랩 타임스탬프 기준 시각 (Reference time for seeded timestamps)
        """
        async with self._lock:
            users = await self._read(USERS_KEY, _users_adapter)
            if users is None:
                users = bootstrap_users()
                await self._write(USERS_KEY, _users_adapter, users)

            feedback = await self._read(FEEDBACK_KEY, _feedback_adapter)
            if feedback is None:
                feedback = bootstrap_feedback(now)
                await self._write(FEEDBACK_KEY, _feedback_adapter, feedback)

            stored = await self._read(SEQUENCES_KEY, _sequences_adapter) or {}
            sequences = {
                "users": max(stored.get("users", 0), _max_numeric_id(users)),
                "feedback": max(stored.get("feedback", 0), _max_numeric_id(feedback)),
            }
            if sequences != stored:
                await self._write(SEQUENCES_KEY, _sequences_adapter, sequences)

            self._users, self._feedback, self._sequences = users, feedback, sequences
            self.loaded = True

    async def reset(self, now: datetime | None = None) -> None:
        """모든 슬롯을 부트스트랩 데이터로 덮어씁니다 (Overwrite every slot with the bootstrap dataset)."""
        async with self._lock:
            users, feedback = bootstrap_users(), bootstrap_feedback(now)
            sequences = {"users": _max_numeric_id(users), "feedback": _max_numeric_id(feedback)}
            await self._write(SEQUENCES_KEY, _sequences_adapter, sequences)
            await self._write(USERS_KEY, _users_adapter, users)
            await self._write(FEEDBACK_KEY, _feedback_adapter, feedback)
            self._users, self._feedback, self._sequences = users, feedback, sequences
            self.loaded = True

    async def _write(self, key: str, adapter: TypeAdapter[T], value: T) -> None:
        payload: bytes = adapter.dump_json(value, by_alias=True, exclude_none=True)
        try:
            await self.backend.set(key, payload.decode("utf-8"))
        except Exception:
            logger.exception("Failed to persist slot %s", key)
            raise

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["RecordStore"]:
        """변경 작업 구간 — 코루틴 간 상호 배제 (Mutual exclusion for read-modify-write)."""
        async with self._lock:
            yield self

    # --- 조회 — Reads (always copies) ---

    def users(self) -> list[User]:
        return [u.model_copy(deep=True) for u in self._users]

    def feedback(self) -> list[FeedbackItem]:
        return [f.model_copy(deep=True) for f in self._feedback]

    def find_user_by_email(self, email: str) -> User | None:
        for user in self._users:
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    def find_feedback(self, feedback_id: str) -> FeedbackItem | None:
        for item in self._feedback:
            if item.id == feedback_id:
                return item.model_copy(deep=True)
        return None

    # --- 변경 — Mutations (call inside transaction()) ---

    async def _issue_id(self, collection: str) -> tuple[str, dict[str, int]]:
        sequences = {**self._sequences, collection: self._sequences[collection] + 1}
        await self._write(SEQUENCES_KEY, _sequences_adapter, sequences)
        return str(sequences[collection]), sequences

    async def add_user(self, fields: dict[str, Any]) -> User:
        """새 ID를 발급해 사용자를 추가하고 저장합니다 (Append a user under a freshly issued id)."""
        new_id, sequences = await self._issue_id("users")
        user = User.model_validate({**fields, "id": new_id})
        users = [*self._users, user]
        await self._write(USERS_KEY, _users_adapter, users)
        self._users, self._sequences = users, sequences
        return user.model_copy(deep=True)

    async def add_feedback(self, fields: dict[str, Any]) -> FeedbackItem:
        """새 ID를 발급해 피드백을 추가하고 저장합니다 (Append a feedback item under a freshly issued id)."""
        new_id, sequences = await self._issue_id("feedback")
        item = FeedbackItem.model_validate({**fields, "id": new_id})
        feedback = [*self._feedback, item]
        await self._write(FEEDBACK_KEY, _feedback_adapter, feedback)
        self._feedback, self._sequences = feedback, sequences
        return item.model_copy(deep=True)

    async def replace_feedback(self, item: FeedbackItem) -> FeedbackItem | None:
        """같은 ID의 레코드를 교체합니다. 없으면 None (Replace in place; None when absent)."""
        for index, current in enumerate(self._feedback):
            if current.id == item.id:
                stored = item.model_copy(deep=True)
                feedback = [*self._feedback[:index], stored, *self._feedback[index + 1:]]
                await self._write(FEEDBACK_KEY, _feedback_adapter, feedback)
                self._feedback = feedback
                return stored.model_copy(deep=True)
        return None

    async def remove_feedback(self, feedback_id: str) -> bool:
        """피드백을 삭제합니다. 삭제 여부 반환 (Remove by id; returns whether it existed)."""
        feedback = [f for f in self._feedback if f.id != feedback_id]
        if len(feedback) == len(self._feedback):
            return False
        await self._write(FEEDBACK_KEY, _feedback_adapter, feedback)
        self._feedback = feedback
        return True
