"""사용자/인증 Pydantic 스키마.

User and authentication schemas.
User is the stored record (with the secret); PublicUser is the sanitized
profile handed back to callers.
"""

from typing import Literal

from pydantic import BaseModel

from app.schemas.base import CamelModel

UserRole = Literal["admin", "user"]


class PublicUser(CamelModel):
    """비밀번호가 제거된 사용자 프로필 (Sanitized user profile, no secret)."""

    id: str
    email: str
    name: str | None = None
    phone: str | None = None
    role: UserRole = "user"


class User(PublicUser):
    """저장되는 사용자 레코드 — password는 bcrypt 해시.

    Stored user record. ``password`` holds the bcrypt hash of the secret.
    """

    password: str

    def to_public(self) -> PublicUser:
        return PublicUser.model_validate(self.model_dump(exclude={"password"}))


class LoginRequest(BaseModel):
    email: str
    password: str


class SignupRequest(BaseModel):
    email: str
    password: str
    name: str | None = None
    phone: str | None = None
