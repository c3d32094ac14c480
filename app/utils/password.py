"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module.
Uses bcrypt directly; secrets are never kept in the record store as plain text.
"""

import base64
import hashlib

import bcrypt

from app.config import settings

# bcrypt 입력 한도 — bcrypt only accepts up to 72 bytes of input
_BCRYPT_MAX_BYTES: int = 72


def _bcrypt_input(password: str) -> bytes:
    """72바이트 초과 비밀번호는 SHA-256 다이제스트(base64)로 대체.

    Secrets longer than bcrypt's limit are replaced by their base64 SHA-256
    digest (44 bytes), so every byte of the secret still counts.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > _BCRYPT_MAX_BYTES:
        return base64.b64encode(hashlib.sha256(encoded).digest())
    return encoded


def hash_password(password: str, rounds: int | None = None) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password using bcrypt.
    The resulting hash includes a random salt, making each hash unique
    even for identical passwords.

    Args:
        password: 평문 비밀번호 (Plain text password to hash, any length)
        rounds: bcrypt 비용 — None이면 settings.BCRYPT_ROUNDS (Cost factor override)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash string, ~60 chars)
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_bcrypt_input(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a bcrypt hash.
    A stored value that is not a valid bcrypt hash never matches.

    Args:
        plain_password: 검증할 평문 비밀번호 (Plain text password to verify)
        hashed_password: 저장된 bcrypt 해시 (Stored bcrypt hash to compare against)

    Returns:
        bool: 일치하면 True, 불일치하면 False (True if password matches hash)
    """
    try:
        return bcrypt.checkpw(_bcrypt_input(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # 해시 형식이 아닌 저장값 — Stored value is not a bcrypt hash
        return False
