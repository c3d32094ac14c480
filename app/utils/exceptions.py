"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns,
plus the portal's domain errors built on top of them. Services raise these;
the API boundary converts them into the result envelope.

Usage:
    from app.utils.exceptions import FeedbackNotFoundError
    raise FeedbackNotFoundError()
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that violates a uniqueness constraint.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when credentials are missing or invalid.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request is invalid beyond what Pydantic validation catches
    (e.g. invalid state transitions).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


# --- 도메인 예외 — Portal domain errors ---


class InvalidCredentialsError(UnauthorizedError):
    """이메일/비밀번호 불일치 — 이메일 존재 여부는 노출하지 않음.

    Raised by login for an unknown email and for a wrong secret alike.
    """

    def __init__(self, detail: str = "Invalid email or password") -> None:
        super().__init__(detail)


class EmailInUseError(DuplicateError):
    def __init__(self, detail: str = "Email already in use") -> None:
        super().__init__(detail)


class FeedbackNotFoundError(NotFoundError):
    def __init__(self, detail: str = "Feedback not found") -> None:
        super().__init__(detail)


class InvalidTransitionError(BadRequestError):
    """정방향 전환 강제 시 역행 요청 (Backwards move while forward transitions are enforced)."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(f"Cannot change status from {current} to {requested}")
