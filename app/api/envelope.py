"""결과 봉투(envelope) 유틸리티.

Result envelope utilities.
Every outward-facing call returns ``{"success": True, "data": ...}`` or
``{"success": False, "error": "<message>"}``. Domain errors raised by the
services (HTTPException subclasses) and input validation errors become the
failure form; anything else propagates.
"""

from collections.abc import Awaitable
from typing import Any

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from app.schemas.base import CamelModel

Envelope = dict[str, Any]


def to_plain(value: Any) -> Any:
    """모델/리스트를 camelCase JSON 호환 값으로 변환 (Convert models to camelCase plain data)."""
    if isinstance(value, CamelModel):
        return value.to_json_dict()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    return value


def ok(data: Any) -> Envelope:
    return {"success": True, "data": to_plain(data)}


def fail(message: str) -> Envelope:
    return {"success": False, "error": message}


def _validation_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first['msg']}" if location else first["msg"]


async def run_enveloped(call: Awaitable[Any]) -> tuple[Envelope, int]:
    """호출 결과를 봉투와 HTTP 상태 코드로 변환합니다.

    Await ``call`` and wrap its outcome.

    Returns:
        tuple[Envelope, int]: (봉투, 상태 코드) (Envelope and matching HTTP status)
    """
    try:
        result = await call
    except HTTPException as exc:
        return fail(str(exc.detail)), exc.status_code
    except ValidationError as exc:
        return fail(_validation_message(exc)), status.HTTP_422_UNPROCESSABLE_ENTITY
    return ok(result), status.HTTP_200_OK


async def envelope_response(call: Awaitable[Any], success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """라우터용 — 봉투를 JSONResponse로 반환 (Router helper returning the envelope as JSON)."""
    envelope, status_code = await run_enveloped(call)
    if envelope["success"]:
        status_code = success_status
    return JSONResponse(content=envelope, status_code=status_code)
