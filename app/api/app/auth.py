"""앱 인증 라우터 — 주민 회원가입, 로그인.

App Auth Router — Resident signup and login endpoints.
Both return the sanitized profile inside the result envelope; no token is issued.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_auth_service
from app.api.envelope import envelope_response
from app.schemas.user import LoginRequest, SignupRequest
from app.services.auth_service import AuthService

router: APIRouter = APIRouter()


@router.post("/signup")
async def app_signup(
    data: SignupRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> JSONResponse:
    """회원가입 — user 역할 계정 생성.

    Signup endpoint. Creates a ``user`` role account.
    """
    return await envelope_response(
        service.signup(data.email, data.password, data.name, data.phone),
        success_status=201,
    )


@router.post("/login")
async def app_login(
    data: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> JSONResponse:
    """로그인 — 이메일/비밀번호 일치 시 프로필 반환.

    Login endpoint. Returns the profile when email and password match.
    """
    return await envelope_response(service.login(data.email, data.password))
