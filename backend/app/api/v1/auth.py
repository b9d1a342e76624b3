# 인증 라우터
# - 회원가입: POST /register
# - 로그인: POST /login (토큰 없이 사용자 식별 정보만 반환)

from fastapi import APIRouter, Depends

from ...core.database import get_database
from ...schemas.common import FieldErrorResponse, MessageResponse
from ...schemas.user_schema import LoginRequest, LoginResponse, RegisterRequest
from ...services.auth_service import AuthService, get_auth_service

router = APIRouter(
    tags=["auth"],
    dependencies=[Depends(get_database)],
    responses={400: {"model": FieldErrorResponse}},
)

@router.post("/register", response_model=MessageResponse, summary="회원가입 (입력 검증 + 이메일 중복 체크)")
async def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    await service.register(payload.fname, payload.email, payload.password, payload.dob)
    return MessageResponse(message="User registered successfully! Proceed to Login.")

@router.post("/login", response_model=LoginResponse, summary="로그인 (ID, email, Name 반환)")
async def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    user = await service.login(payload.email, payload.password)
    return LoginResponse(id=str(user.id), email=user.email, name=user.fname)
