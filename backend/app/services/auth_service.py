# 인증 서비스 레이어
# - 입력 검증, 이메일 중복 체크, 회원가입
# - 로그인 (비밀번호 검증 후 사용자 식별 정보 반환)

import logging

from fastapi import Depends
from pymongo.errors import DuplicateKeyError

from ..core.exceptions import FieldValidationError
from ..core.security import get_password_hash, verify_password
from ..core.validators import validate_login, validate_registration
from ..models.user import User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email address already exists!!! Proceed to Login."
NAME_TAKEN = "This username is already taken. Please choose a different one."
UNKNOWN_EMAIL = "The email you entered does not belong to any account."
WRONG_PASSWORD = "The entered password is incorrect"

class AuthService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def register(self, fname: str, email: str, password: str, dob: str) -> User:
        result = validate_registration(fname, email, password, dob)
        if not result.valid:
            raise FieldValidationError(result.errors)

        email = email.strip()
        existing = await self.repo.get_by_email(email)
        if existing:
            raise FieldValidationError({"email": EMAIL_TAKEN})

        hashed = get_password_hash(password)
        try:
            user = await self.repo.create(fname.strip(), email, hashed, dob.strip())
        except DuplicateKeyError as exc:
            # users 컬렉션의 unique 인덱스는 fname 하나뿐입니다
            raise FieldValidationError({"name": NAME_TAKEN}) from exc

        logger.info("User registered: id=%s", user.id)
        return user

    async def login(self, email: str, password: str) -> User:
        result = validate_login(email, password)
        if not result.valid:
            raise FieldValidationError(result.errors)

        user = await self.repo.get_by_email(email.strip())
        if not user:
            raise FieldValidationError({"email": UNKNOWN_EMAIL})
        if not verify_password(password, user.hashed_password):
            raise FieldValidationError({"password": WRONG_PASSWORD})
        return user


def get_auth_service(repo: UserRepository = Depends(UserRepository)) -> AuthService:
    return AuthService(repo)
