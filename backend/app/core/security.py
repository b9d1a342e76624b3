# 보안 유틸리티
# - 비밀번호 해싱/검증 (bcrypt, salt 포함)
# 로그인은 사용자 식별 정보만 돌려주며 토큰/세션은 발급하지 않습니다.

from passlib.context import CryptContext

from .config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
