# 사용자 요청/응답 스키마 정의 (Pydantic 모델)
# 회원가입/로그인 요청은 모든 필드를 선택값으로 받고, 필수 여부는 validators에서 한 번에 검사합니다.

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..models.user import User
from .common import ApiModel

class RegisterRequest(ApiModel):
    fname: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    dob: Optional[str] = None

class LoginRequest(ApiModel):
    email: Optional[str] = None
    password: Optional[str] = None

class LoginResponse(ApiModel):
    id: str = Field(alias="ID")
    email: str
    name: str = Field(alias="Name")

class UserUpdate(ApiModel):
    fname: Optional[str] = None
    email: Optional[str] = None
    dob: Optional[str] = None
    password: Optional[str] = None
    # 저장 목록 전체 교체 (핀 저장 취소에 사용)
    saved_pins: Optional[List[str]] = Field(None, alias="savedPins")


class UserSummary(ApiModel):
    id: str
    fname: str

    @classmethod
    def from_document(cls, user: User) -> "UserSummary":
        return cls(id=str(user.id), fname=user.fname)

class UserPublic(ApiModel):
    id: str
    fname: str
    email: str
    dob: str
    saved_pins: List[str] = Field(default_factory=list, alias="savedPins")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_document(cls, user: User) -> "UserPublic":
        return cls(
            id=str(user.id),
            fname=user.fname,
            email=user.email,
            dob=user.dob,
            saved_pins=[str(pin_id) for pin_id in user.saved_pins],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
