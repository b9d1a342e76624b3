# User 도메인 모델 (Beanie Document)
# - 표시 이름(fname), 이메일, 비밀번호 해시, 생년월일, 저장한 핀 id 목록
# - fname은 unique 인덱스. 이메일 중복은 회원가입 시 애플리케이션에서만 검사합니다.

from datetime import datetime
from typing import List

from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field

class User(Document):
    fname: Indexed(str, unique=True)  # 중복 방지 인덱스
    email: Indexed(str)
    hashed_password: str = Field(repr=False)
    dob: str
    saved_pins: List[PydanticObjectId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "users"  # 컬렉션명
