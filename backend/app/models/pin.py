# Pin 도메인 모델 (Beanie Document)
# - 제목, 이미지 주소, 태그, 댓글 id 목록, 좋아요한 사용자 id 목록
# - comments/likes는 참조 id 배열이며 응답 시 repository에서 실제 문서로 채웁니다.

from datetime import datetime
from typing import List, Optional

from beanie import Document, PydanticObjectId
from pydantic import Field

class Pin(Document):
    title: str
    link: Optional[str] = None
    img_source: str
    description: Optional[str] = None
    extras: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    allow_comment: bool = False
    comments: List[PydanticObjectId] = Field(default_factory=list)
    likes: List[PydanticObjectId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "pins"
        indexes = ["tags"]
