# Comment 도메인 모델 (Beanie Document)
# - 작성자는 사용자 참조가 아니라 username 문자열로 저장됩니다.

from datetime import datetime

from beanie import Document, PydanticObjectId
from pydantic import Field

class Comment(Document):
    pin_id: PydanticObjectId
    username: str
    comment_text: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "comments"
