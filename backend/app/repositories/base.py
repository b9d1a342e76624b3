# 저장소 공통 유틸

from datetime import datetime
from typing import Any, Optional

from beanie import PydanticObjectId
from bson.errors import InvalidId

def parse_object_id(value: Any) -> Optional[PydanticObjectId]:
    """문자열 id를 ObjectId로 변환합니다. 형식이 잘못된 id는 None (없는 문서와 동일하게 취급)"""
    if isinstance(value, PydanticObjectId):
        return value
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        return None

def touch() -> dict:
    # 배열 연산과 함께 보낼 updated_at 갱신용 $set
    return {"updated_at": datetime.utcnow()}
