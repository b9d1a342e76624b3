# 핀 저장소 레이어
# - 조회 필터(탐색/카테고리/검색)와 배열 필드 원자적 갱신 담당
# - comments/likes 배열은 $push/$addToSet/$pull 한 번으로 갱신합니다

import re
from typing import Any, List, Optional

from beanie import PydanticObjectId, UpdateResponse
from beanie.operators import NE, In, Or, RegEx

from ..models.pin import Pin
from .base import parse_object_id, touch

class PinRepository:
    async def create(self, pin: Pin) -> Pin:
        return await pin.insert()

    async def get(self, pin_id: str) -> Optional[Pin]:
        oid = parse_object_id(pin_id)
        if oid is None:
            return None
        return await Pin.get(oid)

    async def list_all(self) -> List[Pin]:
        return await Pin.find_all().to_list()

    async def get_many(self, pin_ids: List[Any]) -> List[Pin]:
        if not pin_ids:
            return []
        return await Pin.find(In(Pin.id, list(pin_ids))).to_list()

    async def find_by_tags(self, tags: List[str], exclude_id: Optional[PydanticObjectId] = None) -> List[Pin]:
        """태그 중 하나라도 가진 핀 목록. exclude_id가 주어지면 그 핀은 제외합니다."""
        if not tags:
            return []
        conditions = [In(Pin.tags, list(tags))]
        if exclude_id is not None:
            conditions.append(NE(Pin.id, exclude_id))
        return await Pin.find(*conditions).to_list()

    async def search(self, keyword: str) -> List[Pin]:
        # 키워드는 정규식이 아니라 문자열 그대로 비교합니다
        pattern = re.escape(keyword)
        return await Pin.find(
            Or(
                RegEx(Pin.title, pattern, "i"),
                RegEx(Pin.description, pattern, "i"),
                In(Pin.tags, [keyword]),
            )
        ).to_list()

    async def push_comment(self, pin_id: Any, comment_id: Any) -> Optional[Pin]:
        """댓글 id를 핀에 연결합니다. 핀이 없으면 None"""
        return await Pin.find_one(Pin.id == pin_id).update(
            {"$push": {"comments": comment_id}, "$set": touch()},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )

    async def add_like(self, pin_id: Any, user_id: Any) -> Optional[Pin]:
        """좋아요 추가 후 변경 전 문서를 돌려줍니다. 핀이 없으면 None"""
        return await Pin.find_one(Pin.id == pin_id).update(
            {"$addToSet": {"likes": user_id}, "$set": touch()},
            response_type=UpdateResponse.OLD_DOCUMENT,
        )

    async def remove_like(self, pin_id: Any, user_id: Any) -> Optional[Pin]:
        """해당 사용자 id만 likes에서 제거하고 변경 전 문서를 돌려줍니다. 핀이 없으면 None"""
        return await Pin.find_one(Pin.id == pin_id).update(
            {"$pull": {"likes": user_id}, "$set": touch()},
            response_type=UpdateResponse.OLD_DOCUMENT,
        )
