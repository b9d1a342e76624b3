# 사용자 저장소 레이어
# - 데이터 접근(조회/생성/수정/삭제)만 담당 (서비스 로직 분리)
# - 저장한 핀 추가는 $addToSet 한 번으로 처리 (중복 없이, 읽고-쓰기 경합 없이)

from typing import Any, Dict, List, Optional

from beanie import UpdateResponse
from beanie.operators import In

from ..models.user import User
from .base import parse_object_id, touch

class UserRepository:
    async def get_by_email(self, email: str) -> Optional[User]:
        return await User.find_one(User.email == email)

    async def create(self, fname: str, email: str, hashed_password: str, dob: str) -> User:
        user = User(fname=fname, email=email, hashed_password=hashed_password, dob=dob, saved_pins=[])
        return await user.insert()

    async def get(self, user_id: str) -> Optional[User]:
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return await User.get(oid)

    async def list_all(self) -> List[User]:
        return await User.find_all().to_list()

    async def get_many(self, user_ids: List[Any]) -> List[User]:
        if not user_ids:
            return []
        return await User.find(In(User.id, list(user_ids))).to_list()

    async def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """부분 필드 병합 후 변경된 문서를 돌려줍니다. 사용자가 없으면 None"""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return await User.find_one(User.id == oid).update(
            {"$set": {**fields, **touch()}},
            response_type=UpdateResponse.NEW_DOCUMENT,
        )

    async def delete(self, user_id: str) -> bool:
        user = await self.get(user_id)
        if user is None:
            return False
        await user.delete()
        return True

    async def add_saved_pin(self, user_id: str, pin_id: Any) -> Optional[User]:
        """저장 목록에 핀을 추가하고 변경 전 문서를 돌려줍니다.

        변경 전 문서의 saved_pins에 이미 pin_id가 있었다면 이번 호출은 아무것도 바꾸지 않은 것입니다.
        """
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return await User.find_one(User.id == oid).update(
            {"$addToSet": {"saved_pins": pin_id}, "$set": touch()},
            response_type=UpdateResponse.OLD_DOCUMENT,
        )
