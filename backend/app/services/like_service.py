# 좋아요 서비스 레이어
# - 추가: $addToSet 한 번으로 처리, 이미 좋아요한 경우 "Already liked" (200)
# - 취소: $pull로 해당 사용자 id만 제거, 좋아요가 없던 경우도 성공 응답

import logging
from typing import Tuple

from fastapi import Depends

from ..core.exceptions import FieldValidationError, NotFoundError
from ..models.pin import Pin
from ..repositories.base import parse_object_id
from ..repositories.pin_repository import PinRepository
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

LIKED = "Liked successfully"
ALREADY_LIKED = "Already liked"
UNLIKED = "Unliked successfully"
NOT_LIKED = "Pin was not liked"

class LikeService:
    def __init__(self, pins: PinRepository, users: UserRepository):
        self.pins = pins
        self.users = users

    async def add_like(self, pin_id: str, user_id: str) -> Tuple[str, Pin]:
        pin_oid, user_oid = self._parse_ids(pin_id, user_id)
        if not await self.users.get(user_oid):
            raise NotFoundError("User", user_id)
        before = await self.pins.add_like(pin_oid, user_oid)
        if before is None:
            raise NotFoundError("Pin", pin_id)
        if user_oid in before.likes:
            return ALREADY_LIKED, before
        logger.info("Pin liked: pin=%s user=%s", pin_oid, user_oid)
        return LIKED, await self._current(pin_oid, pin_id)

    async def remove_like(self, pin_id: str, user_id: str) -> Tuple[str, Pin]:
        # 삭제된 사용자의 좋아요도 지울 수 있도록 사용자 존재 여부는 확인하지 않습니다
        pin_oid, user_oid = self._parse_ids(pin_id, user_id)
        before = await self.pins.remove_like(pin_oid, user_oid)
        if before is None:
            raise NotFoundError("Pin", pin_id)
        if user_oid not in before.likes:
            return NOT_LIKED, before
        logger.info("Pin unliked: pin=%s user=%s", pin_oid, user_oid)
        return UNLIKED, await self._current(pin_oid, pin_id)

    def _parse_ids(self, pin_id: str, user_id: str):
        pin_oid = parse_object_id(pin_id)
        if pin_oid is None:
            raise NotFoundError("Pin", pin_id)
        user_oid = parse_object_id(user_id)
        if user_oid is None:
            raise FieldValidationError({"userId": "userId must be a valid user id"})
        return pin_oid, user_oid

    async def _current(self, pin_oid, pin_id: str) -> Pin:
        pin = await self.pins.get(pin_oid)
        if pin is None:
            raise NotFoundError("Pin", pin_id)
        return pin


def get_like_service(
    pins: PinRepository = Depends(PinRepository),
    users: UserRepository = Depends(UserRepository),
) -> LikeService:
    return LikeService(pins, users)
