# 사용자 서비스 레이어
# - 사용자 목록/조회/수정/삭제
# - 핀 저장 (이미 저장된 핀이면 별도 메시지, 오류 아님)

import logging
from typing import List

from beanie import PydanticObjectId
from fastapi import Depends
from pymongo.errors import DuplicateKeyError

from ..core.exceptions import FieldValidationError, NotFoundError
from ..core.security import get_password_hash
from ..core.validators import validate_profile_update
from ..repositories.base import parse_object_id
from ..repositories.pin_repository import PinRepository
from ..repositories.user_repository import UserRepository
from ..schemas.pin_schema import PinRef, UserDetail
from ..schemas.user_schema import UserPublic, UserUpdate
from .auth_service import NAME_TAKEN

logger = logging.getLogger(__name__)

PIN_SAVED = "Pin saved successfully"
PIN_ALREADY_SAVED = "Pin already saved"

class UserService:
    def __init__(self, users: UserRepository, pins: PinRepository):
        self.users = users
        self.pins = pins

    async def list_users(self) -> List[UserPublic]:
        users = await self.users.list_all()
        return [UserPublic.from_document(u) for u in users]

    async def get_user(self, user_id: str) -> UserDetail:
        user = await self.users.get(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return await self._detail(user)

    async def update_user(self, user_id: str, changes: UserUpdate) -> UserDetail:
        fields = changes.model_dump(exclude_none=True)
        saved_pins = fields.pop("saved_pins", None)
        result = validate_profile_update(**fields)
        if not result.valid:
            raise FieldValidationError(result.errors)
        if saved_pins is not None:
            fields["saved_pins"] = self._saved_pin_ids(saved_pins)

        if "password" in fields:
            fields["hashed_password"] = get_password_hash(fields.pop("password"))
        for key in ("fname", "email", "dob"):
            if key in fields:
                fields[key] = fields[key].strip()

        if not fields:
            user = await self.users.get(user_id)
        else:
            try:
                user = await self.users.update(user_id, fields)
            except DuplicateKeyError as exc:
                raise FieldValidationError({"username": NAME_TAKEN}) from exc
        if not user:
            raise NotFoundError("User", user_id)
        return await self._detail(user)

    async def delete_user(self, user_id: str) -> None:
        deleted = await self.users.delete(user_id)
        if not deleted:
            raise NotFoundError("User", user_id, message="User does not exist")
        logger.info("User deleted: id=%s", user_id)

    async def save_pin(self, user_id: str, pin_id: str) -> str:
        user = await self.users.get(user_id)
        pin = await self.pins.get(pin_id)
        if not user or not pin:
            raise NotFoundError("User or pin", message="User or pin not found")

        before = await self.users.add_saved_pin(user_id, pin.id)
        if before is None:
            # 조회와 갱신 사이에 사용자가 삭제된 경우
            raise NotFoundError("User", user_id)
        if pin.id in before.saved_pins:
            return PIN_ALREADY_SAVED
        logger.info("Pin saved: user=%s pin=%s", user_id, pin.id)
        return PIN_SAVED

    @staticmethod
    def _saved_pin_ids(values: List[str]) -> List[PydanticObjectId]:
        ids = [parse_object_id(v) for v in values]
        if any(i is None for i in ids):
            raise FieldValidationError({"savedPins": "savedPins must contain valid pin ids"})
        # 같은 핀이 두 번 저장되지 않도록 순서를 유지하며 중복 제거
        return list(dict.fromkeys(ids))

    async def _detail(self, user) -> UserDetail:
        # 저장 목록 순서를 유지하고, 삭제된 핀(끊어진 참조)은 건너뜁니다
        saved = {p.id: p for p in await self.pins.get_many(user.saved_pins)}
        pins = [PinRef.from_document(saved[pid]) for pid in user.saved_pins if pid in saved]
        public = UserPublic.from_document(user).model_dump(exclude={"saved_pins"})
        return UserDetail(saved_pins=pins, **public)


def get_user_service(
    users: UserRepository = Depends(UserRepository),
    pins: PinRepository = Depends(PinRepository),
) -> UserService:
    return UserService(users, pins)
