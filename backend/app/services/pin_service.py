# 핀 서비스 레이어
# - 핀 생성 (태그 중복 제거)
# - 목록/단건/탐색/카테고리/슬라이드쇼/검색 조회
# - 응답 시 comments/likes 참조 id를 실제 문서로 채움(populate)

import logging
from typing import Dict, List

from fastapi import Depends

from ..core.config import settings
from ..core.exceptions import NotFoundError
from ..models.pin import Pin
from ..repositories.comment_repository import CommentRepository
from ..repositories.pin_repository import PinRepository
from ..repositories.user_repository import UserRepository
from ..schemas.pin_schema import CommentOut, PinCreate, PinOut
from ..schemas.user_schema import UserSummary

logger = logging.getLogger(__name__)

def dedupe_tags(tags: List[str]) -> List[str]:
    # 처음 나온 순서를 유지하면서 중복 제거
    return list(dict.fromkeys(tags))

class PinService:
    def __init__(self, pins: PinRepository, comments: CommentRepository, users: UserRepository):
        self.pins = pins
        self.comments = comments
        self.users = users

    async def create_pin(self, payload: PinCreate) -> Pin:
        pin = Pin(
            title=payload.title,
            link=payload.link,
            img_source=payload.img_source,
            description=payload.description,
            extras=payload.extras,
            tags=dedupe_tags(payload.tags),
            allow_comment=payload.allow_comment,
            comments=[],
            likes=[],
        )
        pin = await self.pins.create(pin)
        logger.info("Pin created: id=%s tags=%s", pin.id, pin.tags)
        return pin

    async def list_pins(self) -> List[PinOut]:
        return await self.resolve(await self.pins.list_all())

    async def get_pin(self, pin_id: str) -> PinOut:
        pin = await self.pins.get(pin_id)
        if not pin:
            raise NotFoundError("Pin", pin_id)
        resolved = await self.resolve([pin])
        return resolved[0]

    async def explore(self) -> List[PinOut]:
        return await self.resolve(await self.pins.find_by_tags([settings.EXPLORE_TAG]))

    async def related_by_category(self, pin_id: str) -> List[PinOut]:
        """기준 핀과 태그를 하나 이상 공유하는 다른 핀 목록

        탐색 태그는 모든 탐색용 핀이 공유하므로 비교 대상에서 뺍니다.
        """
        ref = await self.pins.get(pin_id)
        if not ref:
            raise NotFoundError("Pin", pin_id)
        tags = [t for t in ref.tags if t != settings.EXPLORE_TAG]
        return await self.resolve(await self.pins.find_by_tags(tags, exclude_id=ref.id))

    async def slideshow(self) -> Dict[str, List[PinOut]]:
        result = {}
        for category in settings.slideshow_categories:
            result[category] = await self.resolve(await self.pins.find_by_tags([category]))
        return result

    async def search(self, keyword: str) -> List[PinOut]:
        return await self.resolve(await self.pins.search(keyword))

    async def resolve(self, pins: List[Pin]) -> List[PinOut]:
        # 핀 전체의 참조 id를 모아 컬렉션별로 한 번씩만 조회합니다.
        comment_ids = {cid for pin in pins for cid in pin.comments}
        user_ids = {uid for pin in pins for uid in pin.likes}
        comments = {c.id: CommentOut.from_document(c) for c in await self.comments.get_many(list(comment_ids))}
        users = {u.id: UserSummary.from_document(u) for u in await self.users.get_many(list(user_ids))}

        return [
            PinOut.from_document(
                pin,
                comments=[comments[cid] for cid in pin.comments if cid in comments],
                likes=[users[uid] for uid in pin.likes if uid in users],
            )
            for pin in pins
        ]


def get_pin_service(
    pins: PinRepository = Depends(PinRepository),
    comments: CommentRepository = Depends(CommentRepository),
    users: UserRepository = Depends(UserRepository),
) -> PinService:
    return PinService(pins, comments, users)
