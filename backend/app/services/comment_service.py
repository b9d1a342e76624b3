# 댓글 서비스 레이어
# 댓글 저장 후 핀의 comments 배열에 id를 연결합니다.
# 연결에 실패하면(그 사이 핀이 사라진 경우) 방금 저장한 댓글을 지워
# 핀에서 보이지 않는 댓글이 남지 않게 합니다.

import logging

from fastapi import Depends

from ..core.exceptions import NotFoundError
from ..models.comment import Comment
from ..repositories.comment_repository import CommentRepository
from ..repositories.pin_repository import PinRepository
from ..schemas.pin_schema import CommentCreate

logger = logging.getLogger(__name__)

class CommentService:
    def __init__(self, comments: CommentRepository, pins: PinRepository):
        self.comments = comments
        self.pins = pins

    async def create_comment(self, pin_id: str, payload: CommentCreate) -> Comment:
        pin = await self.pins.get(pin_id)
        if not pin:
            raise NotFoundError("Pin", pin_id)

        comment = await self.comments.create(
            Comment(pin_id=pin.id, username=payload.username, comment_text=payload.comment_text)
        )
        linked = await self.pins.push_comment(pin.id, comment.id)
        if linked is None:
            logger.warning("Pin %s disappeared before comment %s was linked; removing comment", pin.id, comment.id)
            await self.comments.delete(comment)
            raise NotFoundError("Pin", pin_id)
        return comment


def get_comment_service(
    comments: CommentRepository = Depends(CommentRepository),
    pins: PinRepository = Depends(PinRepository),
) -> CommentService:
    return CommentService(comments, pins)
