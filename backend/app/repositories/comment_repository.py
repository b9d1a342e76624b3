# 댓글 저장소 레이어

from typing import Any, List

from beanie.operators import In

from ..models.comment import Comment

class CommentRepository:
    async def create(self, comment: Comment) -> Comment:
        return await comment.insert()

    async def delete(self, comment: Comment) -> None:
        await comment.delete()

    async def get_many(self, comment_ids: List[Any]) -> List[Comment]:
        if not comment_ids:
            return []
        return await Comment.find(In(Comment.id, list(comment_ids))).to_list()
