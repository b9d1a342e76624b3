# 댓글 라우터
# - POST /comment/{pin_id}

from fastapi import APIRouter, Depends

from ...core.database import get_database
from ...schemas.common import ErrorResponse, FieldErrorResponse
from ...schemas.pin_schema import CommentCreate, CommentOut, CommentResponse
from ...services.comment_service import CommentService, get_comment_service

router = APIRouter(
    tags=["comments"],
    dependencies=[Depends(get_database)],
    responses={400: {"model": FieldErrorResponse}, 404: {"model": ErrorResponse}},
)

@router.post("/comment/{pin_id}", response_model=CommentResponse, summary="댓글 작성")
async def create_comment(pin_id: str, payload: CommentCreate, service: CommentService = Depends(get_comment_service)):
    comment = await service.create_comment(pin_id, payload)
    return CommentResponse(message="Comment submitted", data=CommentOut.from_document(comment))
