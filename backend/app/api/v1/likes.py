# 좋아요 라우터
# - POST /like/{pin_id}        body: {"userId": ...}
# - POST /like/delete/{pin_id} body: {"userId": ...}

from fastapi import APIRouter, Depends

from ...core.database import get_database
from ...schemas.common import ErrorResponse, FieldErrorResponse
from ...schemas.pin_schema import LikeRequest, LikeResponse, PinRef
from ...services.like_service import LikeService, get_like_service

router = APIRouter(
    prefix="/like",
    tags=["likes"],
    dependencies=[Depends(get_database)],
    responses={400: {"model": FieldErrorResponse}, 404: {"model": ErrorResponse}},
)

@router.post("/delete/{pin_id}", response_model=LikeResponse, summary="좋아요 취소")
async def remove_like(pin_id: str, payload: LikeRequest, service: LikeService = Depends(get_like_service)):
    message, pin = await service.remove_like(pin_id, payload.user_id)
    return LikeResponse(message=message, data=PinRef.from_document(pin))

@router.post("/{pin_id}", response_model=LikeResponse, summary="좋아요")
async def add_like(pin_id: str, payload: LikeRequest, service: LikeService = Depends(get_like_service)):
    message, pin = await service.add_like(pin_id, payload.user_id)
    return LikeResponse(message=message, data=PinRef.from_document(pin))
