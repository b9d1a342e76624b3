# 사용자 라우터
# - GET /user, GET /user/{id}, PUT /update/user/{id}, DELETE /user/{id}
# - POST /savepin/{user_id}/{pin_id}

from typing import List

from fastapi import APIRouter, Depends

from ...core.database import get_database
from ...schemas.common import ErrorResponse, FieldErrorResponse, MessageResponse
from ...schemas.pin_schema import UserDetail
from ...schemas.user_schema import UserPublic, UserUpdate
from ...services.user_service import UserService, get_user_service

router = APIRouter(
    tags=["users"],
    dependencies=[Depends(get_database)],
    responses={400: {"model": FieldErrorResponse}, 404: {"model": ErrorResponse}},
)

@router.get("/user", response_model=List[UserPublic], summary="전체 사용자 목록")
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()

@router.get("/user/{user_id}", response_model=UserDetail, summary="사용자 조회 (저장한 핀 포함)")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return await service.get_user(user_id)

@router.put("/update/user/{user_id}", response_model=UserDetail, summary="사용자 정보 부분 수정")
async def update_user(user_id: str, payload: UserUpdate, service: UserService = Depends(get_user_service)):
    return await service.update_user(user_id, payload)

@router.delete("/user/{user_id}", response_model=MessageResponse, summary="사용자 삭제")
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    await service.delete_user(user_id)
    return MessageResponse(message="User has been deleted.")

@router.post("/savepin/{user_id}/{pin_id}", response_model=MessageResponse, summary="핀 저장 (중복 저장 안 됨)")
async def save_pin(user_id: str, pin_id: str, service: UserService = Depends(get_user_service)):
    message = await service.save_pin(user_id, pin_id)
    return MessageResponse(message=message)
