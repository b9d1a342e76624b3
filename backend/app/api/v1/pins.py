# 핀 라우터
# - POST /create, GET /pin, GET /pin/{id}
# - GET /v/explore, GET /category/{id}, GET /unauth/slideshow, POST /search/{searchword}

from typing import Dict, List

from fastapi import APIRouter, Depends

from ...core.database import get_database
from ...schemas.common import ErrorResponse, FieldErrorResponse
from ...schemas.pin_schema import PinCreate, PinCreated, PinOut
from ...services.pin_service import PinService, get_pin_service

router = APIRouter(
    tags=["pins"],
    dependencies=[Depends(get_database)],
    responses={400: {"model": FieldErrorResponse}, 404: {"model": ErrorResponse}},
)

@router.post("/create", response_model=PinCreated, summary="핀 생성 (태그 중복 제거)")
async def create_pin(payload: PinCreate, service: PinService = Depends(get_pin_service)):
    pin = await service.create_pin(payload)
    return PinCreated(message="Pin Created successfully!", id=str(pin.id))

@router.get("/pin", response_model=List[PinOut], summary="전체 핀 목록")
async def list_pins(service: PinService = Depends(get_pin_service)):
    return await service.list_pins()

@router.get("/pin/{pin_id}", response_model=PinOut, summary="핀 단건 조회")
async def get_pin(pin_id: str, service: PinService = Depends(get_pin_service)):
    return await service.get_pin(pin_id)

@router.get("/v/explore", response_model=List[PinOut], summary="탐색 피드")
async def explore(service: PinService = Depends(get_pin_service)):
    return await service.explore()

@router.get("/category/{pin_id}", response_model=List[PinOut], summary="태그를 공유하는 관련 핀")
async def category(pin_id: str, service: PinService = Depends(get_pin_service)):
    return await service.related_by_category(pin_id)

@router.get("/unauth/slideshow", response_model=Dict[str, List[PinOut]], summary="카테고리별 슬라이드쇼")
async def slideshow(service: PinService = Depends(get_pin_service)):
    return await service.slideshow()

@router.post("/search/{searchword}", response_model=List[PinOut], summary="제목/설명/태그 검색")
async def search(searchword: str, service: PinService = Depends(get_pin_service)):
    return await service.search(searchword)
