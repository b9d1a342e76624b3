# 핀/댓글/좋아요 요청·응답 스키마

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..models.comment import Comment
from ..models.pin import Pin
from .common import ApiModel
from .user_schema import UserPublic, UserSummary

class PinCreate(ApiModel):
    title: str = Field(min_length=1)
    img_source: str = Field(min_length=1)
    link: Optional[str] = None
    description: Optional[str] = None
    extras: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    allow_comment: bool = False

class PinCreated(ApiModel):
    message: str
    id: str

class CommentCreate(ApiModel):
    username: str = Field(min_length=1)
    comment_text: str = Field(min_length=1, alias="commentText")

class CommentOut(ApiModel):
    id: str
    pin_id: str = Field(alias="pinId")
    username: str
    comment_text: str = Field(alias="commentText")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_document(cls, comment: Comment) -> "CommentOut":
        return cls(
            id=str(comment.id),
            pin_id=str(comment.pin_id),
            username=comment.username,
            comment_text=comment.comment_text,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )

class PinFields(ApiModel):
    id: str
    title: str
    link: Optional[str] = None
    img_source: str
    description: Optional[str] = None
    extras: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    allow_comment: bool = False
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @staticmethod
    def base_fields(pin: Pin) -> dict:
        return dict(
            id=str(pin.id),
            title=pin.title,
            link=pin.link,
            img_source=pin.img_source,
            description=pin.description,
            extras=pin.extras,
            tags=list(pin.tags),
            allow_comment=pin.allow_comment,
            created_at=pin.created_at,
            updated_at=pin.updated_at,
        )

class PinRef(PinFields):
    """comments/likes를 id 문자열 그대로 내보내는 핀"""
    comments: List[str] = Field(default_factory=list)
    likes: List[str] = Field(default_factory=list)

    @classmethod
    def from_document(cls, pin: Pin) -> "PinRef":
        return cls(
            comments=[str(c) for c in pin.comments],
            likes=[str(u) for u in pin.likes],
            **cls.base_fields(pin),
        )

class PinOut(PinFields):
    """comments는 댓글 객체로, likes는 사용자 요약으로 채운 핀"""
    comments: List[CommentOut] = Field(default_factory=list)
    likes: List[UserSummary] = Field(default_factory=list)

    @classmethod
    def from_document(cls, pin: Pin, comments: List[CommentOut], likes: List[UserSummary]) -> "PinOut":
        return cls(comments=comments, likes=likes, **cls.base_fields(pin))

class UserDetail(UserPublic):
    saved_pins: List[PinRef] = Field(default_factory=list, alias="savedPins")

class LikeRequest(ApiModel):
    user_id: str = Field(min_length=1, alias="userId")

class LikeResponse(ApiModel):
    success: bool = True
    message: str
    data: PinRef

class CommentResponse(ApiModel):
    success: bool = True
    message: str
    data: CommentOut
