# 서비스 레이어 유닛 테스트
# 저장소를 AsyncMock으로 대체하여 분기 로직만 검증합니다 (DB 없음)
import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from beanie import PydanticObjectId
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import FieldValidationError, NotFoundError
from app.core.security import get_password_hash
from app.services import like_service, user_service
from app.services.auth_service import EMAIL_TAKEN, NAME_TAKEN, UNKNOWN_EMAIL, WRONG_PASSWORD, AuthService
from app.services.comment_service import CommentService
from app.services.like_service import LikeService
from app.services.pin_service import dedupe_tags
from app.services.user_service import UserService
from app.schemas.pin_schema import CommentCreate

PASSWORD = "Sup3r$ecret"

def _user(**fields):
    user = MagicMock()
    user.id = PydanticObjectId()
    user.fname = fields.get("fname", "alice")
    user.email = fields.get("email", "alice@pinmail.io")
    user.hashed_password = fields.get("hashed_password", "")
    user.saved_pins = fields.get("saved_pins", [])
    return user

def _pin(**fields):
    pin = MagicMock()
    pin.id = fields.get("id", PydanticObjectId())
    pin.likes = fields.get("likes", [])
    pin.comments = fields.get("comments", [])
    return pin

def test_register_rejects_existing_email_without_creating():
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=_user())
    repo.create = AsyncMock()
    service = AuthService(repo)

    with pytest.raises(FieldValidationError) as info:
        asyncio.run(service.register("alice", "alice@pinmail.io", PASSWORD, "1995-04-12"))

    assert info.value.errors == {"email": EMAIL_TAKEN}
    repo.create.assert_not_awaited()

def test_register_maps_duplicate_name_to_field_error():
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=DuplicateKeyError("E11000 duplicate key error"))
    service = AuthService(repo)

    with pytest.raises(FieldValidationError) as info:
        asyncio.run(service.register("alice", "alice@pinmail.io", PASSWORD, "1995-04-12"))

    assert info.value.errors == {"name": NAME_TAKEN}

def test_register_stores_hash_not_password():
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=None)
    repo.create = AsyncMock(return_value=_user())
    asyncio.run(AuthService(repo).register(" alice ", "alice@pinmail.io", PASSWORD, "1995-04-12"))

    fname, email, hashed, dob = repo.create.await_args.args
    assert fname == "alice"
    assert hashed != PASSWORD
    assert hashed.startswith("$2")

def test_login_unknown_email_and_wrong_password():
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=None)
    service = AuthService(repo)
    with pytest.raises(FieldValidationError) as info:
        asyncio.run(service.login("ghost@pinmail.io", PASSWORD))
    assert info.value.errors == {"email": UNKNOWN_EMAIL}

    repo.get_by_email = AsyncMock(return_value=_user(hashed_password=get_password_hash(PASSWORD)))
    with pytest.raises(FieldValidationError) as info:
        asyncio.run(service.login("alice@pinmail.io", "Wr0ng!pass"))
    assert info.value.errors == {"password": WRONG_PASSWORD}

def test_save_pin_reports_already_saved():
    pin = _pin()
    users = MagicMock()
    users.get = AsyncMock(return_value=_user())
    users.add_saved_pin = AsyncMock(return_value=_user(saved_pins=[pin.id]))
    pins = MagicMock()
    pins.get = AsyncMock(return_value=pin)

    message = asyncio.run(UserService(users, pins).save_pin("u", "p"))
    assert message == user_service.PIN_ALREADY_SAVED

def test_save_pin_missing_user_or_pin():
    users = MagicMock()
    users.get = AsyncMock(return_value=None)
    pins = MagicMock()
    pins.get = AsyncMock(return_value=_pin())
    with pytest.raises(NotFoundError):
        asyncio.run(UserService(users, pins).save_pin("u", "p"))

@patch("app.services.comment_service.Comment")
def test_comment_removed_when_pin_link_fails(mock_comment_model):
    pin = _pin()
    comment = MagicMock()
    comment.id = PydanticObjectId()
    pins = MagicMock()
    pins.get = AsyncMock(return_value=pin)
    pins.push_comment = AsyncMock(return_value=None)
    comments = MagicMock()
    comments.create = AsyncMock(return_value=comment)
    comments.delete = AsyncMock()

    payload = CommentCreate(username="alice", comment_text="nice")
    with pytest.raises(NotFoundError):
        asyncio.run(CommentService(comments, pins).create_comment(str(pin.id), payload))
    comments.delete.assert_awaited_once_with(comment)

def test_add_like_twice_is_idempotent():
    user_id = PydanticObjectId()
    pin = _pin(likes=[user_id])
    pins = MagicMock()
    pins.add_like = AsyncMock(return_value=pin)
    users = MagicMock()
    users.get = AsyncMock(return_value=_user())

    message, data = asyncio.run(LikeService(pins, users).add_like(str(pin.id), str(user_id)))
    assert message == like_service.ALREADY_LIKED
    assert data is pin

def test_like_rejects_malformed_user_id():
    service = LikeService(MagicMock(), MagicMock())
    with pytest.raises(FieldValidationError) as info:
        asyncio.run(service.add_like(str(PydanticObjectId()), "not-an-id"))
    assert "userId" in info.value.errors

def test_remove_like_skips_user_lookup():
    user_id = PydanticObjectId()
    before = _pin(likes=[user_id])
    after = _pin(id=before.id)
    pins = MagicMock()
    pins.remove_like = AsyncMock(return_value=before)
    pins.get = AsyncMock(return_value=after)
    users = MagicMock()
    users.get = AsyncMock(return_value=None)

    message, data = asyncio.run(LikeService(pins, users).remove_like(str(before.id), str(user_id)))
    assert message == like_service.UNLIKED
    assert data is after
    users.get.assert_not_called()

def test_dedupe_tags_keeps_first_occurrence_order():
    assert dedupe_tags(["a", "a", "b", "a"]) == ["a", "b"]
    assert dedupe_tags([]) == []
