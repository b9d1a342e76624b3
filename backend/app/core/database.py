# MongoDB 연결 리소스
# - 앱 시작(lifespan) 시 1회 연결 + Beanie 초기화, 종료 시 해제
# - 라우터는 get_database 의존성으로 연결 여부를 확인합니다
#
# 테스트에서는 client 인자로 인메모리 Motor 호환 클라이언트를 넘겨
# 같은 초기화 경로(init_beanie)를 그대로 사용합니다.

import logging
from typing import Optional

from beanie import init_beanie
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient

from ..models.comment import Comment
from ..models.pin import Pin
from ..models.user import User
from .config import settings
from .exceptions import DatabaseUnavailableError
from .retry import create_db_retry_decorator

logger = logging.getLogger(__name__)

DOCUMENT_MODELS = [User, Pin, Comment]


class Database:
    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None, client=None):
        self.uri = uri or settings.MONGODB_URI
        self.db_name = db_name
        self.client = client
        self.db = None
        # 외부에서 받은 클라이언트는 닫지 않습니다
        self._owns_client = client is None

    @property
    def is_connected(self) -> bool:
        return self.db is not None

    async def connect(self) -> None:
        if self.client is None:
            # serverSelectionTimeoutMS 안에 서버를 찾지 못하면 ServerSelectionTimeoutError가 발생합니다.
            self.client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS)
            await self._ping()

        if self.db_name:
            self.db = self.client[self.db_name]
        else:
            self.db = self.client.get_default_database(settings.MONGODB_DB_NAME)

        await init_beanie(database=self.db, document_models=DOCUMENT_MODELS)
        logger.info("MongoDB connected: database=%s", self.db.name)

    async def _ping(self) -> None:
        ping = create_db_retry_decorator(max_attempts=settings.DB_CONNECT_ATTEMPTS)(self._ping_once)
        await ping()

    async def _ping_once(self) -> None:
        await self.client.admin.command("ping")

    def close(self) -> None:
        if self.client is not None and self._owns_client:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.db = None


def get_database(request: Request) -> Database:
    """요청 처리 전에 DB 연결이 준비되어 있는지 확인하는 의존성"""
    database = getattr(request.app.state, "database", None)
    if database is None or not database.is_connected:
        raise DatabaseUnavailableError()
    return database
