# FastAPI 진입점
# - Beanie ODM 초기화 (MongoDB) : lifespan에서 연결, 종료 시 해제
# - 라우터 라우팅 (기존 클라이언트 경로 그대로 루트에 등록)
# - CORS 설정 (기본값: 모든 origin 허용)
# - 도메인 예외 → HTTP 상태 코드 변환

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.database import Database
from .core.exceptions import DatabaseUnavailableError, FieldValidationError, NotFoundError
from .core.logging_config import RequestLoggingMiddleware, UnhandledErrorMiddleware, setup_logging
from .api.v1.auth import router as auth_router
from .api.v1.comments import router as comments_router
from .api.v1.likes import router as likes_router
from .api.v1.pins import router as pins_router
from .api.v1.users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    database: Database = app.state.database
    try:
        await database.connect()
    except Exception as e:
        # 연결에 실패해도 서버는 시작합니다. /health는 응답하고, DB가 필요한 API는 503을 돌려줍니다.
        logger.warning("MongoDB 연결 실패: %s", e)
        logger.warning("MongoDB URI를 확인하세요: %s", settings.MONGODB_URI)
    yield
    database.close()


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FieldValidationError)
    async def handle_field_errors(request: Request, exc: FieldValidationError):
        return JSONResponse(status_code=400, content={"errors": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        # 요청 본문 스키마 오류도 필드별 메시지 형식으로 통일합니다
        errors = {}
        for error in exc.errors():
            field = str(error["loc"][-1]) if error.get("loc") else "body"
            errors.setdefault(field, error.get("msg", "Invalid value"))
        return JSONResponse(status_code=400, content={"errors": errors})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": "not_found", "message": exc.message})

    @app.exception_handler(DatabaseUnavailableError)
    async def handle_db_unavailable(request: Request, exc: DatabaseUnavailableError):
        return JSONResponse(status_code=503, content={"error": "database_unavailable", "message": exc.message})


def create_app(database: Optional[Database] = None) -> FastAPI:
    app = FastAPI(
        title="Pinboard API",
        description="핀(이미지 게시물) 공유 서비스 백엔드: 회원, 핀, 댓글, 좋아요, 핀 저장",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database or Database()

    # 나중에 추가한 미들웨어가 바깥쪽: CORS -> 요청 로그 -> 500 변환 -> 라우터
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # CORS 허용 도메인 세팅
    origins = settings.cors_origins or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # 와일드카드 origin과 credentials는 함께 쓸 수 없습니다
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 간단한 헬스체크
    @app.get("/")
    async def root():
        return {"ok": True, "app": settings.APP_NAME, "time": datetime.utcnow().isoformat()}

    @app.get("/health")
    async def health_check():
        return {
            "status": "ok",
            "app": settings.APP_NAME,
            "database": "connected" if app.state.database.is_connected else "unavailable",
        }

    for router in (auth_router, users_router, pins_router, comments_router, likes_router):
        app.include_router(router, prefix=settings.API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
