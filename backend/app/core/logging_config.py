# 로깅 설정
# - 앱 시작 시 1회 basicConfig
# - 요청마다 method/path/status/소요시간을 access 로거로 기록
# - 처리되지 않은 예외는 500 JSON으로 변환 (CORS 미들웨어 안쪽에서 처리해 CORS 헤더가 붙도록)

import logging
import sys
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from .config import settings

access_logger = logging.getLogger("pinboard.access")
logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # 라이브러리 로그가 너무 많아서 줄임
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청 1건당 한 줄 로그. 5xx는 ERROR, 4xx는 WARNING, 나머지는 INFO"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        path = request.url.path
        if path == "/health":
            return await call_next(request)

        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        client = request.client.host if request.client else "unknown"
        access_logger.log(level, "%s %s %d %.1fms from %s", request.method, path, status, duration_ms, client)
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
            return JSONResponse(status_code=500, content={"message": "Internal Server Error", "error": str(exc)})
