# 재시도 로직 유틸리티
# MongoDB가 컨테이너로 함께 뜨는 환경에서는 API 서버가 먼저 올라와
# 첫 연결이 실패할 수 있습니다. 시작 시 연결 확인(ping)에만 재시도를 적용합니다.
# 요청 처리 중의 DB 호출은 재시도하지 않습니다.

import logging
from typing import Tuple, Type

from pymongo.errors import ConnectionFailure
from tenacity import (
    after_log,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


def create_db_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure,),
):
    """
    DB 연결 확인용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    1. max_attempts: 최대 시도 횟수 (3이면 처음 1번 + 재시도 2번)
    2. initial_wait: 첫 재시도 전 대기 시간(초). 지수 백오프의 시작 값입니다.
    3. max_wait: 최대 대기 시간(초)
    4. exceptions: 재시도할 예외 타입. 서버 선택 타임아웃은 ConnectionFailure의 하위 클래스입니다.

    모든 시도가 실패하면 마지막 예외를 그대로 다시 발생시킵니다.
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=2, min=initial_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.ERROR),
        reraise=True,
    )
