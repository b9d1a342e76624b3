# 커스텀 예외 클래스 정의
# 서비스 레이어는 HTTP를 모르고 아래 예외만 발생시킵니다.
# main.py에 등록된 예외 핸들러가 상태 코드와 JSON 본문으로 변환합니다.
#
#   PinboardError (기본)
#   ├── FieldValidationError      → 400 {"errors": {필드: 메시지}}
#   ├── NotFoundError             → 404
#   └── DatabaseUnavailableError  → 503

from typing import Dict


class PinboardError(Exception):
    """애플리케이션 예외의 기본 클래스"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FieldValidationError(PinboardError):
    """필드 단위 입력 오류

    클라이언트가 한 번의 응답으로 잘못된 필드를 모두 고칠 수 있도록
    실패한 필드 전체를 errors 딕셔너리에 담습니다.

    Attributes:
        errors: 필드 이름 → 사용자에게 보여줄 메시지
    """
    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class NotFoundError(PinboardError):
    """요청한 사용자/핀이 없거나 id 형식이 잘못된 경우

    Attributes:
        entity: 찾지 못한 대상 종류 (예: "Pin")
        entity_id: 요청에 들어온 id 문자열
    """
    def __init__(self, entity: str, entity_id: str = None, message: str = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found")


class DatabaseUnavailableError(PinboardError):
    """MongoDB 연결이 초기화되지 않은 상태에서 요청이 들어온 경우"""
    def __init__(self, message: str = "Database is not available"):
        super().__init__(message)
