# 공통 응답 스키마
# - JSON 필드명은 기존 클라이언트 계약(camelCase 일부 포함)을 따르고,
#   파이썬 코드에서는 snake_case 이름으로 생성합니다 (populate_by_name).

from typing import Dict

from pydantic import BaseModel, ConfigDict

class ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

class MessageResponse(ApiModel):
    message: str

class FieldErrorResponse(ApiModel):
    errors: Dict[str, str]

class ErrorResponse(ApiModel):
    error: str
    message: str
