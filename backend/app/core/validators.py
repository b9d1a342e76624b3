# 회원가입/로그인 입력 검증
# - 순수 함수: DB나 외부 상태에 의존하지 않음
# - 처음 실패에서 멈추지 않고 실패한 필드를 모두 모아서 돌려줌

import re
from datetime import date, datetime
from typing import Dict, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field

DOB_FORMAT = "%Y-%m-%d"
PASSWORD_MIN_LENGTH = 8
# bcrypt는 72바이트 이후를 잘라내므로 그보다 긴 비밀번호는 받지 않습니다.
PASSWORD_MAX_BYTES = 72

_PASSWORD_RULES = (
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"\d"), "Password must contain at least one digit"),
    (re.compile(r"[^A-Za-z0-9]"), "Password must contain at least one special character"),
)


class ValidationResult(BaseModel):
    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _email_error(email: str) -> Optional[str]:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return "Email must be a valid email address"
    return None


def _password_error(password: str) -> Optional[str]:
    if len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return f"Password must be at most {PASSWORD_MAX_BYTES} bytes long"
    for pattern, message in _PASSWORD_RULES:
        if not pattern.search(password):
            return message
    return None


def _dob_error(dob: str, today: Optional[date] = None) -> Optional[str]:
    try:
        born = datetime.strptime(dob.strip(), DOB_FORMAT).date()
    except ValueError:
        return "Date of birth must be a valid date in YYYY-MM-DD format"
    if born > (today or date.today()):
        return "Date of birth cannot be in the future"
    return None


def validate_registration(
    fname: Optional[str],
    email: Optional[str],
    password: Optional[str],
    dob: Optional[str],
) -> ValidationResult:
    """회원가입 입력 검증

    Returns:
        ValidationResult: valid가 False이면 errors에 실패한 필드별 메시지가 담깁니다.
    """
    errors: Dict[str, str] = {}

    if _is_blank(fname):
        errors["fname"] = "Name must not be empty"

    if _is_blank(email):
        errors["email"] = "Email must not be empty"
    else:
        message = _email_error(email.strip())
        if message:
            errors["email"] = message

    if _is_blank(password):
        errors["password"] = "Password must not be empty"
    else:
        message = _password_error(password)
        if message:
            errors["password"] = message

    if _is_blank(dob):
        errors["dob"] = "Date of birth must not be empty"
    else:
        message = _dob_error(dob)
        if message:
            errors["dob"] = message

    return ValidationResult(valid=not errors, errors=errors)


def validate_login(email: Optional[str], password: Optional[str]) -> ValidationResult:
    errors: Dict[str, str] = {}

    if _is_blank(email):
        errors["email"] = "Email must not be empty"
    else:
        message = _email_error(email.strip())
        if message:
            errors["email"] = message

    if _is_blank(password):
        errors["password"] = "Password must not be empty"

    return ValidationResult(valid=not errors, errors=errors)


def validate_profile_update(
    fname: Optional[str] = None,
    email: Optional[str] = None,
    password: Optional[str] = None,
    dob: Optional[str] = None,
) -> ValidationResult:
    """프로필 수정 검증: 요청에 포함된 필드만 회원가입과 같은 규칙으로 검사합니다."""
    errors: Dict[str, str] = {}

    if fname is not None and _is_blank(fname):
        errors["fname"] = "Name must not be empty"

    if email is not None:
        message = "Email must not be empty" if _is_blank(email) else _email_error(email.strip())
        if message:
            errors["email"] = message

    if password is not None:
        message = "Password must not be empty" if _is_blank(password) else _password_error(password)
        if message:
            errors["password"] = message

    if dob is not None:
        message = "Date of birth must not be empty" if _is_blank(dob) else _dob_error(dob)
        if message:
            errors["dob"] = message

    return ValidationResult(valid=not errors, errors=errors)
