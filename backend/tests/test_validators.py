# 입력 검증 유닛 테스트 (순수 함수)
from datetime import date

from app.core.validators import (
    _dob_error,
    validate_login,
    validate_profile_update,
    validate_registration,
)

def test_valid_registration():
    result = validate_registration("alice", "alice@pinmail.io", "Sup3r$ecret", "1995-04-12")
    assert result.valid
    assert result.errors == {}

def test_registration_collects_every_failing_field():
    result = validate_registration("", "not-an-email", "short", "12/04/1995")
    assert not result.valid
    assert set(result.errors) == {"fname", "email", "password", "dob"}

def test_registration_missing_fields():
    result = validate_registration(None, None, None, None)
    assert set(result.errors) == {"fname", "email", "password", "dob"}
    assert result.errors["email"] == "Email must not be empty"

def test_password_policy():
    weak = {
        "alllowercase1!": "uppercase",
        "ALLUPPERCASE1!": "lowercase",
        "NoDigitsHere!": "digit",
        "NoSpecial123": "special",
        "Sh0rt!": "at least 8",
    }
    for password, hint in weak.items():
        result = validate_registration("alice", "alice@pinmail.io", password, "1995-04-12")
        assert hint in result.errors["password"], password

def test_password_longer_than_bcrypt_limit():
    result = validate_registration("alice", "alice@pinmail.io", "Aa1!" + "x" * 80, "1995-04-12")
    assert "72" in result.errors["password"]

def test_dob_must_be_real_date():
    assert _dob_error("1995-02-30") is not None
    assert _dob_error("1995-02-28") is None

def test_dob_in_future_rejected():
    assert _dob_error("2030-01-01", today=date(2024, 1, 1)) == "Date of birth cannot be in the future"

def test_login_only_checks_presence_and_email_format():
    assert validate_login("alice@pinmail.io", "x").valid
    result = validate_login("bad", "")
    assert set(result.errors) == {"email", "password"}

def test_profile_update_checks_only_given_fields():
    assert validate_profile_update().valid
    assert validate_profile_update(fname="bob").valid
    result = validate_profile_update(email="nope", dob="yesterday")
    assert set(result.errors) == {"email", "dob"}
