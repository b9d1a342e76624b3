# 보안 유닛 테스트 (DB 의존성 없음)
from app.core.security import get_password_hash, verify_password

def test_password_hash_and_verify():
    pw = "S3cure!pw"
    hashed = get_password_hash(pw)
    assert hashed != pw
    assert verify_password(pw, hashed)
    assert not verify_password("wrong", hashed)

def test_password_hash_is_salted():
    pw = "S3cure!pw"
    assert get_password_hash(pw) != get_password_hash(pw)
