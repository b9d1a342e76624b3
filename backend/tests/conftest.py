# 테스트 공통 픽스처
# - 실제 MongoDB 대신 mongomock-motor 인메모리 클라이언트로 앱의 lifespan(init_beanie)을 그대로 실행
# - bcrypt cost를 낮춰 테스트 속도 확보 (앱 모듈 import 전에 환경변수 설정)

import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.database import Database
from app.main import create_app

PASSWORD = "Sup3r$ecret"


@pytest.fixture
def client():
    database = Database(db_name="pinboard_test", client=AsyncMongoMockClient())
    app = create_app(database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(client):
    """회원가입 후 로그인해서 사용자 id를 돌려주는 헬퍼"""
    def _make(fname="alice", email=None, password=PASSWORD, dob="1995-04-12"):
        email = email or f"{fname}@pinmail.io"
        resp = client.post("/register", json={"fname": fname, "email": email, "password": password, "dob": dob})
        assert resp.status_code == 200, resp.text
        login = client.post("/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        return login.json()["ID"]
    return _make


@pytest.fixture
def make_pin(client):
    def _make(title="Sunset", tags=None, **fields):
        body = {"title": title, "img_source": "https://img.pinmail.io/1.jpg", "tags": tags or [], **fields}
        resp = client.post("/create", json=body)
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]
    return _make
