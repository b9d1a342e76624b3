# 앱 lifecycle 테스트: DB 연결 실패 시에도 서버는 뜨고, DB가 필요한 API는 503
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.core.database import Database
from app.main import create_app
from app.services.pin_service import get_pin_service

def test_server_starts_without_database():
    with patch.object(Database, "connect", AsyncMock(side_effect=ServerSelectionTimeoutError("down"))):
        with TestClient(create_app(Database(uri="mongodb://localhost:1/none"))) as client:
            health = client.get("/health")
            assert health.status_code == 200
            assert health.json()["database"] == "unavailable"

            resp = client.get("/pin")
            assert resp.status_code == 503
            assert resp.json()["error"] == "database_unavailable"

def test_root_and_cors(client):
    resp = client.get("/", headers={"Origin": "https://front.pinmail.io"})
    assert resp.status_code == 200
    assert resp.json()["ok"] is True
    assert resp.headers["access-control-allow-origin"] == "*"

def test_unexpected_error_is_500_with_cors(client):
    broken = MagicMock()
    broken.list_pins = AsyncMock(side_effect=RuntimeError("boom"))
    client.app.dependency_overrides[get_pin_service] = lambda: broken

    resp = client.get("/pin", headers={"Origin": "https://front.pinmail.io"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal Server Error", "error": "boom"}
    assert resp.headers["access-control-allow-origin"] == "*"
