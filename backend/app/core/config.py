# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pathlib import Path
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트 루트 디렉토리 경로 찾기
# 이 파일은 backend/app/core/config.py에 있으므로 4단계 상위가 프로젝트 루트입니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "pinboard"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    # 라우트 공통 prefix. 기존 클라이언트 호환을 위해 기본값은 루트("")입니다.
    API_PREFIX: str = ""

    # 기존 배포 환경의 DB_URL 변수도 그대로 읽을 수 있게 별칭을 둡니다.
    MONGODB_URI: str = Field(
        default="mongodb://localhost:27017/pinboard",
        validation_alias=AliasChoices("MONGODB_URI", "DB_URL"),
    )
    # URI에 데이터베이스 이름이 없을 때 사용할 이름
    MONGODB_DB_NAME: str = "pinboard"
    MONGODB_TIMEOUT_MS: int = 5000
    DB_CONNECT_ATTEMPTS: int = 3

    CORS_ALLOW_ORIGINS: str = "*"

    # bcrypt cost factor
    BCRYPT_ROUNDS: int = 13

    # 탐색(Explore) 피드에 노출될 핀을 표시하는 태그
    EXPLORE_TAG: str = "Explorepage"
    # 로그인 전 슬라이드쇼에 보여줄 카테고리 (콤마 구분). "Traval"은 기존 데이터의 태그 철자 그대로입니다.
    SLIDESHOW_CATEGORIES: str = "Traval,Anime,Car,Act"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]

    @property
    def slideshow_categories(self) -> List[str]:
        return [c.strip() for c in self.SLIDESHOW_CATEGORIES.split(",") if c.strip()]

settings = Settings()
