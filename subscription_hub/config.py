"""
Subscription Hub 설정 관리 모듈
"""

from pathlib import Path
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

DEFAULT_CATEGORIES = (
    "sports", "entertainment", "boycott", "hollywood", "bollywood", "politics",
    "crime", "religious", "automobile", "education", "health", "war",
    "business", "fashion", "environment", "accidents",
)


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 프로젝트 경로
    BASE_DIR: Path = Path(__file__).parent.parent

    # 데이터베이스
    database_url: str = Field(default="sqlite:///./data/subscriptions.db")

    # 웹 서버
    web_host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # 로깅
    log_level: str = Field(default="INFO")

    # 구독 해지 정책: soft = deleted_at 기록 (이력 보존), hard = 레코드 삭제
    unsubscribe_mode: Literal["soft", "hard"] = Field(default="soft")
    # hard 모드에서 category 없이 email 만으로 삭제 대상 조회
    hard_delete_by_email_only: bool = Field(default=False)

    # 구독 가능한 카테고리 (환경변수는 JSON 배열)
    categories: List[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))


@lru_cache()
def get_settings() -> Settings:
    """설정 싱글톤 반환"""
    return Settings()


settings = get_settings()
