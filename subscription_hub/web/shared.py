"""
공유 객체 모듈 - 순환 import 방지
app.py 와 테스트에서 의존성 오버라이드로 사용하는 공통 객체
"""

from functools import lru_cache

from ..config import settings
from ..common.database.repository import get_session_factory
from ..common.subscription.manager import SubscriptionManager
from ..common.subscription.registry import get_registry


def get_db():
    """데이터베이스 세션 제너레이터"""
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache()
def get_subscription_manager() -> SubscriptionManager:
    """설정의 해지 정책으로 구성된 매니저"""
    return SubscriptionManager(
        registry=get_registry(),
        mode=settings.unsubscribe_mode,
        hard_delete_by_email_only=settings.hard_delete_by_email_only,
    )
