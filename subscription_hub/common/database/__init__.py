"""데이터베이스 패키지"""

from .models import Base, Subscription
from .repository import (
    init_db, get_session, get_session_factory,
    SubscriptionRepository
)

__all__ = [
    "Base", "Subscription",
    "init_db", "get_session", "get_session_factory",
    "SubscriptionRepository",
]
