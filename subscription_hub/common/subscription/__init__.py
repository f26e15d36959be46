"""구독 관리 패키지"""

from .errors import (
    SubscriptionError, InvalidEmail, InvalidCategory, AlreadySubscribed,
    AlreadyUnsubscribed, NeverSubscribed, NotSubscribed, StorageFailure
)
from .manager import SubscriptionManager, SOFT, HARD
from .registry import CategoryRegistry, get_registry
from .validation import validate_request, is_valid_email

__all__ = [
    "SubscriptionManager", "SOFT", "HARD",
    "CategoryRegistry", "get_registry",
    "validate_request", "is_valid_email",
    "SubscriptionError", "InvalidEmail", "InvalidCategory", "AlreadySubscribed",
    "AlreadyUnsubscribed", "NeverSubscribed", "NotSubscribed", "StorageFailure",
]
