"""
구독 처리 예외 정의

웹 계층에서 status_code 와 message 로 {"error": message} 응답을 만든다.
"""


class SubscriptionError(Exception):
    """구독 처리 기본 예외"""

    status_code = 400
    default_message = "Subscription request failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidEmail(SubscriptionError):
    default_message = "Invalid email address"


class InvalidCategory(SubscriptionError):
    default_message = "Invalid category"


class AlreadySubscribed(SubscriptionError):
    default_message = "User already subscribed to the category"


class AlreadyUnsubscribed(SubscriptionError):
    default_message = "User already unsubscribed to the category"


class NeverSubscribed(SubscriptionError):
    default_message = "No user subscribed to the category"


class NotSubscribed(SubscriptionError):
    """hard 모드 해지 대상 없음"""

    status_code = 404
    default_message = "No subscription found for the email"


class StorageFailure(SubscriptionError):
    status_code = 500
    default_message = "Internal server error"
