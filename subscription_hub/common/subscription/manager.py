"""
구독 관리 매니저
(email, category) 단위 구독/해지 상태 전이
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database.models import Subscription
from ..database.repository import SubscriptionRepository
from .errors import (
    AlreadySubscribed, AlreadyUnsubscribed, NeverSubscribed, NotSubscribed
)
from .registry import CategoryRegistry
from .validation import validate_request

logger = logging.getLogger(__name__)

SOFT = "soft"
HARD = "hard"


class SubscriptionManager:
    """구독 관리 매니저

    mode 가 soft 이면 해지 시 deleted_at 만 기록하고 이력을 남긴다.
    hard 이면 레코드를 삭제한다.
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        mode: str = SOFT,
        hard_delete_by_email_only: bool = False,
    ):
        if mode not in (SOFT, HARD):
            raise ValueError(f"지원하지 않는 해지 모드입니다: {mode}")
        self.registry = registry
        self.mode = mode
        self.hard_delete_by_email_only = hard_delete_by_email_only

    def validate(self, email, category) -> None:
        """입력 검증 (DB 접근 없음)"""
        validate_request(email, category, self.registry)

    def subscribe(self, session: Session, email: str, category: str) -> Subscription:
        """구독 - 활성 구독이 있으면 AlreadySubscribed"""
        self.validate(email, category)

        if SubscriptionRepository.get_active(session, email, category):
            raise AlreadySubscribed()

        try:
            subscription = SubscriptionRepository.create(session, email, category)
        except IntegrityError:
            # 동시 요청이 먼저 생성한 경우 (활성 구독 유니크 인덱스)
            session.rollback()
            logger.info(f"동시 구독 요청 충돌: email={email}, category={category}")
            raise AlreadySubscribed()

        logger.info(f"구독 완료: email={email}, category={category}")
        return subscription

    def unsubscribe(self, session: Session, email: str, category: str) -> Subscription:
        """구독 해지 - 해지된 레코드 반환"""
        self.validate(email, category)

        if self.mode == HARD:
            return self._hard_unsubscribe(session, email, category)
        return self._soft_unsubscribe(session, email, category)

    def _hard_unsubscribe(self, session: Session, email: str, category: str) -> Subscription:
        scope = None if self.hard_delete_by_email_only else category
        subscription = SubscriptionRepository.get_active_by_email(session, email, scope)
        if not subscription:
            raise NotSubscribed()

        SubscriptionRepository.delete(session, subscription)
        logger.info(
            f"구독 삭제 완료: email={email}, category={subscription.category}"
        )
        return subscription

    def _soft_unsubscribe(self, session: Session, email: str, category: str) -> Subscription:
        latest = SubscriptionRepository.get_latest(session, email, category)
        if latest is None:
            raise NeverSubscribed()
        if latest.deleted_at is not None:
            raise AlreadyUnsubscribed()

        if not SubscriptionRepository.mark_deleted(session, latest):
            # 동시 해지 요청이 먼저 처리됨
            raise AlreadyUnsubscribed()

        logger.info(f"구독 해지 완료: email={email}, category={category}")
        return latest

    def is_subscribed(self, session: Session, email: str, category: str) -> bool:
        """활성 구독 여부"""
        return SubscriptionRepository.get_active(session, email, category) is not None

    def history(self, session: Session, email: str, category: str) -> List[Subscription]:
        """(email, category) 구독 이력, 최신순"""
        return SubscriptionRepository.get_history(session, email, category)
