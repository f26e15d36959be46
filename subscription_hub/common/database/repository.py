"""
데이터베이스 저장소 패턴 구현
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional
from contextlib import contextmanager

from sqlalchemy import create_engine, and_
from sqlalchemy.orm import sessionmaker, Session

logger = logging.getLogger(__name__)

from .models import Base, Subscription


_engine = None
_SessionLocal = None


def init_db(database_url: str = "sqlite:///./data/subscriptions.db") -> None:
    """데이터베이스 초기화"""
    global _engine, _SessionLocal

    if database_url.startswith("sqlite:///"):
        db_path = database_url.replace("sqlite:///", "")
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    _engine = create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False} if "sqlite" in database_url else {}
    )
    _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)

    Base.metadata.create_all(bind=_engine)
    logger.info(f"데이터베이스 초기화 완료: {_engine.url.render_as_string(hide_password=True)}")


@contextmanager
def get_session():
    """세션 컨텍스트 매니저"""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_session_factory():
    """세션 팩토리 반환 (웹 앱에서 사용)"""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _SessionLocal


class SubscriptionRepository:
    """구독 레코드 저장소"""

    @staticmethod
    def create(session: Session, email: str, category: str) -> Subscription:
        subscription = Subscription(
            email=email,
            category=category,
            created_at=datetime.utcnow(),
        )
        session.add(subscription)
        session.flush()
        return subscription

    @staticmethod
    def get_active(session: Session, email: str, category: str) -> Optional[Subscription]:
        """deleted_at 이 없는 구독 조회"""
        return session.query(Subscription).filter(
            and_(
                Subscription.email == email,
                Subscription.category == category,
                Subscription.deleted_at.is_(None)
            )
        ).first()

    @staticmethod
    def get_active_by_email(session: Session, email: str, category: Optional[str] = None) -> Optional[Subscription]:
        """email (선택적으로 category 포함) 로 활성 구독 하나 조회"""
        query = session.query(Subscription).filter(
            and_(Subscription.email == email, Subscription.deleted_at.is_(None))
        )
        if category is not None:
            query = query.filter(Subscription.category == category)
        return query.order_by(Subscription.id.asc()).first()

    @staticmethod
    def get_latest(session: Session, email: str, category: str) -> Optional[Subscription]:
        """가장 최근 생성된 레코드 (created_at 동률이면 id 가 큰 쪽)"""
        return (
            session.query(Subscription)
            .filter(and_(Subscription.email == email, Subscription.category == category))
            .order_by(Subscription.created_at.desc(), Subscription.id.desc())
            .limit(1)
            .first()
        )

    @staticmethod
    def mark_deleted(session: Session, subscription: Subscription) -> bool:
        """활성 레코드에 deleted_at 기록, 이미 기록된 경우 False"""
        updated = (
            session.query(Subscription)
            .filter(
                and_(
                    Subscription.id == subscription.id,
                    Subscription.deleted_at.is_(None)
                )
            )
            .update({Subscription.deleted_at: datetime.utcnow()}, synchronize_session=False)
        )
        session.flush()
        session.refresh(subscription)
        return updated > 0

    @staticmethod
    def delete(session: Session, subscription: Subscription) -> None:
        session.delete(subscription)
        session.flush()

    @staticmethod
    def get_history(session: Session, email: str, category: str) -> list[Subscription]:
        """(email, category) 전체 이력, 최신순"""
        return (
            session.query(Subscription)
            .filter(and_(Subscription.email == email, Subscription.category == category))
            .order_by(Subscription.created_at.desc(), Subscription.id.desc())
            .all()
        )
