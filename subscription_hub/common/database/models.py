"""
Subscription Hub 데이터베이스 모델 정의
"""

from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Index,
    text,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Subscription(Base):
    """카테고리 구독 레코드

    deleted_at 이 비어 있으면 활성 구독. soft 모드에서는 해지 시 삭제하지 않고
    deleted_at 을 기록하므로 (email, category) 당 여러 이력이 남는다.
    """
    __tablename__ = "subscribers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("idx_subscriber_email_category", "email", "category"),
        # 활성 구독은 (email, category) 당 하나
        Index(
            "uq_subscriber_active",
            "email", "category",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
        # 삭제된 id 재사용 방지
        {"sqlite_autoincrement": True},
    )

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    def __repr__(self):
        return f"<Subscription(email='{self.email}', category={self.category}, active={self.is_active})>"
