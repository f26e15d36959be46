"""
API 요청/응답 스키마
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionRequest(BaseModel):
    # 형식 검증은 validation 모듈에서 (InvalidEmail / InvalidCategory 구분)
    email: Any = None
    category: Any = None


class SubscriptionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    category: str
    created_at: datetime = Field(serialization_alias="createdAt")
    deleted_at: Optional[datetime] = Field(default=None, serialization_alias="deletedAt")


class CategoryListOut(BaseModel):
    categories: List[str]


class ErrorOut(BaseModel):
    error: str
