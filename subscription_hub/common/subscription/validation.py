"""
구독 요청 입력 검증 (DB 접근 전에 실행)
"""

from email_validator import validate_email, EmailNotValidError

from .errors import InvalidEmail, InvalidCategory
from .registry import CategoryRegistry


def is_valid_email(email) -> bool:
    """이메일 형식 검사 (DNS 조회 없음)"""
    if not isinstance(email, str) or not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_request(email, category, registry: CategoryRegistry) -> None:
    """이메일 → 카테고리 순으로 검사, 실패 시 예외"""
    if not is_valid_email(email):
        raise InvalidEmail()
    if category not in registry:
        raise InvalidCategory(
            f"Invalid category and should be one of {','.join(registry.names())}"
        )
