"""
Subscription Hub 메인 실행 파일
카테고리별 이메일 구독 관리 서버
"""

import logging
import sys

from dotenv import load_dotenv

from subscription_hub.config import settings
from subscription_hub.common.database import init_db, get_session
from subscription_hub.common.subscription import SubscriptionError

logger = logging.getLogger(__name__)


def setup_logging():
    """로깅 설정 (콘솔 + 파일)"""
    log_dir = settings.BASE_DIR / "logs"
    log_dir.mkdir(exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_dir / "subscriptions.log", encoding="utf-8"),
        ],
    )


def print_status(email: str, category: str) -> int:
    """(email, category) 구독 상태와 이력 출력"""
    from subscription_hub.web.shared import get_subscription_manager

    manager = get_subscription_manager()
    try:
        manager.validate(email, category)
    except SubscriptionError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    with get_session() as session:
        subscribed = manager.is_subscribed(session, email, category)
        history = manager.history(session, email, category)
        print(f"{email} / {category}: {'subscribed' if subscribed else 'unsubscribed'}")
        for record in history:
            deleted = record.deleted_at.isoformat() if record.deleted_at else "-"
            print(f"  #{record.id} created={record.created_at.isoformat()} deleted={deleted}")
    return 0


def main():
    """메인 함수"""
    import argparse

    parser = argparse.ArgumentParser(description="Subscription Hub - 카테고리별 이메일 구독 관리")
    parser.add_argument("--web", action="store_true", help="웹 서버 실행 (기본값)")
    parser.add_argument("--init-db", action="store_true", help="테이블 생성 후 종료")
    parser.add_argument(
        "--status", nargs=2, metavar=("EMAIL", "CATEGORY"),
        help="구독 상태와 이력 조회", default=None
    )

    args = parser.parse_args()

    # 환경 변수 로드
    load_dotenv()
    setup_logging()

    # 데이터베이스 초기화
    logger.info("데이터베이스 초기화...")
    init_db(settings.database_url)

    if args.init_db:
        logger.info("테이블 생성 완료")
        return
    if args.status:
        sys.exit(print_status(*args.status))

    logger.info(f"해지 정책: {settings.unsubscribe_mode}")
    from subscription_hub.web.app import run_server
    run_server()


if __name__ == "__main__":
    main()
