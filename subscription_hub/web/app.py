"""
Subscription Hub 웹 애플리케이션
카테고리별 이메일 구독/해지 API
"""

import logging

from fastapi import FastAPI, Request, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..config import settings
from ..common.subscription.errors import SubscriptionError, StorageFailure
from ..common.subscription.manager import SubscriptionManager
from .schemas import SubscriptionRequest, SubscriptionOut, CategoryListOut, ErrorOut
from .shared import get_db, get_subscription_manager

logger = logging.getLogger(__name__)

# FastAPI 앱 생성
app = FastAPI(
    title="Subscription Hub",
    description="카테고리별 이메일 구독 관리 API",
    version="1.0.0"
)

# 모든 Origin 허용
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorOut},
    500: {"model": ErrorOut},
}


@app.exception_handler(SubscriptionError)
async def subscription_error_handler(request: Request, exc: SubscriptionError):
    """도메인 예외 → {"error": message}"""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """잘못된 요청 본문은 422 대신 400"""
    logger.warning(f"잘못된 요청 본문: {request.url.path} {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# ==================== 구독 ====================

@app.post("/subscribe", response_model=SubscriptionOut, responses=ERROR_RESPONSES)
def subscribe(
    body: SubscriptionRequest,
    db: Session = Depends(get_db),
    manager: SubscriptionManager = Depends(get_subscription_manager),
):
    """카테고리 구독"""
    logger.info(f"Subscribe api - {body.model_dump()}")
    try:
        subscription = manager.subscribe(db, body.email, body.category)
        payload = SubscriptionOut.model_validate(subscription)
        db.commit()
        return payload
    except SubscriptionError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"구독 처리 오류: {e}", exc_info=True)
        raise StorageFailure()


# ==================== 구독 해지 ====================

@app.delete(
    "/unsubscribe",
    response_model=SubscriptionOut,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorOut}},
)
def unsubscribe(
    body: SubscriptionRequest,
    db: Session = Depends(get_db),
    manager: SubscriptionManager = Depends(get_subscription_manager),
):
    """카테고리 구독 해지 (soft: deleted_at 기록, hard: 삭제)"""
    logger.info(f"unsubscribe api - {body.model_dump()}")
    try:
        subscription = manager.unsubscribe(db, body.email, body.category)
        # hard 모드는 커밋 후 객체가 분리되므로 먼저 직렬화
        payload = SubscriptionOut.model_validate(subscription)
        db.commit()
        return payload
    except SubscriptionError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"구독 해지 처리 오류: {e}", exc_info=True)
        raise StorageFailure()


# ==================== 조회 ====================

@app.get("/categories", response_model=CategoryListOut)
def list_categories(manager: SubscriptionManager = Depends(get_subscription_manager)):
    """구독 가능한 카테고리 목록"""
    return CategoryListOut(categories=manager.registry.names())


@app.get("/health")
async def health():
    return {"status": "ok"}


# ==================== 서버 실행 ====================

def run_server():
    """웹 서버 실행"""
    import uvicorn

    logger.info(f"웹 서버 시작: http://{settings.web_host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.web_host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )
