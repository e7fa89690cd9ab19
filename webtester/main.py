import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from webtester.api import api_router
from webtester.core.config import settings
from webtester.common.exceptionhandler import register_exception_handler
from webtester.dependencies import get_load_test_controller

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작 시 실행
    logger.info("Starting Web Tester API...")
    controller = get_load_test_controller()

    if settings.AUTO_START:
        try:
            controller.start()
            logger.info("Continuous load test started on startup")
        except Exception as e:
            logger.error(f"Failed to start continuous load test: {e}")

    yield

    # 종료 시 실행
    logger.info("Shutting down Web Tester API...")
    await controller.shutdown()


app = FastAPI(
    title="Web Tester API",
    description="대상 HTTP 서버에 연속으로 부하를 발생시키고 요청 통계를 수집하는 API입니다.",
    version="1.0.0",
    docs_url="/api/swagger",
    lifespan=lifespan
)

app.include_router(api_router)

register_exception_handler(app)


def run():
    """uvicorn으로 API 서버 실행"""
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
