from fastapi import APIRouter

from webtester.api.home_routes import router as home_router
from webtester.api.load_test_router import router as load_test_router

api_router = APIRouter()
api_router.include_router(
    home_router,
    tags=["home"],
)

api_router.include_router(
    load_test_router,
    prefix="/load-test",
    tags=["Load Test"]
)
