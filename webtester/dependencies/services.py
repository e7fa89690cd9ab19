from functools import lru_cache

from webtester.core.config import settings
from webtester.schemas.load_test.load_test_config import LoadTestConfig
from webtester.services.testing.continuous_runner import ContinuousRunner
from webtester.services.testing.load_test_controller import LoadTestController


@lru_cache()
def get_load_test_controller() -> LoadTestController:
    """설정값으로 구성한 LoadTestController 싱글턴 인스턴스 반환"""
    runner = ContinuousRunner(LoadTestConfig.from_settings())
    return LoadTestController(runner, send_requests=settings.SEND_REQUESTS)
