import asyncio
from typing import Callable, List

import httpx

from webtester.schemas.load_test.load_test_config import LoadTestConfig
from webtester.schemas.load_test.request_config import RequestConfig

BASE_URL = "http://testserver"


def make_configs(*endpoints: str) -> List[RequestConfig]:
    return [RequestConfig(endpoint=endpoint) for endpoint in endpoints]


def make_load_test_config(**overrides) -> LoadTestConfig:
    values = dict(
        base_url=BASE_URL,
        request_configs=make_configs("index.html", "sample.pdf", "sample.png"),
        requests_per_batch=3,
        delay_between_requests=0.0,
        delay_between_batches=10.0,
        log_interval=10.0,
        timeout_seconds=5.0,
    )
    values.update(overrides)
    return LoadTestConfig(**values)


async def wait_until(predicate: Callable[[], bool], timeout: float = 2.0, interval: float = 0.005) -> bool:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while loop.time() < deadline:
        if predicate():
            return True
        await asyncio.sleep(interval)
    return predicate()


class RecordingHandler:
    """MockTransport 핸들러: 받은 요청을 기록하고 지정한 상태 코드로 응답"""

    def __init__(self, status_code: int = 200, delay: float = 0.0):
        self.status_code = status_code
        self.delay = delay
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return httpx.Response(self.status_code, json={"message": "ok"})

    @property
    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]


def connection_refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


