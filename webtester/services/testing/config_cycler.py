from typing import Sequence

from webtester.schemas.load_test.request_config import RequestConfig


class ConfigCycler:
    """
    요청 설정 목록을 순서대로 돌아가며 반환하는 라운드로빈 선택기

    cursor는 배치 스케줄러 하나만 변경한다 (thread-safe 하지 않음).
    """

    def __init__(self, request_configs: Sequence[RequestConfig]):
        if not request_configs:
            raise ValueError("ConfigCycler requires at least one request config")
        self._configs: Sequence[RequestConfig] = request_configs
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._configs)

    def next(self) -> RequestConfig:
        """현재 cursor의 설정을 반환하고 cursor를 한 칸 이동"""
        config = self._configs[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._configs)
        return config

    def reset(self) -> None:
        self._cursor = 0
