from dataclasses import dataclass, field
from typing import List, Dict, Any, Tuple

from pydantic import ValidationError

from webtester.schemas.load_test.request_config import RequestConfig


@dataclass
class LoadTestConfig:
    """연속 부하 테스트 실행 설정 (실행 중에는 다시 읽지 않음)"""
    base_url: str = "http://127.0.0.1"
    request_configs: List[RequestConfig] = field(default_factory=list)
    requests_per_batch: int = 100
    delay_between_requests: float = 0.1
    delay_between_batches: float = 1.0
    log_interval: float = 5.0
    timeout_seconds: float = 10.0
    # 설정 파싱 단계에서 발견된 오류 (start 시점에 보고)
    config_errors: List[str] = field(default_factory=list)

    @classmethod
    def from_settings(cls):
        """settings에서 설정값을 가져와서 LoadTestConfig 생성"""
        from webtester.core.config import settings
        config = settings.get_load_test_config()
        request_configs, config_errors = _parse_request_configs(settings.REQUEST_CONFIGS)
        return cls(
            base_url=config['base_url'],
            request_configs=request_configs,
            requests_per_batch=config['requests_per_batch'],
            delay_between_requests=config['delay_between_requests'],
            delay_between_batches=config['delay_between_batches'],
            log_interval=config['log_interval'],
            timeout_seconds=config['timeout_seconds'],
            config_errors=config_errors
        )

    def validation_errors(self) -> List[str]:
        """설정 오류 목록 반환 (비어 있으면 유효한 설정)"""
        errors = list(self.config_errors)

        if not self.base_url or not self.base_url.strip():
            errors.append("base_url must not be empty")

        if not self.request_configs:
            errors.append("request_configs must contain at least one request")

        if self.requests_per_batch < 1:
            errors.append(f"requests_per_batch must be positive (got {self.requests_per_batch})")

        if self.delay_between_requests < 0:
            errors.append(f"delay_between_requests must not be negative (got {self.delay_between_requests})")

        if self.delay_between_batches < 0:
            errors.append(f"delay_between_batches must not be negative (got {self.delay_between_batches})")

        if self.log_interval <= 0:
            errors.append(f"log_interval must be positive (got {self.log_interval})")

        if self.timeout_seconds <= 0:
            errors.append(f"timeout_seconds must be positive (got {self.timeout_seconds})")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base_url": self.base_url,
            "request_configs": [config.model_dump(mode="json") for config in self.request_configs],
            "requests_per_batch": self.requests_per_batch,
            "delay_between_requests": self.delay_between_requests,
            "delay_between_batches": self.delay_between_batches,
            "log_interval": self.log_interval,
            "timeout_seconds": self.timeout_seconds,
        }


def _parse_request_configs(raw: str) -> Tuple[List[RequestConfig], List[str]]:
    """
    REQUEST_CONFIGS 문자열을 RequestConfig 목록으로 변환

    잘못된 항목이 있어도 예외를 던지지 않고 오류 메시지로 모아서 반환한다.
    앱 시작 자체는 막지 않고 start() 시점에 설정 오류로 보고하기 위함.
    """
    from webtester.core.config import parse_request_configs

    try:
        entries = parse_request_configs(raw)
    except ValueError as e:
        return [], [f"REQUEST_CONFIGS: {e}"]

    request_configs = []
    errors = []
    for entry in entries:
        try:
            request_configs.append(RequestConfig(**entry))
        except ValidationError as e:
            messages = "; ".join(error["msg"] for error in e.errors())
            errors.append(f"REQUEST_CONFIGS entry '{entry['method']} {entry['endpoint']}': {messages}")

    return request_configs, errors
