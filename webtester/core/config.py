import os
from typing import List, Dict, Any
from dotenv import load_dotenv

load_dotenv()


DEFAULT_REQUEST_CONFIGS = "GET index.html;GET sample.pdf;GET sample.png"


class Settings:
    """애플리케이션 설정"""

    # 대상 서버 설정
    TARGET_BASE_URL: str = os.getenv("TARGET_BASE_URL", "http://127.0.0.1")
    REQUEST_CONFIGS: str = os.getenv("REQUEST_CONFIGS", DEFAULT_REQUEST_CONFIGS)
    REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10.0"))

    # 부하 설정
    REQUESTS_PER_BATCH: int = int(os.getenv("REQUESTS_PER_BATCH", "100"))
    DELAY_BETWEEN_REQUESTS: float = float(os.getenv("DELAY_BETWEEN_REQUESTS", "0.1"))  # 초
    DELAY_BETWEEN_BATCHES: float = float(os.getenv("DELAY_BETWEEN_BATCHES", "1.0"))  # 초
    STATS_LOG_INTERVAL: float = float(os.getenv("STATS_LOG_INTERVAL", "5.0"))  # 5초마다 통계 로그

    # 실행 제어 설정
    SEND_REQUESTS: bool = os.getenv("SEND_REQUESTS", "true").lower() == "true"
    AUTO_START: bool = os.getenv("AUTO_START", "true").lower() == "true"

    # API 서버 설정
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    # 로깅 설정
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_load_test_config(cls) -> Dict[str, Any]:
        """부하 테스트 설정을 딕셔너리로 반환"""
        return {
            "base_url": cls.TARGET_BASE_URL,
            "requests_per_batch": cls.REQUESTS_PER_BATCH,
            "delay_between_requests": cls.DELAY_BETWEEN_REQUESTS,
            "delay_between_batches": cls.DELAY_BETWEEN_BATCHES,
            "log_interval": cls.STATS_LOG_INTERVAL,
            "timeout_seconds": cls.REQUEST_TIMEOUT_SECONDS,
        }


def parse_request_configs(raw: str) -> List[Dict[str, Any]]:
    """
    REQUEST_CONFIGS 문자열을 요청 설정 목록으로 변환

    형식: "METHOD endpoint [body];METHOD endpoint [body];..."
    예: "GET index.html;POST api/data {\"key\": \"value\"}"

    Args:
        raw: 세미콜론으로 구분된 요청 설정 문자열

    Returns:
        List[Dict]: method, endpoint, body 키를 가진 딕셔너리 목록
    """
    configs = []
    for entry in raw.split(";"):
        entry = entry.strip()
        if not entry:
            continue

        parts = entry.split(None, 2)
        if len(parts) < 2:
            raise ValueError(f"Invalid request config entry: '{entry}' (expected 'METHOD endpoint [body]')")

        method, endpoint = parts[0], parts[1]
        body = parts[2] if len(parts) == 3 else None
        configs.append({"method": method, "endpoint": endpoint, "body": body})

    return configs


settings = Settings()
