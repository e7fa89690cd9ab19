from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class HttpMethod(str, Enum):
    """지원하는 HTTP 메서드"""
    GET = "GET"
    POST = "POST"


class RequestConfig(BaseModel):
    """부하 테스트에서 전송할 단일 요청 설정"""
    endpoint: str = Field(..., description="base_url 기준 상대 경로 (예: index.html, api/data)")
    method: HttpMethod = Field(HttpMethod.GET, description="HTTP 메서드")
    body: Optional[str] = Field(None, description="POST 요청의 JSON 본문")

    model_config = {
        "frozen": True
    }

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, value: str) -> str:
        # base_url과 결합할 때 '//'가 생기지 않도록 앞쪽 '/' 제거
        endpoint = value.strip().lstrip("/")
        if not endpoint:
            raise ValueError("endpoint must be a non-empty relative path")
        return endpoint
