from pydantic import BaseModel, Field


class EnabledRequest(BaseModel):
    """요청 전송 활성화 여부 변경 요청"""
    enabled: bool = Field(..., description="true면 새 배치 전송, false면 일시 정지")
