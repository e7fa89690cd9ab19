import logging
from fastapi import APIRouter, Depends

from webtester.common.response.code import SuccessCode
from webtester.common.response.response_template import ResponseTemplate
from webtester.dependencies import get_load_test_controller
from webtester.schemas.load_test.enabled_request import EnabledRequest
from webtester.services.testing.load_test_controller import LoadTestController

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/start",
    summary="연속 부하 테스트 시작 API",
    description="""
    설정된 base URL과 요청 목록으로 연속 부하 테스트를 시작합니다.

    ## ⚙️ 동작 과정
    1. **설정 검증**: 요청 목록이 비어 있거나 배치 크기가 1 미만이면 400을 반환합니다
    2. **초기화**: 요청 통계(sent/succeeded/failed)와 요청 순서(cursor)를 0으로 초기화합니다
    3. **실행**: 배치 실행과 배치 간 대기를 반복하고, 통계를 주기적으로 로그에 남깁니다

    ## 🔍 주의사항
    - 이미 실행 중이거나 이전 실행이 정리 중이면 409를 반환합니다
    - 요청 전송이 비활성화(enabled=false) 상태여도 실행은 시작되며, 배치만 보내지 않습니다
    """
)
async def start_load_test(controller: LoadTestController = Depends(get_load_test_controller)):
    controller.start()
    return ResponseTemplate.success(SuccessCode.LOAD_TEST_STARTED, controller.get_status())


@router.post(
    "/stop",
    summary="연속 부하 테스트 중지 API",
    description="중지 신호만 보내고 바로 응답합니다. 정리 완료 여부는 /status의 state로 확인합니다."
)
async def stop_load_test(controller: LoadTestController = Depends(get_load_test_controller)):
    controller.stop()
    return ResponseTemplate.success(SuccessCode.LOAD_TEST_STOP_REQUESTED, controller.get_status())


@router.get(
    "/enabled",
    summary="요청 전송 활성화 여부 조회 API",
)
async def get_enabled(controller: LoadTestController = Depends(get_load_test_controller)):
    return ResponseTemplate.success(
        SuccessCode.SUCCESS_CODE,
        {"enabled": controller.is_sending_requests()}
    )


@router.put(
    "/enabled",
    summary="요청 전송 활성화 여부 변경 API",
    description="false로 바꾸면 실행과 통계는 유지한 채 새 배치 전송만 멈춥니다."
)
async def set_enabled(
        request: EnabledRequest,
        controller: LoadTestController = Depends(get_load_test_controller),
):
    enabled = controller.set_sending_requests(request.enabled)
    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, {"enabled": enabled})


@router.get(
    "/status",
    summary="연속 부하 테스트 상태 조회 API",
    description="실행 상태, 요청 전송 여부, 누적 통계, 현재 cursor, 완료된 배치 수를 조회합니다."
)
async def get_load_test_status(controller: LoadTestController = Depends(get_load_test_controller)):
    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, controller.get_status())
