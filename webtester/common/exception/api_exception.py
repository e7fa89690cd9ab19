from webtester.common.response.code.base_code import BaseCode
from webtester.common.response.code.failure_code import FailureCode

class ApiException(Exception):
    def __init__(self, code: BaseCode, message: str = None):
        self.code = code
        self.message = message or code.message()
        super().__init__(self.message)


class LoadTestConfigException(ApiException):
    """부하 테스트 설정 오류 (start 시점에 즉시 실패)"""
    def __init__(self, message: str = None):
        super().__init__(FailureCode.INVALID_LOAD_TEST_CONFIG, message)


class LoadTestAlreadyRunningException(ApiException):
    """이전 실행이 끝나지 않은 상태에서 start 재호출"""
    def __init__(self, message: str = None):
        super().__init__(FailureCode.LOAD_TEST_ALREADY_RUNNING, message)
