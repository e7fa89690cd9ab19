from webtester.common.response.code.base_code import BaseCode

class FailureCode(BaseCode):
    INVALID_LOAD_TEST_CONFIG = ("부하 테스트 설정이 올바르지 않습니다", 400)
    LOAD_TEST_ALREADY_RUNNING = ("이미 실행 중인 부하 테스트가 있습니다", 409)
    INTERNAL_SERVER_ERROR = ("서버 내부 오류가 발생했습니다", 500)
