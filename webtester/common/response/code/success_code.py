from webtester.common.response.code.base_code import BaseCode

class SuccessCode(BaseCode):
    SUCCESS_CODE = ("요청 처리에 성공하였습니다.", 200)
    LOAD_TEST_STARTED = ("부하 테스트를 시작하였습니다.", 200)
    LOAD_TEST_STOP_REQUESTED = ("부하 테스트 중지를 요청하였습니다.", 200)
