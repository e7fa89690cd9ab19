from webtester.common.response.code.base_code import BaseCode
from webtester.common.response.code.failure_code import FailureCode
from webtester.common.response.code.success_code import SuccessCode

__all__ = [
    'FailureCode',
    'SuccessCode',
    'BaseCode',
]
