import os

# 테스트 중에는 앱 시작 시 자동 실행하지 않음 (webtester import 전에 설정)
os.environ["AUTO_START"] = "false"

import pytest

from tests.helpers import RecordingHandler


@pytest.fixture
def recording_handler() -> RecordingHandler:
    return RecordingHandler()
