from webtester.services.testing.continuous_runner import ContinuousRunner, RunState
from webtester.services.testing.load_test_controller import LoadTestController

__all__ = [
    "ContinuousRunner",
    "RunState",
    "LoadTestController",
]
