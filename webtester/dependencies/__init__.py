from .services import get_load_test_controller

# Singleton Instance 관리 패키지
__all__ = [
    "get_load_test_controller",
]
