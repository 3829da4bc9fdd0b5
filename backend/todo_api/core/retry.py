# 재시도 로직 유틸리티
# 주니어 개발자님께: 서버가 막 뜰 때는 MongoDB 가 아직 준비되지 않아
# 첫 연결이 실패할 수 있습니다. 몇 번 재시도하면 성공하는 경우가 많습니다.
# tenacity 라이브러리를 사용하여 재시도 로직을 구현합니다.

import logging
from typing import Tuple, Type

from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
from tenacity import (
    after_log,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


def create_connect_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure, ServerSelectionTimeoutError),
):
    """
    저장소 연결용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    1. max_attempts: 최대 시도 횟수 (처음 1번 + 재시도)
    2. initial_wait / max_wait: 지수 백오프 대기 시간의 하한/상한 (초)
    3. exceptions: 이 예외가 발생했을 때만 재시도합니다.

    마지막 시도까지 실패하면 원래 예외를 그대로 다시 던집니다 (reraise=True).

    사용 예시:
        @create_connect_retry_decorator(max_attempts=5)
        async def ping():
            ...
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=2, min=initial_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.ERROR),
        reraise=True,
    )
