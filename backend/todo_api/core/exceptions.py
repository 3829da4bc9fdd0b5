# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 서비스/저장소 계층은 HTTP 를 모르는 도메인 예외만 던집니다.
# main.py 에 등록된 예외 핸들러가 각 예외의 status_code 로 응답을 만듭니다.

class TodoApiError(Exception):
    """모든 도메인 예외의 기본 클래스"""
    status_code = 400
    default_detail = "Bad request"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(TodoApiError):
    """필수 필드 누락, 형식 오류, 유니크 키 중복"""
    status_code = 400
    default_detail = "Validation failed"


class MalformedIdentifierError(TodoApiError):
    """ObjectId 형식이 아닌 id. 존재 여부를 조회하기 전에 거절합니다."""
    status_code = 400
    default_detail = "Malformed identifier"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed identifier: {value!r}")


class NotFoundError(TodoApiError):
    """없는 리소스, 또는 다른 사용자 소유의 리소스.

    두 경우를 구분하지 않아야 리소스 존재 여부가 노출되지 않습니다.
    """
    status_code = 404
    default_detail = "Not found"


class UnauthenticatedError(TodoApiError):
    status_code = 401
    default_detail = "Not authenticated"


class StoreError(TodoApiError):
    """분류되지 않은 저장소(MongoDB) 오류

    Attributes:
        operation: 실패한 저장소 작업 이름
    """
    status_code = 400
    default_detail = "Store operation failed"

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"[{operation}] {message}")


class ConfigurationError(Exception):
    """시작 시점에 치명적인 설정 오류 (예: 서명 비밀키 누락)"""
    pass
