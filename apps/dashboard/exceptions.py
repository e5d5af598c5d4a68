"""
데이터 조회 실패 예외

메시지는 리소스별로 고정된 일반 문구("Failed to fetch ...")를 쓰고,
원인 구분은 예외 클래스로 한다.

    DataFetchError
    ├── ConnectionFailure    DB 연결/인터페이스 오류
    ├── ConstraintViolation  무결성 제약 위반
    └── QueryFailure         그 외 쿼리 오류

"없음(not found)"은 예외가 아니라 None 반환으로 표현한다.
"""
from django.db import IntegrityError, InterfaceError, OperationalError


class DataFetchError(Exception):
    """데이터 계층 공통 실패"""

    def __init__(self, message, resource=None):
        super().__init__(message)
        self.message = message
        self.resource = resource


class ConnectionFailure(DataFetchError):
    pass


class ConstraintViolation(DataFetchError):
    pass


class QueryFailure(DataFetchError):
    pass


def error_for(exc, message, resource=None):
    """Django DB 예외 → DataFetchError 하위 타입"""
    if isinstance(exc, (OperationalError, InterfaceError)):
        error_class = ConnectionFailure
    elif isinstance(exc, IntegrityError):
        error_class = ConstraintViolation
    else:
        error_class = QueryFailure
    return error_class(message, resource=resource)
