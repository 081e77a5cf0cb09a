"""upstream-guard 예외 계층.

계층 구조:
    UpstreamGuardError
    └── UpstreamError                 (업스트림 분류 결과의 기반, "이미 정규화됨" 표시)
        ├── UpstreamTimeoutError      (시간 제한 만료 → 504)
        └── UpstreamBadGatewayError   (그 외 업스트림 실패 → 502)
"""


class UpstreamGuardError(Exception):
    """upstream-guard의 모든 예외의 기반 클래스."""


class UpstreamError(UpstreamGuardError):
    """분류가 끝난 업스트림 실패. 원인 예외를 cause로 보존한다."""

    status_code = 502
    error = "Bad Gateway"

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class UpstreamTimeoutError(UpstreamError):
    """업스트림 호출이 시간 제한 안에 끝나지 않음."""

    status_code = 504
    error = "Gateway Timeout"


class UpstreamBadGatewayError(UpstreamError):
    """타임아웃 이외의 업스트림 실패 (프로토콜 오류, 예상 못한 예외, 비정상 status)."""

    status_code = 502
    error = "Bad Gateway"
