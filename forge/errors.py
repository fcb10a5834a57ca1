"""
에러 분류 시스템

/render 요청 실패를 두 종류로 나눕니다.
- ForgeConnectionError: 요청을 보내지 못했거나 응답을 받지 못함 (타임아웃 포함)
- ForgeServerError: 응답은 받았으나 상태 코드가 200이 아님

이 계층에서는 재시도하지 않습니다.
"""

import json
from typing import Any


class ForgeError(Exception):
    """Forge SDK 기본 에러"""

    pass


class ForgeConnectionError(ForgeError):
    """서버 연결 실패 (네트워크/전송 계층 오류)"""

    def __init__(self, cause: BaseException):
        super().__init__(f"connection error: {cause}")
        self.cause = cause


class ForgeServerError(ForgeError):
    """서버가 200이 아닌 응답을 반환"""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"server error ({status_code}): {message}")
        self.status_code = status_code
        self.error_message = message


class ErrorClassifier:
    """전송 결과 분류기"""

    @classmethod
    def extract_message(cls, status_code: int, body: bytes | str | None) -> str:
        """응답 본문의 "error" 필드 추출

        본문이 없거나 JSON 객체가 아니거나 error 문자열이 없으면
        "HTTP <code>"를 반환합니다.

        Args:
            status_code: HTTP 상태 코드
            body: 응답 본문

        Returns:
            str: 에러 메시지
        """
        fallback = f"HTTP {status_code}"
        if not body:
            return fallback

        try:
            parsed: Any = json.loads(body)
        except (ValueError, TypeError):
            return fallback

        if not isinstance(parsed, dict):
            return fallback

        message = parsed.get("error")
        if not isinstance(message, str):
            return fallback
        return message

    @classmethod
    def from_response(cls, status_code: int, body: bytes | str | None) -> ForgeServerError:
        """200이 아닌 응답을 ForgeServerError로 변환"""
        return ForgeServerError(status_code, cls.extract_message(status_code, body))

    @classmethod
    def from_transport_error(cls, error: BaseException) -> ForgeConnectionError:
        """전송 계층 예외를 ForgeConnectionError로 변환"""
        return ForgeConnectionError(error)
