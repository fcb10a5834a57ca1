"""
클라이언트 설정

환경변수 기반 설정 관리.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 120.0  # 연결 타임아웃 (초)


class ConfigurationError(Exception):
    """설정 오류 예외"""

    pass


@dataclass
class ClientConfig:
    """Forge 클라이언트 설정"""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """환경변수에서 설정 로드

        FORGE_URL, FORGE_TIMEOUT을 읽습니다.

        Raises:
            ConfigurationError: FORGE_TIMEOUT이 숫자가 아닐 때
        """
        timeout_str = os.getenv("FORGE_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_str)
        except ValueError as e:
            raise ConfigurationError(f"Invalid FORGE_TIMEOUT: {timeout_str}") from e

        return cls(
            base_url=os.getenv("FORGE_URL", DEFAULT_BASE_URL),
            timeout=timeout,
        )

    def validate(self, strict: bool = True) -> list[str]:
        """설정값 검증

        Args:
            strict: True면 오류 시 예외 발생, False면 로깅만

        Returns:
            list[str]: 검증 경고/오류 메시지 목록

        Raises:
            ConfigurationError: strict=True이고 오류가 있을 때
        """
        errors = []
        warnings = []

        if not self.base_url:
            errors.append("Missing FORGE_URL")
        elif not self.base_url.startswith(("http://", "https://")):
            errors.append(f"Invalid FORGE_URL: {self.base_url}")

        if self.timeout <= 0:
            errors.append(f"Invalid timeout: {self.timeout}")
        elif self.timeout > 600:
            warnings.append(f"Timeout is very long: {self.timeout}s")

        for warning in warnings:
            logger.warning(f"[Config] {warning}")

        if errors:
            for error in errors:
                logger.error(f"[Config] {error}")
            if strict:
                raise ConfigurationError(
                    f"Config validation failed: {len(errors)} error(s)\n" + "\n".join(errors)
                )

        return errors + warnings

    @classmethod
    def from_env_validated(cls, strict: bool = True) -> "ClientConfig":
        """환경변수에서 설정 로드 및 검증"""
        config = cls.from_env()
        config.validate(strict=strict)
        return config
