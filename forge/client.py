"""
Forge 렌더링 서버 클라이언트 (동기/비동기)

- POST /render: 요청 JSON 전송 후 렌더링 결과 바이트 반환
- GET /health: 서버 상태 확인 (예외를 던지지 않고 bool만 반환)

재시도는 하지 않으며, 실패는 ErrorClassifier로 분류해 그대로 올려보냅니다.
"""

import logging
from typing import Any

import httpx

from .config import DEFAULT_TIMEOUT, ClientConfig
from .errors import ErrorClassifier
from .request import RenderRequest

logger = logging.getLogger(__name__)

RENDER_PATH = "/render"
HEALTH_PATH = "/health"

# httpx.InvalidURL은 HTTPError 하위 클래스가 아님
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def _normalize_base_url(base_url: str) -> str:
    return base_url.rstrip("/")


def _connect_timeout(timeout: float) -> httpx.Timeout:
    """연결 수립에만 적용되는 타임아웃 (렌더링 대기는 제한하지 않음)"""
    return httpx.Timeout(None, connect=timeout)


class ForgeClient:
    """동기 Forge 클라이언트

    인스턴스는 base_url, timeout 외의 상태를 갖지 않으므로
    여러 스레드에서 공유해도 안전합니다.
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            base_url: 서버 주소 (끝의 "/"는 제거)
            timeout: 연결 타임아웃 (초)
        """
        self.base_url = _normalize_base_url(base_url)
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ClientConfig) -> "ForgeClient":
        return cls(base_url=config.base_url, timeout=config.timeout)

    @classmethod
    def from_env(cls) -> "ForgeClient":
        """FORGE_URL / FORGE_TIMEOUT 환경변수로 생성"""
        return cls.from_config(ClientConfig.from_env_validated())

    def _create_client(self) -> httpx.Client:
        """동기 HTTP 클라이언트 생성 (매 요청마다)"""
        return httpx.Client(
            base_url=self.base_url,
            timeout=_connect_timeout(self.timeout),
        )

    def render_html(self, html: str) -> RenderRequest:
        """HTML 문자열로 렌더링 요청 시작"""
        return RenderRequest(html=html, client=self)

    def render_url(self, url: str) -> RenderRequest:
        """URL로 렌더링 요청 시작"""
        return RenderRequest(url=url, client=self)

    def health(self) -> bool:
        """서버 헬스 체크

        Returns:
            bool: 200 응답이면 True, 그 외 응답이나 연결 실패는 False
        """
        try:
            with self._create_client() as client:
                response = client.get(HEALTH_PATH)
                return response.status_code == 200
        except TRANSPORT_ERRORS as e:
            logger.warning(f"[Forge] Health check failed: {e}")
            return False

    def send(self, payload: dict[str, Any]) -> bytes:
        """렌더링 요청 전송

        Args:
            payload: build_payload()로 만든 요청 본문

        Returns:
            bytes: 렌더링 결과 (format에 따라 PDF/PNG 등)

        Raises:
            ForgeConnectionError: 연결 실패 또는 타임아웃
            ForgeServerError: 200이 아닌 응답
        """
        try:
            with self._create_client() as client:
                response = client.post(RENDER_PATH, json=payload)
        except TRANSPORT_ERRORS as e:
            logger.error(f"[Forge] Render request failed to connect: {e}")
            raise ErrorClassifier.from_transport_error(e) from e

        if response.status_code != 200:
            error = ErrorClassifier.from_response(response.status_code, response.content)
            logger.error(f"[Forge] Render failed: {error}")
            raise error

        logger.info(
            f"[Forge] Rendered {payload.get('format')}: {len(response.content)} bytes"
        )
        return response.content

    def render(self, request: RenderRequest) -> bytes:
        """RenderRequest를 직렬화해 전송"""
        return self.send(request.build_payload())


class AsyncForgeClient:
    """비동기 Forge 클라이언트

    Note: 이벤트 루프 간 공유 문제를 피하기 위해 httpx.AsyncClient를 캐싱하지 않음
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = _normalize_base_url(base_url)
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ClientConfig) -> "AsyncForgeClient":
        return cls(base_url=config.base_url, timeout=config.timeout)

    @classmethod
    def from_env(cls) -> "AsyncForgeClient":
        """FORGE_URL / FORGE_TIMEOUT 환경변수로 생성"""
        return cls.from_config(ClientConfig.from_env_validated())

    def _create_client(self) -> httpx.AsyncClient:
        """새로운 HTTP 클라이언트 생성 (매 요청마다)"""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=_connect_timeout(self.timeout),
        )

    async def health(self) -> bool:
        """서버 헬스 체크 (예외 없이 bool 반환)"""
        try:
            async with self._create_client() as client:
                response = await client.get(HEALTH_PATH)
                return response.status_code == 200
        except TRANSPORT_ERRORS as e:
            logger.warning(f"[Forge] Health check failed: {e}")
            return False

    async def send(self, payload: dict[str, Any]) -> bytes:
        """렌더링 요청 전송 (비동기)

        Raises:
            ForgeConnectionError: 연결 실패 또는 타임아웃
            ForgeServerError: 200이 아닌 응답
        """
        try:
            async with self._create_client() as client:
                response = await client.post(RENDER_PATH, json=payload)
        except TRANSPORT_ERRORS as e:
            logger.error(f"[Forge] Render request failed to connect: {e}")
            raise ErrorClassifier.from_transport_error(e) from e

        if response.status_code != 200:
            error = ErrorClassifier.from_response(response.status_code, response.content)
            logger.error(f"[Forge] Render failed: {error}")
            raise error

        logger.info(
            f"[Forge] Rendered {payload.get('format')}: {len(response.content)} bytes"
        )
        return response.content

    async def render(self, request: RenderRequest) -> bytes:
        return await self.send(request.build_payload())
