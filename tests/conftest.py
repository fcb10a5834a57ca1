"""
Pytest 설정 및 공통 Fixture
"""

import pytest

from forge.client import AsyncForgeClient, ForgeClient
from forge.config import ClientConfig
from forge.request import RenderRequest


@pytest.fixture
def client_config() -> ClientConfig:
    """테스트용 ClientConfig

    환경변수 대신 하드코딩된 값 사용.
    """
    return ClientConfig(base_url="http://localhost:8080", timeout=5.0)


@pytest.fixture
def forge_client(client_config: ClientConfig) -> ForgeClient:
    """테스트용 동기 클라이언트"""
    return ForgeClient.from_config(client_config)


@pytest.fixture
def async_forge_client(client_config: ClientConfig) -> AsyncForgeClient:
    """테스트용 비동기 클라이언트"""
    return AsyncForgeClient.from_config(client_config)


@pytest.fixture
def basic_request() -> RenderRequest:
    """샘플 요청 (HTML만 설정)"""
    from tests.sample_data import generate_sample_request
    return generate_sample_request("basic")


@pytest.fixture
def quantized_request() -> RenderRequest:
    """샘플 요청 (양자화 옵션 포함)"""
    from tests.sample_data import generate_sample_request
    return generate_sample_request("quantized")


@pytest.fixture
def invoice_request() -> RenderRequest:
    """샘플 요청 (PDF 메타데이터, 워터마크, 첨부, 바코드 포함)"""
    from tests.sample_data import generate_sample_request
    return generate_sample_request("invoice")
