"""
Forge 렌더링 서버 Python SDK

렌더링 요청 빌더, wire 포맷 직렬화, HTTP 클라이언트, 에러 분류 제공.
"""

from .client import AsyncForgeClient, ForgeClient
from .config import ClientConfig, ConfigurationError
from .errors import (
    ErrorClassifier,
    ForgeConnectionError,
    ForgeError,
    ForgeServerError,
)
from .request import RenderRequest
from .serializer import build_payload, dumps
from .types import (
    AccessibilityLevel,
    Barcode,
    BarcodeAnchor,
    BarcodeType,
    CustomPalette,
    DitherMethod,
    EmbeddedFile,
    EmbedRelationship,
    Flow,
    Orientation,
    OutputFormat,
    Palette,
    PaletteChoice,
    PdfMode,
    PdfStandard,
    PresetPalette,
    WatermarkLayer,
)

__all__ = [
    # Client
    "AsyncForgeClient",
    "ForgeClient",
    # Config
    "ClientConfig",
    "ConfigurationError",
    # Errors
    "ErrorClassifier",
    "ForgeConnectionError",
    "ForgeError",
    "ForgeServerError",
    # Request / Serializer
    "RenderRequest",
    "build_payload",
    "dumps",
    # Types
    "AccessibilityLevel",
    "Barcode",
    "BarcodeAnchor",
    "BarcodeType",
    "CustomPalette",
    "DitherMethod",
    "EmbeddedFile",
    "EmbedRelationship",
    "Flow",
    "Orientation",
    "OutputFormat",
    "Palette",
    "PaletteChoice",
    "PdfMode",
    "PdfStandard",
    "PresetPalette",
    "WatermarkLayer",
]
