"""
공용 타입 정의

Forge 렌더링 요청에 쓰이는 Enum, 팔레트 variant, Pydantic 모델.
모든 Enum의 value가 곧 wire 포맷 토큰입니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel


class OutputFormat(str, Enum):
    """출력 포맷"""

    PDF = "pdf"
    PNG = "png"
    JPEG = "jpeg"
    BMP = "bmp"
    TGA = "tga"
    QOI = "qoi"
    SVG = "svg"


class Orientation(str, Enum):
    """페이지 방향"""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class Flow(str, Enum):
    """문서 흐름 모드"""

    AUTO = "auto"
    PAGINATE = "paginate"
    CONTINUOUS = "continuous"


class Palette(str, Enum):
    """내장 색상 팔레트 프리셋"""

    AUTO = "auto"
    BLACK_WHITE = "bw"
    GRAYSCALE = "grayscale"
    EINK = "eink"


class DitherMethod(str, Enum):
    """디더링 방식"""

    NONE = "none"
    FLOYD_STEINBERG = "floyd-steinberg"
    ATKINSON = "atkinson"
    ORDERED = "ordered"


class PdfStandard(str, Enum):
    """PDF 표준 준수 레벨"""

    NONE = "none"
    PDF_A_2B = "pdf/a-2b"
    PDF_A_3B = "pdf/a-3b"


class PdfMode(str, Enum):
    """PDF 렌더링 모드"""

    AUTO = "auto"
    VECTOR = "vector"
    RASTER = "raster"


class AccessibilityLevel(str, Enum):
    """PDF 접근성 레벨"""

    NONE = "none"
    BASIC = "basic"
    PDF_UA_1 = "pdf/ua-1"


class WatermarkLayer(str, Enum):
    """워터마크 레이어 (본문 위/아래)"""

    OVER = "over"
    UNDER = "under"


class EmbedRelationship(str, Enum):
    """첨부 파일과 문서의 관계 (PDF/A-3 AFRelationship)"""

    ALTERNATIVE = "alternative"
    SUPPLEMENT = "supplement"
    DATA = "data"
    SOURCE = "source"
    UNSPECIFIED = "unspecified"


class BarcodeType(str, Enum):
    """바코드 심볼로지"""

    # 2D
    QR = "qr"
    DATA_MATRIX = "datamatrix"
    PDF417 = "pdf417"
    AZTEC = "aztec"
    # 1D
    CODE128 = "code128"
    EAN13 = "ean13"
    EAN8 = "ean8"
    UPCA = "upca"
    CODE39 = "code39"
    CODE93 = "code93"
    CODABAR = "codabar"
    ITF = "itf"
    CODE11 = "code11"


class BarcodeAnchor(str, Enum):
    """바코드 기준 모서리"""

    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


@dataclass(frozen=True)
class PresetPalette:
    """이름 있는 팔레트 프리셋 (wire: 문자열)"""

    preset: Palette

    def to_wire(self) -> str:
        return self.preset.value


@dataclass(frozen=True)
class CustomPalette:
    """사용자 지정 색상 목록 (wire: 순서가 보존된 문자열 배열)"""

    colors: tuple[str, ...] = field(default_factory=tuple)

    def to_wire(self) -> list[str]:
        return [str(color) for color in self.colors]


PaletteChoice = Union[PresetPalette, CustomPalette]


class EmbeddedFile(BaseModel):
    """PDF에 첨부되는 파일

    path, data(base64)는 필수이며 나머지는 None이면 wire에서 생략됩니다.
    """

    path: str
    data: str
    mime_type: str | None = None
    description: str | None = None
    relationship: EmbedRelationship | None = None

    def to_wire(self) -> dict[str, Any]:
        """embedded_files 배열의 한 항목으로 변환"""
        entry: dict[str, Any] = {"path": self.path, "data": self.data}
        if self.mime_type is not None:
            entry["mime_type"] = self.mime_type
        if self.description is not None:
            entry["description"] = self.description
        if self.relationship is not None:
            entry["relationship"] = self.relationship.value
        return entry


class Barcode(BaseModel):
    """PDF 페이지에 찍히는 바코드

    type, data 외의 필드는 모두 선택이며, None은 "설정하지 않음"과 동일합니다.
    """

    type: BarcodeType
    data: str
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    anchor: BarcodeAnchor | None = None
    foreground: str | None = None
    background: str | None = None
    draw_background: bool | None = None
    pages: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """barcodes 배열의 한 항목으로 변환

        키 순서는 type, data, x, y, width, height, anchor, foreground,
        background, draw_background, pages로 고정됩니다.
        """
        entry: dict[str, Any] = {"type": self.type.value, "data": self.data}
        for key in ("x", "y", "width", "height"):
            value = getattr(self, key)
            if value is not None:
                entry[key] = value
        if self.anchor is not None:
            entry["anchor"] = self.anchor.value
        for key in ("foreground", "background", "draw_background", "pages"):
            value = getattr(self, key)
            if value is not None:
                entry[key] = value
        return entry
