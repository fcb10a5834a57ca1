"""
렌더링 요청 빌더

한 번의 렌더링 작업 설정을 메모리에 담는 모델입니다.
옵션 setter는 모두 self를 반환하므로 체이닝으로 조립합니다.

사용법:
    ```python
    pdf_bytes = (
        client.render_html("<h1>Invoice</h1>")
        .paper("a4")
        .pdf_title("Invoice #42")
        .pdf_barcode(BarcodeType.QR, "https://example.com")
        .send()
    )
    ```

검증은 하지 않습니다. 같은 옵션을 다시 설정하면 마지막 값이 이깁니다.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from . import serializer
from .errors import ForgeError
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

if TYPE_CHECKING:
    from .client import ForgeClient


@dataclass
class RenderOptions:
    """최상위 스칼라 옵션 (format 외에는 None이면 생략)"""

    format: OutputFormat = OutputFormat.PDF
    width: int | None = None
    height: int | None = None
    paper: str | None = None
    orientation: Orientation | None = None
    margins: str | None = None
    flow: Flow | None = None
    density: float | None = None
    background: str | None = None
    timeout: int | None = None


@dataclass
class QuantizeOptions:
    """색상 양자화 설정"""

    colors: int | None = None
    palette: PaletteChoice | None = None
    dither: DitherMethod | None = None

    def is_set(self) -> bool:
        return any(v is not None for v in (self.colors, self.palette, self.dither))


@dataclass
class WatermarkOptions:
    """PDF 워터마크 설정"""

    text: str | None = None
    image_data: str | None = None
    opacity: float | None = None
    rotation: float | None = None
    color: str | None = None
    font_size: float | None = None
    scale: float | None = None
    layer: WatermarkLayer | None = None
    pages: str | None = None

    def is_set(self) -> bool:
        return any(
            v is not None
            for v in (
                self.text,
                self.image_data,
                self.opacity,
                self.rotation,
                self.color,
                self.font_size,
                self.scale,
                self.layer,
                self.pages,
            )
        )


@dataclass
class PdfOptions:
    """PDF 메타데이터 및 부가 기능 설정"""

    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: str | None = None
    creator: str | None = None
    bookmarks: bool | None = None
    standard: PdfStandard | None = None
    mode: PdfMode | None = None
    accessibility: AccessibilityLevel | None = None
    watermark: WatermarkOptions = field(default_factory=WatermarkOptions)
    embedded_files: list[EmbeddedFile] = field(default_factory=list)
    barcodes: list[Barcode] = field(default_factory=list)

    def is_set(self) -> bool:
        scalars = (
            self.title,
            self.author,
            self.subject,
            self.keywords,
            self.creator,
            self.bookmarks,
            self.standard,
            self.mode,
            self.accessibility,
        )
        return (
            any(v is not None for v in scalars)
            or self.watermark.is_set()
            or bool(self.embedded_files)
            or bool(self.barcodes)
        )


class RenderRequest:
    """렌더링 요청 (HTML 또는 URL 중 하나가 소스)

    직접 생성하기보다 from_html / from_url 또는
    ForgeClient.render_html / render_url 을 사용합니다.
    """

    def __init__(
        self,
        html: str | None = None,
        url: str | None = None,
        client: "ForgeClient | None" = None,
    ):
        """
        Args:
            html: 렌더링할 HTML 문자열
            url: 렌더링할 페이지 URL
            client: send()에 사용할 클라이언트 (선택)
        """
        if (html is None) == (url is None):
            raise ValueError("Exactly one of html or url must be given")

        self.html = html
        self.url = url
        self.client = client

        self.options = RenderOptions()
        self.quantize = QuantizeOptions()
        self.pdf = PdfOptions()

    @classmethod
    def from_html(cls, html: str) -> "RenderRequest":
        return cls(html=html)

    @classmethod
    def from_url(cls, url: str) -> "RenderRequest":
        return cls(url=url)

    # --- 기본 옵션 ---
    def format(self, output_format: OutputFormat) -> "RenderRequest":
        self.options.format = output_format
        return self

    def width(self, px: int) -> "RenderRequest":
        self.options.width = px
        return self

    def height(self, px: int) -> "RenderRequest":
        self.options.height = px
        return self

    def paper(self, size: str) -> "RenderRequest":
        """용지 크기 토큰 (예: "a4", "letter")"""
        self.options.paper = size
        return self

    def orientation(self, orientation: Orientation) -> "RenderRequest":
        self.options.orientation = orientation
        return self

    def margins(self, margins: str) -> "RenderRequest":
        self.options.margins = margins
        return self

    def flow(self, flow: Flow) -> "RenderRequest":
        self.options.flow = flow
        return self

    def density(self, dpi: float) -> "RenderRequest":
        self.options.density = float(dpi)
        return self

    def background(self, color: str) -> "RenderRequest":
        self.options.background = color
        return self

    def timeout(self, seconds: int) -> "RenderRequest":
        """서버 측 렌더링 시간 예산 (로컬에서 강제하지 않음)"""
        self.options.timeout = seconds
        return self

    # --- 양자화 ---
    def colors(self, count: int) -> "RenderRequest":
        self.quantize.colors = count
        return self

    def palette(self, preset: Palette) -> "RenderRequest":
        self.quantize.palette = PresetPalette(preset)
        return self

    def custom_palette(self, colors: Iterable[str] | str) -> "RenderRequest":
        """사용자 지정 색상 목록 (문자열 하나는 한 색상으로 취급)"""
        if isinstance(colors, str):
            colors = [colors]
        # palette 슬롯은 하나 (프리셋과 목록 중 마지막 호출이 이김)
        self.quantize.palette = CustomPalette(tuple(colors))
        return self

    def dither(self, method: DitherMethod) -> "RenderRequest":
        self.quantize.dither = method
        return self

    # --- PDF 메타데이터 ---
    def pdf_title(self, title: str) -> "RenderRequest":
        self.pdf.title = title
        return self

    def pdf_author(self, author: str) -> "RenderRequest":
        self.pdf.author = author
        return self

    def pdf_subject(self, subject: str) -> "RenderRequest":
        self.pdf.subject = subject
        return self

    def pdf_keywords(self, keywords: str) -> "RenderRequest":
        self.pdf.keywords = keywords
        return self

    def pdf_creator(self, creator: str) -> "RenderRequest":
        self.pdf.creator = creator
        return self

    def pdf_bookmarks(self, enabled: bool) -> "RenderRequest":
        self.pdf.bookmarks = enabled
        return self

    def pdf_standard(self, standard: PdfStandard) -> "RenderRequest":
        self.pdf.standard = standard
        return self

    def pdf_mode(self, mode: PdfMode) -> "RenderRequest":
        self.pdf.mode = mode
        return self

    def pdf_accessibility(self, level: AccessibilityLevel) -> "RenderRequest":
        self.pdf.accessibility = level
        return self

    # --- 워터마크 ---
    def pdf_watermark_text(self, text: str) -> "RenderRequest":
        self.pdf.watermark.text = text
        return self

    def pdf_watermark_image(self, base64_data: str) -> "RenderRequest":
        self.pdf.watermark.image_data = base64_data
        return self

    def pdf_watermark_opacity(self, opacity: float) -> "RenderRequest":
        self.pdf.watermark.opacity = float(opacity)
        return self

    def pdf_watermark_rotation(self, degrees: float) -> "RenderRequest":
        self.pdf.watermark.rotation = float(degrees)
        return self

    def pdf_watermark_color(self, hex_color: str) -> "RenderRequest":
        self.pdf.watermark.color = hex_color
        return self

    def pdf_watermark_font_size(self, size: float) -> "RenderRequest":
        self.pdf.watermark.font_size = float(size)
        return self

    def pdf_watermark_scale(self, scale: float) -> "RenderRequest":
        self.pdf.watermark.scale = float(scale)
        return self

    def pdf_watermark_layer(self, layer: WatermarkLayer) -> "RenderRequest":
        self.pdf.watermark.layer = layer
        return self

    def pdf_watermark_pages(self, pages: str) -> "RenderRequest":
        """워터마크 적용 페이지 (예: "1,3-5")"""
        self.pdf.watermark.pages = pages
        return self

    # --- 첨부 파일 / 바코드 (호출 순서대로 누적) ---
    def pdf_attach(
        self,
        path: str,
        base64_data: str,
        mime_type: str | None = None,
        description: str | None = None,
        relationship: EmbedRelationship | None = None,
    ) -> "RenderRequest":
        """PDF에 파일 첨부

        Args:
            path: PDF 내 첨부 파일 경로/이름
            base64_data: base64 인코딩된 파일 내용
            mime_type: MIME 타입 (선택)
            description: 설명 (선택)
            relationship: 문서와의 관계 (선택)
        """
        self.pdf.embedded_files.append(
            EmbeddedFile(
                path=path,
                data=base64_data,
                mime_type=mime_type,
                description=description,
                relationship=relationship,
            )
        )
        return self

    def pdf_barcode(self, barcode_type: BarcodeType, data: str) -> "RenderRequest":
        """위치/색상 옵션 없이 바코드 추가 (서버 기본값 사용)"""
        self.pdf.barcodes.append(Barcode(type=barcode_type, data=data))
        return self

    def pdf_barcode_with(self, barcode: Barcode) -> "RenderRequest":
        """옵션이 채워진 Barcode 모델의 사본을 추가"""
        self.pdf.barcodes.append(barcode.model_copy())
        return self

    def pdf_barcode_options(
        self,
        barcode_type: BarcodeType,
        data: str,
        *,
        x: float | None = None,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
        anchor: BarcodeAnchor | None = None,
        foreground: str | None = None,
        background: str | None = None,
        draw_background: bool | None = None,
        pages: str | None = None,
    ) -> "RenderRequest":
        """키워드 인자로 옵션을 지정해 바코드 추가

        None으로 넘긴 옵션은 설정하지 않은 것과 같습니다.
        """
        return self.pdf_barcode_with(
            Barcode(
                type=barcode_type,
                data=data,
                x=x,
                y=y,
                width=width,
                height=height,
                anchor=anchor,
                foreground=foreground,
                background=background,
                draw_background=draw_background,
                pages=pages,
            )
        )

    # --- 직렬화 / 전송 ---
    def build_payload(self) -> dict:
        """wire 포맷 JSON 문서(dict) 생성"""
        return serializer.build_payload(self)

    def send(self) -> bytes:
        """바인딩된 클라이언트로 요청 전송 후 렌더링 결과 반환

        Raises:
            ForgeError: 클라이언트가 없거나 전송/서버 오류
        """
        if self.client is None:
            raise ForgeError("RenderRequest is not bound to a ForgeClient")
        return self.client.send(self.build_payload())
