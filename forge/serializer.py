"""
RenderRequest → wire 포맷 JSON 변환

규칙:
- format은 항상 포함, html/url 중 설정된 하나만 포함
- None인 옵션은 키 자체를 생략 (null 값을 내보내지 않음)
- quantize / pdf / pdf.watermark 그룹은 하위 필드가 하나라도 있을 때만 생성
- embedded_files, barcodes는 추가한 순서 그대로 배열로 출력

순수 함수이므로 같은 요청을 여러 번 직렬화해도 결과가 같습니다.
"""

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .request import PdfOptions, QuantizeOptions, RenderRequest, WatermarkOptions


def _put(target: dict[str, Any], key: str, value: Any) -> None:
    """값이 있을 때만 키 추가 (Enum은 value 토큰으로)"""
    if value is None:
        return
    target[key] = getattr(value, "value", value)


def _build_quantize_section(quantize: "QuantizeOptions") -> dict[str, Any]:
    section: dict[str, Any] = {}
    _put(section, "colors", quantize.colors)
    if quantize.palette is not None:
        section["palette"] = quantize.palette.to_wire()
    _put(section, "dither", quantize.dither)
    return section


def _build_watermark_section(watermark: "WatermarkOptions") -> dict[str, Any]:
    section: dict[str, Any] = {}
    _put(section, "text", watermark.text)
    _put(section, "image_data", watermark.image_data)
    _put(section, "opacity", watermark.opacity)
    _put(section, "rotation", watermark.rotation)
    _put(section, "color", watermark.color)
    _put(section, "font_size", watermark.font_size)
    _put(section, "scale", watermark.scale)
    _put(section, "layer", watermark.layer)
    _put(section, "pages", watermark.pages)
    return section


def _build_pdf_section(pdf: "PdfOptions") -> dict[str, Any]:
    """pdf 섹션 생성

    Returns:
        {
            "title": "...",
            "standard": "pdf/a-3b",
            "watermark": {...},
            "embedded_files": [...],
            "barcodes": [...]
        }
    """
    section: dict[str, Any] = {}
    _put(section, "title", pdf.title)
    _put(section, "author", pdf.author)
    _put(section, "subject", pdf.subject)
    _put(section, "keywords", pdf.keywords)
    _put(section, "creator", pdf.creator)
    _put(section, "bookmarks", pdf.bookmarks)
    _put(section, "standard", pdf.standard)
    _put(section, "mode", pdf.mode)
    _put(section, "accessibility", pdf.accessibility)

    # pages만 설정된 워터마크도 유효
    if pdf.watermark.is_set():
        section["watermark"] = _build_watermark_section(pdf.watermark)

    if pdf.embedded_files:
        section["embedded_files"] = [f.to_wire() for f in pdf.embedded_files]

    if pdf.barcodes:
        section["barcodes"] = [b.to_wire() for b in pdf.barcodes]

    return section


def build_payload(request: "RenderRequest") -> dict[str, Any]:
    """RenderRequest에서 /render 요청 본문 생성

    Args:
        request: 렌더링 요청

    Returns:
        wire 포맷 dict (json.dumps 가능)
    """
    options = request.options
    payload: dict[str, Any] = {"format": options.format.value}

    if request.html is not None:
        payload["html"] = request.html
    elif request.url is not None:
        payload["url"] = request.url

    _put(payload, "width", options.width)
    _put(payload, "height", options.height)
    _put(payload, "paper", options.paper)
    _put(payload, "orientation", options.orientation)
    _put(payload, "margins", options.margins)
    _put(payload, "flow", options.flow)
    _put(payload, "density", options.density)
    _put(payload, "background", options.background)
    _put(payload, "timeout", options.timeout)

    if request.quantize.is_set():
        payload["quantize"] = _build_quantize_section(request.quantize)

    if request.pdf.is_set():
        payload["pdf"] = _build_pdf_section(request.pdf)

    return payload


def dumps(request: "RenderRequest") -> str:
    """build_payload 결과를 JSON 문자열로 직렬화"""
    return json.dumps(build_payload(request), ensure_ascii=False)
