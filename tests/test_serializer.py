"""
직렬화 테스트

RenderRequest → wire 포맷 JSON 변환 규칙(생략, 그룹화, Enum 토큰, 순서) 검증.
"""

import json

from forge.request import RenderRequest
from forge.serializer import build_payload, dumps
from forge.types import (
    AccessibilityLevel,
    BarcodeAnchor,
    BarcodeType,
    DitherMethod,
    EmbedRelationship,
    Flow,
    Orientation,
    OutputFormat,
    Palette,
    PdfMode,
    PdfStandard,
    WatermarkLayer,
)


class TestTopLevel:
    """최상위 필드 테스트"""

    def test_minimal_html(self, basic_request: RenderRequest):
        """HTML만 설정하면 format과 html만 출력"""
        assert build_payload(basic_request) == {"format": "pdf", "html": "<h1>Test</h1>"}

    def test_minimal_url(self):
        """URL 소스는 url 키로 출력"""
        payload = build_payload(RenderRequest.from_url("https://example.com"))

        assert payload == {"format": "pdf", "url": "https://example.com"}
        assert "html" not in payload

    def test_all_scalars(self):
        """모든 스칼라 옵션이 wire 키로 매핑"""
        request = (
            RenderRequest.from_html("<p/>")
            .format(OutputFormat.PNG)
            .width(1280)
            .height(720)
            .paper("letter")
            .orientation(Orientation.LANDSCAPE)
            .margins("1in 0.5in")
            .flow(Flow.PAGINATE)
            .density(150.0)
            .background("#FAFAFA")
            .timeout(30)
        )

        assert build_payload(request) == {
            "format": "png",
            "html": "<p/>",
            "width": 1280,
            "height": 720,
            "paper": "letter",
            "orientation": "landscape",
            "margins": "1in 0.5in",
            "flow": "paginate",
            "density": 150.0,
            "background": "#FAFAFA",
            "timeout": 30,
        }

    def test_no_groups_without_group_fields(self):
        """그룹 필드가 없으면 quantize/pdf 키 없음"""
        request = RenderRequest.from_html("<p/>").width(100).density(96.0).timeout(5)
        payload = build_payload(request)

        assert "quantize" not in payload
        assert "pdf" not in payload

    def test_no_null_values(self, invoice_request: RenderRequest):
        """출력 JSON에 null 값 없음"""
        assert "null" not in dumps(invoice_request)

    def test_serialization_is_repeatable(self, invoice_request: RenderRequest):
        """같은 요청은 매번 같은 JSON"""
        assert dumps(invoice_request) == dumps(invoice_request)

    def test_build_payload_method(self, invoice_request: RenderRequest):
        """RenderRequest.build_payload와 동일"""
        assert invoice_request.build_payload() == build_payload(invoice_request)


class TestNumberFidelity:
    """숫자 타입 보존 테스트"""

    def test_int_stays_int(self):
        """정수는 소수점 없이"""
        text = dumps(RenderRequest.from_html("<p/>").width(800))

        assert '"width": 800' in text
        assert '"width": 800.0' not in text

    def test_float_keeps_fraction(self):
        """소수는 소수부 유지"""
        text = dumps(RenderRequest.from_html("<p/>").density(72.5))

        assert '"density": 72.5' in text

    def test_int_argument_for_float_option(self):
        """float 옵션에 정수를 넘겨도 소수점 포함 출력"""
        text = dumps(RenderRequest.from_html("<p/>").pdf_watermark_opacity(1).density(300))

        assert '"opacity": 1.0' in text
        assert '"density": 300.0' in text

    def test_whole_float_stays_float(self):
        """정수값 float도 float로 출력"""
        text = dumps(RenderRequest.from_html("<p/>").pdf_watermark_opacity(1.0))

        assert '"opacity": 1.0' in text


class TestQuantize:
    """quantize 그룹 테스트"""

    def test_full_group(self, quantized_request: RenderRequest):
        """colors, palette(프리셋), dither 모두 출력"""
        assert build_payload(quantized_request)["quantize"] == {
            "colors": 4,
            "palette": "eink",
            "dither": "floyd-steinberg",
        }

    def test_colors_only(self):
        """colors 하나로도 그룹 생성"""
        payload = build_payload(RenderRequest.from_html("<p/>").colors(16))

        assert payload["quantize"] == {"colors": 16}

    def test_dither_only(self):
        """dither 하나로도 그룹 생성"""
        payload = build_payload(RenderRequest.from_html("<p/>").dither(DitherMethod.NONE))

        assert payload["quantize"] == {"dither": "none"}

    def test_custom_palette_array(self):
        """사용자 목록은 순서 보존 배열"""
        request = RenderRequest.from_html("<p/>").custom_palette(["#FF0000", "#00FF00", "#0000FF"])

        assert build_payload(request)["quantize"]["palette"] == ["#FF0000", "#00FF00", "#0000FF"]

    def test_single_string_custom_palette(self):
        """문자열 하나로 지정한 사용자 팔레트는 원소 하나짜리 배열"""
        payload = build_payload(RenderRequest.from_html("<p/>").custom_palette("#000000"))

        assert payload["quantize"]["palette"] == ["#000000"]

    def test_preset_palette_string(self):
        """프리셋은 문자열 하나"""
        request = RenderRequest.from_html("<p/>").palette(Palette.BLACK_WHITE)

        assert build_payload(request)["quantize"]["palette"] == "bw"

    def test_last_palette_wins(self):
        """마지막에 설정한 팔레트 형태만 출력"""
        request = (
            RenderRequest.from_html("<p/>")
            .custom_palette(["#000000"])
            .palette(Palette.AUTO)
        )

        assert build_payload(request)["quantize"] == {"palette": "auto"}


class TestPdfGroup:
    """pdf 그룹 테스트"""

    def test_metadata(self):
        """메타데이터 필드 출력"""
        request = (
            RenderRequest.from_html("<p/>")
            .pdf_title("T")
            .pdf_author("A")
            .pdf_subject("S")
            .pdf_keywords("k1, k2")
            .pdf_creator("C")
            .pdf_bookmarks(False)
            .pdf_standard(PdfStandard.PDF_A_2B)
        )

        assert build_payload(request)["pdf"] == {
            "title": "T",
            "author": "A",
            "subject": "S",
            "keywords": "k1, k2",
            "creator": "C",
            "bookmarks": False,
            "standard": "pdf/a-2b",
        }

    def test_mode_and_accessibility(self):
        """렌더링 모드와 접근성 레벨 출력"""
        request = (
            RenderRequest.from_html("<p/>")
            .pdf_mode(PdfMode.VECTOR)
            .pdf_accessibility(AccessibilityLevel.PDF_UA_1)
        )

        assert build_payload(request)["pdf"] == {"mode": "vector", "accessibility": "pdf/ua-1"}

    def test_pdf_group_from_barcodes_only(self):
        """바코드만 있어도 pdf 그룹 생성"""
        payload = build_payload(RenderRequest.from_html("<p/>").pdf_barcode(BarcodeType.QR, "x"))

        assert list(payload["pdf"]) == ["barcodes"]

    def test_pdf_group_from_attachment_only(self):
        """첨부만 있어도 pdf 그룹 생성"""
        payload = build_payload(RenderRequest.from_html("<p/>").pdf_attach("a.txt", "YQ=="))

        assert payload["pdf"] == {"embedded_files": [{"path": "a.txt", "data": "YQ=="}]}

    def test_invoice(self, invoice_request: RenderRequest):
        """메타데이터 + 워터마크 + 첨부 + 바코드 조합"""
        pdf = build_payload(invoice_request)["pdf"]

        assert pdf["title"] == "Invoice #42"
        assert pdf["standard"] == "pdf/a-3b"
        assert pdf["watermark"] == {"text": "PAID", "opacity": 0.25, "layer": "under"}
        assert pdf["embedded_files"][0]["relationship"] == "alternative"
        assert pdf["embedded_files"][0]["mime_type"] == "application/xml"
        assert pdf["barcodes"][0] == {
            "type": "qr",
            "data": "https://example.com/pay/42",
            "x": 10.0,
            "y": 10.0,
            "anchor": "bottom-right",
        }


class TestWatermark:
    """watermark 하위 그룹 테스트"""

    def test_all_fields(self):
        """모든 워터마크 필드 출력"""
        request = (
            RenderRequest.from_html("<p/>")
            .pdf_watermark_text("DRAFT")
            .pdf_watermark_image("aW1n")
            .pdf_watermark_opacity(0.3)
            .pdf_watermark_rotation(-45.0)
            .pdf_watermark_color("#FF0000")
            .pdf_watermark_font_size(48.0)
            .pdf_watermark_scale(0.5)
            .pdf_watermark_layer(WatermarkLayer.OVER)
            .pdf_watermark_pages("1,3-5")
        )

        assert build_payload(request)["pdf"]["watermark"] == {
            "text": "DRAFT",
            "image_data": "aW1n",
            "opacity": 0.3,
            "rotation": -45.0,
            "color": "#FF0000",
            "font_size": 48.0,
            "scale": 0.5,
            "layer": "over",
            "pages": "1,3-5",
        }

    def test_text_and_pages(self):
        """텍스트와 페이지 범위"""
        request = RenderRequest.from_html("<h1>Test</h1>").pdf_watermark_text("DRAFT").pdf_watermark_pages("1,3-5")
        watermark = build_payload(request)["pdf"]["watermark"]

        assert watermark["text"] == "DRAFT"
        assert watermark["pages"] == "1,3-5"

    def test_pages_only(self):
        """pages만 설정해도 watermark 생성, 다른 키 없음"""
        payload = build_payload(RenderRequest.from_html("<h1>Test</h1>").pdf_watermark_pages("2-4"))

        assert payload["pdf"] == {"watermark": {"pages": "2-4"}}

    def test_no_watermark_without_fields(self):
        """워터마크 필드가 없으면 watermark 키 없음"""
        payload = build_payload(RenderRequest.from_html("<p/>").pdf_title("T"))

        assert "watermark" not in payload["pdf"]


class TestEmbeddedFiles:
    """embedded_files 배열 테스트"""

    def test_order_and_optionals(self):
        """호출 순서 유지, 선택 키는 개별 생략"""
        request = (
            RenderRequest.from_html("<p/>")
            .pdf_attach("first.csv", "YQ==", mime_type="text/csv")
            .pdf_attach("second.json", "Yg==", description="Source data", relationship=EmbedRelationship.SOURCE)
            .pdf_attach("third.bin", "Yw==")
        )

        assert build_payload(request)["pdf"]["embedded_files"] == [
            {"path": "first.csv", "data": "YQ==", "mime_type": "text/csv"},
            {"path": "second.json", "data": "Yg==", "description": "Source data", "relationship": "source"},
            {"path": "third.bin", "data": "Yw=="},
        ]


class TestBarcodes:
    """barcodes 배열 테스트"""

    def test_simple_barcode(self):
        """최소 형태 바코드는 type, data만"""
        payload = build_payload(
            RenderRequest.from_html("<h1>Test</h1>").pdf_barcode(BarcodeType.QR, "https://example.com")
        )

        barcodes = payload["pdf"]["barcodes"]
        assert len(barcodes) == 1
        assert barcodes[0] == {"type": "qr", "data": "https://example.com"}
        assert "x" not in barcodes[0]
        assert "anchor" not in barcodes[0]
        assert "pages" not in barcodes[0]

    def test_full_barcode(self):
        """모든 옵션 포함 바코드"""
        payload = build_payload(
            RenderRequest.from_html("<h1>Test</h1>").pdf_barcode_options(
                BarcodeType.CODE128,
                "ABC-123",
                x=10.0,
                y=20.0,
                width=100.0,
                height=50.0,
                anchor=BarcodeAnchor.BOTTOM_RIGHT,
                foreground="#000000",
                background="#FFFFFF",
                draw_background=True,
                pages="1,3-5",
            )
        )

        barcode = payload["pdf"]["barcodes"][0]
        assert barcode == {
            "type": "code128",
            "data": "ABC-123",
            "x": 10.0,
            "y": 20.0,
            "width": 100.0,
            "height": 50.0,
            "anchor": "bottom-right",
            "foreground": "#000000",
            "background": "#FFFFFF",
            "draw_background": True,
            "pages": "1,3-5",
        }
        assert isinstance(barcode["x"], float)
        assert barcode["draw_background"] is True

    def test_multiple_barcodes_order(self):
        """호출 순서대로 배열 출력"""
        payload = build_payload(
            RenderRequest.from_html("<h1>Test</h1>")
            .pdf_barcode(BarcodeType.QR, "data1")
            .pdf_barcode(BarcodeType.EAN13, "5901234123457")
        )

        barcodes = payload["pdf"]["barcodes"]
        assert len(barcodes) == 2
        assert barcodes[0]["type"] == "qr"
        assert barcodes[1]["type"] == "ean13"

    def test_none_optionals_identical_to_minimal(self):
        """옵션을 모두 None으로 넘기면 최소 형태와 바이트 단위로 동일"""
        minimal = RenderRequest.from_html("<h1>Test</h1>").pdf_barcode(BarcodeType.UPCA, "012345678905")
        explicit = RenderRequest.from_html("<h1>Test</h1>").pdf_barcode_options(
            BarcodeType.UPCA,
            "012345678905",
            x=None,
            y=None,
            width=None,
            height=None,
            anchor=None,
            foreground=None,
            background=None,
            draw_background=None,
            pages=None,
        )

        assert dumps(minimal) == dumps(explicit)
        assert build_payload(explicit)["pdf"]["barcodes"][0] == {"type": "upca", "data": "012345678905"}

    def test_dumps_is_valid_json(self):
        """dumps 결과는 파싱 가능한 JSON"""
        request = RenderRequest.from_html("<h1>한글</h1>").pdf_barcode(BarcodeType.DATA_MATRIX, "x")

        parsed = json.loads(dumps(request))

        assert parsed["html"] == "<h1>한글</h1>"
        assert parsed["pdf"]["barcodes"][0]["type"] == "datamatrix"
