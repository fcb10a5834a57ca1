"""
Forge 렌더링 CLI

사용법:
    # HTML 파일을 PDF로 렌더링
    forge-render --html-file invoice.html -o invoice.pdf

    # URL을 PNG로 렌더링
    forge-render --url https://example.com --format png --width 1280 -o page.png

    # 요청 JSON만 출력 (서버 호출 안함)
    forge-render --html-file invoice.html --watermark-text DRAFT --dry-run

    # 서버 상태 확인
    forge-render --health
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .client import ForgeClient
from .config import ClientConfig, ConfigurationError
from .errors import ForgeError
from .request import RenderRequest
from .types import DitherMethod, Flow, Orientation, OutputFormat, Palette

logger = logging.getLogger(__name__)


def _choices(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """CLI 인자 파싱"""
    parser = argparse.ArgumentParser(
        prog="forge-render",
        description="Forge 렌더링 CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # 소스 (health 모드가 아니면 필수)
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--html-file", type=Path, help="렌더링할 HTML 파일")
    source.add_argument("--url", type=str, help="렌더링할 페이지 URL")

    # 서버 설정
    parser.add_argument(
        "--forge-url",
        type=str,
        default=None,
        help="Forge 서버 URL (기본: FORGE_URL 환경변수)",
    )

    # 출력 설정
    parser.add_argument(
        "--format",
        type=str,
        default=OutputFormat.PDF.value,
        choices=_choices(OutputFormat),
        help="출력 포맷 (기본: pdf)",
    )
    parser.add_argument("--output", "-o", type=Path, help="결과 저장 경로")

    # 페이지 설정
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    parser.add_argument("--paper", type=str, help="용지 크기 (예: a4)")
    parser.add_argument("--orientation", type=str, choices=_choices(Orientation))
    parser.add_argument("--margins", type=str)
    parser.add_argument("--flow", type=str, choices=_choices(Flow))
    parser.add_argument("--density", type=float, help="DPI")
    parser.add_argument("--background", type=str)
    parser.add_argument("--timeout", type=int, help="서버 렌더링 시간 예산 (초)")

    # 양자화
    parser.add_argument("--colors", type=int)
    palette = parser.add_mutually_exclusive_group()
    palette.add_argument("--palette", type=str, choices=_choices(Palette))
    palette.add_argument(
        "--custom-palette",
        type=str,
        help="쉼표로 구분한 색상 목록 (예: #000000,#FFFFFF)",
    )
    parser.add_argument("--dither", type=str, choices=_choices(DitherMethod))

    # PDF
    parser.add_argument("--pdf-title", type=str)
    parser.add_argument("--pdf-author", type=str)
    parser.add_argument("--watermark-text", type=str)
    parser.add_argument("--watermark-pages", type=str, help="예: 1,3-5")

    # 실행 모드
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="요청 JSON만 출력하고 렌더링하지 않음",
    )
    parser.add_argument(
        "--health",
        action="store_true",
        help="서버 헬스 체크만 수행",
    )
    parser.add_argument("--verbose", "-v", action="store_true")

    args = parser.parse_args(argv)
    if not args.health and args.html_file is None and args.url is None:
        parser.error("one of --html-file or --url is required")
    return args


def build_request(args: argparse.Namespace, client: ForgeClient | None = None) -> RenderRequest:
    """CLI 인자로 RenderRequest 조립"""
    if args.html_file is not None:
        html = args.html_file.read_text(encoding="utf-8")
        request = RenderRequest(html=html, client=client)
    else:
        request = RenderRequest(url=args.url, client=client)

    request.format(OutputFormat(args.format))

    if args.width is not None:
        request.width(args.width)
    if args.height is not None:
        request.height(args.height)
    if args.paper:
        request.paper(args.paper)
    if args.orientation:
        request.orientation(Orientation(args.orientation))
    if args.margins:
        request.margins(args.margins)
    if args.flow:
        request.flow(Flow(args.flow))
    if args.density is not None:
        request.density(args.density)
    if args.background:
        request.background(args.background)
    if args.timeout is not None:
        request.timeout(args.timeout)

    if args.colors is not None:
        request.colors(args.colors)
    if args.palette:
        request.palette(Palette(args.palette))
    if args.custom_palette:
        request.custom_palette(c.strip() for c in args.custom_palette.split(",") if c.strip())
    if args.dither:
        request.dither(DitherMethod(args.dither))

    if args.pdf_title:
        request.pdf_title(args.pdf_title)
    if args.pdf_author:
        request.pdf_author(args.pdf_author)
    if args.watermark_text:
        request.pdf_watermark_text(args.watermark_text)
    if args.watermark_pages:
        request.pdf_watermark_pages(args.watermark_pages)

    return request


def _load_env() -> None:
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)


def main(argv: list[str] | None = None) -> int:
    """CLI 진입점

    Returns:
        int: 종료 코드 (0: 성공, 1: 실패)
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    _load_env()

    try:
        config = ClientConfig.from_env()
        if args.forge_url:
            config.base_url = args.forge_url
        config.validate(strict=True)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    client = ForgeClient.from_config(config)

    if args.health:
        healthy = client.health()
        print("healthy" if healthy else "unhealthy")
        return 0 if healthy else 1

    request = build_request(args, client=client)

    if args.dry_run:
        print(json.dumps(request.build_payload(), indent=2, ensure_ascii=False))
        return 0

    try:
        content = request.send()
    except ForgeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_bytes(content)
        logger.info(f"[Forge] Saved: {args.output} ({len(content)} bytes)")
    else:
        sys.stdout.buffer.write(content)

    return 0


if __name__ == "__main__":
    sys.exit(main())
