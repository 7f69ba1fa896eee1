"""
SVG to PowerPoint Converter

Command line entry point:
- convert: SVG file -> single-slide PPTX
- image:   PNG/JPEG -> SVG via the vision model (optionally straight to PPTX)
- analyze: SVG file -> structured JSON element array via the model
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config.defaults import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_SLIDE_HEIGHT,
    DEFAULT_SLIDE_WIDTH,
    DEFAULT_TARGET_HEIGHT,
    DEFAULT_TARGET_WIDTH,
    DEFAULT_USER_SCALE,
)
from config.settings_manager import SettingsManager
from core.converter import build_output_filename, extract_svgs, svg_to_pptx
from core.errors import ConversionError
from core.geometry import PlacementOptions
from services.claude_client import ClaudeClient, ServiceError, UpstreamResponseError
from services.elements import elements_to_json

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logger"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def placement_from_args(args: argparse.Namespace) -> PlacementOptions:
    return PlacementOptions(
        x=args.x,
        y=args.y,
        w=args.w,
        h=args.h,
        preserve_aspect_ratio=not args.no_preserve_aspect_ratio,
        scale=args.scale,
        slide_width=args.slide_width,
        slide_height=args.slide_height,
    )


def resolve_output(args: argparse.Namespace, input_path: Path) -> Path:
    if args.output:
        return Path(args.output)
    title = args.title or input_path.stem
    return input_path.parent / build_output_filename(title)


def build_client(settings_manager: SettingsManager) -> ClaudeClient:
    settings = settings_manager.settings
    return ClaudeClient(
        api_key=settings_manager.api_key,
        model=settings.model,
        max_tokens=settings.max_tokens,
    )


def convert_command(args: argparse.Namespace) -> int:
    """Execute convert command."""
    input_path = Path(args.input)
    svg_text = input_path.read_text(encoding="utf-8")
    output = svg_to_pptx(svg_text, resolve_output(args, input_path), placement_from_args(args))
    SettingsManager().update(last_output_dir=str(output.resolve().parent))
    print(f"Saved presentation to: {output}")
    return 0


def image_command(args: argparse.Namespace) -> int:
    """Execute image command."""
    input_path = Path(args.input)
    settings_manager = SettingsManager()
    client = build_client(settings_manager)

    reply = client.image_to_svg(input_path.read_bytes())
    svgs = extract_svgs(reply)
    if not svgs:
        raise UpstreamResponseError("No SVG content found in model response", raw_response=reply)
    logger.info(f"Found {len(svgs)} SVG block(s) in model response")

    svg_path = Path(args.svg_output) if args.svg_output else input_path.with_suffix(".svg")
    svg_path.write_text(svgs[0], encoding="utf-8")
    print(f"Saved SVG to: {svg_path}")

    if args.pptx:
        output = svg_to_pptx(svgs[0], resolve_output(args, input_path), placement_from_args(args))
        settings_manager.update(last_output_dir=str(output.resolve().parent))
        print(f"Saved presentation to: {output}")
    return 0


def analyze_command(args: argparse.Namespace) -> int:
    """Execute analyze command."""
    input_path = Path(args.input)
    client = build_client(SettingsManager())

    elements = client.svg_to_elements(input_path.read_text(encoding="utf-8"))
    result = json.dumps(elements_to_json(elements), indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
        print(f"Saved {len(elements)} elements to: {args.output}")
    else:
        print(result)
    return 0


def add_placement_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--output', '-o', help='Output PPTX file (default: derived from title)')
    parser.add_argument('--title', help='Title used to name the output file')
    parser.add_argument('--x', type=float, default=0.0, help='Left offset in inches (0 = center)')
    parser.add_argument('--y', type=float, default=0.0, help='Top offset in inches (0 = center)')
    parser.add_argument('--w', type=float, default=DEFAULT_TARGET_WIDTH, help='Target width in inches')
    parser.add_argument('--h', type=float, default=DEFAULT_TARGET_HEIGHT, help='Target height in inches')
    parser.add_argument('--scale', type=float, default=DEFAULT_USER_SCALE, help='Extra scale multiplier')
    parser.add_argument('--slide-width', type=float, default=DEFAULT_SLIDE_WIDTH, help='Slide width in inches')
    parser.add_argument('--slide-height', type=float, default=DEFAULT_SLIDE_HEIGHT, help='Slide height in inches')
    parser.add_argument('--no-preserve-aspect-ratio', action='store_true',
                        help='Scale to the target width only')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='svg2pptx',
        description=f'{APP_NAME} v{APP_VERSION}',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s convert diagram.svg --title "System overview"
  %(prog)s convert diagram.svg -o deck.pptx --w 6 --h 4 --scale 0.85
  %(prog)s image sketch.png --pptx
  %(prog)s analyze diagram.svg -o elements.json
        """
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    convert_parser = subparsers.add_parser('convert', help='Convert an SVG file to PPTX')
    convert_parser.add_argument('input', help='Input SVG file')
    add_placement_arguments(convert_parser)

    image_parser = subparsers.add_parser('image', help='Redraw a PNG/JPEG image as SVG')
    image_parser.add_argument('input', help='Input PNG or JPEG image')
    image_parser.add_argument('--svg-output', help='Output SVG file (default: input name with .svg)')
    image_parser.add_argument('--pptx', action='store_true', help='Also convert the SVG to PPTX')
    add_placement_arguments(image_parser)

    analyze_parser = subparsers.add_parser('analyze', help='Describe an SVG file as JSON elements')
    analyze_parser.add_argument('input', help='Input SVG file')
    analyze_parser.add_argument('--output', '-o', help='Output JSON file (default: stdout)')

    return parser


COMMANDS = {
    'convert': convert_command,
    'image': image_command,
    'analyze': analyze_command,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(args.verbose)

    try:
        return COMMANDS[args.command](args)
    except UpstreamResponseError as e:
        print(f"\nError: {e}")
        if e.raw_response:
            print(f"Raw response:\n{e.raw_response}")
        return 1
    except (ConversionError, ServiceError, ValueError, OSError) as e:
        print(f"\nError: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def run() -> None:
    """Entry point for the svg2pptx console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
