"""Generate Titanium icons and splash screens from master images.

Examples:
  tiassets icons --icon icon.png --platform iphone --platform android
  tiassets splash --splash splash.png --language fr --compression high
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .catalog import catalog_for
from .compress import OptiPng
from .config import ICONS, ORIENTATIONS, PLATFORMS, SPLASH, CompressionTier
from .errors import ValidationError
from .generator import AssetGenerator, GenerationResult

COMPRESSION_CHOICES: dict[str, CompressionTier] = {
    tier.name.lower(): tier for tier in CompressionTier
}


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=Path("."),
        help="Project directory to write into (default: current directory).",
    )
    common.add_argument(
        "--platform",
        "-p",
        action="append",
        choices=PLATFORMS,
        help="Platform to generate for; repeat for several (default: iphone, ipad, android).",
    )
    common.add_argument(
        "--orientation",
        action="append",
        choices=ORIENTATIONS,
        help="Orientation to generate for; repeat for both (default: both).",
    )
    common.add_argument("--radius", type=int, default=0, help="Android icon corner radius in percent (0-50).")
    common.add_argument("--language", default="", help="ISO 639-1 code for localized splash screens.")
    common.add_argument(
        "--compression",
        choices=list(COMPRESSION_CHOICES),
        default="medium",
        help="optipng effort and JPEG quality (default: medium).",
    )
    common.add_argument(
        "--legacy-splash",
        action="store_true",
        help="Use Appcelerator's launch image sizes instead of Apple's.",
    )
    common.add_argument(
        "--classic-layout",
        action="store_true",
        help="Write to Resources/ instead of app/assets/.",
    )
    common.add_argument("--list", action="store_true", help="Print the output paths without rendering.")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    sub = parser.add_subparsers(dest="operation", required=True)

    icons = sub.add_parser(ICONS, parents=[common], help="Generate app icons.")
    icons.add_argument("--icon", type=Path, required=True, help="1024x1024 master icon.")
    icons.add_argument(
        "--icon-transparent",
        type=Path,
        help="Transparent master for Android, Mobile Web, BlackBerry and Tizen.",
    )

    splash = sub.add_parser(SPLASH, parents=[common], help="Generate splash screens.")
    splash.add_argument("--splash", type=Path, required=True, help="2208x2208 master splash screen.")

    return parser.parse_args(argv)


def build_generator(args: argparse.Namespace) -> AssetGenerator:
    gen = AssetGenerator(args.output_dir, optimizer=OptiPng(verbose=args.verbose))
    gen.set_radius(args.radius).set_language(args.language)
    gen.set_compression(COMPRESSION_CHOICES[args.compression])
    gen.set_apple(not args.legacy_splash).set_alloy(not args.classic_layout)
    if args.platform:
        gen.set_platforms(args.platform)
    if args.orientation:
        gen.set_orientations(args.orientation)

    if args.operation == ICONS:
        gen.set_icon(args.icon)
        if args.icon_transparent:
            gen.set_icon_transparent(args.icon_transparent)
    else:
        gen.set_splash(args.splash)
    return gen


def report(result: GenerationResult, output_dir: Path, verbose: bool) -> int:
    if verbose:
        for path in result.written:
            print(f"Wrote {path.relative_to(output_dir)}")

    if not result.ok:
        print(f"{result.operation} failed: {result.error}", file=sys.stderr)
        if result.written:
            print(f"{len(result.written)} files were written before the failure", file=sys.stderr)
        return 1

    print(f"Wrote {len(result.written)} {result.operation} files")
    if result.compressed:
        print(f"Compressed {len(result.compressed)} PNGs")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        gen = build_generator(args)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.list:
        for entry in catalog_for(args.operation, gen.snapshot()):
            print(f"{entry.path.relative_to(gen.output_dir)} {entry.width}x{entry.height} @{entry.dpi}dpi")
        return 0

    if args.operation == ICONS:
        result = gen.generate_icons()
    else:
        result = gen.generate_splash()

    return report(result, gen.output_dir, args.verbose)
