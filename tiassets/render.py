"""Render catalog entries from a master image with Pillow."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

from PIL import Image, ImageChops, ImageDraw, ImageOps

from .catalog import SizeEntry
from .config import CompressionTier
from .errors import OutputWriteError, SourceImageError

JPEG_QUALITY: dict[CompressionTier, int] = {
    CompressionTier.LOW: 80,
    CompressionTier.MEDIUM: 65,
    CompressionTier.HIGH: 50,
}

TRANSPARENT = (0, 0, 0, 0)


def jpeg_quality(tier: int) -> int:
    """JPEG quality for a compression tier; 100 for NONE or anything unknown."""

    try:
        return JPEG_QUALITY.get(CompressionTier(tier), 100)
    except ValueError:
        return 100


def corner_radius_px(width: int, percent: int) -> int:
    """Corner radius in pixels, ``percent`` of ``width`` rounded half up."""

    return int(math.floor(width * percent / 100 + 0.5))


def _open_source(path: Path) -> Image.Image:
    """Open and fully decode a master image, normalized to RGBA."""

    try:
        with Image.open(path) as img:
            img.load()
            converted = img.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise SourceImageError(f"Cannot read source image {path}: {exc}") from exc

    return converted


def _ensure_parent_dir(path: Path) -> None:
    """Create the parent directory for an output file if missing."""

    try:
        path.parent.mkdir(mode=0o777, parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"Cannot create directory {path.parent}: {exc}") from exc


def _save(img: Image.Image, path: Path, dpi: int, **params) -> None:
    try:
        img.save(path, dpi=(dpi, dpi), **params)
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {path}: {exc}") from exc


def cover_crop(img: Image.Image, width: int, height: int) -> Image.Image:
    """Scale ``img`` to cover ``width`` x ``height`` and crop the overflow evenly."""

    if width <= 0 or height <= 0:
        raise ValueError(f"target size must be > 0, got {width}x{height}")

    return ImageOps.fit(
        img,
        (width, height),
        method=Image.Resampling.LANCZOS,
        centering=(0.5, 0.5),
    )


def round_corners(img: Image.Image, radius_px: int) -> Image.Image:
    """Make the corners outside a rounded rectangle transparent."""

    if radius_px <= 0:
        return img

    out = img.convert("RGBA")
    mask = Image.new("L", out.size, 0)
    draw = ImageDraw.Draw(mask)
    draw.rounded_rectangle((0, 0, out.width - 1, out.height - 1), radius=radius_px, fill=255)

    # Keep transparency already present in the source.
    out.putalpha(ImageChops.multiply(out.getchannel("A"), mask))
    return out


def strip_metadata(img: Image.Image) -> Image.Image:
    """Return a copy without ICC profile, EXIF or text chunks."""

    stripped = img.copy()
    stripped.info = {}
    return stripped


def render_icon(
    source: Path,
    entry: SizeEntry,
    radius: int = 0,
    batch: Optional[list[Path]] = None,
) -> Path:
    """Render one icon entry as PNG and queue it for compression."""

    _ensure_parent_dir(entry.path)

    img = _open_source(source)
    img = cover_crop(img, entry.width, entry.height)

    if entry.rounded and radius > 0:
        img = round_corners(img, corner_radius_px(entry.width, radius))

    _save(img, entry.path, entry.dpi, format="PNG")

    if batch is not None:
        batch.append(entry.path)
    return entry.path


def render_splash(
    source: Path,
    entry: SizeEntry,
    compression: int = CompressionTier.MEDIUM,
    batch: Optional[list[Path]] = None,
) -> Path:
    """Render one splash entry.

    ``.jpg`` targets are encoded with the tier's JPEG quality and are not
    queued; every other target is written as PNG and queued in ``batch``.
    """

    _ensure_parent_dir(entry.path)

    img = strip_metadata(_open_source(source))

    if entry.rotate:
        # Pillow rotates counter-clockwise.
        img = img.rotate(
            -entry.rotate,
            resample=Image.Resampling.BICUBIC,
            expand=True,
            fillcolor=TRANSPARENT,
        )

    img = cover_crop(img, entry.width, entry.height)

    if entry.extension == "jpg":
        _save(
            img.convert("RGB"),
            entry.path,
            entry.dpi,
            format="JPEG",
            quality=jpeg_quality(compression),
        )
    else:
        _save(img, entry.path, entry.dpi, format="PNG")
        if batch is not None:
            batch.append(entry.path)

    return entry.path
