"""Generation settings shared by the catalog, the pipeline and the facade."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Optional


class CompressionTier(IntEnum):
    """optipng effort for PNGs; the value is also the JPEG quality."""

    NONE = 100
    LOW = 80
    MEDIUM = 65
    HIGH = 50


IPHONE = "iphone"
IPAD = "ipad"
ANDROID = "android"
MOBILEWEB = "mobileweb"
BLACKBERRY = "blackberry"
TIZEN = "tizen"

PLATFORMS: tuple[str, ...] = (IPHONE, IPAD, ANDROID, MOBILEWEB, BLACKBERRY, TIZEN)

PORTRAIT = "portrait"
LANDSCAPE = "landscape"

ORIENTATIONS: tuple[str, ...] = (PORTRAIT, LANDSCAPE)

ICONS = "icons"
SPLASH = "splash"


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable snapshot of an :class:`~tiassets.generator.AssetGenerator`."""

    output_dir: Path
    icon: Optional[Path] = None
    icon_transparent: Optional[Path] = None
    splash: Optional[Path] = None
    radius: int = 0
    language: str = ""
    compression: CompressionTier = CompressionTier.MEDIUM
    platforms: frozenset[str] = frozenset((IPHONE, IPAD, ANDROID))
    orientations: frozenset[str] = frozenset((PORTRAIT, LANDSCAPE))
    apple: bool = True
    alloy: bool = True

    @property
    def has_transparent_icon(self) -> bool:
        return self.icon_transparent is not None
