"""The fixed table of icon and splash outputs per platform.

Each table row names a path template (see :mod:`tiassets.paths`), the target
size and the resolution to stamp. :func:`catalog_for` filters the rows by the
selected platforms and orientations and resolves their paths, producing fresh
:class:`SizeEntry` values on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .config import (
    ANDROID,
    BLACKBERRY,
    ICONS,
    IPAD,
    IPHONE,
    LANDSCAPE,
    MOBILEWEB,
    PORTRAIT,
    SPLASH,
    TIZEN,
    GenerationConfig,
)
from .errors import ValidationError
from .paths import AssetPaths

IOS = (IPHONE, IPAD)


@dataclass(frozen=True)
class SizeEntry:
    """A single output image to render."""

    path: Path
    width: int
    height: int
    dpi: int
    rounded: bool = False
    rotate: Optional[int] = None
    # Icons rendered from the transparent master when one is configured.
    alternate_source: bool = False

    @property
    def extension(self) -> str:
        return self.path.suffix.lstrip(".").lower()


@dataclass(frozen=True)
class IconSpec:
    template: str
    size: int
    dpi: int
    platforms: tuple[str, ...]
    rounded: bool = False
    alternate_source: bool = False


@dataclass(frozen=True)
class SplashSpec:
    template: str
    width: int
    height: int
    dpi: int
    platform: str
    legacy_height: Optional[int] = None
    rotate: Optional[int] = None


def _ios_icon(name: str, size: int, platforms: tuple[str, ...] = IOS) -> IconSpec:
    return IconSpec("{assets}/iphone/" + name, size, 72, platforms)


def _android_icon(template: str, size: int, dpi: int, rounded: bool = True) -> IconSpec:
    return IconSpec(template, size, dpi, (ANDROID,), rounded=rounded, alternate_source=True)


ICON_TABLE: tuple[IconSpec, ...] = (
    # App Store listing and artwork
    IconSpec("iTunesConnect.png", 1024, 72, IOS),
    _ios_icon("iTunesArtwork", 512),
    _ios_icon("iTunesArtwork@2x", 1024),
    # Spotlight & Settings
    _ios_icon("appicon-Small@2x.png", 58),
    _ios_icon("appicon-Small-40.png", 40),
    _ios_icon("appicon-Small-40@2x.png", 80),
    _ios_icon("appicon.png", 57),
    # iPhone
    _ios_icon("appicon@2x.png", 114, (IPHONE,)),
    _ios_icon("appicon-Small.png", 29, (IPHONE,)),
    _ios_icon("appicon-Small@3x.png", 87, (IPHONE,)),
    _ios_icon("appicon-60.png", 60, (IPHONE,)),
    _ios_icon("appicon-60@2x.png", 120, (IPHONE,)),
    _ios_icon("appicon-60@3x.png", 180, (IPHONE,)),
    # iPad
    _ios_icon("appicon-72.png", 72, (IPAD,)),
    _ios_icon("appicon-72@2x.png", 144, (IPAD,)),
    _ios_icon("appicon-Small-50.png", 50, (IPAD,)),
    _ios_icon("appicon-Small-50@2x.png", 100, (IPAD,)),
    _ios_icon("appicon-76.png", 76, (IPAD,)),
    _ios_icon("appicon-76@2x.png", 152, (IPAD,)),
    # Android, Mobile Web, Tizen and BlackBerry use the transparent master
    _android_icon("{assets}/android/appicon.png", 128, 72, rounded=False),
    _android_icon("platform/android/res/drawable-ldpi/appicon.png", 36, 120),
    _android_icon("platform/android/res/drawable-mdpi/appicon.png", 48, 160),
    _android_icon("platform/android/res/drawable-hdpi/appicon.png", 72, 240),
    _android_icon("platform/android/res/drawable-xhdpi/appicon.png", 96, 320),
    _android_icon("platform/android/res/drawable-xxhdpi/appicon.png", 144, 480),
    _android_icon("platform/android/res/drawable-xxxhdpi/appicon.png", 192, 640),
    _android_icon("GooglePlay.png", 512, 72),
    IconSpec("{assets}/mobileweb/appicon.png", 128, 72, (MOBILEWEB,), alternate_source=True),
    IconSpec("{assets}/tizen/appicon.png", 96, 72, (TIZEN,), alternate_source=True),
    IconSpec("{assets}/blackberry/appicon.png", 114, 72, (BLACKBERRY,), alternate_source=True),
)


def _android_splash(bucket: str, width: int, height: int, dpi: int) -> SplashSpec:
    return SplashSpec(
        "{assets}/android/images/res-{android_prefix}" + bucket + "/default.png",
        width,
        height,
        dpi,
        ANDROID,
    )


def _startup_image(name: str, width: int, height: int, rotate: Optional[int] = None) -> SplashSpec:
    return SplashSpec(
        "{assets}/mobileweb/apple_startup_images/" + name,
        width,
        height,
        72,
        MOBILEWEB,
        rotate=rotate,
    )


SPLASH_TABLE: tuple[SplashSpec, ...] = (
    # iPhone
    SplashSpec("{ios}/Default.png", 320, 480, 72, IPHONE, legacy_height=460),
    SplashSpec("{ios}/Default@2x.png", 640, 960, 72, IPHONE),
    SplashSpec("{ios}/Default-568h@2x.png", 640, 1136, 72, IPHONE),
    SplashSpec("{ios}/Default-667h@2x.png", 750, 1334, 72, IPHONE),
    SplashSpec("{ios}/Default-Portrait-736h@3x.png", 1242, 2208, 72, IPHONE),
    SplashSpec("{ios}/Default-Landscape-736h@3x.png", 2208, 1242, 72, IPHONE),
    # iPad
    SplashSpec("{ios}/Default-Landscape.png", 1024, 768, 72, IPAD, legacy_height=748),
    SplashSpec("{ios}/Default-Portrait.png", 768, 1024, 72, IPAD, legacy_height=1044),
    SplashSpec("{ios}/Default-Landscape@2x.png", 2048, 1536, 72, IPAD, legacy_height=1496),
    SplashSpec("{ios}/Default-Portrait@2x.png", 1536, 2048, 72, IPAD, legacy_height=2008),
    # Android
    SplashSpec("GooglePlayFeature.png", 1024, 500, 72, ANDROID),
    SplashSpec("{assets}/android/default.png", 320, 480, 72, ANDROID),
    _android_splash("long-land-xxxhdpi", 1920, 1280, 640),
    _android_splash("long-land-xxhdpi", 1600, 960, 480),
    _android_splash("long-land-xhdpi", 960, 640, 320),
    _android_splash("long-land-hdpi", 800, 480, 240),
    _android_splash("long-land-mdpi", 480, 320, 160),
    _android_splash("long-land-ldpi", 400, 240, 120),
    _android_splash("long-port-xxxhdpi", 1280, 1920, 640),
    _android_splash("long-port-xxhdpi", 960, 1600, 480),
    _android_splash("long-port-xhdpi", 640, 960, 320),
    _android_splash("long-port-hdpi", 480, 800, 240),
    _android_splash("long-port-mdpi", 320, 480, 160),
    _android_splash("long-port-ldpi", 240, 400, 120),
    _android_splash("notlong-land-xxxhdpi", 1920, 1280, 640),
    _android_splash("notlong-land-xxhdpi", 1600, 960, 480),
    _android_splash("notlong-land-xhdpi", 960, 640, 320),
    _android_splash("notlong-land-hdpi", 800, 480, 240),
    _android_splash("notlong-land-mdpi", 480, 320, 160),
    _android_splash("notlong-land-ldpi", 320, 240, 120),
    _android_splash("notlong-port-xxxhdpi", 1280, 1920, 320),
    _android_splash("notlong-port-xxhdpi", 960, 1600, 320),
    _android_splash("notlong-port-xhdpi", 640, 960, 320),
    _android_splash("notlong-port-hdpi", 480, 800, 240),
    _android_splash("notlong-port-mdpi", 320, 480, 160),
    _android_splash("notlong-port-ldpi", 240, 320, 120),
    # Mobile Web
    _startup_image("Default.jpg", 320, 460),
    _startup_image("Default.png", 320, 460),
    _startup_image("Default-Landscape.jpg", 748, 1024, rotate=90),
    _startup_image("Default-Landscape.png", 748, 1024, rotate=90),
    _startup_image("Default-Portrait.jpg", 768, 1004),
    _startup_image("Default-Portrait.png", 768, 1004),
    # BlackBerry
    SplashSpec("{assets}/blackberry/splash-600x1024.png", 768, 1280, 72, BLACKBERRY),
    SplashSpec("{assets}/blackberry/splash-720x720.png", 720, 720, 72, BLACKBERRY),
)


def fits_orientation(width: int, height: int, orientations: Iterable[str]) -> bool:
    """Return whether a ``width`` x ``height`` image belongs to the selection.

    Square images fit every selection.
    """

    selected = set(orientations)
    if width < height and PORTRAIT not in selected:
        return False
    if width > height and LANDSCAPE not in selected:
        return False
    return True


def icon_catalog(config: GenerationConfig) -> list[SizeEntry]:
    paths = AssetPaths(alloy=config.alloy, language=config.language)
    entries: list[SizeEntry] = []

    for spec in ICON_TABLE:
        if not config.platforms.intersection(spec.platforms):
            continue
        entries.append(
            SizeEntry(
                path=paths.resolve(config.output_dir, spec.template),
                width=spec.size,
                height=spec.size,
                dpi=spec.dpi,
                rounded=spec.rounded and not config.has_transparent_icon,
                alternate_source=spec.alternate_source,
            )
        )

    return entries


def splash_catalog(config: GenerationConfig) -> list[SizeEntry]:
    paths = AssetPaths(alloy=config.alloy, language=config.language)
    entries: list[SizeEntry] = []

    for spec in SPLASH_TABLE:
        if spec.platform not in config.platforms:
            continue

        height = spec.height
        if not config.apple and spec.legacy_height is not None:
            height = spec.legacy_height

        if not fits_orientation(spec.width, height, config.orientations):
            continue

        entries.append(
            SizeEntry(
                path=paths.resolve(config.output_dir, spec.template),
                width=spec.width,
                height=height,
                dpi=spec.dpi,
                rotate=spec.rotate,
            )
        )

    return entries


def catalog_for(operation: str, config: GenerationConfig) -> list[SizeEntry]:
    """Return the ordered outputs of ``operation`` ("icons" or "splash")."""

    if operation == ICONS:
        return icon_catalog(config)
    if operation == SPLASH:
        return splash_catalog(config)
    raise ValidationError(f"Unknown operation: {operation!r}")
