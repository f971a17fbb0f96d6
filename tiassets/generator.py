"""Validated generator settings and the two top level operations."""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from .catalog import icon_catalog, splash_catalog
from .compress import OptiPng, PngOptimizer, compress
from .config import (
    ANDROID,
    ICONS,
    IPAD,
    IPHONE,
    LANDSCAPE,
    ORIENTATIONS,
    PLATFORMS,
    PORTRAIT,
    SPLASH,
    CompressionTier,
    GenerationConfig,
)
from .errors import AssetError, ValidationError
from .render import render_icon, render_splash

PathLike = Union[str, Path]

LANGUAGE_RE = re.compile(r"^[a-z]{2}$")

DEFAULT_OUTPUT_DIR = Path(__file__).resolve().parent / "output"


@dataclass
class GenerationResult:
    """Outcome of one ``icons`` or ``splash`` run.

    Files already written before a failure stay on disk and are listed in
    ``written``. The result is truthy only when the run succeeded.
    """

    operation: str
    written: list[Path] = field(default_factory=list)
    compressed: list[Path] = field(default_factory=list)
    error: Optional[AssetError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


def _existing_file(path: PathLike) -> Path:
    path = Path(path)
    if not path.exists():
        raise ValidationError(f"File {path} not found")
    return path


def _selection(values: Union[str, Iterable[str]], allowed: tuple[str, ...], kind: str) -> frozenset[str]:
    if isinstance(values, str):
        values = [values]
    try:
        selected = frozenset(values)
    except TypeError:
        raise ValidationError(f"Expected a list of {kind} names, got {values!r}") from None
    unknown = sorted(repr(v) for v in selected.difference(allowed))
    if unknown:
        raise ValidationError(f"Unknown {kind}: {', '.join(unknown)}")
    return selected


class AssetGenerator:
    """Generates Titanium app icons and splash screens from master images.

    Settings are changed through the ``set_*`` methods, which validate their
    argument and return the generator so calls can be chained::

        gen = AssetGenerator().set_output_dir("build").set_radius(10)
        gen.set_platforms(["iphone", "android"]).icons("icon.png")
    """

    def __init__(
        self,
        output_dir: Optional[PathLike] = None,
        optimizer: Optional[PngOptimizer] = None,
    ) -> None:
        self.optimizer: PngOptimizer = optimizer if optimizer is not None else OptiPng()
        self._icon: Optional[Path] = None
        self._icon_transparent: Optional[Path] = None
        self._splash: Optional[Path] = None

        (
            self.set_alloy(True)
            .set_apple(True)
            .set_compression(CompressionTier.MEDIUM)
            .set_language("")
            .set_orientations([PORTRAIT, LANDSCAPE])
            .set_platforms([IPHONE, IPAD, ANDROID])
            .set_output_dir(output_dir if output_dir is not None else DEFAULT_OUTPUT_DIR)
            .set_radius(0)
        )

    # Source images

    @property
    def icon_path(self) -> Optional[Path]:
        """1024x1024 PNG with no rounded corners or transparency."""
        return self._icon

    def set_icon(self, path: PathLike) -> "AssetGenerator":
        self._icon = _existing_file(path)
        return self

    @property
    def icon_transparent_path(self) -> Optional[Path]:
        """Alternative icon for Android, Mobile Web, BlackBerry and Tizen."""
        return self._icon_transparent

    def set_icon_transparent(self, path: PathLike) -> "AssetGenerator":
        self._icon_transparent = _existing_file(path)
        return self

    @property
    def splash_path(self) -> Optional[Path]:
        """2208x2208 image with the artwork in the center 1000x1000 pixels."""
        return self._splash

    def set_splash(self, path: PathLike) -> "AssetGenerator":
        self._splash = _existing_file(path)
        return self

    # Options

    @property
    def radius(self) -> int:
        return self._radius

    def set_radius(self, radius: int) -> "AssetGenerator":
        if (
            isinstance(radius, bool)
            or not isinstance(radius, numbers.Real)
            or not float(radius).is_integer()
        ):
            raise ValidationError(f"Border radius must be an integer, got {radius!r}")
        if radius < 0 or radius > 50:
            raise ValidationError("Border radius should be between 0 and 50.")
        self._radius = int(radius)
        return self

    @property
    def language(self) -> str:
        return self._language

    def set_language(self, language: Optional[str]) -> "AssetGenerator":
        if language is None:
            language = ""
        if not isinstance(language, str):
            raise ValidationError(f"Language code must be a string, got {language!r}")
        if language and not LANGUAGE_RE.match(language):
            raise ValidationError(f"Invalid ISO 639-1 language code: {language!r}")
        self._language = language
        return self

    @property
    def compression(self) -> CompressionTier:
        return self._compression

    def set_compression(self, compression: int) -> "AssetGenerator":
        if isinstance(compression, bool):
            raise ValidationError(f"Invalid compression: {compression!r}")
        try:
            self._compression = CompressionTier(compression)
        except ValueError:
            raise ValidationError(f"Invalid compression: {compression!r}") from None
        return self

    @property
    def platforms(self) -> frozenset[str]:
        return self._platforms

    def set_platforms(self, platforms: Union[str, Iterable[str]]) -> "AssetGenerator":
        self._platforms = _selection(platforms, PLATFORMS, "platform")
        return self

    @property
    def orientations(self) -> frozenset[str]:
        return self._orientations

    def set_orientations(self, orientations: Union[str, Iterable[str]]) -> "AssetGenerator":
        self._orientations = _selection(orientations, ORIENTATIONS, "orientation")
        return self

    @property
    def apple(self) -> bool:
        """Use Apple's launch image sizes rather than Appcelerator's."""
        return self._apple

    def set_apple(self, apple: bool) -> "AssetGenerator":
        self._apple = bool(apple)
        return self

    @property
    def alloy(self) -> bool:
        """Write to app/assets instead of Resources."""
        return self._alloy

    def set_alloy(self, alloy: bool) -> "AssetGenerator":
        self._alloy = bool(alloy)
        return self

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def set_output_dir(self, output_dir: PathLike) -> "AssetGenerator":
        output_dir = Path(output_dir)
        try:
            output_dir.mkdir(mode=0o777, parents=True, exist_ok=True)
        except OSError as exc:
            raise ValidationError(f"Can't create output directory {output_dir}: {exc}") from exc
        self._output_dir = output_dir
        return self

    def snapshot(self) -> GenerationConfig:
        return GenerationConfig(
            output_dir=self._output_dir,
            icon=self._icon,
            icon_transparent=self._icon_transparent,
            splash=self._splash,
            radius=self._radius,
            language=self._language,
            compression=self._compression,
            platforms=self._platforms,
            orientations=self._orientations,
            apple=self._apple,
            alloy=self._alloy,
        )

    # Operations

    @staticmethod
    def _check_selection(config: GenerationConfig) -> None:
        if not config.platforms:
            raise ValidationError("Select at least one platform.")
        if not config.orientations:
            raise ValidationError("Select at least one orientation.")

    def generate_icons(
        self,
        icon: Optional[PathLike] = None,
        icon_transparent: Optional[PathLike] = None,
    ) -> GenerationResult:
        """Render every icon for the selected platforms, then compress them."""

        if icon:
            self.set_icon(icon)
        if icon_transparent:
            self.set_icon_transparent(icon_transparent)

        config = self.snapshot()
        result = GenerationResult(ICONS)
        batch: list[Path] = []

        try:
            if config.icon is None:
                raise ValidationError("Missing icon file")
            self._check_selection(config)

            for entry in icon_catalog(config):
                source = config.icon
                if entry.alternate_source and config.icon_transparent is not None:
                    source = config.icon_transparent
                result.written.append(render_icon(source, entry, config.radius, batch))

            if compress(batch, config.compression, self.optimizer):
                result.compressed = batch
        except AssetError as exc:
            result.error = exc

        return result

    def generate_splash(self, splash: Optional[PathLike] = None) -> GenerationResult:
        """Render every splash screen for the selected platforms and orientations."""

        if splash:
            self.set_splash(splash)

        config = self.snapshot()
        result = GenerationResult(SPLASH)
        batch: list[Path] = []

        try:
            if config.splash is None:
                raise ValidationError("Missing splash file")
            self._check_selection(config)

            for entry in splash_catalog(config):
                result.written.append(
                    render_splash(config.splash, entry, config.compression, batch)
                )

            if compress(batch, config.compression, self.optimizer):
                result.compressed = batch
        except AssetError as exc:
            result.error = exc

        return result

    def icons(
        self,
        icon: Optional[PathLike] = None,
        icon_transparent: Optional[PathLike] = None,
    ) -> bool:
        """Like :meth:`generate_icons` but only reports success or failure."""
        return self.generate_icons(icon, icon_transparent).ok

    def splash(self, splash: Optional[PathLike] = None) -> bool:
        """Like :meth:`generate_splash` but only reports success or failure."""
        return self.generate_splash(splash).ok
