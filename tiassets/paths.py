"""Resolve catalog path templates to files under the output directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

ALLOY_ASSETS = "app/assets"
CLASSIC_ASSETS = "Resources"


@dataclass(frozen=True)
class AssetPaths:
    """Placeholder values for one project layout and language.

    Templates in the catalog use ``{assets}``, ``{ios}`` and
    ``{android_prefix}``. Templates without a placeholder are rooted at the
    output directory itself.
    """

    alloy: bool = True
    language: str = ""

    @property
    def assets(self) -> str:
        return ALLOY_ASSETS if self.alloy else CLASSIC_ASSETS

    @property
    def ios(self) -> str:
        # Localized launch images live outside the asset tree.
        if self.language:
            return f"i18n/{self.language}"
        return f"{self.assets}/iphone"

    @property
    def android_prefix(self) -> str:
        return f"{self.language}-" if self.language else ""

    def expand(self, template: str) -> str:
        return template.format(
            assets=self.assets,
            ios=self.ios,
            android_prefix=self.android_prefix,
        )

    def resolve(self, output_dir: Path, template: str) -> Path:
        return Path(output_dir) / self.expand(template)
