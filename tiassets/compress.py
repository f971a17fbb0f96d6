"""Lossless PNG compression run once over every PNG an operation wrote."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol, Sequence

from .config import CompressionTier

OPTIMIZER_LEVELS: dict[CompressionTier, int] = {
    CompressionTier.LOW: 1,
    CompressionTier.MEDIUM: 2,
    CompressionTier.HIGH: 3,
}

DEFAULT_LEVEL = 2


class PngOptimizer(Protocol):
    def optimize(self, paths: Sequence[Path], level: int) -> None:
        ...


class OptiPng:
    """Runs the ``optipng`` executable in place over a batch of files.

    A missing executable or a non-zero exit leaves the files uncompressed and
    is only reported when ``verbose`` is set.
    """

    def __init__(self, executable: str = "optipng", verbose: bool = False) -> None:
        self.executable = executable
        self.verbose = verbose

    def command(self, paths: Sequence[Path], level: int) -> list[str]:
        return [self.executable, "-v", "-o", str(level), *(str(p) for p in paths)]

    def optimize(self, paths: Sequence[Path], level: int) -> None:
        cmd = self.command(paths, level)
        if self.verbose:
            print(f"Running: {self.executable} -o {level} on {len(paths)} files")

        try:
            proc = subprocess.run(cmd, check=False, capture_output=True, text=True)
        except FileNotFoundError:
            if self.verbose:
                print(f"{self.executable} not found in PATH; skipping PNG compression")
            return

        if proc.returncode != 0 and self.verbose:
            print(f"{self.executable} exited with {proc.returncode}; stderr: {proc.stderr}")


def optimizer_level(tier: int) -> int:
    """optipng ``-o`` level for a tier; unrecognized tiers get the default."""

    try:
        return OPTIMIZER_LEVELS.get(CompressionTier(tier), DEFAULT_LEVEL)
    except ValueError:
        return DEFAULT_LEVEL


def compress(batch: Sequence[Path], tier: int, optimizer: PngOptimizer) -> bool:
    """Optimize ``batch`` in a single call. Returns whether the optimizer ran."""

    if tier == CompressionTier.NONE or not batch:
        return False

    optimizer.optimize(list(batch), optimizer_level(tier))
    return True
