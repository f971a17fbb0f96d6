"""Titanium icon and splash screen generator."""

from .catalog import SizeEntry, catalog_for
from .compress import OptiPng, PngOptimizer
from .config import CompressionTier, GenerationConfig
from .errors import (
    AssetError,
    OutputWriteError,
    SourceImageError,
    ValidationError,
)
from .generator import AssetGenerator, GenerationResult

__all__ = [
    "AssetError",
    "AssetGenerator",
    "CompressionTier",
    "GenerationConfig",
    "GenerationResult",
    "OptiPng",
    "OutputWriteError",
    "PngOptimizer",
    "SizeEntry",
    "SourceImageError",
    "ValidationError",
    "catalog_for",
]

__version__ = "0.1.0"
