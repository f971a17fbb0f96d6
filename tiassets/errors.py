"""Exceptions raised while configuring or generating assets."""

from __future__ import annotations


class AssetError(Exception):
    """Base class for every failure the generator reports."""


class ValidationError(AssetError, ValueError):
    """A setting or a required input is missing or out of range."""


class SourceImageError(AssetError):
    """A master image could not be read or decoded."""


class OutputWriteError(AssetError, OSError):
    """An output directory or file could not be written."""
