"""Shared utilities and helpers for the kotlin-senior package."""

from kotlin_senior.utils.logging import configure_logging

__all__ = ["configure_logging"]
