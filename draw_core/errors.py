# draw_core/errors.py
from __future__ import annotations


class DrawCoreError(Exception):
    """Base class for every recoverable engine failure."""


class ExhaustedPoolError(DrawCoreError):
    """Raised when a draw is requested and no name is eligible."""

    def __init__(self, message: str = "No eligible names left to draw."):
        super().__init__(message)


class DrawInProgressError(DrawCoreError):
    """Raised when a draw is requested while another one is still pending."""

    def __init__(self, message: str = "A draw is already in progress."):
        super().__init__(message)


class InvalidGroupSizeError(DrawCoreError, ValueError):
    def __init__(self, group_size):
        self.group_size = group_size
        super().__init__(f"Group size must be an integer >= 1, got {group_size!r}")


class NameImportError(DrawCoreError, ValueError):
    """Raised when an uploaded name file cannot be read."""
