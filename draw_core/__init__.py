# FILE: draw_core/__init__.py
"""
draw_core package: name source, lucky draw engine, group engine, spin pacing,
exports and config.
"""
from .draw import DrawEngine, eligible_pool
from .errors import (
    DrawCoreError,
    DrawInProgressError,
    ExhaustedPoolError,
    InvalidGroupSizeError,
    NameImportError,
)
from .grouping import GroupEngine, coerce_group_size, partition
from .models import AppConfig, GroupPartition, WinnerState
from .names import parse_names_csv, parse_names_text

__all__ = [
    "AppConfig",
    "DrawCoreError",
    "DrawEngine",
    "DrawInProgressError",
    "ExhaustedPoolError",
    "GroupEngine",
    "GroupPartition",
    "InvalidGroupSizeError",
    "NameImportError",
    "WinnerState",
    "coerce_group_size",
    "eligible_pool",
    "parse_names_csv",
    "parse_names_text",
    "partition",
]
