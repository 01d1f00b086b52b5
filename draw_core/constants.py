# draw_core/constants.py
from __future__ import annotations

# --- Spin pacing ---
SPIN_TICKS = 20
SPIN_INTERVAL_MS = 100

# --- Grouping ---
MIN_GROUP_SIZE = 1
DEFAULT_GROUP_SIZE = 3

SHUFFLE_FISHER_YATES = "fisher_yates"
SHUFFLE_COMPARATOR = "comparator"
SHUFFLE_STRATEGIES = [SHUFFLE_FISHER_YATES, SHUFFLE_COMPARATOR]

# --- Winner state ---
STATUS_IDLE = "idle"
STATUS_DRAWING = "drawing"
STATUS_WON = "won"

# --- Export columns ---
HISTORY_COLUMNS = ["Order", "Name"]
PARTITION_COLUMNS = ["Group", "Seat", "Name"]

# Sidebar hints (mirrors the original tips panel)
TIPS = [
    "Import names from a CSV file",
    "One name per line",
    "Draws can allow or block repeats",
    "Groups are shown as cards right away",
]


def group_label(index: int) -> str:
    """1-based display label for a group index."""
    return f"Group {index + 1}"
