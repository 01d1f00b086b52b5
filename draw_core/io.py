# draw_core/io.py
from __future__ import annotations
import io
from typing import List

import pandas as pd

from .constants import HISTORY_COLUMNS, PARTITION_COLUMNS, group_label
from .models import GroupPartition


def history_to_dataframe(history: List[str]) -> pd.DataFrame:
    """History is most-recent-first; Order 1 is the first name drawn."""
    n = len(history)
    rows = [{"Order": n - i, "Name": name} for i, name in enumerate(history)]
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def partition_to_dataframe(partition: GroupPartition) -> pd.DataFrame:
    rows = []
    for gi, group in enumerate(partition.groups):
        for seat, name in enumerate(group, start=1):
            rows.append({"Group": group_label(gi), "Seat": seat, "Name": name})
    return pd.DataFrame(rows, columns=PARTITION_COLUMNS)


def _df_to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def history_csv_bytes(history: List[str]) -> bytes:
    return _df_to_csv_bytes(history_to_dataframe(history))


def partition_csv_bytes(partition: GroupPartition) -> bytes:
    return _df_to_csv_bytes(partition_to_dataframe(partition))
