# FILE: tests/test_io.py
import io

import pandas as pd

from draw_core.export_pdf import render_groups_pdf
from draw_core.io import (
    history_csv_bytes,
    history_to_dataframe,
    partition_csv_bytes,
    partition_to_dataframe,
)
from draw_core.models import GroupPartition


def test_history_dataframe_orders_first_draw_as_one():
    df = history_to_dataframe(["C", "B", "A"])
    assert list(df.columns) == ["Order", "Name"]
    assert df["Order"].tolist() == [3, 2, 1]
    assert df["Name"].tolist() == ["C", "B", "A"]


def test_history_csv_roundtrip_shape():
    df = pd.read_csv(io.BytesIO(history_csv_bytes(["B", "A"])))
    assert df.to_dict(orient="records") == [{"Order": 2, "Name": "B"}, {"Order": 1, "Name": "A"}]


def test_empty_history_has_headers():
    assert history_csv_bytes([]).decode("utf-8").strip() == "Order,Name"


def test_partition_dataframe():
    p = GroupPartition(group_size=2, groups=[["A", "B"], ["C"]])
    df = partition_to_dataframe(p)
    assert df["Group"].tolist() == ["Group 1", "Group 1", "Group 2"]
    assert df["Seat"].tolist() == [1, 2, 1]
    assert df["Name"].tolist() == ["A", "B", "C"]
    assert partition_csv_bytes(p).decode("utf-8").splitlines()[0] == "Group,Seat,Name"


def test_render_groups_pdf():
    groups = [[f"P{i}-{j}" for j in range(4)] for i in range(14)]
    pdf = render_groups_pdf(GroupPartition(group_size=4, groups=groups), title="Workshop")
    assert pdf.startswith(b"%PDF")


def test_render_empty_groups_pdf():
    assert render_groups_pdf(GroupPartition()).startswith(b"%PDF")
