# draw_core/export_pdf.py
from __future__ import annotations
import io
from reportlab.lib.pagesizes import letter, landscape
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from .constants import group_label
from .models import GroupPartition

CARDS_PER_ROW = 3


def _group_table(index: int, names) -> Table:
    data = [[group_label(index)]] + [[n] for n in names]
    t = Table(data, colWidths=[200])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#18181b")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.white),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,-1), 10),
        ("BOX", (0,0), (-1,-1), 0.75, colors.HexColor("#3f3f46")),
        ("LINEBELOW", (0,1), (-1,-2), 0.25, colors.HexColor("#e4e4e7")),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
    ]))
    return t


def render_groups_pdf(partition: GroupPartition, title: str = "Groups") -> bytes:
    """Printable group cards, laid out left to right and wrapped onto new pages."""
    buf = io.BytesIO()
    page_size = landscape(letter)
    c = canvas.Canvas(buf, pagesize=page_size)

    def header():
        c.setFont("Helvetica-Bold", 16)
        c.drawString(40, page_size[1] - 40, title)

    header()
    if not partition.groups:
        c.setFont("Helvetica", 11)
        c.drawString(40, page_size[1] - 70, "No groups generated.")

    x0, gap = 40, 20
    y_top = page_size[1] - 70
    y = y_top
    groups = partition.groups
    for start in range(0, len(groups), CARDS_PER_ROW):
        tables = [_group_table(i, groups[i]) for i in range(start, min(start + CARDS_PER_ROW, len(groups)))]
        heights = [t.wrapOn(c, 200, page_size[1])[1] for t in tables]
        row_h = max(heights)
        if y - row_h < 40 and y != y_top:
            c.showPage()
            header()
            y = y_top
        for col, (t, h) in enumerate(zip(tables, heights)):
            t.drawOn(c, x0 + col * (200 + gap), y - h)
        y -= row_h + gap

    c.showPage()
    c.save()
    return buf.getvalue()
