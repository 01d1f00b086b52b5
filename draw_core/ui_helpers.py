"""
Small, UI-agnostic helpers shared by the Streamlit pages.
"""
from __future__ import annotations
import re
from html import escape
from typing import List, Tuple

from .constants import STATUS_DRAWING, STATUS_WON, group_label
from .models import WinnerState


def stage_html(state: WinnerState) -> str:
    if state.status == STATUS_DRAWING:
        return f'<div class="stage drawing">{escape(state.candidate) or "…"}</div>'
    if state.status == STATUS_WON and state.winner is not None:
        return f'<div class="stage won">🏆 {escape(state.winner)}</div>'
    return '<div class="stage idle">Press “Start draw” to pick a winner</div>'


def history_rows(history: List[str]) -> List[Tuple[int, str]]:
    """(order, name) pairs, newest first; order 1 is the first draw."""
    n = len(history)
    return [(n - i, name) for i, name in enumerate(history)]


def group_card_html(index: int, names: List[str]) -> str:
    chips = "".join(f'<span class="chip">{escape(n)}</span>' for n in names)
    return (
        f'<div class="card"><div class="group-title">{group_label(index)} · {len(names)}</div>'
        f"<div>{chips}</div></div>"
    )


_MD_PUNCT = re.compile(r"([!-/:-@\[-`{-~])")


def markdown_escape(text: str) -> str:
    """Backslash-escape ASCII punctuation so a name renders literally in st.markdown."""
    return _MD_PUNCT.sub(r"\\\1", text)


def history_row_markdown(order: int, name: str) -> str:
    return f"**#{order}** &nbsp; {markdown_escape(name)}"


def pool_caption(pool_size: int, total: int) -> str:
    return f"{pool_size} of {total} names eligible"
