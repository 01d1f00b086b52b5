"""
Name source: turns pasted text or an uploaded delimited file into a NameList.

Both paths yield the same shape: an ordered list of trimmed, non-empty
strings. Duplicates are kept; the engines decide what they mean.
"""
from __future__ import annotations
import csv
import io
import logging
from collections import Counter
from typing import Dict, List

import pandas as pd

from .errors import NameImportError

logger = logging.getLogger(__name__)


def _clean(values) -> List[str]:
    out = []
    for v in values:
        s = str(v).strip()
        if s:
            out.append(s)
    return out


def parse_names_text(text: str) -> List[str]:
    """One name per line; blank lines dropped, each line trimmed."""
    if not text:
        return []
    return _clean(text.splitlines())


def _read_upload_text(file) -> str:
    """Accept raw bytes, a str of CSV content, or a file-like (Streamlit upload)."""
    if isinstance(file, str):
        return file
    if isinstance(file, (bytes, bytearray)):
        raw = bytes(file)
    elif hasattr(file, "getvalue"):
        raw = file.getvalue()
    else:
        raw = file.read()
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise NameImportError(f"File is not valid UTF-8 text: {e}") from e


def parse_names_csv(file, delimiter: str = ",") -> List[str]:
    """
    Flatten every cell of a header-less delimited file into a NameList.
    Rows may have different lengths; cells are read row by row.
    """
    text = _read_upload_text(file)
    # pandas truncates a cell at NUL instead of failing
    if "\x00" in text:
        raise NameImportError("File contains NUL bytes; it does not look like a text file.")
    # pandas needs the widest row up front to accept ragged input
    try:
        width = max((len(row) for row in csv.reader(io.StringIO(text), delimiter=delimiter)), default=0)
    except csv.Error as e:
        raise NameImportError(f"Could not parse file: {e}") from e
    if width == 0:
        return []
    try:
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            names=list(range(width)),
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as e:
        raise NameImportError(f"Could not parse file: {e}") from e

    cells = df.fillna("").to_numpy().ravel()
    names = _clean(cells)
    logger.info("Imported %d names from %d rows", len(names), len(df))
    return names


def names_to_text(names: List[str]) -> str:
    return "\n".join(names)


def duplicate_names(names: List[str]) -> Dict[str, int]:
    return {n: c for n, c in Counter(names).items() if c > 1}


def build_template_csv() -> bytes:
    example = (
        "Alex Carter,Blake Diaz,Casey Ellis\n"
        "Drew Fox\n"
    )
    return example.encode("utf-8")
