# sheet.py

"""
Batch conversion of one spreadsheet column to words.

- Reads .xlsx (first sheet, via openpyxl) or .csv, every cell as text so numbers are
  not re-rounded on the way in.
- Adds "<column> (words)" next to the source column and an "error" column for rows
  that could not be converted. A bad row never aborts the whole file.
- Writes .xlsx with a styled header and autosized columns.
"""

from __future__ import annotations

import logging

from pathlib import Path
from typing import List, Tuple

import pandas as pd

from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from .adapters import string_ordinal
from .config import DEFAULT_WORDS_SUFFIX
from .digits import spell_digits
from .errors import FormatError
from .parser import string_cardinal

logger = logging.getLogger(__name__)

MODES = ("cardinal", "ordinal", "digits")
ERROR_COLUMN = "error"
LOG_EVERY = 1000  # log progress every N rows

HEADER_FILL = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF")


# --------------------------- Read ---------------------------

def read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix in (".xlsx", ".xlsm"):
        return pd.read_excel(path, sheet_name=0, engine="openpyxl", dtype=str, keep_default_na=False)
    raise ValueError(f"Unsupported file type (use .xlsx or .csv): {path.name}")


# --------------------------- Convert ---------------------------

def convert_value(value: str, mode: str = "cardinal") -> str:
    """
    One cell to words.
      cardinal: "-12.5" -> "negative twelve point five"
      ordinal:  "21"    -> "twenty-first" (non-negative integers only)
      digits:   "007"   -> "zero zero seven"
    """
    if mode == "cardinal":
        return string_cardinal(value)
    if mode == "digits":
        return spell_digits(value)
    if mode == "ordinal":
        return string_ordinal(value)
    raise ValueError(f"Unknown mode: {mode} (choose from {', '.join(MODES)})")


def convert_column(values: pd.Series, mode: str = "cardinal") -> Tuple[List[str], List[str]]:
    words: List[str] = []
    errors: List[str] = []

    for i, raw in enumerate(values, start=1):
        text = str(raw)
        # blank cells are skipped; anything else goes through as written
        if not text.strip():
            words.append("")
            errors.append("")
            continue

        try:
            words.append(convert_value(text, mode))
            errors.append("")
        except FormatError as e:
            logger.warning("Row %d (%r): %s", i, text, e)
            words.append("")
            errors.append(f"{e.kind}: {e}")

        if i % LOG_EVERY == 0:
            logger.info("Progress: %d rows", i)

    return words, errors


# --------------------------- Write ---------------------------

def write_workbook(df: pd.DataFrame, xlsx_path: Path, sheet_name: str = "Numbers") -> Path:
    """Save DataFrame to .xlsx with a coloured header row and autosized columns."""
    with pd.ExcelWriter(xlsx_path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)

        ws = writer.book[sheet_name]
        center = Alignment(horizontal="center", vertical="center")
        for col_idx, col_name in enumerate(df.columns, start=1):
            cell = ws.cell(row=1, column=col_idx)
            cell.fill = HEADER_FILL
            cell.font = HEADER_FONT
            cell.alignment = center

            series = df[col_name].astype(str).fillna("")
            max_len = max([len(str(col_name))] + series.map(len).tolist())
            ws.column_dimensions[get_column_letter(col_idx)].width = min(max_len + 2, 60)

    return xlsx_path


def convert_sheet(
    path: Path,
    column: str,
    mode: str = "cardinal",
    out_path: Path | None = None,
    words_suffix: str = DEFAULT_WORDS_SUFFIX,
) -> Tuple[Path, int, int]:
    """
    Convert `column` of `path` and write the result.
    Returns (output path, converted rows, failed rows).
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode} (choose from {', '.join(MODES)})")

    df = read_table(path)
    if column not in df.columns:
        raise KeyError(f"Column {column!r} not found in {path.name} (have: {', '.join(map(str, df.columns))})")

    words, errors = convert_column(df[column], mode)

    words_col = f"{column}{words_suffix}"
    if words_col in df.columns:
        df = df.drop(columns=[words_col])
    df.insert(df.columns.get_loc(column) + 1, words_col, words)
    df[ERROR_COLUMN] = errors

    failed = sum(1 for e in errors if e)
    converted = sum(1 for w in words if w)
    logger.info("Parsed %-40s -> %d rows | converted:%d failed:%d", path.name, len(df), converted, failed)

    if out_path is None:
        out_path = path.with_name(f"{path.stem}_words.xlsx")
    out_path.parent.mkdir(parents=True, exist_ok=True)

    return write_workbook(df, out_path), converted, failed
