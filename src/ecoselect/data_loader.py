"""
Loading candidate-summary tables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .constants import COL_REPLACE_MAP


def sanitize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Standardize column names.

    Replaces spaces, hyphens and other punctuation so that headers such as
    ``"log-Lik"`` or ``"n (obs)"`` match the known column aliases.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame with potentially problematic column names.

    Returns
    -------
    pd.DataFrame
        DataFrame with sanitized column names.
    """
    rename_map = {}
    for col in df.columns:
        name = str(col).strip()
        for old, new in COL_REPLACE_MAP.items():
            name = name.replace(old, new)
        rename_map[col] = name
    return df.rename(columns=rename_map)


def load_summary_table(
    path: str | Path,
    sheet_name: Optional[str] = None
) -> pd.DataFrame:
    """
    Load a table of fit summaries (one row per candidate model).

    Only blank cells are read as missing, so model names such as "null" or
    "NA" stay strings. Numeric columns holding such markers are left to
    :func:`coerce_numeric_columns`.

    Parameters
    ----------
    path : str | Path
        CSV or Excel file path.
    sheet_name : Optional[str]
        Sheet name for Excel files. If None, uses first sheet.

    Returns
    -------
    pd.DataFrame
        Loaded and sanitized DataFrame.

    Raises
    ------
    ValueError
        If file format is not CSV or XLSX.
    """
    p = Path(path)

    if p.suffix.lower() == ".csv":
        df = pd.read_csv(p, keep_default_na=False, na_values=[""])
    elif p.suffix.lower() in [".xlsx", ".xls"]:
        df = pd.read_excel(p, sheet_name=sheet_name or 0, keep_default_na=False, na_values=[""])
    else:
        raise ValueError(f"Unsupported file format: {p.suffix}")

    return sanitize_columns(df)


def coerce_numeric_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Coerce columns to numeric (NaN for non-convertible values)."""
    out = df.copy()
    for col in columns:
        out[col] = pd.to_numeric(out[col], errors="coerce")
    return out
