"""
MISSION: Margin totals for report tables.
Appends a row-total column and/or a column-total row to a DataFrame, the way
cross-tabs are printed in the book. Inputs are never modified.
"""
import logging

import pandas as pd

logger = logging.getLogger(__name__)


def _as_frame(table) -> pd.DataFrame:
    if isinstance(table, pd.DataFrame):
        return table.copy()
    return pd.DataFrame(table)


def _resolve_columns(df: pd.DataFrame, cols):
    """Validates the columns to sum. None means every numeric column."""
    if cols is None:
        return [c for c in df.columns if pd.api.types.is_numeric_dtype(df[c])]

    if isinstance(cols, str):
        cols = [cols]
    cols = list(cols)

    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise KeyError(f"Columns not found in table: {missing}")

    non_numeric = [c for c in cols if not pd.api.types.is_numeric_dtype(df[c])]
    if non_numeric:
        raise TypeError(f"Columns are not numeric and cannot be summed: {non_numeric}")
    return cols


def add_row_totals(table, cols=None, label="Total") -> pd.DataFrame:
    """Adds a `label` column holding the sum of `cols` for each row."""
    df = _as_frame(table)
    cols = _resolve_columns(df, cols)
    if label in df.columns:
        raise ValueError(f"Table already has a column named {label!r}")

    df[label] = df[cols].sum(axis=1)
    return df


def add_col_totals(table, cols=None, label="Total", label_col=None) -> pd.DataFrame:
    """
    Appends a row (indexed `label`) with the column sums of `cols`.

    The first column that is not summed, or `label_col` if given, carries the text
    `label`; any other unsummed column is left blank.
    """
    df = _as_frame(table)
    cols = _resolve_columns(df, cols)

    if label_col is not None and label_col not in df.columns:
        raise KeyError(f"Label column not found in table: {label_col!r}")
    if label_col is not None and label_col in cols:
        raise ValueError(f"Label column {label_col!r} is also a summed column")

    totals = {c: "" for c in df.columns}
    for c in cols:
        totals[c] = df[c].sum()

    if label_col is None:
        label_col = next((c for c in df.columns if c not in cols), None)
    if label_col is not None:
        totals[label_col] = label

    logger.debug(f"Column totals over {len(df)} rows for {cols}")
    total_row = pd.DataFrame([totals], columns=df.columns, index=[label])
    return pd.concat([df, total_row])


def add_totals(table, cols=None, label="Total") -> pd.DataFrame:
    """Row totals and column totals; the bottom-right cell is the grand total."""
    df = _as_frame(table)
    cols = _resolve_columns(df, cols)

    df = add_row_totals(df, cols, label=label)
    return add_col_totals(df, cols + [label], label=label)
