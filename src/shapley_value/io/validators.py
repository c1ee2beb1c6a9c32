from __future__ import annotations

import pandas as pd


def validate_agent_table(df: pd.DataFrame, contribution_column: str = "contribution") -> None:
    if contribution_column not in df.columns:
        msg = f"Agent table must contain '{contribution_column}' column."
        raise ValueError(msg)

    column = df[contribution_column]
    if column.isna().any():
        rows = [int(i) for i in df.index[column.isna()]]
        msg = f"Missing '{contribution_column}' values in rows {rows}"
        raise ValueError(msg)
    if not pd.api.types.is_numeric_dtype(column):
        msg = f"Column '{contribution_column}' must be numeric."
        raise ValueError(msg)
