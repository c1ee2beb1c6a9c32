from __future__ import annotations

from pathlib import Path

import pandas as pd


def read_agent_table(path: str | Path, fmt: str | None = None) -> pd.DataFrame:
    p = Path(path)
    if fmt is None:
        fmt = p.suffix.lstrip(".").lower()

    if fmt == "csv":
        df = pd.read_csv(p)
    elif fmt in {"parquet", "pq"}:
        df = pd.read_parquet(p)
    else:
        msg = f"Unsupported format: {fmt}"
        raise ValueError(msg)

    return df
