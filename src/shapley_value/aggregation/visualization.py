from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd


def plot_shapley_values(df: pd.DataFrame, out_dir: Path, title_prefix: str = "") -> Path | None:
    out_dir.mkdir(parents=True, exist_ok=True)
    if "agent" not in df.columns or "shapley" not in df.columns:
        return None

    agents = df["agent"].astype(str)
    values = df["shapley"]

    plt.figure(figsize=(8, 4))
    plt.bar(agents, values)
    # 比較用に intrinsic contribution を点で重ねる
    if "contribution" in df.columns:
        plt.scatter(agents, df["contribution"], color="black", marker="_", s=200, label="contribution")
        plt.legend()
    plt.xlabel("agent")
    plt.ylabel("Shapley value")
    plt.title(f"{title_prefix}shapley")
    plt.tight_layout()

    path = out_dir / "shapley_values.png"
    plt.savefig(path)
    plt.close()
    return path
