from __future__ import annotations

from typing import Any, Iterable, List, Mapping

import pandas as pd

from .agent import Agent


def build_agents_from_table(
    df: pd.DataFrame,
    name_column: str = "name",
    contribution_column: str = "contribution",
) -> List[Agent]:
    """Create one agent per table row, in row order.

    Rows without a name (or tables without ``name_column``) are named after
    their position.
    """
    agents: list[Agent] = []
    has_name = name_column in df.columns

    for pos, (_, row) in enumerate(df.iterrows()):
        name = None
        if has_name and not pd.isna(row[name_column]):
            name = str(row[name_column])
        if name is None:
            name = str(pos)
        agents.append(Agent(contribution=float(row[contribution_column]), name=name))

    return agents


def build_agents_from_records(records: Iterable[Mapping[str, Any]]) -> List[Agent]:
    agents: list[Agent] = []
    for pos, record in enumerate(records):
        if not isinstance(record, Mapping):
            msg = f"Agent entry {pos} must be a mapping, got {type(record).__name__}."
            raise ValueError(msg)
        if "contribution" not in record:
            msg = f"Agent entry {pos} is missing 'contribution'."
            raise ValueError(msg)
        name = record.get("name")
        agents.append(
            Agent(
                contribution=float(record["contribution"]),
                name=str(name) if name is not None else str(pos),
            )
        )
    return agents
