from __future__ import annotations

import importlib
from pathlib import Path

import matplotlib
import pytest

from shapley_value.aggregation import visualization
from shapley_value.aggregation.axioms import check_symmetry
from shapley_value.aggregation.run_manager import load_agents, shapley_table
from shapley_value.cli import main
from shapley_value.indices.shapley import compute_shapley
from shapley_value.model.agent import Agent
from shapley_value.model.group import Group


def test_shapley_table_ranks_near_equal_values_together() -> None:
    a, b, c, d = (Agent(x, n) for x, n in ((0.1, "a"), (0.1, "b"), (0.7, "c"), (0.3, "d")))
    values = {a: 0.0825, b: 0.08250000000000005, c: 0.6, d: 0.3}

    df = shapley_table(values, [a, b, c, d])
    assert list(df["shapley_rank"]) == [3, 3, 1, 2]

    strict = shapley_table(values, [a, b, c, d], tol=0.0)
    assert list(strict["shapley_rank"]) == [4, 3, 1, 2]


def test_shapley_table_symmetric_agents_share_rank() -> None:
    agents = [Agent(0.1, "a"), Agent(0.1, "b"), Agent(0.7, "c"), Agent(0.3, "d")]

    def capped(group: Group) -> float:
        return min(sum(m.contribution for m in group), 1.1) * 1.1

    phi = compute_shapley(agents, capped)
    assert check_symmetry(phi, capped, agents).satisfied

    df = shapley_table(phi, agents)
    assert df.loc[0, "shapley_rank"] == df.loc[1, "shapley_rank"]
    assert df["shapley_rank"].min() == 1


def test_shapley_table_empty() -> None:
    df = shapley_table({}, [])
    assert df.empty
    assert list(df.columns) == ["agent", "contribution", "shapley", "shapley_rank"]


def test_load_agents_rejects_non_mapping_entry() -> None:
    with pytest.raises(ValueError, match="entry 1 must be a mapping"):
        load_agents({"agents": [{"contribution": 1}, 5]})


def test_cli_rejects_unknown_game_parameter(tmp_path: Path) -> None:
    cfg = tmp_path / "taxi.yaml"
    cfg.write_text(
        "game:\n  kind: taxi\n  capacity: 10\nagents:\n  - {contribution: 1}\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="capacity"):
        main(["compute", "--config", str(cfg)])


def test_visualization_import_keeps_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple] = []
    monkeypatch.setattr(matplotlib, "use", lambda *args, **kwargs: calls.append(args))

    importlib.reload(visualization)
    assert calls == []
