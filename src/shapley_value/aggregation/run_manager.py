from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Sequence

import pandas as pd

from ..config_loader import get_section, load_config
from ..games import build_worth
from ..indices.shapley import compute_shapley
from ..io.readers import read_agent_table
from ..io.validators import validate_agent_table
from ..io.writers import write_table
from ..model.agent import Agent
from ..model.transforms import build_agents_from_records, build_agents_from_table
from ..utils.logging_utils import configure_logging, get_logger
from .axioms import check_axioms
from .visualization import plot_shapley_values

logger = get_logger(__name__)

DEFAULT_MAX_AGENTS = 8


def shapley_table(
    values: Mapping[Agent, float],
    agents: Sequence[Agent],
    tol: float = 1e-9,
) -> pd.DataFrame:
    """One row per agent, in input order, with a dense rank (1 = largest value).

    Values within ``tol`` of their neighbour in descending order share a rank.
    """
    df = pd.DataFrame(
        {
            "agent": [str(a) for a in agents],
            "contribution": [a.contribution for a in agents],
            "shapley": [float(values[a]) for a in agents],
        }
    )
    if df.empty:
        df["shapley_rank"] = pd.Series(dtype="int64")
        return df

    ordered = df["shapley"].sort_values(ascending=False, kind="mergesort")
    new_level = ordered.diff().abs().gt(tol)
    df["shapley_rank"] = (new_level.cumsum() + 1).reindex(df.index).astype("int64")
    return df


def load_agents(cfg: Mapping[str, Any]) -> List[Agent]:
    input_cfg = get_section(cfg, "input")
    inline = cfg.get("agents")

    if inline is not None and input_cfg.get("path") is not None:
        msg = "Specify either 'agents' or 'input.path', not both."
        raise ValueError(msg)

    if inline is not None:
        if not isinstance(inline, list):
            msg = "'agents' must be a list of mappings."
            raise ValueError(msg)
        return build_agents_from_records(inline)

    if input_cfg.get("path") is None:
        msg = "No agents configured: set 'agents' or 'input.path'."
        raise ValueError(msg)

    contribution_col = input_cfg.get("contribution_column", "contribution")
    df = read_agent_table(input_cfg["path"], fmt=input_cfg.get("format"))
    validate_agent_table(df, contribution_column=contribution_col)
    return build_agents_from_table(
        df,
        name_column=input_cfg.get("name_column", "name"),
        contribution_column=contribution_col,
    )


def run_from_config(config_path: Path, log_config: Path | None = None) -> pd.DataFrame:
    cfg = load_config(config_path)
    game_cfg = get_section(cfg, "game")
    limits_cfg = get_section(cfg, "limits")
    axioms_cfg = get_section(cfg, "axioms")
    output_cfg = get_section(cfg, "output")
    viz_cfg = get_section(cfg, "visualization")
    logging_cfg = get_section(cfg, "logging")

    if log_config is None and logging_cfg.get("config") is not None:
        log_config = Path(str(logging_cfg["config"]))
    configure_logging(log_config)

    if "kind" not in game_cfg:
        msg = "Configuration must set 'game.kind'."
        raise ValueError(msg)

    agents = load_agents(cfg)
    max_agents = int(limits_cfg.get("max_agents", DEFAULT_MAX_AGENTS))
    if len(agents) > max_agents:
        msg = (
            f"{len(agents)} agents exceed limits.max_agents={max_agents}; "
            "exact enumeration needs n! orderings."
        )
        raise ValueError(msg)

    params = {k: v for k, v in game_cfg.items() if k != "kind"}
    worth = build_worth(str(game_cfg["kind"]), agents, **params)

    logger.info("Computing Shapley values for %d agents (%s game)", len(agents), game_cfg["kind"])
    values = compute_shapley(agents, worth)
    tol = float(axioms_cfg.get("tolerance", 1e-9))
    result_df = shapley_table(values, agents, tol=tol)

    fmt = str(output_cfg.get("format", "csv"))
    raw_out_path = output_cfg.get("path")
    if raw_out_path is None:
        base_dir = Path("outputs") / config_path.stem
    else:
        base_dir = Path(str(raw_out_path))
    base_dir.mkdir(parents=True, exist_ok=True)

    if result_df.empty:
        logger.warning("No agent-level results produced.")
    else:
        values_path = base_dir / f"shapley.{fmt}"
        write_table(result_df, values_path, fmt=fmt)
        logger.info("Wrote Shapley table to %s", values_path)

    if axioms_cfg.get("enabled", True) and agents:
        results = check_axioms(values, worth, agents, tol=tol)
        for r in results:
            if not r.satisfied:
                logger.warning("Axiom %s not satisfied: %s", r.name, r.detail)
        axioms_df = pd.DataFrame(
            [{"axiom": r.name, "satisfied": r.satisfied, "detail": r.detail} for r in results]
        )
        axioms_path = base_dir / "axioms.csv"
        write_table(axioms_df, axioms_path, fmt="csv")
        logger.info("Wrote %s", axioms_path)

    if viz_cfg.get("enabled", True) and not result_df.empty:
        try:
            plot_shapley_values(result_df, base_dir)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Visualization failed: %s", exc)

    return result_df
