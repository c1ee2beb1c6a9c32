from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from shapley_value.cli import main


def test_cli_compute_inline_agents(tmp_path: Path, capsys) -> None:  # type: ignore[no-untyped-def]
    cfg = tmp_path / "config.yaml"
    out_dir = tmp_path / "out"

    cfg.write_text(
        f"""
game:
  kind: bandwidth
  capacity: 200
agents:
  - {{name: a, contribution: 100}}
  - {{name: b, contribution: 200}}
  - {{name: c, contribution: 300}}
output:
  path: {out_dir}
  format: csv
visualization:
  enabled: false
""",
        encoding="utf-8",
    )

    main(["compute", "--config", str(cfg), "--print"])

    table = pd.read_csv(out_dir / "shapley.csv")
    assert list(table["agent"]) == ["a", "b", "c"]
    assert table["shapley"].tolist() == pytest.approx([100 / 3, 250 / 3, 250 / 3])
    assert list(table["shapley_rank"]) == [2, 1, 1]

    axioms = pd.read_csv(out_dir / "axioms.csv")
    assert axioms["satisfied"].all()

    assert "shapley" in capsys.readouterr().out


def test_cli_compute_from_table(tmp_path: Path) -> None:
    data = tmp_path / "fares.csv"
    data.write_text("passenger,fare\nx,6\ny,12\nz,42\n", encoding="utf-8")
    cfg = tmp_path / "taxi.yaml"
    out_dir = tmp_path / "taxi_out"
    cfg.write_text(
        f"""
game:
  kind: taxi
input:
  path: {data}
  name_column: passenger
  contribution_column: fare
output:
  path: {out_dir}
""",
        encoding="utf-8",
    )

    main(["--config", str(cfg)])

    table = pd.read_csv(out_dir / "shapley.csv")
    assert table["shapley"].tolist() == [2.0, 5.0, 35.0]
    assert (out_dir / "shapley_values.png").exists()


def test_cli_rejects_too_many_agents(tmp_path: Path) -> None:
    cfg = tmp_path / "big.yaml"
    agents = "\n".join(f"  - {{contribution: {i}}}" for i in range(4))
    cfg.write_text(
        f"game:\n  kind: taxi\nlimits:\n  max_agents: 3\nagents:\n{agents}\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="max_agents=3"):
        main(["--config", str(cfg)])


def test_cli_unknown_command(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("game:\n  kind: taxi\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["explain", "--config", str(cfg)])
