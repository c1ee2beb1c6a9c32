from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import matplotlib

from .aggregation.run_manager import run_from_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapley-value",
        description="Compute exact Shapley values of a cooperative game described in a configuration file.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Subcommand (optional, currently only 'compute').",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        required=True,
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--log-config",
        type=Path,
        default=None,
        help="YAML logging configuration (overrides logging.config of the run configuration).",
    )
    parser.add_argument(
        "--print",
        dest="print_table",
        action="store_true",
        help="Also print the Shapley table to standard output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command not in (None, "compute"):
        parser.error(f"Unknown command: {args.command}")

    # Plots are only written to files.
    matplotlib.use("Agg")
    result = run_from_config(args.config, log_config=args.log_config)
    if args.print_table:
        print(result.to_string(index=False))


if __name__ == "__main__":
    main()
