#!/usr/bin/env python3
"""Play move-selection strategies against each other and report win rates."""

import argparse
import itertools
import logging
from functools import partial
from pathlib import Path
from typing import Dict, List, Tuple

import yaml
from tqdm.auto import tqdm

from othello.evaluation import EvaluationResult, evaluate_strategies
from othello.selector import Strategy


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        return {}
    cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a mapping.")
    return cfg


def build_pairings(black: List[str], white: List[str]) -> List[Tuple[Strategy, Strategy]]:
    blacks = [Strategy.parse(name) for name in black]
    whites = [Strategy.parse(name) for name in white]
    return list(itertools.product(blacks, whites))


def format_result(result: EvaluationResult) -> str:
    return (
        f"{result.black_strategy.value:>7} vs {result.white_strategy.value:<7} | "
        f"black {result.winrate_black():6.1%}  white {result.winrate_white():6.1%}  "
        f"draws {result.draws:3d} | avg plies {result.average_length:5.1f} | "
        f"avg discs {result.average_black_discs:4.1f}-{result.average_white_discs:4.1f}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate Othello strategies head to head.")
    parser.add_argument("--config", type=str, default="configs/evaluate.yaml")
    parser.add_argument("--black", nargs="+", help="Strategies playing Black")
    parser.add_argument("--white", nargs="+", help="Strategies playing White")
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    cfg = load_yaml_config(args.config)
    all_strategies = [s.value for s in Strategy]
    black = args.black or cfg.get("black", all_strategies)
    white = args.white or cfg.get("white", all_strategies)
    episodes = args.episodes if args.episodes is not None else int(cfg.get("episodes", 50))
    seed = args.seed if args.seed is not None else cfg.get("seed")
    if episodes <= 0:
        raise ValueError("episodes must be positive.")

    for black_strategy, white_strategy in build_pairings(black, white):
        desc = f"{black_strategy.value} vs {white_strategy.value}"
        result = evaluate_strategies(
            black_strategy,
            white_strategy,
            episodes=episodes,
            seed=seed,
            progress=partial(tqdm, total=episodes, desc=desc, leave=False),
        )
        print(format_result(result))


if __name__ == "__main__":
    main()
