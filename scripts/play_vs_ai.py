#!/usr/bin/env python3
"""Play Othello in the console, against a friend or the computer, with optional logging & replay."""

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional

from othello import GameMode, GameSession, SessionConfig, Strategy
from othello.core import (
    BOARD_SIZE,
    Cell,
    GameState,
    Position,
    initialize_game_state,
    submit_move,
    winner,
)

COLUMN_LABELS = "abcdefgh"
_ALGEBRAIC = re.compile(r"^([a-z])\s*(\d+)$")
_NUMERIC = re.compile(r"^(-?\d+)\s*[, ]\s*(-?\d+)$")


def format_board(state: GameState, *, show_moves: bool = True) -> str:
    symbols = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}
    legal = set(state.legal_moves) if show_moves else set()
    lines = ["  " + " ".join(COLUMN_LABELS)]
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            if Position(r, c) in legal:
                cells.append("*")
            else:
                cells.append(symbols[Cell(int(state.board[r, c]))])
        lines.append(f"{r + 1} " + " ".join(cells))
    return "\n".join(lines)


def parse_move(raw: str) -> Optional[Position]:
    """Parse ``d3`` (column letter, 1-based row) or ``row,col`` (0-based)."""
    text = raw.strip().lower()
    match = _ALGEBRAIC.match(text)
    if match:
        col = ord(match.group(1)) - ord("a")
        return Position(int(match.group(2)) - 1, col)
    match = _NUMERIC.match(text)
    if match:
        return Position(int(match.group(1)), int(match.group(2)))
    return None


def format_position(pos: Position) -> str:
    if 0 <= pos.col < BOARD_SIZE:
        return f"{COLUMN_LABELS[pos.col]}{pos.row + 1}"
    return str(pos)


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    state = initialize_game_state()
    if verbose:
        print("Replaying logged game.")
        print(format_board(state))
    for entry in moves:
        pos = Position(int(entry["row"]), int(entry["col"]))
        result = submit_move(state, pos)
        if not result.accepted:
            raise ValueError(f"Logged move {entry.get('move_index')} at {pos} is not legal.")
        state = result.state
        if verbose:
            actor = entry.get("actor", "unknown")
            print(f"{actor} ({entry.get('player', '?')}) plays {format_position(pos)}")
            print(format_board(state))
    outcome = winner(state)
    summary = {
        "result": state.status.value,
        "winner": outcome.value if outcome is not None else None,
        "moves": len(moves),
        "black": state.black_count,
        "white": state.white_count,
        "board": state.board.tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']} (black {state.black_count}, white {state.white_count})")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    config = SessionConfig(
        mode=GameMode.parse(args.mode),
        strategy=Strategy.parse(args.strategy),
        think_delay_sec=args.think_delay,
        seed=args.seed,
    )
    session = GameSession(config)
    log_records: List[Dict] = []

    if config.mode == GameMode.HUMAN_VS_AUTOMATED:
        print(f"You play Black. AI strategy: {config.strategy.value} ({config.strategy.description}).")

    while not session.state.is_terminal:
        state = session.state
        print()
        print(format_board(state))
        print(f"Black: {state.black_count}  White: {state.white_count}  |  {session.status_text()}")

        if session.automated_to_move():
            print("AI is thinking...")
            result = session.play_automated()
            actor = "ai"
        else:
            raw = input("Move (e.g. d3), u = undo, r = reset, q = quit: ").strip()
            if raw.lower() in {"q", "quit", "exit"}:
                print("Leaving the game.")
                sys.exit(0)
            if raw.lower() in {"u", "undo"}:
                if session.undo():
                    log_records.pop()
                else:
                    print("Nothing to undo.")
                continue
            if raw.lower() in {"r", "reset"}:
                session.reset()
                log_records.clear()
                continue
            pos = parse_move(raw)
            if pos is None:
                print("Could not read that move.")
                continue
            result = session.play(pos)
            actor = "human"

        if not result.accepted:
            print("Illegal move, try again.")
            continue

        pos = result.position
        if actor == "ai":
            print(f"AI plays {format_position(pos)}")
        if result.skipped is not None:
            print(f"{result.skipped.label} has no legal move and passes.")
        log_records.append(
            {
                "move_index": len(log_records),
                "actor": actor,
                "player": state.player_to_move.name.lower(),
                "row": pos.row,
                "col": pos.col,
            }
        )

    print("\nFinal board:")
    print(format_board(session.state, show_moves=False))
    print(f"Black: {session.state.black_count}  White: {session.state.white_count}")
    print(session.status_text())

    if args.log_file:
        outcome = session.winner()
        metadata = {
            "mode": config.mode.value,
            "strategy": config.strategy.value,
            "seed": args.seed,
            "result": session.state.status.value,
            "winner": outcome.value if outcome is not None else None,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Othello in the console.")
    parser.add_argument("--mode", choices=["hvh", "hva"], default="hva")
    parser.add_argument("--strategy", choices=[s.value for s in Strategy], default=Strategy.GREEDY.value)
    parser.add_argument("--think-delay", type=float, default=0.8)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
