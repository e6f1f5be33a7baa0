"""Command-line harness for the connection graph and the connect game."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Callable

from loguru import logger

from lovegraph.errors import LoveGraphError
from lovegraph.game import (
    GAME_MODES,
    GameConfig,
    GameSession,
    format_elapsed,
    generate_puzzle,
    get_mode,
    load_config,
    puzzle_for,
)
from lovegraph.network import ConnectionGraph, components, shortest_path
from lovegraph.snapshot import load_snapshot

HINT_COMMAND = "?"
QUIT_COMMANDS = {"q", "quit", "exit"}
DEFAULT_MODE = "classic"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lovegraph",
        description="Explore accepted connections and play the connect game",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    path = sub.add_parser("path", help="Shortest chain between two people")
    path.add_argument("snapshot", type=Path, help="Snapshot JSON file")
    path.add_argument("start")
    path.add_argument("target")

    puzzle = sub.add_parser("puzzle", help="Generate a start/target pair")
    puzzle.add_argument("snapshot", type=Path, help="Snapshot JSON file")
    _add_game_options(puzzle)

    play = sub.add_parser("play", help="Play the connect game in the terminal")
    play.add_argument("snapshot", type=Path, help="Snapshot JSON file")
    _add_game_options(play)
    play.add_argument("--from", dest="start", default=None, help="Fixed start person")
    play.add_argument("--to", dest="target", default=None, help="Fixed target person")

    stats = sub.add_parser("stats", help="Summarize the connection network")
    stats.add_argument("snapshot", type=Path, help="Snapshot JSON file")
    stats.add_argument("--top", type=int, default=5, help="How many hubs to list")

    return parser


def _add_game_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--mode", choices=sorted(GAME_MODES), default=None,
        help="Game mode (default: classic; with --config, the base the file overrides)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Game config JSON")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible puzzles")


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _game_config(args: argparse.Namespace) -> GameConfig:
    if args.config is not None:
        return load_config(args.config, mode=args.mode)
    return get_mode(args.mode or DEFAULT_MODE)


def _rng(args: argparse.Namespace) -> random.Random | None:
    return random.Random(args.seed) if args.seed is not None else None


def _resolve_or_fail(graph: ConnectionGraph, name: str) -> str:
    resolved = graph.resolve(name)
    if resolved is None:
        raise LoveGraphError(f"'{name}' has no accepted connections")
    return resolved


# ── Commands ──────────────────────────────────────────────


def cmd_path(args: argparse.Namespace, out: Callable[[str], None]) -> int:
    graph = load_snapshot(args.snapshot).build_graph()
    start = _resolve_or_fail(graph, args.start)
    target = _resolve_or_fail(graph, args.target)

    path = shortest_path(graph, start, target)
    if path is None:
        out(f"No chain connects {start} and {target}.")
        return 1
    out(" -> ".join(path))
    out(f"({len(path) - 1} links)")
    return 0


def cmd_puzzle(args: argparse.Namespace, out: Callable[[str], None]) -> int:
    graph = load_snapshot(args.snapshot).build_graph()
    config = _game_config(args)
    puzzle = generate_puzzle(graph, config.puzzle, rng=_rng(args))

    out(f"Connect {puzzle.start} to {puzzle.target}")
    if puzzle.path_len is not None:
        out(f"Shortest chain: {puzzle.path_len} people")
    if puzzle.degraded:
        out("Warning: no pair fit the difficulty window, using a fallback pair.")
    return 0


def cmd_stats(args: argparse.Namespace, out: Callable[[str], None]) -> int:
    graph = load_snapshot(args.snapshot).build_graph()
    parts = components(graph)

    out(f"People: {len(graph)}")
    out(f"Connections: {len(graph.edges)}")
    out(f"Groups: {len(parts)}" + (f" (largest: {len(parts[0])})" if parts else ""))

    hubs = sorted(graph.people, key=lambda name: (-graph.degree(name), name))
    for name in hubs[: max(0, args.top)]:
        out(f"  {name}: {graph.degree(name)}")
    return 0


def cmd_play(
    args: argparse.Namespace,
    out: Callable[[str], None],
    read: Callable[[str], str] | None = None,
) -> int:
    graph = load_snapshot(args.snapshot).build_graph()
    session = GameSession(graph, _game_config(args), rng=_rng(args))

    if args.start or args.target:
        if not (args.start and args.target):
            raise LoveGraphError("--from and --to must be given together")
        fixed = puzzle_for(
            graph,
            _resolve_or_fail(graph, args.start),
            _resolve_or_fail(graph, args.target),
        )
        session.start(fixed)
    else:
        session.start()

    return run_game(session, out, read)


def run_game(
    session: GameSession,
    out: Callable[[str], None],
    read: Callable[[str], str] | None = None,
) -> int:
    """Drive a started session from line input until it ends or the player quits."""
    read = read or input
    out(f"Connect {session.start_person} to {session.target_person}.")
    out(f"Name people one at a time ('{HINT_COMMAND}' for a hint, 'q' to quit).")

    while not session.is_over:
        try:
            line = read(f"[{session.attempts}/{session.max_attempts}] > ").strip()
        except EOFError:
            line = "q"

        if line.lower() in QUIT_COMMANDS:
            out("Game abandoned.")
            return 1
        if line == HINT_COMMAND:
            hint = session.hint()
            out(hint.message if hint else "No hints available right now.")
            continue

        result = session.guess(line)
        out(result.message)
        if result.ok:
            linked = sorted(
                name for edge in result.new_connections
                for name in edge if name != result.name
            )
            out(f"  linked to: {', '.join(linked)}")

    elapsed = format_elapsed(session.elapsed_ms)
    if session.score is not None:
        out(f"You connected them in {session.attempts} attempts ({elapsed}). Score: {session.score}")
        return 0
    out(f"Out of attempts after {elapsed}.")
    return 1


_COMMANDS = {
    "path": cmd_path,
    "puzzle": cmd_puzzle,
    "stats": cmd_stats,
    "play": cmd_play,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return _COMMANDS[args.command](args, print)
    except (LoveGraphError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
