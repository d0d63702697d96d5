"""
Tictac CLI - Command-line interface for the engine.

Usage:
    tictac play                      Play in the terminal
    tictac replay 0 4 1 3 2          Apply moves and print the result
    tictac replay 4 j0 0             Move, jump to the start, move again
    tictac serve                     Serve the web page
"""

import argparse
import logging
import sys

from .config import get_settings
from .engine_core import (
    Action,
    GameState,
    Reducer,
    initial_state,
    move_list,
    status_text,
    winning_line,
)

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Tic-tac-toe with a time-travel move history",
        prog="tictac",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    subparsers.add_parser("play", help="Play in the terminal")

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Apply a list of moves")
    replay_parser.add_argument(
        "moves",
        nargs="+",
        help="Cell indices 0-8, or 'jN' to jump to step N",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Serve the web page")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "replay":
        return cmd_replay(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def render_board(state: GameState) -> str:
    """Draw the current board; empty cells show their index."""
    cells = [
        str(i) if cell is None else cell.value
        for i, cell in enumerate(state.squares)
    ]
    rows = [" | ".join(cells[i:i + 3]) for i in range(0, 9, 3)]
    return "\n---------\n".join(rows)


def render_moves(state: GameState) -> str:
    return "\n".join(f"{move}. {desc}" for move, desc in move_list(state))


def parse_token(token: str) -> Action:
    """
    Turn one replay token into an action.

    "4" places a mark on cell 4, "j2" jumps to step 2.
    """
    if token.lower().startswith("j"):
        return Action.jump(int(token[1:]))
    return Action.place(int(token))


def cmd_replay(args):
    """Apply moves and print the final board."""
    reducer = Reducer()
    state = initial_state()

    for token in args.moves:
        try:
            action = parse_token(token)
        except ValueError:
            print(f"Error: not a move: {token}")
            sys.exit(1)

        result = reducer.apply(state, action)
        if not result.success:
            print(render_board(state))
            print(f"\nError: {result.error} ({result.error_code.value})")
            sys.exit(1)
        state = result.new_state

    print(render_board(state))
    print(f"\n{status_text(state)}")
    line = winning_line(state.squares)
    if line:
        print("Winning line: " + "-".join(str(i) for i in line))
    print(render_moves(state))
    return 0


def cmd_play(args, input_fn=input):
    """Interactive game in the terminal."""
    reducer = Reducer()
    state = initial_state()

    print("Cells are numbered 0-8, row by row.")
    print("Commands: <cell>, jump <step>, moves, new, quit\n")

    while True:
        print(render_board(state))
        print(f"\n{status_text(state)}")

        try:
            command = input_fn("> ").strip().lower()
        except EOFError:
            break

        if command in ("q", "quit", "exit"):
            break
        if command == "new":
            state = initial_state()
            continue
        if command == "moves":
            print(render_moves(state))
            continue

        parts = command.split()
        try:
            if len(parts) == 2 and parts[0] == "jump":
                action = Action.jump(int(parts[1]))
            elif len(parts) == 1:
                action = Action.place(int(parts[0]))
            else:
                raise ValueError(command)
        except ValueError:
            print(f"Unknown command: {command}")
            continue

        result = reducer.apply(state, action)
        if result.success:
            state = result.new_state
            for change in result.state_changes:
                logger.debug(change)
        else:
            print(f"Illegal: {result.error}")

    return 0


def cmd_serve(args):
    """Serve the web page with uvicorn."""
    import uvicorn

    print(f"Serving on http://{args.host}:{args.port}/")
    uvicorn.run(
        "tictac.api.app:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
