"""
Game State - Immutable board history for one game.

Design principles:
- Immutable: every transition returns a new GameState
- History-first: the board on screen is history[step_number]
- Turn derived from step parity, never stored separately
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional


BOARD_SIZE = 9


class Mark(Enum):
    """The two marks a cell can hold. An empty cell is None."""
    X = "X"
    O = "O"

    def opposite(self) -> Mark:
        """Get the other player's mark."""
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


Cell = Optional[Mark]
Board = tuple[Cell, ...]


def empty_board() -> Board:
    """A board with all nine cells empty."""
    return (None,) * BOARD_SIZE


def parse_board(cells: Iterable[str | Mark | None]) -> Board:
    """
    Build a board from "X"/"O"/None values (or Marks).

    Blank strings and "." are read as empty cells, which keeps test
    fixtures readable.
    """
    board = []
    for cell in cells:
        if cell is None or cell in ("", " ", "."):
            board.append(None)
        elif isinstance(cell, Mark):
            board.append(cell)
        else:
            board.append(Mark(cell))
    return tuple(board)


@dataclass(frozen=True)
class HistoryEntry:
    """A snapshot of the board after one ply (or the empty start board)."""
    squares: Board = field(default_factory=empty_board)

    def __post_init__(self):
        if len(self.squares) != BOARD_SIZE:
            raise ValueError(
                f"A board has {BOARD_SIZE} cells, got {len(self.squares)}"
            )

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.squares)

    def empty_cells(self) -> tuple[int, ...]:
        return tuple(i for i, cell in enumerate(self.squares) if cell is None)


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    history[0] is always the empty board; each later entry adds exactly
    one mark, X first and alternating. step_number selects the snapshot
    currently shown, and may point behind the last entry after a jump.
    """
    history: tuple[HistoryEntry, ...] = field(
        default_factory=lambda: (HistoryEntry(),)
    )
    step_number: int = 0

    def __post_init__(self):
        object.__setattr__(self, "history", tuple(self.history))
        if not self.history:
            raise ValueError("History must contain the starting board")
        if any(cell is not None for cell in self.history[0].squares):
            raise ValueError("history[0] must be the empty board")
        if not 0 <= self.step_number < len(self.history):
            raise ValueError(
                f"step_number {self.step_number} is outside history "
                f"of length {len(self.history)}"
            )

    @property
    def x_is_next(self) -> bool:
        return self.step_number % 2 == 0

    @property
    def next_mark(self) -> Mark:
        return Mark.X if self.x_is_next else Mark.O

    @property
    def current(self) -> HistoryEntry:
        """The snapshot at step_number."""
        return self.history[self.step_number]

    @property
    def squares(self) -> Board:
        return self.current.squares

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            history=kwargs.get("history", self.history),
            step_number=kwargs.get("step_number", self.step_number),
        )

    def to_dict(self) -> dict:
        return {
            "history": [
                [cell.value if cell else None for cell in entry.squares]
                for entry in self.history
            ],
            "step_number": self.step_number,
            "x_is_next": self.x_is_next,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GameState:
        return cls(
            history=tuple(HistoryEntry(parse_board(b)) for b in data["history"]),
            step_number=data["step_number"],
        )


def initial_state() -> GameState:
    """The state a new game starts in: one empty board, X to move."""
    return GameState(history=(HistoryEntry(empty_board()),), step_number=0)
