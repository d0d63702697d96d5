"""
Tictac - Tic-tac-toe with a time-travel move history.

A small, deterministic engine for two-player tic-tac-toe. It provides:
- Immutable game state with a full board history
- Pure move and jump transitions
- Win detection over the eight fixed lines
- A web page, JSON API and terminal CLI on top of the engine
"""

__version__ = "0.1.0"
