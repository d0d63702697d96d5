"""
Session Module - Holds the current game for each player at a screen.

A session represents one browser tab or terminal:
- Created when the page (or CLI) starts a game
- Holds the current immutable GameState
- Replaces it wholesale on every accepted action

Sessions are in-memory only. Nothing survives a restart.
"""

from .manager import SessionManager, Session

__all__ = [
    "SessionManager",
    "Session",
]
