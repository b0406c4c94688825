"""A match: turn rotation, eliminations and final ranking."""

from __future__ import annotations

import enum
import random
from collections import deque
from typing import Optional

from .movement import MoveController
from .pile import Stack
from .players import Player, starting_players
from .turns import build_turn_queue


class TurnEvent(enum.Enum):
    """What an update of the match did."""

    NONE = "none"
    TIMEOUT = "timeout"
    ELIMINATED = "eliminated"
    FINISHED = "finished"


class Match:
    """Players take turns in a queue; one out of movement points is eliminated."""

    def __init__(self, players: list[Player], queue: deque[Player]) -> None:
        if not queue:
            raise ValueError("a match needs at least one player in the turn queue")
        self.players = players
        self.queue = queue
        self.active = [True] * len(players)
        self.remaining = len(players)
        self._ranking: Stack[Player] = Stack()
        self.mover = MoveController()
        self.current_player = self.queue.popleft()
        self.turn = 1
        self.finished = False

    @property
    def current(self) -> int:
        """Index of the player whose turn it is."""
        return next(i for i, p in enumerate(self.players) if p is self.current_player)

    def click(self, x: int, y: int) -> bool:
        """Forward a mouse press to the movement of the current player."""
        return self.mover.click(x, y, self.players, self.current)

    def update(self, timer_expired: bool) -> TurnEvent:
        """Advance the match by one frame; the caller restarts its timer on any event."""
        if self.finished:
            raise RuntimeError("the match is over")
        index = self.current
        if self.current_player.mp == 0 and self.active[index]:
            self._ranking.push(self.current_player)
            self.active[index] = False
            self.remaining -= 1
            if self.remaining == 1:
                winner = self.active.index(True)
                self._ranking.push(self.players[winner])
                self.active[winner] = False
                self.finished = True
                return TurnEvent.FINISHED
            self.current_player = self.queue.popleft()
            return TurnEvent.ELIMINATED
        if timer_expired:
            if self.active[index] and self.current_player.mp > 0:
                self.queue.append(self.current_player)
            self.current_player = self.queue.popleft()
            self.turn += 1
            return TurnEvent.TIMEOUT
        return TurnEvent.NONE

    def ranking(self) -> list[Player]:
        """Players from best to worst: the last one standing first."""
        return list(self._ranking)


def new_match(count: int, rng: Optional[random.Random] = None) -> Match:
    """Start a match of two to four players with a random turn order."""
    players = starting_players(count)
    return Match(players, build_turn_queue(players, rng))