"""Players taking part in a match and their starting positions."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]

RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
WHITE: Color = (255, 255, 255)


@dataclass
class Player:
    """A player on the arena grid."""

    row: int
    column: int
    color: Color
    hp: int = 100
    mp: int = 10
    ap: int = 25
    character_class: str = "undef"
    name: str = ""


def starting_players(count: int) -> list[Player]:
    """Return the initial players for a match of two, three or four players."""
    if count == 2:
        return [
            Player(1, 5, RED, 100, 10, 25, "classe", "J1"),
            Player(10, 5, GREEN, 100, 10, 25, "classe", "J2"),
        ]
    if count == 3:
        return [
            Player(1, 5, RED, 100, 25, 10, "undef", "J1"),
            Player(10, 5, GREEN, 100, 10, 25, "undef", "J2"),
            Player(5, 1, BLUE, 100, 10, 25, "undef", "J3"),
        ]
    if count == 4:
        return [
            Player(1, 5, RED, 100, 10, 25, "undef", "J1"),
            Player(10, 5, GREEN, 100, 10, 25, "undef", "J2"),
            Player(5, 1, BLUE, 100, 10, 25, "undef", "J3"),
            Player(5, 10, WHITE, 100, 10, 25, "undef", "J4"),
        ]
    raise ValueError(f"a match holds 2 to 4 players, not {count}")