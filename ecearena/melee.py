"""Close-combat attacks between neighbouring characters."""

from __future__ import annotations

from typing import Any


class OutOfRangeError(Exception):
    """Raised when a melee attack targets a character that is not adjacent."""


def are_adjacent(a: Any, b: Any) -> bool:
    """True when the two characters stand on neighbouring cells."""
    return abs(a.x - b.x) + abs(a.y - b.y) == 1


def melee_attack(attacker: Any, target: Any) -> int:
    """Hit an adjacent target with the attacker's melee power and return its remaining hp."""
    if not are_adjacent(attacker, target):
        raise OutOfRangeError("Pas à portée !")
    target.hp -= attacker.melee_power
    return target.hp