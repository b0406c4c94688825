"""Choice of character classes before a match."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any, Callable, Optional

from .players import Player
from .spells import CharacterClass

Loader = Callable[[str], Optional[Any]]

CLASS_BUTTON_X = 550
CLASS_BUTTON_TOP = 120
CLASS_BUTTON_STEP = 80
CLASS_BUTTON_WIDTH = 120
CLASS_BUTTON_HEIGHT = 60

CHOICE_NAMES = {"A": "Savant", "B": "Archer", "C": "Mage", "D": "Maitresse"}

_CHOICE_BOXES = (
    ("A", 50, 50, 390, 290),
    ("B", 50, 310, 390, 550),
    ("C", 410, 50, 750, 290),
    ("D", 410, 310, 750, 550),
)

_CLASS_FILES = (
    ("Mage", "mage.bmp"),
    ("Maîtresse Dragon", "dragon.bmp"),
    ("Technomage", "tech.bmp"),
    ("Archère", "archere.bmp"),
)


def class_at(x: int, y: int, class_count: int) -> Optional[int]:
    """Index of the class button under (x, y), or None."""
    for index in range(class_count):
        top = CLASS_BUTTON_TOP + index * CLASS_BUTTON_STEP
        if (CLASS_BUTTON_X <= x <= CLASS_BUTTON_X + CLASS_BUTTON_WIDTH
                and top <= y <= top + CLASS_BUTTON_HEIGHT):
            return index
    return None


def player_slot_at(x: int, y: int) -> Optional[int]:
    """Index of the player panel under (x, y), or None."""
    if 150 <= y <= 250:
        if 120 <= x <= 300:
            return 0
        if 370 <= x <= 550:
            return 1
    return None


def on_validate(x: int, y: int) -> bool:
    """True when (x, y) is on the validate button."""
    return 300 <= x <= 500 and 500 <= y <= 540


def class_choice_at(x: int, y: int) -> Optional[str]:
    """Letter of the quadrant clicked on the single-player choice screen, or None."""
    for letter, left, top, right, bottom in _CHOICE_BOXES:
        if left <= x <= right and top <= y <= bottom:
            return letter
    return None


def load_classes(loader: Optional[Loader] = None) -> list[CharacterClass]:
    """The four playable classes with their sprites loaded through ``loader``."""
    return [
        CharacterClass(name, sprite=loader(filename) if loader else None)
        for name, filename in _CLASS_FILES
    ]


class SelectionState:
    """Two players each pick a class, then validate."""

    def __init__(self, class_count: int = len(_CLASS_FILES)) -> None:
        self.class_count = class_count
        self.active_player = 0
        self.choices: list[Optional[int]] = [None, None]
        self.validated = False

    @property
    def ready(self) -> bool:
        """True when both players have picked a class."""
        return all(choice is not None for choice in self.choices)

    def click(self, x: int, y: int) -> bool:
        """Handle a click; return True once the selection is validated."""
        slot = player_slot_at(x, y)
        if slot is not None:
            self.active_player = slot
        chosen = class_at(x, y, self.class_count)
        if chosen is not None:
            self.choices[self.active_player] = chosen
        if on_validate(x, y) and self.ready:
            self.validated = True
        return self.validated

    def apply(self, players: Sequence[Player], classes: Sequence[CharacterClass],
              rng: Optional[random.Random] = None) -> Sequence[Player]:
        """Place the two players, give them their stats and chosen classes."""
        if len(players) != 2:
            raise ValueError("class selection handles exactly two players")
        if not self.ready:
            raise ValueError("both players must choose a class first")
        rng = rng or random.Random()
        for index, (player, choice) in enumerate(zip(players, self.choices)):
            player.row = 1 if index == 0 else 11
            player.column = 7
            player.color = (rng.randrange(256), rng.randrange(256), rng.randrange(256))
            player.hp = 100
            player.ap = 10
            player.mp = 25
            player.name = f"J{index + 1}"
            player.character_class = classes[choice].name
        return players