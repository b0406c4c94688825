"""Spells, character classes and spell casting."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

CELL_SIZE = 50
MAX_FRAMES = 10

Loader = Callable[[str], Optional[Any]]


@dataclass
class Spell:
    """A spell with its damage range, cost, reach and animation frames."""

    name: str
    min_damage: int
    max_damage: int
    ap_cost: int
    min_range: int
    max_range: int
    failure_chance: int
    area: int
    animation: list = field(default_factory=list)
    frame_delay: int = 5

    @property
    def frame_count(self) -> int:
        return len(self.animation)

    def load_animation(self, prefix: str, loader: Loader) -> int:
        """Load up to ten frames named '<prefix><n>.bmp', stopping at the first missing one."""
        self.animation = []
        for index in range(MAX_FRAMES):
            frame = loader(f"{prefix}{index}.bmp")
            if frame is None:
                break
            self.animation.append(frame)
        return len(self.animation)


@dataclass
class CharacterClass:
    """A playable character class with its spells and combat stats."""

    name: str
    spells: list[Spell] = field(default_factory=list)
    sprite: Any = None
    x: int = 0
    y: int = 0
    melee_power: int = 0
    hp: int = 0


def _build(name: str, specs, loader: Optional[Loader]) -> CharacterClass:
    spells = []
    for args, prefix in specs:
        spell = Spell(*args)
        if loader is not None:
            spell.load_animation(prefix, loader)
        spells.append(spell)
    return CharacterClass(name, spells)


def mage_class(loader: Optional[Loader] = None) -> CharacterClass:
    """The Mage and its three spells."""
    return _build("Mage", [
        (("Pluie de glace", 10, 15, 3, 2, 5, 10, 1), "mage_pluie_de_glace_"),
        (("Sac de feu", 15, 20, 4, 1, 3, 15, 0), "mage_sac_de_feu_"),
        (("Tornade", 13, 25, 4, 4, 7, 5, 0), "mage_tornade_"),
    ], loader)


def dragon_mistress_class(loader: Optional[Loader] = None) -> CharacterClass:
    """The Dragon Mistress and her four spells."""
    return _build("Maîtresse Dragon", [
        (("Bébé dragon", 12, 15, 3, 2, 5, 10, 1), "maitresse_bebe_dragon_"),
        (("Multiples boules de feu", 15, 20, 4, 1, 3, 15, 0), "maitresse_plusieurs_boules_"),
        (("Susano", 13, 25, 4, 4, 7, 5, 0), "maitresse_susano_"),
        (("Unique boule de feu", 13, 25, 4, 4, 7, 5, 0), "maitresse_unique_boule_"),
    ], loader)


def archer_class(loader: Optional[Loader] = None) -> CharacterClass:
    """The Archer and her four spells."""
    return _build("Archère", [
        (("Tir unique", 10, 15, 3, 2, 5, 10, 1), "archere_tir_unique_"),
        (("Tir multiple", 15, 20, 4, 1, 3, 15, 0), "archere_tir_multiple_"),
        (("Flèche empoisonée", 13, 25, 4, 1, 3, 15, 0), "archere_fleche_empoisonee_"),
        (("Flèche foudroyante", 13, 25, 4, 1, 3, 15, 0), "archere_fleche_foudroyante_"),
    ], loader)


def mad_scientist_class(loader: Optional[Loader] = None) -> CharacterClass:
    """The Mad Scientist and his four spells."""
    return _build("Technomage", [
        (("Bombe", 10, 15, 3, 2, 5, 10, 1), "savant_fou_bombe_"),
        (("Canon", 10, 15, 3, 2, 5, 10, 1), "savant_fou_canon_"),
        (("Mitraillette", 13, 25, 4, 1, 3, 15, 0), "savant_fou_mitraillette_"),
        (("Super bazooka", 13, 25, 4, 1, 3, 15, 0), "savant_fou_bazooka_"),
    ], loader)


def cells_in_range(spell: Spell, source_x: int, source_y: int,
                   grid: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Return the (x, y) cells that are open (value 1) and within the spell's reach."""
    return [
        (x, y)
        for y, row in enumerate(grid)
        for x, value in enumerate(row)
        if value == 1
        and spell.min_range <= abs(x - source_x) + abs(y - source_y) <= spell.max_range
    ]


def roll_damage(spell: Spell, rng: Optional[random.Random] = None) -> int:
    """Roll the damage of a cast: 0 on failure, otherwise uniform in the damage range."""
    rng = rng or random.Random()
    if rng.randrange(100) < spell.failure_chance:
        return 0
    return spell.min_damage + rng.randrange(spell.max_damage - spell.min_damage + 1)


@dataclass
class SpellCast:
    """An ongoing cast of a spell on a target cell, advanced one tick at a time."""

    spell: Spell
    target_x: int
    target_y: int
    frame: int = 0
    delay_counter: int = 0

    @property
    def position(self) -> tuple[int, int]:
        """Pixel position at which the animation is drawn."""
        return self.target_x * CELL_SIZE, self.target_y * CELL_SIZE

    @property
    def current_frame(self) -> Any:
        """The animation frame to draw now, or None once the animation is over."""
        if self.frame < self.spell.frame_count:
            return self.spell.animation[self.frame]
        return None

    def step(self, rng: Optional[random.Random] = None) -> Optional[int]:
        """Advance the animation; return None while it runs, then the damage dealt."""
        if self.frame < self.spell.frame_count:
            self.delay_counter += 1
            if self.delay_counter >= self.spell.frame_delay:
                self.delay_counter = 0
                self.frame += 1
            return None
        self.frame = 0
        self.delay_counter = 0
        return roll_damage(self.spell, rng)