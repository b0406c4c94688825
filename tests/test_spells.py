import random

import pytest

from ecearena.spells import (
    CharacterClass,
    Spell,
    SpellCast,
    archer_class,
    cells_in_range,
    dragon_mistress_class,
    mad_scientist_class,
    mage_class,
    roll_damage,
)


def make_spell(**overrides):
    values = dict(name="Test", min_damage=10, max_damage=15, ap_cost=3,
                  min_range=2, max_range=5, failure_chance=10, area=1)
    values.update(overrides)
    return Spell(**values)


def loader_for(available):
    requested = []

    def load(filename):
        requested.append(filename)
        return f"frame:{filename}" if filename in available else None

    return load, requested


def test_mage_spells_match_source():
    mage = mage_class()
    assert mage.name == "Mage"
    assert [s.name for s in mage.spells] == ["Pluie de glace", "Sac de feu", "Tornade"]
    tornado = mage.spells[2]
    assert (tornado.min_damage, tornado.max_damage, tornado.min_range, tornado.max_range) == (13, 25, 4, 7)
    assert tornado.frame_delay == 5


@pytest.mark.parametrize("factory", [dragon_mistress_class, archer_class, mad_scientist_class])
def test_other_classes_have_four_spells(factory):
    cls = factory()
    assert len(cls.spells) == 4
    assert all(s.min_damage <= s.max_damage for s in cls.spells)


def test_dragon_mistress_first_spell():
    spell = dragon_mistress_class().spells[0]
    assert spell.name == "Bébé dragon"
    assert spell.min_damage == 12


def test_load_animation_stops_at_first_missing_frame():
    load, requested = loader_for({"mage_tornade_0.bmp", "mage_tornade_1.bmp", "mage_tornade_3.bmp"})
    spell = make_spell()
    assert spell.load_animation("mage_tornade_", load) == 2
    assert spell.frame_count == 2
    assert requested[-1] == "mage_tornade_2.bmp"


def test_load_animation_caps_at_ten_frames():
    spell = make_spell()
    count = spell.load_animation("x_", lambda name: name)
    assert count == 10
    assert spell.animation[-1] == "x_9.bmp"


def test_class_factory_uses_loader_prefixes():
    load, requested = loader_for({"archere_tir_unique_0.bmp"})
    archer = archer_class(load)
    assert archer.spells[0].animation == ["frame:archere_tir_unique_0.bmp"]
    assert archer.spells[1].frame_count == 0
    assert "archere_fleche_foudroyante_0.bmp" in requested


def test_cells_in_range_respects_distance_and_grid():
    grid = [[1] * 8 for _ in range(8)]
    grid[3][5] = 0
    spell = make_spell(min_range=2, max_range=3)
    cells = cells_in_range(spell, 3, 3, grid)
    assert cells
    for x, y in cells:
        assert 2 <= abs(x - 3) + abs(y - 3) <= 3
        assert grid[y][x] == 1
    assert (5, 3) not in cells
    assert (3, 3) not in cells


def test_cells_in_range_closed_grid_is_empty():
    assert cells_in_range(make_spell(), 1, 1, [[0, 0, 0], [0, 0, 0]]) == []


def test_roll_damage_always_fails_at_full_failure_chance():
    spell = make_spell(failure_chance=100)
    rng = random.Random(1)
    assert all(roll_damage(spell, rng) == 0 for _ in range(50))


def test_roll_damage_within_range_without_failure():
    spell = make_spell(failure_chance=0, min_damage=13, max_damage=25)
    rng = random.Random(7)
    rolls = [roll_damage(spell, rng) for _ in range(200)]
    assert all(13 <= r <= 25 for r in rolls)


def test_roll_damage_fixed_range():
    spell = make_spell(failure_chance=0, min_damage=12, max_damage=12)
    assert roll_damage(spell, random.Random(3)) == 12


def test_spell_cast_animates_then_deals_damage():
    spell = make_spell(failure_chance=0, min_damage=15, max_damage=15)
    spell.animation = ["a", "b"]
    cast = SpellCast(spell, 2, 4)
    assert cast.position == (100, 200)
    assert cast.current_frame == "a"
    ticks = 0
    result = None
    while result is None:
        result = cast.step(random.Random(0))
        ticks += 1
        assert ticks < 100
    assert result == 15
    assert ticks == len(spell.animation) * spell.frame_delay + 1
    assert cast.frame == 0
    assert cast.current_frame == "a"


def test_spell_cast_without_frames_rolls_immediately():
    spell = make_spell(failure_chance=100)
    assert SpellCast(spell, 0, 0).step(random.Random(0)) == 0


def test_character_class_defaults():
    cls = CharacterClass("Mage")
    assert cls.spells == []
    assert (cls.x, cls.y) == (0, 0)