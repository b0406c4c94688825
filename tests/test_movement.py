import pytest

from ecearena.movement import (
    MoveController,
    cell_at,
    grid_size,
    is_cell_occupied,
    manhattan_distance,
    movement_zone,
)
from ecearena.players import GREEN, RED, Player


def _players():
    return [Player(1, 5, RED, mp=10), Player(10, 5, GREEN, mp=10)]


def _pixel(row, col):
    return 110 + col * 50 + 25, row * 50 + 25


@pytest.mark.parametrize("a,b", [((0, 0), (3, 4)), ((5, 2), (1, 7)), ((2, 2), (2, 2))])
def test_manhattan_symmetric(a, b):
    assert manhattan_distance(*a, *b) == manhattan_distance(*b, *a)


def test_manhattan_same_cell_is_zero():
    assert manhattan_distance(4, 6, 4, 6) == 0


def test_manhattan_straight_line():
    assert manhattan_distance(1, 5, 10, 5) == 9


def test_occupied_by_other_player():
    players = _players()
    assert is_cell_occupied(10, 5, players, 0) is True


def test_current_player_ignored():
    players = _players()
    assert is_cell_occupied(1, 5, players, 0) is False


def test_zone_distances_and_bounds():
    players = _players()
    rows, cols = grid_size()
    zone = movement_zone(5, 5, players)
    assert zone
    for cell in zone:
        assert 1 <= manhattan_distance(5, 5, cell.row, cell.column) <= 3
        assert 0 <= cell.row < rows and 0 <= cell.column < cols


def test_zone_full_diamond_in_the_middle():
    assert len(movement_zone(5, 5, [])) == 24


def test_zone_clipped_at_corner_is_smaller():
    assert len(movement_zone(0, 0, [])) < len(movement_zone(5, 5, []))


def test_zone_marks_occupied_cells():
    players = [Player(5, 5, RED), Player(6, 6, GREEN)]
    zone = movement_zone(5, 5, players)
    occupied = [(c.row, c.column) for c in zone if c.occupied]
    assert occupied == [(6, 6)]


def test_cell_at_round_trip():
    for row, col in [(0, 0), (3, 7), (11, 12)]:
        assert cell_at(*_pixel(row, col)) == (row, col)


def test_cell_at_truncates_toward_zero():
    assert cell_at(100, 10)[1] == 0


def test_select_then_move_consumes_mp():
    players = _players()
    ctrl = MoveController()
    assert ctrl.click(*_pixel(1, 5), players, 0) is False
    assert ctrl.selected == 0
    assert ctrl.click(*_pixel(3, 6), players, 0) is True
    assert (players[0].row, players[0].column) == (3, 6)
    assert players[0].mp == 10 - manhattan_distance(1, 5, 3, 6)
    assert ctrl.selected is None


def test_click_on_other_player_does_not_select():
    players = _players()
    ctrl = MoveController()
    ctrl.click(*_pixel(10, 5), players, 0)
    assert ctrl.selected is None


def test_move_beyond_mp_refused():
    players = _players()
    players[0].mp = 2
    ctrl = MoveController()
    ctrl.click(*_pixel(1, 5), players, 0)
    assert ctrl.click(*_pixel(6, 5), players, 0) is False
    assert (players[0].row, players[0].column, players[0].mp) == (1, 5, 2)
    assert ctrl.selected is None


def test_move_onto_occupied_refused():
    players = [Player(1, 5, RED, mp=10), Player(2, 5, GREEN, mp=10)]
    ctrl = MoveController()
    ctrl.click(*_pixel(1, 5), players, 0)
    assert ctrl.click(*_pixel(2, 5), players, 0) is False
    assert (players[0].row, players[0].column) == (1, 5)


def test_click_outside_grid_deselects():
    players = _players()
    ctrl = MoveController()
    ctrl.click(*_pixel(1, 5), players, 0)
    assert ctrl.click(5, 5, players, 0) is False
    assert ctrl.selected is None


def test_zone_follows_selection_and_reset():
    players = _players()
    ctrl = MoveController()
    assert ctrl.zone(players) == []
    ctrl.click(*_pixel(1, 5), players, 0)
    assert ctrl.zone(players) == movement_zone(1, 5, players)
    ctrl.reset()
    assert ctrl.selected is None