import random

import pytest

from ecearena.app import Game, Screen, main
from ecearena.match import TurnEvent


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_game():
    clock = FakeClock()
    return Game(rng=random.Random(7), clock=clock), clock


def start_two_player_match(game):
    game.handle_click(400, 270)
    game.handle_click(300, 225)
    game.handle_click(100, 100)
    game.handle_click(600, 400)


def test_initial_state():
    game, _ = make_game()
    assert game.screen is Screen.MENU
    assert game.sound_on is True
    assert game.match is None


def test_play_button_opens_setup():
    game, _ = make_game()
    assert game.handle_click(400, 270) is Screen.SETUP


def test_quit_button_quits():
    game, _ = make_game()
    assert game.handle_click(400, 350) is Screen.QUIT


def test_click_elsewhere_on_menu_keeps_menu():
    game, _ = make_game()
    assert game.handle_click(10, 10) is Screen.MENU


def test_sound_button_toggles_twice():
    game, _ = make_game()
    game.handle_click(770, 570)
    assert game.sound_on is False
    assert game.notice == "Le son n'est plus actif"
    game.handle_click(770, 570)
    assert game.sound_on is True
    assert game.notice == "Le son est actif"


def test_setup_back_button_returns_to_menu():
    game, _ = make_game()
    game.handle_click(400, 270)
    assert game.handle_click(100, 565) is Screen.MENU


@pytest.mark.parametrize("x, y, count", [(300, 225, 2), (500, 225, 3), (400, 300, 4)])
def test_setup_buttons_start_class_choice(x, y, count):
    game, _ = make_game()
    game.handle_click(400, 270)
    assert game.handle_click(x, y) is Screen.CLASS_CHOICE
    assert len(game.players) == count
    assert game.choosing == 0


def test_class_choice_names_players_and_starts_match():
    game, _ = make_game()
    start_two_player_match(game)
    assert game.screen is Screen.MATCH
    first, second = game.match.players
    assert (first.name, first.character_class) == ("Savant", "A")
    assert (second.name, second.character_class) == ("Maitresse", "D")


def test_click_outside_choice_boxes_keeps_choosing():
    game, _ = make_game()
    game.handle_click(400, 270)
    game.handle_click(300, 225)
    assert game.handle_click(400, 300) is Screen.CLASS_CHOICE
    assert game.choosing == 0


def test_match_click_selects_current_player():
    game, _ = make_game()
    start_two_player_match(game)
    match = game.match
    player = match.current_player
    game.handle_click(110 + player.column * 50 + 25, player.row * 50 + 25)
    assert match.mover.selected == match.current


def test_timeout_passes_turn():
    game, clock = make_game()
    start_two_player_match(game)
    first = game.match.current_player
    assert game._update() is TurnEvent.NONE
    clock.now = 15.0
    assert game._update() is TurnEvent.TIMEOUT
    assert game.match.turn == 2
    assert game.match.current_player is not first


def test_finished_match_shows_ranking_and_buttons():
    game, _ = make_game()
    start_two_player_match(game)
    loser = game.match.current_player
    loser.mp = 0
    assert game._update() is TurnEvent.FINISHED
    assert game.screen is Screen.RANKING
    assert len(game.ranking) == 2
    assert game.ranking[-1] is loser
    assert game.handle_click(200, 520) is Screen.SETUP
    assert game.match is None


def test_ranking_same_button_returns_to_menu():
    game, _ = make_game()
    start_two_player_match(game)
    game.match.current_player.mp = 0
    game._update()
    assert game.handle_click(500, 520) is Screen.MENU


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0