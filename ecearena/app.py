"""The game window: main menu, match setup, class choice, match and ranking."""

from __future__ import annotations

import argparse
import enum
import random
import sys
import time
from collections.abc import Callable
from typing import Optional

import pygame

from .match import Match, TurnEvent
from .players import Player, starting_players
from .render import (
    BLACK,
    RED,
    WHITE,
    YELLOW,
    draw_board,
    draw_game_setup,
    draw_menu,
    draw_player_info,
    draw_ranking,
    draw_sound_button,
    draw_timer,
    menu_button_at,
    ranking_button_at,
    setup_button_at,
    sound_button_hit,
)
from .selection import CHOICE_NAMES, class_choice_at
from .timer import TurnTimer
from .turns import build_turn_queue

WIDTH = 800
HEIGHT = 600
FRAME_MS = 16
NOTICE_MS = 1000
MUSIC_FILE = "melodie_menu.wav"

_BACK_BUTTON = (50, 550, 150, 580)
_CHOICE_BOXES = (
    (50, 50, 390, 290),
    (410, 310, 750, 550),
    (50, 310, 390, 550),
    (410, 50, 750, 290),
)
_COUNT_KEYS = {pygame.K_2: 2, pygame.K_3: 3, pygame.K_4: 4}


def _sound_message(sound_on: bool) -> str:
    """The notice shown after the sound button is toggled."""
    return "Le son est actif" if sound_on else "Le son n'est plus actif"


class Screen(enum.Enum):
    """The screen the game is showing."""

    MENU = "menu"
    SETUP = "setup"
    CLASS_CHOICE = "class_choice"
    MATCH = "match"
    RANKING = "ranking"
    QUIT = "quit"


class Game:
    """State of the whole game, driven by clicks and frame updates."""

    def __init__(self, rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic,
                 music_path: str = MUSIC_FILE) -> None:
        self.rng = rng or random.Random()
        self.music_path = music_path
        self.screen = Screen.MENU
        self.sound_on = True
        self.notice: Optional[str] = None
        self.players: list[Player] = []
        self.choosing = 0
        self.match: Optional[Match] = None
        self.timer = TurnTimer(clock=clock)
        self.ranking: list[Player] = []

    def _toggle_sound(self) -> None:
        self.sound_on = not self.sound_on
        self.notice = _sound_message(self.sound_on)

    def _start_choice(self, count: int) -> None:
        self.players = starting_players(count)
        self.choosing = 0
        self.screen = Screen.CLASS_CHOICE

    def _start_match(self) -> None:
        self.match = Match(self.players, build_turn_queue(self.players, self.rng))
        self.timer.reset()
        self.screen = Screen.MATCH

    def handle_click(self, x: int, y: int) -> Screen:
        """Handle a left click at (x, y) and return the screen shown afterwards."""
        if self.screen is Screen.MENU:
            if sound_button_hit(x, y):
                self._toggle_sound()
            else:
                action = menu_button_at(x, y)
                if action == "play":
                    self.screen = Screen.SETUP
                elif action == "quit":
                    self.screen = Screen.QUIT
        elif self.screen is Screen.SETUP:
            left, top, right, bottom = _BACK_BUTTON
            if left <= x <= right and top <= y <= bottom:
                self.screen = Screen.MENU
            elif sound_button_hit(x, y):
                self._toggle_sound()
            else:
                count = setup_button_at(x, y)
                if count is not None:
                    self._start_choice(count)
        elif self.screen is Screen.CLASS_CHOICE:
            letter = class_choice_at(x, y)
            if letter is not None:
                player = self.players[self.choosing]
                player.name = CHOICE_NAMES[letter]
                player.character_class = letter
                self.choosing += 1
                if self.choosing == len(self.players):
                    self._start_match()
        elif self.screen is Screen.MATCH and self.match is not None:
            self.match.click(x, y)
        elif self.screen is Screen.RANKING:
            action = ranking_button_at(x, y)
            if action == "new":
                self.match = None
                self.screen = Screen.SETUP
            elif action == "same":
                self.match = None
                self.screen = Screen.MENU
        return self.screen

    def _update(self) -> Optional[TurnEvent]:
        """Advance the running match by one frame."""
        if self.screen is not Screen.MATCH or self.match is None:
            return None
        event = self.match.update(self.timer.tick())
        if event is not TurnEvent.NONE:
            self.timer.reset()
        if event is TurnEvent.FINISHED:
            self.ranking = self.match.ranking()
            self.screen = Screen.RANKING
        return event

    def _draw(self, surface: pygame.Surface, mouse: tuple[int, int]) -> None:
        surface.fill(BLACK)
        font = pygame.font.Font(None, 18)
        if self.screen is Screen.MENU:
            draw_menu(surface, mouse)
            draw_sound_button(surface, self.sound_on)
        elif self.screen is Screen.SETUP:
            draw_game_setup(surface, mouse)
            draw_sound_button(surface, self.sound_on)
            left, top, right, bottom = _BACK_BUTTON
            pygame.draw.rect(surface, RED, pygame.Rect(left, top, right - left + 1, bottom - top + 1))
            surface.blit(font.render("Retour", True, WHITE), (left + 25, top + 8))
        elif self.screen is Screen.CLASS_CHOICE:
            title = font.render(f"Choix du joueur {self.choosing + 1}", True, YELLOW)
            surface.blit(title, (WIDTH // 2 - title.get_width() // 2, 20))
            for left, top, right, bottom in _CHOICE_BOXES:
                pygame.draw.rect(surface, RED,
                                 pygame.Rect(left, top, right - left + 1, bottom - top + 1))
        elif self.screen is Screen.MATCH and self.match is not None:
            match = self.match
            draw_board(surface, match.players, match.current,
                       match.mover.zone(match.players), match.active)
            draw_timer(surface, self.timer.label)
            draw_player_info(surface, match.players, mouse)
        elif self.screen is Screen.RANKING:
            draw_ranking(surface, self.ranking)
        if self.notice:
            surface.blit(font.render(self.notice, True, WHITE), (330, 150))

    def run(self) -> None:
        """Open the window and play until the player quits or presses Escape."""
        pygame.init()
        try:
            music = None
            try:
                pygame.mixer.init()
            except pygame.error:
                pass
            else:
                try:
                    music = pygame.mixer.Sound(self.music_path)
                except (pygame.error, FileNotFoundError) as exc:
                    raise RuntimeError("Erreur chargement de la musique du menu") from exc
                if self.sound_on:
                    music.play(loops=-1)
            surface = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption("ECE ARENA")
            clock = pygame.time.Clock()
            notice_until = 0
            while self.screen is not Screen.QUIT:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.screen = Screen.QUIT
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            self.screen = Screen.QUIT
                        elif self.screen is Screen.SETUP and event.key in _COUNT_KEYS:
                            self._start_choice(_COUNT_KEYS[event.key])
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        was_on = self.sound_on
                        self.handle_click(*event.pos)
                        if self.sound_on != was_on:
                            notice_until = pygame.time.get_ticks() + NOTICE_MS
                            if music is not None:
                                if self.sound_on:
                                    music.play(loops=-1)
                                else:
                                    music.stop()
                if self.notice and pygame.time.get_ticks() >= notice_until:
                    self.notice = None
                self._update()
                self._draw(surface, pygame.mouse.get_pos())
                pygame.display.flip()
                clock.tick(1000 // FRAME_MS)
        finally:
            pygame.quit()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="ecearena", description="Turn-based arena game.")
    parser.add_argument("--music", default=MUSIC_FILE, help="menu music file")
    args = parser.parse_args(argv)
    try:
        Game(music_path=args.music).run()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0