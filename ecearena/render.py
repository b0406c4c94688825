"""Drawing of the arena, menus, sound button and ranking screen."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

import pygame

from .players import Player

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
YELLOW: Color = (255, 255, 0)
GREY: Color = (100, 100, 100)
PURPLE: Color = (200, 0, 200)
RANK_BOX: Color = (40, 54, 39)
RANK_BUTTON: Color = (70, 31, 2)

ARENA_ROWS = 13
ARENA_COLUMNS = 15
ARENA_CELL = 40
ARENA_LEFT = 20
ARENA_TOP = (600 - ARENA_ROWS * ARENA_CELL) // 2

SOUND_CENTER = (770, 570)
SOUND_RADIUS = 15
SOUND_ON_NOTICE = "Le son est actif"
SOUND_OFF_NOTICE = "Le son n'est plus actif"

BOARD_LEFT = 110
BOARD_CELL = 50

_MENU_BUTTONS = (
    ("play", "JOUER", 300, 250, 500, 290),
    ("quit", "QUITTER", 300, 330, 500, 370),
)

_SETUP_BUTTONS = (
    (2, "Partie à 2", RED, 220, 200, 380, 250),
    (3, "Partie à 3", GREEN, 420, 200, 580, 250),
    (4, "Partie à 4", BLUE, 320, 280, 480, 330),
)

_RANK_BOXES = (
    (125, 160, 675, 225),
    (125, 242, 675, 305),
    (125, 322, 675, 385),
    (125, 402, 675, 467),
)
_RANK_NAME_X = 140
_RANK_NAME_Y = (180, 260, 340, 420)

_RANKING_BUTTONS = (
    ("new", "Rejouer autre partie", 88, 495, 346, 555),
    ("same", "Rejouer meme partie", 454, 495, 712, 555),
)


def _box(left: int, top: int, right: int, bottom: int) -> pygame.Rect:
    """A rectangle given by inclusive corners."""
    return pygame.Rect(left, top, right - left + 1, bottom - top + 1)


def _inside(x: int, y: int, left: int, top: int, right: int, bottom: int) -> bool:
    return left <= x <= right and top <= y <= bottom


def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, 18)


def _text(surface: pygame.Surface, text: str, x: int, y: int,
          color: Color = WHITE, centre: bool = False) -> None:
    image = _font().render(text, True, color)
    if centre:
        x -= image.get_width() // 2
    surface.blit(image, (x, y))


def draw_arena(surface: pygame.Surface) -> None:
    """Draw the empty 13 by 15 arena grid with white cell outlines."""
    for row in range(ARENA_ROWS):
        for column in range(ARENA_COLUMNS):
            x = ARENA_LEFT + column * ARENA_CELL
            y = ARENA_TOP + row * ARENA_CELL
            cell = _box(x, y, x + ARENA_CELL - 1, y + ARENA_CELL - 1)
            pygame.draw.rect(surface, BLACK, cell)
            pygame.draw.rect(surface, WHITE, cell, 1)


def menu_button_at(x: int, y: int) -> Optional[str]:
    """'play' or 'quit' for the main-menu button under (x, y), or None."""
    for action, _label, *corners in _MENU_BUTTONS:
        if _inside(x, y, *corners):
            return action
    return None


def draw_menu(surface: pygame.Surface, mouse: tuple[int, int]) -> None:
    """Draw the main menu, outlining the button under the mouse."""
    surface.fill(BLACK)
    _text(surface, "ECE ARENA", 370, 200)
    for action, label, left, top, right, bottom in _MENU_BUTTONS:
        pygame.draw.rect(surface, RED, _box(left, top, right, bottom))
        _text(surface, label, (left + right) // 2, top + 12, centre=True)
    hovered = menu_button_at(*mouse)
    for action, _label, left, top, right, bottom in _MENU_BUTTONS:
        if action == hovered:
            pygame.draw.rect(surface, GREEN, _box(left - 10, top - 10, right + 10, bottom + 10), 1)
            _text(surface, ">", left + 10, top + 12)


def setup_button_at(x: int, y: int) -> Optional[int]:
    """Number of players of the match button under (x, y), or None."""
    for count, _label, _color, *corners in _SETUP_BUTTONS:
        if _inside(x, y, *corners):
            return count
    return None


def draw_game_setup(surface: pygame.Surface, mouse: tuple[int, int]) -> None:
    """Draw the buttons choosing a two, three or four player match."""
    hovered = setup_button_at(*mouse)
    for count, label, color, left, top, right, bottom in _SETUP_BUTTONS:
        pygame.draw.rect(surface, color, _box(left, top, right, bottom))
        _text(surface, label, (left + right) // 2, top + 15, centre=True)
        if count == hovered:
            pygame.draw.rect(surface, PURPLE, _box(left - 10, top - 10, right + 10, bottom + 10), 1)
            _text(surface, ">", left + 10, top + 15)


def draw_sound_button(surface: pygame.Surface, sound_on: bool) -> None:
    """Draw the round sound toggle, yellow when on and grey when off."""
    pygame.draw.circle(surface, YELLOW if sound_on else GREY, SOUND_CENTER, SOUND_RADIUS)


def sound_button_hit(x: int, y: int) -> bool:
    """True when (x, y) lies on the sound toggle."""
    cx, cy = SOUND_CENTER
    return (x - cx) ** 2 + (y - cy) ** 2 <= SOUND_RADIUS ** 2


def draw_sound_notice(surface: pygame.Surface, sound_on: bool) -> None:
    """Write the notice shown after toggling the sound."""
    _text(surface, SOUND_ON_NOTICE if sound_on else SOUND_OFF_NOTICE, 330, 150)


def _player_center(player: Player, cell_size: int) -> tuple[int, int]:
    return (BOARD_LEFT + player.column * cell_size + cell_size // 2,
            player.row * cell_size + cell_size // 2)


def hovered_player_lines(players: Sequence[Player], mouse_x: int, mouse_y: int,
                         cell_size: int = BOARD_CELL) -> list[list[str]]:
    """Info lines (name, hp, mp, ap) of every player under the mouse."""
    lines = []
    for player in players:
        x, y = _player_center(player, cell_size)
        if x - 25 <= mouse_x <= x + 25 and y - 25 <= mouse_y <= y + 25:
            lines.append([player.name, f"PV: {player.hp}", f"PM:{player.mp}", f"PA:{player.ap}"])
    return lines


def draw_player_info(surface: pygame.Surface, players: Sequence[Player],
                     mouse: tuple[int, int], cell_size: int = BOARD_CELL) -> None:
    """Write the stats of the hovered player next to the mouse."""
    mouse_x, mouse_y = mouse
    for block in hovered_player_lines(players, mouse_x, mouse_y, cell_size):
        for offset, line in enumerate(block, start=1):
            _text(surface, line, mouse_x + 10, mouse_y + 10 * offset)


def draw_board(surface: pygame.Surface, players: Sequence[Player], current: int,
               zone: Iterable = (), active: Optional[Sequence[bool]] = None,
               cell_size: int = BOARD_CELL) -> None:
    """Draw the arena, the movement zone and the active players, ringing the current one."""
    draw_arena(surface)
    overlay = pygame.Surface((cell_size, cell_size), pygame.SRCALPHA)
    for cell in zone:
        overlay.fill((*(RED if cell.occupied else GREEN), 128))
        surface.blit(overlay, (BOARD_LEFT + cell.column * cell_size, cell.row * cell_size))
    for index, player in enumerate(players):
        if active is not None and not active[index]:
            continue
        center = _player_center(player, cell_size)
        pygame.draw.circle(surface, player.color, center, 20)
        if index == current:
            pygame.draw.circle(surface, GREEN, center, 25, 1)


def draw_timer(surface: pygame.Surface, label: str) -> None:
    """Draw the turn countdown in its red box."""
    pygame.draw.rect(surface, RED, _box(740, 25, 775, 40))
    _text(surface, label, 750, 30)


def ranking_button_at(x: int, y: int) -> Optional[str]:
    """'new' or 'same' for the ranking-screen button under (x, y), or None."""
    for action, _label, *corners in _RANKING_BUTTONS:
        if _inside(x, y, *corners):
            return action
    return None


def draw_ranking(surface: pygame.Surface, ranking: Iterable[Player]) -> None:
    """Draw the ranking boxes, the replay buttons and up to four names, best first."""
    surface.fill(BLACK)
    for corners in _RANK_BOXES:
        pygame.draw.rect(surface, RANK_BOX, _box(*corners), 1)
    for _action, label, left, top, right, bottom in _RANKING_BUTTONS:
        pygame.draw.rect(surface, RANK_BUTTON, _box(left, top, right, bottom), 1)
        _text(surface, label, (left + right) // 2, 520, centre=True)
    for y, player in zip(_RANK_NAME_Y, ranking):
        _text(surface, player.name, _RANK_NAME_X, y)