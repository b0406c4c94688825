# ecearena

A small turn-based arena game for two, three or four players. The players
share one mouse at the same screen. Each player picks one of four class
tiles (Savant, Archer, Mage or Maitresse). Players then take turns on a tile
grid and move within their movement points. A turn lasts at most fifteen
seconds. A player who has no movement points left when their turn comes is
out of the match. When only one player is left, a ranking screen shows the
final order with the last player standing first.

## Installing

```
pip install .
```

The game uses `pygame` for its window, drawing, input and sound.

## Playing

Start the game with:

```
ecearena
```

The menu music is read from `melodie_menu.wav` in the current directory. A
different file can be given with `--music PATH`. If a sound device is
available but the file cannot be loaded, the game prints an error and exits
with status 1. If there is no sound device, the game runs without sound.

- In the main menu, click **JOUER** to set up a match or **QUITTER** to leave.
- On the setup screen, click the button for 2, 3 or 4 players, or press the
  keys `2`, `3` or `4`. **Retour** goes back to the menu.
- Each player in turn clicks one of the four class tiles. The chosen class
  name becomes that player's name.
- During the match, click the piece of the player whose turn it is to select
  it. The cells up to three steps away are then highlighted: green cells are
  free and red cells are taken. Then click any free cell on the board. The
  piece moves there if the Manhattan distance is no more than its movement
  points. The move costs that many points.
- Hover over a piece to see its name, health (PV), movement points (PM) and
  action points (PA).
- On the ranking screen, **Rejouer autre partie** goes back to the match
  setup and **Rejouer meme partie** goes back to the main menu.
- The round button at the bottom right turns the sound on or off. It is
  yellow when the sound is on and grey when it is off.
- Escape, or closing the window, quits the game.

## Using the pieces from Python

The game logic can be used without a window:

```python
import random

from ecearena.match import new_match
from ecearena.movement import manhattan_distance
from ecearena.pile import Stack

match = new_match(3, random.Random(0))
print(match.update(timer_expired=True))  # TurnEvent.TIMEOUT: next player's turn
print([player.name for player in match.ranking()])  # [] until the match ends

print(manhattan_distance(1, 5, 4, 7))  # 5

stack = Stack()
stack.push("J1")
stack.push("J2")
print(stack.pop(), len(stack))        # J2 1
```

The other modules:

- `ecearena.spells`: the class spell books (`mage_class`,
  `dragon_mistress_class`, `archer_class`, `mad_scientist_class`),
  `cells_in_range`, `roll_damage` and the frame-by-frame `SpellCast`.
- `ecearena.melee`: `melee_attack` between adjacent characters. It raises
  `OutOfRangeError` when the target is not adjacent.
- `ecearena.turns`: `build_turn_queue`, which gives a shuffled turn order.
- `ecearena.timer`: `TurnTimer`, the fifteen-second turn clock.
- `ecearena.selection`: hit tests for the selection screens, `load_classes`,
  and `SelectionState` for two players.
- `ecearena.render`: the pygame drawing functions.

## What the game does not do

The game does not use spells, melee attacks or action points. A match can
only be played by moving pieces, and players are eliminated only by running
out of movement points. Health never changes during a match.

The class chosen at the start only sets the player's name and class letter.
It does not give the player any spells or stats.

The two-player `SelectionState` in `ecearena.selection` is not used by the
game window.

## Running the tests

```
pip install .[test]
pytest
```