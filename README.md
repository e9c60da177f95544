# consolegames

A collection of small console programs with Korean messages. It includes
arithmetic helpers, character checks, dice and card games, grid puzzles and a
dice-driven walking adventure with monster battles. Every program is also a
set of plain functions and classes that you can use from Python.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each command takes a sub-command that picks the program to run. Where a value
is left out on the command line, the program asks for it on standard input.

### `consolegames-basics`

| Sub-command | What it prints |
| --- | --- |
| `hello` | Greeting lines, a sum (5 + 7) and a product (10 × 20 × 30) |
| `profile [--name N] [--age A] [--phone P]` | A name, an age and a phone number |
| `crit` | The critical damage for a base damage of 100 |
| `calc` | Sum, difference, product, quotient and remainder of 12.4 and 5 |
| `heal` | Healing 20 HP by 10000, capped at a maximum of 50 |
| `expr [X Y Z]` | `x + y * z` and `(x - y) * (y + z) * (z % x)` |
| `sizes` | Byte sizes of the basic C numeric types |
| `circle [RADIUS]` | The area of a circle |
| `count` | The numbers 1 to 10 |
| `square [SIDE]` | A square of `*` |
| `gugudan` | The times table for 2 to 9 |

### `consolegames-chars`

| Sub-command | What it does |
| --- | --- |
| `charcheck [CHAR]` | Says whether a character is an upper-case letter, a lower-case letter or neither, and whether it is ASCII punctuation |
| `rps [NUMBER]` | Rock–paper–scissors: 1 scissors, 2 rock, 3 paper, against a computer that always holds rock |
| `parity` | Says whether each number entered is even or odd; 0 ends |
| `hand [KEY]` | Names the hand for key `a`, `b` or `c` |
| `altcase [WORD]` | Alternates upper and lower case, then prints the result reversed |

### `consolegames-chance [--seed N] [--fast]`

| Sub-command | What it does |
| --- | --- |
| `parity` | Two dice are rolled; you guess whether the total is odd (1) or even (0); 2 ends |
| `crit` | Rolls 0 to 100 for each attack; 40 or more is a critical hit for 150 % damage; `x` ends |
| `lotto` | Draws lotto numbers in two ways |
| `card` | Draws a random playing card |
| `shuffle` | Shuffles the numbers 1 to 10 with 1000 random swaps |

`--seed` makes the random results repeatable. `--fast` skips the pauses.

### `consolegames-boards [--seed N]`

| Sub-command | What it does |
| --- | --- |
| `marker` | A `0` steps right along a row of five `*`, one step per line entered |
| `walk` | Move a `0` inside a walled 6 × 6 grid with `a`, `d`, `w`, `s` |
| `slide` | A sliding puzzle of 3 × 3 to 6 × 6 tiles; move the blank with `a`, `d`, `w`, `s`, quit with `q` |

### `consolegames-minigame [--seed N] [--fast]`

This is the walking adventure. Each turn a ten-sided die chooses where you go.
A roll of 1–3 takes you to the river, which changes your damage or maximum HP.
A roll of 4–7 takes you to a mountain. There, a second roll of 1–8 starts a
fight with a bat, a bear or a slime, and a roll of 9–10 heals you by 10.
A roll of 8–10 takes you along the road. You win once you have walked the road
six times, and you lose when your HP reaches 0.

## Using it as a library

```python
import random

from consolegames.basics import apply_heal, times_table
from consolegames.chars import alternate_case, classify_letter
from consolegames.chance import draw_card, lotto_draw, lotto_pick
from consolegames.boards import Direction, SlidingPuzzle, WalkerGrid
from consolegames.minigame import Game, Monster, fight, map_for_roll
from consolegames.art import art, art_names

apply_heal(20, 10000, 50)          # 50
alternate_case("hello")            # "HeLlO"
classify_letter("Q")               # LetterKind.UPPER

rng = random.Random(1)
card = draw_card(rng)
print(card.rank_label(), card.suit)
print(lotto_draw(rng))             # six distinct numbers from 1 to 45
print(lotto_pick(rng))             # six numbers from 1 to 45; a repeat can survive

puzzle = SlidingPuzzle.shuffled(3, rng)
puzzle.move(Direction.LEFT)
print(puzzle.render())
print(puzzle.is_solved())

result = fight(100, 10, Monster.BEAR)
print(result.won, result.player_hp, result.exchanges)

print(map_for_roll(5))             # MapKind.MOUNTAIN
print(art_names())
print(art("slime"))
```

Functions that involve chance take a `random.Random` instance, so a seeded
generator gives repeatable results. `Game` takes its generator, its output,
its key wait and its sleep function as fields. You can use this to drive a game
without a terminal, for example `Game(rng=random.Random(0), out=lines.append,
wait=lambda _: None, sleep=lambda _: None).play()`.

## Limitations

- The programs read whole lines from standard input. Where a program waits for
  "any key", you must press Enter, and single keystrokes are not read.
- `consolegames-chance crit` and the board programs clear the screen with the
  system's `cls` or `clear` command. The walking adventure clears it with ANSI
  escape codes.
- The shuffled sliding puzzle is not checked for solvability, so some boards
  cannot be solved.