# snakegate

A snake game for the terminal, drawn with curses.

The snake moves on a walled board with a wall cross in the middle. Growth
items (`+`) lengthen it and poison items (`-`) shorten it. Every so often a
pair of gates (`G`) opens in the walls. When the snake enters one gate, it
comes out of the other.

## Installing

```
pip install .
```

The game uses the standard library's `curses` module. It therefore needs a
platform where that module is available, such as Linux or macOS.

## Playing

```
snakegate
```

The terminal must be at least 67 columns wide and 21 rows high. If it is
smaller, the game prints a message and exits. `snakegate --help` shows the
usage. The command takes no other options.

- The arrow keys steer the snake.
- `q` quits.
- Turning straight back against the current direction ends the game.

The game ends when any of these happens:

- the snake hits a wall or itself,
- the snake shrinks to three segments or fewer,
- every mission is complete.

## Items and gates

- **Items.** Once 5 seconds have passed since the last item appeared, a new one appears at a random empty cell. This only happens while fewer than three items are on the board.
  - Each item is growth or poison with equal odds.
  - An item disappears after 20 seconds.
- **Gate timing.** Gates first open 10 seconds after the game starts. They stay open for 20 seconds, then stay closed for 10 seconds, and the cycle repeats.
- **Gate placement.** The two gates are placed on two different wall cells, chosen at random. Any wall cell can hold a gate, including the cells of the inner cross, except the four corners.
- **Leaving a border gate.** The snake moves away from that border wall.
- **Leaving a gate in the inner cross.** The snake takes the first open direction in this order: straight on, turned clockwise, turned anticlockwise, reversed.
- **Passing through.** The snake comes out of the exit gate one segment per step until its whole body is through.

## Missions

Two boards appear to the right of the map. One shows the score; the other shows the missions:

| Mission | Goal                          |
|---------|-------------------------------|
| `B: 10` | reach a length of 10          |
| `+: 5`  | eat 5 growth items            |
| `-: 2`  | eat 2 poison items            |
| `G: 1`  | pass through a gate once      |

A completed mission is marked with `v` and stays complete.

## Using the game from Python

`snakegate.game.Game(term_height, term_width, clock, rng)` builds a game for
a terminal of the given size. `clock` is a function that returns seconds, by
default `time.monotonic`. `rng` is a `random.Random`. The game has these
methods:

- `Game.handle_key(key)` feeds one curses key code.
- `Game.tick()` advances the game by one step.
- `Game.calculate_exit(gate, entry_direction)` returns the exit position and direction for a gate.
- `Game.render(window)` redraws a curses window.
- `Game.run(window)` reads keys and ticks every 0.2 seconds until the game is over.

`Game.state` holds a `GameState`: `PLAYING`, `PASSING_THROUGH_GATE` or
`GAME_OVER`.

The parts can also be used on their own:

- `GameMap` is in `snakegate.gamemap`.
- `Snake` is in `snakegate.snake`.
- `ItemManager` is in `snakegate.items`.
- `GateManager` is in `snakegate.gates`.
- `Scoreboard` is in `snakegate.scoreboard`.
- `Point`, `Direction` and `ItemEffect` are in `snakegate.common`.

## What it does not do

- The game has no levels.
- It has no pause.
- It does not save scores. Nothing is kept once the game ends.

## Running the tests

```
pip install .[test]
pytest
```