# consolearcade

Four small arcade games that run in a text terminal:

- **Pixel bird**: flap through the gaps in the oncoming pipes.
- **Brick breaker**: keep the ball in play with your paddle and knock out bricks.
- **Plane shooter**: fly your plane and shoot down the falling enemies.
- **Snake**: eat food, grow longer, and pick up power-ups along the way.

## Installing

```
pip install .
```

No third-party libraries are needed.

## Playing

Start the menu and pick a game by its number:

```
consolearcade
```

```
====== 游戏菜单 ======
1. 像素鸟      (pixel bird)
2. 打砖块      (brick breaker)
3. 飞机大战    (plane shooter)
4. 贪吃蛇      (snake)
5. 退出        (quit)
```

Any other key shows an "invalid choice" message and the menu again. When a
game ends you return to the menu.

Each game can also be started on its own:

```
consolearcade-bird
consolearcade-brick
consolearcade-plane
consolearcade-snake
```

Every command takes `--seed N` to make the random placement of pipes, bricks,
enemies and food repeatable. `consolearcade-brick`, `consolearcade-plane` and
`consolearcade-snake` also take `--classic`:

- `consolearcade-brick --classic`: a single block that jumps around when hit.
- `consolearcade-plane --classic`: a plane with a laser and one target, 10
  points per hit; `Esc` quits.
- `consolearcade-snake --classic`: one life, solid walls, the snake does not
  grow and there are no power-ups.

### Controls

| Game          | Keys                                                        |
|---------------|-------------------------------------------------------------|
| Pixel bird    | `space` to flap                                             |
| Brick breaker | `a` / `d` or arrow keys to move the paddle, `w` / `s` to change the ball's sideways speed |
| Plane shooter | `w` `a` `s` `d` to fly, `space` to fire, `Esc` to stop      |
| Snake         | `w` `a` `s` `d` or arrow keys to steer, `Esc` to stop       |

Pixel bird and brick breaker end when the bird hits a pipe or the ball is
missed; press any key at the "Game over" prompt to leave.

### Snake power-ups

After every fifth piece of food a power-up appears, unless one is already on
the board, and vanishes again after a while:

| Symbol | Effect                                    |
|--------|-------------------------------------------|
| `H`    | one extra life                            |
| `D`    | lose a life (the game ends at zero)       |
| `+`    | lowers the snake's `speed` value for a time |
| `-`    | raises the snake's `speed` value for a time |

The snake wraps around the edges of the board; running into its own body costs
a life and starts a fresh snake, keeping the score.

## Using the games from code

Every game is a plain object with `render()`, `tick()` (or `step()` for snake)
and `handle_key(key)`, so it can be driven without a terminal:

```python
import random
from consolearcade.snake import SnakeGame

game = SnakeGame(random.Random(1), lives=5, props=True)
game.step()
print(game.render())
```

The game classes are `BirdGame` (`consolearcade.bird`), `BrickGame` and
`SingleBlockGame` (`consolearcade.brick`), `PlaneGame` and `LaserGame`
(`consolearcade.plane`) and `SnakeGame` (`consolearcade.snake`). The bird and
brick games raise `consolearcade.brick.GameOver` from `tick()` when the round
is lost; the plane and snake games set `over` instead.

The `consolearcade.console.Console` class wraps terminal output and key input.
Given a list of keys (`Console(stream, keys=[...])`) it plays them back instead
of reading the keyboard and does not sleep, which is handy for tests. Each game
module's `run(console, rng)` plays a full game on a console and returns the
score. `consolearcade.menu` offers `render_menu(width)` and
`parse_choice(key)`.

## Limitations

- Scores are not saved between games; there is no high-score table.
- The snake's `speed` value is tracked but does not change how fast the game
  runs; every game uses a fixed frame delay.

## Running the tests

```
pip install ".[test]"
pytest
```