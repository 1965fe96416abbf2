# almondkit

Building blocks for small games and simulations, using only the Python
standard library.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest for running the tests
```

## What is inside

| Module | What it gives you |
| --- | --- |
| `almondkit.version` | `get_major()`, `get_minor()`, `get_revision()`, `get_engine_version()` (returns `"0.1.4"`) |
| `almondkit.coroutine` | `Coroutine`: step a generator with `resume()`, read `current_value()`, check `done` |
| `almondkit.logger` | `LogLevel` (`INFO`, `WARN`, `ERROR`), `Logger`, `default_time_source()`, `get_instance()` |
| `almondkit.texturepool` | `TexturePool` and the shared-pool helpers `load_texture()`, `release_texture()`, `clear()` |
| `almondkit.threadpool` | `ThreadPool`: worker threads that drain their queue before stopping |
| `almondkit.plugins` | `Plugin` interface, `ExampleMod`, and `PluginManager` |
| `almondkit.fps` | `FPS` frame counter, `run_fps_counter()`, `load_fps_scene()` |
| `almondkit.life` | `CellularAutomaton`: Conway's Game of Life on a bounded grid |
| `almondkit.entity` | `Entity` with position history and rewind, backed by `HistoryManager` and `State` |
| `almondkit.sandsim` | `SandSimulation`: a falling-sand grid |
| `almondkit.snake` | `SnakeGame` on a cell grid with wrap-around, `Direction`, `Point` |
| `almondkit.tilesnake` | Tile-based `Game` with `Snake`, `Food`, `Direction`, `Position` |

Random sources are passed in explicitly wherever randomness is used
(`randomize(rng)`, `SnakeGame(..., rng)`, `Game(rng)`, `Food.respawn(..., rng)`),
so runs can be replayed exactly with a seeded `random.Random`.

## Examples

### Coroutines

```python
from almondkit.coroutine import Coroutine

def ticks():
    for i in range(3):
        yield i

co = Coroutine(ticks())
while co.resume():
    print(co.current_value())
```

The generator does not start until the first `resume()`. An exception raised
inside it comes out of `resume()`, and the coroutine then counts as done.
`current_value()` raises `RuntimeError` once the coroutine has finished.

### Logging

```python
from almondkit.logger import Logger, LogLevel

with Logger("game.log", level=LogLevel.WARN) as log:
    log.log("dropped, below the threshold")
    log.log("low memory", LogLevel.WARN)
```

Each line is written as `<time> [LEVEL] - <message>`. The directory of the log
file must already exist, otherwise `FileNotFoundError` is raised.
`get_instance(filename)` returns one shared logger, created on the first call.

### Thread pool

Leaving the `with` block stops the workers after they have run every queued
job:

```python
from almondkit.threadpool import ThreadPool

results = []
with ThreadPool(4) as pool:
    for n in range(10):
        pool.enqueue(lambda n=n: results.append(n * n))
```

Exceptions raised by jobs are reported through the standard `logging` module
and do not stop the worker. Enqueuing after `shutdown()` raises `RuntimeError`.

### Plugins

```python
from almondkit.logger import Logger
from almondkit.plugins import ExampleMod, PluginManager

with Logger("plugins.log") as log:
    manager = PluginManager(log)
    manager.load_plugin(ExampleMod)   # prints "ExampleMod initialized!"
    manager.unload_all_plugins()      # prints "ExampleMod shutting down!"
```

`load_plugin` takes a factory that returns a plugin. Any object with callable
`initialize` and `shutdown` methods counts as a `Plugin`. It returns `False`,
and logs the reason, when the factory is missing or produces no plugin.
Plugins are shut down in the reverse of the order they were loaded.

### Entities with history

```python
from almondkit.entity import Entity

hero = Entity("entity.log", entity_id=1, x=0.0, y=0.0)
hero.move(2.0, 3.0)
hero.rewind()            # back to (0, 0); returns False when there is no history
print(hero.describe())   # "Entity 1 Position: (0, 0)"
hero.close()
```

The history keeps the last 100 positions. `clone()` makes a new entity with
the same id, position and log file, but an empty history.

### Falling sand

```python
import random
from almondkit.sandsim import SandSimulation

sim = SandSimulation(40, 30)
sim.randomize(random.Random(1))
sim.add_sand_at(20, 0, 1)
sim.update()
print(sim.active_particles())
```

Grains fall straight down, else diagonally left, else diagonally right.
`resize(width, height)` keeps the cells still inside the new size.

### Game of Life

```python
from almondkit.life import CellularAutomaton

life = CellularAutomaton(5, 5)
for x in (1, 2, 3):
    life.set_alive(x, 2, True)
life.update()
print(life.is_alive(2, 1), life.is_alive(2, 3))   # True True
```

Cells outside the grid count as dead.

### Snake

```python
import random
from almondkit.snake import Direction, SnakeGame

game = SnakeGame(20, 15, random.Random(7))
game.update_direction(Direction.DOWN)
game.update(0.1)   # moves once 0.1 seconds have built up
print(game.head, game.food)
```

`almondkit.tilesnake.Game` is a variant on an 800x600 screen of 20-pixel
tiles: call `handle_key(direction)` to steer and `update()` once per step;
`update()` returns `True` when the snake ran into itself and the game reset.

### Frame counter

`FPS(clock)` counts `update()` calls and publishes the count in `fps` once
more than a second has passed. `load_fps_scene(thread_count)` runs
`run_fps_counter()` once on each of several threads and returns the shared
counter.

## What it does not do

- There is no window, renderer or input handling: the simulations and games
  hold their state and rules only, and drawing them is left to the caller.
- There is no engine main loop and no command-line program to run.
- Plugins are Python factories passed to `PluginManager.load_plugin`; shared
  libraries are not loaded from disk.
- `TexturePool` does not read image files: a pooled texture is the string
  `"Texture: <path>"`, cached per path.