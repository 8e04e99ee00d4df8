"""Driver loop around the ant engine."""

import time
from contextlib import contextmanager

from .ant import Ant, Direction
from .config import SimConfig
from .grid import AntGrid
from . import render


class Simulation:
    """One run: a grid, an ant on it and the loop that steps the ant.

    Observers are called with the simulation after every step, and once
    before the first step, so a display can show the starting state.
    """

    def __init__(self, config: SimConfig = None):
        """Build the grid and ant described by `config`."""
        if config is None:
            config = SimConfig()
        config.validate()
        self.config = config

        self.grid = AntGrid(config.width, config.height)
        self.ant = Ant(config.start, Direction.parse(config.direction), config.steps, self.grid)
        self.steps_taken = 0
        self.debug = config.debug
        self._observers = []

    def subscribe(self, callback) -> None:
        """Call `callback(sim)` after every step."""
        self._observers.append(callback)

    def unsubscribe(self, callback) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    @contextmanager
    def observe(self, callback):
        """Subscribe `callback` for the duration of a `with` block."""
        self.subscribe(callback)
        try:
            yield self
        finally:
            self.unsubscribe(callback)

    def _notify(self) -> None:
        for callback in list(self._observers):
            callback(self)

    def step(self) -> bool:
        """Advance one tick. Return False if the ant had no steps left."""
        if self.ant.finished:
            return False
        self.ant.step()
        self.steps_taken += 1

        if self.debug:
            x, y = self.ant.position
            print(
                f"t={self.steps_taken} pos=({x},{y}) dir={self.ant.direction.name} "
                f"steps_left={self.ant.steps_left} black={self.grid.count()}"
            )
        self._notify()
        return True

    def run(self, delay=None, max_steps=None) -> int:
        """Step until the ant runs out of steps, is stopped or `max_steps` is hit.

        `delay` (seconds, defaults to the config value) is slept between
        steps. Returns the number of steps taken by this call.
        """
        if delay is None:
            delay = self.config.delay

        taken = 0
        self._notify()
        while self.ant.steps_left > 0:
            if max_steps is not None and taken >= max_steps:
                break
            if delay and taken:
                time.sleep(delay)
            self.step()
            taken += 1
        return taken

    def stop(self) -> None:
        """End the run; takes effect before the next step."""
        self.ant.steps_left = 0

    def snapshot(self) -> str:
        return self.grid.to_string(self.ant)

    def save_image(self, out_path, title=None):
        """Save the current grid and ant as an image."""
        render.save_image(self.grid, self.ant, out_path, title=title)
