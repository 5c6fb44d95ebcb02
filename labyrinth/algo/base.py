import logging
import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from labyrinth.core.errors import DegenerateGrid
from labyrinth.core.grid import Grid

logger = logging.getLogger(__name__)


class Generator(ABC):
    # Carving algorithms start closed, additive ones start open
    START_OPEN = False

    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        if width < 1 or height < 1:
            raise DegenerateGrid(f"Cannot generate a {width}x{height} maze")
        self.seed = seed
        self.rng = random.Random(seed)
        self.grid = Grid.open(width, height) if self.START_OPEN else Grid.closed(width, height)
        self.step_count = 0

    @property
    def is_linear(self) -> bool:
        return self.grid.width == 1 or self.grid.height == 1

    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        if self.is_linear:
            # Nothing to choose on a single row or column
            self.grid.open_corridor()
            self.grid.close_borders()
            yield "Done"
            return

        yield from self.carve()
        self.grid.reset_visited()
        yield "Done"

    @abstractmethod
    def carve(self) -> Iterator[str]:
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        logger.debug("%s finished %dx%d in %d steps",
                     type(self).__name__, self.grid.width, self.grid.height, self.step_count)

    def generate(self) -> Grid:
        self.run_all()
        return self.grid
