from dataclasses import dataclass
from typing import Iterator, List, Tuple

from labyrinth.core.grid import Grid
from labyrinth.algo.base import Generator

HORIZONTAL = 1
VERTICAL = 2


@dataclass(frozen=True)
class Division:
    """
    One wall line placed by the divider.
    HORIZONTAL: south walls of row `line`, columns start..start+length-1.
    VERTICAL: east walls of column `line`, rows start..start+length-1.
    `gap` is the single column (or row) left open.
    """
    orientation: int
    line: int
    start: int
    length: int
    gap: int

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yields (x, y, wall_bit) for every cell along the line."""
        for offset in range(self.start, self.start + self.length):
            if self.orientation == HORIZONTAL:
                yield offset, self.line, Grid.SOUTH
            else:
                yield self.line, offset, Grid.EAST


class RecursiveDivision(Generator):
    START_OPEN = True

    def __init__(self, width: int, height: int, seed: int = None):
        super().__init__(width, height, seed)
        self.divisions: List[Division] = []

    def choose_orientation(self, width: int, height: int) -> int:
        if width < height:
            return HORIZONTAL
        if width > height:
            return VERTICAL
        return HORIZONTAL if self.rng.randrange(2) == 0 else VERTICAL

    def carve(self) -> Iterator[str]:
        rng = self.rng
        grid = self.grid

        # Regions waiting to be split: (x, y, width, height)
        regions: List[Tuple[int, int, int, int]] = [(0, 0, grid.width, grid.height)]

        while regions:
            x, y, width, height = regions.pop()
            if width < 2 or height < 2:
                continue

            if self.choose_orientation(width, height) == HORIZONTAL:
                wy = y + rng.randrange(height - 1)
                px = x + rng.randrange(width)
                division = Division(HORIZONTAL, wy, x, width, px)
                top = (x, y, width, wy - y + 1)
                bottom = (x, wy + 1, width, y + height - wy - 1)
                regions.append(bottom)
                regions.append(top)
            else:
                wx = x + rng.randrange(width - 1)
                py = y + rng.randrange(height)
                division = Division(VERTICAL, wx, y, height, py)
                left = (x, y, wx - x + 1, height)
                right = (wx + 1, y, x + width - wx - 1, height)
                regions.append(right)
                regions.append(left)

            for cx, cy, wall in division.cells():
                if (cx if division.orientation == HORIZONTAL else cy) != division.gap:
                    grid.build_wall(cx, cy, wall)
            self.divisions.append(division)
            self.step_count += 1

            if self.step_count % 100 == 0:
                yield f"Dividing... Regions: {len(regions)}"

        # All four borders, so the maze is enclosed like the carved ones
        grid.close_borders()
