from typing import Iterator, List, Tuple

from labyrinth.core.grid import Grid
from labyrinth.algo.base import Generator


class RecursiveBacktracker(Generator):
    """
    Depth-first carving from (0,0). Each cell tries its four directions in a
    shuffled order, descending into every unvisited neighbour before moving on
    to the next direction. An explicit stack stands in for the call stack.
    """

    def carve(self) -> Iterator[str]:
        rng = self.rng

        # Start at (0,0)
        start_x, start_y = 0, 0
        self.grid.set_visited(start_x, start_y)

        # Stack of (x, y, directions still to try)
        stack: List[Tuple[int, int, List[int]]] = [
            (start_x, start_y, rng.sample(Grid.SCAN_ORDER, 4))
        ]

        while stack:
            cx, cy, directions = stack[-1]

            if not directions:
                # Backtrack
                stack.pop()
                continue

            dir_bit = directions.pop()
            nx, ny = cx + Grid.DX[dir_bit], cy + Grid.DY[dir_bit]
            if not self.grid.in_bounds(nx, ny) or self.grid.is_visited(nx, ny):
                continue

            self.grid.carve_path(cx, cy, dir_bit)
            self.grid.set_visited(nx, ny)
            stack.append((nx, ny, rng.sample(Grid.SCAN_ORDER, 4)))
            self.step_count += 1

            # Yield every N steps to keep UI responsive without spamming
            if self.step_count % 100 == 0:
                yield f"Carving... Stack: {len(stack)}"
