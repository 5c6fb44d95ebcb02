from typing import Iterator, List, Set

from labyrinth.core.grid import Grid
from labyrinth.algo.base import Generator


class PrimsAlgorithm(Generator):
    def carve(self) -> Iterator[str]:
        rng = self.rng
        grid = self.grid
        w = grid.width

        # Included cells carry the VISITED bit
        start_x = rng.randrange(grid.width)
        start_y = rng.randrange(grid.height)
        grid.set_visited(start_x, start_y)

        # Frontier cells by id. The list gives O(1) random pick, the set O(1) lookup.
        frontier_list: List[int] = []
        frontier_set: Set[int] = set()

        def add_frontier(cx: int, cy: int):
            for nx, ny, _ in grid.neighbors(cx, cy):
                cell_id = ny * w + nx
                if not grid.is_visited(nx, ny) and cell_id not in frontier_set:
                    frontier_set.add(cell_id)
                    frontier_list.append(cell_id)

        add_frontier(start_x, start_y)

        while frontier_list:
            # Pick random cell from frontier, swap remove for O(1)
            idx = rng.randrange(len(frontier_list))
            cell_id = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.remove(cell_id)

            cx, cy = grid.get_coordinate(cell_id)
            grid.set_visited(cx, cy)

            # Connect to the first included neighbour in N, W, S, E order
            for nx, ny, dir_bit in grid.neighbors(cx, cy, Grid.SCAN_ORDER):
                if grid.is_visited(nx, ny):
                    grid.carve_path(cx, cy, dir_bit)
                    self.step_count += 1
                    break

            add_frontier(cx, cy)

            if self.step_count % 100 == 0:
                yield f"Frontier: {len(frontier_list)}"
