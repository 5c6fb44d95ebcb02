from typing import Iterator, List, Tuple

from labyrinth.core.grid import Grid
from labyrinth.core.union_find import UnionFind
from labyrinth.algo.base import Generator


class KruskalsAlgorithm(Generator):
    def carve(self) -> Iterator[str]:
        grid = self.grid
        w, h = grid.width, grid.height
        sets = UnionFind(w * h)

        # Every internal wall exactly once: the east and south side of each cell
        edges: List[Tuple[int, int, int]] = []
        for y in range(h):
            for x in range(w):
                if x < w - 1:
                    edges.append((x, y, Grid.EAST))
                if y < h - 1:
                    edges.append((x, y, Grid.SOUTH))
        self.rng.shuffle(edges)

        for processed, (x, y, dir_bit) in enumerate(edges, 1):
            a = y * w + x
            b = (y + Grid.DY[dir_bit]) * w + x + Grid.DX[dir_bit]

            # Joining two cells of the same set would close a loop
            if not sets.connected(a, b):
                sets.union(a, b)
                grid.carve_path(x, y, dir_bit)
                self.step_count += 1

            if processed % 100 == 0:
                yield f"Edges: {processed}/{len(edges)} Sets: {sets.set_count}"
