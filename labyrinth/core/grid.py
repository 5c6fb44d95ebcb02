from array import array
from typing import Dict, Iterator, Optional, Sequence, Tuple

from labyrinth.core.errors import DegenerateGrid, InvalidMarker, OutOfBounds

Coordinate = Tuple[int, int]


class Grid:
    # Bitmask Constants
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    # Flags
    VISITED  = 0b00010000  # generation scratch only
    START    = 0b00100000
    TREASURE = 0b01000000

    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Direction Helpers
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}
    DIRECTION_NAMES = {NORTH: "north", SOUTH: "south", EAST: "east", WEST: "west"}

    # Fixed neighbour scan order. Prim's tie-break depends on it.
    SCAN_ORDER = (NORTH, WEST, SOUTH, EAST)

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int, walls: bool = True):
        if width < 1 or height < 1:
            raise DegenerateGrid(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        # one byte of flags per cell, indexed by y * width + x
        fill = self.ALL_WALLS if walls else 0
        self.cells = array('B', [fill] * (width * height))

    @classmethod
    def closed(cls, width: int, height: int) -> "Grid":
        """All four walls on every cell. Starting point for carving algorithms."""
        return cls(width, height, walls=True)

    @classmethod
    def open(cls, width: int, height: int) -> "Grid":
        """No walls at all. Starting point for additive algorithms."""
        return cls(width, height, walls=False)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise OutOfBounds(x, y)

    def get_coordinate(self, idx: int) -> Coordinate:
        return idx % self.width, idx // self.width

    def cell_at(self, x: int, y: int) -> "Cell":
        return Cell(self, self.get_index(x, y))

    # Single-cell wall primitives. Callers keep the neighbour in sync.

    def remove_wall(self, x: int, y: int, dir_bit: int):
        self.cells[self.get_index(x, y)] &= ~dir_bit

    def add_wall(self, x: int, y: int, dir_bit: int):
        self.cells[self.get_index(x, y)] |= dir_bit

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Removes the wall between current cell (x,y) and the neighbor in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        x2, y2 = x1 + self.DX[dir_bit], y1 + self.DY[dir_bit]
        if not self.in_bounds(x2, y2):
            raise OutOfBounds(x2, y2)

        self.remove_wall(x1, y1, dir_bit)
        self.remove_wall(x2, y2, self.OPPOSITE[dir_bit])

    def build_wall(self, x: int, y: int, dir_bit: int):
        """Adds a wall on (x,y) and, when the neighbor exists, on its facing side."""
        self.add_wall(x, y, dir_bit)

        nx, ny = x + self.DX[dir_bit], y + self.DY[dir_bit]
        if self.in_bounds(nx, ny):
            self.add_wall(nx, ny, self.OPPOSITE[dir_bit])

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[self.get_index(x, y)] & dir_bit) != 0

    def close_borders(self):
        for x in range(self.width):
            self.add_wall(x, 0, self.NORTH)
            self.add_wall(x, self.height - 1, self.SOUTH)
        for y in range(self.height):
            self.add_wall(0, y, self.WEST)
            self.add_wall(self.width - 1, y, self.EAST)

    def open_corridor(self):
        """Removes every internal wall. Used for 1xN and Nx1 grids."""
        for y in range(self.height):
            for x in range(self.width):
                if x < self.width - 1:
                    self.carve_path(x, y, self.EAST)
                if y < self.height - 1:
                    self.carve_path(x, y, self.SOUTH)

    def set_visited(self, x: int, y: int, visited: bool = True):
        idx = self.get_index(x, y)
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.VISITED) != 0

    def reset_visited(self):
        mask = ~self.VISITED & 0xFF
        for i in range(len(self.cells)):
            self.cells[i] &= mask

    # Markers

    def _find_flag(self, flag: int) -> Optional[Coordinate]:
        for i, val in enumerate(self.cells):
            if val & flag:
                return self.get_coordinate(i)
        return None

    def _place_marker(self, x: int, y: int, flag: int, conflict: int, message: str):
        idx = self.get_index(x, y)
        if self.cells[idx] & conflict:
            raise InvalidMarker(message)
        previous = self._find_flag(flag)
        if previous is not None:
            self.cells[self.get_index(*previous)] &= ~flag
        self.cells[idx] |= flag

    def mark_start(self, x: int, y: int):
        self._place_marker(x, y, self.START, self.TREASURE, "can't start in the treasure")

    def mark_treasure(self, x: int, y: int):
        self._place_marker(x, y, self.TREASURE, self.START, "can't have the treasure at the start")

    def clear_markers(self):
        mask = ~(self.START | self.TREASURE) & 0xFF
        for i in range(len(self.cells)):
            self.cells[i] &= mask

    @property
    def start(self) -> Optional[Coordinate]:
        return self._find_flag(self.START)

    @property
    def treasure(self) -> Optional[Coordinate]:
        return self._find_flag(self.TREASURE)

    # Topology

    def neighbors(self, x: int, y: int, order: Sequence[int] = SCAN_ORDER) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        for dir_bit in order:
            nx, ny = x + self.DX[dir_bit], y + self.DY[dir_bit]
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield (nx, ny, dir_bit)

    def open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[self.get_index(x, y)]
        for nx, ny, dir_bit in self.neighbors(x, y):
            if not (val & dir_bit):
                yield (nx, ny)

    def survey(self, x: int, y: int) -> Dict[int, bool]:
        val = self.cells[self.get_index(x, y)]
        return {d: bool(val & d) for d in self.SCAN_ORDER}

    def count_open_passages(self) -> int:
        """Number of internal walls that have been removed (east and south sides only)."""
        count = 0
        for y in range(self.height):
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                if x < self.width - 1 and not (val & self.EAST):
                    count += 1
                if y < self.height - 1 and not (val & self.SOUTH):
                    count += 1
        return count


class Cell:
    """Read-only view of one grid cell. Holds the grid and the cell id, never a copy."""

    __slots__ = ('grid', 'index')

    def __init__(self, grid: Grid, index: int):
        self.grid = grid
        self.index = index

    @property
    def coordinate(self) -> Coordinate:
        return self.grid.get_coordinate(self.index)

    def _flag(self, bit: int) -> bool:
        return (self.grid.cells[self.index] & bit) != 0

    @property
    def north(self) -> bool:
        return self._flag(Grid.NORTH)

    @property
    def south(self) -> bool:
        return self._flag(Grid.SOUTH)

    @property
    def east(self) -> bool:
        return self._flag(Grid.EAST)

    @property
    def west(self) -> bool:
        return self._flag(Grid.WEST)

    @property
    def visited(self) -> bool:
        return self._flag(Grid.VISITED)

    @property
    def is_start(self) -> bool:
        return self._flag(Grid.START)

    @property
    def is_treasure(self) -> bool:
        return self._flag(Grid.TREASURE)

    def walls(self) -> int:
        return self.grid.cells[self.index] & Grid.ALL_WALLS

    def __repr__(self):
        x, y = self.coordinate
        return f"Cell({x}, {y}, walls={self.walls():04b})"


_ALIASES = {
    "north": Grid.NORTH, "n": Grid.NORTH, "up": Grid.NORTH,
    "south": Grid.SOUTH, "s": Grid.SOUTH, "down": Grid.SOUTH,
    "east": Grid.EAST, "e": Grid.EAST, "right": Grid.EAST,
    "west": Grid.WEST, "w": Grid.WEST, "left": Grid.WEST,
}


def parse_direction(name: str) -> int:
    try:
        return _ALIASES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown direction: {name!r}") from None
