import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from labyrinth.core.errors import InvalidMarker, MazeComplete, OutOfBounds, WallBlocked
from labyrinth.core.grid import Coordinate, Grid

logger = logging.getLogger(__name__)


class NavigatorState(Enum):
    IN_TRANSIT = "in_transit"
    VICTORIOUS = "victorious"


@dataclass(frozen=True)
class Survey:
    """Wall report for one cell. True means a wall is present."""
    north: bool
    south: bool
    east: bool
    west: bool
    victory: bool = False

    @classmethod
    def from_cell(cls, grid: Grid, x: int, y: int, victory: bool = False) -> "Survey":
        walls = grid.survey(x, y)
        return cls(walls[Grid.NORTH], walls[Grid.SOUTH], walls[Grid.EAST], walls[Grid.WEST], victory)

    def blocked(self, direction: int) -> bool:
        return {
            Grid.NORTH: self.north,
            Grid.SOUTH: self.south,
            Grid.EAST: self.east,
            Grid.WEST: self.west,
        }[direction]

    def __getitem__(self, direction: int) -> bool:
        return self.blocked(direction)

    def as_dict(self) -> Dict[str, bool]:
        # Screen-oriented names used on the wire
        return {"top": self.north, "right": self.east, "bottom": self.south, "left": self.west}


class Navigator:
    """
    Walks one agent through a finished grid. The grid is only read, never
    mutated, once the start and treasure markers are in place.
    """

    def __init__(self, grid: Grid, start: Coordinate, goal: Coordinate):
        self.grid = grid
        self.start = tuple(start)
        self.goal = tuple(goal)
        self.position = self.start
        self.steps_taken = 0

    @property
    def state(self) -> NavigatorState:
        if self.position == self.goal:
            return NavigatorState.VICTORIOUS
        return NavigatorState.IN_TRANSIT

    @property
    def is_victorious(self) -> bool:
        return self.state is NavigatorState.VICTORIOUS

    def current_survey(self) -> Survey:
        x, y = self.position
        if self.is_victorious:
            logger.info("Victory achieved in %d steps", self.steps_taken)
            return Survey.from_cell(self.grid, x, y, victory=True)
        return Survey.from_cell(self.grid, x, y)

    def move(self, direction: int):
        survey = self.current_survey()
        if survey.victory:
            raise MazeComplete(f"Treasure already found in {self.steps_taken} steps")
        if survey.blocked(direction):
            raise WallBlocked(Grid.DIRECTION_NAMES[direction])

        x, y = self.position
        nx, ny = x + Grid.DX[direction], y + Grid.DY[direction]
        # Consistent wall data never gets here, an open wall always has a neighbour
        if not self.grid.in_bounds(nx, ny):
            raise OutOfBounds(nx, ny)

        self.position = (nx, ny)
        self.steps_taken += 1

    def move_north(self):
        self.move(Grid.NORTH)

    def move_south(self):
        self.move(Grid.SOUTH)

    def move_east(self):
        self.move(Grid.EAST)

    def move_west(self):
        self.move(Grid.WEST)


def new_navigator(grid: Grid, start: Coordinate, goal: Coordinate) -> Navigator:
    """Places the start and treasure markers on `grid` and returns a fresh navigator."""
    grid.get_index(*start)
    grid.get_index(*goal)
    if tuple(start) == tuple(goal):
        raise InvalidMarker("can't have the treasure at the start")
    grid.clear_markers()
    grid.mark_start(*start)
    grid.mark_treasure(*goal)
    return Navigator(grid, start, goal)
