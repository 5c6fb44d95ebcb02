from typing import List, Optional

from labyrinth.core.grid import Coordinate, Grid

AGENT = "@"
START = "S"
TREASURE = "T"


def cell_label(grid: Grid, x: int, y: int, agent: Optional[Coordinate] = None) -> str:
    if agent is not None and (x, y) == tuple(agent):
        return AGENT
    cell = grid.cell_at(x, y)
    if cell.is_treasure:
        return TREASURE
    if cell.is_start:
        return START
    return " "


def render(grid: Grid, agent: Optional[Coordinate] = None) -> str:
    """
    Text picture of the maze, three characters per cell:

        +---+---+
        | S     |
        +   +---+
        |     T |
        +---+---+
    """
    lines: List[str] = []

    top = "+"
    for x in range(grid.width):
        top += ("---" if grid.has_wall(x, 0, Grid.NORTH) else "   ") + "+"
    lines.append(top)

    for y in range(grid.height):
        row = "|" if grid.has_wall(0, y, Grid.WEST) else " "
        below = "+"
        for x in range(grid.width):
            row += f" {cell_label(grid, x, y, agent)} "
            row += "|" if grid.has_wall(x, y, Grid.EAST) else " "
            below += ("---" if grid.has_wall(x, y, Grid.SOUTH) else "   ") + "+"
        lines.append(row)
        lines.append(below)

    return "\n".join(lines)
