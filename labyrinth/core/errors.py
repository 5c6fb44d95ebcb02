class MazeError(Exception):
    """Base class for every error raised by the labyrinth core."""


class OutOfBounds(MazeError, IndexError):
    def __init__(self, x: int, y: int):
        super().__init__(f"Coordinate ({x}, {y}) out of bounds")
        self.x = x
        self.y = y


class WallBlocked(MazeError):
    def __init__(self, direction_name: str):
        super().__init__(f"Can't walk through walls ({direction_name})")
        self.direction_name = direction_name


class InvalidMarker(MazeError, ValueError):
    pass


class DegenerateGrid(MazeError, ValueError):
    pass


class MazeComplete(MazeError):
    """Raised when a move is issued after the treasure has been reached."""


class NoActiveMaze(MazeError):
    pass
