import unittest
import sys
import os
from collections import deque

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.core.errors import InvalidMarker, MazeComplete, OutOfBounds, WallBlocked
from labyrinth.core.grid import Grid
from labyrinth.core.navigator import Navigator, NavigatorState, Survey, new_navigator
from labyrinth.algo.dfs import RecursiveBacktracker
from labyrinth.algo.kruskal import KruskalsAlgorithm

DIRECTIONS = (Grid.NORTH, Grid.WEST, Grid.SOUTH, Grid.EAST)


def shortest_moves(grid: Grid, start, goal):
    """BFS over open passages, returns the list of direction bits from start to goal."""
    parents = {start: None}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        if (x, y) == goal:
            break
        for nx, ny, d in grid.neighbors(x, y):
            if not grid.has_wall(x, y, d) and (nx, ny) not in parents:
                parents[(nx, ny)] = ((x, y), d)
                queue.append((nx, ny))

    moves = []
    cur = goal
    while parents[cur] is not None:
        cur, d = parents[cur]
        moves.append(d)
    moves.reverse()
    return moves


class TestNavigator(unittest.TestCase):
    def create_corridor(self):
        # 3x1 corridor: (0,0) - (1,0) - (2,0)
        grid = Grid(3, 1)
        grid.carve_path(0, 0, Grid.EAST)
        grid.carve_path(1, 0, Grid.EAST)
        return grid

    def test_initial_state(self):
        nav = new_navigator(self.create_corridor(), (0, 0), (2, 0))
        self.assertEqual(nav.position, (0, 0))
        self.assertEqual(nav.steps_taken, 0)
        self.assertEqual(nav.state, NavigatorState.IN_TRANSIT)

        survey = nav.current_survey()
        self.assertEqual(survey, Survey(north=True, south=True, east=False, west=True))
        self.assertFalse(survey.victory)

    def test_markers_placed(self):
        grid = self.create_corridor()
        new_navigator(grid, (0, 0), (2, 0))
        self.assertEqual(grid.start, (0, 0))
        self.assertEqual(grid.treasure, (2, 0))

        # A second session on the same grid moves the markers
        new_navigator(grid, (2, 0), (1, 0))
        self.assertEqual(grid.start, (2, 0))
        self.assertEqual(grid.treasure, (1, 0))

    def test_invalid_construction(self):
        grid = self.create_corridor()
        with self.assertRaises(InvalidMarker):
            new_navigator(grid, (1, 0), (1, 0))
        with self.assertRaises(OutOfBounds):
            new_navigator(grid, (3, 0), (1, 0))
        with self.assertRaises(OutOfBounds):
            new_navigator(grid, (0, 0), (0, -1))

    def test_move_and_victory(self):
        nav = new_navigator(self.create_corridor(), (0, 0), (2, 0))
        nav.move_east()
        self.assertEqual(nav.position, (1, 0))
        self.assertEqual(nav.steps_taken, 1)
        self.assertFalse(nav.current_survey().victory)

        nav.move(Grid.EAST)
        self.assertEqual(nav.steps_taken, 2)
        self.assertTrue(nav.current_survey().victory)
        self.assertEqual(nav.state, NavigatorState.VICTORIOUS)

        with self.assertRaises(MazeComplete):
            nav.move_west()
        self.assertEqual(nav.position, (2, 0))
        self.assertEqual(nav.steps_taken, 2)

    def test_wall_blocked(self):
        nav = new_navigator(self.create_corridor(), (1, 0), (2, 0))
        with self.assertRaises(WallBlocked):
            nav.move_north()
        with self.assertRaises(WallBlocked):
            nav.move_south()
        self.assertEqual(nav.position, (1, 0))
        self.assertEqual(nav.steps_taken, 0)

    def test_out_of_bounds_defense(self):
        # Inconsistent wall data: border wall missing
        grid = Grid(2, 2)
        grid.remove_wall(0, 0, Grid.WEST)
        nav = Navigator(grid, (0, 0), (1, 1))
        with self.assertRaises(OutOfBounds):
            nav.move_west()
        self.assertEqual(nav.position, (0, 0))
        self.assertEqual(nav.steps_taken, 0)

    def test_boundary_rejection(self):
        grid = KruskalsAlgorithm(4, 4, seed=2).generate()
        for start, d in [((0, 0), Grid.NORTH), ((0, 0), Grid.WEST),
                         ((3, 3), Grid.SOUTH), ((3, 3), Grid.EAST)]:
            nav = new_navigator(grid, start, (1, 1))
            with self.assertRaises((WallBlocked, OutOfBounds)):
                nav.move(d)
            self.assertEqual(nav.position, start)
            self.assertEqual(nav.steps_taken, 0)

    def test_move_matches_survey(self):
        grid = RecursiveBacktracker(6, 6, seed=11).generate()
        for y in range(6):
            for x in range(6):
                goal = (5, 5) if (x, y) != (5, 5) else (0, 0)
                for d in DIRECTIONS:
                    nav = new_navigator(grid, (x, y), goal)
                    blocked = nav.current_survey()[d]
                    try:
                        nav.move(d)
                        moved = True
                    except (WallBlocked, OutOfBounds):
                        moved = False
                    self.assertEqual(moved, not blocked)
                    if moved:
                        self.assertEqual(nav.position, (x + Grid.DX[d], y + Grid.DY[d]))
                        self.assertEqual(nav.steps_taken, 1)
                    else:
                        self.assertEqual(nav.position, (x, y))
                        self.assertEqual(nav.steps_taken, 0)

    def test_survey_indexing(self):
        survey = Survey(north=True, south=False, east=True, west=False)
        self.assertTrue(survey[Grid.NORTH])
        self.assertFalse(survey[Grid.SOUTH])
        self.assertTrue(survey[Grid.EAST])
        self.assertFalse(survey[Grid.WEST])

    def test_rejected_navigator_keeps_markers(self):
        grid = self.create_corridor()
        new_navigator(grid, (0, 0), (2, 0))
        with self.assertRaises(InvalidMarker):
            new_navigator(grid, (1, 0), (1, 0))
        self.assertEqual((grid.start, grid.treasure), ((0, 0), (2, 0)))

        with self.assertRaises(OutOfBounds):
            new_navigator(grid, (1, 0), (5, 0))
        self.assertEqual((grid.start, grid.treasure), ((0, 0), (2, 0)))

    def test_survey_as_dict(self):
        survey = Survey(north=True, south=False, east=True, west=False)
        self.assertEqual(survey.as_dict(), {"top": True, "right": True, "bottom": False, "left": False})

    def test_backtracker_2x2_scenario(self):
        grid = RecursiveBacktracker(2, 2, seed=2024).generate()
        self.assertEqual(grid.count_open_passages(), 3)

        nav = new_navigator(grid, (0, 0), (1, 1))
        for d in shortest_moves(grid, (0, 0), (1, 1)):
            nav.move(d)
        self.assertEqual(nav.steps_taken, 2)
        self.assertTrue(nav.current_survey().victory)

    def test_kruskal_5x5_scenario(self):
        grid = KruskalsAlgorithm(5, 5, seed=99).generate()
        nav = new_navigator(grid, (0, 0), (4, 4))
        for d in shortest_moves(grid, (0, 0), (4, 4)):
            self.assertFalse(nav.current_survey().blocked(d))
            nav.move(d)
        self.assertGreaterEqual(nav.steps_taken, 8)
        self.assertEqual(nav.position, (4, 4))
        self.assertEqual(nav.state, NavigatorState.VICTORIOUS)

    def test_victory_regardless_of_path(self):
        # 2x2 open ring: two different routes to (1,1)
        grid = Grid(2, 2)
        grid.carve_path(0, 0, Grid.EAST)
        grid.carve_path(0, 0, Grid.SOUTH)
        grid.carve_path(1, 0, Grid.SOUTH)
        grid.carve_path(0, 1, Grid.EAST)

        for route in ([Grid.EAST, Grid.SOUTH], [Grid.SOUTH, Grid.EAST],
                      [Grid.EAST, Grid.WEST, Grid.SOUTH, Grid.EAST]):
            nav = new_navigator(grid, (0, 0), (1, 1))
            for d in route:
                nav.move(d)
            self.assertTrue(nav.current_survey().victory)
            self.assertEqual(nav.steps_taken, len(route))


if __name__ == '__main__':
    unittest.main()
