import logging
from typing import Optional

import pygame

from labyrinth.algo.base import Generator
from labyrinth.core.errors import MazeError
from labyrinth.core.grid import Grid
from labyrinth.core.session import Session

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Grid.NORTH,
    pygame.K_w: Grid.NORTH,
    pygame.K_DOWN: Grid.SOUTH,
    pygame.K_s: Grid.SOUTH,
    pygame.K_RIGHT: Grid.EAST,
    pygame.K_d: Grid.EAST,
    pygame.K_LEFT: Grid.WEST,
    pygame.K_a: Grid.WEST,
}


def key_to_direction(key: int) -> Optional[int]:
    return KEY_DIRECTIONS.get(key)


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160)  # Blue tint
    COLOR_START = (60, 160, 90)
    COLOR_TREASURE = (255, 215, 0)  # Gold
    COLOR_AGENT = (220, 60, 60)

    def __init__(self, grid: Optional[Grid] = None, generator: Optional[Generator] = None,
                 session: Optional[Session] = None, width=1280, height=720):
        self.generator = generator
        self.session = session
        if grid is None and generator is not None:
            grid = generator.grid
        self.grid = grid
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None
        self.message = ""

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        total_maze_w = self.grid.width * self.cell_size
        total_maze_h = self.grid.height * self.cell_size
        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        if self.session is not None and self.grid is None:
            self.session.awake()
            self.grid = self.session.grid
        pygame.display.set_caption(f"Labyrinth - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_n and self.session is not None:
                    self.session.awake()
                    self.grid = self.session.grid
                    self.message = "New maze"
                    self.fit_to_screen()
                else:
                    self.handle_move(event.key)

    def handle_move(self, key: int):
        direction = key_to_direction(key)
        if direction is None or self.session is None:
            return
        try:
            survey = self.session.move(direction)
        except MazeError as e:
            self.message = str(e)
            return
        if survey.victory:
            self.message = f"Victory achieved in {self.session.navigator.steps_taken} steps"
        else:
            self.message = ""

    def fill_cell(self, x: int, y: int, color):
        sx, sy = self.world_to_screen(x, y)
        size = int(self.cell_size) + 1
        pygame.draw.rect(self.surface, color, (int(sx), int(sy), size, size))

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        grid = self.grid

        # Pass 1 - Backgrounds
        for y in range(grid.height):
            for x in range(grid.width):
                cell = grid.cells[y * grid.width + x]
                if cell & Grid.VISITED:
                    self.fill_cell(x, y, self.COLOR_VISITED)
                elif cell & Grid.START:
                    self.fill_cell(x, y, self.COLOR_START)
                elif cell & Grid.TREASURE:
                    self.fill_cell(x, y, self.COLOR_TREASURE)

        # Pass 2 - Walls
        if self.cell_size > 4.0:
            for y in range(grid.height):
                for x in range(grid.width):
                    cell = grid.cells[y * grid.width + x]
                    px, py = self.world_to_screen(x, y)
                    px, py = int(px), int(py)
                    size = int(self.cell_size) + 1

                    if cell & Grid.SOUTH:
                        pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
                    if cell & Grid.EAST:
                        pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)
                    if y == 0 and (cell & Grid.NORTH):
                        pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
                    if x == 0 and (cell & Grid.WEST):
                        pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + size), 1)

        # Agent on top
        if self.session is not None and self.session.navigator is not None:
            ax, ay = self.session.navigator.position
            sx, sy = self.world_to_screen(ax + 0.5, ay + 0.5)
            pygame.draw.circle(self.surface, self.COLOR_AGENT, (int(sx), int(sy)), max(2, int(self.cell_size / 3)))

    def draw_hud(self):
        info = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Size: {self.grid.width}x{self.grid.height}",
            f"Status: {'Done' if self.gen_finished else 'Generating'}",
        ]
        if self.session is not None and self.session.navigator is not None:
            info.append(f"Steps: {self.session.navigator.steps_taken}")
            info.append(f"Solved: {len(self.session.scores)}")
        if self.message:
            info.append(self.message)

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        gen_iter = self.generator.run() if self.generator else None

        while self.running:
            self.handle_input()

            # Step Generator
            if gen_iter and not self.gen_finished:
                try:
                    for _ in range(10):
                        next(gen_iter)
                except StopIteration:
                    self.gen_finished = True

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        if self.session is not None:
            self.session.results()
        pygame.quit()
