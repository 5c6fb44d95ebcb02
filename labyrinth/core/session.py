import logging
import random
from typing import Any, Dict, List, Optional

from labyrinth.algo.factory import generate
from labyrinth.core.errors import InvalidMarker, NoActiveMaze
from labyrinth.core.grid import Grid
from labyrinth.core.navigator import Navigator, Survey, new_navigator

logger = logging.getLogger(__name__)


def average_score(scores: List[int]) -> int:
    if not scores:
        return 0
    return sum(scores) // len(scores)


class Session:
    """
    One maze-solving client: the current grid, its navigator and the step
    counts of every maze solved so far. Not shared between clients.
    """

    def __init__(self, algorithm: str = "dfs", width: int = 15, height: int = 15, seed: Optional[int] = None):
        self.algorithm = algorithm
        self.width = width
        self.height = height
        self.seed = seed
        self.rng = random.Random(seed)
        self.grid: Optional[Grid] = None
        self.navigator: Optional[Navigator] = None
        self.scores: List[int] = []
        self._scored = False

    def awake(self) -> Survey:
        """Builds a new maze, drops the agent at a random start and returns its first survey."""
        maze_seed = self.rng.randrange(2 ** 32)
        self.grid = generate(self.algorithm, self.width, self.height, seed=maze_seed)

        cells = self.width * self.height
        if cells < 2:
            raise InvalidMarker("A maze needs two cells to hold both start and treasure")
        start_id, goal_id = self.rng.sample(range(cells), 2)
        start = self.grid.get_coordinate(start_id)
        goal = self.grid.get_coordinate(goal_id)

        self.navigator = new_navigator(self.grid, start, goal)
        self._scored = False
        logger.info("New %dx%d %s maze (seed %d), start %s, treasure %s",
                    self.width, self.height, self.algorithm, maze_seed, start, goal)
        return self.navigator.current_survey()

    def _require_navigator(self) -> Navigator:
        if self.navigator is None:
            raise NoActiveMaze("No maze in progress, call awake first")
        return self.navigator

    def survey(self) -> Survey:
        survey = self._require_navigator().current_survey()
        self._record(survey)
        return survey

    def move(self, direction: int) -> Survey:
        navigator = self._require_navigator()
        navigator.move(direction)
        return self.survey()

    def _record(self, survey: Survey):
        if survey.victory and not self._scored:
            self.scores.append(self.navigator.steps_taken)
            self._scored = True

    def results(self) -> Dict[str, Any]:
        summary = {"solved": len(self.scores), "average_steps": average_score(self.scores)}
        logger.info("Labyrinth solved %d times with an avg of %d steps",
                    summary["solved"], summary["average_steps"])
        return summary
