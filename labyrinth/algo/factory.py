from typing import Dict, Optional, Type

from labyrinth.core.grid import Grid
from labyrinth.algo.base import Generator
from labyrinth.algo.dfs import RecursiveBacktracker
from labyrinth.algo.division import RecursiveDivision
from labyrinth.algo.kruskal import KruskalsAlgorithm
from labyrinth.algo.prim import PrimsAlgorithm

ALGORITHMS: Dict[str, Type[Generator]] = {
    "dfs": RecursiveBacktracker,
    "kruskal": KruskalsAlgorithm,
    "prim": PrimsAlgorithm,
    "division": RecursiveDivision,
}

ALIASES = {
    "backtracker": "dfs",
    "recursive_division": "division",
}


def get_generator(algorithm: str, width: int, height: int, seed: Optional[int] = None) -> Generator:
    name = ALIASES.get(algorithm.lower(), algorithm.lower())
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm {algorithm!r}, choose from {sorted(ALGORITHMS)}")
    return ALGORITHMS[name](width, height, seed=seed)


def generate(algorithm: str, width: int, height: int, seed: Optional[int] = None) -> Grid:
    return get_generator(algorithm, width, height, seed).generate()
