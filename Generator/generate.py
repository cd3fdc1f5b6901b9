"""
Puzzle generation entry points

seed + size + removal ratio -> solution -> regions -> carved puzzle.
Each call builds its own SeededSequence, so no state is shared between calls
and identical arguments always give identical grids.
"""
import json
from typing import List, Dict, Optional
from dataclasses import dataclass, asdict

import numpy as np

from Solver.board import MARKER
from Solver.solver import solve_logically

from .config import GeneratorConfig, MIN_BOARD_SIZE
from .sequence import SeededSequence
from .solution import find_solution
from .regions import grow_regions, check_regions
from .carver import carve


class GenerationError(RuntimeError):
    """No puzzle could be produced within the allowed attempts"""


@dataclass
class PuzzleData:
    size: int
    removal_ratio: float
    consumed_seed: int               # passing this seed back to generate() reproduces the puzzle
    region_grid: List[List[int]]
    puzzle_grid: List[List[int]]

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "PuzzleData":
        return cls(
            size=data['size'],
            removal_ratio=data['removal_ratio'],
            consumed_seed=data['consumed_seed'],
            region_grid=data['region_grid'],
            puzzle_grid=data['puzzle_grid'],
        )

    def save_json(self, output_path: str):
        with open(output_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


def _check_inputs(size: int, removal_ratio: float, config: GeneratorConfig):
    min_size = max(config.min_size, MIN_BOARD_SIZE)
    if size < min_size:
        raise ValueError(f"Board size must be at least {min_size}, got {size}")
    if not 0.0 <= removal_ratio <= 1.0:
        raise ValueError(f"Removal ratio must lie in [0, 1], got {removal_ratio}")


def _verify(solution, region_grid: np.ndarray, puzzle_grid: np.ndarray, config: GeneratorConfig):
    """Hand-off invariants: sound regions and a puzzle the solver reconstructs exactly"""
    problems = check_regions(region_grid, solution)
    if problems:
        raise RuntimeError(f"[generate] Region grid broken: {problems}")

    result = solve_logically(puzzle_grid, region_grid, max_subset=config.max_subset)
    found = {(int(r), int(c)) for r, c in np.argwhere(result.grid == MARKER)}
    if not result.solved or found != set(solution):
        raise RuntimeError(f"[generate] Solver reconstructed {sorted(found)}, expected {sorted(solution)}")


def generate(size: int, removal_ratio: float, seed: int,
             config: Optional[GeneratorConfig] = None,
             verbose: bool = False) -> Optional[PuzzleData]:
    """
    Generate one puzzle from `seed`.

    Returns None only when the solution search is exhausted; callers should
    retry with another seed (see generate_with_retries).
    """
    config = config or GeneratorConfig()
    _check_inputs(size, removal_ratio, config)

    rng = SeededSequence(seed)

    if verbose:
        print(f"\nGenerating {size}x{size} puzzle (ratio={removal_ratio}, seed={seed})")

    solution = find_solution(size, rng)
    if solution is None:
        if verbose:
            print("  ✗ No placement found for this seed")
        return None
    if verbose:
        print(f"  Solution: {solution}")

    region_grid = grow_regions(solution, size, rng)
    puzzle_grid = carve(solution, region_grid, removal_ratio, size, rng,
                        verbose=verbose, max_subset=config.max_subset)

    if config.verify:
        _verify(solution, region_grid, puzzle_grid, config)

    if verbose:
        print(f"  ✓ Done after {rng.draws} draws")

    return PuzzleData(
        size=size,
        removal_ratio=removal_ratio,
        consumed_seed=seed,
        region_grid=region_grid.tolist(),
        puzzle_grid=puzzle_grid.tolist(),
    )


def generate_with_retries(size: int, removal_ratio: float, seed: int,
                          config: Optional[GeneratorConfig] = None,
                          verbose: bool = False) -> PuzzleData:
    """Try seed, seed + stride, seed + 2*stride, ... before giving up"""
    config = config or GeneratorConfig()
    _check_inputs(size, removal_ratio, config)

    for attempt in range(config.max_attempts):
        attempt_seed = seed + attempt * config.seed_stride
        data = generate(size, removal_ratio, attempt_seed, config=config, verbose=verbose)
        if data is not None:
            return data
        if verbose:
            print(f"  Attempt {attempt + 1}/{config.max_attempts} failed, retrying")

    raise GenerationError(
        f"Could not create a {size}x{size} puzzle after {config.max_attempts} attempts (seed={seed})"
    )
