"""
Queens Puzzle Generator Package

Seeded solution search, region growth and clue carving for Queens puzzles.
"""

from .config import Difficulty, DIFFICULTIES, GeneratorConfig, get_difficulty
from .sequence import SeededSequence
from .solution import find_solution, is_valid_solution
from .regions import grow_regions, check_regions
from .carver import carve
from .generate import generate, generate_with_retries, PuzzleData, GenerationError

__version__ = "1.0.0"
__all__ = [
    'Difficulty',
    'DIFFICULTIES',
    'GeneratorConfig',
    'get_difficulty',
    'SeededSequence',
    'find_solution',
    'is_valid_solution',
    'grow_regions',
    'check_regions',
    'carve',
    'generate',
    'generate_with_retries',
    'PuzzleData',
    'GenerationError',
]
