"""
Difficulty presets and generator settings
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Difficulty:
    name: str
    size: int
    removal_ratio: float


DIFFICULTIES: Dict[str, Difficulty] = {
    'easy':     Difficulty('Easy (4x4)', 4, 0.7),
    'medium':   Difficulty('Medium (6x6)', 6, 0.8),
    'hard':     Difficulty('Hard (8x8)', 8, 0.85),
    'expert':   Difficulty('Expert (10x10)', 10, 0.9),
    'master':   Difficulty('Master (12x12)', 12, 0.95),
    'hardcore': Difficulty('Hardcore (20x20)', 20, 0.96),
}


# Smallest board admitting a placement with no shared diagonal and no touching
MIN_BOARD_SIZE = 4


@dataclass
class GeneratorConfig:
    # May be raised to skip small boards, never lowered below MIN_BOARD_SIZE
    min_size: int = MIN_BOARD_SIZE

    # Retry policy for generate_with_retries
    max_attempts: int = 5
    seed_stride: int = 7919

    # Largest subset tried by the confinement rule while carving
    max_subset: int = 4

    # Re-check region invariants and solver reconstruction before hand-off
    verify: bool = True


def get_difficulty(key: str) -> Difficulty:
    try:
        return DIFFICULTIES[key.lower()]
    except KeyError:
        raise ValueError(f"Unknown difficulty '{key}', expected one of {sorted(DIFFICULTIES)}") from None
