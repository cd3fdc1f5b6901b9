# main.py
# Driver: seed -> solution -> regions -> carved puzzle, for one or all difficulties.
# Saves puzzle JSON (for the solver) and a text rendering per puzzle.

# ==================================================================
# CONFIGURATION: Easy Toggle
# ==================================================================
BATCH_MODE = True        # Set to True to generate one puzzle per difficulty
DIFFICULTY = "easy"      # Used when BATCH_MODE = False
SKIP_SLOW = True         # Skip 'hardcore' (20x20) in batch mode
SEED = None              # None = current time in ms
JSON_DIR = "data/json"
OUTPUT_DIR = "data/debug"
# ==================================================================

import os
import sys
import time

from Generator import generate_with_retries, get_difficulty, DIFFICULTIES, GenerationError
from Solver import PuzzleFormatter


def ensure_dir(p):
    os.makedirs(p, exist_ok=True)


def current_seed() -> int:
    return int(time.time() * 1000)


def generate_puzzle_files(difficulty_key: str, seed: int = None,
                          json_dir: str = JSON_DIR, output_dir: str = OUTPUT_DIR):
    """
    Generate a single puzzle and write it to disk.

    Args:
        difficulty_key: Key into DIFFICULTIES
        seed: Seed for the puzzle (default: current time)
        json_dir: Where the puzzle JSON goes (read by the solver)
        output_dir: Where the text rendering goes
    """
    difficulty = get_difficulty(difficulty_key)
    seed = current_seed() if seed is None else seed

    print(f"\n{'='*70}")
    print(f"Generating: {difficulty.name}")
    print(f"{'='*70}")
    print(f"Size: {difficulty.size}x{difficulty.size}")
    print(f"Removal ratio: {difficulty.removal_ratio}")
    print(f"Seed: {seed}")

    start = time.time()
    data = generate_with_retries(difficulty.size, difficulty.removal_ratio, seed, verbose=True)
    elapsed = time.time() - start

    name = f"{difficulty_key}_{data.consumed_seed}"
    ensure_dir(json_dir)
    ensure_dir(output_dir)

    out_json = os.path.join(json_dir, f"{name}.json")
    data.save_json(out_json)

    out_txt = os.path.join(output_dir, f"{name}.txt")
    with open(out_txt, "w") as f:
        f.write(f"{difficulty.name} - seed {data.consumed_seed}\n")
        f.write(PuzzleFormatter.format_grid_visualization(data.puzzle_grid, data.region_grid))
        f.write("\n")

    clues = sum(cell for row in data.puzzle_grid for cell in row)
    print(f"\n✓ Generated in {elapsed:.2f}s with {clues} clues")
    print(PuzzleFormatter.format_grid_visualization(data.puzzle_grid, data.region_grid))
    print(f"[output] JSON: {out_json}")
    print(f"[output] Text: {out_txt}")

    return data


if __name__ == "__main__":
    if BATCH_MODE and len(sys.argv) == 1:
        print("\n" + "="*70)
        print("BATCH GENERATION MODE")
        print("="*70)

        keys = [k for k in DIFFICULTIES if not (SKIP_SLOW and k == "hardcore")]
        results = {'success': [], 'failed': []}
        base_seed = current_seed() if SEED is None else SEED

        for i, key in enumerate(keys, 1):
            print(f"\n[{i}/{len(keys)}] {key}")
            try:
                data = generate_puzzle_files(key, base_seed + i)
                results['success'].append((key, data.consumed_seed))
            except (GenerationError, ValueError, OSError) as e:
                print(f"\n❌ ERROR: {e}")
                results['failed'].append((key, str(e)))

        print("\n" + "="*70)
        print("BATCH GENERATION COMPLETE")
        print("="*70)
        print(f"\n✅ Successful: {len(results['success'])}/{len(keys)}")
        for key, seed in results['success']:
            print(f"   - {key} (seed {seed})")

        if results['failed']:
            print(f"\n❌ Failed: {len(results['failed'])}/{len(keys)}")
            for key, error in results['failed']:
                print(f"   - {key}: {error}")

        print(f"\nPuzzles saved to: {JSON_DIR}/")

    else:
        # python main.py [difficulty] [seed]
        key = sys.argv[1] if len(sys.argv) > 1 else DIFFICULTY
        seed = int(sys.argv[2]) if len(sys.argv) > 2 else SEED
        try:
            generate_puzzle_files(key, seed)
        except (GenerationError, ValueError) as e:
            print(f"\n❌ ERROR: {e}")
            sys.exit(1)
