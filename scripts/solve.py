"""
Solve a typed grid and print the draw schedule.

Usage:
    python -m scripts.solve "cat dog big" [--trie trie.json | --dictionary words.txt]

Examples:
    python -m scripts.solve "abcd efgh ijkl mnop"
    python -m scripts.solve "abcd efgh ijkl mnop" --budget 30 --all-words
"""
import argparse
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordhunt.finder import find_words
from wordhunt.grid import MalformedGrid, parse_grid
from wordhunt.optimizer import optimize
from wordhunt.settings import settings
from wordhunt.trie import Trie, load_trie


def main():
    parser = argparse.ArgumentParser(description="Word Hunt grid solver")
    parser.add_argument("grid", help="Grid rows separated by the row separator")
    parser.add_argument("--trie", type=str, default=None, help="Serialized trie JSON")
    parser.add_argument("--dictionary", type=str, default=None, help="Plain word list")
    parser.add_argument("--separator", type=str, default=settings.ROW_SEPARATOR)
    parser.add_argument("--budget", type=float, default=settings.TIME_BUDGET,
                        help=f"Time budget in seconds (default: {settings.TIME_BUDGET})")
    parser.add_argument("--speed", type=float, default=settings.MOVEMENT_SPEED)
    parser.add_argument("--all-words", action="store_true", help="Also list every distinct word found")
    args = parser.parse_args()

    try:
        grid = parse_grid(args.grid, args.separator)
    except MalformedGrid as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.trie:
        trie = Trie.load(args.trie)
    elif args.dictionary:
        trie = load_trie(args.dictionary, settings.MIN_WORD_LENGTH, settings.MAX_WORD_LENGTH)
    elif settings.TRIE_PATH.exists():
        trie = Trie.load(settings.TRIE_PATH)
    else:
        trie = load_trie(settings.DICTIONARY_PATH, settings.MIN_WORD_LENGTH, settings.MAX_WORD_LENGTH)

    occurrences = find_words(grid, trie)
    schedule = optimize(
        occurrences,
        time_budget=args.budget,
        movement_speed=args.speed,
        setup_constant=settings.SETUP_CONSTANT,
        alpha=settings.ALPHA,
        beta=settings.BETA,
    )

    print("Grid:")
    for row in grid:
        print("  " + " ".join(ch.upper() for ch in row))

    if args.all_words:
        distinct = sorted({o.word for o in occurrences}, key=lambda w: (-len(w), w))
        print(f"\nFound {len(distinct)} distinct words ({len(occurrences)} paths):")
        print("  " + ", ".join(distinct))

    print(f"\nSchedule ({len(schedule)} words):")
    elapsed = 0.0
    for i, entry in enumerate(schedule, 1):
        elapsed += entry.total_time
        start = entry.candidate.start_pos
        print(f"  {i:>3}. {entry.word:<16} score={entry.candidate.score:>2} "
              f"start=({start.row},{start.col}) time={entry.total_time:.2f}s elapsed={elapsed:.2f}s")
    print(f"\nTotal: {schedule.points} points in {schedule.total_time:.2f}s of {args.budget:.0f}s")


if __name__ == "__main__":
    main()
