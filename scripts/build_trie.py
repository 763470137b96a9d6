"""
Build the serialized dictionary trie used by the solver.

Usage:
    python -m scripts.build_trie [dictionary.txt] [--output trie.json]

Reads a newline-delimited word list, keeps words of 3-16 letters (or the
configured bounds), and writes the nested JSON trie the server loads at
startup.
"""
import argparse
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordhunt.settings import settings
from wordhunt.trie import load_trie


def main():
    parser = argparse.ArgumentParser(description="Build the Word Hunt dictionary trie")
    parser.add_argument("dictionary", nargs="?", default=str(settings.DICTIONARY_PATH),
                        help=f"Word list path (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--output", default=str(settings.TRIE_PATH),
                        help=f"Output JSON path (default: {settings.TRIE_PATH})")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH)
    parser.add_argument("--max-length", type=int, default=settings.MAX_WORD_LENGTH)
    args = parser.parse_args()

    dict_path = Path(args.dictionary)
    if not dict_path.is_file():
        print(f"Error: {dict_path} does not exist")
        sys.exit(1)

    trie = load_trie(dict_path, args.min_length, args.max_length)
    trie.save(args.output)
    print(f"Trie with {len(trie.words())} words has been built and saved to {args.output}")


if __name__ == "__main__":
    main()
