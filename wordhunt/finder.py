from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from wordhunt.grid import Grid, Position, validate_grid
from wordhunt.trie import Trie, TrieNode

logger = logging.getLogger("wordhunt")

# 8-connected neighbourhood, in exploration order
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


@dataclass(frozen=True)
class Occurrence:
    word: str
    positions: tuple[Position, ...]

    def to_dict(self) -> dict:
        return {"word": self.word, "positions": [list(p) for p in self.positions]}


def find_words(grid: Grid, trie: Trie) -> list[Occurrence]:
    """Find every path through the grid that spells a word in the trie.

    Each start cell gets its own visited matrix, so the same text may be
    reported several times from different starts or along different paths.
    Results are ordered by start cell (row-major), then by DIRECTIONS.
    """
    rows, cols = validate_grid(grid)
    found: list[Occurrence] = []

    def dfs(r: int, c: int, node: TrieNode, path: str, visited: np.ndarray, positions: list[Position]):
        if r < 0 or c < 0 or r >= rows or c >= cols:
            return
        if visited[r, c]:
            return
        ch = grid[r][c].lower()
        child = node.children.get(ch)
        if child is None:
            return

        visited[r, c] = True
        path += ch
        positions.append(Position(r, c))

        if child.is_word:
            found.append(Occurrence(path, tuple(positions)))

        if child.children:
            for dr, dc in DIRECTIONS:
                dfs(r + dr, c + dc, child, path, visited, positions)

        visited[r, c] = False
        positions.pop()

    for r in range(rows):
        for c in range(cols):
            visited = np.zeros((rows, cols), dtype=bool)
            dfs(r, c, trie.root, "", visited, [])

    logger.info("Found %d occurrences (%d distinct words) in %dx%d grid",
                len(found), len({o.word for o in found}), rows, cols)
    return found
