import itertools
import time

import pytest

from wordhunt.finder import Occurrence, find_words
from wordhunt.grid import MalformedGrid, Position
from wordhunt.trie import Trie, load_trie

BOARD = [
    ["c", "a", "t", "s"],
    ["r", "e", "p", "o"],
    ["b", "o", "n", "e"],
    ["d", "i", "g", "s"],
]
BOARD_WORDS = ["cat", "cats", "car", "care", "bone", "bones", "rep", "pen", "pone",
               "dig", "digs", "one", "ones", "ape", "nod", "nog", "son", "repo",
               "open", "nope", "peon", "sing", "sign"]


def _make_trie(words: list[str]) -> Trie:
    trie = Trie()
    for w in words:
        trie.insert(w.lower())
    return trie


def _assert_valid(occ: Occurrence, grid: list[list[str]], trie: Trie):
    assert len(occ.positions) == len(occ.word)
    assert len(set(occ.positions)) == len(occ.positions)
    for a, b in zip(occ.positions, occ.positions[1:]):
        assert max(abs(a.row - b.row), abs(a.col - b.col)) == 1
    assert "".join(grid[r][c].lower() for r, c in occ.positions) == occ.word
    assert trie.search(occ.word)


def test_cat_dog_big_exact_order():
    grid = [["c", "a", "t"], ["d", "o", "g"], ["b", "i", "g"]]
    trie = _make_trie(["cat", "dog", "big"])
    result = find_words(grid, trie)

    assert [(o.word, [tuple(p) for p in o.positions]) for o in result] == [
        ("cat", [(0, 0), (0, 1), (0, 2)]),
        ("dog", [(1, 0), (1, 1), (1, 2)]),
        ("dog", [(1, 0), (1, 1), (2, 2)]),
        ("big", [(2, 0), (2, 1), (1, 2)]),
        ("big", [(2, 0), (2, 1), (2, 2)]),
    ]


def test_basic_solve():
    trie = _make_trie(BOARD_WORDS)
    result = find_words(BOARD, trie)
    words = {o.word for o in result}
    assert "cat" in words
    assert "bone" in words
    assert "cats" in words
    for occ in result:
        _assert_valid(occ, BOARD, trie)


def test_positions_are_snapshots():
    trie = _make_trie(["cat", "cats"])
    result = find_words(BOARD, trie)
    cat = next(o for o in result if o.word == "cat")
    cats = next(o for o in result if o.word == "cats")
    assert cat.positions == (Position(0, 0), Position(0, 1), Position(0, 2))
    assert cats.positions[:3] == cat.positions
    assert len(cats.positions) == 4


def test_no_revisit():
    """A word requiring revisiting a cell should not be found."""
    grid = [
        ["a", "b"],
        ["c", "d"],
    ]
    trie = _make_trie(["aba", "abc"])
    words = [o.word for o in find_words(grid, trie)]
    assert "aba" not in words
    assert "abc" in words


def test_each_start_has_its_own_visited_cells():
    grid = [["a", "b", "a"]]
    trie = _make_trie(["aba"])
    result = find_words(grid, trie)
    assert [[tuple(p) for p in o.positions] for o in result] == [
        [(0, 0), (0, 1), (0, 2)],
        [(0, 2), (0, 1), (0, 0)],
    ]


def test_uppercase_grid_is_lowered():
    trie = _make_trie(["cat"])
    result = find_words([["C", "A", "T"]], trie)
    assert [o.word for o in result] == ["cat"]


def test_empty_results_for_no_matches():
    grid = [["z", "z"], ["z", "z"]]
    trie = _make_trie(["cat", "dog"])
    assert find_words(grid, trie) == []


def test_empty_grid():
    assert find_words([], _make_trie(["cat"])) == []


def test_ragged_grid_rejected():
    with pytest.raises(MalformedGrid):
        find_words([["c", "a", "t"], ["d", "o"]], _make_trie(["cat"]))


def test_deterministic():
    trie = _make_trie(BOARD_WORDS)
    assert find_words(BOARD, trie) == find_words(BOARD, trie)


def test_performance_with_generated_dictionary(tmp_path):
    """Solve a 4x4 board with a few thousand words quickly."""
    dict_file = tmp_path / "dict.txt"
    words = []
    letters = "abcdefghijklmnoprstue"
    for length in range(3, 5):
        for combo in itertools.combinations(letters, length):
            words.append("".join(combo))
            if len(words) > 5000:
                break
        if len(words) > 5000:
            break
    dict_file.write_text("\n".join(words))
    trie = load_trie(dict_file, min_length=3)

    board = [
        ["t", "a", "p", "e"],
        ["i", "n", "s", "o"],
        ["e", "d", "r", "l"],
        ["k", "g", "h", "m"],
    ]

    start = time.perf_counter()
    result = find_words(board, trie)
    elapsed = time.perf_counter() - start

    assert elapsed < 2.0, f"Finder took {elapsed:.3f}s"
    assert len(result) > 0
    for occ in result:
        _assert_valid(occ, board, trie)
