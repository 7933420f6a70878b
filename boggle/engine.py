from __future__ import annotations

import numpy as np

from boggle.board import Board
from boggle.dictionary import PrefixDictionary, TrieNode
from boggle.settings import settings

# King-move offsets
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class GridSearchEngine:
    """Word search over a fixed board using backtracking DFS.

    Each query allocates its own visited marker (a bool array the shape of the
    board). A cell is marked while it is on the current path and unmarked on
    the way back out, so the marker is all False again when a query returns.
    """

    def __init__(self, board: Board, dictionary: PrefixDictionary, min_word_length: int | None = None):
        self.board = board
        self.dictionary = dictionary
        self.min_word_length = settings.MIN_WORD_LENGTH if min_word_length is None else min_word_length
        self.size = board.size

    def _new_marker(self) -> np.ndarray:
        return np.zeros((self.size, self.size), dtype=bool)

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def exists_path(self, word: str) -> bool:
        """True if word can be traced on the board as a simple path of adjacent cells."""
        word = word.upper()
        if not word or len(word) > self.board.cell_count:
            return False
        visited = self._new_marker()
        for r in range(self.size):
            for c in range(self.size):
                if self.board[r, c] == word[0] and self._find_from(word, 0, r, c, visited):
                    return True
        return False

    def _find_from(self, word: str, index: int, row: int, col: int, visited: np.ndarray) -> bool:
        if index == len(word):
            return True
        if not self._in_bounds(row, col) or visited[row, col] or self.board[row, col] != word[index]:
            return False

        visited[row, col] = True
        found = False
        for dr, dc in DIRECTIONS:
            if self._find_from(word, index + 1, row + dr, col + dc, visited):
                found = True
                break
        visited[row, col] = False
        return found

    def enumerate_all_words(self) -> set[str]:
        """Every dictionary word of at least min_word_length letters on the board."""
        found: set[str] = set()
        path: list[str] = []
        visited = self._new_marker()
        for r in range(self.size):
            for c in range(self.size):
                self._collect_from(r, c, self.dictionary.root, path, visited, found)
        return found

    def _collect_from(self, row: int, col: int, node: TrieNode, path: list[str],
                      visited: np.ndarray, found: set[str]):
        """Extend path (whose letters lead to node) with the cell at (row, col)."""
        if not self._in_bounds(row, col) or visited[row, col]:
            return

        letter = self.board[row, col]
        # A missing child means path + letter is not a prefix of any word
        current = self.dictionary.find_node(letter, node)
        if current is None:
            return

        path.append(letter)
        visited[row, col] = True

        if current.is_word and len(path) >= self.min_word_length:
            found.add("".join(path))

        # Keep descending after a match: CAT and CATS share a path
        if current.children:
            for dr, dc in DIRECTIONS:
                self._collect_from(row + dr, col + dc, current, path, visited, found)

        path.pop()
        visited[row, col] = False

    def sorted_words(self) -> list[str]:
        return sorted(self.enumerate_all_words())

    def is_valid_word(self, word: str) -> bool:
        word = word.upper()
        return (
            len(word) >= self.min_word_length
            and self.dictionary.contains(word)
            and self.exists_path(word)
        )
