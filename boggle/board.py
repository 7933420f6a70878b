from __future__ import annotations

from typing import Sequence

from boggle.settings import BOARD_SIZE_LIMIT, settings

MAX_BOARD_SIZE = BOARD_SIZE_LIMIT


class BoardError(ValueError):
    """Raised when a board cannot be constructed from its input."""


class InvalidBoardSize(BoardError):
    pass


class InvalidBoardCharacter(BoardError):
    pass


class Scanner:
    """Whitespace-skipping cursor over an input text.

    Boards and player words share one input stream in the console game, so
    reading a board must consume exactly the characters it needs.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _skip_space(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def next_token(self) -> str | None:
        self._skip_space()
        if self.pos >= len(self.text):
            return None
        start = self.pos
        while self.pos < len(self.text) and not self.text[self.pos].isspace():
            self.pos += 1
        return self.text[start:self.pos]

    def next_char(self) -> str | None:
        self._skip_space()
        if self.pos >= len(self.text):
            return None
        ch = self.text[self.pos]
        self.pos += 1
        return ch


def _is_letter(ch) -> bool:
    return isinstance(ch, str) and len(ch) == 1 and ch.isascii() and ch.isalpha()


def _check_size(size: int, max_size: int | None = None):
    # A caller-supplied cap can only lower the hard limit
    limit = MAX_BOARD_SIZE if max_size is None else min(max_size, MAX_BOARD_SIZE)
    if size < 1 or size > limit:
        raise InvalidBoardSize(f"Invalid board size {size}. Must be between 1 and {limit}")


class Board:
    """Immutable square grid of uppercase letters.

    Build boards from raw input with read, parse or from_rows; the constructor
    only checks the shape.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Sequence[str]):
        rows = tuple(rows)
        _check_size(len(rows))
        for r, row in enumerate(rows):
            if len(row) != len(rows):
                raise InvalidBoardSize(f"Row {r} has {len(row)} cells, expected {len(rows)} for a square board")
        self._rows: tuple[str, ...] = rows

    @classmethod
    def read(cls, scanner: Scanner, max_size: int | None = None) -> Board:
        max_size = settings.MAX_BOARD_SIZE if max_size is None else max_size
        token = scanner.next_token()
        if token is None:
            raise InvalidBoardSize("Missing board size")
        try:
            size = int(token)
        except ValueError:
            raise InvalidBoardSize(f"Invalid board size {token!r}") from None
        _check_size(size, max_size)

        rows = []
        for r in range(size):
            row = []
            for c in range(size):
                ch = scanner.next_char()
                if ch is None:
                    raise InvalidBoardCharacter(
                        f"Board ended after {r * size + c} of {size * size} letters"
                    )
                if not _is_letter(ch):
                    raise InvalidBoardCharacter(
                        f"Invalid character {ch!r} at ({r}, {c}). Board must contain only alphabetic characters"
                    )
                row.append(ch.upper())
            rows.append("".join(row))
        return cls(rows)

    @classmethod
    def parse(cls, text: str, max_size: int | None = None) -> Board:
        """Read a board that makes up the whole of text."""
        scanner = Scanner(text)
        board = cls.read(scanner, max_size)
        extra = scanner.next_token()
        if extra is not None:
            raise InvalidBoardSize(
                f"Unexpected input {extra!r} after {board.cell_count} letters of a {board.size}x{board.size} board"
            )
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]], max_size: int | None = None) -> Board:
        """Build a board from rows given as strings or lists of one-letter strings."""
        max_size = settings.MAX_BOARD_SIZE if max_size is None else max_size
        size = len(rows)
        _check_size(size, max_size)

        out = []
        for r, row in enumerate(rows):
            if isinstance(row, str):
                row = list(row)
            if len(row) != size:
                raise InvalidBoardSize(f"Row {r} has {len(row)} cells, expected {size} for a square board")
            for c, ch in enumerate(row):
                if not _is_letter(ch):
                    raise InvalidBoardCharacter(
                        f"Invalid character {ch!r} at ({r}, {c}). Board must contain only alphabetic characters"
                    )
            out.append("".join(row).upper())
        return cls(out)

    @property
    def size(self) -> int:
        return len(self._rows)

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def rows(self) -> tuple[str, ...]:
        return self._rows

    def to_lists(self) -> list[list[str]]:
        return [list(row) for row in self._rows]

    def __getitem__(self, pos: tuple[int, int]) -> str:
        r, c = pos
        return self._rows[r][c]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __str__(self):
        return " / ".join(" ".join(row) for row in self._rows)

    def __repr__(self):
        return f"Board({list(self._rows)!r})"
