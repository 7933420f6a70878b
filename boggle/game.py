from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable

from boggle.engine import GridSearchEngine

logger = logging.getLogger("boggle")


class Verdict(enum.Enum):
    CORRECT = "correct"
    TOO_SHORT = "too_short"
    NOT_A_WORD = "not_a_word"
    NOT_ON_BOARD = "not_on_board"
    ALREADY_FOUND = "already_found"


@dataclass
class Player:
    number: int
    words: set[str] = field(default_factory=set)
    score: int = 0


class Game:
    """Turn rules and scoring for a two-player game on one board.

    The game holds no player state itself; callers pass the Player whose
    turn it is.
    """

    def __init__(self, engine: GridSearchEngine):
        self.engine = engine

    @property
    def min_word_length(self) -> int:
        return self.engine.min_word_length

    def word_score(self, word: str) -> int:
        return len(word) - self.min_word_length + 1

    def judge(self, word: str, player: Player) -> Verdict:
        word = word.upper()
        if len(word) < self.min_word_length:
            return Verdict.TOO_SHORT
        if not self.engine.dictionary.contains(word):
            return Verdict.NOT_A_WORD
        if not self.engine.exists_path(word):
            return Verdict.NOT_ON_BOARD
        if word in player.words:
            return Verdict.ALREADY_FOUND
        return Verdict.CORRECT

    def submit(self, word: str, player: Player) -> Verdict:
        verdict = self.judge(word, player)
        if verdict is Verdict.CORRECT:
            player.words.add(word.upper())
            player.score += self.word_score(word)
        logger.debug("player=%d word=%s verdict=%s score=%d", player.number, word, verdict.value, player.score)
        return verdict

    @staticmethod
    def winner(players: Iterable[Player]) -> Player | None:
        """The single highest-scoring player, or None on a tie for first."""
        ranked = sorted(players, key=lambda p: p.score, reverse=True)
        if not ranked:
            return None
        if len(ranked) > 1 and ranked[0].score == ranked[1].score:
            return None
        return ranked[0]
