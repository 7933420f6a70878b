"""Console front end: two-player game and a board solver.

    boggle play < game.txt
    boggle solve board.txt

Game input holds the board (size, then the letters) followed by player 1's
words up to the end-of-turn token, then player 2's words.
"""
import argparse
import logging
import sys

from boggle.board import MAX_BOARD_SIZE, Board, BoardError, Scanner
from boggle.dictionary import load_dictionary
from boggle.engine import GridSearchEngine
from boggle.game import Game, Player, Verdict
from boggle.settings import settings

logger = logging.getLogger("boggle")

MESSAGES = {
    Verdict.CORRECT: "Correct.",
    Verdict.TOO_SHORT: "{word} is too short.",
    Verdict.NOT_A_WORD: "{word} is not a word.",
    Verdict.NOT_ON_BOARD: "{word} is not on board.",
    Verdict.ALREADY_FOUND: "{word} is already found.",
}


def run_turn(game: Game, player: Player, scanner: Scanner, end_turn: str):
    """Read words until end_turn or end of input, reporting on each."""
    print(f"Player {player.number} Score: {player.score}")
    while True:
        word = scanner.next_token()
        if word is None or word == end_turn:
            break
        verdict = game.submit(word, player)
        print(MESSAGES[verdict].format(word=word))
        print(f"Player {player.number} Score: {player.score}")


def play(engine: GridSearchEngine, scanner: Scanner, end_turn: str):
    game = Game(engine)
    players = [Player(1), Player(2)]
    for player in players:
        run_turn(game, player, scanner, end_turn)

    for player in players:
        print(f"Player {player.number} Score: {player.score}")
    winner = game.winner(players)
    if winner is None:
        print("It's a tie!")
    else:
        print(f"Player {winner.number} wins!")

    print("All Possible Words: " + "".join(f"{w} " for w in engine.sorted_words()))


def _build_engine(args, scanner: Scanner) -> GridSearchEngine:
    dictionary = load_dictionary(str(args.dictionary))
    board = Board.read(scanner, args.max_size)
    logger.info("Board %dx%d: %s", board.size, board.size, board)
    return GridSearchEngine(board, dictionary, args.min_length)


def cmd_play(args) -> int:
    scanner = Scanner(sys.stdin.read())
    engine = _build_engine(args, scanner)
    play(engine, scanner, args.end_turn)
    return 0


def cmd_solve(args) -> int:
    if args.board:
        with open(args.board, "r", encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()
    engine = _build_engine(args, Scanner(text))
    for word in engine.sorted_words():
        print(word)
    return 0


def _board_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid board size: {value!r}") from None
    if not 1 <= size <= MAX_BOARD_SIZE:
        raise argparse.ArgumentTypeError(f"board size must be between 1 and {MAX_BOARD_SIZE}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boggle", description="Find words on a Boggle board")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dictionary", default=str(settings.DICTIONARY_PATH),
                        help="Word list, one word per line")
    common.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help="Minimum word length (default: %(default)s)")
    common.add_argument("--max-size", type=_board_size, default=settings.MAX_BOARD_SIZE,
                        help="Largest accepted board size (default: %(default)s)")

    sub = parser.add_subparsers(dest="command", required=True)

    p_play = sub.add_parser("play", parents=[common], help="Two-player game read from stdin")
    p_play.add_argument("--end-turn", default=settings.END_TURN,
                        help="Token that ends a player's turn (default: %(default)s)")
    p_play.set_defaults(func=cmd_play)

    p_solve = sub.add_parser("solve", parents=[common], help="List every word on a board")
    p_solve.add_argument("board", nargs="?", help="Board file (default: stdin)")
    p_solve.set_defaults(func=cmd_solve)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    if settings.DEBUG:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        return args.func(args)
    except (BoardError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
