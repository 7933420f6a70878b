import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from boggle.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")

# Populated at startup
_dictionary = None


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _dictionary

        if settings.DEBUG:
            logger.setLevel(logging.DEBUG)

        from boggle.dictionary import load_dictionary
        logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
        _dictionary = load_dictionary(str(settings.DICTIONARY_PATH))

        yield

        _dictionary = None

    application = FastAPI(title="Boggle Word Search", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "dictionary_loaded": _dictionary is not None,
            "word_count": len(_dictionary) if _dictionary is not None else 0,
        }

    @application.post("/solve")
    async def solve(request: Request):
        from fastapi.concurrency import run_in_threadpool
        from boggle.engine import GridSearchEngine
        from boggle.metrics import StageTimer

        body = await _read_json(request)
        timer = StageTimer()

        with timer.stage("board") as record:
            board = _board_from_body(body)
            record.items = board.cell_count
        logger.info("Board %dx%d: %s", board.size, board.size, board)

        with timer.stage("solve") as record:
            engine = GridSearchEngine(board, _require_dictionary(), settings.MIN_WORD_LENGTH)
            # Queries allocate their own visited marker
            found = await run_in_threadpool(engine.enumerate_all_words)
            record.items = len(found)

        # Longest first, then alphabetical
        all_words = sorted(found, key=lambda w: (-len(w), w))
        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d)", len(all_words), len(words))

        return JSONResponse({
            "size": board.size,
            "board": board.to_lists(),
            "words": words,
            "word_count": len(all_words),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
            "stage_counts": timer.counts,
        })

    @application.post("/check")
    async def check(request: Request):
        from boggle.engine import GridSearchEngine

        body = await _read_json(request)
        word = body.get("word")
        if not isinstance(word, str):
            raise HTTPException(400, "Missing 'word'")
        board = _board_from_body(body)

        engine = GridSearchEngine(board, _require_dictionary(), settings.MIN_WORD_LENGTH)
        word = word.upper()
        on_board = engine.exists_path(word)
        in_dictionary = engine.dictionary.contains(word)
        long_enough = len(word) >= engine.min_word_length
        return {
            "word": word,
            "on_board": on_board,
            "in_dictionary": in_dictionary,
            "long_enough": long_enough,
            "valid": on_board and in_dictionary and long_enough,
        }

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle.settings import update_settings, get_editable_settings
        body = await _read_json(request)
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


async def _read_json(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(400, "Request body must be JSON") from None
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def _require_dictionary():
    if _dictionary is None:
        raise HTTPException(503, "Dictionary not loaded")
    return _dictionary


def _board_from_body(body: dict):
    """Build a Board from {"board": rows} or {"size": N, "letters": "..."}."""
    from boggle.board import Board, BoardError

    try:
        if "board" in body:
            rows = body["board"]
            if not isinstance(rows, list) or not all(isinstance(row, (str, list)) for row in rows):
                raise HTTPException(400, "'board' must be a list of rows")
            return Board.from_rows(rows)
        if "size" in body and "letters" in body:
            return Board.parse(f"{body['size']} {body['letters']}")
    except BoardError as e:
        raise HTTPException(400, str(e)) from None
    raise HTTPException(400, "Missing board: send 'board' rows or 'size' and 'letters'")


app = create_app()
