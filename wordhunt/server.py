import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wordhunt.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordhunt")

# Populated at startup
_trie = None


class SolveRequest(BaseModel):
    grid: str | None = None
    rows: list[list[str]] | None = None


def _load_configured_trie():
    from wordhunt.trie import Trie, load_trie

    if settings.TRIE_PATH.exists():
        logger.info("Loading serialized trie from %s", settings.TRIE_PATH)
        return Trie.load(settings.TRIE_PATH)
    logger.info("Building trie from %s (length %d-%d)",
                settings.DICTIONARY_PATH, settings.MIN_WORD_LENGTH, settings.MAX_WORD_LENGTH)
    return load_trie(settings.DICTIONARY_PATH, settings.MIN_WORD_LENGTH, settings.MAX_WORD_LENGTH)


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie
        try:
            trie = _load_configured_trie()
        except (OSError, ValueError, KeyError, TypeError) as e:
            # Unreadable or corrupt dictionary: stay up and report not ready
            logger.error("Failed to load dictionary: %s", e)
        else:
            _trie = trie
            logger.info("Trie loaded")
        yield

    application = FastAPI(title="Word Hunt Plotter", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "trie_loaded": _trie is not None}

    @application.post("/solve")
    async def solve(body: SolveRequest):
        from wordhunt.finder import find_words
        from wordhunt.grid import MalformedGrid, format_grid, parse_grid, validate_grid
        from wordhunt.metrics import StageTimer
        from wordhunt.optimizer import optimize

        if _trie is None:
            raise HTTPException(503, "Dictionary not ready, try again shortly")

        timer = StageTimer()

        with timer.stage("parse"):
            try:
                if body.rows is not None:
                    board = body.rows
                    validate_grid(board)
                elif body.grid is not None:
                    board = parse_grid(body.grid, settings.ROW_SEPARATOR)
                else:
                    raise HTTPException(400, "Request needs either 'grid' or 'rows'")
            except MalformedGrid as e:
                raise HTTPException(400, f"Malformed grid: {e}")
            if not board:
                raise HTTPException(400, "Empty grid")

        logger.info("Board %dx%d: %s", len(board), len(board[0]), format_grid(board))

        with timer.stage("find"):
            occurrences = find_words(board, _trie)

        with timer.stage("optimize"):
            schedule = optimize(
                occurrences,
                time_budget=settings.TIME_BUDGET,
                movement_speed=settings.MOVEMENT_SPEED,
                setup_constant=settings.SETUP_CONSTANT,
                alpha=settings.ALPHA,
                beta=settings.BETA,
            )

        logger.info("Scheduled %d of %d occurrences", len(schedule), len(occurrences))

        result = {
            "board": board,
            "found_count": len(occurrences),
            "words": schedule.to_list(),
            "word_count": len(schedule),
            "points": schedule.points,
            "total_time": schedule.total_time,
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        }
        if settings.DEBUG:
            result["occurrences"] = [o.to_dict() for o in occurrences]
        return JSONResponse(result)

    @application.get("/api/settings")
    async def api_get_settings():
        from wordhunt.settings import EDITABLE_FIELDS, get_editable_settings
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordhunt.settings import get_editable_settings, update_settings
        body = await request.json()
        if not isinstance(body, dict):
            raise HTTPException(400, "Expected a JSON object")
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
