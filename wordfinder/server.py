import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from wordfinder.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordfinder")


def _string_list(body: dict, key: str) -> list[str]:
    value = body.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise HTTPException(400, f"'{key}' must be a list of strings")
    return value


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        from wordfinder.strategies import STRATEGIES
        logger.info(
            "Word finder ready (strategies=%s, default=%s, top_n=%d)",
            ",".join(STRATEGIES), settings.DEFAULT_STRATEGY, settings.TOP_N,
        )
        yield

    application = FastAPI(title="Word Finder", lifespan=lifespan)

    @application.get("/health")
    async def health():
        from wordfinder.strategies import STRATEGIES
        return {"status": "ok", "strategies": list(STRATEGIES)}

    @application.get("/api/strategies")
    async def api_strategies():
        from wordfinder.strategies import STRATEGIES, FALLBACK_STRATEGY
        return {
            "strategies": list(STRATEGIES),
            "default": settings.DEFAULT_STRATEGY,
            "fallback": FALLBACK_STRATEGY.name,
        }

    @application.post("/find")
    async def find(request: Request):
        from wordfinder.finder import Finder
        from wordfinder.grid import ShapeError
        from wordfinder.metrics import StageTimer
        from wordfinder.strategies import create_strategy

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")

        grid_rows = _string_list(body, "grid")
        words = _string_list(body, "words")
        if len(words) > settings.MAX_QUERY_WORDS:
            raise HTTPException(413, f"Too many words (max {settings.MAX_QUERY_WORDS})")

        strategy_name = body.get("strategy") or settings.DEFAULT_STRATEGY
        if not isinstance(strategy_name, str):
            raise HTTPException(400, "'strategy' must be a string")
        top_n = body.get("top_n", settings.TOP_N)
        if isinstance(top_n, bool) or not isinstance(top_n, int):
            raise HTTPException(400, "'top_n' must be an integer")

        timer = StageTimer()

        with timer.stage("grid"):
            try:
                finder = Finder(grid_rows)
            except ShapeError as e:
                raise HTTPException(400, str(e))

        if settings.DEBUG:
            logger.info("Grid %s", " / ".join(grid_rows))

        strategy = create_strategy(strategy_name)
        finder.set_strategy(strategy)

        with timer.stage("search"):
            result = finder.find(words, top_n=top_n)

        logger.info(
            "Grid %dx%d strategy=%s: %d words queried, returning %d",
            finder.grid.n_rows, finder.grid.n_cols, strategy.name, len(words), len(result),
        )

        return JSONResponse({
            "words": result,
            "word_count": len(result),
            "strategy": strategy.name,
            "grid_size": [finder.grid.n_rows, finder.grid.n_cols],
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordfinder.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordfinder.settings import update_settings, get_editable_settings
        body = await request.json()
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
