from fastapi import APIRouter, Body, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from typing import Any, List, Optional
import logging

from .config import Settings, get_settings
from .models import Short
from .page import render_index
from .store import ShortsStore
from .validation import validate_short_payload

logger = logging.getLogger("shortflix.api")

router = APIRouter()


def get_store(request: Request) -> ShortsStore:
    return request.app.state.store


@router.get("/shorts", response_model=List[Short])
async def list_shorts(
    request: Request,
    tag: Optional[str] = Query(default=None),
    q: Optional[str] = Query(default=None),
):
    return get_store(request).list(tag=tag, q=q)


@router.post("/shorts", response_model=Short, status_code=201)
async def create_short(request: Request, payload: Any = Body(default=None)):
    result = validate_short_payload(payload)
    if not result.ok:
        logger.info("Rejected short payload: %s", ", ".join(sorted(result.errors)))
        raise HTTPException(
            status_code=400,
            detail={"message": "Validation failed", "errors": result.errors},
        )
    short = get_store(request).create(result.value)
    logger.info("Created short %s (%s)", short.id, short.title)
    return short


def create_app(settings: Optional[Settings] = None, store: Optional[ShortsStore] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Short-flix API", version="1.0.0")
    app.state.store = store if store is not None else ShortsStore()

    origins = [o for o in settings.cors_origins if o]
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.include_router(router, prefix=settings.api_prefix.rstrip("/"))

    @app.get("/health")
    async def health():
        return {"status": "ok", "shorts": len(app.state.store)}

    index_html = render_index(settings.api_prefix.rstrip("/"), settings.favorites_key)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return HTMLResponse(content=index_html)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
