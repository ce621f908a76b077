import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, Response
from fastapi.staticfiles import StaticFiles

from cocktail_api import CocktailDBClient
from config import Settings
from controller import CocktailController
from display_state import CATEGORIES, DETAIL, ViewerStates
from renderer import render_page, render_region

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"
VIEWER_HEADER = "X-Viewer-Id"


def get_controller(request: Request) -> CocktailController:
    """Controller bound to the display state of the page that sent the request."""
    state = request.app.state.viewers.get(request.headers.get(VIEWER_HEADER))
    return CocktailController(request.app.state.client, state)


def region_response(controller: CocktailController, region: str, current: bool) -> Response:
    # 204 tells htmx not to swap: a newer request from the same page owns the region
    if not current:
        return Response(status_code=204)
    return HTMLResponse(render_region(controller.state.get(region)))


def create_app(settings: Optional[type] = None, client: Optional[CocktailDBClient] = None) -> FastAPI:
    settings = settings or Settings

    # === App Setup ===
    app = FastAPI(
        title="Cocktail Browser",
        description="Search, browse and view cocktails from TheCocktailDB",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS or ["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # === Cocktail Client ===
    if client is None:
        client = CocktailDBClient(
            base_url=settings.COCKTAILDB_BASE_URL,
            timeout=settings.COCKTAILDB_TIMEOUT,
        )
    logger.info("Using TheCocktailDB at %s", client.api_base)
    app.state.client = client
    app.state.viewers = ViewerStates(settings.MAX_VIEWERS)

    # === Routes ===
    @app.get("/health")
    def health():
        return {"status": "ok", "time": datetime.now(timezone.utc)}

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        viewer_id, state = request.app.state.viewers.open()
        controller = CocktailController(request.app.state.client, state)
        await controller.load_categories()
        return render_page(
            render_region(state.get(CATEGORIES)),
            render_region(state.get(DETAIL)),
            viewer_id=viewer_id,
        )

    @app.get("/list", response_class=HTMLResponse)
    async def categories(request: Request):
        controller = get_controller(request)
        current = await controller.load_categories()
        return region_response(controller, CATEGORIES, current)

    @app.get("/search", response_class=HTMLResponse)
    async def search(request: Request, s: str = ""):
        controller = get_controller(request)
        current = await controller.search(s)
        return region_response(controller, DETAIL, current)

    @app.get("/random", response_class=HTMLResponse)
    async def random(request: Request):
        controller = get_controller(request)
        current = await controller.random()
        return region_response(controller, DETAIL, current)

    @app.get("/filter", response_class=HTMLResponse)
    async def cocktails_by_category(request: Request, c: str):
        controller = get_controller(request)
        current = await controller.browse_category(c)
        return region_response(controller, DETAIL, current)

    @app.get("/lookup", response_class=HTMLResponse)
    async def cocktail_details(request: Request, i: str):
        controller = get_controller(request)
        current = await controller.show_details(i)
        return region_response(controller, DETAIL, current)

    return app
