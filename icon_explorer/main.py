import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from icon_explorer import __version__
from icon_explorer.api import create_api_router, create_ui_router
from icon_explorer.core.config import Settings, get_settings
from icon_explorer.core.container import build_container
from icon_explorer.modules.icons import IconError
from icon_explorer.schemas import ErrorResponse

logger = logging.getLogger(__name__)


class IconFiles(StaticFiles):
    """Static files from the icons directory; a missing directory serves 404s."""

    async def check_config(self) -> None:
        if self.directory is not None and not Path(self.directory).is_dir():
            logger.warning("Icons directory %s does not exist", self.directory)
            return
        await super().check_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.container.aclose()


async def icon_error_handler(request: Request, exc: IconError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    container = build_container(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Browse, search and download SVG icons",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(IconError, icon_error_handler)

    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(create_ui_router())

    @app.get("/", response_class=HTMLResponse)
    async def homepage(
        request: Request,
        q: str = "",
        regex: bool = False,
        sort: str = "name",
        view: Optional[str] = None,
    ):
        session = container.session
        task = session.start_load()
        await asyncio.wait({task}, timeout=settings.initial_load_wait)
        if task.done():
            task.result()
        session.apply_filter(query=q, regex_mode=regex, sort_key=sort, view_size=view)
        context = container.renderer.context(session)
        context["project_name"] = settings.project_name
        context["static_version"] = __version__
        return container.templates.TemplateResponse(request, "index.html", context)

    if settings.static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")
    app.mount(
        "/icons",
        IconFiles(directory=str(settings.icons_dir), check_dir=False),
        name="icons",
    )

    return app


app = create_app()
