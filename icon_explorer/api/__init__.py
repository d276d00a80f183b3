from fastapi import APIRouter

from icon_explorer.api.routers import icons, ui


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(icons.router, tags=["icons"])
    return router


def create_ui_router(prefix: str = "/ui") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(ui.router, tags=["ui"])
    return router


__all__ = [
    "create_api_router",
    "create_ui_router",
]
