"""Reusable FastAPI dependencies."""

from fastapi import Request

from icon_explorer.core.container import ApplicationContainer
from icon_explorer.explorer import ExplorerRenderer, ExplorerSession
from icon_explorer.modules.icons import IconService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_icon_service(request: Request) -> IconService:
    return get_container(request).icon_service


def get_session(request: Request) -> ExplorerSession:
    return get_container(request).session


def get_renderer(request: Request) -> ExplorerRenderer:
    return get_container(request).renderer


__all__ = [
    "get_container",
    "get_icon_service",
    "get_session",
    "get_renderer",
]
