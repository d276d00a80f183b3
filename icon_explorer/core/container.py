"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi.templating import Jinja2Templates

from icon_explorer.core.config import Settings
from icon_explorer.explorer import (
    ExplorerRenderer,
    ExplorerSession,
    HttpIconSource,
    IconSource,
    LocalIconSource,
)
from icon_explorer.modules.icons import IconService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    icon_service: IconService
    session: ExplorerSession
    templates: Jinja2Templates
    renderer: ExplorerRenderer
    http_client: Optional[httpx.AsyncClient] = None

    async def aclose(self) -> None:
        if self.http_client is not None:
            await self.http_client.aclose()


def build_container(
    settings: Settings, http_client: Optional[httpx.AsyncClient] = None
) -> ApplicationContainer:
    """Wire the explorer to the local icons directory, or to a remote server when configured."""
    icon_service = IconService.from_settings(settings)

    source: IconSource
    asset_base_url = ""
    if settings.remote_url:
        if http_client is None:
            http_client = httpx.AsyncClient(base_url=settings.remote_url, timeout=settings.source.timeout)
        source = HttpIconSource(http_client, api_prefix=settings.api_prefix)
        asset_base_url = settings.remote_url
    else:
        source = LocalIconSource(icon_service)

    session = ExplorerSession(source, preview_size=settings.preview_size)
    templates = Jinja2Templates(directory=str(settings.template_dir))
    renderer = ExplorerRenderer(
        templates,
        copy_feedback_ms=settings.copy_feedback_ms,
        asset_base_url=asset_base_url,
    )
    return ApplicationContainer(
        settings=settings,
        icon_service=icon_service,
        session=session,
        templates=templates,
        renderer=renderer,
        http_client=http_client,
    )


__all__ = ["ApplicationContainer", "build_container"]
