"""Where the explorer gets its icon listing and raw markup from."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from icon_explorer.modules.icons import Icon, IconNotFoundError, IconService, IconSourceError
from icon_explorer.schemas import IconRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[IconRecord])


class IconSource(Protocol):
    async def list_icons(self) -> list[Icon]:
        ...

    async def fetch_markup(self, icon: Icon) -> str:
        ...


class LocalIconSource:
    """Reads icons straight from an :class:`IconService` in the same process."""

    def __init__(self, service: IconService) -> None:
        self._service = service

    async def list_icons(self) -> list[Icon]:
        return await self._service.list_icons()

    async def fetch_markup(self, icon: Icon) -> str:
        return await self._service.read_icon_text(icon.filename)


class HttpIconSource:
    """Talks to a running explorer server over its HTTP API."""

    def __init__(self, client: httpx.AsyncClient, api_prefix: str = "/api") -> None:
        self._client = client
        self._api_prefix = api_prefix.rstrip("/")

    async def list_icons(self) -> list[Icon]:
        try:
            response = await self._client.get(f"{self._api_prefix}/icons")
            response.raise_for_status()
            records = _RECORDS.validate_python(response.json())
        except httpx.HTTPError as exc:
            raise IconSourceError(detail=str(exc)) from exc
        except (ValueError, ValidationError) as exc:
            raise IconSourceError("Invalid icon listing", detail=str(exc)) from exc
        return [record.to_icon() for record in records]

    async def fetch_markup(self, icon: Icon) -> str:
        try:
            response = await self._client.get(icon.url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.debug("Fetching %s failed: %s", icon.url, exc)
            raise IconNotFoundError(detail=icon.filename) from exc
        return response.text
