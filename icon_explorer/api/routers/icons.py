"""Icon listing and download endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from icon_explorer.api.deps import get_icon_service
from icon_explorer.modules.icons import IconService
from icon_explorer.schemas import ErrorResponse, IconRecord

router = APIRouter()


@router.get(
    "/icons",
    response_model=list[IconRecord],
    summary="List every SVG icon",
    responses={500: {"model": ErrorResponse}},
)
async def list_icons(service: IconService = Depends(get_icon_service)) -> list[IconRecord]:
    icons = await service.list_icons()
    return [IconRecord.from_icon(icon) for icon in icons]


@router.get(
    "/download/{filename}",
    summary="Download a single SVG icon",
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def download_icon(filename: str, service: IconService = Depends(get_icon_service)) -> Response:
    download = await service.download_icon(filename)
    return Response(
        content=download.content,
        media_type=download.media_type,
        headers={"Content-Disposition": download.content_disposition},
    )
