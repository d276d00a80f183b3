"""HTML fragments the explorer page swaps in without a full reload."""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from icon_explorer.api.deps import get_renderer, get_session
from icon_explorer.explorer import BufferedClipboard, ExplorerRenderer, ExplorerSession
from icon_explorer.modules.icons import IconNotFoundError
from icon_explorer.schemas import CopyRequest, ErrorResponse, LoadProgressResponse, VariantSelection

router = APIRouter()


@router.get("/grid", response_class=HTMLResponse, summary="Filtered and sorted icon grid")
async def render_grid(
    q: str = "",
    regex: bool = False,
    sort: str = "name",
    view: Optional[str] = None,
    session: ExplorerSession = Depends(get_session),
    renderer: ExplorerRenderer = Depends(get_renderer),
) -> HTMLResponse:
    await session.ensure_loaded()
    session.apply_filter(query=q, regex_mode=regex, sort_key=sort, view_size=view)
    return HTMLResponse(renderer.render_results(session))


@router.get("/progress", response_model=LoadProgressResponse, summary="Preview loading progress")
async def load_progress(session: ExplorerSession = Depends(get_session)) -> LoadProgressResponse:
    progress = session.progress()
    return LoadProgressResponse(
        loaded=progress.loaded,
        total=progress.total,
        percentage=progress.percentage,
        label=progress.label,
        done=not session.loading,
    )


@router.get(
    "/cards/{base_name}",
    response_class=HTMLResponse,
    summary="One card as currently selected",
    responses={404: {"model": ErrorResponse}},
)
async def render_card(
    base_name: str,
    session: ExplorerSession = Depends(get_session),
    renderer: ExplorerRenderer = Depends(get_renderer),
) -> HTMLResponse:
    await session.ensure_loaded()
    return HTMLResponse(renderer.render_card(session, session.get_group(base_name)))


@router.post(
    "/cards/{base_name}/variant",
    response_class=HTMLResponse,
    summary="Switch the variant shown on one card",
    responses={404: {"model": ErrorResponse}},
)
async def change_variant(
    base_name: str,
    payload: VariantSelection,
    session: ExplorerSession = Depends(get_session),
    renderer: ExplorerRenderer = Depends(get_renderer),
) -> HTMLResponse:
    await session.ensure_loaded()
    group = session.select_variant(base_name, payload.variant)
    return HTMLResponse(renderer.render_card_bindings(session, group))


@router.post(
    "/cards/{base_name}/copy",
    response_class=PlainTextResponse,
    summary="Raw markup of the variant shown on the card, for the clipboard",
    responses={404: {"model": ErrorResponse}},
)
async def copy_markup(
    base_name: str,
    payload: Optional[CopyRequest] = None,
    session: ExplorerSession = Depends(get_session),
) -> PlainTextResponse:
    await session.ensure_loaded()
    filename = payload.filename if payload is not None else None
    clipboard = BufferedClipboard()
    if not await session.copy_markup(base_name, clipboard, filename=filename) or clipboard.text is None:
        raise IconNotFoundError(detail=base_name)
    return PlainTextResponse(clipboard.text)
