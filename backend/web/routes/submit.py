"""Submission endpoints: HTML form and multipart POST."""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.datastructures import UploadFile

from backend.wall.errors import InternalError, ValidationError
from backend.wall.submissions import ImageUpload, SubmissionInput, pick_success_phrase

from ..components import Layout, SubmissionForm, SuccessCard
from ..dependencies import WallServices, get_services

submit_router = APIRouter(tags=["Submit"])
logger = structlog.get_logger(__name__)


def _json(body: dict, *, status_code: int) -> JSONResponse:
    return JSONResponse(body, status_code=status_code, headers={"Cache-Control": "no-store"})


def _fragment(html: str, *, reswap: bool = False) -> HTMLResponse:
    headers = {"Cache-Control": "no-store", "Vary": "HX-Request"}
    if reswap:
        # Replace the whole form so the error and preserved values show up.
        headers["HX-Reswap"] = "outerHTML"
    return HTMLResponse(html, status_code=200, headers=headers)


def _text_field(form, key: str) -> Optional[str]:
    value = form.get(key)
    return value if isinstance(value, str) else None


async def _image_field(form) -> Optional[ImageUpload]:
    value = form.get("image")
    if not isinstance(value, UploadFile):
        return None
    body = await value.read()
    return ImageUpload(
        body=body,
        content_type=(value.content_type or "").lower(),
        filename=value.filename,
    )


@submit_router.get("/submit", response_class=HTMLResponse)
async def submit_page(services: WallServices = Depends(get_services)):
    title = services.settings.EVENT_TITLE
    form_html = SubmissionForm(event_title=title).render()
    content = f'<div class="submit-page">{form_html}</div>'
    return HTMLResponse(Layout("Post a message", content, event_title=title).render())


@submit_router.post("/submit")
async def submit_message(request: Request, services: WallServices = Depends(get_services)):
    """
    Accept one wall entry (text or image) from a multipart form.

    Behavior:
        - JSON clients: 200 `{success, message}`, 400 `{error, detail}`,
          500 `{error}`.
        - HTMX clients (`HX-Request`): always 200 with an HTML fragment;
          the success card or the form re-rendered with the error.
    """
    is_htmx = bool(request.headers.get("HX-Request"))
    form = await request.form()
    try:
        req = SubmissionInput(
            name=_text_field(form, "name") or "",
            message=_text_field(form, "message"),
            image=await _image_field(form),
        )
    finally:
        await form.close()

    title = services.settings.EVENT_TITLE
    values = {"name": req.name, "message": req.message or ""}
    try:
        record = await services.submit.execute(req)
    except ValidationError as exc:
        logger.info("submission_rejected", reason=exc.code)
        if is_htmx:
            return _fragment(SubmissionForm(error=exc.message, values=values, event_title=title).render(), reswap=True)
        return _json({"error": exc.message, "detail": exc.code}, status_code=400)
    except InternalError as exc:
        if is_htmx:
            return _fragment(SubmissionForm(error=exc.message, values=values, event_title=title).render(), reswap=True)
        return _json({"error": exc.message}, status_code=500)

    if is_htmx:
        return _fragment(SuccessCard(record, pick_success_phrase()).render())
    return _json({"success": True, "message": record.model_dump(mode="json")}, status_code=200)
