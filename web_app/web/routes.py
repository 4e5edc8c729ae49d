"""Web interface routes implementation."""

import os
from urllib.parse import urlencode
from typing import Dict, Optional

from fastapi import APIRouter, Request, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from shortlinks.database.models import Link
from shortlinks.results import (
    Accepted,
    DeleteResult,
    RejectedAbbreviationTaken,
    ToUrl,
)
from ..request_urls import home_url_for, path_prefix_for, short_url_for

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "..", "ux", "web")
templates = Jinja2Templates(directory=template_dir)

# Messages shown on the homepage after a redirect, selected by the msg query parameter
SUCCESS_MESSAGES = {
    "created": "Successfully added a new short link!",
    "deleted": "Successfully deleted short link",
}
ERROR_MESSAGES = {
    "delete_missing": "Short link could not be deleted, because it was not found in the database",
}


async def _render_index(
    request: Request,
    link: Link,
    field_errors: Optional[Dict[str, str]] = None,
    error: Optional[str] = None,
    success: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    service = request.app.state.service
    links = await service.list_links()

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "links": [
                {"link": stored, "short_url": short_url_for(request, stored.abbreviation)}
                for stored in links
            ],
            "link": link,
            "field_errors": field_errors or {},
            "error": error,
            "success": success,
            "prefix": path_prefix_for(request),
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request, msg: str = "", abbreviation: str = ""):
    """List all links with an empty submission form."""
    success = SUCCESS_MESSAGES.get(msg)
    if success and msg == "created" and abbreviation:
        success = f"{success} ({short_url_for(request, abbreviation)})"

    return await _render_index(
        request,
        Link(),
        error=ERROR_MESSAGES.get(msg),
        success=success,
    )


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
async def create_link_web(
    request: Request,
    url: str = Form(""),
    abbreviation: str = Form(""),
):
    """Handle form submission to create a short link."""
    service = request.app.state.service

    result = await service.register(Link(url=url.strip(), abbreviation=abbreviation.strip()))

    if isinstance(result, Accepted):
        query = urlencode({"msg": "created", "abbreviation": result.link.abbreviation})
        return RedirectResponse(
            url=home_url_for(request, query),
            status_code=status.HTTP_303_SEE_OTHER,
        )

    # Show the form again with the submitted values
    if isinstance(result, RejectedAbbreviationTaken):
        return await _render_index(
            request,
            result.link,
            error=result.message,
            status_code=status.HTTP_409_CONFLICT,
        )

    return await _render_index(
        request,
        result.link,
        field_errors=result.field_errors,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = await service.health_check()

    if not health["overall"]:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unhealthy",
        )
    return {"status": "healthy"}


@router.get("/{abbreviation}", include_in_schema=False)
async def redirect_to_url(request: Request, abbreviation: str):
    """Redirect to the URL behind an abbreviation, or to the homepage."""
    service = request.app.state.service

    target = await service.resolve(abbreviation)

    if isinstance(target, ToUrl):
        return RedirectResponse(url=target.url, status_code=status.HTTP_302_FOUND)
    return RedirectResponse(url=home_url_for(request), status_code=status.HTTP_302_FOUND)


@router.post("/{abbreviation}/delete", include_in_schema=False)
async def delete_link_web(request: Request, abbreviation: str):
    """Delete a link and return to the homepage."""
    service = request.app.state.service

    result = await service.delete(abbreviation)

    msg = "deleted" if result is DeleteResult.DELETED else "delete_missing"
    return RedirectResponse(
        url=home_url_for(request, urlencode({"msg": msg})),
        status_code=status.HTTP_303_SEE_OTHER,
    )
