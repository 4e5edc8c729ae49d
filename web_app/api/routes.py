"""API routes implementation."""

from typing import List

from fastapi import APIRouter, Request, HTTPException, Response, status
from datetime import datetime, timezone

from .schemas import (
    CreateLinkRequest,
    LinkResponse,
    HealthResponse,
    ErrorResponse,
)
from shortlinks.database.models import Link
from shortlinks.results import (
    Accepted,
    DeleteResult,
    RejectedAbbreviationTaken,
    RejectedDuplicateUrl,
)
from ..request_urls import short_url_for

router = APIRouter()


def _link_response(request: Request, link: Link) -> LinkResponse:
    return LinkResponse(
        abbreviation=link.abbreviation,
        short_url=short_url_for(request, link.abbreviation),
        url=link.url,
        created_at=link.created_at,
    )


@router.post(
    "/links",
    response_model=LinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        409: {"model": ErrorResponse, "description": "URL already shortened or abbreviation taken"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short link",
    description="Shorten a URL. The abbreviation is generated from the URL unless one is given.",
)
async def create_link(request: Request, body: CreateLinkRequest):
    """Create a short link."""
    service = request.app.state.service
    
    try:
        result = await service.register(Link(url=body.url, abbreviation=body.abbreviation.strip()))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal error: {str(e)}",
        )
    
    if isinstance(result, Accepted):
        return _link_response(request, result.link)
    
    if isinstance(result, RejectedDuplicateUrl):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=result.field_errors["url"],
        )
    
    if isinstance(result, RejectedAbbreviationTaken):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=result.message,
        )
    
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="; ".join(f"{name}: {error}" for name, error in result.field_errors.items()),
    )


@router.get(
    "/links",
    response_model=List[LinkResponse],
    summary="List short links",
)
async def list_links(request: Request):
    """List all short links, oldest first."""
    service = request.app.state.service
    
    links = await service.list_links()
    
    return [_link_response(request, link) for link in links]


@router.get(
    "/links/{abbreviation}",
    response_model=LinkResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Abbreviation not found"},
    },
    summary="Get short link",
)
async def get_link(request: Request, abbreviation: str):
    """Get a short link by abbreviation."""
    service = request.app.state.service
    
    link = await service.get_link(abbreviation)
    
    if not link:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Abbreviation '{abbreviation}' not found",
        )
    
    return _link_response(request, link)


@router.delete(
    "/links/{abbreviation}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        404: {"model": ErrorResponse, "description": "Abbreviation not found"},
    },
    summary="Delete short link",
)
async def delete_link(request: Request, abbreviation: str):
    """Delete a short link."""
    service = request.app.state.service
    
    result = await service.delete(abbreviation)
    
    if result is DeleteResult.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Abbreviation '{abbreviation}' not found",
        )
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for proxies and monitoring."""
    service = request.app.state.service
    
    health = await service.health_check()
    
    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
