"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class CreateLinkRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The URL to shorten")
    abbreviation: str = Field("", description="Optional abbreviation; generated from the URL when empty")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://sub.example.com/path/to/index.html",
                    "abbreviation": ""
                },
                {
                    "url": "https://github.com/user/repo",
                    "abbreviation": "myrepo"
                }
            ]
        }
    }


class LinkResponse(BaseModel):
    """A stored link."""

    abbreviation: str = Field(..., description="The abbreviation")
    short_url: str = Field(..., description="The complete short URL")
    url: str = Field(..., description="The original long URL")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "abbreviation": "sbxmplpti",
                    "short_url": "https://short.link/sbxmplpti",
                    "url": "https://sub.example.com/path/to/index.html",
                    "created_at": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Store status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")
