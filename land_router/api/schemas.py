"""Response models for the routing API."""

from typing import List

from pydantic import BaseModel, Field


class RouteResponse(BaseModel):
    """Successful route lookup"""
    route: List[str] = Field(..., min_length=1, description="Country codes from origin to destination")


class ErrorResponse(BaseModel):
    """Rejected route lookup"""
    error: str = Field(..., description="Human-readable reason")
