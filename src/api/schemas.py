"""Request/response Pydantic models."""

from pydantic import BaseModel

from src.scraper.models import FaqItem, PageResult, ScrapeResponse

__all__ = ["ErrorResponse", "FaqItem", "PageResult", "ScrapeResponse", "TargetInfo"]


class TargetInfo(BaseModel):
    name: str
    path: str
    url: str


class ErrorResponse(BaseModel):
    error: str
