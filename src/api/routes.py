"""GET /scrape and GET /targets endpoint handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api import service
from src.api.schemas import ErrorResponse, ScrapeResponse, TargetInfo
from src.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/scrape",
    response_model=ScrapeResponse,
    responses={500: {"model": ErrorResponse}},
)
async def scrape(settings: Settings = Depends(get_settings)):
    try:
        return await service.run_scrape(settings)
    except Exception as exc:
        logger.exception("scrape failed")
        return JSONResponse(status_code=500, content={"error": str(exc)})


@router.get("/targets", response_model=list[TargetInfo])
async def targets(settings: Settings = Depends(get_settings)):
    return service.list_targets(settings)
