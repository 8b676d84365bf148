"""Service layer — runs scrapes for the API routes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.api.schemas import ScrapeResponse, TargetInfo
from src.config import Settings
from src.scraper import DEFAULT_TARGETS, TargetPage, scrape_all

logger = logging.getLogger(__name__)


async def run_scrape(
    settings: Settings,
    targets: Sequence[TargetPage] = DEFAULT_TARGETS,
) -> ScrapeResponse:
    """Scrape every target and wrap the results for the HTTP caller."""
    logger.info("scrape started", extra={"base_url": settings.base_url, "targets": len(targets)})
    results = await scrape_all(settings, targets)
    return ScrapeResponse(message="Scrape complete.", results=results)


def list_targets(
    settings: Settings,
    targets: Sequence[TargetPage] = DEFAULT_TARGETS,
) -> list[TargetInfo]:
    """Describe the configured targets with their resolved URLs."""
    return [
        TargetInfo(name=t.name, path=t.path, url=t.url_for(settings.base_url))
        for t in targets
    ]
