"""Sequential scrape of every target page with per-page webhook delivery."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx
from playwright.async_api import Page, async_playwright

from src.config import Settings

from .extract import extract_page
from .models import PageResult
from .selectors import FaqSelectors
from .sink import forward_result
from .targets import DEFAULT_TARGETS, TargetPage

logger = logging.getLogger(__name__)


async def run_targets(
    page: Page,
    client: httpx.AsyncClient,
    settings: Settings,
    targets: Sequence[TargetPage] = DEFAULT_TARGETS,
) -> list[PageResult]:
    """Visit each target on one page, forward each result, and return them all.

    A page that fails to load or extract is logged and left out; a webhook
    failure only affects its own log lines.
    """
    selectors = FaqSelectors.from_settings(settings)
    results: list[PageResult] = []

    for target in targets:
        url = target.url_for(settings.base_url)
        logger.info("visiting page", extra={"url": url, "target": target.name})
        try:
            await page.goto(url, wait_until="networkidle", timeout=settings.navigation_timeout_ms)
            result = await extract_page(
                page,
                url,
                selectors,
                faq_wait_timeout_ms=settings.faq_wait_timeout_ms,
                answer_wait_timeout_ms=settings.answer_wait_timeout_ms,
            )
        except Exception:
            logger.error("page scrape failed", extra={"url": url, "target": target.name}, exc_info=True)
            continue

        results.append(result)
        outcome = await forward_result(client, settings.webhook_url, result)
        logger.info(
            "page scraped",
            extra={
                "url": url,
                "target": target.name,
                "faq_items": len(result.faq_items),
                "delivered": outcome.delivered,
            },
        )

    return results


async def scrape_all(
    settings: Settings,
    targets: Sequence[TargetPage] = DEFAULT_TARGETS,
) -> list[PageResult]:
    """Launch one headless Chromium session and run every target through it."""
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=settings.headless, args=settings.chromium_args)
        try:
            page = await browser.new_page()
            async with httpx.AsyncClient(timeout=settings.sink_timeout_seconds) as client:
                results = await run_targets(page, client, settings, targets)
        finally:
            await browser.close()

    logger.info("scrape run finished", extra={"targets": len(targets), "results": len(results)})
    return results
