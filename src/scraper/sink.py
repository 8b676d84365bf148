"""Webhook delivery for scraped pages."""

from __future__ import annotations

import logging

import httpx

from .models import DeliveryOutcome, PageResult

logger = logging.getLogger(__name__)


async def forward_result(
    client: httpx.AsyncClient,
    webhook_url: str,
    result: PageResult,
) -> DeliveryOutcome:
    """POST *result* as JSON to the webhook.

    Failures are logged and reported in the returned outcome; nothing is
    raised and nothing is retried.
    """
    logger.info("sending page to webhook", extra={"url": result.url})
    try:
        resp = await client.post(webhook_url, json=result.model_dump(mode="json", by_alias=True))
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.error("webhook request failed", extra={"url": result.url}, exc_info=True)
        return DeliveryOutcome(url=result.url, delivered=False, error=str(exc) or type(exc).__name__)

    if resp.is_success:
        logger.info("webhook accepted page", extra={"url": result.url, "status_code": resp.status_code})
        return DeliveryOutcome(url=result.url, delivered=True, status_code=resp.status_code)

    logger.error(
        "webhook rejected page",
        extra={"url": result.url, "status_code": resp.status_code, "reason": resp.reason_phrase},
    )
    return DeliveryOutcome(
        url=result.url,
        delivered=False,
        status_code=resp.status_code,
        error=resp.reason_phrase,
    )
