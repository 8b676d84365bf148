"""FAQ and page-text extraction from a Playwright page."""

from __future__ import annotations

import logging

from playwright.async_api import ElementHandle, Page
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .models import FaqItem, PageResult
from .selectors import DEFAULT_SELECTORS, FaqSelectors

logger = logging.getLogger(__name__)

_BODY_TEXT_JS = "() => document.body ? document.body.innerText : ''"


async def _read_question(container: ElementHandle, selectors: FaqSelectors) -> str:
    try:
        label = await container.query_selector(selectors.question)
        if label is None:
            return ""
        return (await label.text_content() or "").strip()
    except PlaywrightError:
        logger.warning("question label unreadable", exc_info=True)
        return ""


async def _reveal_answer(
    container: ElementHandle,
    button: ElementHandle,
    question: str,
    selectors: FaqSelectors,
    timeout_ms: int,
) -> str:
    """Click the toggle and return the trimmed answer, or "" if it never shows."""
    try:
        await button.click()
        answer = await container.wait_for_selector(
            selectors.answer, state="visible", timeout=timeout_ms
        )
        if answer is None:
            return ""
        return (await answer.text_content() or "").strip()
    except PlaywrightTimeoutError:
        logger.warning("answer not visible", extra={"question": question, "timeout_ms": timeout_ms})
        return ""
    except PlaywrightError:
        logger.warning("reveal failed", extra={"question": question}, exc_info=True)
        return ""


async def extract_faq_items(
    page: Page,
    selectors: FaqSelectors = DEFAULT_SELECTORS,
    *,
    faq_wait_timeout_ms: int = 10000,
    answer_wait_timeout_ms: int = 5000,
) -> list[FaqItem]:
    """Walk every FAQ container in document order and collect Q/A pairs.

    Containers without a question label or a reveal control are skipped.
    Questions whose answer never becomes visible are kept with an empty answer.
    """
    try:
        await page.wait_for_selector(
            selectors.container, state="attached", timeout=faq_wait_timeout_ms
        )
    except PlaywrightTimeoutError:
        logger.warning(
            "no faq containers found",
            extra={"url": page.url, "selector": selectors.container, "timeout_ms": faq_wait_timeout_ms},
        )
        return []

    containers = await page.query_selector_all(selectors.container)
    items: list[FaqItem] = []
    for index, container in enumerate(containers):
        question = await _read_question(container, selectors)
        if not question:
            logger.warning("faq item has no question, skipping", extra={"url": page.url, "index": index})
            continue

        button = await container.query_selector(selectors.reveal)
        if button is None:
            logger.warning(
                "faq item has no reveal control, skipping",
                extra={"url": page.url, "index": index, "question": question},
            )
            continue

        answer = await _reveal_answer(container, button, question, selectors, answer_wait_timeout_ms)
        items.append(FaqItem(question=question, answer=answer))

    logger.debug(
        "faq extraction complete",
        extra={"url": page.url, "containers": len(containers), "items": len(items)},
    )
    return items


async def extract_page(
    page: Page,
    url: str,
    selectors: FaqSelectors = DEFAULT_SELECTORS,
    *,
    faq_wait_timeout_ms: int = 10000,
    answer_wait_timeout_ms: int = 5000,
) -> PageResult:
    """Build a PageResult for a page that has already been navigated to *url*."""
    faq_items = await extract_faq_items(
        page,
        selectors,
        faq_wait_timeout_ms=faq_wait_timeout_ms,
        answer_wait_timeout_ms=answer_wait_timeout_ms,
    )
    full_page_text = await page.evaluate(_BODY_TEXT_JS)
    return PageResult(url=url, faq_items=faq_items, full_page_text=full_page_text or "")
