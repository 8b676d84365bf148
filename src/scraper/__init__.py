"""Browser-driven FAQ scraping and webhook forwarding."""

from .dispatch import run_targets, scrape_all
from .extract import extract_faq_items, extract_page
from .models import DeliveryOutcome, FaqItem, PageResult, ScrapeResponse
from .selectors import DEFAULT_SELECTORS, FaqSelectors
from .sink import forward_result
from .targets import DEFAULT_TARGETS, TargetPage

__all__ = [
    "DEFAULT_SELECTORS",
    "DEFAULT_TARGETS",
    "DeliveryOutcome",
    "FaqItem",
    "FaqSelectors",
    "PageResult",
    "ScrapeResponse",
    "TargetPage",
    "extract_faq_items",
    "extract_page",
    "forward_result",
    "run_targets",
    "scrape_all",
]
