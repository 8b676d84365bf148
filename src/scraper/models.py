"""Data models for scraped pages and their delivery."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Payload(BaseModel):
    """Immutable model serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FaqItem(_Payload):
    question: str
    answer: str = ""


class PageResult(_Payload):
    """Everything extracted from one target page."""

    url: str
    faq_items: list[FaqItem] = []
    full_page_text: str = ""


class ScrapeResponse(_Payload):
    message: str
    results: list[PageResult] = []


@dataclass(frozen=True)
class DeliveryOutcome:
    """Result of forwarding one PageResult to the webhook."""

    url: str
    delivered: bool
    status_code: int | None = None
    error: str | None = None
