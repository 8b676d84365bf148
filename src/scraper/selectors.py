"""CSS selectors describing the FAQ accordion markup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.config import Settings


@dataclass(frozen=True)
class FaqSelectors:
    """The four selectors used to walk an FAQ accordion.

    ``question``, ``reveal`` and ``answer`` are evaluated relative to a
    single ``container`` element.
    """

    container: str = r".border-b.border-white\/10"
    question: str = "button span"
    reveal: str = "button"
    answer: str = "p.pb-6.text-gray-400.whitespace-pre-line"

    @classmethod
    def from_settings(cls, settings: Settings) -> FaqSelectors:
        return cls(
            container=settings.faq_container_selector,
            question=settings.question_selector,
            reveal=settings.reveal_selector,
            answer=settings.answer_selector,
        )


DEFAULT_SELECTORS = FaqSelectors()
