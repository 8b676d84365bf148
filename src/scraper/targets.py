"""Static list of site pages to visit on every scrape."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TargetPage:
    """A page path relative to the site base URL, plus a display name."""

    path: str
    name: str

    def url_for(self, base_url: str) -> str:
        """Join *base_url* and the path with exactly one slash between them."""
        return base_url.rstrip("/") + "/" + self.path.lstrip("/")


DEFAULT_TARGETS: tuple[TargetPage, ...] = (
    TargetPage("/", "Home"),
    TargetPage("/use-cases", "Use Cases"),
    TargetPage("/resources", "Resources"),
    TargetPage("/about", "About"),
    TargetPage("/services/sms", "SMS Marketing"),
    TargetPage("/services/email", "Email Marketing"),
    TargetPage("/services/automation", "Automation"),
    TargetPage("/docs", "Developer Docs"),
    TargetPage("/articles/more-time-on-moneymaking-operations", "Automating Customer Support"),
    TargetPage("/articles/mass-marketing-doesnt-work", "Mass Marketing Doesn't Work"),
    TargetPage("/articles/build-a-personalized-ai-chatbot", "Build Personalized AI Chatbot"),
    TargetPage("/articles/perfect-client", "Perfect Client"),
)
