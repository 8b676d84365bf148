"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    host: str = "0.0.0.0"
    port: int = 3000

    base_url: str = "https://expressnext.app"
    webhook_url: str = "https://hook.us1.make.com/ei6kt5n8hdp5ibee2qi0q2q6uqrv2dny"
    sink_timeout_seconds: float = 10.0

    headless: bool = True
    browser_args: str = ""
    navigation_timeout_ms: int = 30000
    faq_wait_timeout_ms: int = 10000
    answer_wait_timeout_ms: int = 5000

    faq_container_selector: str = r".border-b.border-white\/10"
    question_selector: str = "button span"
    reveal_selector: str = "button"
    answer_selector: str = "p.pb-6.text-gray-400.whitespace-pre-line"

    log_level: str = "INFO"

    @property
    def chromium_args(self) -> list[str]:
        """Extra Chromium flags from the comma-separated BROWSER_ARGS."""
        return [a.strip() for a in self.browser_args.split(",") if a.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
