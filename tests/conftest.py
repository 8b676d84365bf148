"""Fixtures — test settings."""

import pytest

from src.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        base_url="https://site.test",
        webhook_url="https://hooks.test/incoming",
        faq_wait_timeout_ms=10,
        answer_wait_timeout_ms=5,
    )
