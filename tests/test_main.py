from __future__ import annotations

import logging

import pytest
import structlog

from triviabank.core.config import Settings
from triviabank.main import create_question_service


@pytest.fixture(autouse=True)
def restore_structlog_defaults():
    yield
    structlog.reset_defaults()
    logging.basicConfig(force=True)


@pytest.mark.asyncio
async def test_create_question_service_builds_owned_client_from_settings() -> None:
    settings = Settings(
        CATALOG_BASE_URL="https://trivia.example.local/",
        CATALOG_PATH="static/bank.json",
        CATALOG_TIMEOUT_SECONDS=2.5,
        CATALOG_BACKFILL_SUB_CATEGORIES=False,
    )

    service = create_question_service(settings)
    client = service._client

    assert service.catalog_path == "static/bank.json"
    assert str(client.base_url) == "https://trivia.example.local/"
    assert client.timeout.connect == 2.5
    assert service.is_loaded is False

    await service.aclose()
    assert client.is_closed is True
