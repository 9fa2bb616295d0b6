import httpx

from triviabank.core.config import Settings, get_settings
from triviabank.core.logging import configure_logging
from triviabank.questions.service import QuestionService


def create_question_service(settings: Settings | None = None) -> QuestionService:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    client = httpx.AsyncClient(
        base_url=settings.catalog_base_url,
        timeout=settings.catalog_timeout_seconds,
    )
    return QuestionService(
        client,
        catalog_path=settings.catalog_path,
        normalize_sub_categories=settings.catalog_backfill_sub_categories,
        owns_client=True,
    )
