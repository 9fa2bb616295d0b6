from __future__ import annotations

import asyncio
import random
from types import TracebackType
from typing import Callable, Iterable, Sequence

import httpx
import structlog

from triviabank.questions.catalog_fetch import DEFAULT_CATALOG_PATH, fetch_catalog
from triviabank.questions.categories import normalize_sub_categories
from triviabank.questions.filters import CategorySelection, filter_questions
from triviabank.questions.shuffle import RandomSource, shuffle_questions
from triviabank.questions.types import CatalogLoadResult, Question

logger = structlog.get_logger(__name__)


class QuestionService:
    """Session-scoped access to the question catalog.

    The catalog is fetched at most once per instance; a failed fetch is cached
    as an empty catalog. ``reset()`` drops the cache so the next call fetches
    again.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        catalog_path: str = DEFAULT_CATALOG_PATH,
        normalize_sub_categories: bool = True,
        rng_factory: Callable[[], RandomSource] = random.Random,
        owns_client: bool = False,
    ) -> None:
        self._client = client
        self._catalog_path = catalog_path
        self._normalize_sub_categories = normalize_sub_categories
        self._rng_factory = rng_factory
        self._owns_client = owns_client
        self._cache: tuple[Question, ...] | None = None
        self._cache_lock = asyncio.Lock()
        self._last_load_result: CatalogLoadResult | None = None

    @property
    def catalog_path(self) -> str:
        return self._catalog_path

    @property
    def last_load_result(self) -> CatalogLoadResult | None:
        return self._last_load_result

    @property
    def is_loaded(self) -> bool:
        return self._cache is not None

    async def get_all(self) -> tuple[Question, ...]:
        if self._cache is not None:
            return self._cache

        async with self._cache_lock:
            if self._cache is not None:
                return self._cache

            result = await fetch_catalog(self._client, self._catalog_path)
            self._last_load_result = result
            if not result.ok:
                logger.error(
                    "question_catalog_load_failed",
                    failure_kind=result.failure_kind.value if result.failure_kind else None,
                    catalog_path=self._catalog_path,
                    error=result.error_message,
                )
                self._cache = ()
                return self._cache

            questions = result.questions
            if self._normalize_sub_categories:
                questions = normalize_sub_categories(questions)
            self._cache = questions
            logger.info(
                "question_catalog_loaded",
                catalog_path=self._catalog_path,
                questions_total=len(questions),
            )
            return self._cache

    async def get_filtered(self, preferences: CategorySelection) -> Sequence[Question]:
        catalog = await self.get_all()
        return filter_questions(catalog, preferences)

    def shuffle(self, questions: Iterable[Question]) -> list[Question]:
        return shuffle_questions(questions, rng=self._rng_factory())

    def reset(self) -> None:
        self._cache = None
        self._last_load_result = None

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> QuestionService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
