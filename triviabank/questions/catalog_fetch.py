from __future__ import annotations

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from triviabank.questions.types import CatalogFailureKind, CatalogLoadResult, Question

DEFAULT_CATALOG_PATH = "data/questions.json"

_QUESTION_LIST_ADAPTER = TypeAdapter(list[Question])


def _is_json_media_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def parse_catalog_payload(payload: Any) -> CatalogLoadResult:
    if payload is None:
        return CatalogLoadResult.loaded(())
    if not isinstance(payload, list):
        return CatalogLoadResult.failed(
            CatalogFailureKind.PARSE,
            f"expected a JSON array of questions, got {type(payload).__name__}",
        )

    try:
        questions = _QUESTION_LIST_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        return CatalogLoadResult.failed(CatalogFailureKind.PARSE, str(exc))
    return CatalogLoadResult.loaded(questions)


async def fetch_catalog(
    client: httpx.AsyncClient,
    path: str = DEFAULT_CATALOG_PATH,
) -> CatalogLoadResult:
    try:
        response = await client.get(path)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        return CatalogLoadResult.failed(CatalogFailureKind.TRANSPORT, str(exc) or type(exc).__name__)

    content_type = response.headers.get("content-type", "")
    if content_type and not _is_json_media_type(content_type):
        return CatalogLoadResult.failed(
            CatalogFailureKind.UNSUPPORTED,
            f"unsupported content type: {content_type}",
        )

    try:
        payload = response.json()
    except ValueError as exc:
        return CatalogLoadResult.failed(CatalogFailureKind.PARSE, str(exc))
    return parse_catalog_payload(payload)
