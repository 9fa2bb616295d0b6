from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

_CANONICAL_KEYS: dict[str, str] = {
    "category": "category",
    "subcategory": "subCategory",
}


class Question(BaseModel):
    """Catalog entry. Fields other than the two category levels pass through as extras."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    category: str = Field(min_length=1)
    sub_category: str = Field(default="", alias="subCategory")

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        folded: dict[Any, Any] = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = _CANONICAL_KEYS.get(key.lower(), key)
            folded[key] = value
        if folded.get("subCategory", "") is None:
            folded.pop("subCategory")
        return folded

    @property
    def payload(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


@dataclass(frozen=True, slots=True)
class QuestionPreferences:
    categories_selected: frozenset[str] = field(default_factory=frozenset)
    sub_categories_selected: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_selections(
        cls,
        *,
        categories: Iterable[str] = (),
        sub_categories: Iterable[str] = (),
    ) -> QuestionPreferences:
        return cls(
            categories_selected=frozenset(categories),
            sub_categories_selected=frozenset(sub_categories),
        )


class CatalogFailureKind(str, Enum):
    TRANSPORT = "TRANSPORT"
    UNSUPPORTED = "UNSUPPORTED"
    PARSE = "PARSE"


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    questions: tuple[Question, ...] = ()
    failure_kind: CatalogFailureKind | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure_kind is None

    @classmethod
    def loaded(cls, questions: Iterable[Question]) -> CatalogLoadResult:
        return cls(questions=tuple(questions))

    @classmethod
    def failed(cls, kind: CatalogFailureKind, message: str) -> CatalogLoadResult:
        return cls(failure_kind=kind, error_message=message)
