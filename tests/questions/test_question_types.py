from __future__ import annotations

import pydantic
import pytest

from triviabank.questions.types import (
    CatalogFailureKind,
    CatalogLoadResult,
    Question,
    QuestionPreferences,
)


def test_question_binds_known_fields_case_insensitively() -> None:
    question = Question.model_validate(
        {"CATEGORY": "Science_Biology", "subcategory": "Genetics", "Prompt": "DNA?"}
    )

    assert question.category == "Science_Biology"
    assert question.sub_category == "Genetics"
    assert question.payload == {"Prompt": "DNA?"}


def test_question_reads_null_sub_category_as_empty() -> None:
    question = Question.model_validate({"category": "History", "subCategory": None})

    assert question.sub_category == ""


def test_question_accepts_python_field_names() -> None:
    question = Question(category="Geography", sub_category="Rivers")

    assert question.sub_category == "Rivers"


def test_question_is_frozen_after_load() -> None:
    question = Question.model_validate({"category": "History"})

    with pytest.raises(pydantic.ValidationError):
        question.sub_category = "Rome"  # type: ignore[misc]


def test_preferences_from_selections_builds_frozensets() -> None:
    preferences = QuestionPreferences.from_selections(
        categories=["Science", "Science"],
        sub_categories=("Biology",),
    )

    assert preferences.categories_selected == frozenset({"Science"})
    assert preferences.sub_categories_selected == frozenset({"Biology"})
    assert QuestionPreferences().categories_selected == frozenset()


def test_catalog_load_result_failed_has_no_questions() -> None:
    result = CatalogLoadResult.failed(CatalogFailureKind.UNSUPPORTED, "text/html")

    assert result.ok is False
    assert result.questions == ()
    assert result.error_message == "text/html"
