from __future__ import annotations

from typing import Collection, Protocol, Sequence

from triviabank.questions.categories import (
    compound_category,
    effective_sub_category,
    split_category,
)
from triviabank.questions.types import Question


class CategorySelection(Protocol):
    @property
    def categories_selected(self) -> Collection[str]: ...

    @property
    def sub_categories_selected(self) -> Collection[str]: ...


def is_category_allowed(preferences: CategorySelection, question: Question) -> bool:
    selected = preferences.categories_selected
    if not selected:
        return True

    main, sub = split_category(question.category)
    return (
        question.category in selected
        or main in selected
        or (bool(sub) and compound_category(main, sub) in selected)
    )


def is_sub_category_allowed(preferences: CategorySelection, question: Question) -> bool:
    selected = preferences.sub_categories_selected
    if not selected:
        return True

    main, sub = split_category(question.category)
    return (
        effective_sub_category(question) in selected
        or question.category in selected
        or sub in selected
        or compound_category(main, sub) in selected
    )


def filter_questions(
    questions: Sequence[Question],
    preferences: CategorySelection,
) -> Sequence[Question]:
    if not preferences.categories_selected and not preferences.sub_categories_selected:
        return questions

    return tuple(
        question
        for question in questions
        if is_category_allowed(preferences, question)
        and is_sub_category_allowed(preferences, question)
    )
