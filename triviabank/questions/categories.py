from __future__ import annotations

from typing import Sequence

from triviabank.questions.types import Question

CATEGORY_DELIMITER = "_"


def split_category(category: str) -> tuple[str, str]:
    """Split a raw category on its first delimiter into ``(main, sub)``.

    Both halves are stripped of surrounding whitespace. A category without a
    delimiter has an empty ``sub``.
    """
    main, delimiter, sub = category.partition(CATEGORY_DELIMITER)
    if not delimiter:
        return category.strip(), ""
    return main.strip(), sub.strip()


def compound_category(main: str, sub: str) -> str:
    return f"{main}{CATEGORY_DELIMITER}{sub}"


def effective_sub_category(question: Question) -> str:
    _, sub = split_category(question.category)
    if not question.sub_category.strip() and sub:
        return sub
    return question.sub_category


def normalize_sub_categories(questions: Sequence[Question]) -> tuple[Question, ...]:
    """Backfill blank ``sub_category`` values from the compound category.

    Unchanged questions keep their identity; backfilled ones are copies.
    """
    normalized: list[Question] = []
    for question in questions:
        sub_category = effective_sub_category(question)
        if sub_category == question.sub_category:
            normalized.append(question)
        else:
            normalized.append(question.model_copy(update={"sub_category": sub_category}))
    return tuple(normalized)
