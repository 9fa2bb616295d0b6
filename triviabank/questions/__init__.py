from triviabank.questions.categories import normalize_sub_categories, split_category
from triviabank.questions.filters import filter_questions, is_category_allowed, is_sub_category_allowed
from triviabank.questions.service import QuestionService
from triviabank.questions.shuffle import RandomSource, shuffle_questions
from triviabank.questions.types import (
    CatalogFailureKind,
    CatalogLoadResult,
    Question,
    QuestionPreferences,
)

__all__ = [
    "CatalogFailureKind",
    "CatalogLoadResult",
    "Question",
    "QuestionPreferences",
    "QuestionService",
    "RandomSource",
    "filter_questions",
    "is_category_allowed",
    "is_sub_category_allowed",
    "normalize_sub_categories",
    "shuffle_questions",
    "split_category",
]
