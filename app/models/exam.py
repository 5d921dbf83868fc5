"""Exam authoring domain enums and constants."""

from enum import Enum


class QuestionKind(str, Enum):
    """Answer-format category of a question."""

    TRUE_FALSE = "true-false"
    SINGLE = "single"
    MULTIPLE = "multiple"

    @property
    def single_answer(self) -> bool:
        return self in (QuestionKind.TRUE_FALSE, QuestionKind.SINGLE)

    @property
    def label(self) -> str:
        """Human label used in validation messages."""
        return {
            QuestionKind.TRUE_FALSE: "True-false",
            QuestionKind.SINGLE: "Single choice",
            QuestionKind.MULTIPLE: "Multiple choice",
        }[self]


# Option keys in display order
OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")
REQUIRED_OPTION_LETTERS: tuple[str, ...] = ("A", "B")

# Fixed options for true/false questions
TRUE_FALSE_OPTIONS: dict[str, str] = {"A": "True", "B": "False", "C": "", "D": ""}

# Separator for multiple correct answers in CSV
ANSWER_SEPARATOR = "|"
