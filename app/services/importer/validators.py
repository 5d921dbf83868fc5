"""Validators for import engine."""

from dataclasses import dataclass, field
from typing import Any, Iterable

from app.models.exam import ANSWER_SEPARATOR, OPTION_LETTERS, REQUIRED_OPTION_LETTERS, QuestionKind
from app.services.importer.csv_parser import RawRow

REQUIRED_FIELDS: tuple[str, ...] = ("question", "type", "optionA", "optionB", "correctAnswers")


class ValidationError:
    """Validation error for a specific field of a CSV row."""

    def __init__(self, code: str, message: str, field: str | None = None, row_number: int | None = None):
        """
        Initialize validation error.

        Args:
            code: Error code (stable identifier)
            message: Human-readable message, prefixed with the row number
            field: Column name that failed validation
            row_number: Spreadsheet row number (header is row 1)
        """
        self.code = code
        self.message = message
        self.field = field
        self.row_number = row_number

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "field": self.field,
            "row_number": self.row_number,
        }

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ValidationError({self.code!r}, {self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.to_dict() == other.to_dict()


@dataclass
class ValidationResult:
    """Outcome of validating a whole batch of rows."""

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


class QuestionValidator:
    """Validate raw CSV rows before they are mapped to questions."""

    # Error codes (stable)
    MISSING_REQUIRED = "MISSING_REQUIRED"
    INVALID_TYPE = "INVALID_TYPE"
    INVALID_ANSWER = "INVALID_ANSWER"
    TOO_MANY_ANSWERS = "TOO_MANY_ANSWERS"
    ANSWER_OPTION_EMPTY = "ANSWER_OPTION_EMPTY"

    VALID_TYPES: tuple[str, ...] = tuple(kind.value for kind in QuestionKind)

    def validate(self, rows: Iterable[tuple[int, RawRow]]) -> ValidationResult:
        """
        Validate every row; one bad row invalidates the batch.

        Args:
            rows: (row_number, raw_row) pairs in file order

        Returns:
            ValidationResult with errors in row order, then check order
        """
        result = ValidationResult()
        for row_number, row in rows:
            result.errors.extend(self.validate_row(row_number, row))
        return result

    def validate_row(self, row_number: int, row: RawRow) -> list[ValidationError]:
        """Run every check on one row and collect all failures."""
        errors: list[ValidationError] = []
        prefix = f"Row {row_number}"

        for name in REQUIRED_FIELDS:
            if not row.get(name, "").strip():
                errors.append(
                    ValidationError(self.MISSING_REQUIRED, f"{prefix}: Missing {name}", name, row_number)
                )

        kind_value = row.get("type", "")
        if kind_value and kind_value not in self.VALID_TYPES:
            errors.append(
                ValidationError(
                    self.INVALID_TYPE,
                    f'{prefix}: Invalid question type "{kind_value}". '
                    "Must be true-false, single, or multiple",
                    "type",
                    row_number,
                )
            )

        correct = row.get("correctAnswers", "")
        if correct:
            answers = correct.split(ANSWER_SEPARATOR)
            for answer in answers:
                if answer.strip() not in OPTION_LETTERS:
                    errors.append(
                        ValidationError(
                            self.INVALID_ANSWER,
                            f'{prefix}: Invalid answer "{answer}". Must be A, B, C, or D',
                            "correctAnswers",
                            row_number,
                        )
                    )

            if kind_value in self.VALID_TYPES and len(answers) > 1:
                kind = QuestionKind(kind_value)
                if kind.single_answer:
                    errors.append(
                        ValidationError(
                            self.TOO_MANY_ANSWERS,
                            f"{prefix}: {kind.label} questions can only have one correct answer",
                            "correctAnswers",
                            row_number,
                        )
                    )

            # Blank A/B are already reported as missing
            seen: set[str] = set()
            for answer in (a.strip() for a in answers):
                if answer in seen or answer in REQUIRED_OPTION_LETTERS or answer not in OPTION_LETTERS:
                    continue
                seen.add(answer)
                if not row.get(f"option{answer}", "").strip():
                    errors.append(
                        ValidationError(
                            self.ANSWER_OPTION_EMPTY,
                            f'{prefix}: Correct answer "{answer}" refers to an empty option',
                            f"option{answer}",
                            row_number,
                        )
                    )

        return errors
