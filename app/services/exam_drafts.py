"""Exam authoring drafts.

A draft holds the state of one authoring session: the CSV upload form or the
manual question editor. Saving only confirms and resets the draft; nothing is
persisted.
"""

import uuid
from dataclasses import dataclass, field

from app.core.app_exceptions import bad_request, not_found
from app.core.config import settings
from app.core.logging import get_logger
from app.models.exam import (
    OPTION_LETTERS,
    REQUIRED_OPTION_LETTERS,
    TRUE_FALSE_OPTIONS,
    QuestionKind,
)
from app.schemas.exam_draft import ManualQuestionIn
from app.schemas.exam_import import ImportedQuestion
from app.services.importer import ImportOutcome, run_import
from app.services.importer.validators import ValidationError

logger = get_logger(__name__)

CSV_CONTENT_TYPE = "text/csv"
CSV_EXTENSION = ".csv"


@dataclass
class ExamSummary:
    """Confirmation returned when a draft is saved."""

    title: str
    question_count: int

    @property
    def message(self) -> str:
        return f'"{self.title}" has been saved with {self.question_count} questions.'


def _require_saveable(title: str, question_count: int, no_questions_message: str) -> None:
    if not title.strip():
        raise bad_request("MISSING_EXAM_TITLE", "Please enter an exam title before saving.")
    if question_count == 0:
        raise bad_request("NO_QUESTIONS", no_questions_message)


class CSVExamDraft:
    """State of the create-exam-from-CSV form."""

    kind = "csv"

    def __init__(self, draft_id: uuid.UUID | None = None):
        self.id = draft_id or uuid.uuid4()
        self.title = ""
        self.file_name = ""
        self.questions: list[ImportedQuestion] = []
        self.errors: list[ValidationError] = []

    @staticmethod
    def is_csv_file(file_name: str, content_type: str | None) -> bool:
        return content_type == CSV_CONTENT_TYPE or file_name.endswith(CSV_EXTENSION)

    def load_file(self, file_name: str, content_type: str | None, content: bytes | str) -> ImportOutcome:
        """
        Replace the draft's questions with the contents of an uploaded CSV.

        A later upload always wins over an earlier one. A rejected upload
        leaves the draft untouched.

        Raises:
            AppError: INVALID_FILE_TYPE for non-CSV uploads, or
                VALIDATION_LIMIT_EXCEEDED for too many rows
            CSVParseError: If the content cannot be decoded
        """
        if not self.is_csv_file(file_name, content_type):
            raise bad_request("INVALID_FILE_TYPE", "Please upload a CSV file.", {"file_name": file_name})

        outcome = run_import(content)
        self.file_name = file_name
        self.questions = outcome.questions
        self.errors = outcome.errors

        logger.info(
            "CSV loaded into draft",
            extra={
                "draft_id": str(self.id),
                "file_name": file_name,
                "questions": len(outcome.questions),
                "errors": len(outcome.errors),
            },
        )
        return outcome

    def upload_message(self) -> str:
        if self.questions:
            return f"{len(self.questions)} questions loaded from {self.file_name}"
        if self.errors:
            return "CSV validation failed"
        return f"No questions found in {self.file_name}"

    def remove_question(self, index: int) -> ImportedQuestion:
        if not 0 <= index < len(self.questions):
            raise not_found("QUESTION_NOT_FOUND", f"No question at position {index}", {"index": index})
        return self.questions.pop(index)

    def save(self) -> ExamSummary:
        _require_saveable(self.title, len(self.questions), "Please upload questions before saving the exam.")
        summary = ExamSummary(title=self.title, question_count=len(self.questions))
        logger.info(
            "Exam saved",
            extra={"draft_id": str(self.id), "source": self.kind, "questions": summary.question_count},
        )
        self.reset()
        return summary

    def reset(self) -> None:
        self.title = ""
        self.file_name = ""
        self.questions = []
        self.errors = []


@dataclass
class ManualQuestion:
    """Question added through the manual editor."""

    text: str
    type: QuestionKind
    options: dict[str, str]
    correct_answers: list[str]
    image_name: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


def blank_question(kind: QuestionKind = QuestionKind.SINGLE) -> ManualQuestionIn:
    """Editor defaults for a new question of the given kind."""
    if kind == QuestionKind.TRUE_FALSE:
        options = dict(TRUE_FALSE_OPTIONS)
    else:
        options = {letter: "" for letter in OPTION_LETTERS}
    return ManualQuestionIn(text="", type=kind, options=options, correctAnswers=[])


def validate_manual_question(data: ManualQuestionIn) -> list[str]:
    """Collect every problem with an editor question, in display order."""
    errors: list[str] = []
    options = TRUE_FALSE_OPTIONS if data.type == QuestionKind.TRUE_FALSE else data.options

    if not data.text.strip():
        errors.append("Question text is required")

    if data.type != QuestionKind.TRUE_FALSE:
        if any(not options.get(letter, "").strip() for letter in REQUIRED_OPTION_LETTERS):
            errors.append("At least options A and B are required")

    if not data.correct_answers:
        errors.append("At least one correct answer must be selected")
        return errors

    for answer in data.correct_answers:
        if answer not in OPTION_LETTERS:
            errors.append(f'Invalid answer "{answer}". Must be A, B, C, or D')
        elif not options.get(answer, "").strip():
            errors.append(f'Correct answer "{answer}" refers to an empty option')

    if data.type.single_answer and len(set(data.correct_answers)) > 1:
        errors.append(f"{data.type.label} questions can only have one correct answer")

    return errors


class ManualExamDraft:
    """State of the manual exam editor."""

    kind = "manual"

    def __init__(self, draft_id: uuid.UUID | None = None, duration: int | None = None):
        self.id = draft_id or uuid.uuid4()
        self.default_duration = duration or settings.DEFAULT_EXAM_DURATION_MINUTES
        self.reset()

    def update_details(
        self, title: str | None = None, description: str | None = None, duration: int | None = None
    ) -> None:
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if duration is not None:
            # Non-positive durations fall back to the default
            self.duration = duration if duration > 0 else self.default_duration

    def add_question(self, data: ManualQuestionIn) -> tuple[ManualQuestion, str]:
        """
        Validate and append a question.

        Returns:
            The stored question and a confirmation message

        Raises:
            AppError: VALIDATION_ERROR listing every problem
        """
        errors = validate_manual_question(data)
        if errors:
            raise bad_request("VALIDATION_ERROR", ", ".join(errors), errors)

        if data.type == QuestionKind.TRUE_FALSE:
            options = dict(TRUE_FALSE_OPTIONS)
        else:
            options = {letter: data.options.get(letter, "") for letter in OPTION_LETTERS}

        question = ManualQuestion(
            text=data.text,
            type=data.type,
            options=options,
            correct_answers=list(dict.fromkeys(data.correct_answers)),
            image_name=data.image_name,
        )
        self.questions.append(question)
        return question, f"Question {len(self.questions)} has been added successfully."

    def remove_question(self, question_id: str) -> ManualQuestion:
        for index, question in enumerate(self.questions):
            if question.id == question_id:
                return self.questions.pop(index)
        raise not_found("QUESTION_NOT_FOUND", "Question not found", {"question_id": question_id})

    def save(self) -> ExamSummary:
        _require_saveable(
            self.title, len(self.questions), "Please add at least one question before saving the exam."
        )
        summary = ExamSummary(title=self.title, question_count=len(self.questions))
        logger.info(
            "Exam saved",
            extra={"draft_id": str(self.id), "source": self.kind, "questions": summary.question_count},
        )
        self.reset()
        return summary

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.duration = self.default_duration
        self.questions: list[ManualQuestion] = []
