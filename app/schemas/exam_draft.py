"""Pydantic schemas for exam authoring drafts."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.exam import OPTION_LETTERS, QuestionKind
from app.schemas.exam_import import ImportedQuestion

# Validation caps (input hardening)
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 4000
QUESTION_TEXT_MAX_LENGTH = 4000
OPTION_MAX_LENGTH = 500
DURATION_MAX_MINUTES = 24 * 60


class ManualQuestionIn(BaseModel):
    """Question as filled in by the manual editor."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(default="", max_length=QUESTION_TEXT_MAX_LENGTH)
    type: QuestionKind = Field(default=QuestionKind.SINGLE)
    options: dict[str, str] = Field(default_factory=lambda: {letter: "" for letter in OPTION_LETTERS})
    correct_answers: list[str] = Field(default_factory=list, alias="correctAnswers", max_length=4)
    image_name: str | None = Field(default=None, alias="imageName", max_length=255)

    @field_validator("options")
    @classmethod
    def known_option_keys(cls, v: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(v) - set(OPTION_LETTERS))
        if unknown:
            raise ValueError(f"Unknown option keys: {', '.join(unknown)}")
        for letter, text in v.items():
            if len(text) > OPTION_MAX_LENGTH:
                raise ValueError(f"Option {letter} must be at most {OPTION_MAX_LENGTH} characters")
        return {letter: v.get(letter, "") for letter in OPTION_LETTERS}


class ManualQuestionOut(BaseModel):
    """Question stored in a manual draft."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    type: QuestionKind
    options: dict[str, str]
    correct_answers: list[str] = Field(alias="correctAnswers")
    image_name: str | None = Field(default=None, alias="imageName")

    @classmethod
    def from_question(cls, question) -> "ManualQuestionOut":
        return cls(
            id=question.id,
            text=question.text,
            type=question.type,
            options=dict(question.options),
            correct_answers=list(question.correct_answers),
            image_name=question.image_name,
        )


class ManualDraftDetailsUpdate(BaseModel):
    """Exam information fields of the manual editor."""

    title: str | None = Field(None, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    duration: int | None = Field(None, le=DURATION_MAX_MINUTES, description="Minutes")


class ManualDraftOut(BaseModel):
    """Manual draft state."""

    id: UUID
    title: str
    description: str
    duration: int
    questions: list[ManualQuestionOut]

    @classmethod
    def from_draft(cls, draft) -> "ManualDraftOut":
        return cls(
            id=draft.id,
            title=draft.title,
            description=draft.description,
            duration=draft.duration,
            questions=[ManualQuestionOut.from_question(q) for q in draft.questions],
        )


class QuestionAddedOut(BaseModel):
    """Response after adding a question to a manual draft."""

    question: ManualQuestionOut
    message: str
    question_count: int


class CSVDraftTitleUpdate(BaseModel):
    title: str = Field(..., max_length=TITLE_MAX_LENGTH)


class CSVDraftOut(BaseModel):
    """CSV draft state."""

    id: UUID
    title: str
    file_name: str
    questions: list[ImportedQuestion]
    errors: list[str]

    @classmethod
    def from_draft(cls, draft) -> "CSVDraftOut":
        return cls(
            id=draft.id,
            title=draft.title,
            file_name=draft.file_name,
            questions=draft.questions,
            errors=[e.message for e in draft.errors],
        )


class CSVUploadOut(BaseModel):
    """Response after uploading a CSV into a draft."""

    valid: bool
    message: str
    draft: CSVDraftOut


class ExamSavedOut(BaseModel):
    """Confirmation after saving a draft."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    question_count: int
    message: str
