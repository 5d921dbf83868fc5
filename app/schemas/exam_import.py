"""Pydantic schemas for CSV exam import."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.exam import ANSWER_SEPARATOR, OPTION_LETTERS, QuestionKind


class ImportedQuestion(BaseModel):
    """Question mapped from one valid CSV row.

    ``correct_answers`` keeps the raw pipe-delimited string from the file;
    per-option correctness is derived on demand with :meth:`is_correct`.
    """

    model_config = ConfigDict(populate_by_name=True)

    question: str
    type: QuestionKind
    option_a: str = Field(default="", alias="optionA")
    option_b: str = Field(default="", alias="optionB")
    option_c: str = Field(default="", alias="optionC")
    option_d: str = Field(default="", alias="optionD")
    correct_answers: str = Field(..., alias="correctAnswers")

    def option(self, letter: str) -> str:
        return getattr(self, f"option_{letter.lower()}", "")

    def options(self) -> dict[str, str]:
        """Populated options keyed by letter, in display order."""
        return {letter: self.option(letter) for letter in OPTION_LETTERS if self.option(letter)}

    def answer_letters(self) -> list[str]:
        return [a.strip() for a in self.correct_answers.split(ANSWER_SEPARATOR)]

    def is_correct(self, letter: str) -> bool:
        return letter in self.answer_letters()


class ImportErrorOut(BaseModel):
    """Single validation error with its stable code."""

    code: str
    message: str
    field: str | None = None
    row_number: int | None = None


class ImportPreviewOut(BaseModel):
    """Result of tokenizing and validating an uploaded CSV."""

    valid: bool
    file_name: str | None = None
    total_rows: int
    errors: list[str] = Field(default_factory=list, description="Human-readable messages")
    error_details: list[ImportErrorOut] = Field(default_factory=list)
    questions: list[ImportedQuestion] = Field(default_factory=list)
