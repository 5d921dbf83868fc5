"""Tests for CSV and manual authoring drafts."""

from unittest.mock import patch

import pytest

from app.core.app_exceptions import AppError
from app.models.exam import QuestionKind
from app.schemas.exam_draft import ManualQuestionIn
from app.services.exam_drafts import (
    CSVExamDraft,
    ExamSummary,
    ManualExamDraft,
    blank_question,
    validate_manual_question,
)
from app.services.importer import CSVParseError
from tests.helpers.csv_rows import make_csv, valid_row


def manual_question(**overrides) -> ManualQuestionIn:
    data = {
        "text": "What is the capital of India?",
        "type": QuestionKind.SINGLE,
        "options": {"A": "Mumbai", "B": "Delhi", "C": "Kolkata", "D": "Chennai"},
        "correctAnswers": ["B"],
    }
    data.update(overrides)
    return ManualQuestionIn(**data)


class TestCSVExamDraft:
    def test_load_sample(self, sample_csv_bytes: bytes):
        draft = CSVExamDraft()
        outcome = draft.load_file("exam.csv", "text/csv", sample_csv_bytes)

        assert outcome.valid
        assert len(draft.questions) == 5
        assert draft.file_name == "exam.csv"
        assert draft.upload_message() == "5 questions loaded from exam.csv"

    def test_accepts_csv_extension_without_content_type(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.load_file("questions.csv", "application/octet-stream", sample_csv)

        assert len(draft.questions) == 5

    def test_accepts_csv_content_type_with_other_name(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.load_file("questions.txt", "text/csv", sample_csv)

        assert len(draft.questions) == 5

    def test_rejects_non_csv_files(self, sample_csv: str):
        draft = CSVExamDraft()

        with pytest.raises(AppError) as exc_info:
            draft.load_file("questions.xlsx", "application/vnd.ms-excel", sample_csv)

        assert exc_info.value.code == "INVALID_FILE_TYPE"
        assert exc_info.value.message == "Please upload a CSV file."
        assert draft.file_name == ""

    def test_invalid_upload_clears_previous_questions(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.load_file("good.csv", None, sample_csv)
        draft.load_file("bad.csv", None, make_csv(valid_row(answers="E")))

        assert draft.questions == []
        assert [e.message for e in draft.errors] == ['Row 2: Invalid answer "E". Must be A, B, C, or D']
        assert draft.file_name == "bad.csv"
        assert draft.upload_message() == "CSV validation failed"

    def test_valid_upload_clears_previous_errors(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.load_file("bad.csv", None, make_csv(valid_row(answers="E")))
        draft.load_file("good.csv", None, sample_csv)

        assert draft.errors == []
        assert len(draft.questions) == 5

    def test_undecodable_reupload_keeps_draft(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.load_file("good.csv", None, sample_csv)

        with pytest.raises(CSVParseError):
            draft.load_file("broken.csv", None, b"question,type\n\xff\xfe,single")

        assert draft.file_name == "good.csv"
        assert len(draft.questions) == 5
        assert draft.upload_message() == "5 questions loaded from good.csv"

    def test_oversized_reupload_keeps_draft(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.load_file("good.csv", None, sample_csv)
        big = make_csv(*(valid_row(question=f"Q{i}") for i in range(3)))

        with patch("app.services.importer.pipeline.settings") as s:
            s.IMPORT_ENCODING = "utf-8-sig"
            s.IMPORT_MAX_ROWS = 2
            with pytest.raises(AppError) as exc_info:
                draft.load_file("big.csv", None, big)

        assert exc_info.value.code == "VALIDATION_LIMIT_EXCEEDED"
        assert draft.file_name == "good.csv"
        assert len(draft.questions) == 5
        assert draft.errors == []

    def test_empty_upload_message(self):
        draft = CSVExamDraft()
        draft.load_file("empty.csv", None, make_csv())

        assert draft.upload_message() == "No questions found in empty.csv"

    def test_remove_question(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.load_file("exam.csv", None, sample_csv)

        removed = draft.remove_question(0)

        assert removed.question == "Is the sky blue?"
        assert len(draft.questions) == 4
        assert draft.questions[0].question == "Which of these are fruits?"

    @pytest.mark.parametrize("index", [-1, 5])
    def test_remove_question_out_of_range(self, sample_csv: str, index: int):
        draft = CSVExamDraft()
        draft.load_file("exam.csv", None, sample_csv)

        with pytest.raises(AppError) as exc_info:
            draft.remove_question(index)

        assert exc_info.value.status_code == 404
        assert exc_info.value.code == "QUESTION_NOT_FOUND"

    def test_save_requires_title(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.load_file("exam.csv", None, sample_csv)
        draft.title = "   "

        with pytest.raises(AppError) as exc_info:
            draft.save()

        assert exc_info.value.code == "MISSING_EXAM_TITLE"
        assert len(draft.questions) == 5

    def test_save_requires_questions(self):
        draft = CSVExamDraft()
        draft.title = "Final"

        with pytest.raises(AppError) as exc_info:
            draft.save()

        assert exc_info.value.code == "NO_QUESTIONS"
        assert exc_info.value.message == "Please upload questions before saving the exam."

    def test_save_resets_draft(self, sample_csv: str):
        draft = CSVExamDraft()
        draft.title = "Advanced Mathematics - Final Exam"
        draft.load_file("exam.csv", None, sample_csv)

        summary = draft.save()

        assert summary == ExamSummary(title="Advanced Mathematics - Final Exam", question_count=5)
        assert summary.message == '"Advanced Mathematics - Final Exam" has been saved with 5 questions.'
        assert draft.title == ""
        assert draft.file_name == ""
        assert draft.questions == []
        assert draft.errors == []


class TestBlankQuestion:
    def test_true_false_prefills_options(self):
        question = blank_question(QuestionKind.TRUE_FALSE)

        assert question.options == {"A": "True", "B": "False", "C": "", "D": ""}
        assert question.correct_answers == []

    @pytest.mark.parametrize("kind", [QuestionKind.SINGLE, QuestionKind.MULTIPLE])
    def test_other_kinds_start_empty(self, kind: QuestionKind):
        question = blank_question(kind)

        assert question.type == kind
        assert question.options == {"A": "", "B": "", "C": "", "D": ""}


class TestValidateManualQuestion:
    def test_valid_question(self):
        assert validate_manual_question(manual_question()) == []

    def test_blank_question_reports_everything(self):
        errors = validate_manual_question(blank_question(QuestionKind.SINGLE))

        assert errors == [
            "Question text is required",
            "At least options A and B are required",
            "At least one correct answer must be selected",
        ]

    def test_true_false_ignores_submitted_options(self):
        question = manual_question(type=QuestionKind.TRUE_FALSE, options={}, correctAnswers=["A"])

        assert validate_manual_question(question) == []

    def test_true_false_cannot_use_option_c(self):
        question = manual_question(type=QuestionKind.TRUE_FALSE, correctAnswers=["C"])

        assert validate_manual_question(question) == ['Correct answer "C" refers to an empty option']

    def test_single_with_two_answers(self):
        errors = validate_manual_question(manual_question(correctAnswers=["A", "B"]))

        assert errors == ["Single choice questions can only have one correct answer"]

    def test_multiple_with_two_answers(self):
        question = manual_question(type=QuestionKind.MULTIPLE, correctAnswers=["A", "C"])

        assert validate_manual_question(question) == []

    def test_unknown_letter(self):
        errors = validate_manual_question(manual_question(correctAnswers=["E"]))

        assert errors == ['Invalid answer "E". Must be A, B, C, or D']

    def test_answer_on_empty_option(self):
        question = manual_question(
            options={"A": "Yes", "B": "No", "C": "", "D": ""}, correctAnswers=["D"]
        )

        assert validate_manual_question(question) == ['Correct answer "D" refers to an empty option']


class TestManualExamDraft:
    def test_defaults(self):
        draft = ManualExamDraft()

        assert draft.title == ""
        assert draft.description == ""
        assert draft.duration == 60
        assert draft.questions == []

    def test_add_question(self):
        draft = ManualExamDraft()

        question, message = draft.add_question(manual_question())

        assert message == "Question 1 has been added successfully."
        assert question.id
        assert question.correct_answers == ["B"]
        assert draft.questions == [question]

        _, second_message = draft.add_question(manual_question(text="Another"))
        assert second_message == "Question 2 has been added successfully."

    def test_add_question_joins_errors(self):
        draft = ManualExamDraft()

        with pytest.raises(AppError) as exc_info:
            draft.add_question(manual_question(text="", correctAnswers=[]))

        assert exc_info.value.code == "VALIDATION_ERROR"
        assert exc_info.value.message == (
            "Question text is required, At least one correct answer must be selected"
        )
        assert draft.questions == []

    def test_true_false_stores_fixed_options(self):
        draft = ManualExamDraft()

        question, _ = draft.add_question(
            manual_question(
                type=QuestionKind.TRUE_FALSE,
                options={"A": "Yes", "B": "No", "C": "Maybe", "D": ""},
                correctAnswers=["B"],
            )
        )

        assert question.options == {"A": "True", "B": "False", "C": "", "D": ""}

    def test_duplicate_answers_collapse(self):
        draft = ManualExamDraft()

        question, _ = draft.add_question(
            manual_question(type=QuestionKind.MULTIPLE, correctAnswers=["C", "A", "C"])
        )

        assert question.correct_answers == ["C", "A"]

    def test_remove_question(self):
        draft = ManualExamDraft()
        first, _ = draft.add_question(manual_question(text="First"))
        second, _ = draft.add_question(manual_question(text="Second"))

        draft.remove_question(first.id)

        assert draft.questions == [second]

    def test_remove_unknown_question(self):
        with pytest.raises(AppError) as exc_info:
            ManualExamDraft().remove_question("missing")

        assert exc_info.value.code == "QUESTION_NOT_FOUND"

    def test_update_details(self):
        draft = ManualExamDraft()
        draft.update_details(title="Biology", description="Chapter 1-3", duration=90)

        assert (draft.title, draft.description, draft.duration) == ("Biology", "Chapter 1-3", 90)

        draft.update_details(title="Biology II")
        assert draft.duration == 90
        assert draft.description == "Chapter 1-3"

    @pytest.mark.parametrize("duration", [0, -15])
    def test_non_positive_duration_falls_back(self, duration: int):
        draft = ManualExamDraft()
        draft.update_details(duration=120)
        draft.update_details(duration=duration)

        assert draft.duration == 60

    def test_custom_default_duration(self):
        draft = ManualExamDraft(duration=45)
        draft.update_details(duration=0)

        assert draft.duration == 45

    def test_save_requires_title(self):
        draft = ManualExamDraft()
        draft.add_question(manual_question())

        with pytest.raises(AppError) as exc_info:
            draft.save()

        assert exc_info.value.code == "MISSING_EXAM_TITLE"

    def test_save_requires_questions(self):
        draft = ManualExamDraft()
        draft.update_details(title="Empty")

        with pytest.raises(AppError) as exc_info:
            draft.save()

        assert exc_info.value.code == "NO_QUESTIONS"
        assert exc_info.value.message == "Please add at least one question before saving the exam."

    def test_save_resets(self):
        draft = ManualExamDraft()
        draft.update_details(title="Geography", description="Capitals", duration=30)
        draft.add_question(manual_question())

        summary = draft.save()

        assert summary.message == '"Geography" has been saved with 1 questions.'
        assert draft.title == ""
        assert draft.description == ""
        assert draft.duration == 60
        assert draft.questions == []
