"""Tokenize, validate and map an uploaded question CSV in one pass."""

from dataclasses import dataclass, field

from fastapi import status

from app.core.app_exceptions import AppError
from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.exam_import import ImportedQuestion
from app.services.importer.csv_parser import CSVParser, RawRow
from app.services.importer.row_mapper import RowMapper
from app.services.importer.validators import QuestionValidator, ValidationError

logger = get_logger(__name__)


@dataclass
class ImportOutcome:
    """Questions from a fully valid file, or every error from an invalid one."""

    questions: list[ImportedQuestion] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)
    total_rows: int = 0

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


def run_import(
    file_content: bytes | str,
    *,
    encoding: str | None = None,
    max_rows: int | None = None,
) -> ImportOutcome:
    """
    Run the import pipeline over raw file content.

    Validation is all-or-nothing: any row error yields no questions.

    Raises:
        CSVParseError: If the content cannot be decoded
        AppError: If the file has more data rows than allowed
    """
    parser = CSVParser(encoding=encoding or settings.IMPORT_ENCODING)
    limit = max_rows if max_rows is not None else settings.IMPORT_MAX_ROWS

    rows: list[tuple[int, RawRow]] = []
    for row_number, raw_row in parser.parse(file_content):
        if len(rows) >= limit:
            raise AppError(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                code="VALIDATION_LIMIT_EXCEEDED",
                message="Import row count exceeds maximum allowed",
                details={"limit": limit},
            )
        rows.append((row_number, raw_row))

    result = QuestionValidator().validate(rows)
    outcome = ImportOutcome(errors=result.errors, total_rows=len(rows))
    if result.valid:
        outcome.questions = RowMapper().map_rows([row for _, row in rows])

    logger.info(
        "CSV import processed",
        extra={
            "total_rows": outcome.total_rows,
            "accepted_rows": len(outcome.questions),
            "error_count": len(outcome.errors),
        },
    )
    return outcome
