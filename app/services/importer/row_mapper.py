"""Row mapper for import engine."""

from app.models.exam import OPTION_LETTERS, QuestionKind
from app.schemas.exam_import import ImportedQuestion
from app.services.importer.csv_parser import RawRow


class RowMapper:
    """Map validated CSV rows to imported questions."""

    def map_row(self, row: RawRow) -> ImportedQuestion:
        """
        Map a CSV row to an imported question.

        Args:
            row: Raw CSV row (column_name -> value) that passed validation

        Returns:
            ImportedQuestion with missing option columns defaulted to ""
        """
        options = {f"option{letter}": row.get(f"option{letter}") or "" for letter in OPTION_LETTERS}
        return ImportedQuestion(
            question=row["question"],
            type=QuestionKind(row["type"]),
            correctAnswers=row["correctAnswers"],
            **options,
        )

    def map_rows(self, rows: list[RawRow]) -> list[ImportedQuestion]:
        return [self.map_row(row) for row in rows]
