"""Import engine for CSV question imports."""

from app.services.importer.csv_parser import CSVParseError, CSVParser
from app.services.importer.pipeline import ImportOutcome, run_import
from app.services.importer.row_mapper import RowMapper
from app.services.importer.template import SAMPLE_CSV, TEMPLATE_FILENAME
from app.services.importer.validators import QuestionValidator, ValidationError, ValidationResult

__all__ = [
    "CSVParseError",
    "CSVParser",
    "ImportOutcome",
    "run_import",
    "RowMapper",
    "SAMPLE_CSV",
    "TEMPLATE_FILENAME",
    "QuestionValidator",
    "ValidationError",
    "ValidationResult",
]
