"""CSV parser for import engine."""

from typing import Iterator

RawRow = dict[str, str]

# First data row sits below the header, so spreadsheet numbering starts at 2
FIRST_DATA_ROW_NUMBER = 2

BYTE_ORDER_MARK = "\ufeff"


class CSVParseError(Exception):
    """CSV parsing error."""

    pass


class CSVParser:
    """Tokenize question CSV files into rows keyed by header name.

    Quoting is a plain toggle: every ``"`` flips the inside-quotes state and
    is dropped from the value. Doubled quotes (``""``) are not an escape.
    """

    DELIMITER = ","
    QUOTE_CHAR = '"'

    def __init__(self, encoding: str = "utf-8-sig"):
        """
        Initialize CSV parser.

        Args:
            encoding: Encoding used to decode byte input
        """
        self.encoding = encoding

    def decode(self, file_content: bytes | str) -> str:
        """
        Decode raw upload content to text without a leading byte-order mark.

        Raises:
            CSVParseError: If the bytes cannot be decoded
        """
        if isinstance(file_content, str):
            text = file_content
        else:
            try:
                text = file_content.decode(self.encoding)
            except (UnicodeDecodeError, LookupError) as e:
                raise CSVParseError(f"Failed to decode file with encoding {self.encoding}: {e}") from e
        return text.removeprefix(BYTE_ORDER_MARK)

    def parse(self, file_content: bytes | str) -> Iterator[tuple[int, RawRow]]:
        """
        Parse CSV file content.

        Args:
            file_content: Raw file bytes or already-decoded text

        Yields:
            Tuple of (row_number, row_dict)

        Raises:
            CSVParseError: If file cannot be decoded
        """
        lines = self.split_lines(self.decode(file_content))
        if len(lines) < 2:
            return

        headers = self.parse_header(lines[0])
        for row_number, line in enumerate(lines[1:], start=FIRST_DATA_ROW_NUMBER):
            values = self.tokenize_line(line)
            row = {header: values[i] if i < len(values) else "" for i, header in enumerate(headers)}
            yield row_number, row

    @staticmethod
    def split_lines(text: str) -> list[str]:
        """Split on newlines, dropping every line that is blank after trimming."""
        return [line for line in text.split("\n") if line.strip()]

    def parse_header(self, line: str) -> list[str]:
        # Header names are never quote-aware; a quoted comma still splits
        return [h.strip().replace(self.QUOTE_CHAR, "") for h in line.split(self.DELIMITER)]

    def tokenize_line(self, line: str) -> list[str]:
        """Split one data line into trimmed field values."""
        values: list[str] = []
        current: list[str] = []
        in_quotes = False

        for char in line:
            if char == self.QUOTE_CHAR:
                in_quotes = not in_quotes
            elif char == self.DELIMITER and not in_quotes:
                values.append("".join(current).strip())
                current = []
            else:
                current.append(char)
        values.append("".join(current).strip())

        return values
