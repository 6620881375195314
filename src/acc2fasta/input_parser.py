"""Extraction of accession numbers from CSV and TXT query files."""

import re
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from .errors import InputReadError, MissingFileError, UnsupportedFileTypeError
from .logging_config import get_logger
from .models import AccessionRecord, IdentifierGroup, ParseResult

logger = get_logger('input_parser')

# One or two uppercase letters followed by 3-7 digits, e.g. AB123456
ACCESSION_PATTERN = re.compile(r'([A-Z]{1,2}\d{3,7})')

# Fields of a FileMaker CSV export are quoted, so '","' separates them.
# Whitespace is turned into '_' first, hence '"_"' separates them as well.
CSV_FIELD_SEPARATOR = re.compile(r'"[,_]"')

FILE_TYPES = {
    '.csv': 'CSV',
    '.txt': 'TXT'
}


def find_accession(text: str) -> Optional[str]:
    """Return the first accession number in ``text``, if any."""
    match = ACCESSION_PATTERN.search(text)
    return match.group(1) if match else None


def detect_file_type(file_path: Union[str, Path]) -> str:
    """Return 'CSV' or 'TXT' based on the file extension."""
    suffix = Path(file_path).suffix.lower()
    if suffix not in FILE_TYPES:
        raise UnsupportedFileTypeError(str(file_path))
    return FILE_TYPES[suffix]


class ScanState(Enum):
    """States of the CSV token scanner."""
    SEEKING_IDENTIFIER = "seeking_identifier"
    ACCUMULATING = "accumulating"


class CsvScanner:
    """Assigns CSV tokens to sequence identifiers.

    A token that is not an accession number becomes the current identifier;
    every accession number after it belongs to that identifier until the next
    non-accession token. The identifier carries over line breaks.
    """

    ORPHAN_IDENTIFIER = ""

    def __init__(self):
        self.state = ScanState.SEEKING_IDENTIFIER
        self.identifier = self.ORPHAN_IDENTIFIER

    def feed(self, token: str) -> Optional[Tuple[str, str]]:
        """
        Consume one token.

        Returns:
            (identifier, accession) when the token holds an accession number,
            None when it started a new identifier
        """
        accession = find_accession(token)

        if accession is None:
            self.identifier = token
            self.state = ScanState.ACCUMULATING
            return None

        if self.state is ScanState.SEEKING_IDENTIFIER:
            logger.warning(f"{accession} appears before any sequence identifier")

        return self.identifier, accession


def tokenize_csv_line(line: str) -> List[str]:
    """Split a CSV line into unquoted tokens."""
    line = re.sub(r'\s', '_', line.rstrip())
    tokens = CSV_FIELD_SEPARATOR.split(line)
    while tokens and not tokens[-1]:
        tokens.pop()
    return [token.replace('"', '') for token in tokens]


class AccessionExtractor:
    """Parser for accession number query files."""

    # Common encodings to try
    ENCODINGS = ['utf-8', 'latin-1', 'cp1252']

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Parse a query file and count its accession numbers.

        Args:
            file_path: Path to a .csv or .txt file (extension is case-insensitive)

        Returns:
            ParseResult with accession records (and identifier groups for CSV)

        Raises:
            UnsupportedFileTypeError: If the extension is neither .csv nor .txt
            MissingFileError: If the file doesn't exist
            InputReadError: If the file can't be opened
        """
        file_type = detect_file_type(file_path)
        lines = self._read_lines(file_path)

        logger.info(f"Parsing {file_type} file")
        if file_type == 'CSV':
            result = self.parse_csv_lines(lines)
        else:
            result = self.parse_txt_lines(lines)

        return result

    def parse_txt_lines(self, lines: Iterable[str]) -> ParseResult:
        """Count the first accession number of every line."""
        counts: Dict[str, int] = {}
        warnings = []

        for line in lines:
            line = line.rstrip('\r\n')
            if not line:
                continue

            accession = find_accession(line)
            if accession is None:
                message = f"{line} is not a valid ACC number"
                logger.warning(message)
                warnings.append(message)
                continue

            counts[accession] = counts.get(accession, 0) + 1

        return ParseResult(
            file_type='TXT',
            records=self._build_records(counts),
            warnings=warnings
        )

    def parse_csv_lines(self, lines: Iterable[str]) -> ParseResult:
        """Group accession numbers by sequence identifier and count them."""
        counts: Dict[str, int] = {}
        groups: Dict[str, IdentifierGroup] = {}
        scanner = CsvScanner()

        for line in lines:
            if not line.strip():
                continue

            for token in tokenize_csv_line(line):
                found = scanner.feed(token)
                if found is None:
                    continue

                identifier, accession = found
                group = groups.setdefault(identifier, IdentifierGroup(identifier))
                group.accessions.append(accession)
                counts[accession] = counts.get(accession, 0) + 1

        return ParseResult(
            file_type='CSV',
            records=self._build_records(counts),
            groups=groups
        )

    def parse_list_lines(self, lines: Iterable[str]) -> Set[str]:
        """Read one identifier per line, normalised like CSV identifiers."""
        identifiers = set()

        for line in lines:
            identifier = re.sub(r'\s', '_', line.rstrip())
            if identifier:
                identifiers.add(identifier)

        return identifiers

    def parse_list_file(self, file_path: Union[str, Path]) -> Set[str]:
        """Parse a TXT list of sequence identifiers."""
        logger.info(f"Parsing list in {file_path}")
        return self.parse_list_lines(self._read_lines(file_path))

    def _build_records(self, counts: Dict[str, int]) -> Dict[str, AccessionRecord]:
        return {acc: AccessionRecord(acc, count) for acc, count in counts.items()}

    def _read_lines(self, file_path: Union[str, Path]) -> List[str]:
        """Read all lines of a file, raising fatal errors for missing or unreadable files."""
        path = Path(file_path)

        if not path.exists():
            raise MissingFileError(str(file_path))

        try:
            encoding = self._detect_encoding(path)
            with open(path, 'r', encoding=encoding) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(file_path), str(e)) from e

        logger.debug(f"Read {len(lines)} lines from {path} (encoding: {encoding})")
        return lines

    def _detect_encoding(self, path: Path) -> str:
        """Detect file encoding."""
        # First check if file has BOM
        with open(path, 'rb') as f:
            bom = f.read(3)
            if bom == b'\xef\xbb\xbf':  # UTF-8 BOM
                return 'utf-8-sig'

        for encoding in self.ENCODINGS:
            try:
                with open(path, 'r', encoding=encoding) as f:
                    f.read()
                return encoding
            except (UnicodeDecodeError, UnicodeError):
                continue

        return 'utf-8'
