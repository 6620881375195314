"""Data models for acc2fasta."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class AccessionRecord:
    """An accession number parsed from the query file."""
    
    accession: str
    count: int
    selected: bool = True  # False when excluded by a list filter
    
    @property
    def weight(self) -> int:
        """Selection weight; records with weight 0 are not fetched."""
        return self.count if self.selected else 0


@dataclass
class IdentifierGroup:
    """Accessions found for one sequence identifier of a CSV export."""
    
    identifier: str
    accessions: List[str] = field(default_factory=list)


@dataclass
class SanitizedHeader:
    """A fetched FASTA record with its cleaned header."""
    
    prefix_accession: str
    cleaned_text: str
    sequence_lines: List[str] = field(default_factory=list)
    separator: str = "_"
    
    @property
    def header_line(self) -> str:
        """Header line including the leading '>'."""
        return f">{self.prefix_accession}{self.separator}{self.cleaned_text}"
    
    def to_fasta(self) -> str:
        """Render the record as FASTA text."""
        return "\n".join([self.header_line] + self.sequence_lines) + "\n"


@dataclass
class ParseResult:
    """Outcome of parsing a query file."""
    
    file_type: str
    records: Dict[str, AccessionRecord] = field(default_factory=dict)
    groups: Dict[str, IdentifierGroup] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    
    def counts(self) -> Dict[str, int]:
        """Mapping of accession to occurrence count."""
        return {acc: record.count for acc, record in self.records.items()}
    
    def fetchable(self) -> List[AccessionRecord]:
        """Records with a non-zero weight, sorted by accession."""
        return [
            self.records[acc] for acc in sorted(self.records)
            if self.records[acc].weight != 0
        ]
