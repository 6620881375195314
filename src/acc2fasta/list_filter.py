"""Selection of CSV accessions through a list of sequence identifiers."""

from dataclasses import replace
from pathlib import Path
from typing import Iterable, Optional, Set, Union

from .input_parser import AccessionExtractor
from .logging_config import get_logger
from .models import ParseResult

logger = get_logger('list_filter')


class ListFilter:
    """Restricts fetching to accessions of listed identifiers."""
    
    def __init__(self, identifiers: Iterable[str]):
        """
        Initialize the filter.
        
        Args:
            identifiers: Accepted sequence identifiers
        """
        self.identifiers: Set[str] = set(identifiers)
    
    @classmethod
    def from_file(cls, file_path: Union[str, Path],
                  extractor: Optional[AccessionExtractor] = None) -> 'ListFilter':
        """Build a filter from a TXT list, one identifier per line."""
        extractor = extractor or AccessionExtractor()
        return cls(extractor.parse_list_file(file_path))
    
    def apply(self, result: ParseResult) -> ParseResult:
        """
        Select the accessions that belong to at least one listed identifier.
        
        Every accession starts at weight 0; accessions of listed identifiers
        get count 1, so the incidence log reports 0/1 selection weights.
        
        Returns:
            New ParseResult; the input is left untouched
        """
        selected = set()
        for identifier in sorted(result.groups):
            if identifier in self.identifiers:
                selected.update(result.groups[identifier].accessions)
        
        unmatched = self.identifiers.difference(result.groups)
        if unmatched:
            logger.debug(f"Identifiers without accessions: {', '.join(sorted(unmatched))}")
        
        records = {
            acc: replace(record, count=int(acc in selected), selected=acc in selected)
            for acc, record in result.records.items()
        }
        logger.info(f"{len(selected)} of {len(records)} ACC selected by list")
        
        return replace(result, records=records)
