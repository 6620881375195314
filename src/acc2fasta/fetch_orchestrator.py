"""Fetch loop: accession records in, sanitised FASTA out."""

from pathlib import Path
from typing import Callable, Iterable, Union

from .config import HeaderConfig
from .errors import OutputWriteError
from .header_sanitizer import sanitize_record
from .logging_config import LogTimer, get_logger
from .models import AccessionRecord

logger = get_logger('fetch_orchestrator')

FetchFunction = Callable[[str], str]


def fasta_output_path(query_file: Union[str, Path], filtered: bool = False) -> Path:
    """'<query>.fas', or '<query>_list.fas' when a list filter was applied."""
    suffix = "_list.fas" if filtered else ".fas"
    return Path(f"{query_file}{suffix}")


class FetchOrchestrator:
    """Fetches selected accessions one by one and writes them as FASTA."""
    
    def __init__(self, fetch: FetchFunction, config: HeaderConfig):
        """
        Initialize the orchestrator.
        
        Args:
            fetch: Returns the raw FASTA text for an accession
            config: Header cleaning options
        """
        self.fetch = fetch
        self.config = config
    
    def run(self, records: Iterable[AccessionRecord], output_path: Union[str, Path]) -> int:
        """
        Fetch every record with a non-zero weight, sorted by accession.
        
        Returns:
            Number of records written
            
        Raises:
            OutputWriteError: If the output file can't be opened or written
        """
        selected = sorted(
            (record for record in records if record.weight != 0),
            key=lambda record: record.accession
        )
        
        written = 0
        try:
            with open(output_path, 'w') as out:
                for record in selected:
                    with LogTimer(f"Fetching {record.accession}", logger) as timer:
                        raw = self.fetch(record.accession)
                        sanitized = sanitize_record(raw, record.accession, self.config)
                        out.write(sanitized.to_fasta())
                        out.write("\n")
                    logger.info(f"Fetched {record.accession} [{timer.seconds}sec]")
                    written += 1
        except OSError as e:
            raise OutputWriteError(str(output_path), str(e)) from e
        
        logger.info(f"Wrote {written} sequences to {output_path}")
        return written
