"""Incidence log: how often each accession occurred in the query."""

from pathlib import Path
from typing import Dict, Union

from .logging_config import get_logger
from .models import AccessionRecord

logger = get_logger('incidence_log')


def incidence_log_path(query_file: Union[str, Path]) -> Path:
    """The log sits next to the query file, with '.log' appended."""
    return Path(f"{query_file}.log")


def write_incidence_log(records: Dict[str, AccessionRecord], path: Union[str, Path]) -> bool:
    """
    Write one ``accession,count`` line per accession, sorted by accession.
    
    Returns:
        False if the log could not be written; the run carries on without it
    """
    logger.info(f"Writing log-file with incidences of ACC to {path}")
    
    try:
        with open(path, 'w') as f:
            for acc in sorted(records):
                f.write(f"{acc},{records[acc].count}\n")
    except OSError as e:
        logger.warning(f"Could not write to log file {path}: {e}")
        return False
    
    return True
