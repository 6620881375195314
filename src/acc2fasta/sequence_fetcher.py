"""Retrieval of FASTA records from NCBI Entrez."""

import logging
import time
from typing import Optional

from Bio import Entrez

from .config import EntrezConfig

logger = logging.getLogger(__name__)


class EntrezFetcher:
    """Fetches one FASTA record per accession via Entrez efetch."""
    
    API_KEY_RATE_LIMIT = 10  # requests per second with an API key
    
    def __init__(self, config: Optional[EntrezConfig] = None):
        """Initialize the fetcher.
        
        Args:
            config: Entrez settings (email, API key, database, rate limit)
        """
        self.config = config or EntrezConfig()
        
        # Set up Biopython Entrez
        Entrez.email = self.config.email
        Entrez.max_tries = 1  # a failed request is not repeated
        if self.config.api_key:
            Entrez.api_key = self.config.api_key
        
        # Rate limiting
        self.last_request_time = 0
        if self.config.api_key:
            self.rate_limit = max(self.config.rate_limit_per_second, self.API_KEY_RATE_LIMIT)
        else:
            self.rate_limit = self.config.rate_limit_per_second
    
    def _rate_limit(self) -> None:
        """Enforce a minimum interval between requests."""
        if self.rate_limit <= 0:
            return
        
        current_time = time.time()
        time_since_last = current_time - self.last_request_time
        min_interval = 1.0 / self.rate_limit
        
        if time_since_last < min_interval:
            time.sleep(min_interval - time_since_last)
        
        self.last_request_time = time.time()
    
    def fetch(self, accession: str) -> str:
        """Fetch the FASTA text of one accession.
        
        Args:
            accession: GenBank accession number
            
        Returns:
            Raw FASTA text, or an empty string if the request failed
        """
        self._rate_limit()
        
        try:
            with Entrez.efetch(
                db=self.config.database,
                id=accession,
                rettype=self.config.rettype,
                retmode="text"
            ) as handle:
                fasta = handle.read()
        except Exception as e:
            logger.error(f"Failed to fetch {accession}: {e}")
            return ""
        
        if isinstance(fasta, bytes):
            fasta = fasta.decode('utf-8', errors='replace')
        return fasta
    
    __call__ = fetch
