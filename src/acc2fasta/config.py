"""Configuration management for acc2fasta."""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional


@dataclass
class EntrezConfig:
    """NCBI Entrez settings."""
    email: str = "user@example.com"
    api_key: Optional[str] = None
    database: str = "nucleotide"
    rettype: str = "fasta"
    rate_limit_per_second: float = 3.0  # NCBI default without API key


@dataclass
class HeaderConfig:
    """How fetched FASTA headers are cleaned."""
    max_length: int = 50
    full_header: bool = False
    whitespaces: bool = False
    
    @property
    def separator(self) -> str:
        """Separator between the accession and the description."""
        return " " if self.whitespaces else "_"


@dataclass
class Config:
    """Main configuration container."""
    entrez: EntrezConfig
    header: HeaderConfig
    
    @classmethod
    def default(cls) -> 'Config':
        """Create default configuration."""
        return cls(
            entrez=EntrezConfig(),
            header=HeaderConfig()
        )
    
    @classmethod
    def from_file(cls, path: Path) -> 'Config':
        """Load configuration from JSON file."""
        if not path.exists():
            return cls.default()
        
        with open(path, 'r') as f:
            data = json.load(f)
        
        return cls(
            entrez=EntrezConfig(**data.get('entrez', {})),
            header=HeaderConfig(**data.get('header', {}))
        )
    
    def to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        
        data = {
            'entrez': asdict(self.entrez),
            'header': asdict(self.header)
        }
        
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
    
    def merge_env_vars(self) -> None:
        """Merge environment variables into configuration."""
        if os.getenv('NCBI_API_KEY'):
            self.entrez.api_key = os.getenv('NCBI_API_KEY')
        if os.getenv('EMAIL'):
            self.entrez.email = os.getenv('EMAIL')
        if os.getenv('NCBI_RATE_LIMIT'):
            self.entrez.rate_limit_per_second = float(os.getenv('NCBI_RATE_LIMIT'))
    
    def merge_cli_args(self, **kwargs) -> None:
        """Merge CLI arguments into configuration."""
        # Entrez settings
        if kwargs.get('api_key'):
            self.entrez.api_key = kwargs['api_key']
        if kwargs.get('email'):
            self.entrez.email = kwargs['email']
        
        # Header settings
        if kwargs.get('desc') is not None:
            self.header.max_length = kwargs['desc']
        if kwargs.get('full_desc'):
            self.header.full_header = True
        if kwargs.get('whitespaces'):
            self.header.whitespaces = True


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    locations = [
        Path.home() / '.acc2fasta' / 'config.json',
        Path.home() / '.config' / 'acc2fasta' / 'config.json',
        Path('.acc2fasta.json')
    ]
    
    # Return first existing file
    for path in locations:
        if path.exists():
            return path
    
    return Path.home() / '.acc2fasta' / 'config.json'


def create_example_config(path: Optional[Path] = None) -> Path:
    """Create an example configuration file."""
    if path is None:
        path = Path('acc2fasta.config.example.json')
    
    config = Config.default()
    config.entrez.api_key = "your_api_key_here"
    config.entrez.email = "your_email@example.com"
    
    config.to_file(path)
    return path
