"""Cleaning of FASTA headers returned by NCBI."""

import re

from .config import HeaderConfig
from .models import SanitizedHeader

# gi|<number>|gb|<accession>| precede the description
DISCARDED_FIELDS = 4

PUNCTUATION = re.compile(r'[,.;:=()]')
WHITESPACE_RUN = re.compile(r'\s+')


def clean_description(header: str, config: HeaderConfig) -> str:
    """
    Turn a raw header line into a description suffix.

    Drops the first four '|'-separated fields, leading whitespace and the
    characters ``, . ; : = ( )``; joins words with underscores unless
    ``config.whitespaces`` and cuts the result to ``config.max_length``
    characters unless ``config.full_header``.
    """
    fields = header.split('|')
    text = ''.join(fields[DISCARDED_FIELDS:])

    text = text.lstrip()
    text = PUNCTUATION.sub('', text)

    if not config.whitespaces:
        text = WHITESPACE_RUN.sub('_', text)

    if not config.full_header:
        text = text[:config.max_length]

    return text


def sanitize_record(raw_text: str, accession: str, config: HeaderConfig) -> SanitizedHeader:
    """
    Clean the header of a fetched FASTA record.

    Args:
        raw_text: FASTA text as returned by efetch (header + sequence lines)
        accession: Accession the record was fetched with; prefixes the header
        config: Header cleaning options

    Returns:
        SanitizedHeader with the sequence lines untouched
    """
    lines = raw_text.split('\n')
    while lines and not lines[-1]:
        lines.pop()

    header = lines[0] if lines else ''

    return SanitizedHeader(
        prefix_accession=accession,
        cleaned_text=clean_description(header, config),
        sequence_lines=lines[1:],
        separator=config.separator
    )
