"""Command-line interface for acc2fasta."""

import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .cli_utils import echo, set_quiet_mode, validate_args
from .config import Config, get_default_config_path, create_example_config
from .confirmation import ConfirmCallback, ParseConfirmation, always_yes, list_rejection
from .errors import Acc2FastaError, MissingFileError
from .fetch_orchestrator import FetchFunction, FetchOrchestrator, fasta_output_path
from .incidence_log import incidence_log_path, write_incidence_log
from .input_parser import AccessionExtractor, detect_file_type
from .list_filter import ListFilter
from .logging_config import get_logger, setup_logging
from .sequence_fetcher import EntrezFetcher

logger = get_logger('cli')

CONTEXT_SETTINGS = {'help_option_names': ['-help', '--help', '-h']}

# Flags accepted among leftover command line tokens
PARAMETERS = [
    '-query', '-desc', '-full_desc', '-whitespaces', '-list', '-help', '-man'
]

BANNER = f"""
\t\t####################################################
\t\t###                                              ###
\t\t###           acc2fasta Version {__version__:<17}###
\t\t###      (more under acc2fasta -help -man)       ###
\t\t###                                              ###
\t\t####################################################
"""

MANUAL = """\
NAME
    acc2fasta - convert a bunch of accession numbers into a bunch of sequences

SYNOPSIS
    acc2fasta -query <acc_file> [-list <list_file>] [-desc <num>]
              [-full_desc] [-whitespaces]

DESCRIPTION
    acc2fasta takes a file of accession numbers, either in CSV (FileMaker
    export) or TXT (one accession per line), and fetches the respective
    sequences from the NCBI nucleotide database with cleaned headers.

    If the query is a CSV file, a filter can be applied by providing a list
    of sequence identifiers: only accessions of listed identifiers are
    fetched. Parsed CSV groupings are shown for confirmation before any file
    is written.

OPTIONS
    -query        CSV or TXT file of accession numbers.
    -list         List of identifiers (e.g. 'seq1A') in TXT format that
                  limits the ACC fetched from a CSV query.
    -desc         Maximum length (e.g. '50') of sequence descriptions
                  (headers) in the output fasta file.
    -full_desc    Write full sequence descriptions (overrides -desc).
    -whitespaces  Words in sequence descriptions are separated by spaces
                  (default is underscore '_').

OUTPUT
    <query>.fas (or <query>_list.fas when a list was used) and <query>.log
    listing every parsed ACC with its number of occurrences (0 or 1 when
    a list was used).
"""


def print_manual(ctx, param, value):
    """Print the full manual and exit."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(MANUAL)
    ctx.exit()


def run_pipeline(query_file: str,
                 list_file: Optional[str],
                 cfg: Config,
                 confirm: Optional[ConfirmCallback] = None,
                 fetch: Optional[FetchFunction] = None) -> int:
    """
    Parse, confirm, log and fetch.

    Args:
        query_file: CSV or TXT file of accession numbers
        list_file: Optional TXT list of identifiers restricting a CSV query
        cfg: Run configuration
        confirm: Answers the confirmation prompts (interactive by default)
        fetch: Returns the FASTA text of an accession (Entrez by default)

    Returns:
        Number of FASTA records written
    """
    detect_file_type(query_file)
    if list_file and not Path(list_file).exists():
        raise MissingFileError(list_file)

    extractor = AccessionExtractor()
    logger.info(f"Opening {query_file}")
    result = extractor.parse_file(query_file)

    filtered = False
    if result.file_type == 'CSV':
        gate = ParseConfirmation(confirm)
        gate.review(result.groups)

        if list_file:
            result = ListFilter.from_file(list_file, extractor).apply(result)
            gate.review(result.groups, result.records, rejection=list_rejection(list_file))
            filtered = True
    elif list_file:
        logger.warning(f"{list_file} ignored, lists only apply to CSV queries")

    write_incidence_log(result.records, incidence_log_path(query_file))

    orchestrator = FetchOrchestrator(fetch or EntrezFetcher(cfg.entrez), cfg.header)
    written = orchestrator.run(result.fetchable(), fasta_output_path(query_file, filtered))

    logger.info("Done")
    return written


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument('extra_args', nargs=-1, type=click.UNPROCESSED)
@click.option('-query', '--query', '-q', 'query_file', type=click.Path(dir_okay=False), help='CSV or TXT file of accession numbers')
@click.option('-list', '--list', '-l', 'list_file', type=click.Path(dir_okay=False), help='TXT list of identifiers limiting the ACC fetched from a CSV query')
@click.option('-desc', '--desc', '-d', 'desc', type=click.IntRange(min=0), help='Maximum length of sequence descriptions [default: 50]')
@click.option('-full_desc', '--full_desc', '-f', 'full_desc', is_flag=True, help='Write full sequence descriptions (overrides -desc)')
@click.option('-whitespaces', '--whitespaces', '-w', 'whitespaces', is_flag=True, help="Separate words in descriptions by spaces instead of '_'")
@click.option('-yes', '--yes', '-y', 'assume_yes', is_flag=True, help='Accept parsing results without asking')
@click.option('-email', '--email', 'email', envvar='EMAIL', help='Email for NCBI')
@click.option('-api_key', '--api_key', 'api_key', envvar='NCBI_API_KEY', help='NCBI API key for increased rate limits')
@click.option('-config', '--config', 'config', type=click.Path(exists=True), help='Configuration file path')
@click.option('-generate_config', '--generate_config', 'generate_config', is_flag=True, help='Generate example configuration file')
@click.option('-verbose', '--verbose', '-v', 'verbose', is_flag=True, help='Enable verbose logging')
@click.option('-quiet', '--quiet', 'quiet', is_flag=True, help='Suppress all output except errors')
@click.option('-man', '--man', is_flag=True, expose_value=False, is_eager=True, callback=print_manual, help='Show the full manual')
def main(extra_args, query_file, list_file, desc, full_desc, whitespaces, assume_yes, email, api_key, config, generate_config, verbose, quiet):
    """Fetch sequences for a CSV or TXT file of accession numbers from NCBI.

    Examples:
        acc2fasta -query accessions.txt
        acc2fasta -query export.csv -list identifiers.txt -desc 30
    """
    if quiet and verbose:
        click.echo("Error: Cannot use both -quiet and -verbose", err=True)
        sys.exit(1)

    setup_logging(log_level='DEBUG' if verbose else 'INFO', quiet=quiet)
    set_quiet_mode(quiet)

    if generate_config:
        config_path = create_example_config()
        echo(f"Generated example configuration file: {config_path}")
        sys.exit(0)

    validate_args(extra_args, PARAMETERS)
    if not query_file:
        raise click.UsageError("Missing option '-query'.")

    # Load configuration
    if config:
        config_path = Path(config)
    else:
        config_path = get_default_config_path()

    cfg = Config.from_file(config_path)
    cfg.merge_env_vars()
    cfg.merge_cli_args(
        api_key=api_key,
        email=email,
        desc=desc,
        full_desc=full_desc,
        whitespaces=whitespaces
    )

    echo(BANNER)

    try:
        run_pipeline(
            query_file,
            list_file,
            cfg,
            confirm=always_yes if assume_yes else None
        )
    except Acc2FastaError as e:
        echo(f"[ERROR] - {e}", err=True)
        sys.exit(e.exit_code)


if __name__ == '__main__':
    main()
