"""CLI utility functions and helpers."""

import re
from pathlib import Path
from typing import Iterable, Sequence

import click

# Global flag for quiet mode
_quiet_mode = False

INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')


def set_quiet_mode(quiet: bool) -> None:
    """Set the global quiet mode flag."""
    global _quiet_mode
    _quiet_mode = quiet


def echo(message: str = "", err: bool = False, **kwargs) -> None:
    """Echo wrapper that respects quiet mode."""
    if _quiet_mode and not err:
        return
    click.echo(message, err=err, **kwargs)


def validate_args(arguments: Iterable[str], parameters: Sequence[str]) -> None:
    """
    Check leftover command line tokens.
    
    Each token must be a known flag, a bare integer or an existing file.
    
    Raises:
        click.UsageError: On the first token that is none of these
    """
    known = {parameter.lower() for parameter in parameters}
    
    for argument in arguments:
        if INTEGER_PATTERN.match(argument):
            continue
        if argument.startswith('-'):
            if argument.lower() in known:
                continue
        elif Path(argument).exists():
            continue
        raise click.UsageError(f"Unrecognised argument: {argument}")
