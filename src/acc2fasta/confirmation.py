"""Interactive review of parsing results before anything is written."""

from typing import Callable, Dict, List, Optional

import click

from .cli_utils import echo
from .errors import UserRejectedParsing
from .logging_config import get_logger
from .models import AccessionRecord, IdentifierGroup

logger = get_logger('confirmation')

QUESTION = "Are you happy with the parsing results?"

CSV_REJECTION = "Please change the sequence identifiers, they look too much like ACC numbers."

ConfirmCallback = Callable[[str], bool]


def prompt_yes_no(question: str) -> bool:
    """Ask until the user answers y or n (case-insensitive)."""
    answer = click.prompt(
        f"[QUESTION] - {question} [y,n]",
        type=click.Choice(['y', 'n'], case_sensitive=False),
        show_choices=False
    )
    return answer.lower() == 'y'


def always_yes(question: str) -> bool:
    return True


def list_rejection(list_file: str) -> str:
    return (
        f"Please take a look at {list_file}. Usual problems involve the end "
        "of the lines (spaces, newline-characters)"
    )


class ParseConfirmation:
    """Shows identifier to accession groupings and asks for approval."""

    def __init__(self, confirm: Optional[ConfirmCallback] = None):
        """
        Initialize the confirmation gate.

        Args:
            confirm: Callback receiving the question and returning True for
                "yes". Defaults to an interactive terminal prompt.
        """
        self.confirm = confirm or prompt_yes_no

    def render(self, groups: Dict[str, IdentifierGroup],
               records: Optional[Dict[str, AccessionRecord]] = None) -> List[str]:
        """
        Format one line per identifier, sorted by identifier.

        When ``records`` is given (after a list filter), selected accessions
        are shown in bold and deselected ones dimmed.
        """
        lines = []
        for identifier in sorted(groups):
            accessions = []
            for acc in groups[identifier].accessions:
                if records is None:
                    accessions.append(acc)
                elif records[acc].selected:
                    accessions.append(click.style(acc, bold=True))
                else:
                    accessions.append(click.style(acc, dim=True))

            lines.append(
                f"[ OUTPUT ] - {click.style(identifier, bold=True)}\t =>\t"
                f"[ {' '.join(accessions)} ]"
            )
        return lines

    def review(self, groups: Dict[str, IdentifierGroup],
               records: Optional[Dict[str, AccessionRecord]] = None,
               rejection: str = CSV_REJECTION) -> None:
        """
        Display the groupings and block until the user confirms them.

        Raises:
            UserRejectedParsing: If the user answers "n"
        """
        if records is None:
            logger.info("Printing identifiers and respective ACC numbers.")
        else:
            logger.info("Printing identifiers and whether they will be fetched.")

        for line in self.render(groups, records):
            echo(line)

        if not self.confirm(QUESTION):
            raise UserRejectedParsing(rejection)
