"""Tests for the parse confirmation gate."""

from unittest.mock import Mock

import click
import pytest
from click.testing import CliRunner

from acc2fasta.confirmation import (
    CSV_REJECTION, QUESTION, ParseConfirmation, list_rejection, prompt_yes_no
)
from acc2fasta.errors import UserRejectedParsing
from acc2fasta.list_filter import ListFilter
from acc2fasta.models import IdentifierGroup
from acc2fasta.input_parser import AccessionExtractor


class TestParseConfirmation:
    """Test cases for ParseConfirmation."""
    
    @pytest.fixture
    def groups(self):
        return {
            "seq2B": IdentifierGroup("seq2B", ["X12345"]),
            "seq1A": IdentifierGroup("seq1A", ["AB123456", "AB654321"])
        }
    
    def test_render_sorted_by_identifier(self, groups):
        """Test identifiers are listed lexicographically."""
        lines = [click.unstyle(line) for line in ParseConfirmation(Mock()).render(groups)]
        
        assert lines == [
            "[ OUTPUT ] - seq1A\t =>\t[ AB123456 AB654321 ]",
            "[ OUTPUT ] - seq2B\t =>\t[ X12345 ]"
        ]
    
    def test_render_marks_selection(self):
        """Test selected accessions are bold and deselected ones dimmed."""
        parsed = AccessionExtractor().parse_csv_lines(['"id1","AB100001"', '"id2","AB100002"'])
        filtered = ListFilter({"id1"}).apply(parsed)
        
        lines = ParseConfirmation(Mock()).render(filtered.groups, filtered.records)
        
        assert click.style("AB100001", bold=True) in lines[0]
        assert click.style("AB100002", dim=True) in lines[1]
    
    def test_review_accepted(self, groups):
        confirm = Mock(return_value=True)
        
        ParseConfirmation(confirm).review(groups)
        
        confirm.assert_called_once_with(QUESTION)
    
    def test_review_rejected(self, groups):
        """Test answering no aborts with the stage hint."""
        gate = ParseConfirmation(Mock(return_value=False))
        
        with pytest.raises(UserRejectedParsing) as exc_info:
            gate.review(groups)
        
        assert str(exc_info.value) == CSV_REJECTION
    
    def test_review_rejected_list_stage(self, groups):
        gate = ParseConfirmation(Mock(return_value=False))
        
        with pytest.raises(UserRejectedParsing, match="list.txt"):
            gate.review(groups, rejection=list_rejection("list.txt"))
    
    def test_default_callback_is_prompt(self):
        assert ParseConfirmation().confirm is prompt_yes_no


class TestPromptYesNo:
    """Test cases for the interactive prompt."""
    
    @pytest.fixture
    def ask(self):
        """Command wrapping the prompt so CliRunner can feed input."""
        @click.command()
        def command():
            click.echo(f"answer={prompt_yes_no(QUESTION)}")
        return command
    
    @pytest.mark.parametrize("typed, expected", [
        ("y", True),
        ("Y", True),
        ("n", False),
        ("N", False),
    ])
    def test_answers(self, ask, typed, expected):
        result = CliRunner().invoke(ask, input=f"{typed}\n")
        
        assert f"answer={expected}" in result.output
    
    def test_reprompts_on_other_input(self, ask):
        """Test anything but y/n asks again."""
        result = CliRunner().invoke(ask, input="maybe\nyes\nn\n")
        
        assert result.output.count("[QUESTION] - Are you happy") == 3
        assert "answer=False" in result.output
