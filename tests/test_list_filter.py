"""Tests for list filtering of CSV accessions."""

import pytest

from acc2fasta.input_parser import AccessionExtractor
from acc2fasta.list_filter import ListFilter


class TestListFilter:
    """Test cases for ListFilter."""
    
    @pytest.fixture
    def parsed(self):
        """CSV result with id1: [A1, A2] and id2: [A3]."""
        return AccessionExtractor().parse_csv_lines([
            '"id1","AB100001","AB100002"',
            '"id2","AB100003"'
        ])
    
    def test_selection_weights(self, parsed):
        """Test only accessions of listed identifiers keep a weight."""
        result = ListFilter({"id1"}).apply(parsed)
        
        weights = {acc: record.weight for acc, record in result.records.items()}
        assert weights == {"AB100001": 1, "AB100002": 1, "AB100003": 0}
        assert [r.accession for r in result.fetchable()] == ["AB100001", "AB100002"]
    
    def test_counts_become_selection_weights(self):
        """Test counts are replaced by 1 for listed and 0 for unlisted accessions."""
        parsed = AccessionExtractor().parse_csv_lines([
            '"id1","AB100001","AB100001"',
            '"id2","AB100003","AB100003","AB100003"'
        ])
        
        result = ListFilter({"id1"}).apply(parsed)
        
        assert parsed.counts() == {"AB100001": 2, "AB100003": 3}
        assert result.counts() == {"AB100001": 1, "AB100003": 0}
    
    def test_input_left_untouched(self, parsed):
        ListFilter(set()).apply(parsed)
        
        assert all(record.selected for record in parsed.records.values())
    
    def test_shared_accession_selected_through_any_identifier(self):
        parsed = AccessionExtractor().parse_csv_lines([
            '"id1","AB100001"',
            '"id2","AB100001","AB100002"'
        ])
        
        result = ListFilter({"id1"}).apply(parsed)
        
        assert result.records["AB100001"].selected is True
        assert result.records["AB100002"].selected is False
    
    def test_empty_list_selects_nothing(self, parsed):
        result = ListFilter([]).apply(parsed)
        
        assert result.fetchable() == []
    
    def test_from_file(self, parsed, tmp_path):
        """Test identifiers with trailing spaces in the list still match."""
        list_file = tmp_path / "list.txt"
        list_file.write_text("id2   \r\n")
        
        result = ListFilter.from_file(list_file).apply(parsed)
        
        assert [r.accession for r in result.fetchable()] == ["AB100003"]
