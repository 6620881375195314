"""Tests for FASTA header cleaning."""

import pytest

from acc2fasta.config import HeaderConfig
from acc2fasta.header_sanitizer import PUNCTUATION, clean_description, sanitize_record

GI_HEADER = ">gi|123456|gb|AB123456.1| Homo sapiens mRNA for protein (gene=ABC), partial; cds: 1"

RECORD = GI_HEADER + "\nATGCATGCAT\nGGCCAATT\n"


class TestCleanDescription:
    """Test cases for clean_description."""
    
    def test_default_cleaning(self):
        text = clean_description(GI_HEADER, HeaderConfig(full_header=True))
        
        assert text == "Homo_sapiens_mRNA_for_protein_geneABC_partial_cds_1"
    
    def test_punctuation_removed(self):
        text = clean_description("a|b|c|d|x,y.z;w:v=u(t)s", HeaderConfig())
        
        assert text == "xyzwvuts"
    
    def test_punctuation_removal_idempotent(self):
        once = PUNCTUATION.sub('', "a,b.(c);d:e=f")
        
        assert PUNCTUATION.sub('', once) == once
        assert not PUNCTUATION.search(once)
    
    def test_whitespace_runs_collapse(self):
        text = clean_description("a|b|c|d|  one   two\tthree", HeaderConfig())
        
        assert text == "one_two_three"
    
    def test_whitespaces_mode_keeps_spaces(self):
        text = clean_description(GI_HEADER, HeaderConfig(full_header=True, whitespaces=True))
        
        assert text == "Homo sapiens mRNA for protein geneABC partial cds 1"
    
    def test_truncation_boundary(self):
        """Test 51 characters are cut to 50 and 50 stay untouched."""
        config = HeaderConfig(max_length=50)
        
        assert clean_description("a|b|c|d|" + "x" * 51, config) == "x" * 50
        assert clean_description("a|b|c|d|" + "x" * 50, config) == "x" * 50
    
    def test_full_header_bypasses_truncation(self):
        config = HeaderConfig(max_length=5, full_header=True)
        
        assert clean_description("a|b|c|d|" + "x" * 200, config) == "x" * 200
    
    def test_truncation_is_plain_prefix(self):
        text = clean_description("a|b|c|d|Homo sapiens", HeaderConfig(max_length=7))
        
        assert text == "Homo_sa"
    
    @pytest.mark.parametrize("header", [
        ">NM_000546.6 Homo sapiens tumor protein p53",
        ">gi|123|gb|AB123456.1|",
        "",
    ])
    def test_short_headers_collapse_to_empty(self, header):
        assert clean_description(header, HeaderConfig()) == ""
    
    def test_remaining_pipes_are_joined(self):
        assert clean_description("a|b|c|d|one|two", HeaderConfig()) == "onetwo"


class TestSanitizeRecord:
    """Test cases for sanitize_record."""
    
    def test_default_record(self):
        sanitized = sanitize_record(RECORD, "AB123456", HeaderConfig())
        
        assert sanitized.header_line == ">AB123456_Homo_sapiens_mRNA_for_protein_geneABC_partial_cds_"
        assert sanitized.sequence_lines == ["ATGCATGCAT", "GGCCAATT"]
    
    def test_whitespace_separator(self):
        sanitized = sanitize_record(RECORD, "AB123456", HeaderConfig(whitespaces=True, max_length=12))
        
        assert sanitized.header_line == ">AB123456 Homo sapiens"
    
    def test_to_fasta(self):
        sanitized = sanitize_record(RECORD, "AB123456", HeaderConfig(max_length=4))
        
        assert sanitized.to_fasta() == ">AB123456_Homo\nATGCATGCAT\nGGCCAATT\n"
    
    def test_empty_response(self):
        sanitized = sanitize_record("", "AB123456", HeaderConfig())
        
        assert sanitized.header_line == ">AB123456_"
        assert sanitized.sequence_lines == []
        assert sanitized.to_fasta() == ">AB123456_\n"
