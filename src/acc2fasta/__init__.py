"""acc2fasta - accession numbers to FASTA.

Fetches nucleotide sequences for a list of GenBank accession numbers from
NCBI and writes them to a FASTA file with sanitised headers.
"""

__version__ = "0.1.0"
__author__ = "Dominik R. Laetsch"
