"""Test basic imports and setup."""

def test_import():
    """Test that the package can be imported."""
    import acc2fasta
    assert acc2fasta.__version__ == "0.1.0"


def test_dependencies():
    """Test that core dependencies are available."""
    import click
    import Bio
    
    # Basic smoke test
    assert click.__version__
    assert Bio.__version__
