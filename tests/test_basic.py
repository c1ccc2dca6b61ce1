"""Basic tests to verify the package is importable and functional."""

import blockdata


def test_version():
    """Test that version is defined."""
    assert blockdata.__version__ == "0.1.0"


def test_exports():
    """Test that main exports are available."""
    assert hasattr(blockdata, "ContentParser")
    assert hasattr(blockdata, "BlockTypeRegistry")
    assert hasattr(blockdata, "DomQuery")
    assert hasattr(blockdata, "BlockHooks")
    assert hasattr(blockdata, "ParseResult")
