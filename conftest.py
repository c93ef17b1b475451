import pytest
from css_selector_builder import SelectorBuilder

@pytest.fixture
def builder():
    """Return a fresh SelectorBuilder."""
    return SelectorBuilder()
