import pytest
from channels.layers import channel_layers


@pytest.fixture(autouse=True)
def fresh_channel_layers():
    """Drop cached channel layers so no test inherits another test's groups or event loop."""
    channel_layers.backends.clear()
    yield
    channel_layers.backends.clear()
