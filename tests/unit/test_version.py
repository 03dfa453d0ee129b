"""Test basic package functionality."""

import dnsimple
from dnsimple.transport import USER_AGENT


def test_version():
    """Test that package version is defined."""
    assert hasattr(dnsimple, "__version__")
    assert dnsimple.__version__ == "0.1.0"


def test_user_agent_carries_version():
    assert USER_AGENT == f"dnsimple-python/{dnsimple.__version__}"
