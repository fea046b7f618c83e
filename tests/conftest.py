import pytest

from design_patterns.core.patterns.singleton import Singleton


@pytest.fixture(autouse=True)
def reset_singletons():
    """Every test starts without singleton instances."""
    Singleton.clear_instances()
    yield
    Singleton.clear_instances()


@pytest.fixture
def lines():
    """Collects emitted output lines."""
    return []
