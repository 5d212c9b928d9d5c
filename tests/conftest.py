import pytest
from pathlib import Path

from domstub.common import CliRenderer, bus
from domstub.test_utils import SpyBus, WorkspaceFactory


@pytest.fixture
def workspace_factory(tmp_path: Path) -> WorkspaceFactory:
    """Provides a factory to create isolated test workspaces."""
    return WorkspaceFactory(tmp_path)


@pytest.fixture
def spy_bus() -> SpyBus:
    """Provides a SpyBus instance to intercept and inspect bus messages."""
    return SpyBus()


@pytest.fixture(autouse=True)
def reset_bus_renderer():
    # The CLI callback swaps the global renderer; restore the default.
    yield
    bus.set_renderer(CliRenderer())
