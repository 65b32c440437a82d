"""
Shared fixtures for Stratus tests.
"""

import pytest

from stratus import Stack
from stratus.config import CustomResourceProviderConfig, CustomResourceProviderRuntime


@pytest.fixture
def stack():
    """An in-memory stack."""
    return Stack("test-stack")


@pytest.fixture
def handler_dir(tmp_path):
    """A Node.js handler directory containing index.js."""
    directory = tmp_path / "handler"
    directory.mkdir()
    (directory / "index.js").write_text("exports.handler = async () => ({});\n")
    return directory


@pytest.fixture
def python_handler_dir(tmp_path):
    """A Python handler directory containing index.py."""
    directory = tmp_path / "py-handler"
    directory.mkdir()
    (directory / "index.py").write_text("def handler(event, context):\n    return {}\n")
    return directory


@pytest.fixture
def config(handler_dir):
    """Minimal provider configuration."""
    return CustomResourceProviderConfig(
        code_directory=handler_dir,
        runtime=CustomResourceProviderRuntime.NODEJS_14_X,
    )
