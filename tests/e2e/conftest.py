"""Fixtures for tests that run a real node executable."""

import shutil

import pytest


def _assert_cli_installed(cli_name: str) -> None:
    """Assert that a CLI is installed; call pytest.fail() (not skip) if missing."""
    if shutil.which(cli_name) is None:
        pytest.fail(
            f"CLI '{cli_name}' not found in PATH. Install it before running these tests.",
            pytrace=False,
        )


@pytest.fixture(scope="session")
def require_node_cli():
    _assert_cli_installed("node")
