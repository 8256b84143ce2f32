"""Shared pytest fixtures for payme tests."""

import pytest

from payme.domain.link_builder import LinkBuilder

SAMPLE_IBAN = "SK1234567890123456789012"


@pytest.fixture
def sample_iban():
    """Return an IBAN that matches the PayMe format."""
    return SAMPLE_IBAN


@pytest.fixture
def builder():
    """Create a validating builder with the mandatory fields set."""
    return LinkBuilder(SAMPLE_IBAN, "25", "EUR", 1, True)


@pytest.fixture
def lenient_builder():
    """Create a builder with validation disabled."""
    return LinkBuilder(SAMPLE_IBAN, "25", "EUR", 1, validate=False)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
