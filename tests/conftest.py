"""Pytest configuration and shared fixtures for the json_md_bridge test suite."""

import os

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Round-trip tests exercising encoder and decoder together")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def sample_record() -> dict:
    """Provide a small nested record used across encoder and decoder tests."""
    return {
        "title": "My Document",
        "author": {"name": "John Doe", "email": "john@example.com"},
        "tags": ["python", "markdown", "json"],
        "published": True,
        "revision": 3,
    }


@pytest.fixture
def sample_markdown() -> str:
    """Provide the Markdown rendering of ``sample_record`` with default options."""
    return (
        "- **title**: My Document\n"
        "- **author**:\n"
        "  - **name**: John Doe\n"
        "  - **email**: john@example.com\n"
        "- **tags**:\n"
        "  - python\n"
        "  - markdown\n"
        "  - json\n"
        "- **published**: true\n"
        "- **revision**: 3"
    )


@pytest.fixture
def user_records() -> list:
    """Provide a uniform array of objects suitable for table rendering."""
    return [{"name": "John", "age": 30}, {"name": "Jane", "age": 25}]
