"""Shared test fixtures."""

from pathlib import Path

import pytest

from pydgen.datafile import load_data

FIXTURES = Path(__file__).parent / "fixtures"

MD_PROPS = ["description", "summary", "details"]


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture
def md_props():
    return list(MD_PROPS)


@pytest.fixture
def customers_service():
    return load_data([FIXTURES / "services" / "customers" / "service.yml"])


@pytest.fixture
def upper_renderer():
    """Deterministic renderer that records every value it receives."""

    calls = []

    def render(text):
        calls.append(text)
        return f"<{str(text).upper()}>"

    render.calls = calls
    return render
