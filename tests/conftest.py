"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest

from tests.fixtures.synthetic_data import build_sample_book


@pytest.fixture
def book():
    """Synthetic book with currencies, securities, accounts and prices."""
    return build_sample_book()


@pytest.fixture
def usd(book):
    """US dollar commodity of the sample book."""
    return book.commodity_table.lookup("CURRENCY", "USD")


@pytest.fixture
def eur(book):
    """Euro commodity of the sample book."""
    return book.commodity_table.lookup("CURRENCY", "EUR")


@pytest.fixture
def gbp(book):
    """Pound sterling commodity of the sample book."""
    return book.commodity_table.lookup("CURRENCY", "GBP")


@pytest.fixture
def monetary_test_cases():
    """Test cases for monetary parsing: (input, currency format, expected)."""
    return [
        ("$45.99", 1, "45.99"),
        ("1,234.56", 1, "1234.56"),
        ("1.234,56", 2, "1234.56"),
        ("-12,50 €", 2, "-12.5"),
        ("(3.00)", 1, "-3"),
        ("", 1, "0"),
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("TXIMPORT_ENV", "test")
    monkeypatch.setenv("TXIMPORT_DATE_FORMAT", "0")
    monkeypatch.setenv("TXIMPORT_CURRENCY_FORMAT", "1")
    monkeypatch.setenv("TXIMPORT_MULTI_SPLIT", "false")
    monkeypatch.setenv("TXIMPORT_BASE_CURRENCY", "USD")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    from tximport.core.config import reload_config

    reload_config()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for monetary parsing and precision"
    )
    config.addinivalue_line(
        "markers", "prices: Tests for price lookup and value conversion"
    )
