"""
Pytest configuration and common fixtures for csv_insights tests.
"""
import pytest

from csv_insights.loader import parse_text


@pytest.fixture
def expenses_csv():
    """Small spend table with an obvious large travel entry."""
    return "amount,category\n100,food\n200,food\n5000,travel\n90,food"


@pytest.fixture
def receipts_csv():
    """Expenses with a receipt flag column."""
    return (
        "date,amount,category,receipt\n"
        "2024-01-01,10,food,true\n"
        "2024-01-02,20,food,false\n"
        "2024-01-03,30,travel,0\n"
        "2024-01-04,40,travel,\n"
    )


@pytest.fixture
def spike_csv():
    """Nine flat amounts and one spike three standard deviations out."""
    lines = ["amount,type"] + ["10,office"] * 9 + ["1000,equipment"]
    return "\n".join(lines)


@pytest.fixture
def make_dataset():
    """Build a Dataset from CSV text."""
    def _make(text):
        return parse_text(text)
    return _make
